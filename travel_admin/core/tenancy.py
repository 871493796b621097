"""
Tenant resolution and the authorization policy shared by every scoped operation.
"""

import logging
from dataclasses import dataclass

from travel_admin.core.exceptions import UnauthorizedException
from travel_admin.models.actor import Actor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TenantScope:
    """
    Scoping decision for a request.

    unrestricted=True means the query spans all tenants and business_id is None.
    Otherwise business_id is always set.
    """

    unrestricted: bool
    business_id: str | None = None

    @classmethod
    def all_tenants(cls) -> "TenantScope":
        return cls(unrestricted=True)

    @classmethod
    def tenant(cls, business_id: str) -> "TenantScope":
        return cls(unrestricted=False, business_id=business_id)


def resolve_tenant_id(actor: Actor) -> str:
    """
    Resolve the tenant the actor works in.

    Order: nested business profile id, then top-level businessId, then the
    actor's own id.

    Raises:
        UnauthorizedException: If none of them is present
    """
    business_id = actor.business_profile_id or actor.business_id or actor.user_id
    if not business_id:
        logger.warning("No tenant context for %r", actor)
        raise UnauthorizedException("Unauthorized user")
    return business_id


def resolve_scope(actor: Actor) -> TenantScope:
    """Elevated actors are unrestricted; everyone else is bound to their tenant."""
    if actor.is_elevated():
        return TenantScope.all_tenants()
    return TenantScope.tenant(resolve_tenant_id(actor))
