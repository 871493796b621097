"""Typed query filter for tenant-scoped, soft-deletable records."""

import uuid
from dataclasses import dataclass

from sqlalchemy import or_
from sqlalchemy.orm import Query

from travel_admin.core.tenancy import TenantScope


def is_valid_record_id(value: str | None) -> bool:
    """Check that value is a well-formed record reference (UUID string)."""
    if not value:
        return False
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class RecordFilter:
    """
    Predicate combining tenant scope, soft-delete state and record identity.

    deleted:
        True  -> only soft-deleted records
        False -> only active records (flag false or unset)
        None  -> either state
    """

    scope: TenantScope
    record_id: str | None = None
    deleted: bool | None = False
    owner_id: str | None = None

    @classmethod
    def for_listing(
        cls, scope: TenantScope, deleted: bool | None = None, owner_id: str | None = None
    ) -> "RecordFilter":
        """Listing filter; an omitted deleted flag means active records only"""
        return cls(scope=scope, deleted=bool(deleted), owner_id=owner_id or None)

    @classmethod
    def active(cls, scope: TenantScope, record_id: str) -> "RecordFilter":
        return cls(scope=scope, record_id=record_id, deleted=False)

    @classmethod
    def any_state(cls, scope: TenantScope, record_id: str) -> "RecordFilter":
        return cls(scope=scope, record_id=record_id, deleted=None)

    def apply(self, query: Query, model) -> Query:
        """Constrain query on model (must define business_id and is_deleted)"""
        if not self.scope.unrestricted:
            query = query.filter(model.business_id == self.scope.business_id)

        if self.record_id is not None:
            query = query.filter(model.id == self.record_id)

        if self.deleted is True:
            query = query.filter(model.is_deleted.is_(True))
        elif self.deleted is False:
            query = query.filter(or_(model.is_deleted.is_(False), model.is_deleted.is_(None)))

        if self.owner_id is not None:
            query = query.filter(model.owner_id == self.owner_id)

        return query
