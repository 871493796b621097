"""Authenticated actor for request authorization."""

from dataclasses import dataclass
from travel_admin.config import settings
from travel_admin.models.role import UserType


@dataclass(frozen=True)
class Actor:
    """
    Identity and tenancy details of the caller, built from JWT claims.

    Attributes:
        user_id: The actor's own identifier ('sub' claim)
        user_type: Role issued by the auth service
        business_id: Top-level tenant field ('businessId' claim)
        business_profile_id: Nested business profile id ('businessInfo.businessId')
        email: Optional e-mail claim
        name: Optional display name claim
    """

    user_id: str | None
    user_type: UserType = UserType.BUSINESS_USER
    business_id: str | None = None
    business_profile_id: str | None = None
    email: str | None = None
    name: str | None = None

    @classmethod
    def from_claims(cls, payload: dict) -> "Actor":
        business_info = payload.get("businessInfo") or {}
        if not isinstance(business_info, dict):
            business_info = {}
        try:
            user_type = UserType(payload.get("userType") or UserType.BUSINESS_USER.value)
        except ValueError:
            # Unknown roles never get elevated access
            user_type = UserType.BUSINESS_USER
        return cls(
            user_id=_as_id(payload.get("sub")),
            user_type=user_type,
            business_id=_as_id(payload.get("businessId")),
            business_profile_id=_as_id(business_info.get("businessId")),
            email=payload.get("email"),
            name=payload.get("name"),
        )

    def is_elevated(self) -> bool:
        """Check if the actor is exempt from tenant scoping."""
        return self.user_type.value == settings.ELEVATED_USER_TYPE

    def __repr__(self) -> str:
        return f"<Actor(user_id={self.user_id}, user_type={self.user_type.value})>"


def _as_id(value) -> str | None:
    if value is None or value == "":
        return None
    return str(value)
