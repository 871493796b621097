from datetime import datetime
from travel_admin.models.role import UserType
from travel_admin.schemas.common import CamelModel


class UserResponse(CamelModel):
    """Authenticated user's stored profile"""

    id: str
    auth_user_id: str
    email: str | None
    name: str | None
    user_type: UserType
    business_id: str | None
    created_at: datetime
    updated_at: datetime


class CurrentUserEnvelope(CamelModel):
    """Profile plus the tenant scope requests from this user run under"""

    success: bool = True
    user: UserResponse
    business_id: str | None
    unrestricted: bool
