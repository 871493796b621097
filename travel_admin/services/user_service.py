from sqlalchemy.orm import Session
from travel_admin.core.exceptions import UnauthorizedException
from travel_admin.core.tenancy import resolve_scope
from travel_admin.models.actor import Actor
from travel_admin.repositories.user_repository import UserRepository


class UserService:
    """Service for the authenticated user's own profile"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository(db)

    def get_profile(self, actor: Actor) -> dict:
        """
        Return the stored user together with the scope their requests run under.

        Raises:
            UnauthorizedException: If no tenant can be resolved for a non-elevated actor
        """
        user = self.repo.get_by_auth_id(actor.user_id)
        if user is None:
            raise UnauthorizedException("Unauthorized user")
        scope = resolve_scope(actor)
        return {
            "success": True,
            "user": user,
            "business_id": scope.business_id,
            "unrestricted": scope.unrestricted,
        }
