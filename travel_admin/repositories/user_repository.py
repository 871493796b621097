from sqlalchemy.orm import Session
from travel_admin.models.actor import Actor
from travel_admin.models.user import User


class UserRepository:
    """Repository for User model operations"""

    def __init__(self, db: Session):
        self.db = db

    def sync_from_actor(self, actor: Actor) -> User:
        """
        Get user by auth_user_id or create if it doesn't exist.

        Called on every authenticated request. Role, tenant and profile
        fields mirror the token claims; the row is only written when it is
        new or one of those fields changed, so read requests stay read-only.

        Args:
            actor: Actor built from a validated JWT

        Returns:
            User object (either existing or newly created)
        """
        user = self.get_by_auth_id(actor.user_id)
        created = user is None
        if created:
            user = User(auth_user_id=actor.user_id)
            self.db.add(user)

        claims = {
            "user_type": actor.user_type,
            "business_id": actor.business_profile_id or actor.business_id,
        }
        if actor.email:
            claims["email"] = actor.email
        if actor.name:
            claims["name"] = actor.name

        changed = {field: value for field, value in claims.items() if getattr(user, field) != value}
        if not created and not changed:
            return user

        for field, value in changed.items():
            setattr(user, field, value)
        self.db.commit()
        self.db.refresh(user)
        return user

    def get_by_auth_id(self, auth_user_id: str) -> User | None:
        """Get user by auth_user_id"""
        return self.db.query(User).filter(User.auth_user_id == auth_user_id).first()
