from sqlalchemy import String, Enum
from sqlalchemy.orm import Mapped, mapped_column
from travel_admin.models.base import Base, RecordIdMixin, TimestampMixin
from travel_admin.models.role import UserType


class User(Base, RecordIdMixin, TimestampMixin):
    """
    Tracks users authenticated by the external auth service.

    Only stores identity and tenancy details mirrored from JWT claims - no
    credentials. Auto-created on first API request with a valid JWT.
    """

    __tablename__ = "users"

    auth_user_id: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    # auth_user_id is the 'sub' claim from the JWT
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    user_type: Mapped[UserType] = mapped_column(
        Enum(UserType, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
        default=UserType.BUSINESS_USER,
    )
    business_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, auth_user_id='{self.auth_user_id}', user_type={self.user_type.value})>"
