from datetime import date
from sqlalchemy import String, Boolean, Date, Index
from sqlalchemy.orm import Mapped, mapped_column, validates
from travel_admin.models.base import Base, RecordIdMixin, TimestampMixin


class Traveller(Base, RecordIdMixin, TimestampMixin):
    """
    People travelling on bookings made by a business.

    owner_id optionally references the team member or customer who owns
    the traveller. It is an opaque reference, not a foreign key.
    """

    __tablename__ = "travellers"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(32), nullable=True)
    date_of_birth: Mapped[date | None] = mapped_column(Date, nullable=True)
    business_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    owner_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    is_deleted: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)

    # Composite indexes for common queries
    __table_args__ = (
        Index("ix_travellers_business_created", "business_id", "created_at"),
        Index("ix_travellers_business_deleted", "business_id", "is_deleted"),
        Index("ix_travellers_business_owner", "business_id", "owner_id"),
    )

    @validates("name", "phone")
    def _strip(self, key, value):
        return value.strip() if isinstance(value, str) else value

    @validates("email")
    def _normalize_email(self, key, value):
        return value.strip().lower() if isinstance(value, str) else value
