from enum import Enum as PyEnum
from sqlalchemy import String, Boolean, Enum
from sqlalchemy.orm import Mapped, mapped_column
from travel_admin.models.base import Base, RecordIdMixin, TimestampMixin


class AccountType(str, PyEnum):
    """Bank account type enumeration"""

    SAVINGS = "savings"
    CURRENT = "current"


class Bank(Base, RecordIdMixin, TimestampMixin):
    """
    Bank accounts registered by a business.

    Soft-deleted via is_deleted; rows are never removed by the API.
    """

    __tablename__ = "banks"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    account_number: Mapped[str] = mapped_column(String(64), nullable=False)
    ifsc_code: Mapped[str] = mapped_column(String(32), nullable=False)
    account_type: Mapped[AccountType] = mapped_column(
        Enum(AccountType, native_enum=False, values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    business_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,  # Critical for multi-tenant queries
    )
    is_deleted: Mapped[bool | None] = mapped_column(Boolean, nullable=True, default=False)
