from datetime import datetime
from pydantic import Field, field_validator
from travel_admin.models.bank import AccountType
from travel_admin.schemas.common import CamelModel


class BankCreate(CamelModel):
    """Schema for creating a new bank. businessId is never read from the body."""

    name: str = Field(..., min_length=1, max_length=255, examples=["HDFC Bank"])
    account_number: str = Field(..., min_length=1, max_length=64, examples=["1234567890"])
    ifsc_code: str = Field(..., min_length=1, max_length=32, examples=["HDFC0000123"])
    account_type: AccountType = Field(..., examples=["current"])


class BankUpdate(CamelModel):
    """Schema for updating a bank (partial)"""

    name: str | None = Field(None, min_length=1, max_length=255)
    account_number: str | None = Field(None, min_length=1, max_length=64)
    ifsc_code: str | None = Field(None, min_length=1, max_length=32)
    account_type: AccountType | None = None


class BankResponse(CamelModel):
    """Schema for bank response"""

    id: str
    name: str
    account_number: str
    ifsc_code: str
    account_type: AccountType
    business_id: str
    is_deleted: bool = False
    created_at: datetime
    updated_at: datetime

    @field_validator("is_deleted", mode="before")
    @classmethod
    def _unset_means_active(cls, value):
        return bool(value)


class BankEnvelope(CamelModel):
    bank: BankResponse


class BankListEnvelope(CamelModel):
    banks: list[BankResponse]
