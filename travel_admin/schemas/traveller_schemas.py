from datetime import date, datetime
from pydantic import ConfigDict, Field, field_validator
from travel_admin.schemas.common import CamelModel


class TravellerCreate(CamelModel):
    """Schema for creating a new traveller. businessId is never read from the body."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, examples=["Asha Rao"])
    email: str | None = Field(None, max_length=255, examples=["asha@example.com"])
    phone: str | None = Field(None, max_length=32, examples=["+91 9876543210"])
    date_of_birth: date | None = None
    owner_id: str | None = Field(None, max_length=64, description="Owning team member or customer")


class TravellerUpdate(CamelModel):
    """Schema for updating a traveller (partial)"""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, max_length=255)
    phone: str | None = Field(None, max_length=32)
    date_of_birth: date | None = None
    owner_id: str | None = Field(None, max_length=64)


class TravellerResponse(CamelModel):
    """Schema for traveller response"""

    id: str
    name: str
    email: str | None
    phone: str | None
    date_of_birth: date | None
    business_id: str
    owner_id: str | None
    is_deleted: bool = False
    created_at: datetime
    updated_at: datetime

    @field_validator("is_deleted", mode="before")
    @classmethod
    def _unset_means_active(cls, value):
        return bool(value)


class TravellerEnvelope(CamelModel):
    success: bool = True
    traveller: TravellerResponse


class TravellerMutationEnvelope(TravellerEnvelope):
    message: str


class TravellerListEnvelope(CamelModel):
    success: bool = True
    count: int
    travellers: list[TravellerResponse]


class TravellerDeletedSummary(CamelModel):
    id: str
    name: str
    is_deleted: bool


class TravellerDeleteEnvelope(CamelModel):
    success: bool = True
    message: str
    traveller: TravellerDeletedSummary
