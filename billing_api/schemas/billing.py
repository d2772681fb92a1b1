"""Billing schemas."""

from datetime import date
from decimal import Decimal

from pydantic import EmailStr, Field

from billing_api.models.enums import BillingStatus
from billing_api.schemas.base import CamelModel


class BillingCreate(CamelModel):
    """Create a new billing."""

    owner_name: str = Field(..., min_length=1, max_length=255)
    owner_email: EmailStr = Field(..., max_length=255)
    owner_phone: str | None = Field(None, max_length=50)
    date: date
    value: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    observation: str | None = Field(None, max_length=2000)


class BillingUpdate(BillingCreate):
    """Replace every field of a billing, status included."""

    status: BillingStatus


class BillingResponse(CamelModel):
    """Billing response."""

    id: str
    owner_name: str
    owner_email: str
    owner_phone: str | None
    date: date
    value: Decimal
    observation: str | None
    status: BillingStatus


class BillingCreatedResponse(CamelModel):
    """Identifier of a newly created billing."""

    billing_id: str


class BillingDetailResponse(CamelModel):
    """Single billing response."""

    billing: BillingResponse


class BillingListResponse(CamelModel):
    """All billings of the current user."""

    billings: list[BillingResponse]
