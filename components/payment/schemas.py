"""Pydantic schemas for payment data validation."""

from datetime import date
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PaymentRecord(BaseModel):
    """A recorded payment as seen by the balance calculator."""
    amount_cents: Optional[int] = None
    payment_date: Optional[date] = None


class PaymentCreate(BaseModel):
    """Schema for recording a new payment."""
    amount_cents: int = Field(..., gt=0, description="Amount in grosz")
    payment_date: Optional[date] = None
    payment_method: Optional[str] = Field(None, max_length=50)
    notes: Optional[str] = None


class Payment(BaseModel):
    """Schema for payment response."""
    id: int
    booking_id: int
    amount_cents: int
    payment_date: date
    payment_method: Optional[str] = None
    notes: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class PaymentSummary(BaseModel):
    """Derived payment balance of a booking."""
    total_paid: int
    total_due: int
    balance: int
    is_overpaid: bool
    is_fully_paid: bool

    model_config = ConfigDict(frozen=True)


class PaymentPlanInstallment(BaseModel):
    """One scheduled payment obligation."""
    due_date: date
    amount_cents: int
    label: str

    model_config = ConfigDict(frozen=True)
