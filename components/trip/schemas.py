"""Pydantic schemas for trip data validation."""

from datetime import date
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from components.payment.schemas import PaymentPlanInstallment


class TripBase(BaseModel):
    """Base trip schema."""
    title: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=255)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    price_cents: Optional[int] = Field(None, ge=0)


class TripCreate(TripBase):
    """Schema for trip creation."""
    pass


class Trip(TripBase):
    """Schema for trip response."""
    id: int

    model_config = ConfigDict(from_attributes=True)


class TripPaymentPlan(BaseModel):
    """Default payment plan for a trip."""
    trip_id: int
    price_cents: Optional[int] = None
    start_date: Optional[date] = None
    installments: List[PaymentPlanInstallment]
