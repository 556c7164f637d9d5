"""Pydantic schemas for booking data validation."""

from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from components.payment.schemas import Payment, PaymentPlanInstallment, PaymentSummary
from components.payment.status import PaymentStatus


class BookingBase(BaseModel):
    """Base booking schema."""
    trip_id: int
    contact_email: Optional[str] = Field(None, max_length=255)
    contact_phone: Optional[str] = Field(None, max_length=50)


class BookingCreate(BookingBase):
    """Schema for booking creation."""
    booking_ref: Optional[str] = Field(None, max_length=32)


class BookingUpdate(BaseModel):
    """Schema for manual payment status override."""
    payment_status: PaymentStatus


class TripRef(BaseModel):
    """Trip fields embedded in booking listings."""
    id: int
    title: str
    slug: str

    model_config = ConfigDict(from_attributes=True)


class Booking(BookingBase):
    """Schema for booking response."""
    id: int
    booking_ref: str
    payment_status: str  # stored as-is; legacy values get the unknown label
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class BookingWithSummary(Booking):
    """Booking together with its payment balance."""
    payment_status_label: str
    payment_summary: PaymentSummary
    trip: Optional[TripRef] = None


class BookingDetails(BookingWithSummary):
    """Booking with its payment history, as shown on the admin booking page."""
    payments: List[Payment]


class BookingPaymentPlan(BaseModel):
    """Payment plan for a booked trip."""
    booking_id: int
    installments: List[PaymentPlanInstallment]
