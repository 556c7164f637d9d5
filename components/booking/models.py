"""Booking model for the database."""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from components.core.database import Base
from components.payment.status import PaymentStatus


class Booking(Base):
    """Booking model representing a reservation of a trip."""
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    booking_ref = Column(String(32), unique=True, nullable=False)
    trip_id = Column(Integer, ForeignKey("trips.id"), nullable=False, index=True)
    contact_email = Column(String(255), nullable=True)
    contact_phone = Column(String(50), nullable=True)
    payment_status = Column(String(20), nullable=False, default=PaymentStatus.UNPAID.value)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    # Relationships
    trip = relationship("Trip", back_populates="bookings")
    payments = relationship("Payment", back_populates="booking", order_by="Payment.payment_date")
