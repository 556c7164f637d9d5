"""Payment model for the database."""

from sqlalchemy import Column, Integer, Date, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from components.core.database import Base


class Payment(Base):
    """Payment recorded against a booking."""
    __tablename__ = "payment_history"

    id = Column(Integer, primary_key=True, index=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=False, index=True)
    amount_cents = Column(Integer, nullable=False)  # grosz
    payment_date = Column(Date, nullable=False)
    payment_method = Column(String(50), nullable=True)
    notes = Column(Text, nullable=True)

    # Relationships
    booking = relationship("Booking", back_populates="payments")
