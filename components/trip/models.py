"""Trip model for the database."""

from sqlalchemy import Column, Integer, String, Date
from sqlalchemy.orm import relationship

from components.core.database import Base


class Trip(Base):
    """Trip model representing a bookable travel offering."""
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False)
    start_date = Column(Date, nullable=True)
    end_date = Column(Date, nullable=True)
    price_cents = Column(Integer, nullable=True)  # grosz, NULL for unpriced trips

    # Relationship with Bookings
    bookings = relationship("Booking", back_populates="trip")
