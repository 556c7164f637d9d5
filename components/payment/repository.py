"""Repository for payment operations."""

import logging
from datetime import date
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.booking.models import Booking
from components.payment.models import Payment
from components.payment import schemas
from components.payment.calculator import calculate_payment_balance
from components.payment.status import derive_payment_status
from components.trip.models import Trip

logger = logging.getLogger(__name__)


class PaymentRepository:
    """Repository for payment operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def get_for_booking(self, booking_id: int) -> List[Payment]:
        """Payment history of a booking, newest first."""
        result = await self.session.execute(
            select(Payment)
            .where(Payment.booking_id == booking_id)
            .order_by(Payment.payment_date.desc(), Payment.id.desc())
        )
        return list(result.scalars().all())

    async def add_payment(
        self, booking_id: int, payment: schemas.PaymentCreate
    ) -> Optional[Payment]:
        """
        Record a payment and refresh the booking's payment status.

        The status is derived from the balance of all payments of the
        booking, including the new one. Returns None if the booking
        does not exist.
        """
        result = await self.session.execute(
            select(Booking).where(Booking.id == booking_id)
        )
        booking = result.scalar_one_or_none()
        if not booking:
            return None

        db_payment = Payment(
            booking_id=booking_id,
            amount_cents=payment.amount_cents,
            payment_date=payment.payment_date or date.today(),
            payment_method=payment.payment_method,
            notes=payment.notes,
        )
        self.session.add(db_payment)
        await self.session.flush()

        result = await self.session.execute(
            select(Trip.price_cents).where(Trip.id == booking.trip_id)
        )
        trip_price = result.scalar_one_or_none()
        summary = calculate_payment_balance(trip_price, await self.get_for_booking(booking_id))
        new_status = derive_payment_status(summary)

        if booking.payment_status != new_status.value:
            logger.info(
                "Booking %s payment status %s -> %s (paid %s of %s)",
                booking.booking_ref, booking.payment_status, new_status.value,
                summary.total_paid, summary.total_due,
            )
        booking.payment_status = new_status.value

        await self.session.commit()
        await self.session.refresh(db_payment)
        logger.info("Recorded payment %s of %s for booking %s", db_payment.id, db_payment.amount_cents, booking_id)
        return db_payment
