"""Repository for booking operations."""

import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from components.booking.models import Booking
from components.booking import schemas
from components.booking.utils import generate_booking_ref
from components.payment.calculator import calculate_payment_balance, generate_payment_plan
from components.payment.schemas import Payment, PaymentSummary
from components.payment.status import PaymentStatus, get_payment_status_label

logger = logging.getLogger(__name__)


def summarize(booking: Booking) -> PaymentSummary:
    """Payment balance of a booking loaded with its trip and payments."""
    price = booking.trip.price_cents if booking.trip else None
    return calculate_payment_balance(price, booking.payments)


def with_summary(booking: Booking) -> schemas.BookingWithSummary:
    """Response row for a booking: status label, payment balance and its trip."""
    return schemas.BookingWithSummary(
        **schemas.Booking.model_validate(booking).model_dump(),
        payment_status_label=get_payment_status_label(booking.payment_status),
        payment_summary=summarize(booking),
        trip=schemas.TripRef.model_validate(booking.trip) if booking.trip else None,
    )


class BookingRepository:
    """Repository for booking operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    def _query(self):
        """Booking select with trip and payments eagerly loaded."""
        return (
            select(Booking)
            .options(selectinload(Booking.trip), selectinload(Booking.payments))
            .execution_options(populate_existing=True)
        )

    async def create(self, booking: schemas.BookingCreate) -> Booking:
        """Create a new booking with a generated reference unless one is given."""
        db_booking = Booking(
            booking_ref=booking.booking_ref or generate_booking_ref(),
            trip_id=booking.trip_id,
            contact_email=booking.contact_email,
            contact_phone=booking.contact_phone,
            payment_status=PaymentStatus.UNPAID.value,
        )
        self.session.add(db_booking)
        await self.session.commit()
        logger.info("Created booking %s for trip %s", db_booking.booking_ref, db_booking.trip_id)
        return await self.get_by_id(db_booking.id)

    async def get_by_id(self, booking_id: int) -> Optional[Booking]:
        """Get booking by ID together with its trip and payments."""
        result = await self.session.execute(
            self._query().where(Booking.id == booking_id)
        )
        return result.scalar_one_or_none()

    async def get_by_ref(self, booking_ref: str) -> Optional[Booking]:
        """Get booking by its public reference."""
        result = await self.session.execute(
            self._query().where(Booking.booking_ref == booking_ref)
        )
        return result.scalar_one_or_none()

    async def get_all(self, trip_id: Optional[int] = None) -> List[schemas.BookingWithSummary]:
        """Bookings across all trips, newest first, optionally for one trip only."""
        query = self._query().order_by(Booking.created_at.desc(), Booking.id.desc())
        if trip_id is not None:
            query = query.where(Booking.trip_id == trip_id)

        result = await self.session.execute(query)
        return [with_summary(booking) for booking in result.scalars().all()]

    async def update_payment_status(
        self, booking_id: int, status: PaymentStatus
    ) -> Optional[Booking]:
        """Override the stored payment status of a booking."""
        db_booking = await self.get_by_id(booking_id)
        if not db_booking:
            return None

        previous = db_booking.payment_status
        db_booking.payment_status = status.value
        await self.session.commit()
        logger.info(
            "Booking %s payment status changed %s -> %s",
            db_booking.booking_ref, previous, status.value,
        )
        return db_booking

    async def get_details(self, booking_id: int) -> Optional[schemas.BookingDetails]:
        """Booking with payment summary and payment history."""
        db_booking = await self.get_by_id(booking_id)
        if not db_booking:
            return None

        return schemas.BookingDetails(
            **with_summary(db_booking).model_dump(),
            payments=[Payment.model_validate(payment) for payment in db_booking.payments],
        )

    async def get_payment_summary(self, booking_id: int) -> Optional[PaymentSummary]:
        """Payment balance computed from the trip price and recorded payments."""
        db_booking = await self.get_by_id(booking_id)
        if not db_booking:
            return None
        return summarize(db_booking)

    async def get_payment_plan(self, booking_id: int) -> Optional[schemas.BookingPaymentPlan]:
        """Payment plan for the booked trip, generated as of today."""
        db_booking = await self.get_by_id(booking_id)
        if not db_booking:
            return None

        trip = db_booking.trip
        return schemas.BookingPaymentPlan(
            booking_id=db_booking.id,
            installments=generate_payment_plan(
                trip.price_cents if trip else None,
                trip.start_date if trip else None,
            ),
        )
