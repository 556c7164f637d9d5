"""Booking and payment endpoints for the API."""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.booking.repository import BookingRepository
from components.booking import schemas
from components.payment.repository import PaymentRepository
from components.payment import schemas as payment_schemas
from components.trip.repository import TripRepository
from restapi.endpoints.auth import get_current_admin, get_current_user
from components.user.models import User

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/bookings",
    tags=["bookings"],
    responses={404: {"description": "Not found"}},
)


async def _ensure_booking(db: AsyncSession, booking_id: int) -> None:
    """Raise 404 unless the booking exists."""
    if await BookingRepository(db).get_by_id(booking_id) is None:
        raise HTTPException(status_code=404, detail="Booking not found")


@router.get("/", response_model=List[schemas.BookingWithSummary])
async def read_bookings(
    trip_id: Optional[int] = Query(None, description="Only bookings of this trip"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_admin)
):
    """
    Get bookings across all trips, newest first.

    Each row carries its trip (id, title, slug), payment status label and
    payment balance.
    """
    return await BookingRepository(db).get_all(trip_id=trip_id)


@router.post("/", response_model=schemas.Booking, status_code=201)
async def create_booking(
    booking: schemas.BookingCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_admin)
):
    """Create a booking for an existing trip."""
    if await TripRepository(db).get_by_id(booking.trip_id) is None:
        raise HTTPException(status_code=404, detail="Trip not found")

    repo = BookingRepository(db)
    if booking.booking_ref and await repo.get_by_ref(booking.booking_ref):
        raise HTTPException(
            status_code=400,
            detail="Booking with this reference already exists"
        )
    return await repo.create(booking)


@router.get("/{booking_id}", response_model=schemas.BookingDetails)
async def read_booking(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get a booking with its payment summary and payment history.

    The summary holds:
    - Total paid and total due (trip price), in grosz
    - Balance (negative when overpaid)
    - Overpaid and fully paid flags
    """
    booking = await BookingRepository(db).get_details(booking_id)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.patch("/{booking_id}", response_model=schemas.Booking)
async def update_booking_status(
    booking_id: int,
    update: schemas.BookingUpdate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_admin)
):
    """Manually override the payment status of a booking."""
    booking = await BookingRepository(db).update_payment_status(booking_id, update.payment_status)
    if booking is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return booking


@router.get("/{booking_id}/payments", response_model=List[payment_schemas.Payment])
async def read_booking_payments(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get payment history of a booking, newest first."""
    await _ensure_booking(db, booking_id)
    return await PaymentRepository(db).get_for_booking(booking_id)


@router.post("/{booking_id}/payments", response_model=payment_schemas.Payment, status_code=201)
async def create_booking_payment(
    booking_id: int,
    payment: payment_schemas.PaymentCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_admin)
):
    """
    Record a payment for a booking.

    The booking's payment status is recalculated from all of its payments:
    unpaid, partial, paid or overpaid.
    """
    db_payment = await PaymentRepository(db).add_payment(booking_id, payment)
    if db_payment is None:
        logger.warning("Payment for unknown booking %s rejected", booking_id)
        raise HTTPException(status_code=404, detail="Booking not found")
    return db_payment


@router.get("/{booking_id}/payment-summary", response_model=payment_schemas.PaymentSummary)
async def get_booking_payment_summary(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get payment balance of a booking."""
    summary = await BookingRepository(db).get_payment_summary(booking_id)
    if summary is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return summary


@router.get("/{booking_id}/payment-plan", response_model=schemas.BookingPaymentPlan)
async def get_booking_payment_plan(
    booking_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get the payment plan for a booking.

    The plan is generated on every request: the deposit is due 7 days from
    today and the rest 14 days before the trip starts.
    """
    plan = await BookingRepository(db).get_payment_plan(booking_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Booking not found")
    return plan
