"""Trip endpoints for the API."""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.init_db import get_db
from components.trip.repository import TripRepository
from components.trip import schemas
from components.booking.repository import BookingRepository
from components.booking import schemas as booking_schemas
from restapi.endpoints.auth import get_current_admin, get_current_user
from components.user.models import User

router = APIRouter(
    prefix="/trips",
    tags=["trips"],
    responses={404: {"description": "Not found"}},
)


@router.get("/", response_model=List[schemas.Trip])
async def read_trips(
    skip: int = Query(0, ge=0, description="Number of records to skip"),
    limit: int = Query(100, ge=1, le=100, description="Number of records to return"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get list of trips ordered by start date."""
    repo = TripRepository(db)
    return await repo.get_all(skip=skip, limit=limit)


@router.post("/", response_model=schemas.Trip, status_code=201)
async def create_trip(
    trip: schemas.TripCreate,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_admin)
):
    """Create a new trip."""
    repo = TripRepository(db)
    if await repo.get_by_slug(trip.slug):
        raise HTTPException(
            status_code=400,
            detail="Trip with this slug already exists"
        )
    return await repo.create(trip)


@router.get("/{trip_id}", response_model=schemas.Trip)
async def read_trip(
    trip_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Get a specific trip by ID."""
    trip = await TripRepository(db).get_by_id(trip_id)
    if trip is None:
        raise HTTPException(status_code=404, detail="Trip not found")
    return trip


@router.get("/{trip_id}/payment-plan", response_model=schemas.TripPaymentPlan)
async def get_trip_payment_plan(
    trip_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """
    Get the default payment plan for a trip.

    Returns two installments:
    - Deposit (50%) due 7 days from today
    - Remaining amount (50%) due 14 days before the trip starts

    Trips without a price get an empty plan.
    """
    plan = await TripRepository(db).get_payment_plan(trip_id)
    if plan is None:
        raise HTTPException(status_code=404, detail="Trip not found")
    return plan


@router.get("/{trip_id}/bookings", response_model=List[booking_schemas.BookingWithSummary])
async def get_trip_bookings(
    trip_id: int,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_admin)
):
    """Get all bookings of a trip with their payment balance."""
    if await TripRepository(db).get_by_id(trip_id) is None:
        raise HTTPException(status_code=404, detail="Trip not found")
    return await BookingRepository(db).get_all(trip_id=trip_id)
