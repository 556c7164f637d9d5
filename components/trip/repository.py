"""Repository for trip operations."""

import logging
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from components.trip.models import Trip
from components.trip import schemas
from components.payment.calculator import generate_payment_plan

logger = logging.getLogger(__name__)


class TripRepository:
    """Repository for trip operations."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session."""
        self.session = session

    async def create(self, trip: schemas.TripCreate) -> Trip:
        """Create a new trip."""
        db_trip = Trip(**trip.model_dump())
        self.session.add(db_trip)
        await self.session.commit()
        await self.session.refresh(db_trip)
        logger.info("Created trip %s (%s)", db_trip.id, db_trip.slug)
        return db_trip

    async def get_by_id(self, trip_id: int) -> Optional[Trip]:
        """Get trip by ID."""
        result = await self.session.execute(
            select(Trip).where(Trip.id == trip_id)
        )
        return result.scalar_one_or_none()

    async def get_by_slug(self, slug: str) -> Optional[Trip]:
        """Get trip by slug."""
        result = await self.session.execute(
            select(Trip).where(Trip.slug == slug)
        )
        return result.scalar_one_or_none()

    async def get_all(self, skip: int = 0, limit: int = 100) -> List[Trip]:
        """Get trips ordered by start date."""
        result = await self.session.execute(
            select(Trip).order_by(Trip.start_date, Trip.id).offset(skip).limit(limit)
        )
        return list(result.scalars().all())

    async def get_payment_plan(self, trip_id: int) -> Optional[schemas.TripPaymentPlan]:
        """Default payment plan for a trip, computed from its current price and start date."""
        trip = await self.get_by_id(trip_id)
        if not trip:
            return None

        return schemas.TripPaymentPlan(
            trip_id=trip.id,
            price_cents=trip.price_cents,
            start_date=trip.start_date,
            installments=generate_payment_plan(trip.price_cents, trip.start_date),
        )
