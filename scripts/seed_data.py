"""Script to seed test data into the database."""

from datetime import date, timedelta
import asyncio
import logging

from sqlalchemy import delete

from components.core.init_db import db_manager
from components.core.logging_config import setup_logging
from components.core.security import get_password_hash
from components.user.models import User
from components.trip.models import Trip
from components.booking.models import Booking
from components.booking.utils import generate_booking_ref
from components.payment.models import Payment
from components.payment.calculator import calculate_payment_balance
from components.payment.status import derive_payment_status

logger = logging.getLogger("scripts.seed_data")


async def seed_data():
    """Seed test data into the database."""
    await db_manager.create_all()

    async with db_manager.get_db() as db:
        # Clear existing data
        for model in (Payment, Booking, Trip, User):
            await db.execute(delete(model))
        await db.commit()

        db.add_all([
            User(
                login="admin",
                password=get_password_hash("admin12345"),
                registration_date=date.today(),
                is_admin=True,
            ),
            User(
                login="coordinator",
                password=get_password_hash("coordinator123"),
                registration_date=date.today(),
            ),
        ])

        today = date.today()
        trips = [
            Trip(title="Toskania", slug="toskania", start_date=today + timedelta(days=90),
                 end_date=today + timedelta(days=97), price_cents=459900),
            Trip(title="Tatry", slug="tatry", start_date=today + timedelta(days=10),
                 end_date=today + timedelta(days=13), price_cents=120001),
            Trip(title="Spacer po Krakowie", slug="spacer-krakow", start_date=None, price_cents=None),
        ]
        db.add_all(trips)
        await db.commit()

        # Payments per booking, as fractions of the trip price
        payment_shares = [[], [0.5], [0.5, 0.5], [0.5, 0.6]]
        for trip in trips:
            for shares in payment_shares:
                booking = Booking(
                    booking_ref=generate_booking_ref(),
                    trip_id=trip.id,
                    contact_email=f"{trip.slug}@example.com",
                )
                db.add(booking)
                await db.flush()

                payments = [
                    Payment(
                        booking_id=booking.id,
                        amount_cents=int((trip.price_cents or 0) * share),
                        payment_date=today - timedelta(days=i * 7),
                        payment_method="transfer",
                    )
                    for i, share in enumerate(shares)
                    if trip.price_cents
                ]
                db.add_all(payments)
                summary = calculate_payment_balance(trip.price_cents, payments)
                booking.payment_status = derive_payment_status(summary).value
        await db.commit()

    logger.info("Seeded %d trips", len(trips))


if __name__ == "__main__":
    setup_logging()
    asyncio.run(seed_data())
