from datetime import date, timedelta

from components.booking.repository import BookingRepository
from components.booking.schemas import BookingCreate
from components.payment.repository import PaymentRepository
from components.payment.schemas import PaymentCreate
from components.payment.status import PaymentStatus
from components.trip.models import Trip
from components.trip.repository import TripRepository
from components.trip.schemas import TripCreate


async def test_create_and_list_trips(session):
    repo = TripRepository(session)
    await repo.create(TripCreate(title="Later", slug="later", start_date=date(2031, 1, 1), price_cents=100))
    await repo.create(TripCreate(title="Sooner", slug="sooner", start_date=date(2030, 1, 1), price_cents=200))

    trips = await repo.get_all()

    assert [trip.slug for trip in trips] == ["sooner", "later"]
    assert (await repo.get_by_slug("later")).price_cents == 100


async def test_trip_payment_plan(session, trip):
    plan = await TripRepository(session).get_payment_plan(trip.id)

    assert plan.trip_id == trip.id
    assert [item.amount_cents for item in plan.installments] == [5001, 5000]
    assert plan.installments[0].due_date == date.today() + timedelta(days=7)
    assert plan.installments[1].due_date == date(2030, 5, 18)


async def test_trip_payment_plan_for_unpriced_trip_is_empty(session, add):
    free = await add(Trip(title="Free walk", slug="free-walk"))

    plan = await TripRepository(session).get_payment_plan(free.id)

    assert plan.installments == []


async def test_trip_payment_plan_unknown_trip(session):
    assert await TripRepository(session).get_payment_plan(999) is None


async def test_create_booking_generates_reference(session, trip):
    booking = await BookingRepository(session).create(BookingCreate(trip_id=trip.id))

    assert booking.booking_ref.startswith("BK-")
    assert booking.payment_status == PaymentStatus.UNPAID.value
    assert booking.trip.id == trip.id
    assert booking.payments == []


async def test_booking_payment_summary(session, booking, make_payment):
    await make_payment(booking.id, 4000)
    await make_payment(booking.id, 1000)

    summary = await BookingRepository(session).get_payment_summary(booking.id)

    assert summary.total_paid == 5000
    assert summary.total_due == 10001
    assert summary.balance == 5001
    assert summary.is_fully_paid is False


async def test_booking_payment_summary_unknown_booking(session):
    assert await BookingRepository(session).get_payment_summary(999) is None


async def test_bookings_for_trip_carry_summaries(session, add, trip, booking, make_payment):
    await make_payment(booking.id, 10001)

    rows = await BookingRepository(session).get_all(trip_id=trip.id)

    assert len(rows) == 1
    assert rows[0].booking_ref == "BK-TEST0001"
    assert rows[0].payment_summary.is_fully_paid is True
    assert rows[0].payment_status_label == "Nieopłacona"


async def test_add_payment_updates_status(session, booking):
    repo = PaymentRepository(session)

    await repo.add_payment(booking.id, PaymentCreate(amount_cents=5000))
    first = await BookingRepository(session).get_by_id(booking.id)
    assert first.payment_status == "partial"

    await repo.add_payment(booking.id, PaymentCreate(amount_cents=5001, payment_date=date(2025, 2, 1)))
    second = await BookingRepository(session).get_by_id(booking.id)
    assert second.payment_status == "paid"

    await repo.add_payment(booking.id, PaymentCreate(amount_cents=1))
    third = await BookingRepository(session).get_by_id(booking.id)
    assert third.payment_status == "overpaid"
    assert len(third.payments) == 3


async def test_add_payment_defaults_date_to_today(session, booking):
    payment = await PaymentRepository(session).add_payment(booking.id, PaymentCreate(amount_cents=100))

    assert payment.payment_date == date.today()
    assert payment.booking_id == booking.id


async def test_add_payment_unknown_booking(session):
    assert await PaymentRepository(session).add_payment(999, PaymentCreate(amount_cents=100)) is None


async def test_payment_history_newest_first(session, booking, make_payment):
    await make_payment(booking.id, 100, date(2025, 1, 1))
    await make_payment(booking.id, 200, date(2025, 3, 1))
    await make_payment(booking.id, 300, date(2025, 2, 1))

    payments = await PaymentRepository(session).get_for_booking(booking.id)

    assert [p.amount_cents for p in payments] == [200, 300, 100]


async def test_update_payment_status(session, booking):
    repo = BookingRepository(session)

    updated = await repo.update_payment_status(booking.id, PaymentStatus.PAID)

    assert updated.payment_status == "paid"
    assert await repo.update_payment_status(999, PaymentStatus.PAID) is None


async def test_all_bookings_newest_first_with_trip(session, add, trip, booking):
    other_trip = await add(Trip(title="Tatry", slug="tatry", price_cents=300))
    later = await BookingRepository(session).create(BookingCreate(trip_id=other_trip.id))

    rows = await BookingRepository(session).get_all()

    assert [row.id for row in rows] == [later.id, booking.id]
    assert rows[0].trip.model_dump() == {"id": other_trip.id, "title": "Tatry", "slug": "tatry"}
    assert rows[1].trip.slug == "toskania"


async def test_all_bookings_filtered_by_trip(session, add, trip, booking):
    other_trip = await add(Trip(title="Tatry", slug="tatry", price_cents=300))
    await BookingRepository(session).create(BookingCreate(trip_id=other_trip.id))

    rows = await BookingRepository(session).get_all(trip_id=trip.id)

    assert [row.booking_ref for row in rows] == ["BK-TEST0001"]
