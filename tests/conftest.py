from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from components.core.database import Base
from components.core.init_db import get_db
from components.core.security import get_password_hash
from components.booking.models import Booking
from components.payment.models import Payment
from components.trip.models import Trip
from components.user.models import User
from restapi.endpoints.auth import get_current_user
from restapi.router import create_app


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def add(session_maker):
    """Persist ORM objects in a short-lived session and return them."""
    async def _add(*objects):
        async with session_maker() as session:
            session.add_all(objects)
            await session.commit()
        return objects[0] if len(objects) == 1 else objects
    return _add


@pytest_asyncio.fixture
async def admin(add) -> User:
    return await add(User(
        login="admin",
        password=get_password_hash("secret-password"),
        registration_date=date(2025, 1, 1),
        is_admin=True,
    ))


@pytest_asyncio.fixture
async def coordinator(add) -> User:
    return await add(User(
        login="coordinator",
        password=get_password_hash("secret-password"),
        registration_date=date(2025, 1, 1),
        is_admin=False,
    ))


@pytest_asyncio.fixture
async def trip(add) -> Trip:
    return await add(Trip(
        title="Toskania",
        slug="toskania",
        start_date=date(2030, 6, 1),
        end_date=date(2030, 6, 8),
        price_cents=10001,
    ))


@pytest_asyncio.fixture
async def booking(add, trip) -> Booking:
    return await add(Booking(
        booking_ref="BK-TEST0001",
        trip_id=trip.id,
        contact_email="jan@example.com",
    ))


@pytest.fixture
def make_payment(add):
    async def _make(booking_id: int, amount_cents: int, payment_date: date = date(2025, 1, 1)):
        return await add(Payment(
            booking_id=booking_id,
            amount_cents=amount_cents,
            payment_date=payment_date,
        ))
    return _make


@pytest.fixture
def app(session_maker):
    app = create_app()

    async def override_get_db():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def login_as(app):
    """Make every request run as the given user."""
    def _login_as(user: User):
        app.dependency_overrides[get_current_user] = lambda: user
    return _login_as


@pytest_asyncio.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
