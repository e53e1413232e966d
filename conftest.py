import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from garage.main import app
from garage.db.session import get_db
from garage.models.base import Base
from garage.core.config import Settings
from garage.core.dependencies import get_gateway, get_settings
from garage.services.booking import BookingRecorder
from garage.services.feedback import FeedbackRecorder
from garage.services.notifier import Notifier


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


class FakeGateway:
    """Records every message instead of calling the provider."""

    def __init__(self, token="SM0123456789abcdef", error=None):
        self.token = token
        self.error = error
        self.sent = []

    async def send(self, destination, origin, body):
        self.sent.append({"destination": destination, "origin": origin, "body": body})
        if self.error is not None:
            raise self.error
        return self.token


@pytest.fixture
def test_settings():
    return Settings(
        DATABASE_URL=TEST_DATABASE_URL,
        TWILIO_ACCOUNT_SID="ACtest",
        TWILIO_AUTH_TOKEN="secret",
        MESSAGING_ORIGIN_ID="+15550001111",
        MESSAGING_TIMEOUT=1.0,
        STORAGE_TIMEOUT=1.0,
    )


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    await engine.dispose()


@pytest.fixture
async def setup_db(test_engine):
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory, setup_db):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def bare_session(session_factory):
    """Session on a database with no tables, so every write fails."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def failing_gateway():
    return FakeGateway(error=RuntimeError("Unable to create record: The 'To' number is not a valid phone number."))


@pytest.fixture
def notifier(gateway, test_settings):
    return Notifier(gateway, test_settings)


@pytest.fixture
def booking_recorder(db_session, notifier, test_settings):
    return BookingRecorder(db_session, notifier, test_settings)


@pytest.fixture
def feedback_recorder(db_session, test_settings):
    return FeedbackRecorder(db_session, test_settings)


@pytest.fixture
def count_rows(session_factory):
    async def _count(model):
        async with session_factory() as session:
            res = await session.execute(select(func.count()).select_from(model))
            return res.scalar_one()
    return _count


@pytest.fixture
def override_dependencies(session_factory, test_settings):
    def _override(gateway):
        async def override_get_db():
            async with session_factory() as session:
                yield session

        app.dependency_overrides[get_db] = override_get_db
        app.dependency_overrides[get_settings] = lambda: test_settings
        app.dependency_overrides[get_gateway] = lambda: gateway
    yield _override
    app.dependency_overrides.clear()


@pytest.fixture
async def test_client(setup_db, override_dependencies, gateway):
    override_dependencies(gateway)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
async def failing_sms_client(setup_db, override_dependencies, failing_gateway):
    override_dependencies(failing_gateway)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def valid_booking_data():
    return {
        "name": "Asha",
        "contact": "9998887770",
        "vehicle_type": "two-wheeler",
        "is_premium": False,
    }


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
    config.addinivalue_line(
        "markers", "api: marks tests that go through the HTTP API"
    )
    config.addinivalue_line(
        "markers", "pricing: marks tests related to pricing"
    )
    config.addinivalue_line(
        "markers", "booking: marks tests related to booking submission"
    )
    config.addinivalue_line(
        "markers", "feedback: marks tests related to feedback submission"
    )
    config.addinivalue_line(
        "markers", "notification: marks tests related to SMS confirmations"
    )
