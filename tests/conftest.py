import os
from collections.abc import AsyncGenerator
from datetime import UTC, datetime

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

# Load environment variables from .env file
load_dotenv()

from visitbook.core.confirmation import ConfirmationCodeGenerator
from visitbook.dependencies import get_engine, get_reservation_store
from visitbook.main import app
from visitbook.models.visits import metadata
from visitbook.schemas.reservations import ReservationCreate
from visitbook.services.reservation_service import ReservationService
from visitbook.services.reservation_store import ReservationStore

# In-memory SQLite unless a separate test database is configured
TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite://")

if TEST_DATABASE_URL.startswith("postgresql://"):
    TEST_DATABASE_URL = TEST_DATABASE_URL.replace("postgresql://", "postgresql+asyncpg://", 1)

FIXED_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=UTC)


def _create_test_engine() -> AsyncEngine:
    url = make_url(TEST_DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        # One shared connection keeps the in-memory database alive
        return create_async_engine(
            url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(url, poolclass=NullPool)


@pytest_asyncio.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a test engine with a fresh visits table."""
    engine = _create_test_engine()
    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def store(db_engine: AsyncEngine) -> ReservationStore:
    """Reservation store bound to the test engine."""
    return ReservationStore(db_engine)


@pytest.fixture
def generator() -> ConfirmationCodeGenerator:
    """Confirmation code generator."""
    return ConfirmationCodeGenerator()


@pytest.fixture
def service(store: ReservationStore, generator: ConfirmationCodeGenerator) -> ReservationService:
    """Reservation service with a fixed clock."""
    return ReservationService(store, generator, clock=lambda: FIXED_NOW)


@pytest_asyncio.fixture
async def client(
    db_engine: AsyncEngine,
    store: ReservationStore,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client."""
    app.dependency_overrides[get_engine] = lambda: db_engine
    app.dependency_overrides[get_reservation_store] = lambda: store

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_reservation_data() -> dict:
    """Sample reservation payload as sent by clients."""
    return {
        "patientName": "John Smith",
        "visitDate": "2024-05-20",
        "description": "Routine check-up",
        "attendee": "john@example.com",
        "dtstart": "2024-05-19T10:00:00Z",
    }


@pytest.fixture
def sample_reservation(sample_reservation_data: dict) -> ReservationCreate:
    """Sample reservation request model."""
    return ReservationCreate.model_validate(sample_reservation_data)
