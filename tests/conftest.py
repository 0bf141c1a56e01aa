"""Shared test fixtures and configuration."""
import pytest
import os
from datetime import datetime, timedelta
from pathlib import Path
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RESTAURANT_NAME", "Test Restaurant")

from storefront.main import create_app
from storefront.core.config import Settings
from storefront.db.models import Base
from storefront.services.menu.catalog import Catalog
from storefront.services.ordering.models import Customer, LineRequest
from storefront.services.persistence.orders import OrderLedger


# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
ADMIN_PASSWORD = "testpass123"


class FakeClock:
    """Controllable clock returning naive UTC datetimes."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def test_menu_path():
    """Return path to test menu YAML file."""
    return Path(__file__).parent / "fixtures" / "test_menu.yaml"


@pytest.fixture
def test_settings(test_menu_path):
    """Override settings for testing."""
    return Settings(
        database_url=TEST_DATABASE_URL,
        restaurant_name="Test Restaurant",
        admin_password=ADMIN_PASSWORD,
        menu_page_size=2,
        menu_seed_file=str(test_menu_path),
    )


@pytest.fixture
async def test_db_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def test_db(test_db_engine):
    """Create test database session."""
    async_session = async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def catalog(test_db, test_menu_path):
    """Create catalog seeded from the test menu."""
    return Catalog(test_db, seed_file=str(test_menu_path))


@pytest.fixture
def clock():
    """Clock frozen at a fixed instant until advanced."""
    return FakeClock(datetime(2026, 1, 1, 12, 0, 0))


@pytest.fixture
def ledger(test_db, catalog, clock):
    """Create order ledger on the test database and clock."""
    return OrderLedger(test_db, catalog, clock=clock)


@pytest.fixture
def alice():
    """Valid customer."""
    return Customer(name="Alice", address="123 Main St", phone="1234567890")


@pytest.fixture
def pizza_line():
    """Two margherita pizzas."""
    return [LineRequest(item_id="margherita-pizza", quantity=2)]


@pytest.fixture
def test_client(test_settings):
    """Create FastAPI test client over an isolated app."""
    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def open_client(test_settings):
    """Create test client for an app with no admin password configured."""
    settings = test_settings.model_copy(update={"admin_password": None})
    app = create_app(settings)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def failing_store(test_client, monkeypatch):
    """Make every session read and write fail once the app has started."""
    error = OperationalError("SELECT", {}, Exception("database is locked"))
    for name in ("execute", "get", "commit"):
        monkeypatch.setattr(AsyncSession, name, AsyncMock(side_effect=error))
    return test_client


@pytest.fixture
def admin_headers():
    """Headers carrying the admin secret."""
    return {"X-Admin-Secret": ADMIN_PASSWORD}


@pytest.fixture
def order_payload():
    """Valid order request body."""
    return {
        "items": [{"itemId": "margherita-pizza", "quantity": 2}],
        "customer": {"name": "Alice", "address": "123 Main St", "phone": "1234567890"},
    }
