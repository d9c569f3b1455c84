"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures and configuration for all tests. Every
test gets its own in-memory SQLite database.
"""

import os
import sys
from pathlib import Path

import httpx
import pytest
import pytest_asyncio

# Add the project root directory to the Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set testing environment
os.environ["TESTING"] = "true"

from passenger_service.adapters.database.sqlite import SQLiteAdapter
from passenger_service.main import create_app
from passenger_service.models.passenger import Passenger
from passenger_service.repositories.notification import NotificationRepository
from passenger_service.repositories.passenger import PassengerRepository
from passenger_service.schemas.passenger import PassengerCreate
from passenger_service.services.notification_service import NotificationService
from passenger_service.services.passenger_service import PassengerService
from passenger_service.utils.config import get_settings
from passenger_service.utils.database import get_db

TEST_DATABASE_URL = "sqlite+aiosqlite://"


def make_passenger_dto(**overrides) -> PassengerCreate:
    """Build a valid passenger creation payload."""
    data = {
        "first_name": "John",
        "last_name": "Doe",
        "email": "john@x.com",
        "flight_id": 1,
    }
    data.update(overrides)
    return PassengerCreate(**data)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def adapter():
    """Create an initialized in-memory SQLite adapter."""
    adapter = SQLiteAdapter(TEST_DATABASE_URL)
    await adapter.init()
    yield adapter
    await adapter.close()


@pytest_asyncio.fixture
async def db_session(adapter):
    """Create a fresh database session for a test."""
    async with adapter.get_session() as session:
        yield session


@pytest.fixture
def passenger_repository(db_session) -> PassengerRepository:
    return PassengerRepository(db_session)


@pytest.fixture
def notification_repository(db_session) -> NotificationRepository:
    return NotificationRepository(db_session)


@pytest.fixture
def passenger_service(passenger_repository) -> PassengerService:
    return PassengerService(passenger_repository)


@pytest.fixture
def notification_service(notification_repository, passenger_repository) -> NotificationService:
    return NotificationService(notification_repository, passenger_repository)


@pytest.fixture
def create_passenger(passenger_service):
    """Factory fixture that stores a passenger and returns it."""
    async def _create(**overrides) -> Passenger:
        return await passenger_service.create_passenger(make_passenger_dto(**overrides))
    return _create


@pytest.fixture
def count_notifications(adapter):
    """Count stored notifications of a passenger using a separate session."""
    async def _count(passenger_id: int) -> int:
        async with adapter.get_session() as session:
            notifications = await NotificationRepository(session).get_by_passenger_id(passenger_id)
            return len(notifications)
    return _count


def override_get_db(adapter):
    """Create a callable dependency override for get_db."""
    async def _get_test_db():
        async with adapter.get_session() as session:
            yield session
    return _get_test_db


@pytest.fixture
def test_app():
    """Create a new test application instance."""
    return create_app()


@pytest_asyncio.fixture
async def client(test_app, adapter):
    """Create a test client backed by the test database."""
    test_app.dependency_overrides[get_db] = override_get_db(adapter)
    transport = httpx.ASGITransport(app=test_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
    test_app.dependency_overrides.clear()
