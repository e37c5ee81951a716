"""Pytest configuration and shared fixtures for all tests."""

import os
import sys
from pathlib import Path

# Minimal environment for tests: in-memory database, cheap bcrypt
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")

# Add project root to PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio

from referral_network.database import create_engine, create_session_maker, init_database
from referral_network.models.user import User
from referral_network.repositories.record_store import SqlRecordStore
from referral_network.services.admin_service import AdminDataService
from referral_network.services.referral_service import ReferralService
from referral_network.services.user import UserRegistrationService
from referral_network.utils.identifiers import SequentialIdGenerator


class FakeClock:
    """Clock advancing one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 1, tzinfo=UTC)

    def __call__(self) -> datetime:
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def clock():
    """Deterministic clock shared by all services of a test."""
    return FakeClock()


@pytest.fixture
def mock_store():
    """Mock RecordStore for tests without database."""
    store = AsyncMock()
    store.get_user_by_id = AsyncMock(return_value=None)
    store.get_user_by_referral_code = AsyncMock(return_value=None)
    store.get_users_referred_by = AsyncMock(return_value=[])
    store.update_user = AsyncMock(side_effect=lambda user: user)
    store.add_referral = AsyncMock(side_effect=lambda referral: referral)
    store.commit = AsyncMock()
    return store


@pytest_asyncio.fixture
async def engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine):
    """Async session over the in-memory database."""
    session_maker = create_session_maker(engine)
    async with session_maker() as session:
        yield session


@pytest.fixture
def store(session):
    return SqlRecordStore(session)


@pytest.fixture
def referral_service(store, clock):
    """Referral engine with deterministic ids and timestamps."""
    return ReferralService(
        store,
        id_generator=SequentialIdGenerator(prefix="ref"),
        clock=clock,
    )


@pytest.fixture
def user_service(store, clock, referral_service):
    """User service sharing the store and clock of the referral engine."""
    return UserRegistrationService(
        store,
        id_generator=SequentialIdGenerator(prefix="user"),
        clock=clock,
        referral_service=referral_service,
    )


@pytest.fixture
def admin_service(store, clock):
    return AdminDataService(store, clock=clock)


@pytest.fixture
def make_user(store, clock):
    """
    Factory inserting a user record directly, bypassing registration.

    Allows building chains the registration flow would refuse (dangling
    codes, cycles).
    """
    async def _make_user(
        username: str,
        referral_code: str,
        referred_by: str | None = None,
    ) -> User:
        user = User(
            id=f"u_{username}",
            username=username,
            email=f"{username}@example.com",
            password_hash="",
            referral_code=referral_code,
            referred_by=referred_by,
            created_at=clock(),
        )
        await store.add_user(user)
        await store.commit()
        return user

    return _make_user
