"""
Unit test fixtures with SQLite and mocked dependencies.

- Service tests use MockRepositories (AsyncMock) and transient ORM objects
- Repository tests use a function-scoped in-memory SQLite database

Unit tests should be:
- Fast (< 5s total)
- Isolated (no external dependencies)
- Deterministic (no flakiness)
"""

import pytest
import pytest_asyncio
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base
from app.services.room_service import RoomService
from tests.fixtures import MockRepositories, RoomFactory, UserFactory
from tests.fixtures.mocks import make_user


# ============================================================================
# Service Fixtures (mocked repositories)
# ============================================================================


@pytest.fixture
def mock_repositories():
    """Fresh repository mocks for each test."""
    return MockRepositories()


@pytest.fixture
def room_service(mock_repositories):
    """RoomService wired to mocked repositories, 24h default expiration."""
    return RoomService(
        room_repo=mock_repositories.room_repo,
        user_repo=mock_repositories.user_repo,
        default_expiration_hours=24,
    )


@pytest.fixture
def alice():
    return make_user(1, "Alice")


@pytest.fixture
def bob():
    return make_user(2, "Bob")


@pytest.fixture
def carol():
    return make_user(3, "Carol")


# ============================================================================
# Database Fixtures (SQLite in-memory)
# ============================================================================


@pytest_asyncio.fixture(loop_scope="function")
async def unit_engine():
    """
    SQLite in-memory engine for unit tests.

    Function-scoped for maximum isolation.
    Uses StaticPool to maintain in-memory database during test.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        echo=False,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(engine.sync_engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(unit_engine):
    """Isolated database session for each unit test."""
    async with AsyncSession(unit_engine, expire_on_commit=False) as session:
        yield session


# ============================================================================
# Factory Fixtures
# ============================================================================


@pytest.fixture
def user_factory():
    """User factory for creating test users."""
    return UserFactory


@pytest.fixture
def room_factory():
    """Room factory for creating test rooms."""
    return RoomFactory


@pytest_asyncio.fixture
async def test_user(db_session, user_factory):
    """Quick access to a persisted user."""
    return await user_factory.create(db_session, username="creator")


@pytest_asyncio.fixture
async def test_room(db_session, room_factory, test_user):
    """Quick access to a persisted room owned by test_user."""
    return await room_factory.create(db_session, test_user, interests={"music": ["jazz"]})
