"""
E2E test fixtures with SQLite and FastAPI HTTP client.

E2E tests verify the full application stack:
- Real FastAPI app (via AsyncClient + ASGITransport)
- Real SQLAlchemy models on an in-memory SQLite database
- Full request/response cycle including exception handlers
- Authentication via Bearer header or access cookie

Scope Strategy:
- All fixtures: function-scoped (maximum isolation)
- Engine: StaticPool, so the in-memory database lives for the whole test
- AsyncClient: Fresh client per test, get_db overridden to the test session
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from main import app
from tests.fixtures import RoomFactory, UserFactory, auth_headers_for

# ============================================================================
# Database Fixtures (SQLite in-memory)
# ============================================================================


@pytest_asyncio.fixture(loop_scope="function")
async def e2e_engine():
    """
    SQLite in-memory engine for E2E tests.

    Schema is created per test for complete isolation.
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
async def db_session(e2e_engine):
    """
    Isolated database session for each E2E test.

    Factories and HTTP requests share it, so objects created by the test
    are the same instances the endpoints load.
    """
    async with AsyncSession(e2e_engine, expire_on_commit=False) as session:
        yield session


# ============================================================================
# FastAPI HTTP Client Fixtures
# ============================================================================


@pytest_asyncio.fixture
async def async_client(db_session):
    """
    Async HTTP client for E2E testing with dependency override.
    """

    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
        yield client

    app.dependency_overrides.clear()


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
async def creator(db_session, user_factory):
    """User that owns the rooms in these tests."""
    return await user_factory.create(db_session, username="owner", email="owner@example.com")


@pytest_asyncio.fixture
async def member(db_session, user_factory):
    """Second user that joins rooms."""
    return await user_factory.create(db_session, username="guest", email="guest@example.com")


@pytest_asyncio.fixture
async def created_room(db_session, room_factory, creator):
    """Room owned by creator, interests {'music': ['jazz']}."""
    return await room_factory.create(
        db_session,
        creator,
        name="Jazz Club",
        description="Listening session",
        interests={"music": ["jazz"]},
    )


# ============================================================================
# Authentication Helper Fixtures
# ============================================================================


@pytest.fixture
def creator_headers(creator):
    return auth_headers_for(creator.username)


@pytest.fixture
def member_headers(member):
    return auth_headers_for(member.username)
