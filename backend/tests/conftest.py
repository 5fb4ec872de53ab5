"""
Todo API — Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Environment:
    Tests run against a throwaway SQLite file through aiosqlite instead of
    PostgreSQL. The schema is created from the ORM metadata before each test
    that needs it and dropped afterwards.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: Mock AsyncSession (no database at all)
    ├── db_schema:       Creates/drops the `todo` table on the test database
    ├── db_session:      Real AsyncSession bound to the test database
    └── test_client:     HTTPX AsyncClient routed straight into the ASGI app
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

# Override settings BEFORE any app imports
_test_dir = tempfile.mkdtemp(prefix="todo_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import event  # noqa: E402

from app.database import Base, async_session_factory, engine  # noqa: E402
from app.models.todo import Todo  # noqa: E402,F401  (registers the table)


@event.listens_for(engine.sync_engine, "connect")
def _register_sqlite_functions(dbapi_connection, connection_record):
    """SQLite has no gen_random_uuid(); the column's server default names it."""
    dbapi_connection.create_function("gen_random_uuid", 0, lambda: uuid4().hex)


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list_store_down(mock_db_session):
            mock_db_session.execute.side_effect = OperationalError(...)
            await TodoRepository(mock_db_session).list(10, 0)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_schema():
    """Creates the schema for one test and tears it down afterwards."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    # Pooled connections are bound to this test's event loop
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_schema):
    """A real AsyncSession against the freshly created schema."""
    async with async_session_factory() as session:
        yield session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(db_schema):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from app.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def todo_payload():
    """Builds POST /todo bodies with per-call overrides."""
    def _build(**overrides):
        payload = {"title": "Buy milk", "content": "Two litres, semi-skimmed"}
        payload.update(overrides)
        return payload
    return _build
