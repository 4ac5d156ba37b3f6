"""
ClassHub Backend - Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test that touches the store gets its own SQLite file under
       pytest's tmp_path, with all seven tables created. The FastAPI app is
       pointed at it by overriding `get_db_session` and by swapping
       `classhub.database.engine` (read by /health and the reset endpoint).

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── db_engine: AsyncEngine on a throwaway SQLite file, schema initialized
    ├── session_factory: async_sessionmaker bound to db_engine
    ├── db_session: One AsyncSession for service-level tests
    ├── mock_db_session: AsyncMock session for failure-path tests
    └── test_client: HTTPX AsyncClient talking to the app in-process

Note: ASGITransport does not run the app lifespan, so startup schema
creation is done by the db_engine fixture instead.
"""

import os
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Override settings for testing BEFORE any classhub imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ADMIN_TOKEN"] = ""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from classhub import database
from classhub.config import settings
from classhub.database import build_engine, get_db_session
from classhub.schema import init_schema


# ══════════════════════════════════════════════════════════════════════════
# Store Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path, monkeypatch) -> AsyncGenerator[AsyncEngine, None]:
    """
    Engine on a fresh SQLite file with every table created.

    Also installed as `classhub.database.engine` for the duration of the test.
    """
    engine = build_engine(settings, url=f"sqlite+aiosqlite:///{tmp_path / 'classhub.db'}")
    failed = await init_schema(engine)
    assert failed == []

    monkeypatch.setattr(database, "engine", engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        async def test_list_fails(mock_db_session):
            mock_db_session.execute.side_effect = OperationalError(...)
            with pytest.raises(DatabaseError):
                await board_service.list_recent(mock_db_session, Board.NEWS)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


# ══════════════════════════════════════════════════════════════════════════
# HTTP Client
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def test_client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    HTTPX AsyncClient wired to the app, with sessions from the test store.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from classhub.main import app

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_get_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def register_user(test_client):
    """
    Returns a coroutine function that registers a user and asserts 201.

    Usage:
        async def test_directory(test_client, register_user):
            await register_user("ana", "Ana Lopez")
    """

    async def _register(username: str, full_name: str, password: str = "secret"):
        response = await test_client.post(
            "/register",
            json={"username": username, "password": password, "fullName": full_name},
        )
        assert response.status_code == 201
        return response

    return _register
