"""
Shared pytest fixtures and configuration
"""
import os

# The app builds its engine at import time; never let tests point it at a real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ.setdefault("DB_RETRY_DELAY", "0")

import pytest
from typing import AsyncGenerator
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from portfolio_api import config
from portfolio_api.main import app
from portfolio_api.database import enable_sqlite_foreign_keys, get_async_session
import portfolio_api.models  # noqa: F401


@pytest.fixture(scope="function")
async def test_engine(tmp_path):
    """
    Fresh file-based SQLite database for each test.
    A file (not :memory:) so concurrent requests get their own connections.
    """
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        poolclass=NullPool,
        connect_args={"timeout": 30},
    )

    event.listen(engine.sync_engine, "connect", enable_sqlite_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture(scope="function")
async def test_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Session for arranging and checking data directly"""
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with overridden database dependency.
    Each request gets its own session, like in production.
    """
    async def override_get_async_session():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_async_session] = override_get_async_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as test_client:
        yield test_client

    # Cleanup
    app.dependency_overrides.clear()


@pytest.fixture
def production_mode(monkeypatch):
    monkeypatch.setattr(config, "MODE", "production")


@pytest.fixture
def mock_db_mode(monkeypatch):
    monkeypatch.setattr(config, "MOCK_DB", True)
