"""Pytest configuration and fixtures for building-tasks.

Each test gets its own SQLite database file (aiosqlite) with every table
created from Base.metadata. The app's get_db / get_db_transactional
dependencies are overridden to use it. Env vars are set before app.main is
imported so Settings validate without a real .env.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.infrastructure.persistence import models  # noqa: F401  (registers tables)
from app.infrastructure.persistence.database import (
    Base,
    get_db,
    get_db_transactional,
)
from app.main import app
from tests.api.helpers import bearer_headers
from tests.factories import Factory


@pytest.fixture
async def engine(tmp_path):
    """Async engine on a per-test SQLite file with the schema created."""
    eng = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'tasks.db'}")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest.fixture
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest.fixture
async def db_session(session_factory) -> AsyncSession:
    """Session for repository/integration tests."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def factory(session_factory) -> Factory:
    """Seeds rows in their own committed session, visible to API requests."""
    async with session_factory() as session:
        yield Factory(session)


@pytest.fixture
async def client(session_factory) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI), bound to the test database."""

    async def _get_db():
        async with session_factory() as session:
            yield session

    async def _get_db_transactional():
        async with session_factory() as session:
            async with session.begin():
                yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_db_transactional] = _get_db_transactional
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def acting_user(factory: Factory):
    """User the auth_headers token belongs to."""
    return await factory.user(name="Acting User", email="acting@example.com")


@pytest.fixture
def auth_headers(acting_user) -> dict[str, str]:
    """Headers for protected requests, as acting_user."""
    return bearer_headers(acting_user.id)
