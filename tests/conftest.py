"""
Top-level pytest configuration.

Provides:
  - A fresh in-memory SQLite database (aiosqlite) with all tables per test.
  - A db_session fixture shared by the seeding helpers and the API.
  - An async_client fixture wired to the FastAPI app.
  - Three persisted users: a sender (alice), a receiver (bob) and an
    outsider (carol), with matching Authorization header fixtures.
"""

from __future__ import annotations

import os
from typing import AsyncGenerator

# ---------------------------------------------------------------------------
# Environment must be set BEFORE any app module is imported so that
# pydantic-settings picks up the test values.
# ---------------------------------------------------------------------------
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret-key-that-is-long-enough-32c")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.pool import StaticPool

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


# ---------------------------------------------------------------------------
# Per-test engine. An in-memory database shared through StaticPool is cheap
# to build, so each test gets its own schema and no cleanup is needed.
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine():
    from app.core.database import Base
    import app.models  # noqa: F401  registers every table on Base.metadata

    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine) -> AsyncGenerator[AsyncSession, None]:
    session = AsyncSession(bind=engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.close()


# ---------------------------------------------------------------------------
# Override FastAPI database dependency to use the test session.
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """
    Provide an httpx AsyncClient backed by the FastAPI app.

    The app's get_db dependency is overridden to yield the test session so
    requests see any data seeded in that test.
    """
    from app.core.database import get_db
    from app.main import app

    async def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://testserver",
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# Seeded users
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def alice(db_session: AsyncSession):
    from tests.factories import UserFactory
    return await UserFactory.create_async(db_session, name="Alice", email="alice@example.com")


@pytest_asyncio.fixture
async def bob(db_session: AsyncSession):
    from tests.factories import UserFactory
    return await UserFactory.create_async(
        db_session, name="Bob", email="bob@example.com", avatar="https://img.example.com/bob.png", verified=True
    )


@pytest_asyncio.fixture
async def carol(db_session: AsyncSession):
    from tests.factories import UserFactory
    return await UserFactory.create_async(db_session, name="Carol", email="carol@example.com")


def auth_headers_for(user) -> dict[str, str]:
    """Authorization headers carrying a fresh access token for ``user``."""
    from app.core.security import create_access_token
    token = create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def alice_headers(alice) -> dict[str, str]:
    return auth_headers_for(alice)


@pytest.fixture
def bob_headers(bob) -> dict[str, str]:
    return auth_headers_for(bob)


@pytest.fixture
def carol_headers(carol) -> dict[str, str]:
    return auth_headers_for(carol)
