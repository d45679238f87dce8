"""
Campus API Backend: Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.
Who:   Used by all test files in the tests/ directory.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── app:          fresh FastAPI instance (dependency overrides never leak)
    ├── client:       HTTPX AsyncClient routed straight into `app`
    ├── mock_store:   AsyncMock standing in for a Store (call counts, return values)
    ├── sqlite_session: AsyncSession on a throwaway in-memory SQLite database
    ├── make_token:   mints bearer tokens for arbitrary role sets
    ├── user_headers / admin_headers / admin_only_headers
    └── user_caller / admin_caller / anonymous_caller  (controller-level tests)

Route tests override one resource's store dependency:
    app.dependency_overrides[get_article_store] = lambda: mock_store
"""

import os

# Override settings for testing BEFORE any campus_api imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-not-for-production"
os.environ["JWT_ALGORITHM"] = "HS256"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from campus_api.config import settings
from campus_api.database import Base
from campus_api.main import create_app
from campus_api.security import ANONYMOUS, Caller, Role
from campus_api.stores.base import Store


# ══════════════════════════════════════════════════════════════════════════
# Tokens and Callers
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def make_token() -> Callable[..., str]:
    """
    Mint a signed JWT the app will accept.

    Usage:
        token = make_token(["ROLE_ADMIN"], subject="admin@ucsb.edu")
        token = make_token(["ROLE_USER"], expires_in=timedelta(seconds=-5))  # expired
    """

    def _make(
        roles: Iterable[str],
        subject: str = "tester@ucsb.edu",
        expires_in: timedelta = timedelta(minutes=5),
        secret: str = settings.jwt_secret_key,
    ) -> str:
        claims = {
            "sub": subject,
            "roles": list(roles),
            "exp": datetime.now(timezone.utc) + expires_in,
        }
        return jwt.encode(claims, secret, algorithm="HS256")

    return _make


def _bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(make_token) -> Dict[str, str]:
    return _bearer(make_token(["ROLE_USER"], subject="user@ucsb.edu"))


@pytest.fixture
def admin_headers(make_token) -> Dict[str, str]:
    """Admins in practice hold both roles."""
    return _bearer(make_token(["ROLE_ADMIN", "ROLE_USER"], subject="admin@ucsb.edu"))


@pytest.fixture
def admin_only_headers(make_token) -> Dict[str, str]:
    return _bearer(make_token(["ROLE_ADMIN"], subject="admin@ucsb.edu"))


@pytest.fixture
def anonymous_caller() -> Caller:
    return ANONYMOUS


@pytest.fixture
def user_caller() -> Caller:
    return Caller(subject="user@ucsb.edu", roles=frozenset({Role.USER}))


@pytest.fixture
def admin_caller() -> Caller:
    return Caller(subject="admin@ucsb.edu", roles=frozenset({Role.ADMIN, Role.USER}))


# ══════════════════════════════════════════════════════════════════════════
# Stores
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """
    Provides a mock Store.

    What:    AsyncMock specced on Store, so find_all / find_by_id / save /
             delete are awaitable and record their calls.

    Usage:
        mock_store.find_by_id.return_value = article
        ...
        mock_store.save.assert_not_awaited()
    """
    store = AsyncMock(spec=Store)
    store.find_all.return_value = []
    store.find_by_id.return_value = None

    # Like a database: a record saved without a surrogate id comes back with one
    async def assign_id_and_echo(record):
        if "id" in record.__mapper__.columns and record.id is None:
            record.id = 1
        return record

    store.save.side_effect = assign_id_and_echo
    return store


# ══════════════════════════════════════════════════════════════════════════
# Application and Client
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def app():
    """A fresh application instance per test."""
    return create_app()


@pytest_asyncio.fixture
async def client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    How:     Uses ASGITransport to route requests directly to the app
             (no server, no lifespan events).

    Usage:
        async def test_health(client):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def sqlite_session():
    """
    A session on a fresh in-memory SQLite database holding every resource table.

    StaticPool keeps the single in-memory connection alive across checkouts,
    so the tables created here are the ones the session sees.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as session:
        yield session

    await engine.dispose()
