"""
Campus API Backend: Database Session Management
=================================================

What:  Async SQLAlchemy engine, session factory, declarative base and FastAPI dependency.
Why:   One engine and pool per process; one session (one transaction) per request,
       so a failed request never leaves half its writes behind.
How:   Creates an async engine with connection pooling, provides a session
       dependency that auto-commits on success and auto-rolls-back on error.
Who:   Used by the SQL-backed stores via FastAPI's dependency injection system.
When:  Engine is created at module import; sessions are created per-request.

Connection Pooling Strategy:
    pool_size / max_overflow:  from settings (server databases only)
    pool_pre_ping:             validates connections before use
    pool_recycle=3600:         recycles connections every hour

    SQLite (used by the test-suite) gets the dialect's default pool, which
    does not accept the sizing arguments.
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy import BigInteger, Integer
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from campus_api.config import settings


def _engine_options(url: str) -> Dict[str, Any]:
    """Pool arguments appropriate for the configured dialect."""
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if url.startswith("sqlite"):
        return options
    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=settings.db_pool_pre_ping,
        pool_recycle=3600,
    )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine = create_async_engine(settings.database_url, **_engine_options(settings.database_url))

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: records stay readable for response serialization
# after the request transaction commits
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


# ── Surrogate Keys ────────────────────────────────────────────────────────
# BIGINT on server databases: 64-bit ids, the same range API keys are
# validated against (see schemas/common.py). SQLite only auto-assigns ids for
# columns declared INTEGER, which it stores as 64-bit anyway.
SurrogateKey = BigInteger().with_variant(Integer, "sqlite")


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Registers every resource table with a single metadata object (read by
    Alembic) and gives each record a column snapshot used by the in-memory
    store to hand out copies.
    """

    def as_dict(self) -> Dict[str, Any]:
        """Column attribute values keyed by attribute name."""
        return {attr.key: getattr(self, attr.key) for attr in self.__mapper__.column_attrs}


# ── Session Dependency ────────────────────────────────────────────────────
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    How it works:
        1. Creates a new session from the factory
        2. Yields it to the store (the store performs queries)
        3. On success: commits the transaction
        4. On error: rolls back the transaction
        5. Always: closes the session (returns connection to pool)

    Raises:
        Any database exceptions are propagated to the global error handler.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """
    What:  Gracefully closes all connections in the pool.
    When:  Called during application shutdown (lifespan handler).
    """
    await engine.dispose()
