"""
Campus API Backend: SQLAlchemy Store
======================================

What:  Store implementation over one ORM model and a request-scoped AsyncSession.
Why:   Controllers only see the Store interface; SQL, sessions and driver errors
       stay behind it.
How:   find_all → SELECT, find_by_id → session.get, save → session.merge + flush,
       delete → session.delete + flush. The surrounding get_db_session dependency
       commits on success and rolls back on error.

Save semantics:
    merge() inserts a record whose key is unset (the database assigns the
    surrogate id during flush) and updates the row of a record whose key
    already exists. A natural-key create for an existing code therefore
    replaces that row rather than failing.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.exceptions import DatabaseError
from campus_api.stores.base import K, R, Store

logger = logging.getLogger(__name__)


class SqlAlchemyStore(Store[R, K]):
    """Persists one model class through the given session."""

    def __init__(self, session: AsyncSession, model: Type[R]):
        self._session = session
        self._model = model

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        """Wraps driver/ORM failures in DatabaseError; details stay in the log."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(
                "Database error during %s on %s: %s",
                operation,
                self._model.__tablename__,
                str(e),
            )
            raise DatabaseError(
                context={
                    "operation": operation,
                    "table": self._model.__tablename__,
                    "error_type": type(e).__name__,
                },
            ) from e

    async def find_all(self) -> List[R]:
        with self._translate_errors("find_all"):
            result = await self._session.execute(select(self._model))
            return list(result.scalars().all())

    async def find_by_id(self, key: K) -> Optional[R]:
        with self._translate_errors("find_by_id"):
            return await self._session.get(self._model, key)

    async def save(self, record: R) -> R:
        with self._translate_errors("save"):
            persisted = await self._session.merge(record)
            await self._session.flush()
            return persisted

    async def delete(self, record: R) -> None:
        with self._translate_errors("delete"):
            await self._session.delete(record)
            await self._session.flush()
