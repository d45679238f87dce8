"""
Campus API Backend: Stores
============================

What:  Persistence behind the resource controllers, plus the FastAPI
       dependency factory that hands each request a store for one model.

Usage:
    get_article_store = provide_store(Article)

    @router.get("/all")
    async def list_articles(store: Store = Depends(get_article_store)): ...

Tests replace a store by overriding the returned dependency:
    app.dependency_overrides[get_article_store] = lambda: fake_store
"""

from typing import Callable, Type

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.database import get_db_session
from campus_api.stores.base import Store
from campus_api.stores.memory import InMemoryStore
from campus_api.stores.sql import SqlAlchemyStore

__all__ = ["Store", "SqlAlchemyStore", "InMemoryStore", "provide_store"]


def provide_store(model: Type) -> Callable[..., Store]:
    """Build a request-scoped dependency yielding a SqlAlchemyStore for `model`."""

    async def get_store(db: AsyncSession = Depends(get_db_session)) -> Store:
        return SqlAlchemyStore(db, model)

    get_store.__name__ = f"get_{model.__tablename__}_store"
    return get_store
