"""
Campus API Backend: Application Package Initializer
=====================================================

What: Marks the `campus_api` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is a set of table-backed REST resources (articles, help requests,
    dining-commons menu items, student organizations) that all share one
    controller contract:

    ┌─────────────────────────────────────┐
    │      Routes (HTTP surface)          │  ← query/body extraction, serialization
    ├─────────────────────────────────────┤
    │   Resource Controller (generic)     │  ← role check, not-found, allow-listed update
    ├─────────────────────────────────────┤
    │        Stores (persistence)         │  ← find_all / find_by_id / save / delete
    ├─────────────────────────────────────┤
    │   Models & Schemas (data)           │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    Each layer only talks to the one beneath it, so controllers can be tested
    against an in-memory store and routes against a mocked store.
"""

__version__ = "1.0.0"
