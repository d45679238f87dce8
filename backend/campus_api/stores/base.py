"""
Campus API Backend: Abstract Store Interface
==============================================

What:  Abstract base class defining the persistence contract every resource
       controller relies on.
How:   Concrete stores inherit from Store and implement the four operations.
Who:   Called by ResourceController; never by route handlers directly.

Implementations:
    - SqlAlchemyStore: one table through a request-scoped AsyncSession
    - InMemoryStore:   dict-backed fake for tests and local experiments
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

R = TypeVar("R")
K = TypeVar("K")


class Store(ABC, Generic[R, K]):
    """
    Key-based persistence for one resource type.

    Contract:
        - find_all() returns every stored record, in no particular order
        - find_by_id() returns the record or None (never raises for a miss)
        - save() persists a new or existing record and returns the persisted
          form, which must reflect any key the store assigned
        - delete() removes the record permanently
        - Each call is a single read or a single write; store faults surface
          as DatabaseError
    """

    @abstractmethod
    async def find_all(self) -> List[R]:
        """Return all records."""

    @abstractmethod
    async def find_by_id(self, key: K) -> Optional[R]:
        """Return the record with the given key, or None."""

    @abstractmethod
    async def save(self, record: R) -> R:
        """Insert or update the record and return what was stored."""

    @abstractmethod
    async def delete(self, record: R) -> None:
        """Remove the record."""
