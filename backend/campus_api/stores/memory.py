"""
Campus API Backend: In-Memory Store
=====================================

What:  Dict-backed Store used by the test-suite in place of a database.
How:   Rows are kept as private copies keyed by the model's key attribute;
       every read and every save returns a fresh copy, so callers can mutate
       what they get back without touching stored state until they save.

Key assignment:
    Records saved with an unset key get the next integer id (one past the
    highest id seen so far). Only meaningful for surrogate-keyed models;
    natural-keyed records always arrive with their key set.
"""

from typing import Dict, Iterable, List, Optional, Type

from campus_api.stores.base import K, R, Store


class InMemoryStore(Store[R, K]):
    """
    In-memory Store for one model class.

    Args:
        model:    ORM model class (must provide as_dict(), see database.Base)
        key_attr: name of the key attribute ("id" or a natural key such as "org_code")
        records:  optional initial rows; keys must already be set
    """

    def __init__(
        self,
        model: Type[R],
        key_attr: str = "id",
        records: Iterable[R] = (),
    ):
        self._model = model
        self._key_attr = key_attr
        self._rows: Dict[K, R] = {}
        self._next_id = 1
        for record in records:
            self._put(getattr(record, key_attr), record)

    def _copy(self, record: R) -> R:
        return self._model(**record.as_dict())

    def _put(self, key: K, record: R) -> R:
        stored = self._copy(record)
        setattr(stored, self._key_attr, key)
        self._rows[key] = stored
        if isinstance(key, int) and key >= self._next_id:
            self._next_id = key + 1
        return stored

    async def find_all(self) -> List[R]:
        return [self._copy(row) for row in self._rows.values()]

    async def find_by_id(self, key: K) -> Optional[R]:
        row = self._rows.get(key)
        return self._copy(row) if row is not None else None

    async def save(self, record: R) -> R:
        key = getattr(record, self._key_attr)
        if key is None:
            key = self._next_id
        return self._copy(self._put(key, record))

    async def delete(self, record: R) -> None:
        self._rows.pop(getattr(record, self._key_attr), None)

    def __len__(self) -> int:
        return len(self._rows)
