"""Repository layer — keyed record storage over a JSON collection."""

import copy
from typing import Callable, Generic, Optional, TypeVar

from bindery_estimator.errors import NotFoundError

from .connection import JsonFileConnection
from .schema import from_record, to_record

T = TypeVar("T")


class JsonRepository(Generic[T]):
    """find_all / find_by_id / create / update / delete for one entity type.

    The file is read on first access and mirrored in memory afterwards;
    each mutation rewrites the whole file. Records are kept in insertion
    order and matched on their ``id`` attribute by linear scan. Readers get
    copies, so mutating a returned record does not touch the cache; write
    changes back with ``update``.
    """

    def __init__(self, db: JsonFileConnection, model: type[T]):
        self.db = db
        self.model = model
        self._cache: Optional[list[T]] = None

    def _load(self) -> list[T]:
        if self._cache is None:
            self._cache = [
                from_record(self.model, r) for r in self.db.read_records()
            ]
        return self._cache

    def _save(self, data: list[T]):
        self.db.write_records([to_record(item) for item in data])
        self._cache = data

    def _index_of(self, data: list[T], record_id: str) -> int:
        for i, item in enumerate(data):
            if item.id == record_id:
                return i
        return -1

    def find_all(self) -> list[T]:
        return copy.deepcopy(self._load())

    def find_by_id(self, record_id: str) -> Optional[T]:
        data = self._load()
        index = self._index_of(data, record_id)
        return copy.deepcopy(data[index]) if index != -1 else None

    def find_by(self, predicate: Callable[[T], bool]) -> list[T]:
        return copy.deepcopy(
            [item for item in self._load() if predicate(item)]
        )

    def create(self, record: T) -> T:
        """Append a record. The caller guarantees its id is unique."""
        data = list(self._load())
        data.append(copy.deepcopy(record))
        self._save(data)
        return record

    def update(self, record_id: str, record: T) -> T:
        data = list(self._load())
        index = self._index_of(data, record_id)
        if index == -1:
            raise NotFoundError(
                f"{self.model.__name__} with id {record_id} not found"
            )
        data[index] = copy.deepcopy(record)
        self._save(data)
        return record

    def delete(self, record_id: str) -> bool:
        """Remove a record; returns False when nothing had that id."""
        data = list(self._load())
        index = self._index_of(data, record_id)
        if index == -1:
            return False
        del data[index]
        self._save(data)
        return True

    def clear_cache(self):
        """Forget the in-memory copy so the next access re-reads the file."""
        self._cache = None
