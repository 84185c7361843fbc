"""
In-memory data store.

This module replaces a database with two ordered, in-memory
collections (users and products).  A ``DataStore`` is created per
application instance and kept on ``app.state``; routes obtain it via
the ``get_store`` dependency so each test can work on its own copy.

Ids are allocated as ``max(existing ids) + 1``.  Allocation and
insertion happen under the collection lock as a single step, so ids
stay unique even when handlers run on a threadpool.  Because the rule
depends on the current maximum, deleting the record with the highest
id frees that id for reuse.
"""

import threading
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

from fastapi import Request

from ..schemas.product import Product
from ..schemas.user import User

RecordT = TypeVar("RecordT", User, Product)


def next_id(records: Iterable) -> int:
    """Return one more than the highest id in ``records`` (1 when empty)."""
    return max((record.id for record in records), default=0) + 1


class Collection(Generic[RecordT]):
    """An ordered list of records with linear-scan lookups."""

    def __init__(self, records: Optional[Iterable[RecordT]] = None) -> None:
        self._records: List[RecordT] = list(records or [])
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def all(self) -> List[RecordT]:
        """Return a snapshot of the records in insertion order."""
        with self._lock:
            return list(self._records)

    def next_id(self) -> int:
        with self._lock:
            return next_id(self._records)

    def insert(self, record: RecordT) -> RecordT:
        """Append ``record`` as is.  Id uniqueness is the caller's concern."""
        with self._lock:
            self._records.append(record)
            return record

    def insert_new(self, build: Callable[[int], RecordT]) -> RecordT:
        """Allocate the next id, build the record with it and append it."""
        with self._lock:
            record = build(next_id(self._records))
            self._records.append(record)
            return record

    def insert_many_new(self, builders: Iterable[Callable[[int], RecordT]]) -> List[RecordT]:
        """Insert a batch of new records with consecutive fresh ids.

        Every record is built before any is appended, so a builder that
        fails leaves the collection untouched.
        """
        with self._lock:
            current = next_id(self._records) - 1
            created: List[RecordT] = []
            for build in builders:
                current += 1
                created.append(build(current))
            self._records.extend(created)
            return created

    def find_by_id(self, record_id: int) -> Optional[RecordT]:
        with self._lock:
            for record in self._records:
                if record.id == record_id:
                    return record
            return None

    def find_index_by_id(self, record_id: int) -> int:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == record_id:
                    return index
            return -1

    def replace_at(self, index: int, record: RecordT) -> RecordT:
        with self._lock:
            self._records[index] = record
            return record

    def update_by_id(self, record_id: int, change: Callable[[RecordT], RecordT]) -> Optional[RecordT]:
        """Replace the record with ``record_id`` by ``change(record)``.

        Returns the new record, or ``None`` when the id is unknown.  If
        ``change`` raises, the stored record is left as it was.
        """
        with self._lock:
            index = self.find_index_by_id(record_id)
            if index == -1:
                return None
            return self.replace_at(index, change(self._records[index]))

    def remove_at(self, index: int) -> RecordT:
        with self._lock:
            return self._records.pop(index)

    def remove_by_id(self, record_id: int) -> Optional[RecordT]:
        """Remove and return the record with ``record_id`` if present."""
        with self._lock:
            index = self.find_index_by_id(record_id)
            if index == -1:
                return None
            return self.remove_at(index)

    def filter(self, predicate: Callable[[RecordT], bool]) -> List[RecordT]:
        with self._lock:
            return [record for record in self._records if predicate(record)]


def seed_users() -> List[User]:
    return [
        User(id=1, name="John Doe", email="john@example.com", role="admin"),
        User(id=2, name="Jane Smith", email="jane@example.com", role="user"),
    ]


def seed_products() -> List[Product]:
    return [
        Product(id=1, name="Laptop", price=999.99, category="Electronics", stock=50),
        Product(id=2, name="Book", price=19.99, category="Education", stock=100),
    ]


class DataStore:
    """The two collections served by the API."""

    def __init__(
        self,
        users: Optional[Iterable[User]] = None,
        products: Optional[Iterable[Product]] = None,
    ) -> None:
        self.users: Collection[User] = Collection(users)
        self.products: Collection[Product] = Collection(products)

    @classmethod
    def seeded(cls) -> "DataStore":
        """Return a store holding the two demo users and products."""
        return cls(users=seed_users(), products=seed_products())


def get_store(request: Request) -> DataStore:
    """FastAPI dependency returning the application's data store."""
    return request.app.state.store
