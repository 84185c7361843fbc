"""
Unit tests for the in-memory collections and id allocation.
"""

import asyncio
import threading

import pytest
from pydantic import ValidationError

from catalog_api.app.core.store import Collection, DataStore, next_id
from catalog_api.app.schemas.user import User
from catalog_api.app.services.user_service import UserService


def make_user(user_id: int, name: str = "Someone") -> User:
    return User(id=user_id, name=name, email=f"{name.lower()}@example.com")


class TestNextId:
    """Tests for the id allocation rule."""

    def test_empty_collection_starts_at_one(self):
        assert next_id([]) == 1

    def test_one_more_than_maximum(self):
        """Test that gaps are not filled."""
        assert next_id([make_user(1), make_user(7), make_user(3)]) == 8


class TestCollection:
    """Tests for Collection."""

    def test_all_returns_snapshot_in_insertion_order(self):
        collection = Collection([make_user(2), make_user(1)])
        snapshot = collection.all()
        snapshot.clear()

        assert [user.id for user in collection.all()] == [2, 1]

    def test_insert_new_allocates_id(self):
        collection = Collection([make_user(1), make_user(2)])

        created = collection.insert_new(lambda user_id: make_user(user_id, "Ann"))

        assert created.id == 3
        assert collection.find_by_id(3) is created

    def test_insert_new_leaves_collection_unchanged_on_error(self):
        """Test that a failing builder inserts nothing."""
        collection = Collection([make_user(1)])

        with pytest.raises(ValidationError):
            collection.insert_new(lambda user_id: User(id=user_id, name=5, email="x@example.com"))

        assert len(collection) == 1

    def test_insert_many_new_uses_consecutive_ids(self):
        collection = Collection([make_user(1), make_user(5)])

        created = collection.insert_many_new(
            [lambda user_id, n=n: make_user(user_id, n) for n in ("A", "B", "C")]
        )

        assert [user.id for user in created] == [6, 7, 8]
        assert len(collection) == 5

    def test_insert_many_new_is_all_or_nothing(self):
        collection = Collection([make_user(1)])
        builders = [
            lambda user_id: make_user(user_id, "Ok"),
            lambda user_id: User(id=user_id, name=None, email="x@example.com"),
        ]

        with pytest.raises(ValidationError):
            collection.insert_many_new(builders)

        assert [user.id for user in collection.all()] == [1]

    def test_find_index_by_id(self):
        collection = Collection([make_user(4), make_user(9)])

        assert collection.find_index_by_id(9) == 1
        assert collection.find_index_by_id(5) == -1

    def test_find_by_id_missing(self):
        assert Collection([make_user(1)]).find_by_id(2) is None

    def test_remove_at(self):
        collection = Collection([make_user(1), make_user(2)])

        removed = collection.remove_at(0)

        assert removed.id == 1
        assert [user.id for user in collection.all()] == [2]

    def test_remove_by_id(self):
        collection = Collection([make_user(1), make_user(2)])

        assert collection.remove_by_id(2).id == 2
        assert collection.remove_by_id(2) is None

    def test_deleted_maximum_id_is_reissued(self):
        collection = Collection([make_user(1), make_user(2)])
        collection.remove_by_id(2)

        assert collection.next_id() == 2

    def test_update_by_id(self):
        collection = Collection([make_user(1, "Old")])

        updated = collection.update_by_id(1, lambda user: user.model_copy(update={"name": "New"}))

        assert updated.name == "New"
        assert collection.find_by_id(1).name == "New"

    def test_update_by_id_missing(self):
        collection = Collection([make_user(1)])

        assert collection.update_by_id(2, lambda user: user) is None

    def test_filter(self):
        collection = Collection([make_user(1, "Ann"), make_user(2, "Bob")])

        assert [user.name for user in collection.filter(lambda user: user.name.startswith("B"))] == ["Bob"]


class TestDataStore:
    """Tests for DataStore."""

    def test_seeded_contents(self):
        store = DataStore.seeded()

        assert [user.name for user in store.users.all()] == ["John Doe", "Jane Smith"]
        assert [product.name for product in store.products.all()] == ["Laptop", "Book"]

    def test_seeded_stores_are_independent(self):
        first = DataStore.seeded()
        second = DataStore.seeded()
        first.users.remove_by_id(1)

        assert second.users.find_by_id(1) is not None

    def test_empty_store(self):
        store = DataStore()

        assert store.users.all() == []
        assert store.products.next_id() == 1


class TestConcurrentInserts:
    """Inserts racing on one store from several threads."""

    THREADS = 50

    def _run_together(self, target):
        barrier = threading.Barrier(self.THREADS)

        def worker(n):
            barrier.wait()
            target(n)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(self.THREADS)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    def test_insert_new_ids_are_unique(self):
        store = DataStore.seeded()

        self._run_together(lambda n: store.users.insert_new(lambda user_id: make_user(user_id, f"T{n}")))

        ids = [user.id for user in store.users.all()]
        assert len(ids) == self.THREADS + 2
        assert sorted(ids) == list(range(1, self.THREADS + 3))

    def test_create_user_ids_are_unique(self):
        store = DataStore.seeded()
        service = UserService(store)

        self._run_together(
            lambda n: asyncio.run(service.create_user({"name": f"T{n}", "email": f"t{n}@example.com"}))
        )

        ids = [user.id for user in store.users.all()]
        assert len(set(ids)) == self.THREADS + 2
