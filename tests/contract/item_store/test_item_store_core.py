"""Contract tests for the ItemStore port.

Behavior under test:
    - get_all_items() is empty for a fresh store
    - add() stores every item of a batch
    - add() upserts: a repeated id replaces the stored body
    - remove() deletes by id and ignores unknown ids
    - get_all_items() returns a collection callers may not use to mutate the store
"""

from __future__ import annotations

import pytest

from streamindex.adapters.item_store import InMemoryItemStore
from streamindex.interfaces.item_store import ItemStore
from tests.fakes import RecordingItemStore

# Deal with pytest fixtures
# pylint: disable=redefined-outer-name

# --- Fixtures ---


@pytest.fixture(params=["memory", "recording"])
def item_store(request: pytest.FixtureRequest) -> ItemStore:
    """Return a fresh ItemStore instance for the requested backend.

    Supported params:
      - `"memory"` → `InMemoryItemStore`
      - `"recording"` → the call-recording test store

    Extend by adding new identifiers to `params` and branching below.
    """

    match request.param:
        case "memory":
            return InMemoryItemStore()
        case "recording":
            return RecordingItemStore()
        case _:
            raise ValueError(f"unknown store type: {request.param}")


def ids_of(store: ItemStore) -> set:
    """Identifiers currently held by ``store``."""
    return {item["id"] for item in store.get_all_items()}


# --- Tests ---


class TestAdd:
    """Tests for the add() method."""

    @staticmethod
    def test_fresh_store_is_empty(item_store: ItemStore):
        """A new store holds nothing."""
        assert list(item_store.get_all_items()) == []

    @staticmethod
    def test_adds_batch(item_store: ItemStore):
        """Every item in the batch is stored."""
        item_store.add([{"id": 1}, {"id": 2}])
        assert ids_of(item_store) == {1, 2}

    @staticmethod
    def test_upserts(item_store: ItemStore):
        """A repeated id replaces the previous body."""
        item_store.add([{"id": 1, "v": "a"}])
        item_store.add([{"id": 1, "v": "b"}])
        assert list(item_store.get_all_items()) == [{"id": 1, "v": "b"}]

    @staticmethod
    def test_last_duplicate_in_batch_wins(item_store: ItemStore):
        """Within one batch the last occurrence of an id is kept."""
        item_store.add([{"id": 1, "v": "a"}, {"id": 1, "v": "b"}])
        assert list(item_store.get_all_items()) == [{"id": 1, "v": "b"}]

    @staticmethod
    def test_empty_batch(item_store: ItemStore):
        """Adding nothing is allowed."""
        item_store.add([])
        assert list(item_store.get_all_items()) == []


class TestRemove:
    """Tests for the remove() method."""

    @staticmethod
    def test_removes_by_id(item_store: ItemStore):
        """The item with the given id disappears."""
        item_store.add([{"id": 1}, {"id": 2}])
        item_store.remove(1)
        assert ids_of(item_store) == {2}

    @staticmethod
    def test_unknown_id_is_noop(item_store: ItemStore):
        """Removing an absent id does not raise."""
        item_store.add([{"id": 1}])
        item_store.remove(99)
        assert ids_of(item_store) == {1}


class TestGetAllItems:
    """Tests for the get_all_items() method."""

    @staticmethod
    def test_result_is_detached(item_store: ItemStore):
        """Mutating a returned list does not change the store."""
        item_store.add([{"id": 1}])
        result = item_store.get_all_items()
        result.clear()  # type: ignore[attr-defined]
        assert ids_of(item_store) == {1}
