"""In-memory item store implementation.

All items are kept in memory and lost when the instance is discarded.
Use for unit tests, prototyping, or embedding applications that have no
store of their own.

This implementation passes all contract tests for the ItemStore interface.
"""

from __future__ import annotations

from collections.abc import Sequence

from streamindex.interfaces.item_store import ItemStore
from streamindex.interfaces.stream_index import (
    DEFAULT_ID_FIELD,
    Item,
    ItemId,
    get_item_id,
)


class InMemoryItemStore(ItemStore):
    """Dict-backed ItemStore keyed by item identifier.

    - Non-durable: all data is lost when the instance is discarded.
    - Insertion ordered: an upserted item keeps the slot of its first insert.

    Note: This implementation is not thread-safe.
    """

    def __init__(self, id_field: str = DEFAULT_ID_FIELD):
        self.id_field = id_field
        self._items: dict[ItemId, Item] = {}

    # --------------------------------------------------------------------- #
    # Interface implementation
    # --------------------------------------------------------------------- #

    def add(self, items: Sequence[Item]) -> None:
        for item in items:
            self._items[get_item_id(item, self.id_field)] = item

    def remove(self, item_id: ItemId) -> None:
        self._items.pop(item_id, None)

    def get_all_items(self) -> list[Item]:
        return list(self._items.values())

    # --------------------------------------------------------------------- #
    # Conveniences
    # --------------------------------------------------------------------- #

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
