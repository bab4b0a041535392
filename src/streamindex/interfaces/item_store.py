"""Interface for the item store backing a stream index.

The store owns item bodies. A `StreamIndex` only tracks identifiers and
delegates every storage concern to an `ItemStore` through three operations:
upsert a batch, remove one item by identifier, and read everything back.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence

from .stream_index import Item, ItemId


class ItemStore(abc.ABC):
    """Contract for a synchronous, in-process item store."""

    @abc.abstractmethod
    def add(self, items: Sequence[Item]) -> None:
        """Upsert the given items.

        Items whose identifier is already stored replace the previous body.
        The batch is not deduplicated by the caller; when the same identifier
        appears more than once, the last occurrence wins.

        Args:
            items: Items to store, in arrival order.
        """

    @abc.abstractmethod
    def remove(self, item_id: ItemId) -> None:
        """Delete the item with the given identifier.

        Removing an identifier that is not stored is a no-op and must not
        raise.

        Args:
            item_id: Identifier of the item to delete.
        """

    @abc.abstractmethod
    def get_all_items(self) -> Sequence[Item]:
        """Return every stored item.

        Order is owned by the store. Callers treat the result as read-only.

        Returns:
            Sequence[Item]: The current items.
        """
