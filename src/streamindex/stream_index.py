"""Bounded, order-preserving index over items held in an item store.

`StreamIndex` owns an ordered list of unique item identifiers and delegates
item bodies to an injected `ItemStore`:

- ``push`` appends items at the tail, then enforces the limit by evicting
  identifiers from the tail and removing them from the store.
- ``unshift`` places items at the head and never evicts.
- Re-inserting a known identifier moves it to its new position.
- ``get_all_items`` re-projects the store's items into index order.

The index is single-owner and single-threaded; no locking is provided.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from streamindex.config import StreamIndexConfig
from streamindex.interfaces.item_store import ItemStore
from streamindex.interfaces.stream_index import Item, ItemId, get_item_id

logger = logging.getLogger(__name__)


class StreamIndex:
    """Ordered set of live item identifiers with tail eviction.

    Args:
        store: Collaborator holding the item bodies.
        options: Plain option mapping, e.g. ``{"limit": 100}``. Recognized keys
            are ``limit`` and ``id_field``.
        config: A prebuilt `StreamIndexConfig`, as an alternative to
            ``options``.

    Raises:
        TypeError: If both ``options`` and ``config`` are given.
        InvalidLimitError: If the configured limit is invalid.
    """

    def __init__(
        self,
        store: ItemStore,
        options: Mapping[str, Any] | None = None,
        *,
        config: StreamIndexConfig | None = None,
    ):
        if options is not None and config is not None:
            raise TypeError("pass either options or config, not both")
        self._config = config or StreamIndexConfig.from_options(options)
        self._store = store
        self._ids: list[ItemId] = []

    # --------------------------------------------------------------------- #
    # Read access
    # --------------------------------------------------------------------- #

    @property
    def store(self) -> ItemStore:
        """The item store receiving adds and removals."""
        return self._store

    @property
    def limit(self) -> int | None:
        """Maximum length after a push, or ``None`` when unbounded."""
        return self._config.limit

    @property
    def id_field(self) -> str:
        """Key or attribute name each item's identifier is read from."""
        return self._config.id_field

    @property
    def ids(self) -> tuple[ItemId, ...]:
        """Snapshot of the ordered identifier list, head first."""
        return tuple(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __iter__(self) -> Iterator[ItemId]:
        return iter(tuple(self._ids))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(limit={self.limit!r}, size={len(self._ids)})"

    # --------------------------------------------------------------------- #
    # Operations
    # --------------------------------------------------------------------- #

    def push(self, items: Item | Sequence[Item] | None = None) -> StreamIndex:
        """Append items at the tail, then trim to the limit.

        Identifiers already present move to their new tail position. The full
        batch is forwarded to the store as given.

        Args:
            items: A single item, a sequence of items, or ``None``.

        Returns:
            StreamIndex: ``self``, for chaining.
        """
        if not (batch := self._normalize(items)):
            return self

        ids = self._batch_ids(batch)
        self._discard(ids)
        self._ids.extend(ids)
        logger.debug("Pushed %d item(s); index size %d", len(batch), len(self._ids))

        self._store.add(batch)
        self.trim()
        return self

    def unshift(self, items: Item | Sequence[Item] | None = None) -> StreamIndex:
        """Place items at the head, preserving their order. Never trims.

        Args:
            items: A single item, a sequence of items, or ``None``.

        Returns:
            StreamIndex: ``self``, for chaining.
        """
        if not (batch := self._normalize(items)):
            return self

        ids = self._batch_ids(batch)
        self._discard(ids)
        self._ids[:0] = ids
        logger.debug(
            "Unshifted %d item(s); index size %d", len(batch), len(self._ids)
        )

        self._store.add(batch)
        return self

    def trim(self) -> list[ItemId]:
        """Evict identifiers beyond the limit and remove them from the store.

        Identifiers are evicted in their current order, from position
        ``limit`` to the end, with one ``store.remove`` call each.

        Returns:
            list[ItemId]: The evicted identifiers, in eviction order.
        """
        limit = self.limit
        if limit is None or len(self._ids) <= limit:
            return []

        evicted = self._ids[limit:]
        del self._ids[limit:]
        logger.debug("Evicting %d item(s) over limit %d", len(evicted), limit)

        for item_id in evicted:
            self._store.remove(item_id)
        return evicted

    def get_all_items(self) -> list[Item]:
        """Return the store's items in index order.

        Identifiers the store no longer knows are skipped. Neither the store's
        collection nor its items are modified.

        Returns:
            list[Item]: A new list, head first.
        """
        by_id = {
            get_item_id(item, self.id_field): item
            for item in self._store.get_all_items()
        }
        return [by_id[item_id] for item_id in self._ids if item_id in by_id]

    # --------------------------------------------------------------------- #
    # Internals
    # --------------------------------------------------------------------- #

    @staticmethod
    def _normalize(items: Item | Sequence[Item] | None) -> list[Item]:
        """Copy a list, tuple or iterator of items; wrap anything else as one item.

        Iterable records (pydantic models, ORM rows) count as a single item.
        Namedtuple items must be passed inside a list.
        """
        if items is None:
            return []
        if isinstance(items, (list, tuple, Iterator)):
            return list(items)
        return [items]

    def _batch_ids(self, batch: list[Item]) -> list[ItemId]:
        """Identifiers of ``batch`` in order; a repeated id keeps its last slot."""
        seen: set[ItemId] = set()
        ids: list[ItemId] = []
        for item in reversed(batch):
            item_id = get_item_id(item, self.id_field)
            if item_id not in seen:
                seen.add(item_id)
                ids.append(item_id)
        ids.reverse()
        return ids

    def _discard(self, ids: Iterable[ItemId]) -> None:
        """Drop any current occurrence of ``ids`` from the list."""
        doomed = set(ids)
        self._ids = [item_id for item_id in self._ids if item_id not in doomed]
