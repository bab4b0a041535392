"""Exceptions for stream index operations."""

from typing import Any


class StreamIndexError(Exception):
    """Base class for stream index errors."""


class InvalidLimitError(StreamIndexError):
    """Configuration: the eviction limit is not a non-negative integer.

    Attributes:
        limit (Any): The rejected limit value.
    """

    def __init__(self, limit: Any):
        super().__init__(
            f"Limit must be a non-negative integer or None, got {limit!r}."
        )
        self.limit = limit


class ItemIdentityError(StreamIndexError):
    """An item does not carry the field used as its identifier.

    Attributes:
        item (Any): The offending item.
        id_field (str): The name of the missing identifier field.
    """

    def __init__(self, item: Any, id_field: str):
        super().__init__(f"Item {item!r} has no identifier field '{id_field}'.")
        self.item = item
        self.id_field = id_field
