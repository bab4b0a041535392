"""Identifier extraction for items tracked by a stream index.

Items are opaque records. The index only needs one value from each of them:
the identifier stored under a fixed field name. Mappings are read by key and
any other object by attribute, so plain dicts, dataclasses and ORM rows can
all be tracked without adaptation.
"""

from __future__ import annotations

from collections.abc import Hashable, Mapping
from typing import Any, TypeAlias

from .errors import ItemIdentityError

Item: TypeAlias = Any
ItemId: TypeAlias = Hashable

DEFAULT_ID_FIELD = "id"  # pragma: no mutate


def get_item_id(item: Item, id_field: str = DEFAULT_ID_FIELD) -> ItemId:
    """Return the identifier of ``item``.

    Args:
        item: A mapping or object carrying the identifier field.
        id_field: Name of the key/attribute holding the identifier.

    Returns:
        ItemId: The extracted identifier.

    Raises:
        ItemIdentityError: If ``item`` has no such key or attribute.
    """
    if isinstance(item, Mapping):
        try:
            return item[id_field]
        except KeyError as e:
            raise ItemIdentityError(item, id_field) from e
    try:
        return getattr(item, id_field)
    except AttributeError as e:
        raise ItemIdentityError(item, id_field) from e
