"""Stream Index Interface Package"""

from .errors import (
    InvalidLimitError,
    ItemIdentityError,
    StreamIndexError,
)
from .identity import (
    DEFAULT_ID_FIELD,
    Item,
    ItemId,
    get_item_id,
)

__all__ = [
    "DEFAULT_ID_FIELD",
    "InvalidLimitError",
    "Item",
    "ItemId",
    "ItemIdentityError",
    "StreamIndexError",
    "get_item_id",
]
