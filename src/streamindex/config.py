"""Configuration utilities for STREAMINDEX.

This module centralizes the construction-time options of a stream index.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from streamindex.interfaces.stream_index import DEFAULT_ID_FIELD, InvalidLimitError

logger = logging.getLogger(__name__)

LIMIT_OPTION = "limit"  # pragma: no mutate
ID_FIELD_OPTION = "id_field"  # pragma: no mutate
KNOWN_OPTIONS = frozenset({LIMIT_OPTION, ID_FIELD_OPTION})


def validate_limit(limit: Any) -> int | None:
    """Check that ``limit`` is ``None`` (unbounded) or a non-negative int.

    Raises:
        InvalidLimitError: If ``limit`` is negative, a bool, or not an int.
    """
    if limit is None:
        return None
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidLimitError(limit)
    return limit


@dataclass(frozen=True)
class StreamIndexConfig:
    """Immutable construction options for a `StreamIndex`.

    Attributes:
        limit: Maximum number of identifiers kept after a tail insert, or
            ``None`` for no bound.
        id_field: Key/attribute name holding each item's identifier.
    """

    limit: int | None = None
    id_field: str = DEFAULT_ID_FIELD

    def __post_init__(self) -> None:
        validate_limit(self.limit)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> StreamIndexConfig:
        """Build a config from a plain options mapping such as ``{"limit": 2}``.

        An absent ``limit`` means unbounded. Unknown keys are ignored and
        logged.

        Args:
            options: Option mapping; ``None`` means all defaults.

        Returns:
            StreamIndexConfig: The validated configuration.

        Raises:
            InvalidLimitError: If the limit is invalid.
        """
        options = dict(options or {})
        if unknown := sorted(set(options) - KNOWN_OPTIONS):
            logger.warning("Ignoring unknown stream index options: %s", unknown)

        return cls(
            limit=options.get(LIMIT_OPTION),
            id_field=options.get(ID_FIELD_OPTION, DEFAULT_ID_FIELD),
        )
