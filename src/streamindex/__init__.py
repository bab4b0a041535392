"""STREAMINDEX

A bounded, order-preserving index over items held in an external item store.
It records which item identifiers are live and in what order, moves re-inserted
identifiers to their new position, and evicts the oldest tail entries once the
configured limit is exceeded.
"""

from streamindex.config import StreamIndexConfig
from streamindex.stream_index import StreamIndex

__all__ = ["__version__", "StreamIndex", "StreamIndexConfig"]
__version__ = "0.1.0"
