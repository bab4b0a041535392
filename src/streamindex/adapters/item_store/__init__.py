"""Item store adapters."""

from .memory import InMemoryItemStore

__all__ = ["InMemoryItemStore"]
