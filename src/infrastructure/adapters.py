"""Adapter implementations bridging infrastructure to application-layer ports.

Provides an in-memory :class:`PagedSource` for wiring validation and tests.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


# ---------------------------------------------------------------------------
# In-memory data source adapters (swap for real DB queries in production)
# ---------------------------------------------------------------------------

class InMemoryPagedSource(Generic[T]):
    """Sequence-backed paged source."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = list(items)

    def count(self) -> int:
        return len(self._items)

    def fetch(self, offset: int, limit: int) -> list[T]:
        return self._items[offset : offset + limit]
