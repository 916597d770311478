"""A sorted set with order-statistic queries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from sortedcontainers import SortedSet


class OrderedSet:
    """A set kept in ascending order that can rank and index its elements."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = SortedSet(values)

    def add(self, value: Any) -> None:
        """Insert ``value``; duplicates are ignored."""
        self._items.add(value)

    def discard(self, value: Any) -> None:
        """Remove ``value`` if present."""
        self._items.discard(value)

    def find_by_order(self, k: int) -> Any:
        """Return the ``k``-th smallest element, counting from zero."""
        if not 0 <= k < len(self._items):
            raise IndexError("order out of range")
        return self._items[k]

    def order_of_key(self, value: Any) -> int:
        """Return how many elements are strictly smaller than ``value``."""
        return self._items.bisect_left(value)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __repr__(self) -> str:
        return f"OrderedSet({list(self._items)!r})"