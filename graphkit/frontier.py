"""
Frontier strategies for Dijkstra's vertex selection.

A frontier is a min-priority queue of (item, key) pairs:
- LinearScanFrontier: O(n) scan per pop, the classic textbook selection
- HeapFrontier: binary heap with lazy deletion, O(log n) per operation

Both break key ties the same way, so swapping one for the other never
changes a result. Ties go to the item with the lowest rank; ranks come
from the optional `rank` mapping (Dijkstra passes vertex insertion order),
falling back to first-push order for items the mapping does not cover.
"""

from __future__ import annotations

import heapq
import itertools
from abc import ABC, abstractmethod
from collections.abc import Hashable, Mapping
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)


class Frontier(ABC, Generic[T]):
    """
    Abstract min-priority queue used by the shortest-path engine.

    Subclasses implement push() and pop_min(). Pushing an item that is
    already queued with a new key is allowed; callers must be prepared to
    receive an item more than once and skip the stale copies.
    """

    def __init__(self, rank: Mapping[T, int] | None = None) -> None:
        self._rank = rank
        self._first_seen: dict[T, int] = {}

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used by get_frontier()."""
        ...

    @abstractmethod
    def push(self, item: T, key: float) -> None:
        """Queue `item` with priority `key` (lower pops first)."""
        ...

    @abstractmethod
    def pop_min(self) -> tuple[T, float]:
        """
        Remove and return the (item, key) pair with the smallest key.

        Raises:
            IndexError: If the frontier is empty
        """
        ...

    @abstractmethod
    def __len__(self) -> int: ...

    def __bool__(self) -> bool:
        return len(self) > 0

    def set_rank(self, rank: Mapping[T, int] | None) -> None:
        """
        Replace the tie-break ranks. Only allowed while the frontier is empty.

        Raises:
            ValueError: If items are already queued
        """
        if self:
            raise ValueError(f"Cannot re-rank a non-empty frontier {self!r}")
        self._rank = rank
        self._first_seen = {}

    def _tie_break(self, item: T) -> int:
        if self._rank is not None and item in self._rank:
            return self._rank[item]
        # Unranked items sort after every ranked one
        offset = len(self._rank) if self._rank is not None else 0
        return self._first_seen.setdefault(item, offset + len(self._first_seen))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={len(self)})"


class LinearScanFrontier(Frontier[T]):
    """Keeps one key per item and scans all of them on every pop."""

    def __init__(self, rank: Mapping[T, int] | None = None) -> None:
        super().__init__(rank)
        self._keys: dict[T, float] = {}

    @property
    def name(self) -> str:
        return "scan"

    def push(self, item: T, key: float) -> None:
        self._tie_break(item)
        self._keys[item] = key

    def pop_min(self) -> tuple[T, float]:
        if not self._keys:
            raise IndexError("pop from empty frontier")

        best = None
        best_order: tuple[float, int] | None = None
        for item, key in self._keys.items():
            order = (key, self._tie_break(item))
            if best_order is None or order < best_order:
                best, best_order = item, order

        return best, self._keys.pop(best)

    def __len__(self) -> int:
        return len(self._keys)


class HeapFrontier(Frontier[T]):
    """Binary heap via heapq; re-pushed items leave stale entries behind."""

    def __init__(self, rank: Mapping[T, int] | None = None) -> None:
        super().__init__(rank)
        self._heap: list[tuple[float, int, int, T]] = []
        # Keeps tuples comparable without ever comparing items
        self._counter = itertools.count()

    @property
    def name(self) -> str:
        return "heap"

    def push(self, item: T, key: float) -> None:
        heapq.heappush(self._heap, (key, self._tie_break(item), next(self._counter), item))

    def pop_min(self) -> tuple[T, float]:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        key, _, _, item = heapq.heappop(self._heap)
        return item, key

    def __len__(self) -> int:
        return len(self._heap)


FRONTIERS: dict[str, type[Frontier]] = {
    "scan": LinearScanFrontier,
    "heap": HeapFrontier,
}


def get_frontier(name: str, rank: Mapping[T, int] | None = None) -> Frontier[T]:
    """
    Get a frontier by name.

    Args:
        name: Frontier identifier (scan, heap)
        rank: Optional tie-break rank per item (lower wins)

    Returns:
        Instantiated, empty frontier

    Raises:
        ValueError: If frontier name is unknown
    """
    if name not in FRONTIERS:
        available = ", ".join(FRONTIERS.keys())
        raise ValueError(f"Unknown frontier '{name}'. Available: {available}")

    return FRONTIERS[name](rank)
