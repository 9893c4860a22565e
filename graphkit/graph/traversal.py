"""
Breadth-first and depth-first traversal.

Both walks follow each vertex's neighbors in edge-addition order and are
iterative, so traversal depth is bounded by memory rather than the
interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Hashable
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from graphkit.graph.store import Graph

V = TypeVar("V", bound=Hashable)

logger = logging.getLogger(__name__)


def bfs(
    graph: Graph[V],
    start: V,
    on_visit: Callable[[V, int], None] | None = None,
) -> dict[V, int]:
    """
    Breadth-first search from `start`.

    A vertex's distance is fixed the first time it is dequeued; later
    encounters are ignored. `start` is always at distance 0, even if it
    is not in the graph.

    Args:
        graph: Graph to walk
        start: Source vertex
        on_visit: Called once per vertex as (vertex, distance), in BFS order

    Returns:
        Dict mapping each reachable vertex to its hop count from start
    """
    distances: dict[V, int] = {}
    queue = deque([(start, 0)])

    while queue:
        vertex, distance = queue.popleft()
        if vertex in distances:
            continue

        distances[vertex] = distance
        if on_visit is not None:
            on_visit(vertex, distance)

        for neighbor in graph.get_neighbors(vertex):
            if neighbor not in distances:
                queue.append((neighbor, distance + 1))

    logger.debug(f"bfs from {start!r} reached {len(distances)} vertices")
    return distances


def dfs(
    graph: Graph[V],
    start: V,
    on_visit: Callable[[V], None] | None = None,
) -> set[V]:
    """
    Depth-first search from `start`.

    Args:
        graph: Graph to walk
        start: Source vertex
        on_visit: Called once per vertex, in DFS pre-order

    Returns:
        Set of vertices reachable from start (start included)
    """
    return set(_preorder(graph, start, on_visit))


def dfs_order(graph: Graph[V], start: V) -> list[V]:
    """Vertices reachable from `start` in DFS pre-order."""
    return _preorder(graph, start, None)


def _preorder(
    graph: Graph[V],
    start: V,
    on_visit: Callable[[V], None] | None,
) -> list[V]:
    order: list[V] = [start]
    visited = {start}
    if on_visit is not None:
        on_visit(start)

    # Each frame is (vertex, neighbors, index of next neighbor to try)
    stack = [(start, graph.get_neighbors(start), 0)]

    while stack:
        vertex, neighbors, index = stack[-1]
        if index >= len(neighbors):
            stack.pop()
            continue

        stack[-1] = (vertex, neighbors, index + 1)
        neighbor = neighbors[index]
        if neighbor in visited:
            continue

        visited.add(neighbor)
        order.append(neighbor)
        if on_visit is not None:
            on_visit(neighbor)
        stack.append((neighbor, graph.get_neighbors(neighbor), 0))

    logger.debug(f"dfs from {start!r} reached {len(order)} vertices")
    return order
