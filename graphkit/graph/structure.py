"""
Structural analysis: connectivity, cycle detection, topological order.

Cycle detection and topological sort share one iterative depth-first walk
over every component, so neither is limited by recursion depth.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar

from graphkit.graph.traversal import bfs

if TYPE_CHECKING:
    from graphkit.graph.store import Graph

V = TypeVar("V", bound=Hashable)

logger = logging.getLogger(__name__)

# Parent marker for DFS roots (None can be a real vertex)
_ROOT = object()


class TopologicalStatus(Enum):
    SORTED = "sorted"
    CYCLE = "cycle"
    NOT_APPLICABLE = "not_applicable"


@dataclass
class TopologicalOrder(Generic[V]):
    """
    Result of a topological sort.

    Attributes:
        status: SORTED, CYCLE (directed graph is cyclic), or
            NOT_APPLICABLE (graph is undirected)
        order: Vertices with every edge pointing forward; None unless SORTED
    """

    status: TopologicalStatus
    order: list[V] | None = None

    @property
    def is_sorted(self) -> bool:
        return self.status is TopologicalStatus.SORTED


def is_connected(graph: Graph[V]) -> bool:
    """
    Check whether every vertex is reachable from the first-inserted vertex.

    An empty graph is connected. For directed graphs this only tests
    reachability from that one root following edge direction; it is not
    a strong (or weak) connectivity test.
    """
    vertices = graph.get_vertices()
    if not vertices:
        return True

    reached = bfs(graph, vertices[0])
    return len(reached) == len(vertices)


def _depth_first_forest(graph: Graph[V]) -> tuple[list[V], bool]:
    """
    Depth-first walk over all components in vertex insertion order.

    Returns:
        (post-order of finished vertices, whether a cycle was found).
        The walk stops at the first cycle, so the post-order is partial then.
    """
    directed = graph.directed
    visited: set[V] = set()
    on_path: set[V] = set()
    finished: list[V] = []

    for root in graph.get_vertices():
        if root in visited:
            continue

        visited.add(root)
        on_path.add(root)
        # Each frame is (vertex, parent, neighbors, index of next neighbor)
        stack = [(root, _ROOT, graph.get_neighbors(root), 0)]

        while stack:
            vertex, parent, neighbors, index = stack[-1]
            if index >= len(neighbors):
                stack.pop()
                on_path.discard(vertex)
                finished.append(vertex)
                continue

            stack[-1] = (vertex, parent, neighbors, index + 1)
            neighbor = neighbors[index]

            if neighbor not in visited:
                visited.add(neighbor)
                on_path.add(neighbor)
                stack.append((neighbor, vertex, graph.get_neighbors(neighbor), 0))
            elif neighbor in on_path and (directed or neighbor != parent):
                logger.debug(f"cycle: edge {vertex!r} -> {neighbor!r} closes the active path")
                return finished, True

    return finished, False


def has_cycle(graph: Graph[V]) -> bool:
    """
    Check whether the graph contains a cycle.

    Undirected: the edge back to a vertex's DFS parent is not a cycle
    (parallel edges between the same two vertices included); a self-loop is.
    Directed: any edge into the active DFS path, self-loops included.
    """
    _, cyclic = _depth_first_forest(graph)
    return cyclic


def topological_sort(graph: Graph[V]) -> TopologicalOrder[V]:
    """
    Order vertices so every directed edge points from earlier to later.

    Uses reversed DFS finishing order. Undirected graphs get
    NOT_APPLICABLE; directed graphs with a cycle get CYCLE and no order.
    """
    if not graph.directed:
        return TopologicalOrder(status=TopologicalStatus.NOT_APPLICABLE)

    finished, cyclic = _depth_first_forest(graph)
    if cyclic:
        logger.warning("topological_sort: graph has a cycle, no valid order exists")
        return TopologicalOrder(status=TopologicalStatus.CYCLE)

    finished.reverse()
    return TopologicalOrder(status=TopologicalStatus.SORTED, order=finished)
