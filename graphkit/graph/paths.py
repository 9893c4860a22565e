"""
Single-source shortest paths (Dijkstra) and path reconstruction.

Edge weights are non-negative by construction (Graph.add_edge rejects
anything else). Vertex selection goes through a Frontier: the default
linear scan gives the classic O(V^2 + E) algorithm, the heap frontier
gives O((V + E) log V). Both produce identical results.

Tie-break: when several unvisited vertices share the minimum distance,
the one inserted into the graph first is selected.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterator, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

from graphkit.config import DEFAULT_FRONTIER
from graphkit.errors import InvalidWeightError, MissingWeightError
from graphkit.frontier import Frontier, get_frontier

if TYPE_CHECKING:
    from graphkit.graph.store import Graph

V = TypeVar("V", bound=Hashable)

# Distance reported by shortest_path() when the target cannot be reached
UNREACHABLE = None

# Default for dijkstra's `target` (None can be a real vertex)
NO_TARGET = object()

logger = logging.getLogger(__name__)


@dataclass
class DijkstraResult(Generic[V]):
    """
    Output of a Dijkstra run.

    Unpacks like a tuple: `distances, previous = dijkstra(g, "A")`.

    Attributes:
        distances: Shortest known distance per vertex (math.inf if not reached)
        previous: Predecessor of each reached vertex on its shortest path
    """

    distances: dict[V, float]
    previous: dict[V, V]

    def __iter__(self) -> Iterator:
        yield self.distances
        yield self.previous


@dataclass
class ShortestPath(Generic[V]):
    """
    Shortest path between two vertices.

    Unpacks like a tuple: `path, distance = shortest_path(g, "A", "C")`.

    Attributes:
        path: Vertices from start to target, or None if unreachable
        distance: Total weight of the path, or UNREACHABLE
    """

    path: list[V] | None
    distance: float | None

    @property
    def found(self) -> bool:
        """Whether the target was reachable."""
        return self.path is not None

    @property
    def hops(self) -> int | None:
        """Number of edges on the path, or None if unreachable."""
        return len(self.path) - 1 if self.path is not None else None

    def __iter__(self) -> Iterator:
        yield self.path
        yield self.distance


def _resolve_frontier(frontier: str | Frontier | None, rank: Mapping[V, int]) -> Frontier:
    if frontier is None:
        return get_frontier(DEFAULT_FRONTIER, rank)
    if isinstance(frontier, str):
        return get_frontier(frontier, rank)
    if frontier:
        raise ValueError(f"Frontier must be empty, got {frontier!r}")
    frontier.set_rank(rank)
    return frontier


def dijkstra(
    graph: Graph[V],
    start: V,
    target: V | object = NO_TARGET,
    frontier: str | Frontier | None = None,
) -> DijkstraResult[V]:
    """
    Compute shortest distances from `start`.

    Args:
        graph: Graph with non-negative edge weights
        start: Source vertex
        target: Optional vertex; the search stops as soon as it is settled
        frontier: Frontier name ("scan", "heap") or an empty Frontier
            instance (its ranks are replaced by vertex insertion order).
            Defaults to config.DEFAULT_FRONTIER.

    Returns:
        DijkstraResult with distances for every graph vertex and the
        predecessor map of the shortest-path tree

    Raises:
        MissingWeightError: If an adjacency entry has no weight
        InvalidWeightError: If a traversed weight is negative
        ValueError: If the frontier is unknown or not empty
    """
    vertices = graph.get_vertices()
    rank = {vertex: index for index, vertex in enumerate(vertices)}

    distances: dict[V, float] = dict.fromkeys(vertices, math.inf)
    distances[start] = 0
    previous: dict[V, V] = {}
    visited: set[V] = set()

    queue = _resolve_frontier(frontier, rank)
    queue.push(start, 0)

    while queue:
        current, distance = queue.pop_min()
        if current in visited or distance > distances[current]:
            continue

        if target is not NO_TARGET and current == target:
            logger.debug(f"dijkstra: reached target {target!r} at distance {distance}")
            break

        visited.add(current)

        for neighbor in graph.get_neighbors(current):
            if neighbor in visited:
                continue

            weight = graph.get_weight(current, neighbor)
            if weight is None:
                raise MissingWeightError(current, neighbor)
            if weight < 0:
                raise InvalidWeightError(current, neighbor, weight)

            candidate = distance + weight
            if candidate < distances.get(neighbor, math.inf):
                distances[neighbor] = candidate
                previous[neighbor] = current
                queue.push(neighbor, candidate)

    logger.debug(
        f"dijkstra from {start!r} ({queue.name}): settled {len(visited)} "
        f"of {len(vertices)} vertices"
    )
    return DijkstraResult(distances=distances, previous=previous)


def reconstruct_path(previous: Mapping[V, V], start: V, target: V) -> list[V] | None:
    """
    Walk the predecessor map back from `target` to `start`.

    Returns:
        List of vertices from start to target, or None if the chain of
        predecessors never reaches start
    """
    path = [target]
    seen = {target}
    current = target

    while current != start:
        if current not in previous:
            return None
        current = previous[current]
        if current in seen:
            return None
        seen.add(current)
        path.append(current)

    path.reverse()
    return path


def shortest_path(
    graph: Graph[V],
    start: V,
    target: V,
    frontier: str | Frontier | None = None,
) -> ShortestPath[V]:
    """
    Find the lowest-weight path from `start` to `target`.

    Returns:
        ShortestPath; when target is unreachable, path is None and
        distance is UNREACHABLE
    """
    result = dijkstra(graph, start, target, frontier)
    path = reconstruct_path(result.previous, start, target)

    if path is None:
        logger.debug(f"shortest_path: {target!r} unreachable from {start!r}")
        return ShortestPath(path=None, distance=UNREACHABLE)

    return ShortestPath(path=path, distance=result.distances[target])
