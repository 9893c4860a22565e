"""
Graph store: vertices, ordered adjacency, and edge weights.

Usage:
    from graphkit.graph import Graph

    g = Graph(directed=False)
    g.add_edge("A", "B", 5)
    g.add_edge("B", "C", 3)
    g.get_neighbors("B")        # ["A", "C"]
    g.shortest_path("A", "C")   # ShortestPath(path=["A", "B", "C"], distance=8)
"""

from __future__ import annotations

import logging
import math
import numbers
from collections import Counter
from collections.abc import Callable, Hashable, Iterator, Mapping
from typing import Generic, TypeVar

from graphkit.config import DEFAULT_EDGE_WEIGHT
from graphkit.errors import InvalidWeightError
from graphkit.frontier import Frontier
from graphkit.graph import paths as _paths
from graphkit.graph import structure as _structure
from graphkit.graph import traversal as _traversal

V = TypeVar("V", bound=Hashable)

logger = logging.getLogger(__name__)


def check_weight(source: object, target: object, weight: object) -> float:
    """Return `weight` if it is a non-negative real number, else raise InvalidWeightError."""
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidWeightError(source, target, weight)
    if math.isnan(weight) or weight < 0:
        raise InvalidWeightError(source, target, weight)
    return weight


class Graph(Generic[V]):
    """
    Directed or undirected weighted graph.

    Undirected edges are stored as two mirrored directed entries with the
    same weight. Adjacency keeps edge-addition order and is not
    deduplicated: adding the same edge twice lists the neighbor twice
    while the weight for that ordered pair is simply overwritten.

    Vertices iterate in insertion order, which is also the tie-break order
    used by the shortest-path engine.

    Attributes:
        directed: Whether edges are one-way (fixed at construction)
    """

    def __init__(self, directed: bool = False) -> None:
        self._directed = directed
        self._adjacency: dict[V, list[V]] = {}
        self._weights: dict[V, dict[V, float]] = {}

    @property
    def directed(self) -> bool:
        return self._directed

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, vertex: V) -> None:
        """Add `vertex` with no edges. Does nothing if it already exists."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []
            self._weights[vertex] = {}

    def add_edge(self, source: V, target: V, weight: float = DEFAULT_EDGE_WEIGHT) -> None:
        """
        Add an edge, creating either endpoint if needed.

        Args:
            source: Edge origin
            target: Edge destination
            weight: Non-negative edge weight

        Raises:
            InvalidWeightError: If weight is negative, NaN, a bool, or not a number.
                The graph is left unchanged.
        """
        check_weight(source, target, weight)

        self.add_vertex(source)
        self.add_vertex(target)

        self._adjacency[source].append(target)
        self._weights[source][target] = weight

        if not self._directed:
            self._adjacency[target].append(source)
            self._weights[target][source] = weight

    def remove_edge(self, source: V, target: V) -> None:
        """
        Remove one occurrence of the edge (and its mirror if undirected).

        Only the first adjacency entry is removed. The weight is dropped once
        no parallel entry for the same pair remains. Absent edges are ignored.
        """
        if not self._remove_entry(source, target):
            logger.debug(f"remove_edge: no edge {source!r} -> {target!r}")
            return

        if not self._directed:
            self._remove_entry(target, source)

    def _remove_entry(self, source: V, target: V) -> bool:
        neighbors = self._adjacency.get(source)
        if not neighbors or target not in neighbors:
            return False

        neighbors.remove(target)
        if target not in neighbors:
            self._weights[source].pop(target, None)
        return True

    # =========================================================================
    # Accessors
    # =========================================================================

    def has_vertex(self, vertex: V) -> bool:
        return vertex in self._adjacency

    def has_edge(self, source: V, target: V) -> bool:
        """Check if `target` appears in `source`'s neighbor list (O(degree))."""
        return target in self._adjacency.get(source, ())

    def get_weight(self, source: V, target: V) -> float | None:
        """Get the recorded edge weight, or None if the edge was never added."""
        return self._weights.get(source, {}).get(target)

    def get_neighbors(self, vertex: V) -> list[V]:
        """Get `vertex`'s neighbors in edge-addition order (empty if unknown)."""
        return list(self._adjacency.get(vertex, ()))

    def get_vertices(self) -> list[V]:
        """Get all vertices in insertion order."""
        return list(self._adjacency)

    def get_degree(self, vertex: V) -> int:
        """Number of adjacency entries for `vertex`, parallel edges included."""
        return len(self._adjacency.get(vertex, ()))

    def vertex_count(self) -> int:
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of edges; an undirected edge counts once."""
        entries = sum(len(neighbors) for neighbors in self._adjacency.values())
        return entries if self._directed else entries // 2

    def edges(self) -> Iterator[tuple[V, V, float]]:
        """
        Iterate over (source, target, weight) triples in adjacency order.

        Undirected edges are yielded once, from the endpoint whose
        adjacency entry comes first.
        """
        mirrors: Counter = Counter()
        for source, neighbors in self._adjacency.items():
            for target in neighbors:
                if not self._directed:
                    if mirrors[(source, target)]:
                        mirrors[(source, target)] -= 1
                        continue
                    mirrors[(target, source)] += 1
                yield source, target, self._weights[source][target]

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[V]:
        return iter(self._adjacency)

    # =========================================================================
    # Algorithms
    # =========================================================================

    def bfs(self, start: V, on_visit: Callable[[V, int], None] | None = None) -> dict[V, int]:
        return _traversal.bfs(self, start, on_visit)

    def dfs(self, start: V, on_visit: Callable[[V], None] | None = None) -> set[V]:
        return _traversal.dfs(self, start, on_visit)

    def dijkstra(
        self,
        start: V,
        target: V | object = _paths.NO_TARGET,
        frontier: str | Frontier | None = None,
    ) -> _paths.DijkstraResult:
        return _paths.dijkstra(self, start, target, frontier)

    @staticmethod
    def reconstruct_path(previous: Mapping[V, V], start: V, target: V) -> list[V] | None:
        return _paths.reconstruct_path(previous, start, target)

    def shortest_path(
        self,
        start: V,
        target: V,
        frontier: str | Frontier | None = None,
    ) -> _paths.ShortestPath:
        return _paths.shortest_path(self, start, target, frontier)

    def is_connected(self) -> bool:
        return _structure.is_connected(self)

    def has_cycle(self) -> bool:
        return _structure.has_cycle(self)

    def topological_sort(self) -> _structure.TopologicalOrder:
        return _structure.topological_sort(self)

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run invariant checks on the stored adjacency and weights."""
        vertices = self._adjacency

        neighbors_known = all(
            target in vertices
            for neighbors in self._adjacency.values()
            for target in neighbors
        )
        weights_known = all(
            source in vertices and all(target in vertices for target in targets)
            for source, targets in self._weights.items()
        )
        weights_defined = all(
            target in self._weights.get(source, {})
            for source, neighbors in self._adjacency.items()
            for target in neighbors
        )
        weights_valid = all(
            not math.isnan(weight) and weight >= 0
            for targets in self._weights.values()
            for weight in targets.values()
        )

        symmetric = True
        if not self._directed:
            for source, neighbors in self._adjacency.items():
                for target, count in Counter(neighbors).items():
                    if self._adjacency[target].count(source) != count:
                        symmetric = False
                    elif self.get_weight(source, target) != self.get_weight(target, source):
                        symmetric = False

        return {
            "neighbors_are_vertices": neighbors_known,
            "weights_reference_vertices": weights_known,
            "weights_defined_for_neighbors": weights_defined,
            "weights_non_negative": weights_valid,
            "undirected_edges_mirrored": symmetric,
        }

    def stats(self) -> dict:
        """Get summary statistics about the graph."""
        degrees = [len(neighbors) for neighbors in self._adjacency.values()]
        return {
            "directed": self._directed,
            "vertices": len(self._adjacency),
            "edges": self.edge_count(),
            "max_degree": max(degrees, default=0),
            "isolated_vertices": sum(1 for degree in degrees if degree == 0),
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(directed={self._directed}, "
            f"vertices={self.vertex_count()}, edges={self.edge_count()})"
        )
