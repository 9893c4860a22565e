"""
Random graph generation and Dijkstra timing.

Usage:
    from graphkit.benchmark import compare_frontiers, random_graph

    graph = random_graph(1000, 5000, seed=7)
    for result in compare_frontiers(graph, start=0, repeats=5):
        print(result.frontier, result.median_ms)
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import numpy as np

from graphkit.config import (
    AVAILABLE_FRONTIERS,
    BENCHMARK_MAX_WEIGHT,
    BENCHMARK_REPEATS,
    BENCHMARK_SEED,
)
from graphkit.graph import Graph, dijkstra

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """
    Timings for repeated Dijkstra runs with one frontier.

    Attributes:
        frontier: Frontier name ("scan" or "heap")
        vertices: Vertex count of the benchmarked graph
        edges: Edge count of the benchmarked graph
        times_ms: Wall-clock time of each run in milliseconds
    """

    frontier: str
    vertices: int
    edges: int
    times_ms: list[float] = field(default_factory=list)

    @property
    def repeats(self) -> int:
        return len(self.times_ms)

    @property
    def mean_ms(self) -> float:
        return float(np.mean(self.times_ms)) if self.times_ms else 0.0

    @property
    def median_ms(self) -> float:
        return float(np.median(self.times_ms)) if self.times_ms else 0.0

    @property
    def p95_ms(self) -> float:
        return float(np.percentile(self.times_ms, 95)) if self.times_ms else 0.0

    def to_dict(self) -> dict:
        return {
            "frontier": self.frontier,
            "vertices": self.vertices,
            "edges": self.edges,
            "repeats": self.repeats,
            "mean_ms": round(self.mean_ms, 3),
            "median_ms": round(self.median_ms, 3),
            "p95_ms": round(self.p95_ms, 3),
        }


def random_graph(
    num_vertices: int,
    num_edges: int,
    directed: bool = False,
    seed: int = BENCHMARK_SEED,
    max_weight: int = BENCHMARK_MAX_WEIGHT,
) -> Graph[int]:
    """
    Build a reproducible random graph on vertices 0..num_vertices-1.

    A random Hamiltonian path is laid down first so every vertex is
    reachable from the head of that path; the remaining edge budget is
    spent on random pairs (self-loops are skipped). Weights are integers
    in [1, max_weight].

    Args:
        num_vertices: Number of vertices
        num_edges: Target edge count (at least num_vertices - 1 are added)
        directed: Whether to build a directed graph
        seed: Seed for numpy's random generator
        max_weight: Largest edge weight

    Returns:
        Graph with integer vertices
    """
    rng = np.random.default_rng(seed)
    graph: Graph[int] = Graph(directed=directed)

    for vertex in range(num_vertices):
        graph.add_vertex(vertex)

    if num_vertices < 2:
        return graph

    order = rng.permutation(num_vertices)
    backbone_weights = rng.integers(1, max_weight + 1, size=num_vertices - 1)
    for source, target, weight in zip(order[:-1], order[1:], backbone_weights, strict=True):
        graph.add_edge(int(source), int(target), int(weight))

    extra = max(0, num_edges - (num_vertices - 1))
    sources = rng.integers(0, num_vertices, size=extra)
    targets = rng.integers(0, num_vertices, size=extra)
    weights = rng.integers(1, max_weight + 1, size=extra)
    for source, target, weight in zip(sources, targets, weights, strict=True):
        if source == target:
            continue
        graph.add_edge(int(source), int(target), int(weight))

    logger.debug(f"random_graph: {graph!r} (seed={seed})")
    return graph


def time_dijkstra(
    graph: Graph,
    start: object,
    frontier: str,
    repeats: int = BENCHMARK_REPEATS,
) -> BenchmarkResult:
    """Run dijkstra() `repeats` times from `start` and record each duration."""
    result = BenchmarkResult(
        frontier=frontier,
        vertices=graph.vertex_count(),
        edges=graph.edge_count(),
    )

    for _ in range(repeats):
        started = time.perf_counter()
        dijkstra(graph, start, frontier=frontier)
        result.times_ms.append((time.perf_counter() - started) * 1000)

    logger.info(
        f"{frontier:>5}: {result.vertices:,} vertices, {result.edges:,} edges, "
        f"median {result.median_ms:.2f}ms over {repeats} runs"
    )
    return result


def compare_frontiers(
    graph: Graph,
    start: object,
    repeats: int = BENCHMARK_REPEATS,
    frontiers: tuple[str, ...] = AVAILABLE_FRONTIERS,
) -> list[BenchmarkResult]:
    """
    Time every frontier on the same graph.

    Raises:
        RuntimeError: If two frontiers disagree on any distance
    """
    reference = dijkstra(graph, start, frontier=frontiers[0]).distances
    for name in frontiers[1:]:
        if dijkstra(graph, start, frontier=name).distances != reference:
            raise RuntimeError(f"Frontier '{name}' disagrees with '{frontiers[0]}'")

    return [time_dijkstra(graph, start, name, repeats) for name in frontiers]
