"""
Benchmark module.

Generates reproducible random graphs and times Dijkstra with each
frontier strategy.
"""

from graphkit.benchmark.runner import (
    BenchmarkResult,
    compare_frontiers,
    random_graph,
    time_dijkstra,
)

__all__ = [
    "BenchmarkResult",
    "compare_frontiers",
    "random_graph",
    "time_dijkstra",
]
