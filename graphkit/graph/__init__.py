"""
Graph engine module.

Provides the weighted graph store and its algorithms:
- Graph: Directed/undirected weighted graph
- bfs, dfs: Traversal
- dijkstra, shortest_path: Non-negative shortest paths
- is_connected, has_cycle, topological_sort: Structural analysis
"""

from graphkit.graph.store import Graph, check_weight
from graphkit.graph.paths import (
    NO_TARGET,
    UNREACHABLE,
    DijkstraResult,
    ShortestPath,
    dijkstra,
    reconstruct_path,
    shortest_path,
)
from graphkit.graph.structure import (
    TopologicalOrder,
    TopologicalStatus,
    has_cycle,
    is_connected,
    topological_sort,
)
from graphkit.graph.traversal import bfs, dfs, dfs_order

__all__ = [
    "Graph",
    "check_weight",
    "bfs",
    "dfs",
    "dfs_order",
    "dijkstra",
    "reconstruct_path",
    "shortest_path",
    "DijkstraResult",
    "ShortestPath",
    "UNREACHABLE",
    "NO_TARGET",
    "is_connected",
    "has_cycle",
    "topological_sort",
    "TopologicalOrder",
    "TopologicalStatus",
]
