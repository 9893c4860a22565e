"""
Unit tests for Dijkstra and shortest-path reconstruction.
"""

import math

import pytest

from graphkit.errors import InvalidWeightError, MissingWeightError
from graphkit.frontier import HeapFrontier, LinearScanFrontier
from graphkit.graph import UNREACHABLE, Graph, dijkstra, reconstruct_path, shortest_path


class TestDijkstra:
    """Test distance computation."""

    def test_triangle_distances(self, weighted_triangle):
        """Shortest distances should take the cheaper two-hop route."""
        distances, previous = weighted_triangle.dijkstra("A")
        assert distances == {"A": 0, "B": 5, "C": 8}
        assert previous == {"B": "A", "C": "B"}

    def test_unreachable_is_infinite(self, clothing_dag):
        """Unreached vertices should stay at infinity."""
        result = dijkstra(clothing_dag, "shirt")
        assert result.distances["pants"] == math.inf
        assert "pants" not in result.previous

    def test_unit_weights_match_bfs(self, unit_grid):
        """With all weights 1, distances should equal BFS hop counts."""
        hops = unit_grid.bfs((1, 0))
        distances = unit_grid.dijkstra((1, 0)).distances
        for vertex, hop in hops.items():
            assert distances[vertex] == hop

    def test_early_exit_on_target(self):
        """Vertices beyond the target should not be settled."""
        graph = Graph(directed=True)
        graph.add_edge("s", "t", 1)
        graph.add_edge("t", "far", 1)
        distances, _ = graph.dijkstra("s", target="t")
        assert distances["t"] == 1
        assert distances["far"] == math.inf

    def test_tie_break_by_insertion_order(self):
        """Equal-distance routes should resolve to the earlier-inserted vertex."""
        graph = Graph(directed=True)
        graph.add_vertex("s")
        graph.add_vertex("b")
        graph.add_vertex("a")
        graph.add_edge("s", "a", 1)
        graph.add_edge("s", "b", 1)
        graph.add_edge("a", "t", 1)
        graph.add_edge("b", "t", 1)
        for frontier in ("scan", "heap"):
            _, previous = dijkstra(graph, "s", frontier=frontier)
            assert previous["t"] == "b"

    def test_tie_break_with_frontier_instance(self):
        """Frontier instances should tie-break by insertion order, not their own ranks."""
        graph = Graph(directed=True)
        graph.add_vertex("s")
        graph.add_vertex("b")
        graph.add_vertex("a")
        graph.add_edge("s", "a", 1)
        graph.add_edge("s", "b", 1)
        graph.add_edge("a", "t", 1)
        graph.add_edge("b", "t", 1)
        for frontier in (LinearScanFrontier(), HeapFrontier(rank={"a": 0, "b": 1})):
            _, previous = dijkstra(graph, "s", frontier=frontier)
            assert previous["t"] == "b"

    def test_frontiers_agree(self, sample_edges):
        """Scan and heap frontiers should give identical results."""
        graph = Graph()
        for source, target, weight in sample_edges:
            graph.add_edge(source, target, weight)
        scan = dijkstra(graph, "home", frontier="scan")
        heap = dijkstra(graph, "home", frontier="heap")
        assert scan.distances == heap.distances
        assert scan.previous == heap.previous
        assert scan.distances["office"] == 8

    def test_frontier_instance(self, weighted_triangle):
        """An empty Frontier instance should be accepted."""
        distances, _ = dijkstra(weighted_triangle, "A", frontier=HeapFrontier())
        assert distances["C"] == 8

    def test_non_empty_frontier_rejected(self, weighted_triangle):
        frontier = HeapFrontier()
        frontier.push("A", 0)
        with pytest.raises(ValueError):
            dijkstra(weighted_triangle, "A", frontier=frontier)

    def test_unknown_frontier_rejected(self, weighted_triangle):
        with pytest.raises(ValueError, match="Unknown frontier"):
            dijkstra(weighted_triangle, "A", frontier="fibonacci")

    def test_zero_weight_edges(self):
        graph = Graph()
        graph.add_edge("A", "B", 0)
        graph.add_edge("B", "C", 0)
        assert graph.dijkstra("A").distances == {"A": 0, "B": 0, "C": 0}

    def test_missing_weight_rejected(self, weighted_triangle):
        """An adjacency entry without a weight should raise, not default to 1."""
        del weighted_triangle._weights["A"]["B"]
        with pytest.raises(MissingWeightError):
            dijkstra(weighted_triangle, "A")

    def test_negative_stored_weight_rejected(self, weighted_triangle):
        """A negative weight that bypassed add_edge should raise when traversed."""
        weighted_triangle._weights["A"]["B"] = -1
        with pytest.raises(InvalidWeightError) as exc_info:
            dijkstra(weighted_triangle, "A")
        assert exc_info.value.weight == -1

    def test_none_is_a_valid_target(self):
        """A None vertex should be searchable as a target."""
        graph = Graph(directed=True)
        graph.add_edge("s", None, 1)
        graph.add_edge(None, "far", 1)
        distances, _ = dijkstra(graph, "s", target=None)
        assert distances[None] == 1
        assert distances["far"] == math.inf

        path, distance = shortest_path(graph, "s", None)
        assert path == ["s", None]
        assert distance == 1

    def test_unknown_start(self, weighted_triangle):
        """Unknown start should reach nothing but itself."""
        distances, previous = weighted_triangle.dijkstra("Z")
        assert distances["Z"] == 0
        assert distances["A"] == math.inf
        assert previous == {}


class TestReconstructPath:
    """Test predecessor-map walking."""

    def test_reconstruct(self):
        previous = {"B": "A", "C": "B"}
        assert reconstruct_path(previous, "A", "C") == ["A", "B", "C"]

    def test_start_equals_target(self):
        assert reconstruct_path({}, "A", "A") == ["A"]

    def test_unreachable(self):
        assert reconstruct_path({"B": "A"}, "A", "C") is None

    def test_chain_not_reaching_start(self):
        assert reconstruct_path({"C": "B"}, "A", "C") is None

    def test_cyclic_map(self):
        """A malformed looping map should not hang."""
        assert reconstruct_path({"B": "C", "C": "B"}, "A", "C") is None


class TestShortestPath:
    """Test the combined shortest_path() call."""

    def test_triangle_path(self, weighted_triangle):
        path, distance = weighted_triangle.shortest_path("A", "C")
        assert path == ["A", "B", "C"]
        assert distance == 8

    def test_path_properties(self, sample_edges):
        """Path should start and end correctly and its weights should sum to the distance."""
        graph = Graph()
        for source, target, weight in sample_edges:
            graph.add_edge(source, target, weight)
        result = shortest_path(graph, "home", "gym")
        assert result.found
        assert result.path[0] == "home"
        assert result.path[-1] == "gym"
        total = 0
        for u, v in zip(result.path, result.path[1:]):
            assert graph.has_edge(u, v)
            total += graph.get_weight(u, v)
        assert total == result.distance == 11
        assert result.hops == len(result.path) - 1

    def test_unreachable(self, clothing_dag):
        """Unreachable targets should give no path and the UNREACHABLE distance."""
        result = clothing_dag.shortest_path("shirt", "shoes")
        assert not result.found
        assert result.path is None
        assert result.distance is UNREACHABLE
        assert result.hops is None

    def test_directed_against_direction(self, directed_chain):
        assert directed_chain.shortest_path("Z", "X").found is False

    def test_same_vertex(self, weighted_triangle):
        path, distance = weighted_triangle.shortest_path("B", "B")
        assert path == ["B"]
        assert distance == 0

    @pytest.mark.parametrize("frontier", ["scan", "heap"])
    def test_large_graph_with_frontier(self, frontier):
        """Longer chains should be found with either frontier."""
        graph = Graph()
        for i in range(200):
            graph.add_edge(i, i + 1, 2)
        graph.add_edge(0, 200, 1000)
        result = graph.shortest_path(0, 200, frontier=frontier)
        assert result.distance == 400
        assert len(result.path) == 201
