"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from graphkit.graph import Graph


@pytest.fixture
def weighted_triangle() -> Graph:
    """Undirected A-B(5), B-C(3), A-C(10)."""
    graph = Graph(directed=False)
    graph.add_edge("A", "B", 5)
    graph.add_edge("B", "C", 3)
    graph.add_edge("A", "C", 10)
    return graph


@pytest.fixture
def directed_chain() -> Graph:
    """Directed X -> Y -> Z."""
    graph = Graph(directed=True)
    graph.add_edge("X", "Y", 1)
    graph.add_edge("Y", "Z", 1)
    return graph


@pytest.fixture
def clothing_dag() -> Graph:
    """Directed acyclic graph of dressing order with two disjoint chains."""
    graph = Graph(directed=True)
    graph.add_edge("shirt", "tie")
    graph.add_edge("tie", "jacket")
    graph.add_edge("shirt", "jacket")
    graph.add_edge("pants", "shoes")
    return graph


@pytest.fixture
def unit_grid() -> Graph:
    """Undirected 3x3 grid with unit weights; vertices are (row, col) tuples."""
    graph = Graph(directed=False)
    for row in range(3):
        for col in range(3):
            if col < 2:
                graph.add_edge((row, col), (row, col + 1))
            if row < 2:
                graph.add_edge((row, col), (row + 1, col))
    return graph


@pytest.fixture
def sample_edges() -> list[tuple[str, str, int]]:
    """Weighted edge list for a small road network."""
    return [
        ("home", "bakery", 4),
        ("home", "park", 2),
        ("park", "bakery", 1),
        ("bakery", "office", 5),
        ("park", "office", 8),
        ("office", "gym", 3),
    ]
