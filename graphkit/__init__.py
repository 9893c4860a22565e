"""
graphkit - Weighted graph engine.

In-memory directed and undirected graphs with traversal,
shortest-path, and structural analysis algorithms.
"""

__version__ = "0.1.0"
