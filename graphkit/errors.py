"""
Exceptions raised when a graph precondition is violated.

Ordinary misuse (unknown vertices, absent edges) never raises; these
cover contract violations that would make an algorithm's answer wrong.
"""


class GraphError(Exception):
    """Base class for all graphkit errors."""


class InvalidWeightError(GraphError, ValueError):
    """Edge weight is not a non-negative real number."""

    def __init__(self, source: object, target: object, weight: object) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Invalid weight {weight!r} for edge {source!r} -> {target!r}: "
            "weights must be non-negative numbers"
        )


class MissingWeightError(GraphError, LookupError):
    """An adjacency entry has no recorded weight."""

    def __init__(self, source: object, target: object) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Edge {source!r} -> {target!r} has no recorded weight")
