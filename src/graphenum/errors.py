"""
Error taxonomy for graph enumeration.

All errors are raised eagerly at the public API boundary, before any search
state is allocated. Once inputs are validated a search never raises.
"""

from __future__ import annotations

__all__ = [
    'GraphEnumError',
    'InvalidVertexError',
    'InvalidCoreNumberError',
    'EmptyGraphError',
    'LabelMappingError',
]


class GraphEnumError(Exception):
    """Base class for all graphenum errors."""
    pass


class InvalidVertexError(GraphEnumError, KeyError):
    """Raised when a vertex is not part of the graph."""

    def __init__(self, vertex):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} is not in the graph")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidCoreNumberError(GraphEnumError, ValueError):
    """Raised when a k-core is requested for k outside [0, n)."""

    def __init__(self, k: int, n: int):
        self.k = k
        self.n = n
        super().__init__(f"k must be in the range [0, {n}), got {k}")


class EmptyGraphError(GraphEnumError):
    """Raised for queries that are undefined on a graph without vertices."""
    pass


class LabelMappingError(GraphEnumError):
    """Raised when a vertex has no entry in its label mapping."""

    def __init__(self, vertex, graph_name: str):
        self.vertex = vertex
        self.graph_name = graph_name
        super().__init__(f"Vertex {vertex!r} of the {graph_name} graph has no label")
