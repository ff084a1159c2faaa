"""Exceptions raised by the graph store, the path finder and the highlighter."""

from __future__ import annotations

from typing import Any, Hashable, Optional


class GraphError(Exception):
    """Base class for all graphdemo errors."""


class UnknownVertexError(GraphError, KeyError):
    """A vertex handle is not present in the graph."""

    def __init__(self, vertex: Hashable, message: Optional[str] = None) -> None:
        self.vertex = vertex
        self.message = message or f"Vertex '{vertex}' does not exist."
        super().__init__(self.message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class InvalidEdgeError(GraphError, ValueError):
    """An edge is unknown, malformed, or does not touch the given vertex."""

    def __init__(
        self,
        edge: Hashable,
        vertex: Optional[Hashable] = None,
        message: Optional[str] = None,
    ) -> None:
        self.edge = edge
        self.vertex = vertex
        if message is None:
            if vertex is None:
                message = f"Edge with id='{edge}' is not valid."
            else:
                message = f"Edge with id='{edge}' is not incident to vertex '{vertex}'."
        super().__init__(message)


class NegativeWeightError(GraphError, ValueError):
    """An edge weight is negative or not a number."""

    def __init__(self, edge: Hashable, weight: Any) -> None:
        self.edge = edge
        self.weight = weight
        super().__init__(
            f"Edge with id='{edge}' has weight {weight!r}; "
            "shortest paths require non-negative weights."
        )


class SelectionIncompleteError(GraphError):
    """A path query was requested before both start and end were selected."""
