"""Graph store, path types and shortest-path algorithms."""

from graphdemo.lib.algorithms.dijkstra import find_shortest_path, path_cost, spf
from graphdemo.lib.exceptions import (
    GraphError,
    InvalidEdgeError,
    NegativeWeightError,
    SelectionIncompleteError,
    UnknownVertexError,
)
from graphdemo.lib.graph import EdgeID, NodeID, StrictMultiGraph
from graphdemo.lib.path import PathResult

__all__ = [
    "EdgeID",
    "NodeID",
    "StrictMultiGraph",
    "PathResult",
    "find_shortest_path",
    "path_cost",
    "spf",
    "GraphError",
    "InvalidEdgeError",
    "NegativeWeightError",
    "SelectionIncompleteError",
    "UnknownVertexError",
]
