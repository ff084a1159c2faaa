"""graphdemo: Dijkstra shortest paths over small interactive graphs.

Primary API:
    StrictMultiGraph - undirected graph store with labelled vertices
    find_shortest_path() - minimum-weight path between two vertices
    PathResult - ordered vertices, traversed edges and total cost
    PathHighlighter - maps results onto vertex/edge style classes

Example:
    from graphdemo import StrictMultiGraph, find_shortest_path

    g = StrictMultiGraph()
    a, b, c = (g.add_vertex(name) for name in "ABC")
    g.add_edge(a, b, distance=1)
    g.add_edge(b, c, distance=2)

    result = find_shortest_path(g, a, c)
    assert result.nodes == (a, b, c) and result.cost == 3
"""

from __future__ import annotations

from graphdemo import logging
from graphdemo._version import __version__
from graphdemo.config import HIGHLIGHT_CONFIG, PATH_CONFIG
from graphdemo.highlight import HighlightState, PathHighlighter, Selection
from graphdemo.lib.algorithms.dijkstra import find_shortest_path, path_cost, spf
from graphdemo.lib.exceptions import (
    GraphError,
    InvalidEdgeError,
    NegativeWeightError,
    SelectionIncompleteError,
    UnknownVertexError,
)
from graphdemo.lib.graph import StrictMultiGraph
from graphdemo.lib.path import PathResult

__all__ = [
    # Version
    "__version__",
    # Graph store
    "StrictMultiGraph",
    # Path finding
    "find_shortest_path",
    "path_cost",
    "spf",
    "PathResult",
    # Highlighting
    "HighlightState",
    "PathHighlighter",
    "Selection",
    # Configuration
    "HIGHLIGHT_CONFIG",
    "PATH_CONFIG",
    # Errors
    "GraphError",
    "InvalidEdgeError",
    "NegativeWeightError",
    "SelectionIncompleteError",
    "UnknownVertexError",
    # Utilities
    "logging",
]
