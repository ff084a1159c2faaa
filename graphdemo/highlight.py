"""Map shortest-path results onto vertex and edge highlighting.

A GUI host keeps one :class:`PathHighlighter` per displayed graph, forwards
"set as start/end node", "clear selection" and "find shortest path" actions
to it, and applies :attr:`PathHighlighter.state` to its widgets. Nothing in
this module renders.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from graphdemo.config import HIGHLIGHT_CONFIG, HighlightConfig
from graphdemo.lib.algorithms.dijkstra import find_shortest_path
from graphdemo.lib.exceptions import SelectionIncompleteError, UnknownVertexError
from graphdemo.lib.graph import EdgeID, NodeID, StrictMultiGraph
from graphdemo.lib.path import PathResult
from graphdemo.logging import get_logger

logger = get_logger(__name__)


@dataclass
class Selection:
    """Start and end vertices picked by the user.

    Attributes:
        start: Selected start vertex, or None.
        end: Selected end vertex, or None.
    """

    start: Optional[NodeID] = None
    end: Optional[NodeID] = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None

    def clear(self) -> None:
        self.start = None
        self.end = None


@dataclass
class HighlightState:
    """Style class for every vertex and edge of a graph."""

    vertex_styles: Dict[NodeID, str] = field(default_factory=dict)
    edge_styles: Dict[EdgeID, str] = field(default_factory=dict)


class PathHighlighter:
    """Holds the selection for one graph and computes its highlighting.

    Args:
        graph: The displayed graph. Must not change while a query runs.
        config: Style names and summary formatting.
    """

    def __init__(
        self, graph: StrictMultiGraph, config: HighlightConfig = HIGHLIGHT_CONFIG
    ) -> None:
        self.graph = graph
        self.config = config
        self.selection = Selection()
        self.state = HighlightState()
        self.last_result: Optional[PathResult] = None
        self.reset_styles()

    def reset_styles(self) -> HighlightState:
        """Put every vertex and edge back to its base style."""
        self.state = HighlightState(
            vertex_styles={v: self.config.vertex_style for v in self.graph.nodes},
            edge_styles={e: self.config.edge_style for e in self.graph.get_edges()},
        )
        return self.state

    def _require_vertex(self, vertex: NodeID) -> None:
        if vertex not in self.graph:
            raise UnknownVertexError(vertex)

    def select_start(self, vertex: NodeID) -> None:
        self._require_vertex(vertex)
        self.selection.start = vertex
        self.state.vertex_styles[vertex] = self.config.start_style
        logger.info(f"Start node: {self.graph.label(vertex)}")

    def select_end(self, vertex: NodeID) -> None:
        self._require_vertex(vertex)
        self.selection.end = vertex
        self.state.vertex_styles[vertex] = self.config.end_style
        logger.info(f"End node: {self.graph.label(vertex)}")

    def clear_selection(self) -> None:
        """Forget start/end and reset all styles."""
        self.selection.clear()
        self.last_result = None
        self.reset_styles()
        logger.info("Selection cleared")

    def find_and_highlight(self) -> PathResult:
        """
        Run the shortest-path query for the current selection and apply styles.

        Path vertices and the exact edges traversed get the path styles; the
        start and end vertices keep their own styles on top. When there is
        no path the styles are left untouched.

        Returns:
            PathResult: The query result, also kept in ``last_result``.

        Raises:
            SelectionIncompleteError: If start or end is not selected.
        """
        if not self.selection.is_complete:
            raise SelectionIncompleteError(
                "Please select both a start and an end node."
            )

        start, end = self.selection.start, self.selection.end
        result = find_shortest_path(self.graph, start, end)
        self.last_result = result

        if not result.found:
            logger.warning(
                f"No path found from {self.graph.label(start)} "
                f"to {self.graph.label(end)}."
            )
            return result

        for e_id in result.edges:
            self.state.edge_styles[e_id] = self.config.path_edge_style
        for node in result.nodes:
            self.state.vertex_styles[node] = self.config.path_vertex_style
        self.state.vertex_styles[start] = self.config.start_style
        self.state.vertex_styles[end] = self.config.end_style

        logger.info(
            f"Path: {self.format_path(result)} "
            f"({self.config.format_cost(result.cost)} {self.config.distance_unit})"
        )
        return result

    def format_path(self, result: PathResult) -> str:
        """Return vertex labels joined by the configured separator."""
        return self.config.path_separator.join(result.labels(self.graph))

    def summary(self, result: PathResult) -> str:
        """
        Return the message shown to the user for a query result.

        Example::

            Result for A to D
            Total Distance: 5 km
            Path: A-C-D
        """
        if not result.found:
            return "No path found."
        return (
            f"Result for {self.graph.label(result.src_node)} "
            f"to {self.graph.label(result.dst_node)}\n"
            f"Total Distance: {self.config.format_cost(result.cost)} "
            f"{self.config.distance_unit}\n"
            f"Path: {self.format_path(result)}"
        )
