"""Configuration classes for graphdemo components."""

from dataclasses import dataclass
from typing import Any


@dataclass
class PathFinderConfig:
    """Defaults for shortest-path queries."""

    # Edge attribute holding the non-negative edge weight
    weight_attr: str = "distance"

    # Stop the search once the end vertex has been finalized
    stop_at_end: bool = True

    # Reject missing, negative or NaN weights before searching
    validate_weights: bool = True


@dataclass
class HighlightConfig:
    """Style class names and text formatting for path highlighting."""

    vertex_style: str = "vertex"
    edge_style: str = "edge"
    start_style: str = "highlightStartVertex"
    end_style: str = "highlightEndVertex"
    path_vertex_style: str = "highlightPathVertex"
    path_edge_style: str = "highlightPathEdge"

    distance_unit: str = "km"
    path_separator: str = "-"
    cost_precision: int = 3

    def format_cost(self, value: Any) -> str:
        """Return a cost with up to ``cost_precision`` decimals.

        Trailing zeros and a dangling decimal point are removed, e.g.
        ``5.0 -> "5"`` and ``1234.50 -> "1234.5"``. Values float() cannot
        represent are returned via ``str``.
        """
        try:
            v = float(value)
        except (TypeError, ValueError, OverflowError):
            return str(value)

        s = f"{v:.{self.cost_precision}f}"
        if "." in s:
            s = s.rstrip("0").rstrip(".")
        return s


# Global configuration instances
PATH_CONFIG = PathFinderConfig()
HIGHLIGHT_CONFIG = HighlightConfig()
