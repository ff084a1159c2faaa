from __future__ import annotations

import math
from typing import Union

from graphdemo.lib.exceptions import InvalidEdgeError, NegativeWeightError
from graphdemo.lib.graph import StrictMultiGraph

#: Represents numeric cost in the graph (e.g. distance in km).
Cost = Union[int, float]

#: Cost of an unreachable vertex.
INF: float = math.inf


def validate_weights(graph: StrictMultiGraph, weight_attr: str) -> None:
    """
    Check that every edge carries a finite, non-negative weight.

    Dijkstra's algorithm returns wrong answers on negative weights, so these
    are rejected before any search starts.

    Args:
        graph: The graph to check.
        weight_attr: Name of the edge attribute holding the weight.

    Raises:
        InvalidEdgeError: If an edge has no ``weight_attr`` attribute or the
            value is not numeric.
        NegativeWeightError: If a weight is negative or NaN.
    """
    for e_id, (_, _, _, e_attr) in graph.get_edges().items():
        if weight_attr not in e_attr:
            raise InvalidEdgeError(
                e_id, message=f"Edge with id='{e_id}' has no '{weight_attr}' attribute."
            )
        weight = e_attr[weight_attr]
        # Compare the raw value; float() overflows on very large ints
        try:
            non_negative = bool(weight >= 0)
        except TypeError:
            raise InvalidEdgeError(
                e_id,
                message=f"Edge with id='{e_id}' has non-numeric weight {weight!r}.",
            ) from None
        # NaN fails every comparison, so test the positive condition
        if not non_negative:
            raise NegativeWeightError(e_id, weight)
