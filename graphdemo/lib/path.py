from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Tuple

from graphdemo.lib.algorithms.base import INF, Cost
from graphdemo.lib.graph import EdgeID, NodeID, StrictMultiGraph


@dataclass(frozen=True)
class PathResult:
    """
    Outcome of a shortest-path query.

    A found path lists its vertices from start to end, together with the key
    of the edge taken between each consecutive pair. A query for which no
    path exists yields the "no path" state: no vertices, no edges, and an
    infinite cost. This is distinct from the zero-length path ``(start,)``
    with cost 0 returned when start and end coincide.

    Attributes:
        nodes (Tuple[NodeID, ...]):
            Vertices from start to end, or empty when there is no path.
        edges (Tuple[EdgeID, ...]):
            ``edges[i]`` joins ``nodes[i]`` and ``nodes[i + 1]``.
        cost (Cost):
            Sum of the weights of ``edges``; ``inf`` when there is no path.
    """

    nodes: Tuple[NodeID, ...]
    edges: Tuple[EdgeID, ...]
    cost: Cost

    def __post_init__(self) -> None:
        if self.nodes and len(self.edges) != len(self.nodes) - 1:
            raise ValueError(
                f"A path with {len(self.nodes)} nodes needs {len(self.nodes) - 1} "
                f"edges, got {len(self.edges)}."
            )
        if not self.nodes and self.edges:
            raise ValueError("An empty path cannot carry edges.")

    @classmethod
    def no_path(cls) -> PathResult:
        """Return the result signalling that end is unreachable from start."""
        return cls(nodes=(), edges=(), cost=INF)

    @property
    def found(self) -> bool:
        """True when a path (possibly of length zero) exists."""
        return bool(self.nodes)

    @property
    def src_node(self) -> NodeID:
        """Return the first node in the path (the start vertex)."""
        if not self.nodes:
            raise ValueError("No path was found.")
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeID:
        """Return the last node in the path (the end vertex)."""
        if not self.nodes:
            raise ValueError("No path was found.")
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Number of edges traversed."""
        return len(self.edges)

    def steps(self) -> Iterator[Tuple[NodeID, EdgeID, NodeID]]:
        """Yield ``(node, edge, next_node)`` for each traversed edge."""
        for idx, edge in enumerate(self.edges):
            yield self.nodes[idx], edge, self.nodes[idx + 1]

    def labels(self, graph: StrictMultiGraph) -> List[str]:
        """Return the display labels of the path's vertices, in order."""
        return [graph.label(node) for node in self.nodes]

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __bool__(self) -> bool:
        return self.found

    def __lt__(self, other: Any) -> bool:
        """
        Order results by cost; "no path" sorts after every found path.
        """
        if not isinstance(other, PathResult):
            return NotImplemented
        return self.cost < other.cost
