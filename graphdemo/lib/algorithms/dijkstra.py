from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Sequence, Tuple

from graphdemo.config import PATH_CONFIG
from graphdemo.lib.algorithms.base import INF, Cost, validate_weights
from graphdemo.lib.exceptions import InvalidEdgeError, UnknownVertexError
from graphdemo.lib.graph import EdgeID, NodeID, StrictMultiGraph
from graphdemo.lib.path import PathResult


def spf(
    graph: StrictMultiGraph,
    src_node: NodeID,
    dst_node: Optional[NodeID] = None,
    weight_attr: Optional[str] = None,
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, Tuple[NodeID, EdgeID]]]:
    """
    Compute shortest-path costs from a source node using Dijkstra's algorithm.

    The frontier is a binary heap without decrease-key: an improved vertex is
    pushed again and stale entries are skipped on pop. Every incident edge is
    relaxed on its own, so among parallel edges the lightest one wins. Ties
    between equal-cost entries are broken by insertion order, which keeps the
    result deterministic for an unmodified graph.

    Weights are not validated here; callers must guarantee they are
    non-negative (see ``find_shortest_path``).

    Args:
        graph: The undirected graph (StrictMultiGraph).
        src_node: The source node from which to compute shortest paths.
        dst_node: If given, stop as soon as this node is finalized.
        weight_attr: Edge attribute holding the weight. Defaults to
            ``PATH_CONFIG.weight_attr``.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reached node to its best known cost from src_node.
            With ``dst_node`` set, only ``dst_node`` and nodes popped before
            it are guaranteed final.
          - pred: For each reached node other than src_node, the
            (predecessor, edge_id) it was reached through.

    Raises:
        UnknownVertexError: If src_node (or dst_node, when given) is not in
            the graph.
    """
    if weight_attr is None:
        weight_attr = PATH_CONFIG.weight_attr

    adjacencies = graph._adj
    if src_node not in adjacencies:
        raise UnknownVertexError(src_node)
    if dst_node is not None and dst_node not in adjacencies:
        raise UnknownVertexError(dst_node)

    costs: Dict[NodeID, Cost] = {src_node: 0}
    pred: Dict[NodeID, Tuple[NodeID, EdgeID]] = {}
    seq = count()
    min_pq: List[Tuple[Cost, int, NodeID]] = [(0, next(seq), src_node)]

    while min_pq:
        current_cost, _, node_id = heappop(min_pq)
        if current_cost > costs[node_id]:
            continue
        if node_id == dst_node:
            break

        for neighbor_id, edges_map in adjacencies[node_id].items():
            for e_id, e_attr in edges_map.items():
                new_cost = current_cost + e_attr[weight_attr]
                if new_cost < costs.get(neighbor_id, INF):
                    costs[neighbor_id] = new_cost
                    pred[neighbor_id] = (node_id, e_id)
                    heappush(min_pq, (new_cost, next(seq), neighbor_id))

    return costs, pred


def resolve_path(
    src_node: NodeID,
    dst_node: NodeID,
    costs: Dict[NodeID, Cost],
    pred: Dict[NodeID, Tuple[NodeID, EdgeID]],
) -> PathResult:
    """
    Rebuild the path to dst_node by walking predecessors back to src_node.

    Returns:
        The path with its cost, or ``PathResult.no_path()`` when dst_node was
        never reached.
    """
    if dst_node == src_node:
        return PathResult(nodes=(src_node,), edges=(), cost=0)
    if dst_node not in pred:
        return PathResult.no_path()

    nodes: List[NodeID] = [dst_node]
    edges: List[EdgeID] = []
    node_id = dst_node
    while node_id != src_node:
        node_id, e_id = pred[node_id]
        nodes.append(node_id)
        edges.append(e_id)

    nodes.reverse()
    edges.reverse()
    return PathResult(nodes=tuple(nodes), edges=tuple(edges), cost=costs[dst_node])


def find_shortest_path(
    graph: StrictMultiGraph,
    start: NodeID,
    end: NodeID,
    weight_attr: Optional[str] = None,
) -> PathResult:
    """
    Find a minimum-weight path between two vertices.

    Args:
        graph: The graph to search. It must not change during the call.
        start: The start vertex.
        end: The end vertex.
        weight_attr: Edge attribute holding the weight. Defaults to
            ``PATH_CONFIG.weight_attr``.

    Returns:
        PathResult: ``(start, ..., end)`` with its total weight; the single
        vertex path with cost 0 when start == end; or the "no path" result
        when end is unreachable.

    Raises:
        UnknownVertexError: If start or end is not in the graph.
        InvalidEdgeError: If an edge lacks a numeric weight (when validation
            is enabled).
        NegativeWeightError: If an edge weight is negative or NaN (when
            validation is enabled).
    """
    if weight_attr is None:
        weight_attr = PATH_CONFIG.weight_attr

    for vertex in (start, end):
        if vertex not in graph:
            raise UnknownVertexError(vertex)

    if PATH_CONFIG.validate_weights:
        validate_weights(graph, weight_attr)

    costs, pred = spf(
        graph,
        start,
        dst_node=end if PATH_CONFIG.stop_at_end else None,
        weight_attr=weight_attr,
    )
    return resolve_path(start, end, costs, pred)


def path_cost(
    graph: StrictMultiGraph,
    nodes: Sequence[NodeID],
    edges: Sequence[EdgeID],
    weight_attr: Optional[str] = None,
) -> Cost:
    """
    Sum the weights along a path after checking that it is well formed.

    Args:
        graph: The graph the path belongs to.
        nodes: Vertices in path order.
        edges: ``edges[i]`` must join ``nodes[i]`` and ``nodes[i + 1]``.
        weight_attr: Edge attribute holding the weight.

    Returns:
        The total weight; 0 for a single-vertex path.

    Raises:
        ValueError: If the edge count does not match the node count.
        UnknownVertexError: If a node is not in the graph.
        InvalidEdgeError: If an edge does not join its consecutive pair.
    """
    if weight_attr is None:
        weight_attr = PATH_CONFIG.weight_attr
    if nodes and len(edges) != len(nodes) - 1:
        raise ValueError(
            f"A path with {len(nodes)} nodes needs {len(nodes) - 1} edges, "
            f"got {len(edges)}."
        )

    total: Cost = 0
    for idx, e_id in enumerate(edges):
        node_id, next_id = nodes[idx], nodes[idx + 1]
        if graph.opposite(node_id, e_id) != next_id:
            raise InvalidEdgeError(
                e_id,
                message=f"Edge with id='{e_id}' does not join '{node_id}' and '{next_id}'.",
            )
        total += graph.get_edge_attr(e_id)[weight_attr]
    return total
