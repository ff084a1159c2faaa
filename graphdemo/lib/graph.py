from __future__ import annotations

import base64
import uuid
from typing import Any, Dict, Hashable, List, Optional, Set, Tuple

import networkx as nx

from graphdemo.lib.exceptions import InvalidEdgeError, UnknownVertexError


def new_base64_uuid() -> str:
    """
    Generate a Base64-encoded UUID without padding.

    Returns:
        str: A unique 22-character, URL-safe identifier.
    """
    # 16 bytes encode to 24 chars ending in '=='; drop the padding.
    return base64.urlsafe_b64encode(uuid.uuid4().bytes)[:-2].decode("ascii")


NodeID = Hashable
EdgeID = Hashable
AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class StrictMultiGraph(nx.MultiGraph):
    """
    An undirected multigraph with strict rules and graph-wide unique edge IDs.

    This class enforces:
      - No automatic creation of missing nodes when adding an edge.
      - No duplicate nodes (raising ValueError on duplicates).
      - No duplicate edges by key across the whole graph (ValueError).
      - Each edge key is unique; a Base64-UUID is generated if none is given.

    Parallel edges and self-loops are stored as given. Every node may carry a
    human-readable ``label`` attribute; labels need not be unique.

    The read interface used by path finding is ``vertices()``,
    ``incident_edges()`` and ``opposite()``.

    Inherits from:
        networkx.MultiGraph
    """

    def __init__(self, *args, **kwargs) -> None:
        """
        Initialize a StrictMultiGraph.

        Args:
            *args: Positional arguments forwarded to the MultiGraph constructor.
            **kwargs: Keyword arguments forwarded to the MultiGraph constructor.

        Attributes:
            _edges (Dict[EdgeID, EdgeTuple]): Maps an edge key to a tuple
                (first_endpoint, second_endpoint, edge_key, attribute_dict).
        """
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        super().__init__(*args, **kwargs)

    @staticmethod
    def new_edge_key(u: NodeID, v: NodeID) -> EdgeID:
        """
        Generate a unique edge key.

        Subclasses may override this to use, e.g., a numeric counter.

        Args:
            u (NodeID): One endpoint of the new edge.
            v (NodeID): The other endpoint of the new edge.

        Returns:
            EdgeID: The newly generated edge key.
        """
        return new_base64_uuid()

    #
    # Construction
    #
    def add_node(self, n: NodeID, **attr: Any) -> None:
        """
        Add a single node, disallowing duplicates.

        Args:
            n (NodeID): The node to add.
            **attr: Arbitrary attributes for this node.

        Raises:
            ValueError: If the node already exists in the graph.
        """
        if n in self:
            raise ValueError(f"Node '{n}' already exists in this graph.")
        super().add_node(n, **attr)

    def add_vertex(
        self, label: str, vertex_id: Optional[NodeID] = None, **attr: Any
    ) -> NodeID:
        """
        Add a labelled vertex and return its handle.

        Args:
            label (str): Human-readable name shown to users.
            vertex_id (Optional[NodeID]): Handle to use. A Base64-UUID is
                generated when omitted.
            **attr: Extra node attributes.

        Returns:
            NodeID: The handle of the new vertex.
        """
        if vertex_id is None:
            vertex_id = new_base64_uuid()
        self.add_node(vertex_id, label=label, **attr)
        return vertex_id

    def add_edge(
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """
        Add an undirected edge between u_for_edge and v_for_edge.

        Both endpoints must already exist; nodes are never created implicitly.

        Args:
            u_for_edge (NodeID): One endpoint. Must exist in the graph.
            v_for_edge (NodeID): The other endpoint. Must exist in the graph.
            key (Optional[EdgeID]): The unique edge key. If None, a new key
                is generated. Must not already be in use if provided.
            **attr: Arbitrary edge attributes, e.g. ``distance=5``.

        Returns:
            EdgeID: The key associated with this new edge.

        Raises:
            UnknownVertexError: If either endpoint does not exist.
            ValueError: If the key is already in use.
        """
        if u_for_edge not in self:
            raise UnknownVertexError(u_for_edge)
        if v_for_edge not in self:
            raise UnknownVertexError(v_for_edge)

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        elif key in self._edges:
            raise ValueError(f"Edge with id '{key}' already exists.")

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],
        )
        return key

    #
    # Removal
    #
    def remove_node(self, n: NodeID) -> None:
        """
        Remove a single node and all incident edges.

        Args:
            n (NodeID): The node to remove.

        Raises:
            UnknownVertexError: If the node does not exist in the graph.
        """
        if n not in self:
            raise UnknownVertexError(n)
        # Drop index entries for every edge that references this node
        to_delete = [
            e_id for e_id, (u, v, _, _) in self._edges.items() if u == n or v == n
        ]
        for e_id in to_delete:
            del self._edges[e_id]

        super().remove_node(n)

    def remove_edge(
        self,
        u: NodeID,
        v: NodeID,
        key: Optional[EdgeID] = None,
    ) -> None:
        """
        Remove an edge (or edges) between nodes u and v.

        If key is provided, remove only that edge. Otherwise, remove all edges
        joining u and v. Edges are undirected, so (u, v) and (v, u) match the
        same edges.

        Args:
            u (NodeID): One endpoint. Must exist in the graph.
            v (NodeID): The other endpoint. Must exist in the graph.
            key (Optional[EdgeID]): If provided, remove the edge with this key.

        Raises:
            UnknownVertexError: If either node does not exist.
            InvalidEdgeError: If the key does not exist or does not join u and
                v, or if no edges join u and v.
        """
        if u not in self:
            raise UnknownVertexError(u)
        if v not in self:
            raise UnknownVertexError(v)

        if key is not None:
            if key not in self._edges:
                raise InvalidEdgeError(
                    key, message=f"No edge with id='{key}' found between {u} and {v}."
                )
            src_node, dst_node, _, _ = self._edges[key]
            if {src_node, dst_node} != {u, v}:
                raise InvalidEdgeError(
                    key,
                    message=(
                        f"Edge with id='{key}' joins {src_node} and {dst_node}, "
                        f"not {u} and {v}."
                    ),
                )
            self.remove_edge_by_id(key)
        else:
            edge_ids = self.edges_between(u, v)
            if not edge_ids:
                raise InvalidEdgeError(
                    (u, v), message=f"No edges between '{u}' and '{v}' to remove."
                )
            for e_id in edge_ids:
                self.remove_edge_by_id(e_id)

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """
        Remove an edge by its unique key.

        Raises:
            InvalidEdgeError: If no edge with this key exists in the graph.
        """
        if key not in self._edges:
            raise InvalidEdgeError(key, message=f"Edge with id='{key}' not found.")
        u_node, v_node, _, _ = self._edges.pop(key)
        super().remove_edge(u_node, v_node, key=key)

    #
    # Read interface
    #
    def vertices(self) -> Set[NodeID]:
        """
        Return the set of all vertex handles.

        Returns:
            Set[NodeID]: Every node currently in the graph.
        """
        return set(self._adj)

    def incident_edges(self, v: NodeID) -> Set[EdgeID]:
        """
        Return the keys of all edges touching a vertex.

        A self-loop on ``v`` is reported once.

        Args:
            v (NodeID): The vertex to inspect.

        Returns:
            Set[EdgeID]: Keys of the edges incident to ``v``.

        Raises:
            UnknownVertexError: If ``v`` is not in the graph.
        """
        if v not in self._adj:
            raise UnknownVertexError(v)
        return {
            e_id for edges_map in self._adj[v].values() for e_id in edges_map
        }

    def opposite(self, v: NodeID, e: EdgeID) -> NodeID:
        """
        Return the endpoint of edge ``e`` that is not ``v``.

        For a self-loop on ``v`` the result is ``v`` itself.

        Args:
            v (NodeID): One endpoint of ``e``.
            e (EdgeID): An edge incident to ``v``.

        Returns:
            NodeID: The other endpoint.

        Raises:
            UnknownVertexError: If ``v`` is not in the graph.
            InvalidEdgeError: If ``e`` is unknown or does not touch ``v``.
        """
        if v not in self._adj:
            raise UnknownVertexError(v)
        if e not in self._edges:
            raise InvalidEdgeError(e, message=f"Edge with id='{e}' not found.")
        u_node, v_node, _, _ = self._edges[e]
        if v == u_node:
            return v_node
        if v == v_node:
            return u_node
        raise InvalidEdgeError(e, v)

    def endpoints(self, key: EdgeID) -> Tuple[NodeID, NodeID]:
        """
        Return both endpoints of an edge, in insertion order.

        Raises:
            InvalidEdgeError: If no edge with this key exists.
        """
        if key not in self._edges:
            raise InvalidEdgeError(key, message=f"Edge with id='{key}' not found.")
        u_node, v_node, _, _ = self._edges[key]
        return u_node, v_node

    def label(self, v: NodeID) -> str:
        """
        Return the display label of a vertex, falling back to ``str(v)``.

        Raises:
            UnknownVertexError: If ``v`` is not in the graph.
        """
        if v not in self._node:
            raise UnknownVertexError(v)
        return str(self._node[v].get("label", v))

    def find_vertices(self, label: str) -> List[NodeID]:
        """
        Return all vertices whose label equals ``label``, in insertion order.
        """
        return [n for n in self._node if self.label(n) == label]

    #
    # Convenience methods
    #
    def get_nodes(self) -> Dict[NodeID, AttrDict]:
        """
        Retrieve all nodes and their attributes as a dictionary.

        Returns:
            Dict[NodeID, AttrDict]: A mapping of node ID to its attributes.
        """
        return dict(self.nodes(data=True))

    def get_edges(self) -> Dict[EdgeID, EdgeTuple]:
        """
        Retrieve a dictionary of all edges by their keys.

        Returns:
            Dict[EdgeID, EdgeTuple]: A mapping of edge key to a tuple
                (first_endpoint, second_endpoint, edge_key, edge_attributes).
        """
        return self._edges

    def get_edge_attr(self, key: EdgeID) -> AttrDict:
        """
        Retrieve the attribute dictionary of a specific edge.

        Raises:
            InvalidEdgeError: If no edge with this key is found.
        """
        if key not in self._edges:
            raise InvalidEdgeError(key, message=f"Edge with id='{key}' not found.")
        return self._edges[key][3]

    def has_edge_by_id(self, key: EdgeID) -> bool:
        """Check whether an edge with the given key exists."""
        return key in self._edges

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """
        List all edge keys joining nodes u and v, in either direction.

        Returns:
            List[EdgeID]: The keys, or an empty list if the nodes are not adjacent.
        """
        if u not in self._adj or v not in self._adj[u]:
            return []
        return list(self._adj[u][v].keys())
