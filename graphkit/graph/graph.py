"""Adjacency-list weighted graph.

`Graph` keeps an ordered list of vertices and, per vertex, an ordered list of
outgoing `Edge` values. Insertion order is preserved everywhere so that every
traversal built on top of it is deterministic.

The graph kind is explicit. An ``UNDIRECTED`` graph stores every edge twice,
once per direction, which is the representation all undirected algorithms
expect. A ``DIRECTED`` graph stores edges exactly as added.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pickle import dumps, loads
from typing import Dict, Hashable, Iterable, Iterator, List, Tuple, Union

NodeID = Hashable
Weight = Union[int, float]
EdgeLike = Union["Edge", Tuple[NodeID, NodeID], Tuple[NodeID, NodeID, Weight]]


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``src`` to ``dst``.

    Edges have no identity beyond their endpoints and weight. For undirected
    use the same logical edge is stored once in each direction.

    Attributes:
        src: Source vertex.
        dst: Destination vertex.
        weight: Edge weight (int or float).
    """

    src: NodeID
    dst: NodeID
    weight: Weight = 1

    def reversed(self) -> Edge:
        """Return the edge with source and destination swapped."""
        return Edge(self.dst, self.src, self.weight)

    def equal(self, other: Edge) -> bool:
        """Return True if both edges join the same pair of vertices.

        The comparison ignores direction and weight, so ``(v, w)`` equals
        ``(w, v)``.
        """
        return (self.src == other.src and self.dst == other.dst) or (
            self.src == other.dst and self.dst == other.src
        )


def dedup_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Drop repeated undirected edges, keeping the first one seen.

    Two edges are repeats when they join the same unordered vertex pair, even
    if their weights differ.

    Args:
        edges: Edges in the order they should be considered.

    Returns:
        Edges with later repeats removed, original order preserved.
    """
    seen = set()
    result: List[Edge] = []
    for edge in edges:
        key = frozenset((edge.src, edge.dst))
        if key in seen:
            continue
        seen.add(key)
        result.append(edge)
    return result


class GraphKind(IntEnum):
    """Whether edges are one-way or stored in both directions."""

    DIRECTED = 1
    UNDIRECTED = 2


class Graph:
    """
    Weighted multigraph backed by adjacency lists.

    Vertices can be any hashable object. Adding an edge registers both of its
    endpoints, so every edge endpoint is always a known vertex. Parallel edges
    are allowed: adding the same edge twice stores it twice.

    Algorithms treat a Graph as read-only. Operations that derive a new graph,
    such as ``transpose``, return a fresh instance.

    Attributes:
        _kind: DIRECTED or UNDIRECTED.
        _vertices: vertices in first-seen order, used as an ordered set.
        _adj: outgoing edges per vertex, in insertion order.
    """

    def __init__(self, kind: GraphKind = GraphKind.DIRECTED) -> None:
        self._kind: GraphKind = GraphKind(kind)
        self._vertices: Dict[NodeID, None] = {}
        self._adj: Dict[NodeID, List[Edge]] = {}

    def __contains__(self, vertex: NodeID) -> bool:
        return vertex in self._vertices

    def __iter__(self) -> Iterator[NodeID]:
        return iter(self._vertices)

    def __len__(self) -> int:
        """Return the number of vertices."""
        return len(self._vertices)

    def __repr__(self) -> str:
        return (
            f"Graph(kind={self._kind.name}, vertices={len(self)}, "
            f"edges={self.num_edges()})"
        )

    @property
    def kind(self) -> GraphKind:
        return self._kind

    def is_directed(self) -> bool:
        return self._kind == GraphKind.DIRECTED

    def copy(self) -> Graph:
        """
        Make a deep copy of the graph and return it.
        Pickle is used for performance reasons.
        """
        return loads(dumps(self))

    def add_vertex(self, vertex: NodeID) -> None:
        """
        Add a single vertex. If the vertex is present - do nothing.
        Args:
            vertex: vertex identifier. Can be any hashable Python object.
        """
        if vertex not in self._vertices:
            self._vertices[vertex] = None
            self._adj[vertex] = []

    def add_edge(self, edge: Edge) -> None:
        """
        Add an edge, registering its endpoints as vertices if needed.
        Undirected graphs also store the reversed edge.
        Args:
            edge: the edge to append to its source's adjacency list.
        """
        self._append(edge)
        if self._kind == GraphKind.UNDIRECTED:
            self._append(edge.reversed())

    def add_edges_from(self, edges: Iterable[EdgeLike]) -> None:
        """
        Add several edges.
        Args:
            edges: Edge objects or (src, dst) / (src, dst, weight) tuples.
        """
        for item in edges:
            if isinstance(item, Edge):
                self.add_edge(item)
            else:
                self.add_edge(Edge(*item))

    def _append(self, edge: Edge) -> None:
        self.add_vertex(edge.src)
        self.add_vertex(edge.dst)
        self._adj[edge.src].append(edge)

    def vertices(self) -> List[NodeID]:
        """Return all vertices in the order they were first added."""
        return list(self._vertices)

    def edges(self, vertex: NodeID) -> List[Edge]:
        """
        Return outgoing edges of a vertex in insertion order.
        Unknown vertices have no edges, so an empty list is returned.
        """
        return list(self._adj.get(vertex, ()))

    def all_edges(self) -> List[Edge]:
        """
        Return every stored edge, vertex by vertex.
        For undirected graphs both directions of each edge are included;
        use ``dedup_edges`` to get one entry per vertex pair.

        Vertices are walked in insertion order, not sorted by id, and each
        vertex's edges follow in insertion order. This order decides which
        parallel edge ``dedup_edges`` keeps, and so what Kruskal and the
        union-find cycle check see.
        """
        result: List[Edge] = []
        for vertex in self._vertices:
            result.extend(self._adj[vertex])
        return result

    def num_edges(self) -> int:
        """Return the number of stored (directed) edges."""
        return sum(len(edges) for edges in self._adj.values())

    def transpose(self) -> Graph:
        """
        Return a new graph of the same kind with every stored edge reversed.
        All vertices, including isolated ones, keep their order.
        """
        transposed = Graph(self._kind)
        for vertex in self._vertices:
            transposed.add_vertex(vertex)
        for edge in self.all_edges():
            transposed._append(edge.reversed())
        return transposed
