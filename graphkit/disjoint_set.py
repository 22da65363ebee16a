"""Disjoint-set (union-find) structure.

The partition is kept as a forest: each tree is one component and its root
is the component representative. ``find`` compresses the path it walks so
every visited vertex ends up linked directly to the root. ``union`` merges by
rank so a merged tree grows by at most one level.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Optional

from graphkit.errors import InvalidStateError, VertexNotFoundError

NodeID = Hashable


class DisjointSet:
    """Union-find with path compression and union by rank.

    Attributes:
        _parent: Maps each vertex to its parent; roots map to themselves.
        _rank: Upper bound on tree height, meaningful for roots only.
        _count: Current number of disjoint trees.
    """

    def __init__(self, vertices: Optional[Iterable[NodeID]] = None) -> None:
        self._parent: Dict[NodeID, NodeID] = {}
        self._rank: Dict[NodeID, int] = {}
        self._count: int = 0
        if vertices is not None:
            for vertex in vertices:
                self.add_vertex(vertex)

    def __contains__(self, vertex: NodeID) -> bool:
        return vertex in self._parent

    def __len__(self) -> int:
        """Return the number of tracked vertices."""
        return len(self._parent)

    def add_vertex(self, vertex: NodeID) -> None:
        """Add ``vertex`` as a singleton component of rank 1.

        Raises:
            InvalidStateError: If the vertex is already tracked.
        """
        if vertex in self._parent:
            raise InvalidStateError(
                f"Vertex '{vertex}' already exists in this disjoint set."
            )
        self._parent[vertex] = vertex
        self._rank[vertex] = 1
        self._count += 1

    def find(self, vertex: NodeID) -> NodeID:
        """Return the root of the tree containing ``vertex``.

        Every vertex on the walked path is relinked directly to the root.

        Raises:
            VertexNotFoundError: If the vertex was never added.
        """
        if vertex not in self._parent:
            raise VertexNotFoundError(f"Vertex '{vertex}' does not exist.")

        parent = self._parent
        root = vertex
        while parent[root] != root:
            root = parent[root]

        while vertex != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    def union(self, v: NodeID, w: NodeID) -> None:
        """Merge the components containing ``v`` and ``w``.

        The lower-rank root goes under the higher-rank root. On equal ranks
        ``v``'s root goes under ``w``'s root and that root's rank grows by one.
        Merging already connected vertices does nothing.

        Raises:
            VertexNotFoundError: If either vertex was never added.
        """
        root_v = self.find(v)
        root_w = self.find(w)
        if root_v == root_w:
            return

        rank_v = self._rank[root_v]
        rank_w = self._rank[root_w]
        if rank_v <= rank_w:
            self._parent[root_v] = root_w
            if rank_v == rank_w:
                self._rank[root_w] += 1
        else:
            self._parent[root_w] = root_v
        self._count -= 1

    def connected(self, v: NodeID, w: NodeID) -> bool:
        """Return True if ``v`` and ``w`` share a component."""
        return self.find(v) == self.find(w)

    def component_count(self) -> int:
        return self._count

    def rank(self, vertex: NodeID) -> int:
        """Return the stored rank of ``vertex``.

        Raises:
            VertexNotFoundError: If the vertex was never added.
        """
        if vertex not in self._rank:
            raise VertexNotFoundError(f"Vertex '{vertex}' does not exist.")
        return self._rank[vertex]

    def groups(self) -> Dict[NodeID, List[NodeID]]:
        """Group all vertices by their root, in vertex insertion order."""
        result: Dict[NodeID, List[NodeID]] = {}
        for vertex in list(self._parent):
            result.setdefault(self.find(vertex), []).append(vertex)
        return result
