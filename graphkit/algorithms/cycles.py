"""Cycle detection and bipartiteness checks.

Directed graphs: a cycle exists iff DFS meets a back edge, i.e. an edge into
a vertex that is still on the current traversal branch. Edges into finished
vertices (forward and cross edges) are not cycles.

Undirected graphs: every edge is stored in both directions, so the edge back
to the immediate tree parent must be skipped or every edge would look like a
2-cycle. Alternatively, union-find over deduplicated edges reports a cycle
when an edge joins two vertices that are already connected.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from graphkit.algorithms.common import require_kind
from graphkit.algorithms.traversal import iter_dfs
from graphkit.algorithms.types import DfsEvent, NodeID
from graphkit.disjoint_set import DisjointSet
from graphkit.graph.graph import Graph, GraphKind, dedup_edges
from graphkit.logging import get_logger

logger = get_logger(__name__)


def find_directed_cycle(graph: Graph) -> List[NodeID]:
    """Return the first directed cycle found by DFS, or ``[]``.

    Args:
        graph: Directed graph.

    Returns:
        Vertices ``[w, ..., v, w]`` where ``v -> w`` is the first back edge
        met; a self-loop on ``w`` yields ``[w, w]``.

    Raises:
        InvalidStateError: If the graph is undirected.
    """
    require_kind(graph, GraphKind.DIRECTED, "find_directed_cycle")

    ancestors: Set[NodeID] = set()
    parent: Dict[NodeID, NodeID] = {}
    for event, vertex, edge in iter_dfs(graph):
        if event == DfsEvent.DISCOVER:
            ancestors.add(vertex)
            if edge is not None:
                parent[vertex] = edge.src
        elif event == DfsEvent.FINISH:
            ancestors.discard(vertex)
        elif edge.dst in ancestors:
            # back edge vertex -> edge.dst closes a cycle
            head = edge.dst
            cycle = [vertex]
            node = vertex
            while node != head:
                node = parent[node]
                cycle.append(node)
            cycle.reverse()
            cycle.append(head)
            logger.debug("Directed cycle found: %s", cycle)
            return cycle
    return []


def has_directed_cycle(graph: Graph) -> bool:
    """Return True if the directed graph contains a cycle.

    Raises:
        InvalidStateError: If the graph is undirected.
    """
    return bool(find_directed_cycle(graph))


def has_undirected_cycle(graph: Graph) -> bool:
    """Return True if the undirected graph contains a cycle.

    Uses DFS, ignoring the edge that leads straight back to the vertex's tree
    parent.

    Raises:
        InvalidStateError: If the graph is directed.
    """
    require_kind(graph, GraphKind.UNDIRECTED, "has_undirected_cycle")

    ancestors: Set[NodeID] = set()
    parent: Dict[NodeID, NodeID] = {}
    for event, vertex, edge in iter_dfs(graph):
        if event == DfsEvent.DISCOVER:
            ancestors.add(vertex)
            if edge is not None:
                parent[vertex] = edge.src
        elif event == DfsEvent.FINISH:
            ancestors.discard(vertex)
        elif vertex in parent and parent[vertex] == edge.dst:
            continue
        elif edge.dst in ancestors:
            logger.debug("Undirected cycle closed by edge %s -> %s", vertex, edge.dst)
            return True
    return False


def union_find_has_cycle(graph: Graph) -> bool:
    """Detect a cycle with a single union-find pass over the stored edges.

    Edges are processed in stored order. Undirected graphs are deduplicated
    first so each edge is seen once. Directed graphs use every stored edge as
    is, which detects cycles of the underlying undirected structure.

    Returns:
        True as soon as an edge joins two already connected vertices.
    """
    edges = graph.all_edges()
    if graph.kind == GraphKind.UNDIRECTED:
        edges = dedup_edges(edges)

    uf = DisjointSet(graph.vertices())
    for edge in edges:
        if uf.connected(edge.src, edge.dst):
            logger.debug(
                "Edge %s -> %s joins a component to itself", edge.src, edge.dst
            )
            return True
        uf.union(edge.src, edge.dst)
    return False


def two_coloring(graph: Graph) -> Optional[Dict[NodeID, int]]:
    """Color vertices 1 / -1 so that every edge joins different colors.

    Each DFS tree starts at color 1 and children take the opposite color of
    their parent.

    Args:
        graph: Undirected graph.

    Returns:
        Vertex -> color mapping, or None if the graph is not bipartite.

    Raises:
        InvalidStateError: If the graph is directed.
    """
    require_kind(graph, GraphKind.UNDIRECTED, "two_coloring")

    color: Dict[NodeID, int] = {}
    for event, vertex, edge in iter_dfs(graph):
        if event == DfsEvent.DISCOVER:
            color[vertex] = 1 if edge is None else -color[edge.src]
        elif event == DfsEvent.NONTREE and color[vertex] == color[edge.dst]:
            logger.debug(
                "Edge %s -> %s joins equally colored vertices", vertex, edge.dst
            )
            return None
    return color


def is_bipartite(graph: Graph) -> bool:
    """Return True if the undirected graph admits a two-coloring.

    Raises:
        InvalidStateError: If the graph is directed.
    """
    return two_coloring(graph) is not None
