"""Connected components of undirected graphs.

Two equivalent constructions are provided: one DFS launch per component, and
a union-find pass over all edges. Both partition every vertex of the graph;
their component keys differ.
"""

from __future__ import annotations

from graphkit.algorithms.common import require_kind
from graphkit.algorithms.traversal import iter_dfs
from graphkit.algorithms.types import Components, DfsEvent
from graphkit.disjoint_set import DisjointSet
from graphkit.graph.graph import Graph, GraphKind
from graphkit.logging import get_logger

logger = get_logger(__name__)


def dfs_connected_components(graph: Graph) -> Components:
    """Find connected components with one DFS launch per component.

    Args:
        graph: Undirected graph.

    Returns:
        Dict of component id (0, 1, ... in launch order) to member vertices in
        discovery order.

    Raises:
        InvalidStateError: If the graph is directed.
    """
    require_kind(graph, GraphKind.UNDIRECTED, "dfs_connected_components")

    components: Components = {}
    cc_id = -1
    for event, vertex, edge in iter_dfs(graph):
        if event != DfsEvent.DISCOVER:
            continue
        if edge is None:
            cc_id += 1
            components[cc_id] = []
        components[cc_id].append(vertex)

    logger.debug("Found %d connected component(s) via DFS", len(components))
    return components


def union_find_connected_components(graph: Graph) -> Components:
    """Find connected components by unioning the endpoints of every edge.

    Args:
        graph: Undirected graph.

    Returns:
        Dict of root vertex to member vertices in graph order.

    Raises:
        InvalidStateError: If the graph is directed.
    """
    require_kind(graph, GraphKind.UNDIRECTED, "union_find_connected_components")

    uf = DisjointSet(graph.vertices())
    for edge in graph.all_edges():
        uf.union(edge.src, edge.dst)

    components: Components = {}
    for vertex in graph.vertices():
        components.setdefault(uf.find(vertex), []).append(vertex)

    logger.debug("Found %d connected component(s) via union-find", len(components))
    return components
