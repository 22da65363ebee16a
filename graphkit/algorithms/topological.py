"""Topological sorting of directed acyclic graphs.

Both variants return an empty list when the graph has a cycle, since no
topological order exists. The two variants may return different (equally
valid) orders for the same graph.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List

from graphkit.algorithms.common import require_kind
from graphkit.algorithms.cycles import has_directed_cycle
from graphkit.algorithms.traversal import dfs_postorder
from graphkit.algorithms.types import NodeID
from graphkit.graph.graph import Graph, GraphKind
from graphkit.logging import get_logger

logger = get_logger(__name__)


def dfs_topological_sort(graph: Graph) -> List[NodeID]:
    """Topological order as the reverse of the full DFS postorder.

    A vertex finishes only after everything reachable from it has finished,
    so reversing the finish order puts every edge source before its target.

    Args:
        graph: Directed graph.

    Returns:
        Vertices in topological order, or ``[]`` if the graph is cyclic.

    Raises:
        InvalidStateError: If the graph is undirected.
    """
    require_kind(graph, GraphKind.DIRECTED, "dfs_topological_sort")
    if has_directed_cycle(graph):
        logger.debug("Graph is cyclic; no topological order")
        return []

    order = dfs_postorder(graph)
    order.reverse()
    return order


def kahn_topological_sort(graph: Graph) -> List[NodeID]:
    """Topological order via Kahn's indegree-driven BFS.

    Zero-indegree vertices are queued in graph vertex order. Each dequeued
    vertex is emitted and decrements the indegree of its successors; those
    that reach zero are queued.

    Args:
        graph: Directed graph.

    Returns:
        Vertices in topological order, or ``[]`` if some vertices never reach
        zero indegree (the graph is cyclic).

    Raises:
        InvalidStateError: If the graph is undirected.
    """
    require_kind(graph, GraphKind.DIRECTED, "kahn_topological_sort")

    indegree: Dict[NodeID, int] = {vertex: 0 for vertex in graph.vertices()}
    for edge in graph.all_edges():
        indegree[edge.dst] += 1

    queue = deque(vertex for vertex, degree in indegree.items() if degree == 0)
    order: List[NodeID] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for edge in graph.edges(vertex):
            indegree[edge.dst] -= 1
            if indegree[edge.dst] == 0:
                queue.append(edge.dst)

    if len(order) < len(graph):
        logger.debug(
            "Kahn sort emitted %d of %d vertices; graph is cyclic",
            len(order),
            len(graph),
        )
        return []
    return order
