"""Strongly connected components (Kosaraju).

Pass one computes the full DFS postorder of the graph. Pass two runs DFS on
the transposed graph, launching from vertices in reverse postorder. Edges
between components point the other way in the transpose, so each launch in
pass two stays inside exactly one strongly connected component.
"""

from __future__ import annotations

from graphkit.algorithms.common import require_kind
from graphkit.algorithms.traversal import dfs_postorder, iter_dfs
from graphkit.algorithms.types import Components, DfsEvent
from graphkit.graph.graph import Graph, GraphKind
from graphkit.logging import get_logger

logger = get_logger(__name__)


def kosaraju_scc(graph: Graph) -> Components:
    """Find strongly connected components with Kosaraju's two-pass DFS.

    Args:
        graph: Directed graph.

    Returns:
        Dict of component id (0, 1, ... in discovery order) to member vertices
        in discovery order. Components come out in topological order of the
        condensed graph.

    Raises:
        InvalidStateError: If the graph is undirected.
    """
    require_kind(graph, GraphKind.DIRECTED, "kosaraju_scc")

    postorder = dfs_postorder(graph)
    postorder.reverse()

    components: Components = {}
    cc_id = -1
    for event, vertex, edge in iter_dfs(graph.transpose(), postorder):
        if event != DfsEvent.DISCOVER:
            continue
        if edge is None:
            cc_id += 1
            components[cc_id] = []
        components[cc_id].append(vertex)

    logger.debug("Found %d strongly connected component(s)", len(components))
    return components
