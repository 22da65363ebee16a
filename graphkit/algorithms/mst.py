"""Minimum and maximum spanning trees.

Kruskal scans deduplicated edges sorted by weight and keeps every edge that
joins two separate union-find components. Prim grows a single tree from the
first vertex, always taking the lightest edge that leaves it.

Both return a new undirected Graph containing every input vertex. On a
disconnected input Kruskal yields a spanning forest of all components while
Prim only spans the component of its start vertex.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import List, Set, Tuple

from graphkit.algorithms.common import require_kind
from graphkit.algorithms.types import Cost, NodeID
from graphkit.disjoint_set import DisjointSet
from graphkit.errors import InvalidStateError
from graphkit.graph.graph import Edge, Graph, GraphKind, dedup_edges
from graphkit.logging import get_logger

logger = get_logger(__name__)


def _empty_tree(graph: Graph, algorithm: str) -> Graph:
    require_kind(graph, GraphKind.UNDIRECTED, algorithm)
    if not len(graph):
        raise InvalidStateError(f"{algorithm} is undefined on an empty graph.")

    tree = Graph(GraphKind.UNDIRECTED)
    for vertex in graph.vertices():
        tree.add_vertex(vertex)
    return tree


def kruskal_mst(graph: Graph, maximum: bool = False) -> Graph:
    """Kruskal spanning tree.

    Ties between equal weights keep the original edge order (the sort is
    stable in both directions).

    Args:
        graph: Undirected graph; should be connected.
        maximum: Sort by descending weight to build a maximum spanning tree.

    Returns:
        Undirected Graph holding the accepted edges and all vertices.

    Raises:
        InvalidStateError: If the graph is directed or empty.
    """
    tree = _empty_tree(graph, "kruskal_mst")

    edges = sorted(
        dedup_edges(graph.all_edges()), key=lambda e: e.weight, reverse=maximum
    )
    uf = DisjointSet(graph.vertices())
    for edge in edges:
        if not uf.connected(edge.src, edge.dst):
            tree.add_edge(edge)
            uf.union(edge.src, edge.dst)

    if uf.component_count() > 1:
        logger.debug(
            "Input has %d components; returning a spanning forest",
            uf.component_count(),
        )
    return tree


def kruskal_maximum_spanning_tree(graph: Graph) -> Graph:
    """Kruskal maximum spanning tree. See ``kruskal_mst``."""
    return kruskal_mst(graph, maximum=True)


def prim_mst(graph: Graph) -> Graph:
    """Prim minimum spanning tree grown from the first vertex.

    Candidate edges sit in a min-heap keyed by weight, with insertion order
    breaking ties. Parallel edges are not deduplicated, so the lightest one
    between two vertices wins, whereas Kruskal keeps the first stored one.

    Args:
        graph: Undirected graph; should be connected.

    Returns:
        Undirected Graph holding the accepted edges and all vertices.

    Raises:
        InvalidStateError: If the graph is directed or empty.
    """
    tree = _empty_tree(graph, "prim_mst")

    src = graph.vertices()[0]
    seq = count()
    min_pq: List[Tuple[Cost, int, Edge]] = []
    for edge in graph.edges(src):
        heappush(min_pq, (edge.weight, next(seq), edge))
    visited: Set[NodeID] = {src}

    while min_pq:
        _, _, edge = heappop(min_pq)
        if edge.dst in visited:
            continue
        tree.add_edge(edge)
        visited.add(edge.dst)
        for next_edge in graph.edges(edge.dst):
            if next_edge.dst not in visited:
                heappush(min_pq, (next_edge.weight, next(seq), next_edge))

    if len(visited) < len(graph):
        logger.debug(
            "Prim spanned %d of %d vertices from '%s'",
            len(visited),
            len(graph),
            src,
        )
    return tree


def spanning_weight(tree: Graph) -> Cost:
    """Total weight of an undirected tree or forest, each edge counted once."""
    require_kind(tree, GraphKind.UNDIRECTED, "spanning_weight")
    return sum(edge.weight for edge in dedup_edges(tree.all_edges()))
