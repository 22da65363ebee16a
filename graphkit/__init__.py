"""graphkit: weighted graphs, union-find and classical graph algorithms.

Primary API:
    Graph, Edge, GraphKind - adjacency-list weighted graph
    DisjointSet - union-find with path compression and union by rank
    graphkit.algorithms - traversal, connectivity, cycles, topological sort,
        spanning trees, shortest paths and strongly connected components
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from graphkit import Edge, Graph, GraphKind
    from graphkit.algorithms import dijkstra, kruskal_mst

    g = Graph(GraphKind.UNDIRECTED)
    g.add_edges_from([(0, 1, 4), (0, 2, 1), (2, 1, 2)])

    result = dijkstra(g, 0, 1)
    result.distance  # 3
    result.path()  # [0, 2, 1]

    mst = kruskal_mst(g)
"""

from __future__ import annotations

from graphkit import algorithms, logging
from graphkit._version import __version__
from graphkit.config import DISTANCE_CONFIG, DistanceConfig
from graphkit.disjoint_set import DisjointSet
from graphkit.errors import InvalidStateError, VertexNotFoundError
from graphkit.graph.convert import from_networkx, to_networkx
from graphkit.graph.graph import Edge, Graph, GraphKind, dedup_edges

__all__ = [
    # Version
    "__version__",
    # Structures
    "Graph",
    "Edge",
    "GraphKind",
    "DisjointSet",
    "dedup_edges",
    # Configuration
    "DistanceConfig",
    "DISTANCE_CONFIG",
    # Errors
    "VertexNotFoundError",
    "InvalidStateError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Subpackages
    "algorithms",
    "logging",
]
