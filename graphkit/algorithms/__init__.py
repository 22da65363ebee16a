"""Graph algorithms built on `Graph`, `DisjointSet` and the traversal primitives."""

from graphkit.algorithms.components import (
    dfs_connected_components,
    union_find_connected_components,
)
from graphkit.algorithms.cycles import (
    find_directed_cycle,
    has_directed_cycle,
    has_undirected_cycle,
    is_bipartite,
    two_coloring,
    union_find_has_cycle,
)
from graphkit.algorithms.mst import (
    kruskal_maximum_spanning_tree,
    kruskal_mst,
    prim_mst,
    spanning_weight,
)
from graphkit.algorithms.paths import path_from_last_table, path_from_parents
from graphkit.algorithms.scc import kosaraju_scc
from graphkit.algorithms.shortest_paths import (
    bellman_ford,
    bfs_shortest_path,
    dijkstra,
    floyd_warshall,
)
from graphkit.algorithms.topological import (
    dfs_topological_sort,
    kahn_topological_sort,
)
from graphkit.algorithms.traversal import (
    breadth_first_search,
    depth_first_search,
    dfs_postorder,
    iter_bfs,
    iter_dfs,
)
from graphkit.algorithms.types import (
    AllPairsShortestPaths,
    BfsResult,
    DfsEvent,
    DfsResult,
    ShortestPaths,
)

__all__ = [
    # Traversal
    "iter_dfs",
    "iter_bfs",
    "depth_first_search",
    "breadth_first_search",
    "dfs_postorder",
    # Connectivity
    "dfs_connected_components",
    "union_find_connected_components",
    "kosaraju_scc",
    # Cycles
    "find_directed_cycle",
    "has_directed_cycle",
    "has_undirected_cycle",
    "union_find_has_cycle",
    "two_coloring",
    "is_bipartite",
    # Ordering
    "dfs_topological_sort",
    "kahn_topological_sort",
    # Spanning trees
    "kruskal_mst",
    "kruskal_maximum_spanning_tree",
    "prim_mst",
    "spanning_weight",
    # Shortest paths
    "bfs_shortest_path",
    "dijkstra",
    "bellman_ford",
    "floyd_warshall",
    "path_from_parents",
    "path_from_last_table",
    # Results
    "DfsEvent",
    "DfsResult",
    "BfsResult",
    "ShortestPaths",
    "AllPairsShortestPaths",
]
