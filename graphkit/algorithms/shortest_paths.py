"""Single-source and all-pairs shortest paths.

Implements:
  - ``bfs_shortest_path``: unweighted (every edge counts as 1).
  - ``dijkstra``: non-negative weights. Negative weights are not detected and
    give undefined results.
  - ``bellman_ford``: arbitrary weights, reports reachable negative cycles.
  - ``floyd_warshall``: all pairs, arbitrary weights, reports negative cycles.

Notes:
    Distances start at the ``DistanceConfig.infinity`` sentinel, and all
    accumulation goes through ``DistanceConfig.add``, which saturates at the
    sentinel. An unreachable vertex therefore never relaxes its neighbours.

    A negative cycle is an expected outcome, not an error: results carry
    ``negative_cycle=True`` and report no distances or paths.
"""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from graphkit.algorithms.types import (
    AllPairsShortestPaths,
    Cost,
    NodeID,
    ShortestPaths,
)
from graphkit.algorithms.traversal import iter_bfs
from graphkit.config import DISTANCE_CONFIG, DistanceConfig
from graphkit.errors import VertexNotFoundError
from graphkit.graph.graph import Graph
from graphkit.logging import get_logger

logger = get_logger(__name__)


def _check_source(graph: Graph, src_node: NodeID) -> None:
    if src_node not in graph:
        raise VertexNotFoundError(f"Source node '{src_node}' is not in the graph.")


def _init_distances(
    graph: Graph, src_node: NodeID, config: DistanceConfig
) -> Dict[NodeID, Cost]:
    distances: Dict[NodeID, Cost] = {v: config.infinity for v in graph.vertices()}
    distances[src_node] = 0
    return distances


def bfs_shortest_path(
    graph: Graph,
    src_node: NodeID,
    dst_node: NodeID,
    config: DistanceConfig = DISTANCE_CONFIG,
) -> ShortestPaths:
    """Fewest-edges path by level-order BFS.

    The traversal stops as soon as ``dst_node`` is dequeued. Distances are
    edge counts; vertices not reached before stopping keep the sentinel.

    Args:
        graph: Graph to search; edge weights are ignored.
        src_node: Source vertex.
        dst_node: Destination vertex.
        config: Distance sentinel policy.

    Returns:
        ShortestPaths with ``reachable`` telling whether ``dst_node`` was hit.

    Raises:
        VertexNotFoundError: If src_node is not in the graph.
    """
    _check_source(graph, src_node)

    distances = _init_distances(graph, src_node, config)
    parent: Dict[NodeID, NodeID] = {}
    reachable = False
    for vertex, pred, depth in iter_bfs(graph, src_node):
        distances[vertex] = depth
        if pred is not None:
            parent[vertex] = pred
        if vertex == dst_node:
            reachable = True
            break

    return ShortestPaths(
        source=src_node,
        destination=dst_node,
        reachable=reachable,
        distances=distances,
        parent=parent,
        infinity=config.infinity,
    )


def dijkstra(
    graph: Graph,
    src_node: NodeID,
    dst_node: Optional[NodeID] = None,
    config: DistanceConfig = DISTANCE_CONFIG,
) -> ShortestPaths:
    """Dijkstra shortest paths for non-negative edge weights.

    The heap holds ``(distance, vertex)`` pairs, so ties on distance are broken
    by ascending vertex id. Improved vertices are pushed again instead of
    decreasing a key; a popped entry whose distance is worse than the best
    known one is stale and skipped.

    Vertex ids must be mutually orderable (all ints, all strings, ...).
    Mixing types such as ``"s"`` and ``1`` raises ``TypeError`` when two
    heap entries tie on distance.

    Args:
        graph: Graph with non-negative weights.
        src_node: Source vertex.
        dst_node: Optional destination. If given, the search stops once it is
            popped; otherwise all reachable vertices are settled.
        config: Distance sentinel policy.

    Returns:
        ShortestPaths. With ``dst_node=None``, ``reachable`` is True and the
        per-vertex results are read via ``distance_to`` / ``path``.

    Raises:
        VertexNotFoundError: If src_node is not in the graph.
    """
    _check_source(graph, src_node)

    distances = _init_distances(graph, src_node, config)
    parent: Dict[NodeID, NodeID] = {}
    min_pq: List[Tuple[Cost, NodeID]] = [(0, src_node)]
    reachable = dst_node is None

    while min_pq:
        current_cost, node_id = heappop(min_pq)
        if current_cost > distances[node_id]:
            continue

        if node_id == dst_node:
            reachable = True
            break

        for edge in graph.edges(node_id):
            new_cost = config.add(current_cost, edge.weight)
            if new_cost < distances[edge.dst]:
                distances[edge.dst] = new_cost
                parent[edge.dst] = node_id
                heappush(min_pq, (new_cost, edge.dst))

    return ShortestPaths(
        source=src_node,
        destination=dst_node,
        reachable=reachable,
        distances=distances,
        parent=parent,
        infinity=config.infinity,
    )


def _relax_all(
    graph: Graph,
    distances: Dict[NodeID, Cost],
    parent: Dict[NodeID, NodeID],
    config: DistanceConfig,
) -> bool:
    """One Bellman-Ford pass over all edges; return True if anything changed."""
    changed = False
    for edge in graph.all_edges():
        if config.is_infinite(distances[edge.src]):
            continue
        new_cost = config.add(distances[edge.src], edge.weight)
        if new_cost < distances[edge.dst]:
            distances[edge.dst] = new_cost
            parent[edge.dst] = edge.src
            changed = True
    return changed


def bellman_ford(
    graph: Graph,
    src_node: NodeID,
    dst_node: Optional[NodeID] = None,
    config: DistanceConfig = DISTANCE_CONFIG,
) -> ShortestPaths:
    """Bellman-Ford shortest paths with negative-cycle detection.

    Runs exactly ``|V| - 1`` relaxation passes over all edges. If ``dst_node``
    is still unreached the result is simply unreachable. Otherwise one more
    pass is made: any further improvement means a negative cycle is reachable
    from the source, and no distance or path is reported.

    Args:
        graph: Graph with arbitrary weights.
        src_node: Source vertex.
        dst_node: Optional destination. With None, every vertex is solved and
            the negative-cycle check always runs.
        config: Distance sentinel policy.

    Returns:
        ShortestPaths; ``negative_cycle`` is set when a cycle was found.

    Raises:
        VertexNotFoundError: If src_node is not in the graph.
    """
    _check_source(graph, src_node)

    distances = _init_distances(graph, src_node, config)
    parent: Dict[NodeID, NodeID] = {}
    for _ in range(len(graph) - 1):
        _relax_all(graph, distances, parent, config)

    if dst_node is not None and config.is_infinite(
        distances.get(dst_node, config.infinity)
    ):
        return ShortestPaths(
            source=src_node,
            destination=dst_node,
            reachable=False,
            distances=distances,
            parent=parent,
            infinity=config.infinity,
        )

    if _relax_all(graph, distances, parent, config):
        logger.debug("Negative-weight cycle reachable from '%s'", src_node)
        return ShortestPaths(
            source=src_node,
            destination=dst_node,
            reachable=False,
            distances=distances,
            parent=parent,
            negative_cycle=True,
            infinity=config.infinity,
        )

    return ShortestPaths(
        source=src_node,
        destination=dst_node,
        reachable=True,
        distances=distances,
        parent=parent,
        infinity=config.infinity,
    )


def floyd_warshall(
    graph: Graph,
    config: DistanceConfig = DISTANCE_CONFIG,
) -> AllPairsShortestPaths:
    """Floyd-Warshall all-pairs shortest paths.

    ``dist`` starts with 0 on the diagonal, the lightest direct edge weight
    for adjacent pairs and the sentinel elsewhere. ``last[i][j]`` starts as
    ``i`` for direct and trivial pairs. For each intermediate ``k`` in vertex
    order, any pair that improves through ``k`` takes ``last[k][j]``.

    The negative-cycle check (a negative diagonal entry) runs once, after all
    intermediates have been considered.

    Args:
        graph: Graph with arbitrary weights.
        config: Distance sentinel policy.

    Returns:
        AllPairsShortestPaths with distance and last-intermediate tables.
    """
    vertices = graph.vertices()
    dist: Dict[NodeID, Dict[NodeID, Cost]] = {
        i: {j: config.infinity for j in vertices} for i in vertices
    }
    last: Dict[NodeID, Dict[NodeID, NodeID]] = {i: {} for i in vertices}
    for i in vertices:
        dist[i][i] = 0
        last[i][i] = i
    for edge in graph.all_edges():
        if edge.weight < dist[edge.src][edge.dst]:
            dist[edge.src][edge.dst] = edge.weight
            last[edge.src][edge.dst] = edge.src

    for k in vertices:
        dist_k = dist[k]
        last_k = last[k]
        for i in vertices:
            dist_i = dist[i]
            dist_ik = dist_i[k]
            if config.is_infinite(dist_ik):
                continue
            last_i = last[i]
            for j in vertices:
                dist_kj = dist_k[j]
                if config.is_infinite(dist_kj):
                    continue
                through_k = config.add(dist_ik, dist_kj)
                if through_k < dist_i[j]:
                    dist_i[j] = through_k
                    last_i[j] = last_k[j]

    negative_cycle = any(dist[i][i] < 0 for i in vertices)
    if negative_cycle:
        logger.debug("Negative-weight cycle detected by Floyd-Warshall")

    return AllPairsShortestPaths(
        vertices=vertices,
        dist=dist,
        last=last,
        negative_cycle=negative_cycle,
        infinity=config.infinity,
    )
