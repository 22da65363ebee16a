"""Types and data structures for algorithm results.

Defines result containers and aliases for traversal and shortest-path
outputs. Containers expose the raw parent / last-vertex maps so callers can
reconstruct paths or render components themselves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Dict, Hashable, List, Optional, Union

from graphkit.algorithms.paths import path_from_last_table, path_from_parents

NodeID = Hashable
Cost = Union[int, float]

#: Component id (or representative vertex) -> member vertices.
Components = Dict[Hashable, List[NodeID]]


class DfsEvent(IntEnum):
    """Events emitted by a depth-first traversal."""

    #: Vertex reached for the first time (via a tree edge, or as a root).
    DISCOVER = 1
    #: Edge to a vertex that is already visited.
    NONTREE = 2
    #: Vertex adjacency scan completed.
    FINISH = 3


@dataclass(frozen=True)
class DfsResult:
    """Outcome of a full depth-first traversal.

    Attributes:
        preorder: Vertices in discovery order.
        postorder: Vertices in the order their adjacency scans completed.
        parent: Tree parent of each non-root vertex (first discoverer wins).
        roots: Vertices that started a new traversal tree, in launch order.
    """

    preorder: List[NodeID]
    postorder: List[NodeID]
    parent: Dict[NodeID, NodeID]
    roots: List[NodeID]


@dataclass(frozen=True)
class BfsResult:
    """Outcome of a breadth-first traversal from one source.

    Attributes:
        source: Start vertex.
        order: Vertices in dequeue (level) order.
        parent: First enqueuer of each non-source vertex.
        depth: Number of edges from the source to each reached vertex.
    """

    source: NodeID
    order: List[NodeID]
    parent: Dict[NodeID, NodeID]
    depth: Dict[NodeID, int]

    def path(self, target: NodeID) -> List[NodeID]:
        """Return the tree path from the source to ``target`` or ``[]``."""
        return path_from_parents(self.source, target, self.parent)


@dataclass
class ShortestPaths:
    """Single-source shortest-path result.

    Attributes:
        source: Start vertex.
        destination: Requested target, or None when all vertices were solved.
        reachable: Whether ``destination`` has a well-defined shortest path.
            Always False when a negative cycle was detected.
        distances: Best known distance per vertex; unreachable vertices keep
            the configured infinity sentinel.
        parent: Predecessor of each reached vertex on its best path.
        negative_cycle: True if a negative-weight cycle is reachable from the
            source (Bellman-Ford only).
        infinity: Sentinel used in ``distances``.
    """

    source: NodeID
    destination: Optional[NodeID]
    reachable: bool
    distances: Dict[NodeID, Cost]
    parent: Dict[NodeID, NodeID] = field(default_factory=dict)
    negative_cycle: bool = False
    infinity: Cost = float("inf")

    @property
    def distance(self) -> Optional[Cost]:
        """Distance to ``destination``, or None if there is no valid path."""
        if self.destination is None or not self.reachable:
            return None
        return self.distances[self.destination]

    def distance_to(self, target: NodeID) -> Optional[Cost]:
        """Distance to any vertex, or None if unknown, unreachable or undefined."""
        if self.negative_cycle:
            return None
        dist = self.distances.get(target, self.infinity)
        if dist >= self.infinity:
            return None
        return dist

    def path(self, target: Optional[NodeID] = None) -> List[NodeID]:
        """Vertices from the source to ``target`` (default: the destination).

        Returns ``[]`` when the target is unreachable or a negative cycle
        makes shortest paths undefined.
        """
        if target is None:
            target = self.destination
        if target is None or self.distance_to(target) is None:
            return []
        return path_from_parents(self.source, target, self.parent)


@dataclass
class AllPairsShortestPaths:
    """All-pairs shortest-path result (Floyd-Warshall).

    Attributes:
        vertices: Vertex order used for the matrices.
        dist: ``dist[i][j]`` is the shortest known distance from i to j.
        last: ``last[i][j]`` is the vertex preceding j on the best i -> j path;
            ``i`` itself for direct or trivial pairs. Absent when unreachable.
        negative_cycle: True if any vertex can reach itself at negative cost.
        infinity: Sentinel used in ``dist``.
    """

    vertices: List[NodeID]
    dist: Dict[NodeID, Dict[NodeID, Cost]]
    last: Dict[NodeID, Dict[NodeID, NodeID]]
    negative_cycle: bool = False
    infinity: Cost = float("inf")

    def distance(self, src: NodeID, dst: NodeID) -> Optional[Cost]:
        """Shortest distance, or None if unreachable or a negative cycle exists."""
        if self.negative_cycle:
            return None
        dist = self.dist.get(src, {}).get(dst, self.infinity)
        if dist >= self.infinity:
            return None
        return dist

    def path(self, src: NodeID, dst: NodeID) -> List[NodeID]:
        """Vertices on the shortest ``src`` -> ``dst`` path, or ``[]``."""
        if self.distance(src, dst) is None:
            return []
        return path_from_last_table(src, dst, self.last)
