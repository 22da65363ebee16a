"""Depth-first and breadth-first traversal primitives.

Both traversals are iterative. DFS keeps explicit ``(vertex, edge iterator)``
frames instead of recursing, so traversal depth is not bounded by the
interpreter's recursion limit. All traversal state (visited set, stack,
queue) belongs to a single generator invocation.

Higher-level algorithms consume the generators directly and stop early by
simply abandoning them.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

from graphkit.algorithms.types import BfsResult, DfsEvent, DfsResult, NodeID
from graphkit.errors import VertexNotFoundError
from graphkit.graph.graph import Edge, Graph


def iter_dfs(
    graph: Graph,
    sources: Optional[Iterable[NodeID]] = None,
) -> Iterator[Tuple[DfsEvent, NodeID, Optional[Edge]]]:
    """Depth-first traversal yielding discovery, non-tree and finish events.

    A traversal tree is launched from every source that is still unvisited,
    in the given order. Neighbours are explored in edge-list order.

    Yields ``(event, vertex, edge)``:
      - ``DISCOVER``: ``vertex`` was just visited; ``edge`` is the tree edge
        that reached it, or None for a root.
      - ``NONTREE``: ``edge`` leaves ``vertex`` toward an already visited
        vertex (back, forward or cross edge).
      - ``FINISH``: ``vertex`` has no unexplored edges left; ``edge`` is the
        tree edge that reached it, or None for a root.

    Args:
        graph: Graph to traverse.
        sources: Launch order. Defaults to ``graph.vertices()``. Unknown
            vertices are visited as isolated roots.
    """
    if sources is None:
        sources = graph.vertices()

    visited: Set[NodeID] = set()
    for root in sources:
        if root in visited:
            continue
        visited.add(root)
        yield DfsEvent.DISCOVER, root, None

        # Each frame: (vertex, tree edge into vertex, iterator over out-edges)
        stack: List[Tuple[NodeID, Optional[Edge], Iterator[Edge]]] = [
            (root, None, iter(graph.edges(root)))
        ]
        while stack:
            vertex, tree_edge, out_edges = stack[-1]
            for edge in out_edges:
                if edge.dst in visited:
                    yield DfsEvent.NONTREE, vertex, edge
                    continue
                visited.add(edge.dst)
                yield DfsEvent.DISCOVER, edge.dst, edge
                stack.append((edge.dst, edge, iter(graph.edges(edge.dst))))
                break
            else:
                stack.pop()
                yield DfsEvent.FINISH, vertex, tree_edge


def depth_first_search(
    graph: Graph,
    sources: Optional[Iterable[NodeID]] = None,
) -> DfsResult:
    """Run a full DFS and collect preorder, postorder and parent map.

    Args:
        graph: Graph to traverse.
        sources: Launch order. Defaults to every vertex in graph order.

    Returns:
        DfsResult. ``postorder`` appends a vertex when its adjacency scan
        completes, not when it is first visited.
    """
    preorder: List[NodeID] = []
    postorder: List[NodeID] = []
    parent: Dict[NodeID, NodeID] = {}
    roots: List[NodeID] = []

    for event, vertex, edge in iter_dfs(graph, sources):
        if event == DfsEvent.DISCOVER:
            preorder.append(vertex)
            if edge is None:
                roots.append(vertex)
            else:
                parent[vertex] = edge.src
        elif event == DfsEvent.FINISH:
            postorder.append(vertex)

    return DfsResult(preorder=preorder, postorder=postorder, parent=parent, roots=roots)


def dfs_postorder(
    graph: Graph,
    sources: Optional[Iterable[NodeID]] = None,
) -> List[NodeID]:
    """Return the full DFS postorder over ``sources`` (default: all vertices)."""
    return [
        vertex
        for event, vertex, _ in iter_dfs(graph, sources)
        if event == DfsEvent.FINISH
    ]


def iter_bfs(
    graph: Graph,
    src_node: NodeID,
) -> Iterator[Tuple[NodeID, Optional[NodeID], int]]:
    """Breadth-first traversal from a single source.

    Vertices are marked visited when they are scheduled, so each one enters
    the queue exactly once and its parent is its first enqueuer.

    Yields:
        ``(vertex, parent, depth)`` in dequeue order; the source has parent
        None and depth 0.

    Raises:
        VertexNotFoundError: If src_node is not in the graph.
    """
    if src_node not in graph:
        raise VertexNotFoundError(f"Source node '{src_node}' is not in the graph.")

    visited = {src_node}
    queue = deque([(src_node, None, 0)])
    while queue:
        vertex, parent, depth = queue.popleft()
        yield vertex, parent, depth
        for edge in graph.edges(vertex):
            if edge.dst not in visited:
                visited.add(edge.dst)
                queue.append((edge.dst, vertex, depth + 1))


def breadth_first_search(graph: Graph, src_node: NodeID) -> BfsResult:
    """Run a full BFS from ``src_node`` and collect order, parents and depths.

    Raises:
        VertexNotFoundError: If src_node is not in the graph.
    """
    order: List[NodeID] = []
    parent: Dict[NodeID, NodeID] = {}
    depth: Dict[NodeID, int] = {}
    for vertex, pred, level in iter_bfs(graph, src_node):
        order.append(vertex)
        depth[vertex] = level
        if pred is not None:
            parent[vertex] = pred
    return BfsResult(source=src_node, order=order, parent=parent, depth=depth)
