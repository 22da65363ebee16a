"""Path reconstruction helpers.

Shortest-path and traversal algorithms return predecessor structures rather
than formatted paths. These helpers turn them back into vertex sequences.
"""

from __future__ import annotations

from typing import Dict, Hashable, List

NodeID = Hashable


def path_from_parents(
    src_node: NodeID,
    dst_node: NodeID,
    parent: Dict[NodeID, NodeID],
) -> List[NodeID]:
    """
    Walk a parent map back from dst_node to src_node.

    Args:
        src_node: Path start; has no entry in ``parent``.
        dst_node: Path end.
        parent: Maps each reached vertex to its predecessor.

    Returns:
        Vertices from src_node to dst_node inclusive, or ``[]`` if the parent
        chain does not lead back to src_node.
    """
    if src_node == dst_node:
        return [src_node]
    if dst_node not in parent:
        return []

    path = [dst_node]
    seen = {dst_node}
    node = dst_node
    while node != src_node:
        if node not in parent:
            return []
        node = parent[node]
        if node in seen:
            # parent chain loops without reaching the source
            return []
        seen.add(node)
        path.append(node)
    path.reverse()
    return path


def path_from_last_table(
    src_node: NodeID,
    dst_node: NodeID,
    last: Dict[NodeID, Dict[NodeID, NodeID]],
) -> List[NodeID]:
    """
    Unwind a Floyd-Warshall last-intermediate table into a path.

    ``last[i][j]`` is the vertex right before j on the best i -> j path, so
    the path to j is the path to ``last[i][j]`` followed by j.

    Args:
        src_node: Path start.
        dst_node: Path end.
        last: Last-intermediate table.

    Returns:
        Vertices from src_node to dst_node inclusive, or ``[]`` if no entry
        exists for the pair.
    """
    row = last.get(src_node, {})
    if src_node == dst_node:
        return [src_node]
    if dst_node not in row:
        return []

    path = [dst_node]
    node = row[dst_node]
    while node != src_node:
        if len(path) > len(row):
            # table is inconsistent (only possible with negative cycles)
            return []
        path.append(node)
        node = row[node]
    path.append(src_node)
    path.reverse()
    return path
