"""Graph primitives and helpers.

This package provides the adjacency-list `Graph`, its `Edge` value type, and
conversion helpers to and from NetworkX (`convert`).
"""

from graphkit.graph.graph import Edge, Graph, GraphKind, NodeID, Weight, dedup_edges

__all__ = ["Edge", "Graph", "GraphKind", "NodeID", "Weight", "dedup_edges"]
