"""Graph conversion utilities between graphkit Graph and NetworkX graphs.

Directed graphs map to ``nx.MultiDiGraph`` so parallel edges survive the
round trip. Undirected graphs map to ``nx.MultiGraph``; the two stored
directions of each undirected edge collapse into a single NetworkX edge.
"""

from __future__ import annotations

from collections import Counter
from typing import Union

import networkx as nx

from graphkit.graph.graph import Edge, Graph, GraphKind, Weight

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def to_networkx(graph: Graph, weight_attr: str = "weight") -> NxGraph:
    """Convert a Graph to a NetworkX multigraph.

    Args:
        graph: The Graph to convert.
        weight_attr: Edge attribute name that receives the edge weight.

    Returns:
        ``nx.MultiDiGraph`` for directed input, ``nx.MultiGraph`` otherwise.
        Nodes are added in the graph's vertex order.
    """
    if graph.is_directed():
        nx_graph = nx.MultiDiGraph()
        nx_graph.add_nodes_from(graph.vertices())
        for edge in graph.all_edges():
            nx_graph.add_edge(edge.src, edge.dst, **{weight_attr: edge.weight})
        return nx_graph

    nx_graph = nx.MultiGraph()
    nx_graph.add_nodes_from(graph.vertices())
    # Each undirected edge is stored once per direction; emit one of each pair.
    # Self-loops are stored twice under the same orientation.
    pending: Counter = Counter()
    for edge in graph.all_edges():
        key = (edge.dst, edge.src, edge.weight)
        if pending[key]:
            pending[key] -= 1
            continue
        pending[(edge.src, edge.dst, edge.weight)] += 1
        nx_graph.add_edge(edge.src, edge.dst, **{weight_attr: edge.weight})
    return nx_graph


def from_networkx(
    nx_graph: NxGraph,
    weight_attr: str = "weight",
    default_weight: Weight = 1,
) -> Graph:
    """Convert a NetworkX graph to a Graph.

    The graph kind follows ``nx_graph.is_directed()``. Vertex order follows
    ``nx_graph.nodes`` and edge order follows ``nx_graph.edges``.

    Args:
        nx_graph: Any NetworkX graph (simple or multi, directed or not).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight for edges lacking ``weight_attr``.

    Returns:
        A Graph with the same vertices and edges.
    """
    kind = GraphKind.DIRECTED if nx_graph.is_directed() else GraphKind.UNDIRECTED
    graph = Graph(kind)
    for node in nx_graph.nodes:
        graph.add_vertex(node)
    for u, v, data in nx_graph.edges(data=True):
        graph.add_edge(Edge(u, v, data.get(weight_attr, default_weight)))
    return graph
