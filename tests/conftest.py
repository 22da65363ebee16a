"""Global pytest configuration and shared sample graphs."""

from __future__ import annotations

import pytest

from graphkit.graph.graph import Edge, Graph, GraphKind


@pytest.fixture
def triangle_dag():
    #    [1]      [1]
    #  0──────►1──────►2
    #
    g = Graph(GraphKind.DIRECTED)
    g.add_edge(Edge(0, 1, 1))
    g.add_edge(Edge(1, 2, 1))
    return g


@pytest.fixture
def triangle_cycle():
    #    [1]      [1]
    #  0──────►1──────►2
    #  ▲               │
    #  └───────────────┘
    #         [1]
    g = Graph(GraphKind.DIRECTED)
    g.add_edge(Edge(0, 1, 1))
    g.add_edge(Edge(1, 2, 1))
    g.add_edge(Edge(2, 0, 1))
    return g


@pytest.fixture
def weighted_triangle():
    # Undirected:
    #      [4]
    #  0─────────1
    #  │        /
    #  │[1]   /[2]
    #  │    /
    #  2───
    g = Graph(GraphKind.UNDIRECTED)
    g.add_edges_from([(0, 1, 4), (0, 2, 1), (2, 1, 2)])
    return g


@pytest.fixture
def square_cycle():
    # Undirected, all weights 1:
    #  0───1
    #  │   │
    #  3───2
    g = Graph(GraphKind.UNDIRECTED)
    g.add_edges_from([(0, 1), (1, 2), (2, 3), (3, 0)])
    return g


@pytest.fixture
def negative_cycle_graph():
    #    [1]       [-5]
    #  0──────►1───────►2
    #  ▲                │
    #  └────────────────┘
    #         [1]
    g = Graph(GraphKind.DIRECTED)
    g.add_edges_from([(0, 1, 1), (1, 2, -5), (2, 0, 1)])
    return g


@pytest.fixture
def two_islands():
    # Undirected, two components plus an isolated vertex:
    #  A───B───C      D───E      F
    #    [1]  [2]       [3]
    g = Graph(GraphKind.UNDIRECTED)
    g.add_edges_from([("A", "B", 1), ("B", "C", 2), ("D", "E", 3)])
    g.add_vertex("F")
    return g


@pytest.fixture
def weighted_network():
    # Undirected, classic Kruskal example (MST weight 39):
    #
    #  A-B 7   A-D 5   B-C 8   B-D 9   B-E 7   C-E 5
    #  D-E 15  D-F 6   E-F 8   E-G 9   F-G 11
    g = Graph(GraphKind.UNDIRECTED)
    g.add_edges_from(
        [
            ("A", "B", 7),
            ("A", "D", 5),
            ("B", "C", 8),
            ("B", "D", 9),
            ("B", "E", 7),
            ("C", "E", 5),
            ("D", "E", 15),
            ("D", "F", 6),
            ("E", "F", 8),
            ("E", "G", 9),
            ("F", "G", 11),
        ]
    )
    return g


@pytest.fixture
def scc_graph():
    # Directed; components {a, b, c}, {d, e}, {f}, {g, h}:
    #
    #  a──►b──►c──►d◄──►e
    #  ▲       │   │
    #  └───────┘   ▼
    #              f──►g◄──►h
    g = Graph(GraphKind.DIRECTED)
    g.add_edges_from(
        [
            ("a", "b"),
            ("b", "c"),
            ("c", "a"),
            ("c", "d"),
            ("d", "e"),
            ("e", "d"),
            ("d", "f"),
            ("f", "g"),
            ("g", "h"),
            ("h", "g"),
        ]
    )
    return g
