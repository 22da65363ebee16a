import pytest

from graphkit.graph.graph import Edge, Graph, GraphKind, dedup_edges


def test_init_empty_graph():
    """A newly initialized graph has no vertices or edges."""
    g = Graph()
    assert len(g) == 0
    assert g.vertices() == []
    assert g.all_edges() == []
    assert g.is_directed()


def test_add_vertex_idempotent():
    g = Graph()
    g.add_vertex("A")
    g.add_vertex("A")
    assert g.vertices() == ["A"]
    assert "A" in g
    assert "B" not in g


def test_add_edge_registers_endpoints_in_first_seen_order():
    g = Graph()
    g.add_vertex(5)
    g.add_edge(Edge(3, 5, 2))
    g.add_edge(Edge(7, 3))
    assert g.vertices() == [5, 3, 7]
    assert g.edges(3) == [Edge(3, 5, 2)]
    assert g.edges(7) == [Edge(7, 3, 1)]


def test_add_edge_allows_parallel_edges():
    g = Graph()
    g.add_edge(Edge("A", "B", 1))
    g.add_edge(Edge("A", "B", 1))
    assert g.edges("A") == [Edge("A", "B", 1), Edge("A", "B", 1)]
    assert g.num_edges() == 2


def test_edges_of_unknown_vertex_is_empty():
    g = Graph()
    g.add_edge(Edge("A", "B"))
    assert g.edges("Z") == []
    assert g.edges("B") == []


def test_edges_returns_a_copy():
    g = Graph()
    g.add_edge(Edge("A", "B"))
    g.edges("A").append(Edge("A", "C"))
    assert g.edges("A") == [Edge("A", "B")]


def test_undirected_add_edge_stores_both_directions():
    g = Graph(GraphKind.UNDIRECTED)
    g.add_edge(Edge("A", "B", 3))
    assert g.edges("A") == [Edge("A", "B", 3)]
    assert g.edges("B") == [Edge("B", "A", 3)]
    assert not g.is_directed()
    assert g.kind == GraphKind.UNDIRECTED


def test_add_edges_from_accepts_tuples_and_edges():
    g = Graph()
    g.add_edges_from([("A", "B"), ("B", "C", 5), Edge("C", "A", 2)])
    assert g.all_edges() == [Edge("A", "B", 1), Edge("B", "C", 5), Edge("C", "A", 2)]


def test_all_edges_is_vertex_ordered_and_not_deduplicated(weighted_triangle):
    assert weighted_triangle.all_edges() == [
        Edge(0, 1, 4),
        Edge(0, 2, 1),
        Edge(1, 0, 4),
        Edge(1, 2, 2),
        Edge(2, 0, 1),
        Edge(2, 1, 2),
    ]


def test_iteration_and_repr():
    g = Graph()
    g.add_edges_from([("A", "B"), ("B", "C")])
    assert list(g) == ["A", "B", "C"]
    assert repr(g) == "Graph(kind=DIRECTED, vertices=3, edges=2)"


def test_transpose_reverses_edges_and_keeps_vertices():
    g = Graph()
    g.add_vertex("lonely")
    g.add_edges_from([("A", "B", 2), ("B", "C", 3)])
    t = g.transpose()

    assert t.vertices() == ["lonely", "A", "B", "C"]
    assert t.edges("B") == [Edge("B", "A", 2)]
    assert t.edges("C") == [Edge("C", "B", 3)]
    assert t.edges("A") == []
    # input is untouched
    assert g.edges("A") == [Edge("A", "B", 2)]


def test_transpose_twice_preserves_edge_multiset(scc_graph):
    twice = scc_graph.transpose().transpose()
    assert sorted(map(repr, twice.all_edges())) == sorted(
        map(repr, scc_graph.all_edges())
    )
    assert twice.vertices() == scc_graph.vertices()


def test_transpose_undirected_keeps_kind(weighted_triangle):
    t = weighted_triangle.transpose()
    assert t.kind == GraphKind.UNDIRECTED
    assert sorted(map(repr, t.all_edges())) == sorted(
        map(repr, weighted_triangle.all_edges())
    )


def test_copy_is_independent():
    g = Graph()
    g.add_edge(Edge("A", "B"))
    c = g.copy()
    c.add_edge(Edge("B", "C"))
    assert g.vertices() == ["A", "B"]
    assert c.vertices() == ["A", "B", "C"]


def test_edge_reversed_and_equal():
    e = Edge(1, 2, 7)
    assert e.reversed() == Edge(2, 1, 7)
    assert e.equal(Edge(2, 1, 99))
    assert e.equal(Edge(1, 2, 0))
    assert not e.equal(Edge(1, 3, 7))
    # dataclass equality stays directional
    assert e != e.reversed()


def test_dedup_edges_keeps_first_of_each_pair():
    edges = [Edge(0, 1, 4), Edge(1, 0, 4), Edge(0, 1, 9), Edge(1, 2, 1), Edge(2, 2, 3)]
    assert dedup_edges(edges) == [Edge(0, 1, 4), Edge(1, 2, 1), Edge(2, 2, 3)]


def test_dedup_edges_is_idempotent(weighted_network):
    once = dedup_edges(weighted_network.all_edges())
    assert dedup_edges(once) == once
    assert len(once) == 11


@pytest.mark.parametrize("kind", [GraphKind.DIRECTED, GraphKind.UNDIRECTED])
def test_graph_kind_accepts_int(kind):
    assert Graph(int(kind)).kind == kind


def test_all_edges_follows_insertion_not_sorted_order():
    g = Graph()
    g.add_edges_from([(3, 1, 1), (1, 2, 7), (1, 2, 4), (2, 3, 1)])
    assert g.all_edges() == [Edge(3, 1, 1), Edge(1, 2, 7), Edge(1, 2, 4), Edge(2, 3, 1)]
    # the first stored parallel edge wins, whatever its weight
    assert dedup_edges(g.all_edges())[1] == Edge(1, 2, 7)
