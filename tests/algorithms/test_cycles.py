import pytest

from graphkit.algorithms.cycles import (
    find_directed_cycle,
    has_directed_cycle,
    has_undirected_cycle,
    is_bipartite,
    two_coloring,
    union_find_has_cycle,
)
from graphkit.errors import InvalidStateError
from graphkit.graph.graph import Edge, Graph, GraphKind


def test_directed_triangle_has_cycle(triangle_cycle):
    assert has_directed_cycle(triangle_cycle)
    assert find_directed_cycle(triangle_cycle) == [0, 1, 2, 0]


def test_removing_back_edge_breaks_cycle(triangle_dag):
    assert not has_directed_cycle(triangle_dag)
    assert find_directed_cycle(triangle_dag) == []


def test_self_loop_is_directed_cycle():
    g = Graph()
    g.add_edges_from([(0, 1), (1, 1)])
    assert has_directed_cycle(g)
    assert find_directed_cycle(g) == [1, 1]


def test_cross_and_forward_edges_are_not_cycles():
    #  A──►B──►C
    #  │       ▲
    #  └───────┘  (forward edge A->C)
    #  D──►C      (cross edge into a finished vertex)
    g = Graph()
    g.add_edges_from([("A", "B"), ("B", "C"), ("A", "C"), ("D", "C")])
    assert not has_directed_cycle(g)


def test_finished_vertices_leave_the_ancestor_set():
    # B finishes before C is explored; C->B must not count as a back edge
    g = Graph()
    g.add_edges_from([("A", "B"), ("A", "C"), ("C", "B")])
    assert not has_directed_cycle(g)


def test_directed_cycle_in_later_tree():
    g = Graph()
    g.add_edges_from([("A", "B"), ("X", "Y"), ("Y", "Z"), ("Z", "Y")])
    assert find_directed_cycle(g) == ["Y", "Z", "Y"]


def test_directed_detection_requires_directed(square_cycle):
    with pytest.raises(InvalidStateError):
        has_directed_cycle(square_cycle)


def test_undirected_tree_has_no_cycle(two_islands):
    assert not has_undirected_cycle(two_islands)
    assert not union_find_has_cycle(two_islands)


def test_undirected_square_has_cycle(square_cycle):
    assert has_undirected_cycle(square_cycle)
    assert union_find_has_cycle(square_cycle)


def test_undirected_self_loop_is_cycle():
    g = Graph(GraphKind.UNDIRECTED)
    g.add_edges_from([(0, 1), (1, 1)])
    assert has_undirected_cycle(g)
    assert union_find_has_cycle(g)


def test_undirected_detection_requires_undirected(triangle_cycle):
    with pytest.raises(InvalidStateError):
        has_undirected_cycle(triangle_cycle)


def test_union_find_on_directed_graphs(triangle_cycle, triangle_dag):
    assert union_find_has_cycle(triangle_cycle)
    assert not union_find_has_cycle(triangle_dag)


def test_union_find_dedups_undirected_edges():
    g = Graph(GraphKind.UNDIRECTED)
    g.add_edge(Edge(0, 1, 1))
    g.add_edge(Edge(1, 0, 2))
    # the duplicate pair is dropped before the scan
    assert not union_find_has_cycle(g)


def test_square_is_bipartite(square_cycle):
    assert is_bipartite(square_cycle)
    colors = two_coloring(square_cycle)
    assert colors == {0: 1, 1: -1, 2: 1, 3: -1}


def test_square_with_chord_is_not_bipartite(square_cycle):
    square_cycle.add_edge(Edge(0, 2))
    assert not is_bipartite(square_cycle)
    assert two_coloring(square_cycle) is None


def test_bipartite_checks_every_component(two_islands):
    assert is_bipartite(two_islands)
    two_islands.add_edges_from([("X", "Y"), ("Y", "Z"), ("Z", "X")])
    assert not is_bipartite(two_islands)


def test_bipartite_requires_undirected(triangle_dag):
    with pytest.raises(InvalidStateError):
        is_bipartite(triangle_dag)
