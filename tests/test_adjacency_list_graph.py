"""
Unit tests for AdjacencyListGraph.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph


def test_add_edges_is_symmetric():
    g = AdjacencyListGraph(3)

    g.add_edge(0, 1, 1.0)
    g.add_edge(0, 2, 2.0)
    g.add_edge(1, 2, 3.0)

    assert list(g.vertices()) == [0, 1, 2]
    assert g.neighbors(0) == [(1, 1.0), (2, 2.0)]
    assert g.neighbors(1) == [(0, 1.0), (2, 3.0)]
    assert g.neighbors(2) == [(0, 2.0), (1, 3.0)]
    assert g.edge_count() == 3


def test_vertex_without_edges_has_no_neighbors():
    g = AdjacencyListGraph(4)
    g.add_edge(0, 1, 5)

    assert g.neighbors(3) == []
    assert g.edge_weight(0, 3) is None


def test_neighbors_returns_copy():
    g = AdjacencyListGraph(2)
    g.add_edge(0, 1, 1.0)

    out = g.neighbors(0)
    out.clear()

    # internal structure must remain intact
    assert g.neighbors(0) == [(1, 1.0)]


def test_parallel_edges_are_kept():
    g = AdjacencyListGraph(2)
    g.add_edge(0, 1, 5)
    g.add_edge(1, 0, 2)

    assert g.neighbors(0) == [(1, 5), (1, 2)]
    assert g.edge_count() == 2
    # cheapest parallel edge wins
    assert g.edge_weight(0, 1) == 2
    assert g.edge_weight(1, 0) == 2


def test_empty_graph():
    g = AdjacencyListGraph(0)

    assert g.vertex_count == 0
    assert list(g.vertices()) == []
    assert g.edge_count() == 0


def test_negative_vertex_count_rejected():
    with pytest.raises(ValueError):
        AdjacencyListGraph(-1)


@pytest.mark.parametrize("u, v", [(0, 3), (3, 0), (-1, 1)])
def test_add_edge_out_of_range_rejected(u, v):
    g = AdjacencyListGraph(3)

    with pytest.raises(ValueError):
        g.add_edge(u, v, 1.0)
    # nothing was half-inserted
    assert g.edge_count() == 0
    assert all(g.neighbors(x) == [] for x in g.vertices())


def test_shortest_path_out_of_range_rejected():
    g = AdjacencyListGraph(2)
    g.add_edge(0, 1, 1)

    with pytest.raises(ValueError):
        g.shortest_path(0, 2)
    with pytest.raises(ValueError):
        g.shortest_path(-1, 1)
