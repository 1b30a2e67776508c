import pytest

from spantrees.graph import Edge, Graph


def dests(graph, vertex):
    return [edge.dest for edge in graph.neighbors(vertex)]


def test_add_edge_is_undirected():
    g = Graph(3)
    g.add_edge(0, 2, 7)
    assert g.neighbors(0) == (Edge(2, 7),)
    assert g.neighbors(2) == (Edge(0, 7),)
    assert g.neighbors(1) == ()


def test_default_weight_is_one():
    g = Graph(2)
    g.add_edge(0, 1)
    assert g.neighbors(0)[0].weight == 1


def test_neighbors_are_newest_first():
    g = Graph(4)
    g.add_edge(0, 1)
    g.add_edge(0, 2)
    g.add_edge(0, 3)
    assert dests(g, 0) == [3, 2, 1]


def test_out_of_range_edge_is_ignored():
    g = Graph(5)
    g.add_edge(2, 5)
    g.add_edge(-1, 0)
    assert all(g.neighbors(v) == () for v in range(5))


def test_remove_edge_only_touches_source_side():
    g = Graph(5)
    g.add_edge(0, 1)
    g.add_edge(1, 3)
    g.add_edge(3, 0)
    g.remove_edge(0, 3)
    assert dests(g, 0) == [1]
    assert 0 in dests(g, 3)


def test_remove_missing_edge_leaves_graph_unchanged():
    g = Graph(5)
    g.add_edge(0, 1)
    g.add_edge(4, 3, 5)
    before = g.render()
    g.remove_edge(0, 4)
    g.remove_edge(0, 4)
    g.remove_edge(9, 0)
    assert g.render() == before


def test_remove_edge_removes_first_match_only():
    g = Graph(2)
    g.add_edge(0, 1, 3)
    g.add_edge(0, 1, 8)
    g.remove_edge(0, 1)
    assert g.neighbors(0) == (Edge(1, 3),)


def test_neighbors_of_unknown_vertex_is_empty():
    g = Graph(2)
    assert g.neighbors(7) == ()
    assert g.neighbors(-1) == ()


def test_num_vertices():
    assert Graph(6).num_vertices == 6


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_render_format():
    g = Graph(2)
    g.add_edge(0, 1)
    assert g.render() == "Node 0: 1 \nNode 1: 0 \n"


def test_render_has_line_per_vertex():
    g = Graph(4)
    lines = g.render().splitlines()
    assert [line.split(":")[0] for line in lines] == [f"Node {i}" for i in range(4)]