"""Tests for Graph construction and validation."""

import pytest

from knights_journey.graph import Graph, MalformedGraph


def make_square() -> Graph:
    return Graph(
        nodes=[0, 1, 2, 3],
        adjacency={0: [1, 3], 1: [0, 2], 2: [1, 3], 3: [2, 0]},
        name="Square",
    )


def test_graph_queries():
    graph = make_square()

    assert graph.size == 4
    assert graph.nodes == (0, 1, 2, 3)
    assert graph.neighbors(0) == frozenset({1, 3})
    assert graph.degree(2) == 2
    assert graph.has_node(3) is True
    assert graph.has_node(7) is False
    assert graph.edges() == [(0, 1), (0, 3), (1, 2), (2, 3)]


def test_nodes_without_adjacency_are_isolated():
    graph = Graph(nodes=[5, 9])

    assert graph.neighbors(5) == frozenset()
    assert graph.neighbors(9) == frozenset()
    assert graph.edges() == []


def test_declared_order_is_kept():
    graph = Graph(nodes=[4, 2, 7], adjacency={4: [2], 2: [4]})
    assert graph.nodes[0] == 4


def test_graph_is_immutable():
    graph = make_square()

    with pytest.raises(AttributeError):
        graph.nodes = (0,)  # type: ignore[misc]
    with pytest.raises(TypeError):
        graph.adjacency[0] = frozenset()  # type: ignore[index]


def test_graphs_compare_by_structure():
    assert make_square() == make_square()
    assert hash(make_square()) == hash(make_square())
    assert make_square() != Graph(nodes=[0, 1, 2, 3])


@pytest.mark.parametrize(
    "nodes, adjacency, fragment",
    [
        ([], {}, "at least one node"),
        ([0, 1, 1], {}, "duplicate"),
        ([0, -1], {}, "invalid node"),
        ([0, True], {}, "invalid node"),
        ([0, "a"], {}, "invalid node"),
        ([0, 1], {0: [1]}, "asymmetric"),
        ([0, 1], {0: [0, 1], 1: [0]}, "self-loop"),
        ([0, 1], {0: [1], 1: [0], 2: [0]}, "unknown node"),
        ([0, 1], {0: [1, 5], 1: [0]}, "unknown node"),
    ],
)
def test_malformed_graphs_are_rejected(nodes, adjacency, fragment):
    with pytest.raises(MalformedGraph) as excinfo:
        Graph(nodes=nodes, adjacency=adjacency, name="bad")

    assert fragment in excinfo.value.reason
    assert "'bad'" in str(excinfo.value)


def test_malformed_graph_is_a_value_error():
    with pytest.raises(ValueError):
        Graph(nodes=[0, 1], adjacency={1: [0]})


def test_has_node_requires_integer_identifiers():
    graph = make_square()

    assert graph.has_node(1) is True
    assert graph.has_node(True) is False
    assert graph.has_node(1.0) is False
    assert graph.has_node([1]) is False
