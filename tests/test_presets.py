"""Tests for built-in boards and the board schema."""

import pytest
from pydantic import ValidationError

from knights_journey.graph import MalformedGraph
from knights_journey.presets import circle, default_boards, get_board, ring_with_chords, star
from knights_journey.schemas import BoardDefinition, NodeSpec


def test_default_boards():
    names = [board.name for board in default_boards()]
    assert names == ["Circle-8", "Star-10", "Ring+Chords-12"]


def test_circle_edges():
    graph = circle(8).to_graph()

    assert graph.size == 8
    assert graph.name == "Circle-8"
    assert graph.neighbors(0) == frozenset({1, 7})
    assert all(graph.degree(node) == 2 for node in graph.nodes)


def test_star_edges():
    board = star(10)
    graph = board.to_graph()

    assert graph.size == 10
    # outer node 0: ring neighbours 1 and 4, inner 5 and 6, and inner 8 via (i + 2) % k
    assert graph.neighbors(0) == frozenset({1, 4, 5, 6, 8})
    # inner node 5: inner ring 6 and 9, outer 0, 4 and 2
    assert graph.neighbors(5) == frozenset({0, 2, 4, 6, 9})


def test_ring_with_chords_edges():
    graph = ring_with_chords(12).to_graph()

    assert graph.neighbors(0) == frozenset({1, 11, 3, 9})
    assert all(graph.degree(node) == 4 for node in graph.nodes)


def test_layout_stays_in_unit_square():
    for board in default_boards():
        for node in board.nodes:
            assert 0.0 <= node.x <= 1.0
            assert 0.0 <= node.y <= 1.0


def test_star_inner_ring_is_offset():
    board = star(10)
    outer, inner = board.node(0), board.node(5)
    assert outer is not None and inner is not None
    assert outer.x == pytest.approx(0.94)
    assert outer.y == pytest.approx(0.5)
    # inner ring is rotated half a step, so node 5 is off the x axis
    assert inner.y != pytest.approx(0.5)


@pytest.mark.parametrize("factory, n", [(circle, 2), (star, 7), (star, 4), (ring_with_chords, 3)])
def test_degenerate_sizes_are_refused(factory, n):
    with pytest.raises(ValueError):
        factory(n)


def test_get_board():
    assert get_board("Star-10").name == "Star-10"
    with pytest.raises(KeyError):
        get_board("Hexagon-6")


def test_board_definition_validation():
    with pytest.raises(ValidationError):
        NodeSpec(id=0, x=1.5, y=0.5)

    asymmetric = BoardDefinition(
        name="Broken",
        nodes=[NodeSpec(id=0, x=0.1, y=0.1), NodeSpec(id=1, x=0.9, y=0.9)],
        edges={0: [1]},
    )
    with pytest.raises(MalformedGraph):
        asymmetric.to_graph()


def test_board_definition_from_json():
    board = BoardDefinition.model_validate_json(
        '{"name": "Pair", "nodes": [{"id": 0, "x": 0.2, "y": 0.5}, {"id": 1, "x": 0.8, "y": 0.5}],'
        ' "edges": {"0": [1], "1": [0]}}'
    )
    graph = board.to_graph()
    assert graph.edges() == [(0, 1)]
    assert board.node(3) is None
