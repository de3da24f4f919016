"""Built-in board presets.

Each preset lays its nodes out in the unit square so a UI can scale them to
any canvas, and builds a symmetric edge map:

- ``circle(n)``: n nodes on a ring, each joined to its two ring neighbours
- ``star(n)``: an outer and an inner ring of n/2 nodes, cross-linked
- ``ring_with_chords(n)``: ``circle(n)`` plus a chord from every node to the
  node three steps further round
"""

from __future__ import annotations

import math
from typing import Dict, List, Set

from .schemas import BoardDefinition, NodeSpec


def _ring_position(index: int, count: int, radius: float, phase: float = 0.0) -> tuple[float, float]:
    angle = 2 * math.pi * index / count + phase
    return 0.5 + radius * math.cos(angle), 0.5 + radius * math.sin(angle)


def _link(edges: Dict[int, Set[int]], a: int, b: int) -> None:
    edges.setdefault(a, set()).add(b)
    edges.setdefault(b, set()).add(a)


def _freeze(edges: Dict[int, Set[int]]) -> Dict[int, List[int]]:
    return {node: sorted(targets) for node, targets in sorted(edges.items())}


def circle(n: int, radius: float = 0.42) -> BoardDefinition:
    """Ring of ``n`` nodes (n >= 3)."""

    if n < 3:
        raise ValueError(f"circle boards need at least 3 nodes (got {n})")

    nodes = []
    for i in range(n):
        x, y = _ring_position(i, n, radius)
        nodes.append(NodeSpec(id=i, x=x, y=y))

    edges: Dict[int, Set[int]] = {}
    for i in range(n):
        _link(edges, i, (i + 1) % n)

    return BoardDefinition(name=f"Circle-{n}", nodes=nodes, edges=_freeze(edges))


def star(n: int, outer: float = 0.44, inner: float = 0.22) -> BoardDefinition:
    """Two concentric rings of ``n // 2`` nodes with star-shaped cross links.

    Outer node ``i`` is joined to inner nodes ``k+i`` and ``k+i+1``, and inner
    node ``k+i`` also to outer node ``i+2`` (indices modulo ``k``).
    """

    if n < 6 or n % 2:
        raise ValueError(f"star boards need an even node count of at least 6 (got {n})")

    k = n // 2
    nodes = []
    for i in range(k):
        x, y = _ring_position(i, k, outer)
        nodes.append(NodeSpec(id=i, x=x, y=y))
    for i in range(k):
        x, y = _ring_position(i, k, inner, phase=math.pi / k)
        nodes.append(NodeSpec(id=k + i, x=x, y=y))

    edges: Dict[int, Set[int]] = {}
    for i in range(k):
        _link(edges, i, (i + 1) % k)            # outer ring
        _link(edges, k + i, k + (i + 1) % k)    # inner ring
        _link(edges, i, k + i)
        _link(edges, i, k + (i + 1) % k)
        _link(edges, (i + 2) % k, k + i)

    return BoardDefinition(name=f"Star-{n}", nodes=nodes, edges=_freeze(edges))


def ring_with_chords(n: int, step: int = 3) -> BoardDefinition:
    """``circle(n)`` with an extra chord from each node to the node ``step`` ahead."""

    if n < 4 or step % n == 0:
        raise ValueError(
            "ring-with-chords boards need n >= 4 and a chord step not divisible "
            f"by n (got n={n}, step={step})"
        )

    base = circle(n)
    edges: Dict[int, Set[int]] = {node: set(targets) for node, targets in base.edges.items()}
    for i in range(n):
        _link(edges, i, (i + step) % n)

    return BoardDefinition(name=f"Ring+Chords-{n}", nodes=base.nodes, edges=_freeze(edges))


def default_boards() -> List[BoardDefinition]:
    """The three boards offered out of the box."""

    return [circle(8), star(10), ring_with_chords(12)]


def get_board(name: str) -> BoardDefinition:
    """Look up a default board by name.

    Raises:
        KeyError: If no default board carries ``name``
    """

    for board in default_boards():
        if board.name == name:
            return board
    known = ", ".join(board.name for board in default_boards())
    raise KeyError(f"Unknown board '{name}' (known: {known})")
