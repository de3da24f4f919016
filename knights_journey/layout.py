"""Helpers for hosts that draw a board.

Nodes live in the unit square; a host scales them to its canvas. These
helpers work in the same normalized coordinates so they stay independent of
any particular drawing surface.
"""

from __future__ import annotations

import math
from typing import Optional

from .schemas import BoardDefinition
from .state import JourneyState

# A tap counts as hitting a node when it lands within this multiple of the
# node radius.
TAP_TOLERANCE = 1.3


def node_at(board: BoardDefinition, x: float, y: float, radius: float) -> Optional[int]:
    """Return the id of the node nearest to ``(x, y)`` if it is close enough.

    Args:
        board: Board whose node layout to search
        x, y: Point in normalized (0..1) coordinates
        radius: Drawn node radius in the same units

    Returns:
        Node id, or None when the nearest node is farther than
        ``radius * TAP_TOLERANCE`` or the board has no nodes
    """

    if not board.nodes:
        return None
    nearest = min(board.nodes, key=lambda spec: math.hypot(spec.x - x, spec.y - y))
    if math.hypot(nearest.x - x, nearest.y - y) <= radius * TAP_TOLERANCE:
        return nearest.id
    return None


def format_status(state: JourneyState) -> str:
    """One-line summary: move count and current node."""

    current = f"#{state.current}" if state.current is not None else "-"
    return f"Moves: {state.move_count}  Current: {current}"


def visit_order(state: JourneyState, node_id: int) -> Optional[int]:
    """1-based position of ``node_id`` in the journey, or None if unvisited."""

    if node_id not in state.visited:
        return None
    return state.path.index(node_id) + 1
