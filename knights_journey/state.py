"""Journey state and its transitions.

A JourneyState is the record of progress through one Graph: the ordered
visiting sequence plus the derived visited set. States are immutable; every
transition returns a new value (or the same object when the transition is a
no-op), so undo is a matter of truncation and reset is a fresh empty state.

Illegal moves are not errors. ``extend`` on a non-adjacent or already
visited target simply hands back the unchanged state, and ``retract`` on an
empty path does the same.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

from .graph import Graph


@dataclass(frozen=True)
class JourneyState:
    """Immutable visiting sequence over ``graph``.

    ``visited`` is computed from ``path`` on construction and always equals
    ``set(path)``. Constructing a state whose path breaks the journey
    invariants (unknown node, repeated node, non-adjacent step) raises
    ``ValueError``.
    """

    graph: Graph
    path: Tuple[int, ...] = ()
    visited: FrozenSet[int] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        path = tuple(self.path)
        object.__setattr__(self, "path", path)
        _check_path(self.graph, path)
        object.__setattr__(self, "visited", frozenset(path))

    @classmethod
    def empty(cls, graph: Graph) -> "JourneyState":
        """Return a state with nothing visited yet."""

        return cls(graph)

    @classmethod
    def from_path(cls, graph: Graph, path: Iterable[int]) -> "JourneyState":
        """Build a state wholesale, e.g. from a solver result."""

        return cls(graph, tuple(path))

    @property
    def move_count(self) -> int:
        return len(self.path)

    @property
    def is_complete(self) -> bool:
        return self.move_count == self.graph.size

    @property
    def current(self) -> Optional[int]:
        return self.path[-1] if self.path else None

    def is_legal_move(self, target: int) -> bool:
        return is_legal_move(self, target)

    def extend(self, target: int) -> "JourneyState":
        return extend(self, target)

    def retract(self) -> "JourneyState":
        return retract(self)

    def reset(self) -> "JourneyState":
        return reset(self)


def _check_path(graph: Graph, path: Tuple[int, ...]) -> None:
    seen: set[int] = set()
    previous: Optional[int] = None
    for node in path:
        if not graph.has_node(node):
            raise ValueError(f"Node {node!r} is not part of the graph")
        if node in seen:
            raise ValueError(f"Node {node} appears more than once in the path")
        if previous is not None and node not in graph.neighbors(previous):
            raise ValueError(f"Nodes {previous} and {node} are not adjacent")
        seen.add(node)
        previous = node


def is_legal_move(state: JourneyState, target: int) -> bool:
    """Return True when ``target`` may be appended to the journey.

    Any unvisited node may start an empty journey; afterwards the target must
    be unvisited and adjacent to the current node.
    """

    if not state.graph.has_node(target):
        return False
    if target in state.visited:
        return False
    current = state.current
    if current is None:
        return True
    return target in state.graph.neighbors(current)


def extend(state: JourneyState, target: int) -> JourneyState:
    """Append ``target`` to the path, or return ``state`` itself if illegal."""

    if not is_legal_move(state, target):
        return state
    return JourneyState(state.graph, state.path + (target,))


def retract(state: JourneyState) -> JourneyState:
    """Drop the last visited node; an empty journey is returned unchanged."""

    if not state.path:
        return state
    return JourneyState(state.graph, state.path[:-1])


def reset(state: JourneyState) -> JourneyState:
    """Return a fresh empty journey over the same graph."""

    return JourneyState.empty(state.graph)
