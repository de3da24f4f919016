"""Immutable puzzle graph.

A Graph is the static board for one puzzle instance: a set of integer node
identifiers plus an undirected adjacency map. It is validated once on
construction and never mutated afterwards, so journey states and the solver
can share a single instance freely.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple


class MalformedGraph(ValueError):
    """Raised when a graph definition violates structural invariants.

    Covers adjacency asymmetry, self-loops, duplicate or invalid identifiers,
    edges that reference unknown nodes, and empty node sets. The graph being
    constructed must not be used.
    """

    def __init__(self, reason: str, *, name: Optional[str] = None) -> None:
        self.reason = reason
        self.name = name
        label = f" '{name}'" if name else ""
        super().__init__(f"Malformed graph{label}: {reason}")


def _is_node_id(value: object) -> bool:
    # bool is an int subclass; True/False are not node identifiers.
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


@dataclass(frozen=True)
class Graph:
    """Undirected graph with validated, symmetric adjacency.

    ``nodes`` keeps the declared iteration order; the solver seeds an empty
    journey from ``nodes[0]``. Nodes without an adjacency entry are isolated.
    """

    nodes: Tuple[int, ...]
    adjacency: Mapping[int, FrozenSet[int]]
    name: str = field(default="", compare=False)

    def __init__(
        self,
        nodes: Iterable[int],
        adjacency: Optional[Mapping[int, Iterable[int]]] = None,
        name: str = "",
    ) -> None:
        node_tuple = tuple(nodes)
        normalized = _validate(node_tuple, adjacency or {}, name)
        object.__setattr__(self, "nodes", node_tuple)
        object.__setattr__(self, "adjacency", MappingProxyType(normalized))
        object.__setattr__(self, "name", name)

    @property
    def size(self) -> int:
        return len(self.nodes)

    def has_node(self, node_id: object) -> bool:
        # True and 1.0 hash like 1 but are not node identifiers.
        return _is_node_id(node_id) and node_id in self.adjacency

    def neighbors(self, node_id: int) -> FrozenSet[int]:
        return self.adjacency.get(node_id, frozenset())

    def degree(self, node_id: int) -> int:
        return len(self.neighbors(node_id))

    def edges(self) -> List[Tuple[int, int]]:
        """Return each undirected edge once as ``(low, high)``, sorted."""

        return sorted(
            (a, b) for a, targets in self.adjacency.items() for b in targets if a < b
        )

    def __hash__(self) -> int:
        return hash((self.nodes, tuple(self.edges())))

    def __repr__(self) -> str:
        label = f"{self.name!r}, " if self.name else ""
        return f"Graph({label}nodes={len(self.nodes)}, edges={len(self.edges())})"


def _validate(
    nodes: Tuple[int, ...],
    adjacency: Mapping[int, Iterable[int]],
    name: str,
) -> Dict[int, FrozenSet[int]]:
    """Check structural invariants and return the normalized adjacency."""

    if not nodes:
        raise MalformedGraph("graph must contain at least one node", name=name)

    seen: set[int] = set()
    for node in nodes:
        if not _is_node_id(node):
            raise MalformedGraph(f"invalid node identifier {node!r}", name=name)
        if node in seen:
            raise MalformedGraph(f"duplicate node identifier {node}", name=name)
        seen.add(node)

    normalized: Dict[int, FrozenSet[int]] = {node: frozenset() for node in nodes}
    for source, targets in adjacency.items():
        if source not in seen:
            raise MalformedGraph(f"adjacency references unknown node {source!r}", name=name)
        target_set = frozenset(targets)
        for target in target_set:
            if target not in seen:
                raise MalformedGraph(
                    f"edge {source}-{target!r} references unknown node", name=name
                )
            if target == source:
                raise MalformedGraph(f"self-loop on node {source}", name=name)
        normalized[source] = target_set

    for source, targets in normalized.items():
        for target in targets:
            if source not in normalized[target]:
                raise MalformedGraph(
                    f"asymmetric edge: {source}->{target} has no {target}->{source}",
                    name=name,
                )

    return normalized
