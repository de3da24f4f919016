"""Pydantic schemas for boards and solver results.

``BoardDefinition`` is the serializable description a board provider hands
to the core: laid-out nodes plus an edge map. It mirrors the immutable
``Graph`` dataclass and builds one through ``to_graph()``, which is where
structural validation happens. ``SolveReport`` carries the outcome of one
solver invocation back to callers.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from .graph import Graph


class NodeSpec(BaseModel):
    """A node placed in the unit square (0..1 on both axes)."""

    id: int = Field(..., ge=0, description="Node identifier, unique per board")
    x: float = Field(..., ge=0.0, le=1.0, description="Normalized horizontal position")
    y: float = Field(..., ge=0.0, le=1.0, description="Normalized vertical position")


class BoardDefinition(BaseModel):
    """A named board: node layout plus undirected adjacency."""

    name: str = Field(..., description="Display name, e.g. 'Circle-8'")
    nodes: List[NodeSpec] = Field(default_factory=list, description="Nodes in declared order")
    edges: Dict[int, List[int]] = Field(
        default_factory=dict,
        description="Map of node_id → list of adjacent node_ids (symmetric)",
    )

    def to_graph(self) -> Graph:
        """Build the validated Graph; raises MalformedGraph on bad edges."""

        return Graph(
            nodes=[node.id for node in self.nodes],
            adjacency={source: targets for source, targets in self.edges.items()},
            name=self.name,
        )

    def node(self, node_id: int) -> Optional[NodeSpec]:
        for spec in self.nodes:
            if spec.id == node_id:
                return spec
        return None


class SolveStatus(str, Enum):
    """Outcome of a solve request."""

    SOLVED = "solved"
    NOT_FOUND = "not_found"    # search space exhausted
    TIMED_OUT = "timed_out"    # time budget exceeded
    REJECTED = "rejected"      # another solve was still pending
    DISCARDED = "discarded"    # journey changed while the search ran


class SolveReport(BaseModel):
    """Result of one solver invocation.

    ``path`` is only set when ``status`` is ``SOLVED``. ``expansions`` counts
    search nodes entered, which is handy for comparing orderings.
    """

    status: SolveStatus
    path: Optional[List[int]] = None
    expansions: int = Field(0, ge=0, description="Search nodes expanded")
    elapsed_seconds: float = Field(0.0, ge=0.0, description="Wall-clock search time")

    @property
    def found(self) -> bool:
        return self.status is SolveStatus.SOLVED
