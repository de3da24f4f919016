"""
Knight's Journey - Hamiltonian path puzzle engine.

Visit every node of a graph exactly once, one edge at a time.

Pure logic over immutable values: a validated Graph, immutable
JourneyState transitions, and a time-bounded backtracking solver.
No drawing, no persistence; hosts drive it programmatically.
"""

__version__ = "0.1.0"

# Core model
from .graph import Graph, MalformedGraph
from .state import JourneyState, is_legal_move, extend, retract, reset

# Solver
from .solver import solve, solve_with_report

# Schemas
from .schemas import BoardDefinition, NodeSpec, SolveReport, SolveStatus

# Boards and hosting helpers
from .presets import circle, star, ring_with_chords, default_boards, get_board
from .layout import node_at, format_status, visit_order
from .session import JourneySession

__all__ = [
    # Core model
    "Graph",
    "MalformedGraph",
    "JourneyState",
    "is_legal_move",
    "extend",
    "retract",
    "reset",
    # Solver
    "solve",
    "solve_with_report",
    # Schemas
    "BoardDefinition",
    "NodeSpec",
    "SolveReport",
    "SolveStatus",
    # Presets
    "circle",
    "star",
    "ring_with_chords",
    "default_boards",
    "get_board",
    # Hosting helpers
    "node_at",
    "format_status",
    "visit_order",
    "JourneySession",
]
