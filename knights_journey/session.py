"""
Interactive journey session.

Owns the "current value" cell a host UI renders from. Every transition
replaces the JourneyState wholesale and notifies listeners with
``(previous, new)``; no state is ever mutated in place.

Auto-solve runs the CPU-bound search in a worker thread so the event loop
stays responsive. Only one solve may be outstanding: a second request while
one is pending is rejected, and a result whose starting journey was
replaced in the meantime (a move, undo, reset or board change) is discarded
rather than applied.
"""

from __future__ import annotations

import asyncio
from typing import Callable, List, Optional, Sequence, Union

from .config import Config
from .graph import Graph
from .layout import format_status
from .logging_utils import (
    LOG_TAG_ERROR,
    LOG_TAG_INFO,
    LOG_TAG_MOVE,
    LOG_TAG_SUCCESS,
    log_error,
    log_info,
    log_move,
    log_success,
    verbose_enabled,
)
from .presets import default_boards
from .schemas import BoardDefinition, SolveReport, SolveStatus
from .solver import solve_with_report
from .state import JourneyState

StateListener = Callable[[JourneyState, JourneyState], None]


class JourneySession:
    """Holds the active board and journey for one player."""

    def __init__(
        self,
        boards: Optional[Sequence[BoardDefinition]] = None,
        board: Optional[Union[BoardDefinition, str]] = None,
        listeners: Optional[List[StateListener]] = None,
        time_budget: Optional[float] = None,
    ):
        """Initialize the session on a board.

        Args:
            boards: Boards the player may choose from (defaults to the presets)
            board: Starting board or its name; falls back to
                Config.DEFAULT_BOARD when present, else the first board
            listeners: Callables invoked with (previous, new) on every
                state replacement
            time_budget: Default auto-solve budget in seconds
                (defaults to Config.SOLVE_BUDGET_SECONDS)
        """
        self.boards: List[BoardDefinition] = list(boards) if boards else default_boards()
        self.listeners: List[StateListener] = listeners or []
        self.time_budget = Config.SOLVE_BUDGET_SECONDS if time_budget is None else time_budget
        self._solving = False

        if board is None:
            names = [b.name for b in self.boards]
            board = Config.DEFAULT_BOARD if Config.DEFAULT_BOARD in names else self.boards[0]
        self._board = self._resolve(board)
        self._graph = self._board.to_graph()
        self._state = JourneyState.empty(self._graph)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def state(self) -> JourneyState:
        return self._state

    @property
    def board(self) -> BoardDefinition:
        return self._board

    @property
    def graph(self) -> Graph:
        return self._graph

    @property
    def solving(self) -> bool:
        return self._solving

    def can_move(self, node_id: int) -> bool:
        return self._state.is_legal_move(node_id)

    def status_line(self) -> str:
        return format_status(self._state)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def select_board(self, board: Union[BoardDefinition, str]) -> None:
        """Switch boards; progress on the previous board is dropped."""

        self._board = self._resolve(board)
        self._graph = self._board.to_graph()
        if verbose_enabled():
            log_info(f"  {LOG_TAG_INFO} [Session] Board: {self._board.name}")
        self._replace(JourneyState.empty(self._graph))

    def reset(self) -> None:
        self._replace(self._state.reset())

    def undo(self) -> bool:
        """Retract the last move. Returns False when there was nothing to undo."""

        previous = self._state
        self._replace(previous.retract())
        return self._state is not previous

    def move(self, node_id: int) -> bool:
        """Visit ``node_id`` if legal. Returns False (state unchanged) otherwise."""

        previous = self._state
        self._replace(previous.extend(node_id))
        moved = self._state is not previous
        if verbose_enabled():
            if moved:
                log_move(f"  {LOG_TAG_MOVE} [Session] Move to #{node_id} ({self.status_line()})")
            else:
                log_error(f"  {LOG_TAG_ERROR} [Session] Illegal move to #{node_id}")
        return moved

    async def auto_solve(self, time_budget: Optional[float] = None) -> SolveReport:
        """Complete the current journey in a worker thread.

        Returns:
            SolveReport. SOLVED means the session state now holds the full
            path; REJECTED means another solve was pending; DISCARDED means
            the journey changed before the search finished.
        """

        if self._solving:
            if verbose_enabled():
                log_error(f"  {LOG_TAG_ERROR} [Session] Solve already in progress")
            return SolveReport(status=SolveStatus.REJECTED)

        budget = self.time_budget if time_budget is None else time_budget
        start = self._state
        self._solving = True
        try:
            report = await asyncio.to_thread(solve_with_report, start.graph, start, budget)
        finally:
            self._solving = False

        if self._state is not start:
            if verbose_enabled():
                log_error(f"  {LOG_TAG_ERROR} [Session] Journey changed during solve; result discarded")
            return report.model_copy(update={"status": SolveStatus.DISCARDED, "path": None})

        if report.found:
            self._replace(JourneyState.from_path(start.graph, report.path))
            if verbose_enabled():
                log_success(f"  {LOG_TAG_SUCCESS} [Session] Solved {self._board.name}")
        return report

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve(self, board: Union[BoardDefinition, str]) -> BoardDefinition:
        if isinstance(board, BoardDefinition):
            return board
        for candidate in self.boards:
            if candidate.name == board:
                return candidate
        raise KeyError(f"Unknown board '{board}'")

    def _replace(self, new_state: JourneyState) -> None:
        if new_state is self._state:
            return
        previous = self._state
        self._state = new_state
        for listener in self.listeners:
            listener(previous, new_state)
