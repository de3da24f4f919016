"""Automatic journey completion.

Depth-first backtracking over the graph with a Warnsdorff-style ordering:
at every step the unvisited neighbours of the current node are tried in
ascending order of how many unvisited neighbours *they* still have, ties
broken by node identifier. Visiting the most constrained nodes first keeps
the search from stranding them for later.

The search is bounded by a wall-clock budget. Running out of time, or
exhausting every branch, is an ordinary outcome reported as "no path".
Given the same graph, starting state and an unlimited budget the result is
fully deterministic.
"""

from __future__ import annotations

import time
from typing import Iterator, List, Optional, Set, Tuple

from .graph import Graph
from .logging_utils import (
    LOG_TAG_ERROR,
    LOG_TAG_SEARCH,
    LOG_TAG_SUCCESS,
    log_error,
    log_search,
    log_success,
    verbose_enabled,
)
from .schemas import SolveReport, SolveStatus
from .state import JourneyState


class _Search:
    """One search invocation; owns its working path and visited set."""

    def __init__(self, graph: Graph, prefix: List[int], time_budget: Optional[float]):
        self.graph = graph
        self.target_length = graph.size
        self.path: List[int] = list(prefix)
        self.visited: Set[int] = set(prefix)
        self.started = time.monotonic()
        self.deadline = None if time_budget is None else self.started + time_budget
        self.expansions = 0
        self.timed_out = False
        self.solution: Optional[List[int]] = None

    def expired(self) -> bool:
        """Return True once the budget is spent; stays True afterwards."""

        if self.timed_out:
            return True
        if self.deadline is not None and time.monotonic() >= self.deadline:
            self.timed_out = True
        return self.timed_out

    def onward_count(self, node: int) -> int:
        return sum(1 for nb in self.graph.neighbors(node) if nb not in self.visited)

    def candidates(self) -> List[int]:
        current = self.path[-1]
        options = [nb for nb in self.graph.neighbors(current) if nb not in self.visited]
        options.sort(key=lambda nb: (self.onward_count(nb), nb))
        return options

    def complete(self) -> bool:
        """Record the working path as the solution if it covers every node."""

        if len(self.path) != self.target_length:
            return False
        self.solution = list(self.path)
        return True

    def run(self) -> bool:
        """Depth-first search with an explicit stack.

        Each frame pairs a path node with the iterator over its remaining
        ordered candidates; exhausting a frame pops its node off the path.
        """

        if self.complete():
            self.expansions += 1
            return True
        if self.expired():
            return False
        self.expansions += 1

        stack: List[Tuple[int, Iterator[int]]] = [(self.path[-1], iter(self.candidates()))]
        while stack:
            if self.expired():
                return False
            node, remaining = stack[-1]
            candidate = next(remaining, None)
            if candidate is None:
                stack.pop()
                if stack:
                    self.visited.discard(node)
                    self.path.pop()
                continue

            self.path.append(candidate)
            self.visited.add(candidate)
            self.expansions += 1
            if self.complete():
                return True
            stack.append((candidate, iter(self.candidates())))
        return False

    @property
    def elapsed(self) -> float:
        return time.monotonic() - self.started


def _seed(graph: Graph, state: JourneyState) -> List[int]:
    if state.graph != graph:
        raise ValueError("Journey state belongs to a different graph")
    if state.path:
        return list(state.path)
    # First node in declared order; callers wanting another start pre-seed the path.
    return [graph.nodes[0]]


def solve_with_report(
    graph: Graph,
    state: JourneyState,
    time_budget: Optional[float] = None,
) -> SolveReport:
    """Complete ``state`` into a Hamiltonian path and describe how it went.

    Args:
        graph: Board to search; must be the graph ``state`` was built on
        state: Starting journey; its path is kept as the prefix
        time_budget: Seconds of wall-clock search allowed; ``None`` = unlimited

    Returns:
        SolveReport with status SOLVED (and ``path``), NOT_FOUND or TIMED_OUT

    Raises:
        ValueError: If ``state`` was built on a different graph
    """

    search = _Search(graph, _seed(graph, state), time_budget)
    verbose = verbose_enabled()
    if verbose:
        budget = "unlimited" if time_budget is None else f"{time_budget:.3f}s"
        log_search(
            f"  {LOG_TAG_SEARCH} [Solver] {graph.name or 'graph'}: "
            f"prefix={search.path} nodes={graph.size} budget={budget}"
        )

    found = search.run()

    if found:
        status = SolveStatus.SOLVED
    elif search.timed_out:
        status = SolveStatus.TIMED_OUT
    else:
        status = SolveStatus.NOT_FOUND

    report = SolveReport(
        status=status,
        path=search.solution if found else None,
        expansions=search.expansions,
        elapsed_seconds=search.elapsed,
    )

    if verbose:
        summary = (
            f"{report.status.value} after {report.expansions} expansions "
            f"in {report.elapsed_seconds:.3f}s"
        )
        if found:
            log_success(f"  {LOG_TAG_SUCCESS} [Solver] {summary}: {report.path}")
        else:
            log_error(f"  {LOG_TAG_ERROR} [Solver] {summary}")

    return report


def solve(
    graph: Graph,
    state: JourneyState,
    time_budget: Optional[float] = None,
) -> Optional[List[int]]:
    """Return a full Hamiltonian path extending ``state.path``, or None.

    None covers both an exhausted search and a spent time budget. The
    caller's state is never touched; on success build a replacement with
    ``JourneyState.from_path(graph, path)``.
    """

    return solve_with_report(graph, state, time_budget).path
