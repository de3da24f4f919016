"""
Knight's Journey in the terminal

Pick a board, then type node ids to walk the graph. Every node must be
visited exactly once, moving only along edges.

Commands:
    <id>        move to node <id>
    u           undo the last move
    r           reset the board
    s           auto-solve from the current position
    b <name>    switch board (e.g. "b Star-10")
    q           quit

Run: python examples/terminal/run.py --board Ring+Chords-12
"""

import argparse
import asyncio

from knights_journey import JourneySession, SolveStatus, visit_order
from knights_journey.config import Config
from knights_journey.logging_utils import (
    Color,
    LOG_TAG_ERROR,
    LOG_TAG_INFO,
    LOG_TAG_SUCCESS,
    colored,
    log_error,
    log_info,
    log_success,
)


def render(session: JourneySession) -> str:
    """List every node with its neighbours and visit position."""

    state = session.state
    lines = [colored(f"== {session.board.name} ==", Color.CYAN, bold=True)]
    for node in session.graph.nodes:
        order = visit_order(state, node)
        marker = f"{order:>2}" if order is not None else " ."
        if node == state.current:
            marker = colored(marker, Color.YELLOW, bold=True)
        elif order is not None:
            marker = colored(marker, Color.GREEN)
        neighbours = ", ".join(str(nb) for nb in sorted(session.graph.neighbors(node)))
        lines.append(f"  [{marker}] #{node:<2} -> {neighbours}")
    lines.append(f"  {session.status_line()}")
    return "\n".join(lines)


async def play(session: JourneySession) -> None:
    print(render(session))
    while True:
        try:
            command = input("> ").strip()
        except EOFError:
            break

        if not command:
            continue
        if command == "q":
            break
        if command == "u":
            session.undo()
        elif command == "r":
            session.reset()
        elif command.startswith("b "):
            try:
                session.select_board(command[2:].strip())
            except KeyError as exc:
                log_error(f"{LOG_TAG_ERROR} {exc}")
                continue
        elif command == "s":
            log_info(f"{LOG_TAG_INFO} Solving (budget {session.time_budget}s)...")
            report = await session.auto_solve()
            if report.status is not SolveStatus.SOLVED:
                log_error(f"{LOG_TAG_ERROR} No solution found in time ({report.status.value})")
        elif command.isdigit():
            if not session.move(int(command)):
                log_error(f"{LOG_TAG_ERROR} Can't move there: no edge, or already visited")
        else:
            log_error(f"{LOG_TAG_ERROR} Unknown command '{command}'")
            continue

        print(render(session))
        if session.state.is_complete:
            log_success(f"{LOG_TAG_SUCCESS} Done! Every node visited exactly once.")


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Knight's Journey in the terminal")
    parser.add_argument("--board", default=Config.DEFAULT_BOARD, help="Board name to start on")
    parser.add_argument(
        "--budget",
        type=float,
        default=Config.SOLVE_BUDGET_SECONDS,
        help="Auto-solve time budget in seconds",
    )
    args = parser.parse_args()

    Config.validate()
    session = JourneySession(board=args.board, time_budget=args.budget)
    asyncio.run(play(session))


if __name__ == "__main__":
    main()
