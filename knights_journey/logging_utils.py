"""Logging utilities for Knight's Journey.

Provides color-coded console output so search progress, user moves and
failures are easy to tell apart when ``KNIGHTS_VERBOSE`` is enabled.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI escape sequences, one per kind of journey event."""

    BLUE = "\033[94m"      # player moved, undid a move or reset the board
    YELLOW = "\033[93m"    # solver started; current node in board listings
    RED = "\033[91m"       # illegal move, rejected/discarded solve, no path in time
    GREEN = "\033[92m"     # journey completed or solved; visited nodes
    CYAN = "\033[96m"      # board switched, board headers, solve budget

    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Return ``text`` wrapped in ``color``; plain when KNIGHTS_NO_COLOR is set."""
    if os.getenv("KNIGHTS_NO_COLOR"):
        return text
    style = (Color.BOLD.value if bold else "") + color.value
    return f"{style}{text}{Color.RESET.value}"


def verbose_enabled() -> bool:
    """Return True when KNIGHTS_VERBOSE asks for progress output."""
    return os.getenv("KNIGHTS_VERBOSE", "").lower() in ("1", "true", "yes")


def log_move(message: str) -> None:
    """Log a journey transition (blue)."""
    print(colored(message, Color.BLUE))


def log_search(message: str) -> None:
    """Log solver activity (yellow)."""
    print(colored(message, Color.YELLOW))


def log_error(message: str) -> None:
    """Log an error, rejection or time-out (red)."""
    print(colored(message, Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(message, Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(message, Color.CYAN))


# Markers for operation types (color-blind accessible)
LOG_TAG_MOVE = "[•]"      # Journey transition
LOG_TAG_SEARCH = "[?]"    # Solver search
LOG_TAG_ERROR = "[!]"     # Error/rejection
LOG_TAG_SUCCESS = "[✓]"   # Success
LOG_TAG_INFO = "[i]"      # Information
