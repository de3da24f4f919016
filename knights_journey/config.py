"""
Knight's Journey Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .logging_utils import verbose_enabled

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Solver Configuration
    # Wall-clock budget for one auto-solve, in seconds
    SOLVE_BUDGET_SECONDS: float = float(os.getenv("KNIGHTS_SOLVE_BUDGET_SECONDS", "2.5"))

    # Board Configuration
    DEFAULT_BOARD: str = os.getenv("KNIGHTS_DEFAULT_BOARD", "Circle-8")

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.SOLVE_BUDGET_SECONDS <= 0:
            raise ValueError(
                "KNIGHTS_SOLVE_BUDGET_SECONDS must be positive "
                f"(got {cls.SOLVE_BUDGET_SECONDS})"
            )

        if not cls.DEFAULT_BOARD:
            raise ValueError(
                "KNIGHTS_DEFAULT_BOARD must name a board preset, e.g. 'Circle-8'"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Knight's Journey Configuration:",
            f"  Solve Budget: {cls.SOLVE_BUDGET_SECONDS}s",
            f"  Default Board: {cls.DEFAULT_BOARD}",
            f"  Log Level: {cls.LOG_LEVEL}",
            f"  Verbose: {verbose_enabled()}",
        ]
        return "\n".join(lines)
