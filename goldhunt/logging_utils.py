"""Logging utilities for goldhunt games.

Provides color-coded console output so trace lines, errors and outcomes are
easy to tell apart from the protocol responses printed for the human player.
"""

import os
from enum import Enum


class Color(Enum):
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"      # Trace (board dumps)
    RED = "\033[91m"       # Errors
    GREEN = "\033[92m"     # Wins and successful outcomes
    CYAN = "\033[96m"      # Info/metadata
    YELLOW = "\033[93m"    # Bot decisions

    # Formatting
    BOLD = "\033[1m"
    RESET = "\033[0m"


def colored(text: str, color: Color, bold: bool = False) -> str:
    """Wrap text in ANSI color codes if colors are enabled.

    Args:
        text: Text to colorize
        color: Color to apply
        bold: Whether to make text bold

    Returns:
        Colorized text if GOLDHUNT_NO_COLOR is not set, otherwise plain text
    """
    if os.getenv("GOLDHUNT_NO_COLOR"):
        return text

    prefix = color.value
    if bold:
        prefix = Color.BOLD.value + prefix

    return f"{prefix}{text}{Color.RESET.value}"


def log_trace(message: str) -> None:
    """Log a trace line (blue)."""
    print(colored(message, Color.BLUE))


def log_error(message: str) -> None:
    """Log an error (red)."""
    print(colored(message, Color.RED))


def log_success(message: str) -> None:
    """Log a success (green)."""
    print(colored(message, Color.GREEN))


def log_info(message: str) -> None:
    """Log metadata/info (cyan)."""
    print(colored(message, Color.CYAN))


def log_bot(message: str) -> None:
    """Log a bot decision (yellow)."""
    print(colored(message, Color.YELLOW))


# Markers for operation types (color-blind accessible)
LOG_TAG_TRACE = "[•]"
LOG_TAG_ERROR = "[!]"
LOG_TAG_SUCCESS = "[✓]"
LOG_TAG_INFO = "[i]"
LOG_TAG_BOT = "[B]"
