"""
goldhunt Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

# Game constants
VIEW_SIZE = 5  # side of the square LOOK window, always odd
MIN_SPACE_TILES = 2
MIN_EXIT_TILES = 1


def _env_flag(name: str) -> Optional[bool]:
    """Parse a yes/no style environment variable; None when unset."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Project Paths
    PACKAGE_ROOT: Path = Path(__file__).parent
    MAPS_DIR: Path = PACKAGE_ROOT / "maps"

    # Map used when the operator does not supply one
    DEFAULT_MAP_PATH: Path = Path(os.getenv("GOLDHUNT_MAP", str(MAPS_DIR / "example_map.txt")))

    # Console defaults; None means "ask the operator"
    GAME_MODE: Optional[str] = os.getenv("GOLDHUNT_MODE") or None
    TRACE: Optional[bool] = _env_flag("GOLDHUNT_TRACE")

    # Seed for start positions and bot fallback moves (raw text, see seed())
    SEED: Optional[str] = os.getenv("GOLDHUNT_SEED") or None

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.GAME_MODE is not None and cls.GAME_MODE.upper() not in {"P", "T"}:
            raise ValueError(
                f"GOLDHUNT_MODE must be 'P' (player and bot) or 'T' (bot test), got {cls.GAME_MODE!r}"
            )
        cls.seed()

    @classmethod
    def seed(cls) -> Optional[int]:
        """Return GOLDHUNT_SEED as an integer, or None when unset."""
        if cls.SEED is None or cls.SEED.strip() == "":
            return None
        try:
            return int(cls.SEED)
        except ValueError:
            raise ValueError(f"GOLDHUNT_SEED must be an integer, got {cls.SEED!r}") from None

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "goldhunt Configuration:",
            f"  Default Map: {cls.DEFAULT_MAP_PATH}",
            f"  Game Mode: {cls.GAME_MODE or 'prompt'}",
            f"  Trace: {'prompt' if cls.TRACE is None else cls.TRACE}",
            f"  Seed: {cls.SEED if cls.SEED is not None else 'random'}",
        ]
        return "\n".join(lines)
