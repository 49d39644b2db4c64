"""Grid environment for goldhunt maps."""

from .grid import (
    DIRECTIONS_BY_CHAR,
    TILES_BY_CHAR,
    Direction,
    GridMap,
    Position,
    Tile,
)
from .helpers import is_move_valid, render_full_map, render_tiles

__all__ = [
    "DIRECTIONS_BY_CHAR",
    "TILES_BY_CHAR",
    "Direction",
    "GridMap",
    "Position",
    "Tile",
    "is_move_valid",
    "render_full_map",
    "render_tiles",
]
