"""Utilities for rendering grids and checking moves."""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Sequence

from .grid import Direction, GridMap, Position, Tile

if TYPE_CHECKING:  # pragma: no cover - typing only
    from goldhunt.players import Player


def is_move_valid(
    tiles: Sequence[Sequence[Tile]],
    position: Position,
    direction: Direction,
) -> bool:
    """Return True when stepping from ``position`` stays on a non-WALL cell.

    ``tiles`` is any rectangular tile matrix (a perception window in practice).
    Leaving the matrix counts as an illegal move.
    """

    target = position.step(direction)
    if not (0 <= target.row < len(tiles)):
        return False
    row = tiles[target.row]
    if not (0 <= target.column < len(row)):
        return False
    return row[target.column] is not Tile.WALL


def render_tiles(tiles: Sequence[Sequence[Tile]]) -> str:
    """Render a tile matrix as newline-separated rows of tile characters."""

    return "\n".join("".join(tile.char for tile in row) for row in tiles)


def render_full_map(
    grid: GridMap,
    first: Optional["Player"] = None,
    second: Optional["Player"] = None,
) -> str:
    """Render the whole board with its ``name``/``win`` header.

    Entities passed in are drawn over the terrain using their symbols; if both
    stand on the same cell ``first`` is shown.
    """

    lines: List[str] = [f"name {grid.name}", f"win {grid.gold_required}"]
    for row_index, row in enumerate(grid.tiles):
        chars: List[str] = []
        for column_index, tile in enumerate(row):
            position = Position(row_index, column_index)
            if first is not None and first.position == position:
                chars.append(first.symbol.char)
            elif second is not None and second.position == position:
                chars.append(second.symbol.char)
            else:
                chars.append(tile.char)
        lines.append("".join(chars))
    return "\n".join(lines)
