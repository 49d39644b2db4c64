"""
Perception construction: the fog-of-war boundary between the map and players.

The turn engine answers LOOK by building a :class:`PerceptionWindow` here. The
window is the only view of the map a bot ever receives; the decision engine
never touches ``GridMap`` directly.

Filtering rules:
- the window is a square of odd side ``size`` centred on the caller
- the caller's own cell shows the caller's symbol
- a covered cell occupied by the opponent shows the opponent's symbol
- cells outside the map show WALL
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

from .config import VIEW_SIZE
from .environment import GridMap, Position, Tile
from .schemas import PerceptionWindow

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .players import Player


def build_perception_window(
    grid: GridMap,
    caller: "Player",
    other: "Player",
    *,
    size: int = VIEW_SIZE,
) -> PerceptionWindow:
    """Build the LOOK window for ``caller``.

    Args:
        grid: Full map (omniscient view)
        caller: Player the window is centred on
        other: Opposing player, drawn if inside the window
        size: Side of the window; must be odd

    Returns:
        PerceptionWindow with only what ``caller`` can see

    Raises:
        ValueError: If ``size`` is not a positive odd number
    """
    if size <= 0 or size % 2 == 0:
        raise ValueError(f"window size must be odd and positive, got {size}")

    half = size // 2
    origin = caller.position
    rows: List[List[Tile]] = []
    for i in range(size):
        row: List[Tile] = []
        for j in range(size):
            cell = Position(origin.row - half + i, origin.column - half + j)
            tile = grid.tile_at(cell)
            if tile is None:
                row.append(Tile.WALL)
            elif other.position == cell:
                row.append(other.symbol)
            else:
                row.append(tile)
        rows.append(row)

    rows[half][half] = caller.symbol
    return PerceptionWindow(tiles=tuple(tuple(row) for row in rows))
