"""Tile grid primitives for the dungeon map.

Row 0 / column 0 is the top-left corner of the map. Rows grow southwards and
columns grow eastwards, so ``NORTH`` decrements the row and ``WEST``
decrements the column.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


class Tile(Enum):
    """Terrain classification of a cell, plus the two live-entity markers."""

    EXIT = "E"
    GOLD = "G"
    SPACE = "."
    WALL = "#"
    PLAYER = "P"
    BOT = "B"

    @property
    def char(self) -> str:
        return self.value

    @property
    def is_marker(self) -> bool:
        """True for symbols that only ever mark an entity, never terrain."""
        return self in (Tile.PLAYER, Tile.BOT)

    @property
    def is_walkable(self) -> bool:
        return self in (Tile.SPACE, Tile.EXIT, Tile.GOLD)

    def __str__(self) -> str:
        return self.value


class Direction(Enum):
    """Compass directions an entity can step in, keyed by protocol character."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def char(self) -> str:
        return self.value

    @property
    def delta(self) -> Tuple[int, int]:
        return _DIRECTION_DELTAS[self]

    @classmethod
    def from_char(cls, char: str) -> "Direction":
        direction = DIRECTIONS_BY_CHAR.get(char)
        if direction is None:
            raise ValueError(f"No such direction: {char}")
        return direction


_DIRECTION_DELTAS = {
    Direction.NORTH: (-1, 0),
    Direction.EAST: (0, 1),
    Direction.SOUTH: (1, 0),
    Direction.WEST: (0, -1),
}

# Lookup tables are built once at import and exposed read-only.
TILES_BY_CHAR: Mapping[str, Tile] = MappingProxyType({tile.char: tile for tile in Tile})
DIRECTIONS_BY_CHAR: Mapping[str, Direction] = MappingProxyType(
    {direction.char: direction for direction in Direction}
)


@dataclass(frozen=True)
class Position:
    """Integer (row, column) coordinate.

    Values may be negative while a candidate move is being validated; the grid
    reports such positions as out of bounds.
    """

    row: int
    column: int

    def step(self, direction: Direction) -> "Position":
        d_row, d_col = direction.delta
        return Position(self.row + d_row, self.column + d_col)

    def north(self) -> "Position":
        return self.step(Direction.NORTH)

    def south(self) -> "Position":
        return self.step(Direction.SOUTH)

    def east(self) -> "Position":
        return self.step(Direction.EAST)

    def west(self) -> "Position":
        return self.step(Direction.WEST)

    def manhattan(self, other: "Position") -> int:
        return abs(self.row - other.row) + abs(self.column - other.column)

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


@dataclass
class GridMap:
    """Authoritative tile grid for one game.

    The grid is read-only during play except for :meth:`set_tile`, which the
    turn engine calls when gold is picked up.
    """

    name: str
    gold_required: int
    tiles: List[List[Tile]] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.tiles)

    @property
    def columns(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    def in_bounds(self, position: Position) -> bool:
        return 0 <= position.row < self.rows and 0 <= position.column < self.columns

    def tile_at(self, position: Position) -> Optional[Tile]:
        """Return the tile at ``position`` or ``None`` when outside the map."""
        if not self.in_bounds(position):
            return None
        return self.tiles[position.row][position.column]

    def set_tile(self, position: Position, tile: Tile) -> None:
        if not self.in_bounds(position):
            raise IndexError(f"Position {position} is outside the map")
        self.tiles[position.row][position.column] = tile

    def count(self, tile: Tile) -> int:
        return sum(row.count(tile) for row in self.tiles)

    def random_start_position(
        self,
        exclude: Optional[Position] = None,
        *,
        rng: Optional[random.Random] = None,
    ) -> Position:
        """Sample cells uniformly until one is SPACE or EXIT and not ``exclude``.

        Loops forever on a grid without such a cell; loaded maps always have
        at least two SPACE tiles.
        """
        rng = rng or random.Random()
        while True:
            candidate = Position(rng.randrange(self.rows), rng.randrange(self.columns))
            if exclude is not None and candidate == exclude:
                continue
            if self.tile_at(candidate) in (Tile.SPACE, Tile.EXIT):
                return candidate
