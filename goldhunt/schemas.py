"""
Pydantic schemas for the goldhunt command protocol.

Everything that crosses the boundary between the turn engine and a player
controller is defined here: the LOOK window, the result of one command and
the final result of a game.
"""

from enum import Enum
from typing import Iterator, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from goldhunt.environment import Direction, Position, Tile
from goldhunt.environment.helpers import is_move_valid, render_tiles


# ============================================================================
# Perception
# ============================================================================


class PerceptionWindow(BaseModel):
    """Square, entity-centred view of the grid returned by LOOK.

    The window is the bot's only sensory input. Cells outside the map are
    WALL, the caller's own cell shows the caller's symbol and a covered
    opponent cell shows the opponent's symbol.
    """

    model_config = ConfigDict(frozen=True)

    tiles: Tuple[Tuple[Tile, ...], ...] = Field(..., description="Rows of tiles, row-major")

    @field_validator("tiles")
    @classmethod
    def _check_square_odd(cls, tiles: Tuple[Tuple[Tile, ...], ...]) -> Tuple[Tuple[Tile, ...], ...]:
        size = len(tiles)
        if size == 0 or size % 2 == 0:
            raise ValueError(f"window size must be odd and positive, got {size}")
        if any(len(row) != size for row in tiles):
            raise ValueError("window must be square")
        return tiles

    @property
    def size(self) -> int:
        return len(self.tiles)

    @property
    def center(self) -> Position:
        half = self.size // 2
        return Position(half, half)

    def tile_at(self, position: Position) -> Optional[Tile]:
        if 0 <= position.row < self.size and 0 <= position.column < self.size:
            return self.tiles[position.row][position.column]
        return None

    def cells(self) -> Iterator[Tuple[Position, Tile]]:
        """Yield ``(position, tile)`` pairs in row-major scan order."""
        for row_index, row in enumerate(self.tiles):
            for column_index, tile in enumerate(row):
                yield Position(row_index, column_index), tile

    def is_move_valid(self, position: Position, direction: Direction) -> bool:
        return is_move_valid(self.tiles, position, direction)

    def render(self) -> str:
        return render_tiles(self.tiles)


# ============================================================================
# Command results
# ============================================================================


class ResultStatus(str, Enum):
    """How a command was received by the turn engine."""

    OK = "ok"
    FAIL = "fail"          # legal command that had no effect (wall, no gold, ...)
    INVALID = "invalid"    # unrecognized command


class GameOutcome(str, Enum):
    WIN = "win"
    LOSE = "lose"
    CAPTURE = "capture"
    UNFINISHED = "unfinished"


class CommandResult(BaseModel):
    """Response to a single protocol command.

    ``message`` is the exact status line of the protocol (``Success``,
    ``Gold owned: 2``, ``WIN for B`` ...). ``gold_owned`` always reports the
    caller's gold after the command so controllers can track it without
    reading the entity record.
    """

    command: str = Field(..., description="Command text as issued")
    status: ResultStatus = Field(..., description="Whether the command had an effect")
    message: str = Field(..., description="Protocol status line")
    gold_owned: int = Field(..., ge=0, description="Caller's gold after the command")
    window: Optional[PerceptionWindow] = Field(None, description="LOOK response")
    outcome: Optional[GameOutcome] = Field(None, description="WIN/LOSE for QUIT")
    ends_game: bool = Field(False, description="True when the game loop must stop")

    @property
    def succeeded(self) -> bool:
        return self.status is ResultStatus.OK


class GameResult(BaseModel):
    """Final result of one game."""

    outcome: GameOutcome
    winner: Optional[str] = Field(None, description="Symbol of the winner, if any")
    rounds: int = Field(..., ge=0, description="Rounds played (human + bot turn)")
    bot_moves: int = Field(..., ge=0, description="Commands issued by the bot")
    message: str = Field("", description="Final line shown to the operator")
