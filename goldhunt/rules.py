"""
Turn engine: the command protocol that validates and applies player actions.

Every turn a player issues exactly one command line. The engine parses it,
applies its effect to the map and the calling player, and answers with a
:class:`CommandResult` whose ``message`` is the protocol status line.

Command set (closed):
- ``HELLO``     -> ``Gold to win: <n>``                       (no mutation)
- ``GOLD``      -> ``Gold owned: <n>``                        (no mutation)
- ``LOOK``      -> 5x5 perception window                      (no mutation)
- ``MOVE <d>``  -> ``Success`` / ``Fail``, d in N, E, S, W    (moves the caller)
- ``PICKUP``    -> ``Success. Gold owned: <n>`` / ``Fail. Gold owned: <n>``
- ``QUIT``      -> ``WIN for <symbol>`` / ``LOSE``            (ends the game)

Anything else is answered with ``Invalid command`` and changes nothing.
Rejected moves and empty pickups are ordinary FAIL results, not exceptions;
the game simply proceeds to the next turn.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, Optional

from .config import VIEW_SIZE
from .environment import DIRECTIONS_BY_CHAR, Direction, GridMap, Tile
from .errors import GoldHuntError
from .perception import build_perception_window
from .schemas import CommandResult, GameOutcome, ResultStatus

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .players import Player


class CommandError(GoldHuntError):
    """Raised when a command line is not part of the protocol."""

    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"Invalid command: {command!r}")


class CommandVerb(str, Enum):
    HELLO = "HELLO"
    GOLD = "GOLD"
    LOOK = "LOOK"
    MOVE = "MOVE"
    PICKUP = "PICKUP"
    QUIT = "QUIT"


@dataclass(frozen=True)
class Command:
    verb: CommandVerb
    direction: Optional[Direction] = None

    def __str__(self) -> str:
        if self.direction is not None:
            return move_command(self.direction)
        return self.verb.value


def move_command(direction: Direction) -> str:
    return f"{CommandVerb.MOVE.value} {direction.char}"


_SIMPLE_VERBS = {verb.value: verb for verb in CommandVerb if verb is not CommandVerb.MOVE}


def parse_command(text: str) -> Command:
    """Parse one protocol line; surrounding whitespace is ignored.

    Raises:
        CommandError: If the line is not one of the six commands.
    """
    line = text.strip()
    verb = _SIMPLE_VERBS.get(line)
    if verb is not None:
        return Command(verb)

    # "MOVE X" with exactly one space and a single direction character
    prefix = CommandVerb.MOVE.value + " "
    if line.startswith(prefix) and len(line) == len(prefix) + 1:
        direction = DIRECTIONS_BY_CHAR.get(line[-1])
        if direction is not None:
            return Command(CommandVerb.MOVE, direction)

    raise CommandError(text)


Handler = Callable[[Command, "Player", "Player"], CommandResult]


class TurnEngine:
    """Applies protocol commands to one map.

    The engine owns no player state. It is handed the calling player and the
    other player on every call; only the caller is ever mutated.
    """

    def __init__(self, grid: GridMap, *, view_size: int = VIEW_SIZE):
        self.grid = grid
        self.view_size = view_size
        self._handlers: Dict[CommandVerb, Handler] = {
            CommandVerb.HELLO: self._hello,
            CommandVerb.GOLD: self._gold,
            CommandVerb.LOOK: self._look,
            CommandVerb.MOVE: self._move,
            CommandVerb.PICKUP: self._pickup,
            CommandVerb.QUIT: self._quit,
        }

    def process(self, command: str, caller: "Player", other: "Player") -> CommandResult:
        """Validate and apply ``command`` for ``caller``."""
        try:
            parsed = parse_command(command)
        except CommandError:
            return CommandResult(
                command=command,
                status=ResultStatus.INVALID,
                message="Invalid command",
                gold_owned=caller.gold_owned,
            )
        return self._handlers[parsed.verb](parsed, caller, other)

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    def _hello(self, command: Command, caller: "Player", other: "Player") -> CommandResult:
        return self._ok(command, caller, f"Gold to win: {self.grid.gold_required}")

    def _gold(self, command: Command, caller: "Player", other: "Player") -> CommandResult:
        return self._ok(command, caller, f"Gold owned: {caller.gold_owned}")

    def _look(self, command: Command, caller: "Player", other: "Player") -> CommandResult:
        window = build_perception_window(self.grid, caller, other, size=self.view_size)
        return CommandResult(
            command=str(command),
            status=ResultStatus.OK,
            message=window.render(),
            gold_owned=caller.gold_owned,
            window=window,
        )

    def _move(self, command: Command, caller: "Player", other: "Player") -> CommandResult:
        assert command.direction is not None
        target = caller.position.step(command.direction)
        tile = self.grid.tile_at(target)
        # WALL and off-map (None) both reject the move
        if tile is None or not tile.is_walkable:
            return self._fail(command, caller, "Fail")
        caller.position = target
        return self._ok(command, caller, "Success")

    def _pickup(self, command: Command, caller: "Player", other: "Player") -> CommandResult:
        if self.grid.tile_at(caller.position) is not Tile.GOLD:
            return self._fail(command, caller, f"Fail. Gold owned: {caller.gold_owned}")
        gold = caller.increment_gold()
        self.grid.set_tile(caller.position, Tile.SPACE)
        return self._ok(command, caller, f"Success. Gold owned: {gold}")

    def _quit(self, command: Command, caller: "Player", other: "Player") -> CommandResult:
        on_exit = self.grid.tile_at(caller.position) is Tile.EXIT
        if on_exit and caller.gold_owned >= self.grid.gold_required:
            outcome, message = GameOutcome.WIN, f"WIN for {caller.symbol}"
        else:
            outcome, message = GameOutcome.LOSE, "LOSE"
        return CommandResult(
            command=str(command),
            status=ResultStatus.OK,
            message=message,
            gold_owned=caller.gold_owned,
            outcome=outcome,
            ends_game=True,
        )

    @staticmethod
    def _ok(command: Command, caller: "Player", message: str) -> CommandResult:
        return CommandResult(
            command=str(command), status=ResultStatus.OK, message=message, gold_owned=caller.gold_owned
        )

    @staticmethod
    def _fail(command: Command, caller: "Player", message: str) -> CommandResult:
        return CommandResult(
            command=str(command), status=ResultStatus.FAIL, message=message, gold_owned=caller.gold_owned
        )
