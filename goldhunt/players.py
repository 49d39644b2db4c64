"""Entities taking part in a game and the controllers that drive them.

A :class:`Player` is pure game state: where the entity stands, which symbol
marks it and how much gold it owns. Behaviour lives in its controller, one of
a closed set of variants behind the :class:`Controller` protocol:

- :class:`HumanController` reads commands from an input source (the console,
  or a scripted sequence) and prints responses.
- :class:`goldhunt.cognition.BotController` decides its own commands from the
  LOOK window.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Optional, Protocol

from .environment import Position, Tile
from .errors import GoldHuntError
from .schemas import CommandResult, ResultStatus


class InputClosedError(GoldHuntError):
    """Raised when a human controller's input source has no more commands."""


class ControllerKind(str, Enum):
    HUMAN = "human"
    BOT = "bot"


class Controller(Protocol):
    """Capability interface shared by every player variant."""

    kind: ControllerKind

    def issue_command(self) -> str:
        """Supply the next protocol command for this player's turn."""
        ...

    def handle_response(self, result: CommandResult) -> None:
        """Consume the turn engine's response to the command just issued."""
        ...


@dataclass
class Player:
    """A participant's position, symbol and gold count."""

    position: Position
    symbol: Tile
    controller: Controller
    gold_owned: int = 0
    commands_issued: int = 0

    def __post_init__(self) -> None:
        if not self.symbol.is_marker:
            raise ValueError(f"Player symbol must be a marker tile, got {self.symbol.name}")

    @property
    def is_bot(self) -> bool:
        return self.controller.kind is ControllerKind.BOT

    def increment_gold(self) -> int:
        self.gold_owned += 1
        return self.gold_owned

    def __str__(self) -> str:
        return f"Player {self.symbol} at {self.position} owns {self.gold_owned} gold"


InputSource = Callable[[str], str]


def scripted_input(commands: Iterable[str]) -> InputSource:
    """Turn a fixed sequence of commands into an input source.

    The returned callable ignores its prompt and raises ``EOFError`` once the
    sequence is exhausted, like ``input()`` at the end of stdin.
    """
    iterator = iter(commands)

    def _next(_prompt: str = "") -> str:
        try:
            return next(iterator)
        except StopIteration:
            raise EOFError("scripted input exhausted") from None

    return _next


class HumanController:
    """Controller for a human typing commands (or a script standing in for one)."""

    kind = ControllerKind.HUMAN

    def __init__(
        self,
        input_source: Optional[InputSource] = None,
        output: Optional[Callable[[str], None]] = None,
        prompt: str = "Enter command:",
    ):
        self.input_source: InputSource = input_source or input
        self.output: Callable[[str], None] = output or print
        self.prompt = prompt

    def issue_command(self) -> str:
        self.output(self.prompt)
        try:
            line = self.input_source("")
        except EOFError as exc:
            raise InputClosedError("No more input available for the human player") from exc
        return line.strip().upper()

    def handle_response(self, result: CommandResult) -> None:
        # Invalid commands and game-ending lines are announced by the game loop
        if result.ends_game or result.status is ResultStatus.INVALID:
            return
        if result.window is not None:
            self.output(result.window.render())
            return
        self.output(result.message)
