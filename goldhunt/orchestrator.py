"""
Main game loop.

Coordinates one game between a human-side player and the bot:
1. Optionally dump the full board (trace mode)
2. Human turn: read one command, process it, deliver the response
3. Bot turn: ask the bot for a command, process it, deliver the response
4. Capture check: if both players share a cell the bot has won

The loop is synchronous. A turn waits as long as its input source needs;
there are no timers and no concurrent commands.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import Callable, List, Optional

from .environment import GridMap, Tile, render_full_map
from .logging_utils import (
    LOG_TAG_BOT,
    LOG_TAG_ERROR,
    LOG_TAG_INFO,
    LOG_TAG_SUCCESS,
    LOG_TAG_TRACE,
    log_bot,
    log_error,
    log_info,
    log_success,
    log_trace,
)
from .players import Controller, Player
from .rules import TurnEngine
from .schemas import CommandResult, GameOutcome, GameResult, ResultStatus


class GameMode(str, Enum):
    """Who takes turns."""

    PLAYER_AND_BOT = "P"
    BOT_TEST = "T"  # only the bot acts, useful to watch it hunt a standing player


RoundListener = Callable[[int, Player, Player], None]


class GameOrchestrator:
    """Runs turns until QUIT, capture or (optionally) a round limit.

    Dependencies are injected; the orchestrator reads no files and no
    environment variables.
    """

    def __init__(
        self,
        grid: GridMap,
        human: Player,
        bot: Player,
        *,
        mode: GameMode = GameMode.PLAYER_AND_BOT,
        trace: bool = False,
        engine: Optional[TurnEngine] = None,
        round_listeners: Optional[List[RoundListener]] = None,
    ):
        """Initialize the orchestrator.

        Args:
            grid: Loaded and validated map
            human: The human-side player (may be driven by a script)
            bot: The bot player
            mode: PLAYER_AND_BOT alternates turns; BOT_TEST only moves the bot
            trace: Dump the board every round and echo bot commands' results
            engine: Optional TurnEngine (defaults to one over ``grid``)
            round_listeners: Callables invoked after each completed round
                with (round_number, human, bot)
        """
        self.grid = grid
        self.human = human
        self.bot = bot
        self.mode = mode
        self.trace = trace
        self.engine = engine or TurnEngine(grid)
        self.round_listeners = round_listeners or []
        self.rounds_played = 0

    @classmethod
    def new_game(
        cls,
        grid: GridMap,
        *,
        human_controller: Controller,
        bot_controller: Controller,
        rng: Optional[random.Random] = None,
        **kwargs,
    ) -> "GameOrchestrator":
        """Place both players at random start cells and build the orchestrator.

        The bot never starts on the human's cell.
        """
        rng = rng or random.Random()
        human_start = grid.random_start_position(rng=rng)
        bot_start = grid.random_start_position(exclude=human_start, rng=rng)
        human = Player(position=human_start, symbol=Tile.PLAYER, controller=human_controller)
        bot = Player(position=bot_start, symbol=Tile.BOT, controller=bot_controller)
        return cls(grid, human, bot, **kwargs)

    def run(self, max_rounds: Optional[int] = None) -> GameResult:
        """Play rounds until the game ends.

        Args:
            max_rounds: Optional cap for scripted runs; reaching it ends the
                game with an UNFINISHED outcome.

        Returns:
            GameResult describing how the game ended

        Raises:
            GoldHuntError: If an input source fails (e.g. InputClosedError);
                the game cannot continue without its next command.
        """
        if self.trace:
            log_trace(render_full_map(self.grid))
            log_trace(f"{LOG_TAG_TRACE} {self.human}")
            log_trace(f"{LOG_TAG_TRACE} {self.bot}")

        while max_rounds is None or self.rounds_played < max_rounds:
            if self.trace:
                log_trace(render_full_map(self.grid, self.human, self.bot))

            if self.mode is not GameMode.BOT_TEST:
                result = self._take_turn(self.human, self.bot)
                if result.ends_game:
                    self.rounds_played += 1
                    return self._finish(result, self.human)

            result = self._take_turn(self.bot, self.human)
            self.rounds_played += 1

            # Checked before QUIT: a capture outranks the bot's own outcome
            if self.bot.position == self.human.position:
                return self._capture()
            if result.ends_game:
                return self._finish(result, self.bot)

            for listener in self.round_listeners:
                listener(self.rounds_played, self.human, self.bot)

        message = f"Game stopped after {self.rounds_played} rounds"
        log_info(f"{LOG_TAG_INFO} {message}")
        return GameResult(
            outcome=GameOutcome.UNFINISHED,
            rounds=self.rounds_played,
            bot_moves=self.bot.commands_issued,
            message=message,
        )

    def _take_turn(self, actor: Player, other: Player) -> CommandResult:
        """Ask ``actor`` for one command, process it and hand back the response."""
        try:
            command = actor.controller.issue_command()
        except Exception as exc:
            log_error(f"{LOG_TAG_ERROR} Player {actor.symbol} could not supply a command: {exc}")
            raise
        actor.commands_issued += 1

        if actor.is_bot:
            log_bot(f"{LOG_TAG_BOT} Bots command: {command}")

        result = self.engine.process(command, actor, other)
        if result.status is ResultStatus.INVALID:
            log_error(result.message)
        actor.controller.handle_response(result)
        return result

    def _capture(self) -> GameResult:
        message = f"Bot has caught player in {self.bot.commands_issued} moves!"
        log_success(f"{LOG_TAG_SUCCESS} {message}")
        return GameResult(
            outcome=GameOutcome.CAPTURE,
            winner=self.bot.symbol.char,
            rounds=self.rounds_played,
            bot_moves=self.bot.commands_issued,
            message=message,
        )

    def _finish(self, result: CommandResult, actor: Player) -> GameResult:
        if result.outcome is GameOutcome.WIN:
            log_success(f"{LOG_TAG_SUCCESS} {result.message}")
            winner: Optional[str] = actor.symbol.char
        else:
            log_info(f"{LOG_TAG_INFO} {result.message}")
            winner = None
        return GameResult(
            outcome=result.outcome or GameOutcome.LOSE,
            winner=winner,
            rounds=self.rounds_played,
            bot_moves=self.bot.commands_issued,
            message=result.message,
        )
