"""Bot decision engine: turns LOOK windows into one command per turn.

The bot is a small state machine. Until HELLO is answered it knows nothing
about the gold needed to win and issues nothing else. After that, each turn it
either replays a queued move, resolves a finished goal (PICKUP for gold, QUIT
for the exit) or sends LOOK to refresh its view and plan again.
"""

from __future__ import annotations

import random
from typing import Optional

from goldhunt.logging_utils import LOG_TAG_BOT, log_bot
from goldhunt.players import ControllerKind
from goldhunt.rules import CommandVerb
from goldhunt.schemas import CommandResult, PerceptionWindow

from .planner import Plan, plan_from_window, scan_window
from .scratchpad import BotGoal, BotPhase, Scratchpad

# Goals that end with a command of their own once the moves run out
_RESOLVING_COMMANDS = {
    BotGoal.SEEK_GOLD: CommandVerb.PICKUP.value,
    BotGoal.SEEK_EXIT: CommandVerb.QUIT.value,
}


def parse_required_gold(message: str) -> int:
    """Read the integer after the colon of a HELLO response (``Gold to win: 3``)."""
    _, sep, tail = message.partition(":")
    if not sep:
        raise ValueError(f"HELLO response has no ':' separator: {message!r}")
    return int(tail.strip())


class BotController:
    """Deterministic controller for the computer-driven player.

    Randomness (fallback moves) comes from the injected ``rng`` so tests and
    seeded runs are reproducible.
    """

    kind = ControllerKind.BOT

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        *,
        trace: bool = False,
        scratchpad: Optional[Scratchpad] = None,
    ):
        self.rng = rng or random.Random()
        self.trace = trace
        self.scratchpad = scratchpad or Scratchpad()
        self.last_plan: Optional[Plan] = None

    @property
    def phase(self) -> BotPhase:
        return self.scratchpad.phase

    @property
    def goal(self) -> BotGoal:
        return self.scratchpad.goal

    def issue_command(self) -> str:
        pad = self.scratchpad

        if pad.phase is BotPhase.AWAITING_INTRO:
            return CommandVerb.HELLO.value

        if pad.queued_moves:
            return pad.queued_moves.popleft()

        resolving = _RESOLVING_COMMANDS.get(pad.goal)
        if resolving is not None:
            pad.goal = BotGoal.NONE
            return resolving

        return CommandVerb.LOOK.value

    def handle_response(self, result: CommandResult) -> None:
        pad = self.scratchpad
        pad.gold_owned = result.gold_owned

        if result.command == CommandVerb.HELLO.value and result.succeeded:
            pad.required_gold = parse_required_gold(result.message)
            self._trace(f"Bot requires {pad.required_gold} gold")
        elif result.window is not None:
            self._replan(result.window)
        else:
            self._trace(f"Bot {result.command}: {result.message}")

    def _replan(self, window: PerceptionWindow) -> None:
        pad = self.scratchpad
        if self.trace:
            sightings = scan_window(window)
            if sightings.gold is not None:
                self._trace("Bot sees Gold")
            if sightings.opponent is not None:
                self._trace("Bot sees Player")
            if sightings.exit is not None:
                self._trace("Bot sees Exit")

        plan = plan_from_window(
            window,
            gold_owned=pad.gold_owned,
            required_gold=pad.required_gold or 0,
            rng=self.rng,
        )
        pad.replace_plan(plan.goal, plan.steps)
        self.last_plan = plan
        self._trace(f"Bot goal {plan.goal.value}, queued {list(plan.steps)}")

    def _trace(self, message: str) -> None:
        if self.trace:
            log_bot(f"  {LOG_TAG_BOT} {message}")
