"""Working memory the bot carries between turns."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Deque, Optional


class BotGoal(str, Enum):
    NONE = "none"
    SEEK_GOLD = "seek_gold"
    SEEK_EXIT = "seek_exit"
    CHASE_OPPONENT = "chase_opponent"


class BotPhase(str, Enum):
    AWAITING_INTRO = "awaiting_intro"  # HELLO not answered yet
    ACTIVE = "active"


@dataclass
class Scratchpad:
    """Goal, queued moves and the facts the bot has learned from responses.

    ``queued_moves`` holds protocol command strings (``"MOVE N"`` ...) and is
    replaced wholesale whenever a LOOK response arrives.
    """

    goal: BotGoal = BotGoal.NONE
    queued_moves: Deque[str] = field(default_factory=deque)
    required_gold: Optional[int] = None
    gold_owned: int = 0

    @property
    def phase(self) -> BotPhase:
        return BotPhase.AWAITING_INTRO if self.required_gold is None else BotPhase.ACTIVE

    def replace_plan(self, goal: BotGoal, moves) -> None:
        self.goal = goal
        self.queued_moves = deque(moves)
