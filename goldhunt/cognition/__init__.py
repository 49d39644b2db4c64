"""Bot cognition: scratchpad, planner and executor."""

from .executor import BotController, parse_required_gold
from .planner import Plan, Sightings, find_path, next_step, plan_from_window, random_move, scan_window
from .scratchpad import BotGoal, BotPhase, Scratchpad

__all__ = [
    "BotController",
    "BotGoal",
    "BotPhase",
    "Plan",
    "Scratchpad",
    "Sightings",
    "find_path",
    "next_step",
    "parse_required_gold",
    "plan_from_window",
    "random_move",
    "scan_window",
]
