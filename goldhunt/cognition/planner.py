"""Goal selection and move planning over a perception window.

Everything here works in window coordinates: the bot always stands at the
window centre. Nothing in this module sees the full map.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional

from goldhunt.environment import Direction, Position, Tile
from goldhunt.rules import move_command
from goldhunt.schemas import PerceptionWindow

from .scratchpad import BotGoal

# Stepper preference: close the row gap before the column gap
_ROW_FIRST = (
    (Direction.NORTH, lambda cur, dst: cur.row > dst.row),
    (Direction.SOUTH, lambda cur, dst: cur.row < dst.row),
    (Direction.WEST, lambda cur, dst: cur.column > dst.column),
    (Direction.EAST, lambda cur, dst: cur.column < dst.column),
)

_DIRECTIONS = list(Direction)


@dataclass
class Sightings:
    """What one scan of the window found."""

    gold: Optional[Position] = None
    gold_distance: int = 0
    exit: Optional[Position] = None
    opponent: Optional[Position] = None


@dataclass
class Plan:
    """A goal, where it leads and the moves queued to get there."""

    goal: BotGoal = BotGoal.NONE
    destination: Optional[Position] = None
    steps: List[str] = field(default_factory=list)


def scan_window(window: PerceptionWindow) -> Sightings:
    """Scan the window row-major for gold, the exit and the opponent.

    The nearest gold by Manhattan distance wins and an equally distant gold
    found later never replaces it. When several exits are visible the last
    one scanned is kept.
    """
    center = window.center
    sightings = Sightings()
    for position, tile in window.cells():
        if tile is Tile.GOLD:
            distance = position.manhattan(center)
            if sightings.gold is None or distance < sightings.gold_distance:
                sightings.gold = position
                sightings.gold_distance = distance
        elif tile.is_marker and position != center:
            sightings.opponent = position
        elif tile is Tile.EXIT:
            sightings.exit = position
    return sightings


def next_step(
    window: PerceptionWindow,
    current: Position,
    destination: Position,
) -> Optional[Direction]:
    """Pick one move that closes the gap to ``destination`` without hitting a wall."""
    for direction, closes_gap in _ROW_FIRST:
        if closes_gap(current, destination) and window.is_move_valid(current, direction):
            return direction
    return None


def find_path(window: PerceptionWindow, destination: Position) -> List[str]:
    """Greedy single-axis walk from the centre towards ``destination``.

    Stops early when no gap-closing move is legal, so the path can fall short
    of an obstructed destination. There is no backtracking.
    """
    current = window.center
    moves: List[str] = []
    while current != destination:
        direction = next_step(window, current, destination)
        if direction is None:
            break
        moves.append(move_command(direction))
        current = current.step(direction)
    return moves


def random_move(window: PerceptionWindow, rng: random.Random) -> Optional[str]:
    """Pick a uniformly random direction that does not lead into a wall.

    Directions are resampled until one is legal. Returns None when the bot is
    walled in on all four sides.
    """
    center = window.center
    if not any(window.is_move_valid(center, d) for d in _DIRECTIONS):
        return None
    while True:
        direction = rng.choice(_DIRECTIONS)
        if window.is_move_valid(center, direction):
            return move_command(direction)


def plan_from_window(
    window: PerceptionWindow,
    *,
    gold_owned: int,
    required_gold: int,
    rng: random.Random,
) -> Plan:
    """Choose a goal from the window and queue the moves towards it.

    Priority: exit (only once enough gold is owned), then the opponent, then
    the nearest gold, then a single random legal move.
    """
    sightings = scan_window(window)

    if gold_owned >= required_gold and sightings.exit is not None:
        goal, destination = BotGoal.SEEK_EXIT, sightings.exit
    elif sightings.opponent is not None:
        goal, destination = BotGoal.CHASE_OPPONENT, sightings.opponent
    elif sightings.gold is not None:
        goal, destination = BotGoal.SEEK_GOLD, sightings.gold
    else:
        move = random_move(window, rng)
        return Plan(steps=[move] if move else [])

    return Plan(goal=goal, destination=destination, steps=find_path(window, destination))
