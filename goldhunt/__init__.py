"""
goldhunt - turn-based grid pursuit game.

A player explores a tile map, collects gold and must reach an exit with
enough gold while a bot hunts them using only a 5x5 view of its surroundings.

All dependencies (maps, controllers, random sources) are injected by the
caller; the console front end in ``goldhunt.cli`` wires them together.
"""

__version__ = "0.1.0"

from .environment import (
    Direction,
    GridMap,
    Position,
    Tile,
    render_full_map,
)
from .errors import GoldHuntError
from .loader import MapLoadError, MapLoader, load_map, parse_map
from .schemas import (
    CommandResult,
    GameOutcome,
    GameResult,
    PerceptionWindow,
    ResultStatus,
)
from .perception import build_perception_window
from .players import (
    Controller,
    ControllerKind,
    HumanController,
    InputClosedError,
    Player,
    scripted_input,
)
from .rules import Command, CommandError, CommandVerb, TurnEngine, parse_command
from .cognition import BotController, BotGoal, BotPhase
from .orchestrator import GameMode, GameOrchestrator

__all__ = [
    # Environment
    "Direction",
    "GridMap",
    "Position",
    "Tile",
    "render_full_map",
    # Loading
    "MapLoadError",
    "MapLoader",
    "load_map",
    "parse_map",
    # Protocol schemas
    "CommandResult",
    "GameOutcome",
    "GameResult",
    "PerceptionWindow",
    "ResultStatus",
    "build_perception_window",
    # Players
    "Controller",
    "ControllerKind",
    "HumanController",
    "Player",
    "scripted_input",
    "BotController",
    "BotGoal",
    "BotPhase",
    # Engine
    "Command",
    "CommandError",
    "CommandVerb",
    "TurnEngine",
    "parse_command",
    "GameMode",
    "GameOrchestrator",
    # Errors
    "GoldHuntError",
    "InputClosedError",
]
