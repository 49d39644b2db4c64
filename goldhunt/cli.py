"""Console front end.

Any setting not given on the command line (or through ``GOLDHUNT_*``
environment variables) is asked for interactively, using the same questions
the game has always asked.

RUN:
    goldhunt                       # fully interactive
    goldhunt --mode T --trace      # watch the bot play on the default map
    python -m goldhunt --map maps/small.txt --mode P --no-trace --seed 7
"""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from .cognition import BotController
from .config import Config
from .environment import GridMap
from .errors import GoldHuntError
from .loader import load_map
from .logging_utils import LOG_TAG_INFO, log_error, log_info
from .orchestrator import GameMode, GameOrchestrator
from .players import HumanController

Prompt = Callable[[str], str]


class GameConfigError(GoldHuntError):
    """Raised when the operator's setup answers cannot be used."""


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description="Grid pursuit game: collect gold, reach the exit, avoid the bot")
    parser.add_argument(
        "--mode",
        choices=["P", "T", "p", "t"],
        help="P = player and bot, T = bot test (only the bot moves)",
    )
    parser.add_argument(
        "--trace",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Show the full map and all player moves each turn",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--map", type=Path, help="Path to a map file")
    source.add_argument("--default-map", action="store_true", help="Load the default map without asking")
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument("--show-config", action="store_true", help="Print the resolved configuration and exit")
    return parser.parse_args(argv)


def select_game_mode(ask: Prompt) -> GameMode:
    answer = ask(
        "Select game mode from:\n Player and Bot (P)\n Bot test (T) \nType P or T then press ENTER\n"
    ).strip().upper()
    try:
        return GameMode(answer)
    except ValueError:
        raise GameConfigError("Invalid game mode") from None


def select_trace_enabled(ask: Prompt) -> bool:
    answer = ask(
        "Do you want to enable trace ? "
        "Trace will show the full map and all player moves for each turn."
        "\nType Y or N then press ENTER\n"
    )
    return answer.strip().upper() == "Y"


def select_map(ask: Prompt) -> GridMap:
    answer = ask("Do you want to load a map file?\nType Y or N then press ENTER\n")
    if answer.strip().upper() == "Y":
        path = ask("Enter the full path to the map file: (eg /tmp/map.txt then press ENTER)\n")
        return load_map(path.strip())
    log_info(f"{LOG_TAG_INFO} Loading default map")
    return load_map(Config.DEFAULT_MAP_PATH)


def build_game(args: argparse.Namespace, ask: Prompt = input) -> GameOrchestrator:
    """Resolve every setting, load the map and place both players."""
    mode_answer = args.mode or Config.GAME_MODE
    mode = GameMode(mode_answer.upper()) if mode_answer else select_game_mode(ask)

    trace = args.trace if args.trace is not None else Config.TRACE
    if trace is None:
        trace = select_trace_enabled(ask)

    if args.map is not None:
        grid = load_map(args.map)
    elif args.default_map:
        grid = load_map(Config.DEFAULT_MAP_PATH)
    else:
        grid = select_map(ask)

    seed = args.seed if args.seed is not None else Config.seed()
    rng = random.Random(seed) if seed is not None else random.Random()

    return GameOrchestrator.new_game(
        grid,
        human_controller=HumanController(input_source=ask),
        bot_controller=BotController(random.Random(rng.random()), trace=trace),
        rng=rng,
        mode=mode,
        trace=trace,
    )


def main(argv: Optional[Sequence[str]] = None, ask: Prompt = input) -> int:
    args = parse_args(argv)
    try:
        Config.validate()
        if args.show_config:
            log_info(Config.display())
            return 0
        game = build_game(args, ask)
        game.run()
    except (GoldHuntError, ValueError) as exc:
        log_error(f"Error: {exc}")
        return 1
    except KeyboardInterrupt:
        log_error("Error: interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
