"""Tests for console colouring and log tags in game output."""

from __future__ import annotations

import random

from goldhunt.cognition import BotController
from goldhunt.environment import Position, Tile
from goldhunt.logging_utils import (
    LOG_TAG_BOT,
    LOG_TAG_ERROR,
    LOG_TAG_SUCCESS,
    LOG_TAG_TRACE,
    Color,
    colored,
    log_bot,
    log_error,
)
from goldhunt.orchestrator import GameMode, GameOrchestrator
from goldhunt.players import Player

from conftest import grid_from_rows, make_player


def test_colored_respects_no_color(monkeypatch):
    assert colored("plain", Color.RED) == "plain"

    monkeypatch.delenv("GOLDHUNT_NO_COLOR")
    assert colored("hot", Color.RED) == f"{Color.RED.value}hot{Color.RESET.value}"
    assert colored("hot", Color.RED, bold=True).startswith(Color.BOLD.value + Color.RED.value)


def test_log_error_prints_to_stdout(capsys):
    log_error(f"{LOG_TAG_ERROR} broken")
    assert capsys.readouterr().out == "[!] broken\n"


def test_bot_lines_are_yellow(monkeypatch, capsys):
    monkeypatch.delenv("GOLDHUNT_NO_COLOR")
    log_bot(f"{LOG_TAG_BOT} Bots command: LOOK")
    assert capsys.readouterr().out == f"{Color.YELLOW.value}[B] Bots command: LOOK{Color.RESET.value}\n"


def test_game_output_carries_tags(capsys):
    grid = grid_from_rows("#######", "#.....#", "#######")
    bot = Player(position=Position(1, 1), symbol=Tile.BOT, controller=BotController(random.Random(0), trace=True))
    game = GameOrchestrator(grid, make_player(1, 3), bot, mode=GameMode.BOT_TEST, trace=True)

    game.run()

    out = capsys.readouterr().out
    assert f"{LOG_TAG_BOT} Bot requires 0 gold" in out
    assert f"{LOG_TAG_BOT} Bots command: HELLO" in out
    assert f"{LOG_TAG_SUCCESS} Bot has caught player" in out
    assert f"{LOG_TAG_TRACE} Player P at (1, 3) owns 0 gold" in out
