"""Shared fixtures for goldhunt tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from goldhunt.environment import TILES_BY_CHAR, GridMap, Position, Tile
from goldhunt.loader import parse_map
from goldhunt.players import HumanController, Player, scripted_input


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Keep captured console output free of ANSI codes."""
    monkeypatch.setenv("GOLDHUNT_NO_COLOR", "1")


def grid_from_rows(*rows: str, win: int = 0, name: str = "Test Map") -> GridMap:
    """Build a GridMap without load-time validation (for engine-level tests)."""
    return GridMap(
        name=name,
        gold_required=win,
        tiles=[[TILES_BY_CHAR[c] for c in row] for row in rows],
    )


def make_player(row: int, column: int, symbol: Tile = Tile.PLAYER, commands=()) -> Player:
    return Player(
        position=Position(row, column),
        symbol=symbol,
        controller=HumanController(input_source=scripted_input(commands), output=lambda _line: None),
    )


@pytest.fixture
def write_map(tmp_path: Path):
    """Write map text to a temporary file and return its path."""

    def _write(text: str, filename: str = "map.txt") -> Path:
        path = tmp_path / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# Two rooms: the bot's room with gold and an exit, and a closed room on the
# right where a standing player stays out of the bot's 5x5 view.
VAULT_MAP = """\
name Vault
win 1
##########
#E..#....#
#.G.#....#
#...#....#
##########
"""


@pytest.fixture
def vault_grid() -> GridMap:
    return parse_map(VAULT_MAP)
