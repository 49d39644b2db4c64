"""Tests for map file loading and validation."""

import pytest

from goldhunt.config import Config
from goldhunt.environment import Position, Tile
from goldhunt.loader import MapLoadError, MapLoader, load_map, parse_map

VALID_MAP = """\
name Small Dungeon
win 2
#######
#..G.E#
#.G...#
#######
"""


def test_load_map_parses_header_and_tiles(write_map):
    grid = load_map(write_map(VALID_MAP))

    assert grid.name == "Small Dungeon"
    assert grid.gold_required == 2
    assert (grid.rows, grid.columns) == (4, 7)
    assert grid.tile_at(Position(1, 3)) is Tile.GOLD
    assert grid.tile_at(Position(1, 5)) is Tile.EXIT
    assert grid.tile_at(Position(0, 0)) is Tile.WALL


def test_trailing_blank_lines_are_ignored():
    grid = parse_map(VALID_MAP + "\n\n")
    assert grid.rows == 4


def test_missing_file_is_a_load_error(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(MapLoadError, match="Unable to open file"):
        load_map(missing)


@pytest.mark.parametrize(
    "text, message",
    [
        ("title X\nwin 1\n#E..G#\n", "must start with 'name'"),
        ("name X\ngold 1\n#E..G#\n", "must start with 'win'"),
        ("name X\nwin many\n#E..G#\n", "must be an integer"),
        ("name X\nwin -1\n#E..G#\n", "invalid map header"),
        ("name X\n", "header lines"),
        ("name X\nwin 0\n", "no rows"),
    ],
)
def test_malformed_headers(text, message):
    with pytest.raises(MapLoadError, match=message):
        parse_map(text)


def test_non_rectangular_grid():
    with pytest.raises(MapLoadError, match="not rectangular"):
        parse_map("name X\nwin 0\n#E..#\n#..#\n")


@pytest.mark.parametrize("char", ["P", "B", "x", "?"])
def test_markers_and_unknown_characters_are_rejected(char):
    with pytest.raises(MapLoadError, match="Unexpected character"):
        parse_map(f"name X\nwin 0\n#E..{char}#\n")


def test_insufficient_gold():
    with pytest.raises(MapLoadError, match="insufficient gold"):
        parse_map("name X\nwin 2\n#E..G#\n")


def test_not_enough_spaces():
    with pytest.raises(MapLoadError, match="not enough space"):
        parse_map("name X\nwin 0\n#E.G#\n")


def test_no_exit():
    with pytest.raises(MapLoadError, match="no exit"):
        parse_map("name X\nwin 0\n#...G#\n")


def test_load_error_carries_source(write_map):
    path = write_map("name X\nwin 5\n#E..G#\n")
    with pytest.raises(MapLoadError) as excinfo:
        load_map(path)
    assert excinfo.value.source == str(path)


def test_map_loader_finds_maps_by_name(write_map, tmp_path):
    write_map(VALID_MAP, filename="small.txt")
    loader = MapLoader(tmp_path)

    assert loader.available() == ["small"]
    assert loader.load("small").name == "Small Dungeon"


def test_packaged_maps_are_valid():
    loader = MapLoader()
    names = loader.available()
    assert "example_map" in names
    for name in names:
        grid = loader.load(name)
        assert grid.count(Tile.EXIT) >= 1
    assert Config.DEFAULT_MAP_PATH.name == "example_map.txt"
