"""Tests for grid primitives and rendering helpers."""

import random

import pytest

from goldhunt.environment import (
    DIRECTIONS_BY_CHAR,
    TILES_BY_CHAR,
    Direction,
    Position,
    Tile,
    is_move_valid,
    render_full_map,
    render_tiles,
)

from conftest import grid_from_rows, make_player


def test_position_steps_move_one_unit():
    origin = Position(3, 3)
    assert origin.north() == Position(2, 3)
    assert origin.south() == Position(4, 3)
    assert origin.east() == Position(3, 4)
    assert origin.west() == Position(3, 2)
    # Steps return new values; the original is untouched
    assert origin == Position(3, 3)


def test_position_hash_distinguishes_transposed_coordinates():
    # (1, 2) and (2, 1) would collide under an additive row+column hash
    cells = {Position(1, 2), Position(2, 1), Position(0, 3)}
    assert len(cells) == 3
    assert Position(1, 2) in cells
    assert Position(1, 2) == Position(1, 2)


def test_lookup_tables_are_read_only():
    assert TILES_BY_CHAR["#"] is Tile.WALL
    assert DIRECTIONS_BY_CHAR["W"] is Direction.WEST
    with pytest.raises(TypeError):
        TILES_BY_CHAR["X"] = Tile.WALL  # type: ignore[index]


def test_direction_from_char_rejects_unknown():
    assert Direction.from_char("N") is Direction.NORTH
    with pytest.raises(ValueError):
        Direction.from_char("Q")


def test_tile_at_returns_none_out_of_bounds():
    grid = grid_from_rows("#.#", "#E#")
    assert grid.rows == 2 and grid.columns == 3
    assert grid.tile_at(Position(1, 1)) is Tile.EXIT
    assert grid.tile_at(Position(-1, 0)) is None
    assert grid.tile_at(Position(0, 3)) is None
    assert grid.tile_at(Position(2, 0)) is None


def test_set_tile_is_bounds_checked():
    grid = grid_from_rows("G.", "..")
    grid.set_tile(Position(0, 0), Tile.SPACE)
    assert grid.tile_at(Position(0, 0)) is Tile.SPACE
    with pytest.raises(IndexError):
        grid.set_tile(Position(5, 5), Tile.SPACE)


def test_random_start_position_only_picks_space_or_exit():
    grid = grid_from_rows("#####", "#.G.#", "#GEG#", "#####")
    rng = random.Random(3)
    for _ in range(50):
        start = grid.random_start_position(rng=rng)
        assert grid.tile_at(start) in (Tile.SPACE, Tile.EXIT)


def test_random_start_position_avoids_excluded_cell():
    # Exactly two legal cells: the excluded one is never returned
    grid = grid_from_rows("###", "#.#", "#.#", "###")
    rng = random.Random(11)
    for _ in range(30):
        assert grid.random_start_position(exclude=Position(1, 1), rng=rng) == Position(2, 1)


def test_is_move_valid_blocks_walls_and_edges():
    tiles = [
        [Tile.WALL, Tile.SPACE, Tile.GOLD],
        [Tile.SPACE, Tile.BOT, Tile.WALL],
        [Tile.EXIT, Tile.PLAYER, Tile.SPACE],
    ]
    center = Position(1, 1)
    assert is_move_valid(tiles, center, Direction.NORTH) is True
    assert is_move_valid(tiles, center, Direction.EAST) is False
    # A marker is not a wall
    assert is_move_valid(tiles, center, Direction.SOUTH) is True
    assert is_move_valid(tiles, center, Direction.WEST) is True
    # Leaving the matrix is illegal
    assert is_move_valid(tiles, Position(0, 1), Direction.NORTH) is False
    assert is_move_valid(tiles, Position(1, 0), Direction.WEST) is False


def test_render_tiles_joins_rows():
    assert render_tiles([[Tile.WALL, Tile.GOLD], [Tile.EXIT, Tile.SPACE]]) == "#G\nE."


def test_render_full_map_with_overlays():
    grid = grid_from_rows("#####", "#..E#", "#####", win=3, name="Tiny")
    human = make_player(1, 1)
    bot = make_player(1, 2, symbol=Tile.BOT)

    assert render_full_map(grid) == "name Tiny\nwin 3\n#####\n#..E#\n#####"
    assert render_full_map(grid, human, bot).splitlines()[3] == "#PBE#"

    # Shared cell shows the first entity
    bot.position = Position(1, 1)
    assert render_full_map(grid, human, bot).splitlines()[3] == "#P.E#"
    assert render_full_map(grid, bot, human).splitlines()[3] == "#B.E#"
