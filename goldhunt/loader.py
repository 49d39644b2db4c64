"""
Map loading for text-defined dungeon maps.

A map file is newline-delimited text:

```
name Small Dungeon
win 2
#######
#..G.E#
#.G...#
#######
```

The first two lines are the ``name`` and ``win`` headers; every following
line is a row of tile characters drawn from ``E`` (exit), ``G`` (gold),
``.`` (space) and ``#`` (wall). Player markers (``P``/``B``) are reserved for
rendering live entities and are rejected here.

Validation happens in full before a ``GridMap`` is returned, so a failed load
never leaves partial game state behind:
- both headers present and well formed, ``win`` a non-negative integer
- at least one row, all rows of equal length
- only terrain characters
- enough gold to meet ``win``, at least two spaces and one exit

Usage:
    grid = load_map("maps/example_map.txt")
    # or, by name from a directory of maps
    grid = MapLoader(Path("maps")).load("example_map")
"""

from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, Field, ValidationError

from .config import MIN_EXIT_TILES, MIN_SPACE_TILES, Config
from .environment import TILES_BY_CHAR, GridMap, Tile
from .errors import GoldHuntError


# =============================
# Module-level Exceptions
# =============================

class MapLoadError(GoldHuntError):
    """Raised when a map file cannot be read or fails validation."""

    def __init__(self, message: str, *, source: Optional[str] = None) -> None:
        self.source = source
        super().__init__(message)


class MapHeader(BaseModel):
    """Parsed ``name``/``win`` header lines."""

    name: str = Field(..., description="Display name of the map")
    gold_required: int = Field(..., ge=0, description="Gold needed before QUIT wins")


def parse_map(text: str, *, source: Optional[str] = None) -> GridMap:
    """Parse map file contents into a validated ``GridMap``.

    Raises:
        MapLoadError: If the header, grid shape, characters or tile counts
            are invalid.
    """
    lines = text.splitlines()
    # Trailing blank lines are common in hand-edited files
    while lines and not lines[-1].strip():
        lines.pop()

    if len(lines) < 2:
        raise MapLoadError("map file must start with 'name' and 'win' header lines", source=source)

    header = _parse_header(lines[0], lines[1], source=source)

    rows = lines[2:]
    if not rows:
        raise MapLoadError("map file contains no rows", source=source)

    tiles: List[List[Tile]] = []
    width = len(rows[0])
    for line in rows:
        if len(line) != width:
            raise MapLoadError("map is not rectangular", source=source)
        tiles.append(_read_row(line, source=source))

    grid = GridMap(name=header.name, gold_required=header.gold_required, tiles=tiles)
    validate_grid(grid, source=source)
    return grid


def _parse_header(name_line: str, win_line: str, *, source: Optional[str]) -> MapHeader:
    if not name_line.startswith("name"):
        raise MapLoadError(
            f"first line of map file must start with 'name', found: {name_line}", source=source
        )
    if not win_line.startswith("win"):
        raise MapLoadError(
            f"second line of map file must start with 'win', found: {win_line}", source=source
        )

    raw_win = win_line[3:].strip()
    try:
        gold_required = int(raw_win)
    except ValueError:
        raise MapLoadError(f"'win' value must be an integer, found: {raw_win}", source=source) from None

    try:
        return MapHeader(name=name_line[4:].strip(), gold_required=gold_required)
    except ValidationError as exc:
        raise MapLoadError(f"invalid map header: {exc.errors()[0]['msg']}", source=source) from exc


def _read_row(line: str, *, source: Optional[str]) -> List[Tile]:
    row: List[Tile] = []
    for char in line:
        tile = TILES_BY_CHAR.get(char)
        # Loaded maps can not place players
        if tile is None or tile.is_marker:
            raise MapLoadError(f"Unexpected character in map: {char}", source=source)
        row.append(tile)
    return row


def validate_grid(grid: GridMap, *, source: Optional[str] = None) -> None:
    """Check the tile-count invariants of a parsed grid."""
    if grid.count(Tile.GOLD) < grid.gold_required:
        raise MapLoadError(
            "Invalid map: insufficient gold on the map to meet the win requirement", source=source
        )
    if grid.count(Tile.SPACE) < MIN_SPACE_TILES:
        raise MapLoadError("Invalid map: not enough space tiles", source=source)
    if grid.count(Tile.EXIT) < MIN_EXIT_TILES:
        raise MapLoadError("Invalid map: no exit tile found", source=source)


def load_map(path: Union[str, Path]) -> GridMap:
    """Read and validate the map file at ``path``.

    Raises:
        MapLoadError: If the file cannot be read or its contents are invalid.
    """
    map_path = Path(path)
    try:
        text = map_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        raise MapLoadError(f"Unable to open file at path: {path}", source=str(path)) from None
    return parse_map(text, source=str(map_path))


class MapLoader:
    """Load maps by name from a directory of ``.txt`` map files."""

    def __init__(self, maps_dir: Optional[Path] = None):
        """Initialize map loader.

        Args:
            maps_dir: Directory containing map files. Defaults to the maps
                packaged with goldhunt.
        """
        self.maps_dir = maps_dir or Config.MAPS_DIR

    def available(self) -> List[str]:
        """Names of the maps in ``maps_dir`` (without extension)."""
        if not self.maps_dir.exists():
            return []
        return sorted(p.stem for p in self.maps_dir.glob("*.txt"))

    def load(self, map_name: str) -> GridMap:
        """Load ``{map_name}.txt`` from the maps directory."""
        return load_map(self.maps_dir / f"{map_name}.txt")
