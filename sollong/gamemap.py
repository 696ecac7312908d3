"""Map files: loading, validation and the tile grid of a level.

A map is a rectangle of tiles written one row per line. It must be
enclosed by walls, hold exactly one player and one exit, at least one
coin, and the player must be able to reach every coin and the exit.
"""

from __future__ import annotations

import os
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from sollong.linereader import read_lines

MIN_MAP_SIZE = 3
MAP_EXTENSION = ".ber"


class Tile(str, Enum):
    """The characters a map is made of."""

    WALL = "1"
    SPACE = "0"
    PLAYER = "P"
    COIN = "C"
    EXIT = "E"
    OPPONENT = "O"


_VALID_CHARS = frozenset(tile.value for tile in Tile)


class MapError(ValueError):
    """Raised when a map file is missing, unreadable or invalid."""


@dataclass(frozen=True)
class Point:
    """A grid position, row first."""

    row: int
    col: int

    def offset(self, drow: int, dcol: int) -> Point:
        """The point drow rows and dcol columns away."""
        return Point(self.row + drow, self.col + dcol)


@dataclass
class GameMap:
    """A validated grid of tiles with the positions of the player and exit."""

    tiles: list[list[Tile]]
    player: Point
    exit: Point
    coins: int

    @property
    def height(self) -> int:
        return len(self.tiles)

    @property
    def width(self) -> int:
        return len(self.tiles[0]) if self.tiles else 0

    @property
    def rows(self) -> list[str]:
        """The grid as one string per row."""
        return ["".join(tile.value for tile in row) for row in self.tiles]

    def __str__(self) -> str:
        return "\n".join(self.rows)

    def _check_bounds(self, point: Point) -> None:
        if not (0 <= point.row < self.height and 0 <= point.col < self.width):
            raise IndexError(f"{point} lies outside the map")

    def tile_at(self, point: Point) -> Tile:
        """The tile at point."""
        self._check_bounds(point)
        return self.tiles[point.row][point.col]

    def set_tile(self, point: Point, tile: Tile | str) -> None:
        """Put tile at point."""
        self._check_bounds(point)
        self.tiles[point.row][point.col] = Tile(tile)


def has_ber_extension(path: str | os.PathLike[str]) -> bool:
    """True when the file name ends in the map extension."""
    return os.fspath(path).endswith(MAP_EXTENSION)


def read_map_lines(path: str | os.PathLike[str]) -> list[str]:
    """Read the lines of a map file, each with its line ending."""
    try:
        with open(path, encoding="latin-1", newline="") as stream:
            return list(read_lines(stream))
    except OSError as exc:
        raise MapError(f"cannot read map file {os.fspath(path)}") from exc


def check_size(rows: Sequence[str]) -> int:
    """Check that the raw lines are equally long and numerous enough.

    Every line, line ending included, must have the same length, and
    there must be at least MIN_MAP_SIZE of them. Returns the map width:
    the line length without its final character.
    """
    if not rows:
        raise MapError("map is empty")
    length = len(rows[0])
    if any(len(row) != length for row in rows[1:]):
        raise MapError("map rows differ in length")
    if len(rows) < MIN_MAP_SIZE:
        raise MapError(f"map has fewer than {MIN_MAP_SIZE} rows")
    return length - 1


def check_elements(rows: Sequence[str]) -> tuple[Point, Point, int]:
    """Check the characters of the grid.

    Returns the player position, the exit position and the number of
    coins. Raises MapError on an unknown character, on anything but
    exactly one player and one exit, or when there is no coin.
    """
    players: list[Point] = []
    exits: list[Point] = []
    coins = 0
    for row_index, row in enumerate(rows):
        for col_index, char in enumerate(row):
            if char not in _VALID_CHARS:
                raise MapError(f"invalid character {char!r} in map")
            if char == Tile.PLAYER:
                players.append(Point(row_index, col_index))
            elif char == Tile.EXIT:
                exits.append(Point(row_index, col_index))
            elif char == Tile.COIN:
                coins += 1
    if len(players) != 1:
        raise MapError("map must hold exactly one player")
    if len(exits) != 1:
        raise MapError("map must hold exactly one exit")
    if coins < 1:
        raise MapError("map must hold at least one coin")
    return players[0], exits[0], coins


def check_enclosed(rows: Sequence[str]) -> None:
    """Check that the grid is surrounded by walls."""
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            if any(char != Tile.WALL for char in row):
                raise MapError("map border is open")
        elif not row or row[0] != Tile.WALL or row[-1] != Tile.WALL:
            raise MapError("map border is open")


def path_reaches_all(rows: Sequence[Sequence[str]], start: Point, targets: int) -> bool:
    """True when targets coins and exits can be reached from start.

    Every tile except a wall can be walked through, the exit included.
    """
    if targets <= 0:
        return True
    if rows[start.row][start.col] == Tile.WALL:
        return False
    remaining = targets
    seen = {start}
    queue = deque([start])
    while queue:
        point = queue.popleft()
        if rows[point.row][point.col] in (Tile.COIN, Tile.EXIT):
            remaining -= 1
            if remaining == 0:
                return True
        for drow, dcol in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            near = point.offset(drow, dcol)
            if near in seen or not 0 <= near.row < len(rows):
                continue
            row = rows[near.row]
            if not 0 <= near.col < len(row) or row[near.col] == Tile.WALL:
                continue
            seen.add(near)
            queue.append(near)
    return False


def parse_map(lines: Iterable[str]) -> GameMap:
    """Validate the raw lines of a map file and build the map."""
    raw = list(lines)
    width = check_size(raw)
    rows = [line[:width] for line in raw]
    player, exit_point, coins = check_elements(rows)
    check_enclosed(rows)
    if not path_reaches_all(rows, player, coins + 1):
        raise MapError("not every coin and the exit can be reached")
    tiles = [[Tile(char) for char in row] for row in rows]
    return GameMap(tiles, player, exit_point, coins)


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read and validate the map file at path."""
    if not has_ber_extension(path):
        raise MapError(f"map file must end in {MAP_EXTENSION}")
    return parse_map(read_map_lines(path))