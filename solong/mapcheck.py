"""Reading and validating game maps.

A map is a rectangle of characters: ``1`` for walls, ``0`` for floor, ``P``
for the single player, ``E`` for the single exit and ``C`` for at least one
collectible. It must be closed by walls, and every collectible as well as
the exit must be reachable from the player.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import ErrorCode, GameError
from .linereader import LineReader
from .strings import split, strcmp

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
FILLED = "F"

MAP_EXTENSION = ".ber"


@dataclass
class GameMap:
    """A parsed map together with what validation learned about it."""

    grid: list[list[str]]
    filled: list[list[str]]
    num_rows: int
    num_cols: int = 0
    player_y: int = 0
    player_x: int = 0
    players: int = 0
    exits: int = 0
    collectibles: int = 0
    collectibles_total: int = 0
    _checked: bool = field(default=False, repr=False)

    @property
    def rows(self) -> list[str]:
        """The map as a list of strings, one per row."""
        return ["".join(row) for row in self.grid]

    @property
    def filled_rows(self) -> list[str]:
        """The flood-filled copy of the map as a list of strings."""
        return ["".join(row) for row in self.filled]


def check_extension(filename: str) -> None:
    """Raise unless the text from the first dot of ``filename`` is ``.ber``."""
    dot = filename.find(".")
    if dot < 0 or strcmp(filename[dot:], MAP_EXTENSION) != 0:
        raise GameError(ErrorCode.EXTENSION_ERROR)


def read_map(lines: Iterable[str]) -> GameMap:
    """Build a map from ``lines``, each read line counting as one row.

    Raises EMPTY_MAP when there is nothing to read and INVALID_MAP when the
    content starts with an empty line.
    """
    line_list = list(lines)
    if not line_list:
        raise GameError(ErrorCode.EMPTY_MAP)
    text = "".join(line_list)
    if not text:
        raise GameError(ErrorCode.EMPTY_MAP)
    if text.startswith("\n"):
        raise GameError(ErrorCode.INVALID_MAP)
    rows = split(text, "\n")
    return GameMap(
        grid=[list(row) for row in rows],
        filled=[list(row) for row in rows],
        num_rows=len(line_list),
    )


def check_shape(game_map: GameMap) -> None:
    """Check that every row has the same width and the border is all walls."""
    if not game_map.grid:
        raise GameError(ErrorCode.EMPTY_MAP)
    game_map.num_cols = len(game_map.grid[0])
    last_row = game_map.num_rows - 1
    last_col = game_map.num_cols - 1
    for y, row in enumerate(game_map.grid):
        if len(row) != game_map.num_cols:
            raise GameError(ErrorCode.BAD_ROW)
        for x, cell in enumerate(row):
            on_border = y in (0, last_row) or x in (0, last_col)
            if on_border and cell != WALL:
                raise GameError(ErrorCode.NO_WALLS)


def check_elements(game_map: GameMap) -> None:
    """Count players, exits and collectibles and reject unknown characters.

    The first row and first column are walls already and are skipped.
    """
    for y, row in enumerate(game_map.grid[1:], start=1):
        for x, cell in enumerate(row[1:], start=1):
            if cell == PLAYER:
                game_map.players += 1
                game_map.player_y = y
                game_map.player_x = x
            elif cell == EXIT:
                game_map.exits += 1
            elif cell == COLLECTIBLE:
                game_map.collectibles += 1
            elif cell not in (FLOOR, WALL):
                raise GameError(ErrorCode.INVALID_ELEMENT)
    if game_map.players != 1 or game_map.exits != 1 or game_map.collectibles < 1:
        raise GameError(ErrorCode.ELEMENT_ERROR)


def flood_fill(game_map: GameMap) -> None:
    """Mark every cell reachable from the player in the map's copy with F."""
    filled = game_map.filled
    stack = [(game_map.player_y, game_map.player_x)]
    while stack:
        y, x = stack.pop()
        if y < 0 or y >= len(filled) or x < 0 or x >= len(filled[y]):
            continue
        if filled[y][x] in (WALL, FILLED):
            continue
        filled[y][x] = FILLED
        stack.extend(((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)))


def check_valid_path(game_map: GameMap) -> None:
    """Raise IMPOSIBLE_WIN if a collectible or the exit was not reached."""
    for row in game_map.filled:
        if EXIT in row or COLLECTIBLE in row:
            raise GameError(ErrorCode.IMPOSIBLE_WIN)


def validate_map(lines: Iterable[str]) -> GameMap:
    """Read ``lines`` into a map and run every check on it."""
    game_map = read_map(lines)
    check_shape(game_map)
    if game_map.num_rows != len(game_map.grid):
        raise GameError(ErrorCode.INVALID_MAP)
    check_elements(game_map)
    game_map.collectibles_total = game_map.collectibles
    flood_fill(game_map)
    check_valid_path(game_map)
    game_map._checked = True
    return game_map


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Open the map file at ``path`` and return it validated."""
    try:
        stream = open(path, encoding="utf-8", newline="")
    except OSError as exc:
        raise GameError(ErrorCode.NOFILE_ERROR) from exc
    with stream:
        lines = list(LineReader(stream))
    return validate_map(lines)