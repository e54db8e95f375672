"""Player movement, collectibles and the win condition."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

from .mapcheck import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap
from .printf import sprintf

SPRITE_SIZE = 32

WIN_MESSAGE = "YASS, 20 hours of sleep straight\n"
HUNGRY_MESSAGE = "You can't rest if you're still hungry :(\n"
EAT_MESSAGE = "Yummy!\n"


class Direction(Enum):
    """A step on the grid as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)


_KEYS = {
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}
_CLOSE_KEYS = frozenset({"escape", "esc"})


class Game:
    """A running game on a validated map."""

    def __init__(self, game_map: GameMap, output: TextIO | None = None) -> None:
        self.grid = [list(row) for row in game_map.grid]
        self.player_y = game_map.player_y
        self.player_x = game_map.player_x
        self.collectibles_left = game_map.collectibles
        self.collectibles_total = game_map.collectibles_total or game_map.collectibles
        self.eaten: set[tuple[int, int]] = set()
        self.moves = 0
        self.closed = False
        self.won = False
        self._output = output

    @property
    def position(self) -> tuple[int, int]:
        """The player's (row, column) on the grid."""
        return self.player_y, self.player_x

    @property
    def pixel_position(self) -> tuple[int, int]:
        """The player's sprite position as (x, y) in pixels."""
        return self.player_x * SPRITE_SIZE, self.player_y * SPRITE_SIZE

    def _write(self, text: str) -> None:
        (self._output or sys.stdout).write(text)

    def _try_win(self) -> bool:
        if self.collectibles_left == 0:
            self.closed = True
            self.won = True
            self._write(WIN_MESSAGE)
            return True
        self._write(HUNGRY_MESSAGE)
        return False

    def _eat(self) -> None:
        self.eaten.add(self.position)
        self._write(EAT_MESSAGE)

    def move(self, direction: Direction) -> bool:
        """Step the player one cell; return True if the player moved."""
        if self.closed:
            return False
        dy, dx = direction.value
        target_y, target_x = self.player_y + dy, self.player_x + dx
        target = self.grid[target_y][target_x]
        if target == WALL:
            return False
        if target == EXIT and not self._try_win():
            return False
        self.grid[self.player_y][self.player_x] = FLOOR
        self.grid[target_y][target_x] = PLAYER
        self.player_y, self.player_x = target_y, target_x
        if target == COLLECTIBLE:
            self.collectibles_left -= 1
            self._eat()
        self.moves += 1
        self._write(sprintf("Moves: %d\n", self.moves))
        return True

    def handle_key(self, key: str) -> bool:
        """React to a released key; return True if the player moved.

        W, A, S and D move the player; Escape closes the game.
        """
        name = key.strip().lower()
        if name in _CLOSE_KEYS:
            self.closed = True
            return False
        direction = _KEYS.get(name)
        if direction is None:
            return False
        return self.move(direction)

    def render(self) -> str:
        """Return the current map as text, one row per line."""
        return "\n".join("".join(row) for row in self.grid)