# solong

A small puzzle game played on a rectangular tile map. The player walks around
the map, eats every collectible and then reaches the exit to win. The game runs
in the terminal: the map is shown as text and moves are read from standard
input.

## Maps

Maps are plain text files with the `.ber` extension. Each line is one row of
the map, and every row must be the same length. Tiles are:

| Tile | Meaning                  |
|------|--------------------------|
| `1`  | wall                     |
| `0`  | empty floor              |
| `P`  | player start (exactly 1) |
| `E`  | exit (exactly 1)         |
| `C`  | collectible (at least 1) |

The map must be fully enclosed by walls, and the player must be able to reach
the exit and every collectible. For example:

```
1111111
1P0C0E1
1111111
```

The file name is checked from its first dot: everything from there on must be
exactly `.ber`, so `maps/level1.ber` is accepted while `level1.map.ber` or
`./level1.ber` are not.

An invalid map is rejected with a `solong.errors.GameError` whose `code` is one
of the `solong.errors.ErrorCode` members:

| Code               | Value | Meaning                                         |
|--------------------|-------|-------------------------------------------------|
| `BAD_ARG`          | 1     | not exactly one command-line argument           |
| `EXTENSION_ERROR`  | 2     | the file name does not end in `.ber` as above   |
| `NOFILE_ERROR`     | 3     | the file cannot be opened                       |
| `EMPTY_MAP`        | 4     | the file is empty                               |
| `INVALID_MAP`      | 5     | the map starts with, or contains, a blank line  |
| `BAD_ROW`          | 6     | rows of different lengths                       |
| `NO_WALLS`         | 7     | the border is not all walls                     |
| `INVALID_ELEMENT`  | 8     | an unknown tile                                 |
| `ELEMENT_ERROR`    | 9     | wrong number of players, exits or collectibles  |
| `IMPOSIBLE_WIN`    | 10    | the exit or a collectible cannot be reached     |

## Playing

Install the package, then start a game with a map file:

```
pip install .
solong maps/level1.ber
```

The map is printed, then moves are read from standard input, one or more
per line, separated by whitespace. `w`, `a`, `s` and `d` (in either case) move
up, left, down and right; `esc` or `escape` quits; other words are ignored.
Each step prints the running move count (`Moves: N`), eating a collectible
prints `Yummy!`, and the map is printed again after every input line. The exit
only opens once every collectible has been eaten; reaching it then ends the
game.

If the map is rejected, `solong` writes `Error` and the error's name to
standard error and exits with the error's code.

## Using it as a library

```python
import sys

from solong.game import Direction, Game
from solong.mapcheck import load_map

game_map = load_map("maps/level1.ber")
game = Game(game_map, output=sys.stdout)
game.move(Direction.RIGHT)
game.handle_key("d")
print(game.render())
print(game.moves, game.collectibles_left, game.won)
```

`solong.mapcheck.validate_map` accepts the map's lines directly, which is
handy when maps are built in memory; `check_extension` checks a file name on
its own. `Game.move` and `Game.handle_key` return whether the player moved;
`Game.position` and `Game.pixel_position` give where the player stands.

The package also ships small text utilities used by the game: a buffered
`solong.linereader.LineReader`, a minimal `solong.printf.sprintf` and `printf`,
and helpers in `solong.strings`, `solong.conversions` and `solong.bits`.

## What it does not do

There is no graphical window, no sprites and no live keyboard handling: the
game is played through text on the terminal only.

## Tests

```
pip install ".[test]"
pytest
```