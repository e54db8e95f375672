"""Command line entry point: validate a map file and play it."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .errors import ErrorCode, GameError
from .game import Game
from .mapcheck import check_extension, load_map


def _play(game: Game, keys: TextIO, out: TextIO) -> None:
    out.write(game.render() + "\n")
    for line in keys:
        for key in line.split():
            game.handle_key(key)
            if game.closed:
                return
        out.write(game.render() + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named by the single argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if len(args) != 1:
            raise GameError(ErrorCode.BAD_ARG)
        check_extension(args[0])
        game_map = load_map(args[0])
    except GameError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return int(exc.code)
    game = Game(game_map)
    _play(game, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())