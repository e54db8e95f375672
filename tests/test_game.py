import io

import pytest

from solong.game import Direction, Game
from solong.mapcheck import validate_map

CORRIDOR = ["1111111\n", "1P0C0E1\n", "1111111\n"]
EXIT_FIRST = ["11111\n", "1PEC1\n", "11111\n"]


def make_game(lines):
    out = io.StringIO()
    return Game(validate_map(lines), out), out


def test_start_position_comes_from_map():
    game, _ = make_game(CORRIDOR)
    assert game.position == (1, 1)
    assert game.moves == 0


def test_move_into_wall_does_nothing():
    game, out = make_game(CORRIDOR)
    assert game.move(Direction.UP) is False
    assert game.position == (1, 1)
    assert game.moves == 0
    assert out.getvalue() == ""


def test_move_to_floor_counts_and_prints():
    game, out = make_game(CORRIDOR)
    assert game.move(Direction.RIGHT) is True
    assert game.position == (1, 2)
    assert game.moves == 1
    assert out.getvalue() == "Moves: 1\n"
    assert game.render().splitlines()[1] == "10PC0E1"


def test_eating_collectible():
    game, out = make_game(CORRIDOR)
    game.move(Direction.RIGHT)
    game.move(Direction.RIGHT)
    assert game.collectibles_left == 0
    assert (1, 3) in game.eaten
    assert "Yummy!\n" in out.getvalue()
    assert out.getvalue().endswith("Moves: 2\n")


def test_winning_closes_game():
    game, out = make_game(CORRIDOR)
    for _ in range(4):
        game.move(Direction.RIGHT)
    assert game.won is True
    assert game.closed is True
    assert "YASS, 20 hours of sleep straight\n" in out.getvalue()
    assert game.moves == 4


def test_exit_refused_while_hungry():
    game, out = make_game(EXIT_FIRST)
    assert game.move(Direction.RIGHT) is False
    assert game.position == (1, 1)
    assert game.moves == 0
    assert out.getvalue() == "You can't rest if you're still hungry :(\n"
    assert game.closed is False


def test_handle_key_maps_wasd():
    game, _ = make_game(CORRIDOR)
    assert game.handle_key("d") is True
    assert game.handle_key("A") is True
    assert game.position == (1, 1)
    assert game.handle_key("w") is False
    assert game.handle_key("s") is False
    assert game.moves == 2


def test_unknown_key_ignored():
    game, _ = make_game(CORRIDOR)
    assert game.handle_key("q") is False
    assert game.position == (1, 1)


def test_escape_closes_and_blocks_moves():
    game, _ = make_game(CORRIDOR)
    game.handle_key("escape")
    assert game.closed is True
    assert game.won is False
    assert game.move(Direction.RIGHT) is False
    assert game.moves == 0


def test_game_does_not_change_source_map():
    game_map = validate_map(CORRIDOR)
    game = Game(game_map, io.StringIO())
    game.move(Direction.RIGHT)
    assert game_map.rows[1] == "1P0C0E1"


def test_render_keeps_shape():
    game, _ = make_game(CORRIDOR)
    game.move(Direction.RIGHT)
    rows = game.render().splitlines()
    assert len(rows) == 3
    assert all(len(row) == 7 for row in rows)
    assert "".join(rows).count("P") == 1


@pytest.mark.parametrize("direction", list(Direction))
def test_pixel_position_follows_grid(direction):
    game, _ = make_game(["11111\n", "10001\n", "10P01\n", "1C0E1\n", "11111\n"])
    game.move(direction)
    y, x = game.position
    assert game.pixel_position == (x * 32, y * 32)