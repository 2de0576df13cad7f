import pytest

from minibomber.enemy import (
    choose_direction,
    directions_of_longest,
    keep_direction,
    no_bomb,
)
from minibomber.mapparser import parse_lines
from minibomber.model import Coord, Direction

OPEN_MAP = [
    "1111111",
    "1PCC0C1",
    "1000001",
    "1M00E01",
    "1111111",
]

CORRIDOR_MAP = [
    "1111111",
    "1PCE001",
    "1111111",
    "1M00001",
    "1111111",
]


def _game(rows):
    game = parse_lines(rows, "stage")
    assert not game.errors
    return game


def _arm_bomb(game, pos):
    game.bombs.set_bombs[0].arm(pos, game.bombs.explode_size)
    game.bombs.set_bombs_nbr = 1


def test_no_bomb_when_nothing_is_set():
    game = _game(OPEN_MAP)
    assert no_bomb(game, Coord(1, 2)) is True


def test_no_bomb_false_on_set_bomb():
    game = _game(OPEN_MAP)
    _arm_bomb(game, Coord(1, 2))
    assert no_bomb(game, Coord(1, 2)) is False
    assert no_bomb(game, Coord(2, 2)) is True


def test_keep_direction_free_cell():
    game = _game(OPEN_MAP)
    assert keep_direction(game, Direction.UP, Coord(1, 3)) is True
    assert keep_direction(game, Direction.RIGHT, Coord(1, 3)) is True


def test_keep_direction_blocked_by_wall():
    game = _game(OPEN_MAP)
    assert keep_direction(game, Direction.LEFT, Coord(1, 3)) is False
    assert keep_direction(game, Direction.DOWN, Coord(1, 3)) is False


def test_keep_direction_without_direction():
    game = _game(OPEN_MAP)
    assert keep_direction(game, Direction.NONE, Coord(1, 3)) is False


def test_keep_direction_blocked_by_bomb():
    game = _game(OPEN_MAP)
    _arm_bomb(game, Coord(1, 2))
    assert keep_direction(game, Direction.UP, Coord(1, 3)) is False
    assert keep_direction(game, Direction.UP | Direction.RIGHT, Coord(1, 3)) is True


@pytest.mark.parametrize(
    "lengths, expected",
    [
        ([1, 3, 2, 3], Direction.DOWN | Direction.RIGHT),
        ([5, 1, 1, 1], Direction.UP),
        ([2, 2, 2, 2], Direction.UP | Direction.DOWN | Direction.LEFT | Direction.RIGHT),
    ],
)
def test_directions_of_longest(lengths, expected):
    assert directions_of_longest(lengths) == expected


def test_directions_of_longest_needs_four_values():
    with pytest.raises(ValueError):
        directions_of_longest([1, 2, 3])


def test_choose_direction_heads_for_visible_player():
    game = _game(OPEN_MAP)
    game.set_cell(Coord(2, 1), "0")
    enemy = game.enemies[0]
    assert enemy.pos == Coord(1, 3)
    choose_direction(game, enemy)
    assert enemy.direction == Direction.UP


def test_choose_direction_keeps_free_direction():
    game = _game(OPEN_MAP)
    enemy = game.enemies[0]
    enemy.direction = Direction.RIGHT
    choose_direction(game, enemy)
    assert enemy.direction == Direction.RIGHT


def test_choose_direction_picks_longest_corridor():
    game = _game(CORRIDOR_MAP)
    enemy = game.enemies[0]
    choose_direction(game, enemy)
    assert enemy.direction == Direction.RIGHT


def test_choose_direction_replaces_blocked_direction():
    game = _game(CORRIDOR_MAP)
    enemy = game.enemies[0]
    enemy.direction = Direction.LEFT
    choose_direction(game, enemy)
    assert enemy.direction == Direction.RIGHT
    assert keep_direction(game, enemy.direction, enemy.pos) is True