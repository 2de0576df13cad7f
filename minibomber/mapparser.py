"""Reading a stage map into a Game."""

from __future__ import annotations

import os
from collections.abc import Iterable

from minibomber.errors import GameError
from minibomber.linereader import read_lines
from minibomber.model import (
    ENNEMY_LIMIT,
    ENNEMY_SPEED,
    ITEM_LIMIT,
    MAP_ELEMS,
    MAP_FIRE,
    MAP_ITEM_BOMB,
    MAP_SPEED,
    MAP_WALL,
    Coord,
    Game,
    Item,
    ItemPool,
    Sprite,
)

_COLLECTIBLE = 2
_EXIT = 3
_PLAYER = 4
_ENNEMY = 5

_ERR_TOO_MANY_ENNEMIES = 7
_ERR_NOT_SURROUNDED = 11
_ERR_UNKNOWN_ELEMENT = 12
_ERR_NO_COLLECTIBLE = 13
_ERR_PLAYER_COUNT = 14
_ERR_NO_EXIT = 15
_ERR_NOT_RECTANGLE = 18
_ERR_OPEN = 19
_ERR_CLOSE = 21

_TOO_MANY_ITEMS = {MAP_ITEM_BOMB: 8, MAP_FIRE: 9, MAP_SPEED: 10}


def _pool(game: Game, code: str) -> ItemPool:
    return {MAP_ITEM_BOMB: game.bombs, MAP_FIRE: game.fire, MAP_SPEED: game.speed}[code]


def _collectible_code(game: Game, x: int) -> str:
    if not game.bombs.items or x % 2 == 0:
        return MAP_ITEM_BOMB
    if x % 3 == 0:
        return MAP_FIRE
    return MAP_SPEED


def _place_collectible(game: Game, pos: Coord) -> None:
    code = _collectible_code(game, pos.x)
    pool = _pool(game, code)
    if len(pool.items) >= ITEM_LIMIT:
        game.errors.add(_TOO_MANY_ITEMS[code])
    game.set_cell(pos, code)
    pool.items.append(Item(draw=True, pos=pos))


def _add_enemy(game: Game, pos: Coord) -> None:
    if len(game.enemies) + 1 >= ENNEMY_LIMIT:
        raise GameError(_ERR_TOO_MANY_ENNEMIES)
    game.enemies.append(Sprite(pos=pos, speed=ENNEMY_SPEED))


def _on_border(game: Game, pos: Coord) -> bool:
    return pos.x in (0, game.width) or pos.y in (0, game.height)


def parse_lines(lines: Iterable[str], stage_name: str = "") -> Game:
    """Build a Game from map rows, recording validation errors on it.

    Errors that stop the game at once (too many enemies) are raised.
    """
    rows = list(lines)
    game = Game(stage_name=stage_name)
    for row in rows:
        if game.width and len(row) != game.width:
            game.errors.add(_ERR_NOT_RECTANGLE)
        game.width = len(row)
    game.height = len(rows)
    game.grid = [list(row) for row in rows]

    players = exits = collectibles = 0
    for y, row in enumerate(rows):
        for x, char in enumerate(row):
            kind = MAP_ELEMS.find(char)
            if kind < 0:
                game.errors.add(_ERR_UNKNOWN_ELEMENT)
                continue
            pos = Coord(x, y)
            if _on_border(game, pos) and char != MAP_WALL:
                game.errors.add(_ERR_NOT_SURROUNDED)
            if kind == _COLLECTIBLE:
                _place_collectible(game, pos)
                collectibles += 1
            else:
                game.set_cell(pos, str(kind))
            if kind == _PLAYER:
                game.player.place(x, y)
                players += 1
            elif kind == _EXIT:
                game.exit_pos = pos
                exits += 1
            elif kind == _ENNEMY:
                _add_enemy(game, pos)

    if not collectibles:
        game.errors.add(_ERR_NO_COLLECTIBLE)
    if players != 1:
        game.errors.add(_ERR_PLAYER_COUNT)
    if not exits:
        game.errors.add(_ERR_NO_EXIT)
    return game


def parse_map(path: str | os.PathLike[str]) -> Game:
    """Read a map file into a Game, recording validation errors on it."""
    try:
        stream = open(path, encoding="latin-1", newline="")
    except OSError as exc:
        raise GameError(_ERR_OPEN) from exc
    try:
        with stream:
            lines = list(read_lines(stream))
    except OSError as exc:
        raise GameError(_ERR_CLOSE) from exc
    return parse_lines(lines, os.fspath(path))


def load_map(path: str | os.PathLike[str]) -> Game:
    """Read a map file and raise GameError if it is not a valid stage."""
    game = parse_map(path)
    game.raise_errors()
    return game