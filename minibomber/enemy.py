"""How enemies pick the direction they walk in."""

from __future__ import annotations

from collections.abc import Sequence

from minibomber.model import (
    MAP_PLAYER,
    MAP_WALL,
    SCAN_ORDER,
    Coord,
    Direction,
    Game,
    Sprite,
)


def no_bomb(game: Game, pos: Coord) -> bool:
    """Whether no set bomb stands on a grid position."""
    bombs = game.bombs
    if bombs.set_bombs_nbr <= 0:
        return True
    return not any(
        bomb.draw and bomb.pos == pos for bomb in bombs.set_bombs[: bombs.collected]
    )


def keep_direction(game: Game, direction: Direction, pos: Coord) -> bool:
    """Whether one of the current directions leads to a free, bomb-less cell."""
    for single in SCAN_ORDER:
        if not direction & single:
            continue
        target = pos + single.delta
        if game.cell(target) != MAP_WALL and no_bomb(game, target):
            return True
    return False


def directions_of_longest(lengths: Sequence[int]) -> Direction:
    """Combine the directions whose free run is the longest.

    ``lengths`` holds the runs for up, down, left and right, in that order.
    """
    values = list(lengths)
    if len(values) != len(SCAN_ORDER):
        raise ValueError(f"expected {len(SCAN_ORDER)} lengths, got {len(values)}")
    longest = max(values)
    result = Direction.NONE
    for single, value in zip(SCAN_ORDER, values):
        if value == longest:
            result |= single
    return result


def _inside(game: Game, pos: Coord) -> bool:
    return 0 <= pos.x < game.width and 0 <= pos.y < game.height


def _scan(game: Game, pos: Coord, direction: Direction) -> tuple[int, bool]:
    """Walk from pos until a wall; return the run length and whether the player was met."""
    length = 0
    current = pos
    while _inside(game, current) and game.cell(current) != MAP_WALL:
        if game.cell(current) == MAP_PLAYER:
            return length, True
        length += 1
        current = current + direction.delta
    return length, False


def choose_direction(game: Game, sprite: Sprite) -> None:
    """Update an enemy's direction.

    The enemy keeps going while its way is free. Otherwise it heads for the
    player if it sees one in a straight line, or else towards the longest
    free corridors.
    """
    if keep_direction(game, sprite.direction, sprite.pos):
        return
    sprite.direction = Direction.NONE
    lengths = []
    for single in SCAN_ORDER:
        length, found = _scan(game, sprite.pos, single)
        if found:
            sprite.direction = single
            return
        lengths.append(length)
    sprite.direction = directions_of_longest(lengths)