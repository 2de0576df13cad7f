"""Player input, item pick-ups and sprite movement on the map."""

from __future__ import annotations

from minibomber.model import (
    BLOC_LEN,
    MAP_COLLECTIBLES,
    MAP_ENNEMY,
    MAP_EXIT,
    MAP_FIRE,
    MAP_FLOOR,
    MAP_ITEM_BOMB,
    MAP_PLAYER,
    MAP_SPEED,
    MAP_WALL,
    SCAN_ORDER,
    Bombs,
    Coord,
    Direction,
    Game,
    Item,
    Sprite,
)

KEY_ESCAPE = "Escape"
KEY_BOMB = "b"

_KEY_DIRECTIONS: dict[str, Direction] = {
    "w": Direction.UP,
    "z": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "q": Direction.LEFT,
    "d": Direction.RIGHT,
}

_DIRECTION_OF: dict[Coord, Direction] = {d.delta: d for d in SCAN_ORDER}

_SPEED_BOOST = 20
_SPEED_FLOOR = 30


def handle_keypress(game: Game, key: str) -> bool:
    """React to a key; return False when the game should quit."""
    if key == KEY_ESCAPE:
        return False
    player = game.player
    if player.direction == Direction.NONE and key in _KEY_DIRECTIONS:
        player.direction |= _KEY_DIRECTIONS[key]
    if key == KEY_BOMB:
        place_bomb(game, player.pos)
    return True


def _free_slot(bombs: Bombs, pos: Coord) -> Item | None:
    for slot in bombs.set_bombs[: bombs.collected]:
        if slot.pos == pos:
            return None
        if not slot.draw:
            return slot
    return None


def place_bomb(game: Game, pos: Coord) -> bool:
    """Set a bomb at a position if one is available; return whether it was set."""
    bombs = game.bombs
    if bombs.set_bombs_nbr >= bombs.collected:
        return False
    slot = _free_slot(bombs, pos)
    if slot is None:
        return False
    bombs.set_bombs_nbr += 1
    slot.arm(pos, bombs.explode_size)
    return True


def _turn_off(items: list[Item], pos: Coord) -> None:
    for item in items:
        if item.pos == pos:
            item.draw = False


def collect_at(game: Game, delta: Coord) -> None:
    """Pick up whatever lies next to the player in the given direction."""
    target = game.player.pos + delta
    cell = game.cell(target)
    if cell == MAP_ITEM_BOMB:
        bombs = game.bombs
        _turn_off(bombs.items, target)
        game.set_cell(target, MAP_FLOOR)
        slot = bombs.set_bombs[bombs.collected]
        bombs.collected += 1
        slot.reset()
    elif cell == MAP_FIRE:
        _turn_off(game.fire.items, target)
        game.set_cell(target, MAP_FLOOR)
        game.bombs.explode_size += 1
    elif cell == MAP_SPEED:
        _turn_off(game.speed.items, target)
        game.set_cell(target, MAP_FLOOR)
        if game.player.speed >= _SPEED_FLOOR:
            game.player.speed -= _SPEED_BOOST
    if game.all_collected() and game.cell(target) == MAP_EXIT:
        game.game_clear = True


def _is_collectible(code: str) -> bool:
    return len(code) == 1 and code in MAP_COLLECTIBLES


def _put_back_exit(game: Game) -> None:
    if game.cell(game.exit_pos) == MAP_FLOOR:
        game.set_cell(game.exit_pos, MAP_EXIT)


def move_on_map(game: Game, sprite: Sprite, is_player: bool, delta: Coord) -> None:
    """Move a sprite's code on the map one cell along delta.

    Enemies leave collectibles where they are, neither erasing nor covering them.
    """
    old = sprite.pos
    new = old + delta
    if is_player or not _is_collectible(game.cell(old)):
        game.set_cell(old, MAP_FLOOR)
    if is_player:
        game.set_cell(new, MAP_PLAYER)
    elif not _is_collectible(game.cell(new)):
        game.set_cell(new, MAP_ENNEMY)
    _put_back_exit(game)


def step_offset(delta: Coord, phase: int) -> Coord:
    """Pixel offset from the current cell at a phase of a one-cell step."""
    if phase == 0:
        return Coord(delta.x * BLOC_LEN // 3, delta.y * BLOC_LEN // 3)
    if phase == 1:
        return Coord(delta.x * 2 * BLOC_LEN // 3, delta.y * 2 * BLOC_LEN // 3)
    if phase == 2:
        return Coord()
    raise ValueError(f"invalid step phase: {phase}")


def advance_sprite(game: Game, sprite: Sprite, is_player: bool, delta: Coord) -> bool:
    """Advance a sprite by one animation phase along delta.

    A step takes three phases; the last one moves the sprite to the next
    cell. Returns True when the sprite has reached the next cell.
    """
    direction = _DIRECTION_OF.get(delta)
    if direction is None:
        raise ValueError(f"{delta!r} is not a single grid step")
    name = direction.name.lower()
    facing, index = sprite.state
    phase = index if facing == name else 0

    if phase == 0 and game.cell(sprite.pos + delta) == MAP_WALL:
        sprite.state = (name, 0)
        sprite.sub_pos = sprite.pos.scaled(BLOC_LEN)
        if is_player:
            sprite.direction = Direction.NONE
        return False

    if phase < 2:
        sprite.state = (name, phase + 1)
        sprite.sub_pos = sprite.pos.scaled(BLOC_LEN) + step_offset(delta, phase)
        return False

    sprite.state = (name, 0)
    if is_player:
        collect_at(game, delta)
    move_on_map(game, sprite, is_player, delta)
    target = sprite.pos + delta
    sprite.place(target.x, target.y)
    if is_player:
        sprite.steps += 1
        sprite.direction = Direction.NONE
    return True