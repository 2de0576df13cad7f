"""Game constants and the state of a running game."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from minibomber.errors import GameError

FILE_EXTENSION = ".ber"

BLOC_LEN = 24
MAP_ELEMS = "01CEPM"
MAP_COLLECTIBLES = "BFS"

ENNEMY_LIMIT = 20
ITEM_LIMIT = 50

MAP_FLOOR = "0"
MAP_WALL = "1"
MAP_ITEM_BOMB = "B"
MAP_FIRE = "F"
MAP_SPEED = "S"
MAP_EXIT = "3"
MAP_PLAYER = "4"
MAP_ENNEMY = "5"

WHITE = 0xFFFFFF
GREEN = 0x107830

CENTER_MESS_TIME = 1000

PLAYER_SPEED = 250
ENNEMY_SPEED = 500
BOMB_SET_TIME = 4280
BOMB_EXPLODE_TIME = 1000
REVEAL_EXIT_SPEED = 400

START_BOMB = 1
START_EXPLODE_SIZE = 2

PLAYER_DEATH_TIME = 1000
ENNEMY_DEATH_TIME = 1100


@dataclass(frozen=True)
class Coord:
    """A position, on the map grid or in pixels."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Coord) -> Coord:
        return Coord(self.x + other.x, self.y + other.y)

    def scaled(self, factor: int) -> Coord:
        """Return the coordinate multiplied by a factor."""
        return Coord(self.x * factor, self.y * factor)


class Direction(enum.IntFlag):
    """Movement directions, combinable as bit flags."""

    NONE = 0
    RIGHT = 1
    LEFT = 2
    DOWN = 4
    UP = 8

    @property
    def delta(self) -> Coord:
        """The grid step of a single direction."""
        try:
            return _DELTAS[self]
        except KeyError:
            raise ValueError(f"{self!r} is not a single direction") from None

    def parts(self) -> tuple[Direction, ...]:
        """The single directions set in this flag, in up, down, left, right order."""
        return tuple(d for d in SCAN_ORDER if self & d)


SCAN_ORDER: tuple[Direction, ...] = (
    Direction.UP,
    Direction.DOWN,
    Direction.LEFT,
    Direction.RIGHT,
)

_DELTAS: dict[Direction, Coord] = {
    Direction.UP: Coord(0, -1),
    Direction.DOWN: Coord(0, 1),
    Direction.LEFT: Coord(-1, 0),
    Direction.RIGHT: Coord(1, 0),
}


@dataclass
class Item:
    """A collectible on the map, or a bomb slot that may be set."""

    draw: bool = False
    pos: Coord = Coord()
    explode_size: int = 0
    time1: int = 0
    time2: int = 0
    time3: int = 0

    def arm(self, pos: Coord, explode_size: int) -> None:
        """Set a bomb at a position with a given blast size."""
        self.draw = True
        self.pos = pos
        self.explode_size = explode_size
        self.time1 = self.time2 = self.time3 = 0

    def reset(self) -> None:
        """Clear the slot: hidden, at the origin, timers stopped."""
        self.draw = False
        self.pos = Coord()
        self.time1 = self.time2 = self.time3 = 0


@dataclass
class Sprite:
    """A moving character: the player or an enemy."""

    pos: Coord = Coord()
    speed: int = PLAYER_SPEED
    alive: bool = True
    time_death: int = 0
    direction: Direction = Direction.NONE
    sub_pos: Coord = Coord()
    state: tuple[str, int] = ("down", 0)
    time: int = 0
    steps: int = 0

    def place(self, x: int, y: int) -> None:
        """Put the sprite on a grid cell, aligning its pixel position."""
        self.pos = Coord(x, y)
        self.sub_pos = self.pos.scaled(BLOC_LEN)


@dataclass
class ItemPool:
    """Collectibles of one kind placed on the map."""

    items: list[Item] = field(default_factory=list)

    @property
    def to_collect(self) -> int:
        """How many of these items the map holds."""
        return len(self.items)


@dataclass
class Bombs(ItemPool):
    """Bomb items to pick up and the bombs the player has set."""

    collected: int = START_BOMB
    set_bombs_nbr: int = 0
    explode_size: int = START_EXPLODE_SIZE
    set_bombs: list[Item] = field(
        default_factory=lambda: [Item() for _ in range(ITEM_LIMIT + 1)]
    )


@dataclass
class Game:
    """The whole state of a stage."""

    width: int = 0
    height: int = 0
    grid: list[list[str]] = field(default_factory=list)
    stage_name: str = ""
    bombs: Bombs = field(default_factory=Bombs)
    fire: ItemPool = field(default_factory=ItemPool)
    speed: ItemPool = field(default_factory=ItemPool)
    enemies: list[Sprite] = field(default_factory=list)
    player: Sprite = field(default_factory=lambda: Sprite(speed=PLAYER_SPEED))
    exit_pos: Coord = Coord()
    errors: set[int] = field(default_factory=set)
    game_clear: bool = False

    def cell(self, pos: Coord) -> str:
        """Return the map code at a grid position."""
        return self.grid[pos.y][pos.x]

    def set_cell(self, pos: Coord, value: str) -> None:
        """Write a map code at a grid position."""
        self.grid[pos.y][pos.x] = value

    def all_collected(self) -> bool:
        """Whether every bomb item on the map has been picked up."""
        return self.bombs.collected - START_BOMB == self.bombs.to_collect

    def raise_errors(self) -> None:
        """Raise a GameError holding every recorded error, if any."""
        if self.errors:
            raise GameError(*sorted(self.errors))