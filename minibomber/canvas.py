"""Pixel images and the drawing of the stage background, tiles and items."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from minibomber.model import BLOC_LEN, GREEN, MAP_WALL, Coord, Direction, Game


class Image:
    """A rectangle of integer colours; negative colours are transparent."""

    def __init__(self, width: int, height: int, color: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"invalid image size: {width}x{height}")
        self.width = width
        self.height = height
        self.pixels: list[list[int]] = [[color] * width for _ in range(height)]

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[int]]) -> Image:
        """Build an image from rows of colours of equal length."""
        grid = [list(row) for row in rows]
        width = len(grid[0]) if grid else 0
        if any(len(row) != width for row in grid):
            raise ValueError("image rows must all have the same length")
        image = cls(width, len(grid))
        image.pixels = grid
        return image

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside a {self.width}x{self.height} image")

    def get(self, x: int, y: int) -> int:
        """Return the colour of a pixel."""
        self._check(x, y)
        return self.pixels[y][x]

    def put(self, x: int, y: int, color: int, mask: bool = False) -> None:
        """Set a pixel; with mask, the background green is not drawn."""
        self._check(x, y)
        if mask and color == GREEN:
            return
        self.pixels[y][x] = color

    def fill_block(self, pos: Coord, color: int) -> None:
        """Fill one map block whose top-left pixel is pos."""
        for i in range(BLOC_LEN):
            for j in range(BLOC_LEN):
                self.put(pos.x + j, pos.y + i, color)

    def blit_block(self, source: Image, pos: Coord, mask: bool = False) -> None:
        """Draw one block of a source image at pos, skipping transparent pixels."""
        for i in range(BLOC_LEN):
            for j in range(BLOC_LEN):
                color = source.get(j, i)
                if color >= 0:
                    self.put(pos.x + j, pos.y + i, color, mask)

    def _copy_block(self, source: Image, pos: Coord) -> None:
        for i in range(BLOC_LEN):
            for j in range(BLOC_LEN):
                self.put(pos.x + j, pos.y + i, source.get(j, i))


@dataclass
class Renderer:
    """Draws a game's stage onto a canvas from block-sized textures."""

    game: Game
    wall: Image
    tile_shadow: Image
    item_bomb: Image
    item_fire: Image
    item_speed: Image
    canvas: Image = field(init=False)
    background: Image = field(init=False)

    def __post_init__(self) -> None:
        width = self.game.width * BLOC_LEN
        height = self.game.height * BLOC_LEN
        self.canvas = Image(width, height)
        self.background = Image(width, height)

    def _is_wall(self, x: int, y: int) -> bool:
        grid = self.game.grid
        return 0 <= y < len(grid) and 0 <= x < len(grid[y]) and grid[y][x] == MAP_WALL

    def render_background(self) -> None:
        """Draw walls and floor tiles into the background and copy it to the canvas."""
        for y, row in enumerate(self.game.grid):
            for x, code in enumerate(row):
                pixel = Coord(x, y).scaled(BLOC_LEN)
                if code == MAP_WALL:
                    self.background._copy_block(self.wall, pixel)
                elif self._is_wall(x, y - 1):
                    self.background._copy_block(self.tile_shadow, pixel)
                else:
                    self.background.fill_block(pixel, GREEN)
        self.canvas.pixels = [list(row) for row in self.background.pixels]

    def _floor_tile(self, map_x: int, map_y: int, pixel: Coord) -> None:
        if self._is_wall(map_x, map_y - 1):
            self.canvas.blit_block(self.tile_shadow, pixel)
        else:
            self.canvas.fill_block(pixel, GREEN)

    def replace_with_green_tile(self, pos: Coord) -> None:
        """Redraw the floor of the block at pixel pos, unless it is a wall."""
        x, y = pos.x // BLOC_LEN, pos.y // BLOC_LEN
        if not self._is_wall(x, y):
            self._floor_tile(x, y, pos)

    def clear_trail(self, direction: Direction, pos: Coord) -> None:
        """Repaint the floor under a sprite at pixel pos and the block it moves into."""
        x, y = pos.x // BLOC_LEN, pos.y // BLOC_LEN
        if direction & Direction.UP and not self._is_wall(x, y - 1):
            self._floor_tile(x, y - 1, Coord(pos.x, pos.y - BLOC_LEN))
        self._floor_tile(x, y, pos)
        if direction & Direction.DOWN and not self._is_wall(x, y + 1):
            self.canvas.fill_block(Coord(pos.x, pos.y + BLOC_LEN), GREEN)
        if direction & Direction.LEFT and not self._is_wall(x - 1, y):
            self._floor_tile(x - 1, y, Coord(pos.x - BLOC_LEN, pos.y))
        if direction & Direction.RIGHT and not self._is_wall(x + 1, y):
            self._floor_tile(x + 1, y, Coord(pos.x + BLOC_LEN, pos.y))

    def draw_collectibles(self) -> None:
        """Draw every item still on the map and clear the ones picked up."""
        pools = (
            (self.game.bombs.items, self.item_bomb),
            (self.game.fire.items, self.item_fire),
            (self.game.speed.items, self.item_speed),
        )
        for items, image in pools:
            for item in items:
                pixel = item.pos.scaled(BLOC_LEN)
                if item.draw:
                    self.canvas.blit_block(image, pixel, mask=True)
                else:
                    self.replace_with_green_tile(pixel)