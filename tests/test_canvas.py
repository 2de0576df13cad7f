import pytest

from minibomber.canvas import Image, Renderer
from minibomber.mapparser import parse_lines
from minibomber.model import BLOC_LEN, GREEN, Coord, Direction

WALL = 0x808080
SHADOW = 0x0A5020
BOMB = 0xFF0000
FIRE = 0x00FF00
SPEED = 0x0000FF

ROWS = ["11111", "1PCE1", "10001", "11111"]


def make_renderer(rows=ROWS):
    game = parse_lines(rows)
    return Renderer(
        game,
        wall=Image(BLOC_LEN, BLOC_LEN, WALL),
        tile_shadow=Image(BLOC_LEN, BLOC_LEN, SHADOW),
        item_bomb=Image(BLOC_LEN, BLOC_LEN, BOMB),
        item_fire=Image(BLOC_LEN, BLOC_LEN, FIRE),
        item_speed=Image(BLOC_LEN, BLOC_LEN, SPEED),
    )


def test_put_and_get_round_trip():
    image = Image(4, 3)
    image.put(2, 1, 0x123456)
    assert image.get(2, 1) == 0x123456
    assert image.get(1, 1) == 0


def test_put_with_mask_skips_green():
    image = Image(2, 2, 5)
    image.put(0, 0, GREEN, mask=True)
    image.put(1, 1, GREEN, mask=False)
    assert image.get(0, 0) == 5
    assert image.get(1, 1) == GREEN


def test_out_of_range_pixel_raises():
    image = Image(2, 2)
    with pytest.raises(IndexError):
        image.put(2, 0, 1)
    with pytest.raises(IndexError):
        image.get(-1, 0)


def test_invalid_images_raise():
    with pytest.raises(ValueError):
        Image(-1, 2)
    with pytest.raises(ValueError):
        Image.from_rows([[1, 2], [3]])


def test_from_rows_keeps_colours():
    image = Image.from_rows([[1, 2], [3, 4]])
    assert (image.width, image.height) == (2, 2)
    assert image.get(1, 1) == 4


def test_fill_block_covers_one_block():
    image = Image(BLOC_LEN * 2, BLOC_LEN * 2)
    image.fill_block(Coord(BLOC_LEN, 0), 9)
    assert image.get(BLOC_LEN, 0) == 9
    assert image.get(2 * BLOC_LEN - 1, BLOC_LEN - 1) == 9
    assert image.get(BLOC_LEN - 1, 0) == 0
    assert image.get(BLOC_LEN, BLOC_LEN) == 0


def test_blit_skips_transparent_and_masked_pixels():
    source = Image(BLOC_LEN, BLOC_LEN, 7)
    source.put(0, 0, -1)
    source.put(1, 0, GREEN)
    target = Image(BLOC_LEN, BLOC_LEN, 3)
    target.blit_block(source, Coord(0, 0), mask=True)
    assert target.get(0, 0) == 3
    assert target.get(1, 0) == 3
    assert target.get(2, 0) == 7


def test_render_background_draws_walls_shadows_and_floor():
    renderer = make_renderer()
    renderer.render_background()
    canvas = renderer.canvas
    assert (canvas.width, canvas.height) == (5 * BLOC_LEN, 4 * BLOC_LEN)
    assert canvas.get(0, 0) == WALL
    assert canvas.get(BLOC_LEN, BLOC_LEN) == SHADOW
    assert canvas.get(BLOC_LEN, 2 * BLOC_LEN) == GREEN
    assert canvas.pixels == renderer.background.pixels


def test_replace_with_green_tile():
    renderer = make_renderer()
    renderer.replace_with_green_tile(Coord(BLOC_LEN, 2 * BLOC_LEN))
    renderer.replace_with_green_tile(Coord(0, 0))
    assert renderer.canvas.get(BLOC_LEN, 2 * BLOC_LEN) == GREEN
    assert renderer.canvas.get(0, 0) == 0


def test_clear_trail_up():
    renderer = make_renderer()
    renderer.clear_trail(Direction.UP, Coord(BLOC_LEN, 2 * BLOC_LEN))
    assert renderer.canvas.get(BLOC_LEN, BLOC_LEN) == SHADOW
    assert renderer.canvas.get(BLOC_LEN, 2 * BLOC_LEN) == GREEN


def test_clear_trail_down():
    renderer = make_renderer()
    renderer.clear_trail(Direction.DOWN, Coord(BLOC_LEN, BLOC_LEN))
    assert renderer.canvas.get(BLOC_LEN, BLOC_LEN) == SHADOW
    assert renderer.canvas.get(BLOC_LEN, 2 * BLOC_LEN) == GREEN


def test_clear_trail_left_and_right():
    renderer = make_renderer()
    renderer.clear_trail(Direction.LEFT, Coord(2 * BLOC_LEN, BLOC_LEN))
    assert renderer.canvas.get(BLOC_LEN, BLOC_LEN) == SHADOW
    renderer.clear_trail(Direction.RIGHT, Coord(BLOC_LEN, 2 * BLOC_LEN))
    assert renderer.canvas.get(2 * BLOC_LEN, 2 * BLOC_LEN) == GREEN


def test_clear_trail_without_direction_touches_only_own_block():
    renderer = make_renderer()
    renderer.clear_trail(Direction.NONE, Coord(2 * BLOC_LEN, 2 * BLOC_LEN))
    assert renderer.canvas.get(2 * BLOC_LEN, 2 * BLOC_LEN) == GREEN
    assert renderer.canvas.get(3 * BLOC_LEN, 2 * BLOC_LEN) == 0
    assert renderer.canvas.get(BLOC_LEN, 2 * BLOC_LEN) == 0


def test_draw_collectibles_draws_and_clears_items():
    renderer = make_renderer()
    renderer.draw_collectibles()
    assert renderer.canvas.get(2 * BLOC_LEN, BLOC_LEN) == BOMB
    renderer.game.bombs.items[0].draw = False
    renderer.draw_collectibles()
    assert renderer.canvas.get(2 * BLOC_LEN, BLOC_LEN) == SHADOW