# minibomber

A small Bomberman-like tile game. The player walks a walled tile map, picks
up items, drops bombs, avoids roaming enemies and wins by stepping onto the
exit once every bomb item has been collected.

## Maps

Maps are plain text files with the `.ber` extension. Every line must have the
same width and the map must be surrounded by walls. The characters are:

| Char | Meaning |
|------|---------|
| `0`  | floor |
| `1`  | wall |
| `C`  | collectible |
| `E`  | exit |
| `P`  | player start (exactly one) |
| `M`  | enemy |

A map needs at least one collectible, exactly one player and an exit, and may
hold at most 19 enemies and 50 items of each kind. Each `C` becomes one of
three items, chosen by its column: the first is always a bomb item, then a
collectible in an even column is a bomb item, one in a column divisible by 3
is a fire item (bigger blast), and any other is a speed item. Example:

```
1111111
1P0C0E1
10M0001
1111111
```

## Command line

```
minibomber maps/small.ber
```

The command checks its argument (exactly a name whose text from the first
`.` on is `.ber`), loads the map and, if anything is wrong, prints every
error as a numbered code and message. Otherwise it prints the map, using the
map characters above (`C` for any item still on the floor), with the step
count and the number of bomb items collected.

It then reads keys from standard input, one per line:

| Key | Action |
|-----|--------|
| `w` or `z` | walk up |
| `s` | walk down |
| `a` or `q` | walk left |
| `d` | walk right |
| `b` | drop a bomb on the player's cell |
| `Escape` | quit |

After each key the player takes one step, each living enemy picks its
direction and moves, and the map is printed again. When the player reaches
the exit with every bomb item collected, a "GAME CLEAR !" report with the
step count is printed; when an enemy reaches the player, a "GAME OVER !"
report with the collected items and steps is printed. The command exits
with status 0 in every case.

## Library use

```python
from minibomber.mapparser import load_map
from minibomber.actions import handle_keypress, advance_sprite

game = load_map("maps/small.ber")
handle_keypress(game, "d")   # face right
advance_sprite(game, game.player, True, game.player.direction.delta)
handle_keypress(game, "b")   # drop a bomb
```

A step takes three calls to `advance_sprite`; the third moves the sprite to
the next cell, picks up any item there and returns `True`.

Modules:

- `minibomber.model` – `Game`, `Sprite`, `Item`, `ItemPool`, `Bombs`,
  `Coord`, `Direction` and the game constants
- `minibomber.mapparser` – `parse_lines`, `parse_map` (records errors on the
  game) and `load_map` (raises them)
- `minibomber.linereader` – `read_lines`, reading a text stream line by line
  in fixed-size chunks
- `minibomber.enemy` – `choose_direction`, `keep_direction`, `no_bomb`,
  `directions_of_longest`
- `minibomber.actions` – `handle_keypress`, `place_bomb`, `collect_at`,
  `move_on_map`, `step_offset`, `advance_sprite`
- `minibomber.canvas` – `Image` pixel buffers and a `Renderer` that draws
  the background, floor tiles and items from block-sized images you supply
- `minibomber.errors` – `GameError`, `error_message`, `format_error` and the
  terminal reports
- `minibomber.cli` – `check_arguments` and `main`

## What it does not do

- There is no graphical window: the `minibomber` command plays in the
  terminal as text, and `Renderer` only draws into in-memory `Image`s. No
  image files are loaded.
- Bombs are placed and block enemies, but they have no timer and never
  explode, so nothing is destroyed and enemies cannot be killed.
- Sprites are not drawn on the canvas and there are no animations or
  on-screen messages.

## Tests

```
pip install -e .[test]
pytest
```