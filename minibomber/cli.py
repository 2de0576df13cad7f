"""The command that loads a stage and plays it in the terminal."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from minibomber.actions import advance_sprite, handle_keypress
from minibomber.enemy import choose_direction
from minibomber.errors import GameError, game_clear_report, game_over_report
from minibomber.mapparser import load_map
from minibomber.model import (
    FILE_EXTENSION,
    MAP_ENNEMY,
    START_BOMB,
    Game,
    Sprite,
)

_ERR_USAGE = 3
_ERR_NO_EXTENSION = 4
_ERR_WRONG_EXTENSION = 5

_DISPLAY = {
    "0": "0",
    "1": "1",
    "3": "E",
    "4": "P",
    "5": "M",
    "B": "C",
    "F": "C",
    "S": "C",
}


def check_arguments(argv: Sequence[str]) -> str:
    """Return the map file named on the command line, checking its extension."""
    args = list(argv)
    if not args:
        raise GameError(_ERR_USAGE)
    filename = args[0]
    dot = filename.find(".")
    if dot < 0:
        raise GameError(_ERR_NO_EXTENSION)
    if filename[dot:] != FILE_EXTENSION:
        raise GameError(_ERR_WRONG_EXTENSION)
    return filename


def _render_text(game: Game) -> str:
    rows = ("".join(_DISPLAY.get(code, code) for code in row) for row in game.grid)
    counts = (
        f"steps: {game.player.steps}  "
        f"items: {game.bombs.collected - START_BOMB}/{game.bombs.to_collect}"
    )
    return "\n".join(rows) + "\n" + counts + "\n\n"


def _advance(game: Game, sprite: Sprite, is_player: bool) -> None:
    parts = sprite.direction.parts()
    if not parts:
        return
    delta = parts[0].delta
    for _ in range(3):
        if advance_sprite(game, sprite, is_player, delta) or not sprite.direction:
            return


def _turn(game: Game) -> None:
    _advance(game, game.player, True)
    for enemy in game.enemies:
        if enemy.alive:
            choose_direction(game, enemy)
            _advance(game, enemy, False)
    if game.cell(game.player.pos) == MAP_ENNEMY:
        game.player.alive = False


def _play(game: Game, keys: Iterable[str], out: TextIO) -> None:
    out.write(_render_text(game))
    for key in keys:
        if not handle_keypress(game, key):
            return
        _turn(game)
        if game.game_clear:
            out.write(game_clear_report(game.player.steps))
            return
        if not game.player.alive:
            out.write(
                game_over_report(
                    game.bombs.collected - START_BOMB,
                    game.bombs.to_collect,
                    game.player.steps,
                )
            )
            return
        out.write(_render_text(game))


def main(argv: Sequence[str] | None = None) -> int:
    """Load the stage named in argv and play it with keys read from stdin."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        game = load_map(check_arguments(args))
    except GameError as exc:
        sys.stdout.write(str(exc))
        return 0
    _play(game, (line.strip() for line in sys.stdin), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())