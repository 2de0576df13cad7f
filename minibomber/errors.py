"""Error codes, their messages and the reports printed to the terminal."""

from __future__ import annotations

STR_WHITE = "\033[0m"
STR_RED = "\033[31m"
STR_CYAN = "\033[36m"

_MESSAGES: tuple[str, ...] = (
    "failed to load texture",
    "mlx init failed",
    "failed to create new window",
    "\nUsage:\t\t./so_long [map]\nEx:\t\t./so_long maps/map_large.ber",
    "map's file has no extension",
    "map's file has the wrong extension (needs to be .ber)",
    "memory allocation for the buffer failed",
    "too many ennemies on the map",
    "too many bomb items on the map",
    "too many fire items on the map",
    "too many speed items on the map",
    "stage is not surrounded by walls",
    "unknown element on the map",
    "map has to contain at least one collectible",
    "map has to contain one player",
    "map has to contain an exit",
    "function get_next_line failed",
    "map is too small",
    "map is not a rectangle",
    "failed to open file",
    "failed to allocate memory",
    "failed to close file",
)

ERR_MAX = len(_MESSAGES)


def error_message(code: int) -> str:
    """Return the message for an error code."""
    if not 0 <= code < ERR_MAX:
        raise ValueError(f"unknown error code: {code}")
    return _MESSAGES[code]


def colored(text: str, color: str) -> str:
    """Wrap text in a terminal colour, indented and followed by a blank line."""
    return f"{color}\t\t{text}{STR_WHITE}\n\n"


def format_error(code: int) -> str:
    """Render an error code and its message as printed on the terminal."""
    return f"\nError code: {code}" + colored(error_message(code), STR_RED)


def steps_report(steps: int) -> str:
    """Render the step count line."""
    return f"> Steps:\t\t{steps}\n\n"


def game_clear_report(steps: int) -> str:
    """Render the report printed when the stage is cleared."""
    return "\n" + colored("GAME CLEAR !", STR_CYAN) + steps_report(steps)


def game_over_report(collected: int, to_collect: int, steps: int) -> str:
    """Render the report printed when the player dies."""
    return (
        "\n"
        + colored("GAME OVER !", STR_RED)
        + f"> Collected items:\t{collected}/{to_collect}\n"
        + steps_report(steps)
    )


class GameError(Exception):
    """One or more fatal game errors, identified by their codes."""

    def __init__(self, *codes: int) -> None:
        if not codes:
            raise ValueError("GameError needs at least one error code")
        for code in codes:
            error_message(code)
        self.codes: tuple[int, ...] = tuple(codes)
        super().__init__("".join(format_error(code) for code in self.codes))

    @property
    def code(self) -> int:
        """The first error code."""
        return self.codes[0]

    @property
    def messages(self) -> list[str]:
        """The messages of all error codes, in order."""
        return [error_message(code) for code in self.codes]