"""A small Bomberman-like tile game: maps, enemies, bombs, a pixel canvas and a terminal player."""

__version__ = "0.1.0"
__all__ = ["__version__"]