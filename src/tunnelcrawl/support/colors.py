"""Enum with tcod colors."""

from dataclasses import dataclass


@dataclass
class Colors:
    """Enum with tcod colors."""

    WHITE = (255, 255, 255)
    GREEN = (0, 255, 0)
    YELLOW = (255, 255, 0)
    DARK_WALL = (0, 0, 100)
    DARK_GROUND = (50, 50, 150)
