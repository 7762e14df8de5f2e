"""Object class."""

import logging
from dataclasses import dataclass

from tcod.console import Console

from ..support.common import is_blocked
from .game_map import GameMap, MapBoundsError

logger = logging.getLogger(__name__)


@dataclass
class Object:
    """This is generic object: the player, an NPC... It's always represented by a character on screen."""

    x: int
    y: int
    char: str
    color: tuple[int, int, int]
    name: str = "object"

    def move(self, dx: int, dy: int, game_map: GameMap) -> bool:
        """Move by the given amount, if the destination is not blocked.

        Returns whether the object actually moved.
        """
        if is_blocked(game_map, self.x + dx, self.y + dy):
            logger.debug("%s blocked at (%d,%d)", self.name, self.x + dx, self.y + dy)
            return False
        self.x, self.y = self.x + dx, self.y + dy
        return True

    def draw(self, frame: Console) -> None:
        """Set the color and then draw the character that represents this object at its position."""
        if not (0 <= self.x < frame.width and 0 <= self.y < frame.height):
            raise MapBoundsError(self.x, self.y, frame.width, frame.height)
        frame.fg[self.y, self.x] = self.color
        frame.ch[self.y, self.x] = ord(self.char)
