"""Scene composition onto an off-screen console."""

from collections.abc import Iterable

from tcod.console import Console

from ..classes.game_map import GameMap
from ..classes.object import Object
from . import constants as const


def render_all(frame: Console, game_map: GameMap, objects: Iterable[Object]) -> None:
    """Draw all objects in the list, then paint the map background."""
    for g_object in objects:
        g_object.draw(frame)

    # go through all tiles, and set their background color
    for y in range(game_map.height):
        for x in range(game_map.width):
            wall = game_map.tile_at(x, y).block_sight
            if wall:
                frame.bg[y, x] = const.COLOR_DARK_WALL
            else:
                frame.bg[y, x] = const.COLOR_DARK_GROUND
