"""Map generation: rooms and the tunnels between them."""

import logging
from collections.abc import Iterable

from ..classes.game_map import GameMap
from ..classes.rect import Rect
from ..classes.tile import Tile

logger = logging.getLogger(__name__)


def create_room(game_map: GameMap, room: Rect) -> None:
    """Create room."""
    # go through the tiles in the rectangle and make them passable,
    # leaving the outer ring as wall
    for x in range(room.x1 + 1, room.x2):
        for y in range(room.y1 + 1, room.y2):
            game_map.set_tile(x, y, Tile.empty())


def create_h_tunnel(game_map: GameMap, x1: int, x2: int, y: int) -> None:
    """Create horizontal tunnel."""
    # min() and max() are used in case x1>x2
    for x in range(min(x1, x2), max(x1, x2) + 1):
        game_map.set_tile(x, y, Tile.empty())


def create_v_tunnel(game_map: GameMap, y1: int, y2: int, x: int) -> None:
    """Create vertical tunnel."""
    for y in range(min(y1, y2), max(y1, y2) + 1):
        game_map.set_tile(x, y, Tile.empty())


def make_map(
    width: int,
    height: int,
    rooms: Iterable[Rect],
    h_tunnels: Iterable[tuple[int, int, int]] = (),
    v_tunnels: Iterable[tuple[int, int, int]] = (),
) -> GameMap:
    """Fill the map with walls, then carve the rooms and tunnels in order.

    h_tunnels holds (x1, x2, y) triples and v_tunnels (y1, y2, x) triples.
    Rooms are carved unconditionally, so a later room may reopen the walls
    of an earlier one.
    """
    game_map = GameMap.filled(width, height, Tile.wall())

    carved: list[Rect] = []
    for room in rooms:
        for other_room in carved:
            if room.intersect(other_room):
                logger.warning("Room %s touches or overlaps %s; carving it anyway", room, other_room)
        create_room(game_map, room)
        logger.debug("Carved room centered at %s", room.center())
        carved.append(room)

    for x1, x2, y in h_tunnels:
        create_h_tunnel(game_map, x1, x2, y)

    for y1, y2, x in v_tunnels:
        create_v_tunnel(game_map, y1, y2, x)

    logger.debug("Generated %r with %d rooms", game_map, len(carved))
    return game_map
