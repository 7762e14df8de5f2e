"""Support file with common help functions"""

from ..classes.game_map import GameMap


def is_blocked(game_map: GameMap, x: int, y: int) -> bool:
    """Test the map tile at (x, y) for passability."""
    return game_map.tile_at(x, y).blocked
