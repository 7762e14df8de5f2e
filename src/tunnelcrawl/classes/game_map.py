"""GameMap class."""

import logging

from .tile import Tile

logger = logging.getLogger(__name__)


class MapBoundsError(IndexError):
    """Raised when a map coordinate falls outside the grid."""

    def __init__(self, x: int, y: int, width: int, height: int):
        super().__init__(f"Coordinates out of bounds: ({x}, {y}) for map {width}x{height}")
        self.x = x
        self.y = y


class GameMap:
    """A fixed-size grid of tiles, indexed [x][y].

    All reads and writes go through tile_at/set_tile, which fail fast on
    coordinates outside the map instead of wrapping around on negative
    indices the way raw list indexing would.
    """

    __slots__ = ("_width", "_height", "_tiles")

    def __init__(self, width: int, height: int, fill: Tile | None = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Map dimensions must be positive, got {width}x{height}")
        fill = Tile.wall() if fill is None else fill
        self._width = width
        self._height = height
        self._tiles: list[list[Tile]] = [[fill for y in range(height)] for x in range(width)]
        logger.debug("Initialized %dx%d map filled with %s", width, height, fill)

    @classmethod
    def filled(cls, width: int, height: int, tile: Tile) -> "GameMap":
        """Return a map where every cell holds the given tile."""
        return cls(width, height, fill=tile)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        """Return True if (x, y) lies inside the map. Never raises."""
        return 0 <= x < self._width and 0 <= y < self._height

    def tile_at(self, x: int, y: int) -> Tile:
        """Return the tile at (x, y)."""
        if not self.in_bounds(x, y):
            raise MapBoundsError(x, y, self._width, self._height)
        return self._tiles[x][y]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Replace the tile at (x, y)."""
        if not self.in_bounds(x, y):
            raise MapBoundsError(x, y, self._width, self._height)
        self._tiles[x][y] = tile

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameMap):
            return NotImplemented
        return self._width == other._width and self._height == other._height and self._tiles == other._tiles

    def __repr__(self) -> str:
        return f"GameMap(width={self._width}, height={self._height})"
