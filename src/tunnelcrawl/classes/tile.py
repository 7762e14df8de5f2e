"""Tile class"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Tile:
    """A tile of the map and its properties.

    A tile either blocks both movement and sight (a wall) or neither (floor).
    """

    blocked: bool
    block_sight: bool | None = None

    def __post_init__(self):
        if self.block_sight is None:
            object.__setattr__(self, "block_sight", self.blocked)
        elif self.block_sight != self.blocked:
            raise ValueError(f"Tile flags must match: blocked={self.blocked}, block_sight={self.block_sight}")

    @classmethod
    def empty(cls) -> "Tile":
        """Return a passable, transparent tile."""
        return cls(False)

    @classmethod
    def wall(cls) -> "Tile":
        """Return a solid tile."""
        return cls(True)
