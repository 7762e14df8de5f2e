"""Game class."""

from dataclasses import dataclass, field

from .game_map import GameMap
from .object import Object


@dataclass
class Game:
    """Session state: the map and every object on it. The first object is the player."""

    game_map: GameMap
    objects: list[Object] = field(default_factory=list)

    @property
    def player(self) -> Object:
        return self.objects[0]
