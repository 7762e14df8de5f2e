"""Session parameters for the game."""

from dataclasses import dataclass, field

from ..classes.rect import Rect
from .colors import Colors

# size of the window, in cells
SCREEN_WIDTH = 80
SCREEN_HEIGHT = 50

# size of the map
MAP_WIDTH = 80
MAP_HEIGHT = 45

LIMIT_FPS = 20  # 20 frames-per-second maximum

TITLE = "Agent2199 - an absolute dummy name"
FONT_PATH = "arial10x10.png"

# map layout: two rooms joined by a single corridor
ROOMS = (Rect(20, 15, 10, 15), Rect(50, 15, 10, 15))
H_TUNNELS = ((25, 55, 23),)
V_TUNNELS: tuple[tuple[int, int, int], ...] = ()

PLAYER_TILE = "@"
PLAYER_START = (25, 23)
NPC_TILE = "Y"
NPC_START = (55, 23)

COLOR_DARK_WALL = Colors.DARK_WALL
COLOR_DARK_GROUND = Colors.DARK_GROUND


@dataclass
class GameConfig:
    """Everything needed to build a session. Defaults mirror the module constants."""

    map_width: int = MAP_WIDTH
    map_height: int = MAP_HEIGHT
    rooms: tuple[Rect, ...] = ROOMS
    h_tunnels: tuple[tuple[int, int, int], ...] = H_TUNNELS
    v_tunnels: tuple[tuple[int, int, int], ...] = V_TUNNELS
    player_start: tuple[int, int] = PLAYER_START
    npc_starts: tuple[tuple[int, int], ...] = field(default_factory=lambda: (NPC_START,))
