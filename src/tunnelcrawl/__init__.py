"""Tunnelcrawl package."""

# ruff: noqa: F401
from .classes.game import Game
from .classes.game_map import GameMap, MapBoundsError
from .classes.object import Object
from .classes.rect import Rect
from .classes.tile import Tile
from .support import constants, mapgen
from .support.colors import Colors
from .support.display import Display
from .support.engine import new_game, play_game
from .support.render import render_all

__version__ = "0.1.0"
