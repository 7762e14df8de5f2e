"""Session setup and the main loop."""

import logging

from tcod.console import Console

from ..classes.game import Game
from ..classes.object import Object
from .colors import Colors
from .constants import NPC_TILE, PLAYER_TILE, GameConfig
from .input_handlers import handle_keys
from .mapgen import make_map
from .render import render_all

logger = logging.getLogger(__name__)


def new_game(config: GameConfig | None = None) -> Game:
    """Create a new game."""
    config = config or GameConfig()

    # generate map (at this point it's not drawn to the screen)
    game_map = make_map(config.map_width, config.map_height, config.rooms, config.h_tunnels, config.v_tunnels)

    # create object representing the player, followed by the NPCs
    player = Object(*config.player_start, PLAYER_TILE, Colors.GREEN, name="player")
    npcs = [Object(x, y, NPC_TILE, Colors.YELLOW, name="npc") for x, y in config.npc_starts]

    logger.info("New game: %r, player at %s", game_map, config.player_start)
    return Game(game_map, [player, *npcs])


def play_game(display, game: Game, frame: Console) -> None:
    """Play the game until the player quits or the window is closed."""
    while not display.closed:
        frame.clear()  # clear previous frame

        # render the screen
        render_all(frame, game.game_map, game.objects)
        display.present(frame)

        # handle keys and exit game if needed
        key = display.wait_for_key()
        if handle_keys(key, game.player, game.game_map, display) == "exit":
            logger.info("Exit requested")
            break
