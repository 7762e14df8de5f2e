"""Keyboard handling."""

import tcod.event

from ..classes.game_map import GameMap
from ..classes.object import Object

MOVE_KEYS = {
    tcod.event.KeySym.UP: (0, -1),
    tcod.event.KeySym.DOWN: (0, 1),
    tcod.event.KeySym.LEFT: (-1, 0),
    tcod.event.KeySym.RIGHT: (1, 0),
}

ENTER_KEYS = {tcod.event.KeySym.RETURN, tcod.event.KeySym.KP_ENTER}


def handle_keys(event: tcod.event.KeyDown | None, player: Object, game_map: GameMap, display) -> str | None:
    """Handle one key press. Returns "exit" when the game should end."""
    if event is None:
        return None

    if event.sym in ENTER_KEYS and event.mod & tcod.event.Modifier.ALT:
        # Alt+Enter: toggle fullscreen
        display.toggle_fullscreen()

    elif event.sym == tcod.event.KeySym.ESCAPE:
        return "exit"  # exit game

    # movement keys
    elif event.sym in MOVE_KEYS:
        dx, dy = MOVE_KEYS[event.sym]
        player.move(dx, dy, game_map)

    return None
