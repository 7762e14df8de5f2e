import pytest
import tcod.event
from tcod.console import Console

from tunnelcrawl.classes.object import Object
from tunnelcrawl.support import constants as const
from tunnelcrawl.support.colors import Colors
from tunnelcrawl.support.engine import new_game, play_game
from tunnelcrawl.support.input_handlers import handle_keys
from tunnelcrawl.support.mapgen import make_map

KeySym = tcod.event.KeySym
Modifier = tcod.event.Modifier


def key(sym, mod=Modifier.NONE):
    return tcod.event.KeyDown(scancode=0, sym=sym, mod=mod)


class FakeDisplay:
    """Stands in for the tcod window: replays queued keys, then reports closed."""

    def __init__(self, keys):
        self.keys = list(keys)
        self.closed = False
        self.fullscreen = False
        self.presented = []

    def present(self, frame, dest=(0, 0), fg_alpha=1.0, bg_alpha=1.0):
        self.presented.append(frame.ch.copy())

    def wait_for_key(self):
        if not self.keys:
            self.closed = True
            return None
        return self.keys.pop(0)

    def toggle_fullscreen(self):
        self.fullscreen = not self.fullscreen


@pytest.fixture
def reference_map():
    return make_map(80, 45, const.ROOMS, const.H_TUNNELS)


@pytest.mark.parametrize(
    "sym,expected",
    [
        (KeySym.UP, (25, 22)),
        (KeySym.DOWN, (25, 24)),
        (KeySym.LEFT, (24, 23)),
        (KeySym.RIGHT, (26, 23)),
    ],
)
def test_arrow_keys_move_player(reference_map, sym, expected):
    player = Object(25, 23, "@", Colors.GREEN)
    assert handle_keys(key(sym), player, reference_map, FakeDisplay([])) is None
    assert (player.x, player.y) == expected


def test_escape_requests_exit(reference_map):
    player = Object(25, 23, "@", Colors.GREEN)
    assert handle_keys(key(KeySym.ESCAPE), player, reference_map, FakeDisplay([])) == "exit"
    assert (player.x, player.y) == (25, 23)


def test_alt_enter_toggles_fullscreen(reference_map):
    player = Object(25, 23, "@", Colors.GREEN)
    display = FakeDisplay([])

    handle_keys(key(KeySym.RETURN, Modifier.LALT), player, reference_map, display)
    assert display.fullscreen is True

    # plain Enter does nothing
    handle_keys(key(KeySym.RETURN), player, reference_map, display)
    assert display.fullscreen is True
    assert (player.x, player.y) == (25, 23)


def test_other_keys_are_ignored(reference_map):
    player = Object(25, 23, "@", Colors.GREEN)
    display = FakeDisplay([])

    assert handle_keys(key(KeySym.SPACE), player, reference_map, display) is None
    assert handle_keys(None, player, reference_map, display) is None
    assert (player.x, player.y) == (25, 23)
    assert display.fullscreen is False


def test_new_game_uses_reference_configuration():
    game = new_game()

    assert (game.game_map.width, game.game_map.height) == (const.MAP_WIDTH, const.MAP_HEIGHT)
    assert (game.player.x, game.player.y) == const.PLAYER_START
    assert game.player.char == "@"
    assert [(o.x, o.y, o.char) for o in game.objects[1:]] == [(*const.NPC_START, "Y")]
    assert game.game_map == make_map(80, 45, const.ROOMS, const.H_TUNNELS)


def test_loop_moves_player_and_stops_on_escape():
    game = new_game()
    frame = Console(const.MAP_WIDTH, const.MAP_HEIGHT)
    display = FakeDisplay([key(KeySym.RIGHT), key(KeySym.UP), key(KeySym.ESCAPE), key(KeySym.RIGHT)])

    play_game(display, game, frame)

    assert (game.player.x, game.player.y) == (26, 22)
    assert len(display.presented) == 3
    assert len(display.keys) == 1
    # each frame shows the player where it stood when the frame was composed
    assert display.presented[0][23, 25] == ord("@")
    assert display.presented[1][23, 26] == ord("@")
    assert display.presented[1][23, 25] == ord(" ")


def test_loop_stops_when_window_closes():
    game = new_game()
    frame = Console(const.MAP_WIDTH, const.MAP_HEIGHT)
    display = FakeDisplay([key(KeySym.LEFT)])

    play_game(display, game, frame)

    assert display.closed is True
    assert (game.player.x, game.player.y) == (24, 23)
    assert len(display.presented) == 2
