"""Window, font and keyboard access through tcod."""

import logging
import os
from time import perf_counter, sleep

import tcod.console
import tcod.context
import tcod.event
import tcod.tileset

logger = logging.getLogger(__name__)


class Display:
    """The root console and window a frame is presented to.

    When fps is set, present() sleeps so frames are shown at most fps times a second.
    """

    def __init__(self, context: tcod.context.Context, root: tcod.console.Console, fps: int | None = None):
        self.context = context
        self.root = root
        self.fps = fps
        self.closed = False
        self._last_present: float | None = None

    @classmethod
    def open(
        cls, width: int, height: int, title: str, font_path: str | None = None, fps: int | None = None
    ) -> "Display":
        """Create the window, using the tcod-layout font at font_path when it exists."""
        tileset = None
        if font_path and os.path.exists(font_path):
            # the font has 32 chars in a row, and 8 rows
            tileset = tcod.tileset.load_tilesheet(font_path, 32, 8, tcod.tileset.CHARMAP_TCOD)
        elif font_path:
            logger.warning("Font %s not found, using the default tileset", font_path)
        context = tcod.context.new(columns=width, rows=height, tileset=tileset, title=title, vsync=True)
        logger.info("Opened %dx%d window %r", width, height, title)
        return cls(context, tcod.console.Console(width, height), fps=fps)

    def present(
        self,
        frame: tcod.console.Console,
        dest: tuple[int, int] = (0, 0),
        fg_alpha: float = 1.0,
        bg_alpha: float = 1.0,
    ) -> None:
        """Blit the frame onto the root console at dest and show it."""
        frame.blit(self.root, dest_x=dest[0], dest_y=dest[1], fg_alpha=fg_alpha, bg_alpha=bg_alpha)
        self._limit_fps()
        self.context.present(self.root)

    def _limit_fps(self) -> None:
        now = perf_counter()
        if self.fps and self._last_present is not None:
            remaining = 1.0 / self.fps - (now - self._last_present)
            if remaining > 0:
                sleep(remaining)
                now += remaining
        self._last_present = now

    def wait_for_key(self) -> tcod.event.KeyDown | None:
        """Block until a key is pressed. Returns None if the window was closed instead."""
        while True:
            for event in tcod.event.wait():
                if isinstance(event, tcod.event.Quit):
                    self.closed = True
                    return None
                if isinstance(event, tcod.event.KeyDown):
                    return event

    def toggle_fullscreen(self) -> None:
        window = self.context.sdl_window
        if window is None:
            return
        window.fullscreen = not window.fullscreen

    def close(self) -> None:
        self.closed = True
        self.context.close()

    def __enter__(self) -> "Display":
        return self

    def __exit__(self, *args) -> None:
        self.close()
