"""Command-line entrypoint: open the window and run the game loop."""

import argparse
import logging
import sys

from tcod.console import Console

import tunnelcrawl as rl


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tunnelcrawl", description="Two rooms, one tunnel.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {rl.__version__}")
    parser.add_argument("--font", default=rl.constants.FONT_PATH, help="Path to a tcod-layout font image")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    logger = logging.getLogger("tunnelcrawl")
    try:
        game = rl.new_game()
        frame = Console(rl.constants.MAP_WIDTH, rl.constants.MAP_HEIGHT)
        with rl.Display.open(
            rl.constants.SCREEN_WIDTH,
            rl.constants.SCREEN_HEIGHT,
            rl.constants.TITLE,
            args.font,
            fps=rl.constants.LIMIT_FPS,
        ) as display:
            rl.play_game(display, game, frame)
        return 0
    except Exception as exc:
        logger.exception("Unhandled exception in game loop: %s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
