"""
Entry point: python -m flappy_dragon
"""

import argparse
import logging
import random
import sys

from .constants import RENDER_FPS, WINDOW_TITLE
from .game_state import State
from .window import BackendError, WindowBuilder, main_loop

logger = logging.getLogger("flappy_dragon")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="flappy-dragon", description="ASCII Flappy Bird")
    parser.add_argument("--seed", type=int, default=None, help="Seed for obstacle placement")
    parser.add_argument("--fps", type=int, default=RENDER_FPS, help="Render frame rate cap")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        window = WindowBuilder.simple80x50().with_title(WINDOW_TITLE).with_fps(args.fps).build()
    except BackendError as e:
        logger.error("%s", e)
        return 1

    main_loop(window, State(random.Random(args.seed)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
