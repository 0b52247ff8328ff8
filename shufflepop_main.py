
import argparse
import logging
import pygame, sys
from shufflepop_config import CONFIG
from shufflepop_game import GameState
from shufflepop_input import TapDetector
from shufflepop_layout import compute_dims
from shufflepop_render import RenderAssets, load_fonts
from shufflepop_rng import make_rng

logger = logging.getLogger("shufflepop")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="ShufflePop: pop falling cards by suit or color")
    parser.add_argument("--seed", type=int, default=CONFIG["SEED"], help="Random seed (default: clock)")
    parser.add_argument("--fps", type=int, default=CONFIG["FPS"], help="Ticks per second (default: 60)")
    parser.add_argument("--log-level", default=CONFIG["LOG_LEVEL"], help="Logging level (default: INFO)")
    return parser.parse_args(argv)


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except TypeError:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args = parse_args(argv)
    CONFIG.update(SEED=args.seed, FPS=args.fps, LOG_LEVEL=args.log_level.upper())
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN, pygame.FINGERDOWN])

    dims = compute_dims()
    screen = recreate_window(dims)
    pygame.display.set_caption("ShufflePop")
    render = RenderAssets(dims, load_fonts(dims))
    clock = pygame.time.Clock()

    state = GameState(make_rng(CONFIG["SEED"]))
    taps = TapDetector()
    logger.info("started at %d fps", CONFIG["FPS"])

    while True:
        clock.tick(CONFIG["FPS"])
        events = pygame.event.get()
        if any(e.type == pygame.QUIT for e in events):
            logger.info("quit after %d taps", taps.taps)
            pygame.quit(); sys.exit()
        frame = state.advance(taps.update(events))
        render.draw_frame(screen, frame)
        pygame.display.flip()


if __name__ == '__main__':
    main()
