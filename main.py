import logging
import sys
import pygame
from tetris_config import CONFIG
from tetris_engine import TetrisEngine
from tetris_rng import UniformRandom
from tetris_clock import DropClock
from tetris_input import handle_click, handle_key
from tetris_overlay import Overlay
from tetris_layout import compute_dims
from tetris_render import RenderAssets, button_rects

log = logging.getLogger("tetris")


def setup_logging():
    logging.basicConfig(level=getattr(logging, str(CONFIG["LOG_LEVEL"]).upper(), logging.INFO),
                        format="[TETRIS] %(asctime)s - %(message)s")


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main():
    setup_logging()
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN])

    engine = TetrisEngine(UniformRandom(CONFIG["SEED"]))
    dims = compute_dims(engine.cols, engine.rows)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, engine.cols, engine.rows)
    overlay = Overlay(dims, font, big_font)
    clock = pygame.time.Clock()
    drops = DropClock(engine)
    log.info("Window %dx%d, board %dx%d", dims.total_w, dims.total_h, engine.cols, engine.rows)

    while True:
        dt = clock.tick(CONFIG["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                log.info("Quit")
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                if e.key == pygame.K_ESCAPE:
                    pygame.event.post(pygame.event.Event(pygame.QUIT)); continue
                handle_key(engine, e)
            if e.type == pygame.MOUSEBUTTONDOWN:
                handle_click(engine, button_rects(dims, engine.snapshot()), e)

        drops.update(dt)

        snap = engine.snapshot()
        render.draw(screen, snap)
        overlay.draw(screen, snap)
        pygame.display.flip()


if __name__ == '__main__':
    main()
