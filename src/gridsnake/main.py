# main.py
import argparse
from typing import List, Optional

import pygame  # type: ignore

from .config import SCREEN_WIDTH, SCREEN_HEIGHT, FONT_SIZE, CFG, Config
from .game import new_game_state, handle_input, update, render


def parse_args(argv: Optional[List[str]] = None) -> Config:
    parser = argparse.ArgumentParser(description="Grid snake. w/a/s/d to steer, any key to replay.")
    parser.add_argument("--seed", type=int, default=CFG.seed,
                        help="seed for food placement (random if omitted)")
    parser.add_argument("--tick-ms", type=int, default=CFG.tick_ms,
                        help="milliseconds between snake moves")
    parser.add_argument("--fps", type=int, default=CFG.fps,
                        help="frame rate cap for drawing")
    parser.add_argument("--debug", action="store_true",
                        help="print game over / restart events")
    args = parser.parse_args(argv)

    try:
        return Config(seed=args.seed, tick_ms=args.tick_ms, fps=args.fps, debug=args.debug)
    except ValueError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    cfg = parse_args(argv)

    pygame.init()
    font = pygame.font.SysFont("arial", FONT_SIZE)
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    state = new_game_state(pygame.time.get_ticks(), cfg)
    print(f"[SNAKE] seed={cfg.seed} tick_ms={cfg.tick_ms} fps={cfg.fps}")
    running = True

    while running:
        # 1) input
        running = handle_input(state)
        if not running:
            break

        # 2) update: fixed step, gated inside update()
        update(state, pygame.time.get_ticks())

        # 3) render
        render(screen, font, state)
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()

if __name__ == "__main__":
    main()
