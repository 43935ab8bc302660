"""Qix Arcade - pygame front end for the tick-qix simulation core.

Arrow keys steer the runner, ENTER restarts, SPACE starts the next level
once the current one is complete.

Run: python main.py [--seed N] [--tps N]
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from tick_qix import Control, Game, Heading, QixConfig

from ui.constants import FPS, SCREEN_H, SCREEN_W
from ui.renderer import StatusBar, draw_board

KEY_HEADINGS = {
    pygame.K_UP: Heading.UP,
    pygame.K_DOWN: Heading.DOWN,
    pygame.K_LEFT: Heading.LEFT,
    pygame.K_RIGHT: Heading.RIGHT,
}

KEY_CONTROLS = {
    pygame.K_RETURN: Control.RESTART,
    pygame.K_SPACE: Control.ADVANCE,
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Qix Arcade - tick-qix visual demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--tps", type=int, default=20, help="Ticks per second (default: 20)")
    p.add_argument("--coalesce", action="store_true",
                   help="Drop repeated arrow presses instead of queueing them")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    config = QixConfig(tps=args.tps, coalesce_repeats=args.coalesce)
    game = Game(config=config, seed=args.seed)
    game.on_lifecycle(
        lambda frame, old, new: pygame.display.set_caption(f"Qix Arcade - {new.value}")
    )

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Qix Arcade")
    clock = pygame.time.Clock()
    status = StatusBar()

    # Tick accumulator for fixed-rate simulation ticks
    tick_interval = 1.0 / config.tps
    accumulator = 0.0

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0
        accumulator += dt

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key in KEY_HEADINGS:
                    game.enqueue_direction(KEY_HEADINGS[event.key])
                elif event.key in KEY_CONTROLS:
                    game.apply_control(KEY_CONTROLS[event.key])
                    accumulator = 0.0

        # --- Simulation at fixed rate ---
        while accumulator >= tick_interval:
            if game.running:
                game.step()
            accumulator -= tick_interval

        # --- Render ---
        frame = game.frame()
        draw_board(screen, frame)
        status.draw(screen, frame, config.tps)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
