"""Board and status rendering from a tick_qix Frame."""
from __future__ import annotations

import pygame

from tick_qix import Frame, Lifecycle

from ui.constants import (
    COLOR_BG, COLOR_FILLED, COLOR_GRID_LINE, COLOR_HUNTER, COLOR_HUNTER_HEAD,
    COLOR_LOSE, COLOR_RUNNER, COLOR_STATUS_BG, COLOR_TEXT, COLOR_TRAIL, COLOR_WIN,
    GRID_H, GRID_W, SCREEN_W, STATUS_H, TILE_SIZE,
)

_OUTCOME_TEXT = {
    Lifecycle.LEVEL_COMPLETED: ("Level complete! SPACE for next level", COLOR_WIN),
    Lifecycle.OVER_CAUGHT: ("Caught! ENTER to restart", COLOR_LOSE),
    Lifecycle.OVER_TIMEOUT: ("Out of time! ENTER to restart", COLOR_LOSE),
}


def _tile(x: int, y: int, inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        x * TILE_SIZE + inset, y * TILE_SIZE + inset,
        TILE_SIZE - 2 * inset, TILE_SIZE - 2 * inset,
    )


def draw_board(surface: pygame.Surface, frame: Frame) -> None:
    """Draw territory, trail, hunter and runner."""
    surface.fill(COLOR_BG, pygame.Rect(0, 0, GRID_W, GRID_H))
    for y in range(frame.height):
        for x in range(frame.width):
            if frame.is_filled(x, y):
                pygame.draw.rect(surface, COLOR_FILLED, _tile(x, y))

    for x in range(frame.width + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (x * TILE_SIZE, 0), (x * TILE_SIZE, GRID_H))
    for y in range(frame.height + 1):
        pygame.draw.line(surface, COLOR_GRID_LINE, (0, y * TILE_SIZE), (GRID_W, y * TILE_SIZE))

    for x, y in frame.trail:
        pygame.draw.rect(surface, COLOR_TRAIL, _tile(x, y, inset=6))

    for x, y in frame.hunter[1:]:
        pygame.draw.rect(surface, COLOR_HUNTER, _tile(x, y, inset=2))
    hx, hy = frame.hunter_head
    pygame.draw.rect(surface, COLOR_HUNTER_HEAD, _tile(hx, hy, inset=1))

    rx, ry = frame.runner
    pygame.draw.circle(
        surface, COLOR_RUNNER,
        (rx * TILE_SIZE + TILE_SIZE // 2, ry * TILE_SIZE + TILE_SIZE // 2),
        TILE_SIZE // 2 - 3,
    )


class StatusBar:
    """Level, fill, time left and heading, or the outcome once the level ends."""

    def __init__(self) -> None:
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("monospace", 14)
        return self._font

    def draw(self, surface: pygame.Surface, frame: Frame, tps: int) -> None:
        bar_rect = pygame.Rect(0, GRID_H, SCREEN_W, STATUS_H)
        pygame.draw.rect(surface, COLOR_STATUS_BG, bar_rect)

        if frame.lifecycle in _OUTCOME_TEXT:
            message, color = _OUTCOME_TEXT[frame.lifecycle]
        else:
            message = (
                f"Level {frame.level + 1}  "
                f"{frame.fill_percent}% / {frame.required_percent}%  "
                f"{frame.ticks_remaining // tps}s left  "
                f"{frame.heading.name.lower()}"
            )
            color = COLOR_TEXT
        text = self._get_font().render(message, True, color)
        surface.blit(text, (8, GRID_H + 8))
