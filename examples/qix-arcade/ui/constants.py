"""Layout, color, and rendering constants."""
from __future__ import annotations

from tick_qix import BOARD_COLS, BOARD_ROWS

TILE_SIZE = 20
GRID_W = BOARD_COLS * TILE_SIZE
GRID_H = BOARD_ROWS * TILE_SIZE
STATUS_H = 32
SCREEN_W = GRID_W
SCREEN_H = GRID_H + STATUS_H
FPS = 60

COLOR_BG = (20, 20, 30)
COLOR_FILLED = (90, 70, 140)
COLOR_GRID_LINE = (30, 30, 42)
COLOR_TRAIL = (230, 210, 90)
COLOR_RUNNER = (250, 250, 250)
COLOR_HUNTER = (200, 60, 60)
COLOR_HUNTER_HEAD = (255, 120, 80)
COLOR_STATUS_BG = (30, 30, 40)
COLOR_TEXT = (200, 200, 200)
COLOR_WIN = (100, 255, 100)
COLOR_LOSE = (255, 80, 80)
