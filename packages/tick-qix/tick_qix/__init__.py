"""tick-qix - Deterministic territory-capture simulation core."""
from __future__ import annotations

from tick_qix.config import BOARD_COLS, BOARD_ROWS, LEVELS, LevelSpec, QixConfig
from tick_qix.engine import Game
from tick_qix.grid import Grid
from tick_qix.hunter import Hunter, move_hunter, spawn_hunter
from tick_qix.levels import LifecycleEvent, transition
from tick_qix.runner import Runner
from tick_qix.state import Frame, GameState, frame_of, new_game
from tick_qix.step import apply_control, enqueue_direction, step
from tick_qix.trail import Trail, TrailEvent, update_trail
from tick_qix.types import (
    Control,
    Heading,
    Lifecycle,
    Point,
    TrailMode,
    TransitionError,
    UnknownControlError,
)

__all__ = [
    "BOARD_COLS",
    "BOARD_ROWS",
    "LEVELS",
    "LevelSpec",
    "QixConfig",
    "Game",
    "Grid",
    "Hunter",
    "move_hunter",
    "spawn_hunter",
    "LifecycleEvent",
    "transition",
    "Runner",
    "Frame",
    "GameState",
    "frame_of",
    "new_game",
    "apply_control",
    "enqueue_direction",
    "step",
    "Trail",
    "TrailEvent",
    "update_trail",
    "Control",
    "Heading",
    "Lifecycle",
    "Point",
    "TrailMode",
    "TransitionError",
    "UnknownControlError",
]
