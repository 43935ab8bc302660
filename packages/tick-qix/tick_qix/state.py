"""GameState and the read-only Frame handed to renderers."""
from __future__ import annotations

from dataclasses import dataclass

from tick_qix.config import BOARD_COLS, BOARD_ROWS, QixConfig
from tick_qix.grid import Grid
from tick_qix.hunter import Hunter, spawn_hunter
from tick_qix.runner import Runner
from tick_qix.trail import Trail
from tick_qix.types import Heading, Lifecycle, Point

RUNNER_START: Point = (0, 0)


@dataclass(frozen=True)
class GameState:
    level: int
    tick: int
    last_capture_tick: int
    fill_percent: int
    lifecycle: Lifecycle
    grid: Grid
    hunter: Hunter
    runner: Runner
    trail: Trail


def new_game(level: int = 0, config: QixConfig | None = None) -> GameState:
    """Fresh state for *level*: bordered board, hunter bottom-right, runner top-left.

    The board is always ``BOARD_COLS x BOARD_ROWS``; only the level table is configurable.
    """
    config = config or QixConfig()
    spec = config.level(level)
    grid = Grid.bordered(BOARD_COLS, BOARD_ROWS)
    return GameState(
        level=level,
        tick=0,
        last_capture_tick=0,
        fill_percent=grid.fill_percentage(),
        lifecycle=Lifecycle.RUNNING,
        grid=grid,
        hunter=spawn_hunter(grid, spec.hunter_length),
        runner=Runner(position=RUNNER_START, pending=(Heading.LEFT,)),
        trail=Trail(),
    )


def ticks_remaining(state: GameState, config: QixConfig) -> int:
    budget = config.level(state.level).time_budget
    return max(0, budget - (state.tick - state.last_capture_tick))


@dataclass(frozen=True)
class Frame:
    """Everything a renderer needs for one tick. Never fed back into the core."""

    width: int
    height: int
    cells: tuple[bool, ...]
    hunter: tuple[Point, ...]
    runner: Point
    heading: Heading
    trail: tuple[Point, ...]
    lifecycle: Lifecycle
    level: int
    fill_percent: int
    required_percent: int
    ticks_remaining: int
    elapsed: float

    @property
    def hunter_head(self) -> Point:
        return self.hunter[0]

    def is_filled(self, x: int, y: int) -> bool:
        return self.cells[y * self.width + x]


def frame_of(state: GameState, config: QixConfig | None = None) -> Frame:
    config = config or QixConfig()
    return Frame(
        width=state.grid.width,
        height=state.grid.height,
        cells=state.grid.cells,
        hunter=state.hunter.points,
        runner=state.runner.position,
        heading=state.runner.heading,
        trail=state.trail.points,
        lifecycle=state.lifecycle,
        level=state.level,
        fill_percent=state.fill_percent,
        required_percent=config.level(state.level).required_percent,
        ticks_remaining=ticks_remaining(state, config),
        elapsed=state.tick / config.tps,
    )
