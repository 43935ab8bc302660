"""The pure per-tick step function and the input entry points."""
from __future__ import annotations

import logging
import random
from dataclasses import replace

from tick_qix.config import QixConfig
from tick_qix.hunter import move_hunter
from tick_qix.levels import LifecycleEvent, can_transition, transition
from tick_qix.runner import advance_runner, enqueue
from tick_qix.state import GameState, new_game
from tick_qix.trail import Trail, TrailEvent, update_trail
from tick_qix.types import Control, Heading, UnknownControlError

logger = logging.getLogger(__name__)


def enqueue_direction(
    state: GameState, heading: Heading, config: QixConfig | None = None,
) -> GameState:
    """Buffer a heading request; it is taken at most one per odd tick."""
    config = config or QixConfig()
    runner = enqueue(state.runner, heading, coalesce=config.coalesce_repeats)
    if runner is state.runner:
        return state
    return replace(state, runner=runner)


def apply_control(
    state: GameState, control: Control, config: QixConfig | None = None,
) -> GameState:
    """Apply an out-of-band control.

    ``RESTART`` returns the level-0 initial state from any lifecycle.
    ``ADVANCE`` starts the next level after a completed one and is
    ignored otherwise. Anything else raises ``UnknownControlError``.
    """
    config = config or QixConfig()

    if control is Control.RESTART:
        transition(state.lifecycle, LifecycleEvent.RESTART)
        return new_game(0, config)

    if control is Control.ADVANCE:
        if not can_transition(state.lifecycle, LifecycleEvent.ADVANCE):
            logger.debug("Ignoring advance while %s", state.lifecycle.name)
            return state
        transition(state.lifecycle, LifecycleEvent.ADVANCE)
        logger.info("Starting level %d", state.level + 1)
        return new_game(state.level + 1, config)

    raise UnknownControlError(control)


def step(
    state: GameState,
    rng: random.Random,
    direction: Heading | None = None,
    config: QixConfig | None = None,
) -> GameState:
    """Advance the simulation one tick.

    Terminal lifecycles are returned unchanged. Order: hunter, runner
    heading and half-rate movement, collision, timeout, trail update,
    sealing, completion check.
    """
    if state.lifecycle.terminal:
        return state
    config = config or QixConfig()
    if direction is not None:
        state = enqueue_direction(state, direction, config)

    spec = config.level(state.level)
    tick = state.tick
    even = tick % 2 == 0

    hunter = move_hunter(state.hunter, state.grid, rng)
    runner = advance_runner(state.runner, state.grid, tick)
    moved = replace(state, tick=tick + 1, hunter=hunter, runner=runner)

    if runner.position in hunter.points:
        return replace(moved, lifecycle=transition(state.lifecycle, LifecycleEvent.CAUGHT))

    if tick + 1 - state.last_capture_tick > spec.time_budget:
        return replace(moved, lifecycle=transition(state.lifecycle, LifecycleEvent.TIMED_OUT))

    trail, event = state.trail, None
    if even:
        trail, event = update_trail(state.trail, runner.position, hunter.head, state.grid)

    grid = state.grid
    fill_percent = state.fill_percent
    last_capture_tick = state.last_capture_tick
    if (
        state.trail.points
        and event is not TrailEvent.CUT
        and state.grid.filled(*runner.position)
    ):
        grid = state.grid.seal(state.trail.points, hunter.points)
        fill_percent = grid.fill_percentage()
        last_capture_tick = tick + 1
        trail = Trail()
        logger.info(
            "Captured %d cells on tick %d, fill now %d%%",
            grid.filled_count() - state.grid.filled_count(), tick, fill_percent,
        )

    lifecycle = state.lifecycle
    if fill_percent >= spec.required_percent:
        lifecycle = transition(lifecycle, LifecycleEvent.THRESHOLD_MET)

    return replace(
        moved,
        grid=grid,
        trail=trail,
        fill_percent=fill_percent,
        last_capture_tick=last_capture_tick,
        lifecycle=lifecycle,
    )
