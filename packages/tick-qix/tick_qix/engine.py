"""Game - session wrapper that owns the RNG and paces ticks."""
from __future__ import annotations

import logging
import os
import random
import time
from typing import Callable

from tick_qix.config import QixConfig
from tick_qix.state import Frame, GameState, frame_of, new_game
from tick_qix.step import apply_control, enqueue_direction, step
from tick_qix.types import Control, Heading, Lifecycle

logger = logging.getLogger(__name__)

CaptureHook = Callable[[Frame, int], None]
LifecycleHook = Callable[[Frame, Lifecycle, Lifecycle], None]


class Game:
    """Holds the current GameState and drives ``step`` from a tick source.

    The seed fixes every hunter path; ``RESTART`` reseeds, so a restarted
    game replays exactly like a fresh one with the same seed.
    """

    def __init__(self, config: QixConfig | None = None, seed: int | None = None) -> None:
        self._config = config or QixConfig()
        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        logger.debug("Game seeded with %d", seed)
        self._state = new_game(0, self._config)
        self._capture_hooks: list[CaptureHook] = []
        self._lifecycle_hooks: list[LifecycleHook] = []
        self._stop_requested: bool = False

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def config(self) -> QixConfig:
        return self._config

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def running(self) -> bool:
        return self._state.lifecycle is Lifecycle.RUNNING

    def on_capture(self, hook: CaptureHook) -> None:
        """Register ``hook(frame, cells_captured)``, called after each capture."""
        self._capture_hooks.append(hook)

    def on_lifecycle(self, hook: LifecycleHook) -> None:
        """Register ``hook(frame, old, new)``, called whenever the lifecycle changes."""
        self._lifecycle_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def frame(self) -> Frame:
        return frame_of(self._state, self._config)

    def enqueue_direction(self, heading: Heading) -> None:
        self._state = enqueue_direction(self._state, heading, self._config)

    def apply_control(self, control: Control) -> None:
        old = self._state
        new = apply_control(old, control, self._config)
        if control is Control.RESTART:
            self._rng.seed(self._seed)
        self._commit(old, new)

    def step(self) -> Frame:
        """Advance one tick. No-op outside ``RUNNING``."""
        old = self._state
        new = step(old, self._rng, config=self._config)
        self._commit(old, new)
        return self.frame()

    def run(self, n: int) -> int:
        """Step up to *n* ticks, stopping early when the level ends.

        Returns the number of ticks actually processed.
        """
        self._stop_requested = False
        done = 0
        for _ in range(n):
            if not self.running or self._stop_requested:
                break
            self.step()
            done += 1
        return done

    def run_forever(self, on_frame: Callable[[Frame], None] | None = None) -> None:
        """Step at ``config.tps`` until the level ends or a stop is requested."""
        self._stop_requested = False
        dt = 1.0 / self._config.tps
        while self.running and not self._stop_requested:
            start = time.monotonic()
            frame = self.step()
            if on_frame is not None:
                on_frame(frame)
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

    def _commit(self, old: GameState, new: GameState) -> None:
        self._state = new
        if new is old:
            return
        captured = new.grid.filled_count() - old.grid.filled_count()
        if captured > 0 and new.level == old.level:
            frame = self.frame()
            for hook in self._capture_hooks:
                hook(frame, captured)
        if new.lifecycle is not old.lifecycle:
            frame = self.frame()
            for hook in self._lifecycle_hooks:
                hook(frame, old.lifecycle, new.lifecycle)
