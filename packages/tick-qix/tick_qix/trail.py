"""Trail - the runner's unsealed thread and its drawing state machine."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from tick_qix.grid import Grid
from tick_qix.types import Point, TrailMode, TransitionError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Trail:
    points: tuple[Point, ...] = ()
    mode: TrailMode = TrailMode.DRAWING

    @property
    def drawing(self) -> bool:
        return self.mode is TrailMode.DRAWING

    def __len__(self) -> int:
        return len(self.points)

    def __contains__(self, point: object) -> bool:
        return point in self.points


class TrailEvent(Enum):
    """What happened to the trail this tick, in precedence order."""

    CUT = "cut"
    WALL = "wall"
    BACKTRACK = "backtrack"
    CROSSED = "crossed"
    ADVANCE = "advance"


TRAIL_TRANSITIONS: dict[tuple[TrailMode, TrailEvent], TrailMode] = {
    (TrailMode.DRAWING, TrailEvent.CUT): TrailMode.IDLE,
    (TrailMode.IDLE, TrailEvent.CUT): TrailMode.IDLE,
    (TrailMode.DRAWING, TrailEvent.WALL): TrailMode.DRAWING,
    (TrailMode.IDLE, TrailEvent.WALL): TrailMode.DRAWING,
    (TrailMode.DRAWING, TrailEvent.BACKTRACK): TrailMode.DRAWING,
    (TrailMode.IDLE, TrailEvent.BACKTRACK): TrailMode.DRAWING,
    (TrailMode.DRAWING, TrailEvent.CROSSED): TrailMode.IDLE,
    (TrailMode.IDLE, TrailEvent.CROSSED): TrailMode.IDLE,
    (TrailMode.DRAWING, TrailEvent.ADVANCE): TrailMode.DRAWING,
    (TrailMode.IDLE, TrailEvent.ADVANCE): TrailMode.IDLE,
}


def classify(trail: Trail, runner: Point, hunter_head: Point, grid: Grid) -> TrailEvent:
    """Pick the first matching event, highest precedence first."""
    if hunter_head in trail.points:
        return TrailEvent.CUT
    if grid.filled(*runner):
        return TrailEvent.WALL
    if len(trail.points) >= 2 and trail.points[-2] == runner:
        return TrailEvent.BACKTRACK
    if runner in trail.points:
        return TrailEvent.CROSSED
    return TrailEvent.ADVANCE


def next_mode(mode: TrailMode, event: TrailEvent) -> TrailMode:
    try:
        return TRAIL_TRANSITIONS[(mode, event)]
    except KeyError:
        raise TransitionError(mode, event) from None


def apply_event(trail: Trail, event: TrailEvent, runner: Point) -> Trail:
    """Resolve *event* against the transition table and rewrite the points."""
    mode = next_mode(trail.mode, event)
    if event is TrailEvent.BACKTRACK:
        return Trail(points=trail.points[:-1], mode=mode)
    if event is TrailEvent.ADVANCE:
        if mode is TrailMode.DRAWING and (not trail.points or trail.points[-1] != runner):
            return Trail(points=trail.points + (runner,), mode=mode)
        return Trail(points=trail.points, mode=mode)
    # CUT, WALL and CROSSED all drop the thread.
    return Trail(points=(), mode=mode)


def update_trail(trail: Trail, runner: Point, hunter_head: Point, grid: Grid) -> tuple[Trail, TrailEvent]:
    """Advance the trail state machine by one eligible tick."""
    event = classify(trail, runner, hunter_head, grid)
    if event is TrailEvent.CUT:
        logger.debug("Hunter cut the trail at %s (%d points lost)", hunter_head, len(trail))
    elif event is TrailEvent.CROSSED and trail.points:
        logger.debug("Runner crossed its own trail at %s", runner)
    return apply_event(trail, event, runner), event
