"""Shared value types and errors for tick-qix."""
from __future__ import annotations

from enum import Enum

Point = tuple[int, int]


class Heading(Enum):
    """Axis direction. Member order is the order legal moves are listed in."""

    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def reverse(self) -> Heading:
        return _REVERSE[self]


_REVERSE = {
    Heading.LEFT: Heading.RIGHT,
    Heading.RIGHT: Heading.LEFT,
    Heading.UP: Heading.DOWN,
    Heading.DOWN: Heading.UP,
}


class Control(Enum):
    """Out-of-band commands from the input source."""

    RESTART = "restart"
    ADVANCE = "advance"


class Lifecycle(Enum):
    RUNNING = "running"
    LEVEL_COMPLETED = "level_completed"
    OVER_CAUGHT = "over_caught"
    OVER_TIMEOUT = "over_timeout"

    @property
    def terminal(self) -> bool:
        return self is not Lifecycle.RUNNING


class TrailMode(Enum):
    DRAWING = "drawing"
    IDLE = "idle"


class UnknownControlError(ValueError):
    """Raised when a control event is not a recognised ``Control``."""

    def __init__(self, control: object) -> None:
        self.control = control
        super().__init__(f"Unknown control event {control!r}")


class TransitionError(KeyError):
    """Raised when a state machine has no entry for a (state, event) pair."""

    def __init__(self, state: object, event: object) -> None:
        self.state = state
        self.event = event
        super().__init__(
            f"No transition from {getattr(state, 'name', state)!s} "
            f"on {getattr(event, 'name', event)!s}"
        )
