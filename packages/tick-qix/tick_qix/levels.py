"""Lifecycle state machine for a level."""
from __future__ import annotations

import logging
from enum import Enum

from tick_qix.types import Lifecycle, TransitionError

logger = logging.getLogger(__name__)


class LifecycleEvent(Enum):
    CAUGHT = "caught"
    TIMED_OUT = "timed_out"
    THRESHOLD_MET = "threshold_met"
    RESTART = "restart"
    ADVANCE = "advance"


# Pairs absent from the table are invalid; ``transition`` raises for them.
LIFECYCLE_TRANSITIONS: dict[tuple[Lifecycle, LifecycleEvent], Lifecycle] = {
    (Lifecycle.RUNNING, LifecycleEvent.CAUGHT): Lifecycle.OVER_CAUGHT,
    (Lifecycle.RUNNING, LifecycleEvent.TIMED_OUT): Lifecycle.OVER_TIMEOUT,
    (Lifecycle.RUNNING, LifecycleEvent.THRESHOLD_MET): Lifecycle.LEVEL_COMPLETED,
    (Lifecycle.RUNNING, LifecycleEvent.RESTART): Lifecycle.RUNNING,
    (Lifecycle.LEVEL_COMPLETED, LifecycleEvent.RESTART): Lifecycle.RUNNING,
    (Lifecycle.LEVEL_COMPLETED, LifecycleEvent.ADVANCE): Lifecycle.RUNNING,
    (Lifecycle.OVER_CAUGHT, LifecycleEvent.RESTART): Lifecycle.RUNNING,
    (Lifecycle.OVER_TIMEOUT, LifecycleEvent.RESTART): Lifecycle.RUNNING,
}


def can_transition(lifecycle: Lifecycle, event: LifecycleEvent) -> bool:
    return (lifecycle, event) in LIFECYCLE_TRANSITIONS


def transition(lifecycle: Lifecycle, event: LifecycleEvent) -> Lifecycle:
    """Look up the target state. Raises TransitionError for invalid pairs."""
    try:
        target = LIFECYCLE_TRANSITIONS[(lifecycle, event)]
    except KeyError:
        raise TransitionError(lifecycle, event) from None
    logger.info("Lifecycle %s -> %s on %s", lifecycle.name, target.name, event.name)
    return target
