"""Runner - player-controlled point with a buffered heading queue."""
from __future__ import annotations

from dataclasses import dataclass, replace

from tick_qix.grid import Grid
from tick_qix.types import Heading, Point


@dataclass(frozen=True)
class Runner:
    """Position plus a FIFO of heading requests.

    The queue is never empty: its front is the heading the runner is
    currently following, later entries are requests not yet taken.
    """

    position: Point
    pending: tuple[Heading, ...]

    def __post_init__(self) -> None:
        if not self.pending:
            raise ValueError("Runner queue must hold at least one heading")

    @property
    def heading(self) -> Heading:
        return self.pending[0]


def enqueue(runner: Runner, heading: Heading, coalesce: bool = False) -> Runner:
    """Append a heading request.

    With *coalesce*, a request equal to the last queued heading is dropped.
    """
    if not isinstance(heading, Heading):
        raise TypeError(f"Expected Heading, got {type(heading).__qualname__}")
    if coalesce and runner.pending[-1] is heading:
        return runner
    return replace(runner, pending=runner.pending + (heading,))


def take_heading(runner: Runner, tick: int) -> tuple[Runner, Heading]:
    """Pop the queue front on odd ticks (keeping one entry), peek on even ticks."""
    if tick % 2 and len(runner.pending) > 1:
        return replace(runner, pending=runner.pending[1:]), runner.pending[0]
    return runner, runner.pending[0]


def step_position(grid: Grid, position: Point, heading: Heading) -> Point:
    """Move one cell along *heading*, clamped to the board (border included)."""
    x, y = position
    return (
        min(max(0, x + heading.dx), grid.width - 1),
        min(max(0, y + heading.dy), grid.height - 1),
    )


def advance_runner(runner: Runner, grid: Grid, tick: int) -> Runner:
    """Resolve this tick's heading and move on even ticks only."""
    runner, heading = take_heading(runner, tick)
    if tick % 2:
        return runner
    return replace(runner, position=step_position(grid, runner.position, heading))
