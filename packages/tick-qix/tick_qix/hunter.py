"""Hunter - autonomous adversary that wanders the open board."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from tick_qix.grid import Grid
from tick_qix.types import Heading, Point

logger = logging.getLogger(__name__)

# Extra copies of the current heading in the draw, biasing toward straight runs.
STRAIGHT_BIAS = 2


@dataclass(frozen=True)
class Hunter:
    """Head-first chain of points plus the heading of the last move."""

    points: tuple[Point, ...]
    heading: Heading

    def __post_init__(self) -> None:
        if not self.points:
            raise ValueError("Hunter must have at least one point")

    @property
    def head(self) -> Point:
        return self.points[0]

    def __len__(self) -> int:
        return len(self.points)

    def __contains__(self, point: object) -> bool:
        return point in self.points


def spawn_hunter(grid: Grid, length: int) -> Hunter:
    """Lay the hunter along the second-from-bottom row, tail against the right border.

    The head is leftmost and the hunter starts heading left.
    """
    if length > grid.width - 2:
        raise ValueError(
            f"Hunter of length {length} does not fit a {grid.width}-wide board"
        )
    y = grid.height - 2
    first = grid.width - 1 - length
    points = tuple((first + i, y) for i in range(length))
    return Hunter(points=points, heading=Heading.LEFT)


def _clamp(value: int, low: int, high: int) -> int:
    return min(max(low, value), high)


def candidate_heads(grid: Grid, head: Point) -> dict[Heading, Point]:
    """Next head per heading, clamped to the board interior."""
    x, y = head
    return {
        heading: (
            _clamp(x + heading.dx, 1, grid.width - 2),
            _clamp(y + heading.dy, 1, grid.height - 2),
        )
        for heading in Heading
    }


def legal_headings(hunter: Hunter, grid: Grid, candidates: dict[Heading, Point]) -> list[Heading]:
    """Headings that do not reverse, hit the body or run into filled cells."""
    result: list[Heading] = []
    for heading, (x, y) in candidates.items():
        if heading is hunter.heading.reverse:
            continue
        if (x, y) in hunter.points:
            continue
        if grid.filled(x, y):
            continue
        result.append(heading)
    return result


def move_hunter(hunter: Hunter, grid: Grid, rng: random.Random) -> Hunter:
    """Advance the hunter one cell.

    When boxed in, the body is reversed in place (tail becomes head) and a
    random heading is picked; the hunter does not move that tick.
    """
    candidates = candidate_heads(grid, hunter.head)
    legal = legal_headings(hunter, grid, candidates)

    if not legal:
        heading = rng.choice(list(Heading))
        logger.debug("Hunter stuck at %s, reversing toward %s", hunter.head, heading.name)
        return Hunter(points=hunter.points[::-1], heading=heading)

    pool: list[Heading] = []
    if hunter.heading in legal:
        pool.extend([hunter.heading] * STRAIGHT_BIAS)
    pool.extend(legal)
    heading = rng.choice(pool)

    points = (candidates[heading],) + hunter.points[:-1]
    return Hunter(points=points, heading=heading)
