"""Grid - immutable territory store with flood-fill sealing."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from tick_qix.types import Point

_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True)
class Grid:
    """Flat ``width * height`` array of cells indexed ``y * width + x``.

    ``True`` is filled (captured or border), ``False`` is open. The outer
    ring is always filled; every mutation returns a new Grid.
    """

    width: int
    height: int
    cells: tuple[bool, ...]

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ValueError(
                f"Grid must be at least 3x3, got {self.width}x{self.height}"
            )
        if len(self.cells) != self.width * self.height:
            raise ValueError(
                f"Expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def bordered(cls, width: int, height: int) -> Grid:
        """Create a grid with only the border ring filled."""
        cells = tuple(
            x == 0 or y == 0 or x == width - 1 or y == height - 1
            for y in range(height)
            for x in range(width)
        )
        return cls(width, height, cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def on_border(self, x: int, y: int) -> bool:
        return x == 0 or y == 0 or x == self.width - 1 or y == self.height - 1

    def filled(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            raise ValueError(
                f"({x}, {y}) out of bounds for {self.width}x{self.height} grid"
            )
        return self.cells[y * self.width + x]

    def with_filled(self, points: Iterable[Point]) -> Grid:
        """Return a copy with every point in *points* filled."""
        cells = list(self.cells)
        for x, y in points:
            if not self.in_bounds(x, y):
                raise ValueError(
                    f"({x}, {y}) out of bounds for {self.width}x{self.height} grid"
                )
            cells[y * self.width + x] = True
        return Grid(self.width, self.height, tuple(cells))

    def filled_count(self) -> int:
        return sum(self.cells)

    def border_count(self) -> int:
        return 2 * self.width + 2 * self.height - 4

    def fill_percentage(self) -> int:
        """Percentage of non-border cells that are filled, rounded half-up."""
        border = self.border_count()
        filled = self.filled_count() - border
        total = self.width * self.height - border
        return (200 * filled + total) // (2 * total)

    def reachable(self, *starts: Point) -> frozenset[Point]:
        """Open cells 4-connected to any of *starts*. Filled starts are skipped."""
        width, height, cells = self.width, self.height, self.cells
        stack: list[Point] = [
            (x, y) for x, y in starts
            if self.in_bounds(x, y) and not cells[y * width + x]
        ]
        visited: set[Point] = set(stack)
        while stack:
            x, y = stack.pop()
            for dx, dy in _NEIGHBOURS:
                nx, ny = x + dx, y + dy
                if not (0 <= nx < width and 0 <= ny < height):
                    continue
                if (nx, ny) in visited or cells[ny * width + nx]:
                    continue
                visited.add((nx, ny))
                stack.append((nx, ny))
        return frozenset(visited)

    def seal(self, trail: Iterable[Point], hunter: Iterable[Point]) -> Grid:
        """Turn *trail* into wall and fill every open cell cut off from the hunter.

        The flood fill is seeded from every open hunter point, so a head
        resting on a filled cell does not hide the region the body is in.
        """
        walled = self.with_filled(trail)
        keep = walled.reachable(*hunter)
        width = walled.width
        cells = tuple(
            filled or (i % width, i // width) not in keep
            for i, filled in enumerate(walled.cells)
        )
        return Grid(walled.width, walled.height, cells)
