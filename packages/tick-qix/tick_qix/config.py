"""Board constants, level table and session configuration."""
from __future__ import annotations

from dataclasses import dataclass

BOARD_COLS = 40
BOARD_ROWS = 20
DEFAULT_TPS = 20


@dataclass(frozen=True)
class LevelSpec:
    """Immutable level descriptor.

    Attributes:
        hunter_length: Number of points in the hunter's body.
        required_percent: Fill percentage that completes the level (1..100).
        time_budget: Ticks allowed between captures before the level times out.
    """

    hunter_length: int
    required_percent: int
    time_budget: int

    def __post_init__(self) -> None:
        if self.hunter_length < 1:
            raise ValueError(f"hunter_length must be >= 1, got {self.hunter_length}")
        if not 1 <= self.required_percent <= 100:
            raise ValueError(
                f"required_percent must be in 1..100, got {self.required_percent}"
            )
        if self.time_budget < 1:
            raise ValueError(f"time_budget must be >= 1, got {self.time_budget}")


LEVELS: tuple[LevelSpec, ...] = (
    LevelSpec(hunter_length=6, required_percent=50, time_budget=1200),
    LevelSpec(hunter_length=8, required_percent=60, time_budget=1200),
    LevelSpec(hunter_length=10, required_percent=65, time_budget=1100),
    LevelSpec(hunter_length=12, required_percent=70, time_budget=1000),
    LevelSpec(hunter_length=14, required_percent=75, time_budget=900),
)


@dataclass(frozen=True)
class QixConfig:
    """Immutable configuration for a game session.

    Attributes:
        tps: Ticks per second the session is paced at.
        levels: Level table; indices past the end reuse the last entry.
        coalesce_repeats: Drop a heading request equal to the last queued one.
    """

    tps: int = DEFAULT_TPS
    levels: tuple[LevelSpec, ...] = LEVELS
    coalesce_repeats: bool = False

    def __post_init__(self) -> None:
        if self.tps <= 0:
            raise ValueError("tps must be positive")
        if not self.levels:
            raise ValueError("levels must not be empty")

    def level(self, index: int) -> LevelSpec:
        """Return the descriptor for *index*, clamped to the last entry."""
        if index < 0:
            raise ValueError(f"level index must be >= 0, got {index}")
        return self.levels[min(index, len(self.levels) - 1)]
