from __future__ import annotations

from dataclasses import dataclass

from puzzle.constants import BASE_FALL_TIME, GRID_HEIGHT, GRID_WIDTH, TILE_TYPE_COUNT


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Construction-time settings for a simulation instance."""

    width: int = GRID_WIDTH
    height: int = GRID_HEIGHT
    tile_type_count: int = TILE_TYPE_COUNT
    base_fall_time: float = BASE_FALL_TIME
    seed: int | None = None
    best_score: int = 0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board size must be positive, got {self.width}x{self.height}")
        if self.tile_type_count < 1:
            raise ValueError(f"Need at least one tile type, got {self.tile_type_count}")
        if self.base_fall_time < 0:
            raise ValueError(f"base_fall_time must be >= 0, got {self.base_fall_time}")
        if self.best_score < 0:
            raise ValueError(f"best_score must be >= 0, got {self.best_score}")
