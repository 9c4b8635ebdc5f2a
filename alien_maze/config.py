"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration shared by generation, collision and placement."""

    # Maze
    maze_size: int = 17            # cells per side, odd
    cell_size: float = 4.0         # world units per cell (wall thickness)
    wall_height: float = 4.0
    maze_seed: int | None = None   # None = fresh entropy for every game

    # Player
    player_height: float = 1.8
    player_speed: float = 10.0

    # Breadcrumbs
    breadcrumb_drop_distance: float = 5.0
    breadcrumb_radius: float = 0.15

    # Lasers
    laser_speed: float = 75.0
    laser_lifetime: float = 2.0    # seconds

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.maze_size < 5 or self.maze_size % 2 == 0:
            raise ValueError(f"maze_size must be an odd integer >= 5, got {self.maze_size}")
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.maze_seed is not None and not -(1 << 63) <= self.maze_seed < (1 << 63):
            raise ValueError(f"maze_seed must fit in a signed 64-bit integer, got {self.maze_seed}")
