"""Continuous <-> discrete coordinate mapping.

Every component that converts between world units and grid cells goes
through these functions, so generation, collision and placement always
agree on ``cell_size`` and ``half_extent``.

    half_extent = maze_size * cell_size / 2
    gx = floor((x + half_extent) / cell_size)
    gz = floor((z + half_extent) / cell_size)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from alien_maze.core.models import GridPoint, WorldPosition

if TYPE_CHECKING:
    from alien_maze.config import GameConfig
    from alien_maze.core.models import Laser


def half_extent(config: GameConfig) -> float:
    return config.maze_size * config.cell_size / 2


def world_to_grid(pos: WorldPosition, config: GameConfig) -> GridPoint:
    """Map a world position onto the cell that contains it (y is ignored)."""
    half = half_extent(config)
    return GridPoint(
        math.floor((pos.x + half) / config.cell_size),
        math.floor((pos.z + half) / config.cell_size),
    )


def grid_to_world_center(point: GridPoint, config: GameConfig, y: float = 0.0) -> WorldPosition:
    """Return the world position of the centre of *point* at height *y*."""
    half = half_extent(config)
    offset = config.cell_size / 2
    return WorldPosition(
        point.x * config.cell_size - half + offset,
        y,
        point.z * config.cell_size - half + offset,
    )


# ---------------------------------------------------------------------------
# Helpers for the collaborators that own the frame clock
# ---------------------------------------------------------------------------

def laser_position_at(laser: Laser, elapsed: float, config: GameConfig) -> WorldPosition:
    """Where *laser* is after *elapsed* seconds of straight flight."""
    return laser.position + laser.direction.scaled(config.laser_speed * elapsed)


def laser_expired(elapsed: float, config: GameConfig) -> bool:
    return elapsed > config.laser_lifetime


def horizontal_distance(a: WorldPosition, b: WorldPosition) -> float:
    return math.hypot(a.x - b.x, a.z - b.z)


def should_drop_breadcrumb(
    last: WorldPosition | None,
    pos: WorldPosition,
    config: GameConfig,
) -> bool:
    """True when the player has moved far enough from the previous crumb."""
    if last is None:
        return True
    return horizontal_distance(last, pos) >= config.breadcrumb_drop_distance
