"""GET /api/v1/config — expose the geometry and timing constants."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from alien_maze.api.dependencies import get_game_manager
from alien_maze.api.schemas import GameConfigResponse
from alien_maze.engine.game_manager import GameManager

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(
    manager: GameManager = Depends(get_game_manager),
) -> GameConfigResponse:
    cfg = manager.config
    return GameConfigResponse(
        maze_size=cfg.maze_size,
        cell_size=cfg.cell_size,
        wall_height=cfg.wall_height,
        player_height=cfg.player_height,
        player_speed=cfg.player_speed,
        breadcrumb_drop_distance=cfg.breadcrumb_drop_distance,
        breadcrumb_radius=cfg.breadcrumb_radius,
        laser_speed=cfg.laser_speed,
        laser_lifetime=cfg.laser_lifetime,
    )
