"""GET /api/v1/map — the maze of the current session (fetch once per game)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from alien_maze.api.dependencies import get_game_manager
from alien_maze.api.schemas import GridPointSchema, MapResponse
from alien_maze.engine.game_manager import GameManager

router = APIRouter()


@router.get("/map", response_model=MapResponse)
def get_map(manager: GameManager = Depends(get_game_manager)) -> MapResponse:
    maze = manager.session.maze
    if maze is None:
        raise HTTPException(status_code=503, detail="Maze not generated yet.")

    cfg = manager.config
    return MapResponse(
        size=maze.size,
        cell_size=cfg.cell_size,
        wall_height=cfg.wall_height,
        start=GridPointSchema(x=maze.start.x, z=maze.start.z),
        end=GridPointSchema(x=maze.end.x, z=maze.end.z),
        maze=maze.grid.rows(),
    )
