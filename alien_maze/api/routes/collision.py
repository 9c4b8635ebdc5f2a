"""POST /api/v1/collision/* — advisory pre-move collision queries."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from alien_maze.api.dependencies import get_game_manager
from alien_maze.api.schemas import CollisionResponse, GridPointSchema, PositionRequest
from alien_maze.core.geometry import world_to_grid
from alien_maze.core.models import WorldPosition
from alien_maze.engine.game_manager import GameManager

router = APIRouter()


def _cell(pos: WorldPosition, manager: GameManager) -> GridPointSchema:
    cell = world_to_grid(pos, manager.config)
    return GridPointSchema(x=cell.x, z=cell.z)


@router.post("/collision/wall", response_model=CollisionResponse)
def wall_collision(
    body: PositionRequest,
    manager: GameManager = Depends(get_game_manager),
) -> CollisionResponse:
    pos = WorldPosition.of(body.position)
    return CollisionResponse(collides=manager.session.check_wall_collision(pos), cell=_cell(pos, manager))


@router.post("/collision/player", response_model=CollisionResponse)
def player_collision(
    body: PositionRequest,
    manager: GameManager = Depends(get_game_manager),
) -> CollisionResponse:
    pos = WorldPosition.of(body.position)
    return CollisionResponse(collides=manager.session.check_player_collision(pos), cell=_cell(pos, manager))
