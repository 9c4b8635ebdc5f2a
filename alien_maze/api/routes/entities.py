"""Entity callbacks from the renderer: breadcrumbs, lasers, alien hits."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from alien_maze.api.dependencies import get_game_manager
from alien_maze.api.routes.state import serialize_laser
from alien_maze.api.schemas import (
    EntityResponse,
    FireRequest,
    PlayerPositionResponse,
    PositionRequest,
)
from alien_maze.core.models import WorldPosition
from alien_maze.engine.game_manager import GameManager

router = APIRouter()


def _status(accepted: bool) -> str:
    return "ok" if accepted else "noop"


@router.post("/breadcrumbs", response_model=EntityResponse)
def add_breadcrumb(
    body: PositionRequest,
    manager: GameManager = Depends(get_game_manager),
) -> EntityResponse:
    accepted = manager.session.add_breadcrumb(WorldPosition.of(body.position))
    return EntityResponse(status=_status(accepted))


@router.post("/lasers", response_model=EntityResponse)
def fire_laser(
    body: FireRequest,
    manager: GameManager = Depends(get_game_manager),
) -> EntityResponse:
    try:
        laser = manager.session.add_laser(
            WorldPosition.of(body.position), WorldPosition.of(body.direction),
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    if laser is None:
        return EntityResponse(status="noop")
    return EntityResponse(status="ok", laser=serialize_laser(laser))


@router.delete("/lasers/{laser_id}", response_model=EntityResponse)
def remove_laser(
    laser_id: int,
    manager: GameManager = Depends(get_game_manager),
) -> EntityResponse:
    return EntityResponse(status=_status(manager.session.remove_laser(laser_id)))


@router.post("/lasers/{laser_id}/alien-hit", response_model=EntityResponse)
def alien_hit(
    laser_id: int,
    manager: GameManager = Depends(get_game_manager),
) -> EntityResponse:
    destroyed = manager.session.on_alien_hit(laser_id)
    return EntityResponse(status="ok", destroyed=destroyed)


@router.post("/explosion/complete", response_model=EntityResponse)
def explosion_complete(manager: GameManager = Depends(get_game_manager)) -> EntityResponse:
    manager.session.on_explosion_complete()
    return EntityResponse(status="ok")


@router.post("/player/position", response_model=PlayerPositionResponse)
def report_position(
    body: PositionRequest,
    manager: GameManager = Depends(get_game_manager),
) -> PlayerPositionResponse:
    won = manager.session.report_player_position(WorldPosition.of(body.position))
    return PlayerPositionResponse(won=won, state=manager.state.label)
