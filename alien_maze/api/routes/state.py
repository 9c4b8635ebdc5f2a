"""GET /api/v1/state — session snapshot and event feed (polled by the renderer)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from alien_maze.api.dependencies import get_game_manager
from alien_maze.api.schemas import (
    AlienTargetSchema,
    EventSchema,
    GridPointSchema,
    LaserSchema,
    StateResponse,
)
from alien_maze.core.models import AlienTarget, Laser
from alien_maze.engine.game_manager import GameManager

router = APIRouter()


def serialize_laser(laser: Laser) -> LaserSchema:
    return LaserSchema(
        id=laser.id,
        position=laser.position.as_tuple(),
        direction=laser.direction.as_tuple(),
    )


def _serialize_target(target: AlienTarget | None) -> AlienTargetSchema | None:
    if target is None:
        return None
    return AlienTargetSchema(
        position=target.position.as_tuple(),
        orientation=target.orientation.label,
        grid_pos=GridPointSchema(x=target.grid_pos.x, z=target.grid_pos.z),
        is_destroyed=target.is_destroyed,
    )


@router.get("/state", response_model=StateResponse)
def get_state(manager: GameManager = Depends(get_game_manager)) -> StateResponse:
    snap = manager.get_snapshot()
    spawn = manager.session.spawn_position()
    return StateResponse(
        state=snap.state.label,
        generation=snap.generation,
        has_started=snap.has_started,
        reset_count=snap.reset_count,
        error=snap.error,
        spawn_position=spawn.as_tuple() if spawn else None,
        breadcrumbs=[b.as_tuple() for b in snap.breadcrumbs],
        lasers=[serialize_laser(l) for l in snap.lasers],
        alien_target=_serialize_target(snap.alien_target),
        exploding_position=snap.exploding_position.as_tuple() if snap.exploding_position else None,
    )


@router.get("/events", response_model=list[EventSchema])
def get_events(
    since: int = Query(0, ge=0, description="Return events with seq >= since"),
    manager: GameManager = Depends(get_game_manager),
) -> list[EventSchema]:
    return [
        EventSchema(seq=e.seq, category=e.category, message=e.message)
        for e in manager.event_log.since(since)
    ]
