"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field

Vector3 = tuple[float, float, float]


# --- Shared ---

class GridPointSchema(BaseModel):
    x: int
    z: int


# --- Map ---

class MapResponse(BaseModel):
    size: int
    cell_size: float
    wall_height: float
    start: GridPointSchema
    end: GridPointSchema
    maze: list[list[int]] = Field(description="maze[z][x] cell values (0=Open, 1=Wall)")


# --- State ---

class LaserSchema(BaseModel):
    id: int
    position: Vector3
    direction: Vector3


class AlienTargetSchema(BaseModel):
    position: Vector3
    orientation: str = Field(description="'x' or 'z': the corridor axis the target blocks")
    grid_pos: GridPointSchema
    is_destroyed: bool = False


class StateResponse(BaseModel):
    state: str
    generation: int
    has_started: bool
    reset_count: int
    error: str = ""
    spawn_position: Vector3 | None = None
    breadcrumbs: list[Vector3] = Field(default_factory=list)
    lasers: list[LaserSchema] = Field(default_factory=list)
    alien_target: AlienTargetSchema | None = None
    exploding_position: Vector3 | None = None


class EventSchema(BaseModel):
    seq: int
    category: str
    message: str


# --- Control ---

class ControlResponse(BaseModel):
    status: str
    message: str
    state: str


# --- Entities & collision ---

class PositionRequest(BaseModel):
    position: Vector3


class FireRequest(BaseModel):
    position: Vector3
    direction: Vector3


class EntityResponse(BaseModel):
    status: str
    laser: LaserSchema | None = None
    destroyed: bool = False


class CollisionResponse(BaseModel):
    collides: bool
    cell: GridPointSchema


class PlayerPositionResponse(BaseModel):
    won: bool
    state: str


# --- Config ---

class GameConfigResponse(BaseModel):
    maze_size: int
    cell_size: float
    wall_height: float
    player_height: float
    player_speed: float
    breadcrumb_drop_distance: float
    breadcrumb_radius: float
    laser_speed: float
    laser_lifetime: float
