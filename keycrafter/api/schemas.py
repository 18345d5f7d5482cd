"""Pydantic request/response models for the REST API."""

from __future__ import annotations

from pydantic import BaseModel, Field


# --- State (render consumer) ---

class PlayerSchema(BaseModel):
    x: int
    y: int
    wood: int = 0
    copper: int = 0


class ResourceNodeSchema(BaseModel):
    node_id: int
    kind: str
    x: int
    y: int
    access_x: int
    access_y: int
    typed_prefix: str = ""
    target_word: str
    next_word: str
    remaining_yield: int
    max_yield: int
    path_length: int = 0


class EventSchema(BaseModel):
    tick: int
    category: str
    message: str
    node_ids: list[int] = Field(default_factory=list)


class GameStateResponse(BaseModel):
    tick: int
    island: str
    width: int
    height: int
    player: PlayerSchema
    nodes: list[ResourceNodeSchema] = Field(default_factory=list)
    events: list[EventSchema] = Field(default_factory=list)


# --- Save (persistence consumer) ---

class StatsSchema(BaseModel):
    keystrokes: int = 0
    characters_typed: int = 0
    words_started: int = 0
    words_completed: int = 0
    mistakes_made: int = 0
    resources_harvested: dict[str, int] = Field(default_factory=dict)
    fastest_word_time: float | None = None
    average_wpm: float = 0.0
    accuracy: float = 100.0
    play_time_seconds: float = 0.0


class SaveResponse(BaseModel):
    version: int
    wood: int
    copper: int
    upgrade_levels: dict[str, int] = Field(default_factory=dict)
    stats: StatsSchema


# --- Input / control ---

class KeysRequest(BaseModel):
    keys: str = Field(..., min_length=1, max_length=256, description="Characters to type, in order")


class KeystrokeSchema(BaseModel):
    char: str
    advanced: list[int] = Field(default_factory=list)
    reset: list[int] = Field(default_factory=list)
    completed: list[int] = Field(default_factory=list)
    harvested: list[int] = Field(default_factory=list)
    retired: list[int] = Field(default_factory=list)
    spawned: list[int] = Field(default_factory=list)
    unreachable: list[int] = Field(default_factory=list)
    steps: int = 0
    refilled: bool = False


class KeysResponse(BaseModel):
    tick: int
    player: PlayerSchema
    results: list[KeystrokeSchema] = Field(default_factory=list)


class ControlResponse(BaseModel):
    status: str
    message: str
    tick: int


class UpgradeSchema(BaseModel):
    index: int
    name: str
    description: str
    cost_kind: str
    next_cost: int
    level: int


class UpgradeResponse(BaseModel):
    status: str
    message: str
    cost: int | None = None
    player: PlayerSchema


class GameConfigResponse(BaseModel):
    world_seed: int
    grid_width: int
    grid_height: int
    harvest_range: int
    spawn_max_attempts: int
    spawn_containment: float
    island: str
    max_nodes: int
    spawn_chance: float
