"""GET /api/v1/config — expose game configuration."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from keycrafter.api.dependencies import get_game_manager
from keycrafter.api.game_manager import GameManager
from keycrafter.api.schemas import GameConfigResponse
from keycrafter.core.islands import get_island

router = APIRouter()


@router.get("/config", response_model=GameConfigResponse)
def get_config(
    manager: GameManager = Depends(get_game_manager),
) -> GameConfigResponse:
    cfg = manager.config
    island = get_island(cfg.island_index)
    return GameConfigResponse(
        world_seed=cfg.world_seed,
        grid_width=cfg.grid_width,
        grid_height=cfg.grid_height,
        harvest_range=cfg.harvest_range,
        spawn_max_attempts=cfg.spawn_max_attempts,
        spawn_containment=cfg.spawn_containment,
        island=island.name,
        max_nodes=island.max_nodes,
        spawn_chance=island.spawn_chance,
    )
