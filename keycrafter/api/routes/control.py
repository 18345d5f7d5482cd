"""POST /api/v1/keys, /control/{action}, /upgrades/{index} — the write side."""

from __future__ import annotations

from enum import Enum

from fastapi import APIRouter, Depends, HTTPException

from keycrafter.api.dependencies import get_game_manager
from keycrafter.api.game_manager import GameManager
from keycrafter.api.routes.state import serialize_player
from keycrafter.api.schemas import (
    ControlResponse,
    KeysRequest,
    KeysResponse,
    KeystrokeSchema,
    UpgradeResponse,
    UpgradeSchema,
)
from keycrafter.core.resource_nodes import display_name

router = APIRouter()


class ControlAction(str, Enum):
    reset = "reset"


@router.post("/keys", response_model=KeysResponse)
def press_keys(
    body: KeysRequest,
    manager: GameManager = Depends(get_game_manager),
) -> KeysResponse:
    results = manager.press(body.keys)
    snapshot = manager.get_snapshot()
    return KeysResponse(
        tick=snapshot.tick,
        player=serialize_player(snapshot.player),
        results=[
            KeystrokeSchema(
                char=r.char,
                advanced=r.advanced,
                reset=r.reset,
                completed=r.completed,
                harvested=r.harvested,
                retired=r.retired,
                spawned=r.spawned,
                unreachable=r.unreachable,
                steps=r.steps,
                refilled=r.refilled,
            )
            for r in results
        ],
    )


@router.post("/control/{action}", response_model=ControlResponse)
def control(
    action: ControlAction,
    manager: GameManager = Depends(get_game_manager),
) -> ControlResponse:
    match action:
        case ControlAction.reset:
            manager.reset()
            return ControlResponse(status="ok", message="Game reset.", tick=manager.get_snapshot().tick)


@router.get("/upgrades", response_model=list[UpgradeSchema])
def list_upgrades(
    manager: GameManager = Depends(get_game_manager),
) -> list[UpgradeSchema]:
    return [
        UpgradeSchema(
            index=i,
            name=u.name,
            description=u.description,
            cost_kind=display_name(u.cost_kind),
            next_cost=cost,
            level=u.level,
        )
        for i, u, cost in manager.upgrades()
    ]


@router.post("/upgrades/{index}", response_model=UpgradeResponse)
def purchase_upgrade(
    index: int,
    manager: GameManager = Depends(get_game_manager),
) -> UpgradeResponse:
    available = manager.upgrades()
    if not 0 <= index < len(available):
        raise HTTPException(status_code=404, detail=f"Unknown upgrade {index}")
    cost = manager.purchase_upgrade(index)
    player = serialize_player(manager.get_snapshot().player)
    if cost is None:
        raise HTTPException(status_code=400, detail="Not enough resources")
    return UpgradeResponse(status="ok", message=f"Purchased {available[index][1].name}", cost=cost, player=player)
