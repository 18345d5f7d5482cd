"""GET /api/v1/state, /events, /save — read-only views for render and save layers."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from keycrafter.api.dependencies import get_game_manager
from keycrafter.api.game_manager import GameManager
from keycrafter.api.schemas import (
    EventSchema,
    GameStateResponse,
    PlayerSchema,
    ResourceNodeSchema,
    SaveResponse,
    StatsSchema,
)
from keycrafter.core.models import Player
from keycrafter.utils.event_log import GameEvent

router = APIRouter()


def serialize_player(player: Player) -> PlayerSchema:
    return PlayerSchema(x=player.pos.x, y=player.pos.y, wood=player.wood, copper=player.copper)


def _serialize_event(ev: GameEvent) -> EventSchema:
    return EventSchema(
        tick=ev.tick,
        category=ev.category.name.lower(),
        message=ev.message,
        node_ids=list(ev.node_ids),
    )


@router.get("/state", response_model=GameStateResponse)
def get_state(
    since_tick: int = Query(0, ge=0, description="Only include events from this tick onward"),
    manager: GameManager = Depends(get_game_manager),
) -> GameStateResponse:
    snapshot = manager.get_snapshot()
    nodes = [
        ResourceNodeSchema(
            node_id=n.node_id,
            kind=n.kind.name.lower(),
            x=n.pos.x, y=n.pos.y,
            access_x=n.access.x, access_y=n.access.y,
            typed_prefix=n.typed_prefix,
            target_word=n.target_word,
            next_word=n.next_word,
            remaining_yield=n.remaining_yield,
            max_yield=n.max_yield,
            path_length=n.path_length,
        )
        for n in snapshot.nodes
    ]
    return GameStateResponse(
        tick=snapshot.tick,
        island=snapshot.island,
        width=snapshot.width,
        height=snapshot.height,
        player=serialize_player(snapshot.player),
        nodes=nodes,
        events=[_serialize_event(ev) for ev in manager.event_log.since_tick(since_tick)],
    )


@router.get("/events", response_model=list[EventSchema])
def get_events(
    count: int = Query(20, ge=1, le=200),
    manager: GameManager = Depends(get_game_manager),
) -> list[EventSchema]:
    return [_serialize_event(ev) for ev in manager.event_log.latest(count)]


@router.get("/save", response_model=SaveResponse)
def get_save(
    manager: GameManager = Depends(get_game_manager),
) -> SaveResponse:
    save = manager.save_snapshot()
    stats = save.stats
    return SaveResponse(
        version=save.version,
        wood=save.wood,
        copper=save.copper,
        upgrade_levels=dict(save.upgrade_levels),
        stats=StatsSchema(
            keystrokes=stats.keystrokes,
            characters_typed=stats.characters_typed,
            words_started=stats.words_started,
            words_completed=stats.words_completed,
            mistakes_made=stats.mistakes_made,
            resources_harvested=dict(stats.resources_harvested),
            fastest_word_time=stats.fastest_word_time,
            average_wpm=stats.average_wpm,
            accuracy=stats.accuracy,
            play_time_seconds=stats.play_time_seconds,
        ),
    )
