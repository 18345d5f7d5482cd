"""Immutable snapshots of the game state for the render and persistence consumers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from keycrafter.core.enums import ResourceKind
from keycrafter.core.game_state import GameState
from keycrafter.core.glyphs import GlyphCatalog
from keycrafter.core.models import Coordinate, Player
from keycrafter.core.stats import GameStats

SAVE_VERSION = 1


@dataclass(frozen=True, slots=True)
class NodeView:
    """Read-only view of one resource node."""

    node_id: int
    kind: ResourceKind
    pos: Coordinate
    access: Coordinate
    typed_prefix: str
    target_word: str
    next_word: str
    remaining_yield: int
    max_yield: int
    path_length: int


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only view of the game, safe to hand to another thread."""

    tick: int
    seed: int
    island: str
    width: int
    height: int
    player: Player
    nodes: tuple[NodeView, ...]

    @classmethod
    def from_state(cls, state: GameState, catalog: GlyphCatalog) -> Snapshot:
        nodes = tuple(
            NodeView(
                node_id=n.node_id,
                kind=n.kind,
                pos=n.pos,
                access=catalog.access_point(n.kind, n.pos),
                typed_prefix=n.typed_prefix,
                target_word=n.target_word,
                next_word=n.next_word,
                remaining_yield=n.remaining_yield,
                max_yield=n.max_yield,
                path_length=len(n.assigned_path),
            )
            for n in state.nodes
        )
        return cls(
            tick=state.tick,
            seed=state.seed,
            island=state.island.name,
            width=state.grid.width,
            height=state.grid.height,
            player=state.player.copy(),
            nodes=nodes,
        )


@dataclass(frozen=True, slots=True)
class SaveSnapshot:
    """Totals and counters for an external save/load layer. No I/O here."""

    version: int
    wood: int
    copper: int
    upgrade_levels: Mapping[str, int]
    stats: GameStats

    @classmethod
    def from_state(cls, state: GameState, upgrade_levels: Mapping[str, int]) -> SaveSnapshot:
        return cls(
            version=SAVE_VERSION,
            wood=state.player.wood,
            copper=state.player.copper,
            upgrade_levels=dict(upgrade_levels),
            stats=state.stats.copy(),
        )
