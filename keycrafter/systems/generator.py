"""Node generator: places and creates resource nodes on the island."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from keycrafter.core.enums import Domain, ResourceKind
from keycrafter.core.models import Coordinate
from keycrafter.core.resource_nodes import RESOURCE_KINDS, ResourceNode

if TYPE_CHECKING:
    from keycrafter.config import GameConfig
    from keycrafter.core.game_state import GameState
    from keycrafter.systems.placement import SpawnPlacement
    from keycrafter.systems.rng import DeterministicRNG
    from keycrafter.systems.words import WordSupplier

logger = logging.getLogger(__name__)


class NodeGenerator:
    """Combines spawn placement, kind selection, yields and words into new nodes."""

    __slots__ = ("_config", "_rng", "_placement", "_words")

    def __init__(
        self,
        config: GameConfig,
        rng: DeterministicRNG,
        placement: SpawnPlacement,
        words: WordSupplier,
    ) -> None:
        self._config = config
        self._rng = rng
        self._placement = placement
        self._words = words

    @property
    def placement(self) -> SpawnPlacement:
        return self._placement

    def create(self, state: GameState, pos: Coordinate, kind: ResourceKind | None = None) -> ResourceNode:
        """Build a node at *pos* with fresh words and a random yield."""
        draw = state.next_draw()
        if kind is None:
            kind = self._placement.pick_kind(state.island, draw)
        kdef = RESOURCE_KINDS[kind]
        max_yield = self._rng.next_int(Domain.YIELD, draw, 0, kdef.min_yield, kdef.max_yield)
        return ResourceNode(
            node_id=state.allocate_node_id(),
            kind=kind,
            pos=pos,
            target_word=self._words.word_for(kind, state.next_draw()),
            next_word=self._words.word_for(kind, state.next_draw()),
            remaining_yield=max_yield,
            max_yield=max_yield,
        )

    def spawn(self, state: GameState) -> ResourceNode | None:
        """Place one node among the live ones. None when placement is exhausted."""
        pos = self._placement.sample_position(
            state.node_positions(), state.grid.width, state.grid.height, state.next_draw(),
        )
        if pos is None:
            return None
        node = self.create(state, pos)
        state.add_node(node)
        logger.debug("Spawned %s node %d at %s (yield %d)",
                     node.kind.name, node.node_id, node.pos, node.max_yield)
        return node

    def populate(self, state: GameState, count: int) -> int:
        """Try to spawn *count* nodes; returns how many were placed."""
        placed = 0
        for _ in range(count):
            if self.spawn(state) is not None:
                placed += 1
        if placed < count:
            logger.debug("Placed %d of %d requested nodes", placed, count)
        return placed
