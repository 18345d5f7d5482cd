"""HarvestOrchestrator — the per-keystroke state machine.

One printable character is matched against every live node in a single
pass. Each node advances or resets on its own; a node that starts a word
rebuilds the obstacle grid around the other nodes and plans a route to its
access point, and every accepted character moves the player one step along
that route. Harvests, retirements and refills run after the pass, followed
by word rotation for every completed word.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol

from keycrafter.core.enums import EventCategory, ResourceKind
from keycrafter.core.resource_nodes import display_name
from keycrafter.utils.event_log import GameEvent

if TYPE_CHECKING:
    from keycrafter.config import GameConfig
    from keycrafter.core.game_state import GameState
    from keycrafter.core.glyphs import GlyphCatalog
    from keycrafter.core.models import Coordinate
    from keycrafter.core.resource_nodes import ResourceNode
    from keycrafter.systems.generator import NodeGenerator
    from keycrafter.systems.words import WordSupplier
    from keycrafter.utils.event_log import EventLog

logger = logging.getLogger(__name__)


class MultiplierProvider(Protocol):
    def multiplier(self, kind: ResourceKind) -> float: ...


@dataclass(slots=True)
class KeystrokeResult:
    """What one keystroke did. Lists hold node ids in processing order."""

    char: str
    advanced: list[int] = field(default_factory=list)
    reset: list[int] = field(default_factory=list)
    completed: list[int] = field(default_factory=list)
    harvested: list[int] = field(default_factory=list)
    retired: list[int] = field(default_factory=list)
    spawned: list[int] = field(default_factory=list)
    unreachable: list[int] = field(default_factory=list)
    steps: int = 0
    refilled: bool = False

    @property
    def accepted(self) -> bool:
        return bool(self.advanced)


class HarvestOrchestrator:
    """Single writer of the GameState: every mutation happens in `handle_key`."""

    __slots__ = (
        "_config",
        "_state",
        "_catalog",
        "_generator",
        "_words",
        "_multipliers",
        "_event_log",
        "_clock",
    )

    def __init__(
        self,
        config: GameConfig,
        state: GameState,
        catalog: GlyphCatalog,
        generator: NodeGenerator,
        words: WordSupplier,
        multipliers: MultiplierProvider,
        event_log: EventLog | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config
        self._state = state
        self._catalog = catalog
        self._generator = generator
        self._words = words
        self._multipliers = multipliers
        self._event_log = event_log
        self._clock = clock

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def catalog(self) -> GlyphCatalog:
        return self._catalog

    def access_point(self, node: ResourceNode) -> Coordinate:
        return self._catalog.access_point(node.kind, node.pos)

    # ------------------------------------------------------------------
    # Keystroke handling
    # ------------------------------------------------------------------

    def handle_key(self, ch: str) -> KeystrokeResult:
        """Apply one character to every live node, then resolve harvests."""
        state = self._state
        result = KeystrokeResult(char=ch)
        if len(ch) != 1 or not ch.isprintable():
            return result

        state.tick += 1
        state.stats.keystrokes += 1
        now = self._clock()
        to_harvest: list[int] = []

        for node in state.nodes:
            if not node.is_started:
                if node.matches(ch):
                    self._start_word(node, ch, now, result, to_harvest)
            elif node.matches(ch):
                self._continue_word(node, ch, now, result, to_harvest)
            else:
                self._abandon(node, ch, result)

        if result.advanced:
            state.stats.characters_typed += 1

        for node_id in to_harvest:
            self._harvest(node_id, result)

        for node_id in result.completed:
            self.rotate_word(node_id)

        return result

    def _start_word(
        self,
        node: ResourceNode,
        ch: str,
        now: float,
        result: KeystrokeResult,
        to_harvest: list[int],
    ) -> None:
        blocked = self.rebuild_grid(node)
        target = self.access_point(node)
        path = self._state.grid.find_path(self._state.player.pos, target)
        if path is None:
            result.unreachable.append(node.node_id)
            self._emit(EventCategory.PATH_NOT_FOUND,
                       f"No path to '{node.target_word}' at {target}", node.node_id)
            logger.debug("Node %d: no path from %s to %s (%d blocked)",
                         node.node_id, self._state.player.pos, target, blocked)
        else:
            logger.debug("Node %d: started '%s', %d steps to %s",
                         node.node_id, node.target_word, len(path), target)

        node.assign_path(path)
        node.accept(ch, now)
        self._state.stats.words_started += 1
        result.advanced.append(node.node_id)
        self._emit(EventCategory.WORD_STARTED, f"Started '{node.target_word}'", node.node_id)
        self._step(node, result)

        if node.is_complete:
            self._complete_word(node, now, result, to_harvest)

    def _continue_word(
        self,
        node: ResourceNode,
        ch: str,
        now: float,
        result: KeystrokeResult,
        to_harvest: list[int],
    ) -> None:
        node.accept(ch, now)
        result.advanced.append(node.node_id)
        self._step(node, result)
        if node.is_complete:
            self._complete_word(node, now, result, to_harvest)

    def _complete_word(
        self,
        node: ResourceNode,
        now: float,
        result: KeystrokeResult,
        to_harvest: list[int],
    ) -> None:
        state = self._state
        result.completed.append(node.node_id)
        state.stats.record_word(node.target_word, node.word_started_at, now)
        self._emit(EventCategory.WORD_COMPLETED, f"Completed '{node.target_word}'", node.node_id)

        target = self.access_point(node)
        distance = state.player.pos.manhattan(target)
        if distance <= self._config.harvest_range:
            to_harvest.append(node.node_id)
            return

        # Out of range: re-plan from where the player stands and catch up one step.
        logger.debug("Node %d: word done but %d away, re-planning", node.node_id, distance)
        node.assigned_path.clear()
        self.rebuild_grid(node)
        path = state.grid.find_path(state.player.pos, target)
        if path is None:
            result.unreachable.append(node.node_id)
        node.assign_path(path)
        self._step(node, result)

    def _abandon(self, node: ResourceNode, ch: str, result: KeystrokeResult) -> None:
        expected = node.expected_char
        node.reset()
        self._state.stats.mistakes_made += 1
        result.reset.append(node.node_id)
        self._emit(EventCategory.WRONG_LETTER,
                   f"Expected '{expected}', got '{ch}'; '{node.target_word}' cleared", node.node_id)

    def _step(self, node: ResourceNode, result: KeystrokeResult) -> bool:
        """Consume one step of the node's path; False when there is none."""
        pos = node.pop_step()
        if pos is None:
            return False
        self._state.move_player(pos)
        result.steps += 1
        return True

    # ------------------------------------------------------------------
    # Grid
    # ------------------------------------------------------------------

    def rebuild_grid(self, target: ResourceNode) -> int:
        """Block every other node's footprint, keeping *target*'s access point open.

        Returns the number of blocked cells.
        """
        grid = self._state.grid
        grid.clear()
        keep_open = self.access_point(target)
        for other in self._state.nodes:
            if other.node_id == target.node_id:
                continue
            fp = self._catalog.footprint(other.kind)
            grid.block_rect(other.pos.x, other.pos.y, fp.width, fp.height, keep_open=keep_open)
        return len(grid)

    # ------------------------------------------------------------------
    # Harvest resolution
    # ------------------------------------------------------------------

    def _harvest(self, node_id: int, result: KeystrokeResult) -> None:
        state = self._state
        node = state.find_node(node_id)
        if node is None:
            return

        amount = max(1, math.floor(self._multipliers.multiplier(node.kind)))
        state.player.add(node.kind, amount)
        state.stats.record_harvest(node.kind, amount)
        remaining = node.consume_yield()
        result.harvested.append(node_id)
        self._emit(EventCategory.HARVEST, f"+{amount} {display_name(node.kind)}", node_id)
        logger.info("Harvested %d %s from node %d (%d/%d left)",
                    amount, display_name(node.kind), node_id, remaining, node.max_yield)

        if remaining <= 0:
            self._retire(node, result)

        if not state.is_full and self._generator.placement.should_spawn(state.island, state.next_draw()):
            spawned = self._generator.spawn(state)
            if spawned is not None:
                result.spawned.append(spawned.node_id)
                self._emit(EventCategory.NODE_SPAWNED,
                           f"New {display_name(spawned.kind)} node at {spawned.pos}", spawned.node_id)

    def _retire(self, node: ResourceNode, result: KeystrokeResult) -> None:
        state = self._state
        state.remove_node(node.node_id)
        result.retired.append(node.node_id)
        self._emit(EventCategory.NODE_DEPLETED, f"{display_name(node.kind)} node depleted", node.node_id)

        if not state.nodes:
            placed = self._generator.populate(state, state.island.max_nodes)
            result.refilled = True
            result.spawned.extend(n.node_id for n in state.nodes)
            self._emit(EventCategory.ISLAND_CLEARED, f"CLEAR! Respawned {placed} nodes")
            logger.info("Island cleared — respawned %d/%d nodes", placed, state.island.max_nodes)

    def rotate_word(self, node_id: int) -> bool:
        """Promote the node's next word. No-op (False) if the node is gone."""
        node = self._state.find_node(node_id)
        if node is None:
            return False
        node.rotate_word(self._words.word_for(node.kind, self._state.next_draw()))
        return True

    # ------------------------------------------------------------------

    def _emit(self, category: EventCategory, message: str, *node_ids: int) -> None:
        if self._event_log is None:
            return
        self._event_log.append(GameEvent(
            tick=self._state.tick,
            category=category,
            message=message,
            node_ids=tuple(node_ids),
        ))
