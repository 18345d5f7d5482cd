"""Game construction: wires config, state, systems and the orchestrator together."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from keycrafter.config import GameConfig
from keycrafter.core.enums import EventCategory
from keycrafter.core.game_state import GameState
from keycrafter.core.glyphs import GlyphCatalog
from keycrafter.core.grid import ObstacleGrid
from keycrafter.core.islands import get_island
from keycrafter.core.models import Coordinate, Player
from keycrafter.core.snapshot import SaveSnapshot, Snapshot
from keycrafter.engine.harvest import HarvestOrchestrator, KeystrokeResult
from keycrafter.systems.generator import NodeGenerator
from keycrafter.systems.placement import SpawnPlacement
from keycrafter.systems.rng import DeterministicRNG
from keycrafter.systems.upgrades import UpgradeManager
from keycrafter.systems.words import WordSupplier
from keycrafter.utils.event_log import EventLog, GameEvent

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Game:
    """Everything one session owns. All writes go through `orchestrator`."""

    config: GameConfig
    state: GameState
    catalog: GlyphCatalog
    orchestrator: HarvestOrchestrator
    generator: NodeGenerator
    upgrades: UpgradeManager
    event_log: EventLog
    clock: Callable[[], float] = time.monotonic
    last_update: float = 0.0

    def press(self, ch: str) -> KeystrokeResult:
        return self.orchestrator.handle_key(ch)

    def type_text(self, text: str) -> list[KeystrokeResult]:
        return [self.orchestrator.handle_key(ch) for ch in text]

    def purchase_upgrade(self, index: int) -> int | None:
        cost = self.upgrades.purchase(index, self.state.player)
        if cost is not None:
            upgrade = self.upgrades.upgrades[index]
            self.event_log.append(GameEvent(
                tick=self.state.tick,
                category=EventCategory.UPGRADE,
                message=f"{upgrade.name} -> level {upgrade.level}",
            ))
        return cost

    def update(self, now: float | None = None) -> float:
        """Credit the time since the last update to play time. Returns the seconds added."""
        if now is None:
            now = self.clock()
        elapsed = max(0.0, now - self.last_update)
        self.state.stats.play_time_seconds += elapsed
        self.last_update = now
        return elapsed

    def snapshot(self) -> Snapshot:
        return Snapshot.from_state(self.state, self.catalog)

    def save_snapshot(self) -> SaveSnapshot:
        return SaveSnapshot.from_state(self.state, self.upgrades.levels())


def build_game(
    config: GameConfig | None = None,
    words: WordSupplier | None = None,
    catalog: GlyphCatalog | None = None,
    clock: Callable[[], float] = time.monotonic,
    populate: bool = True,
) -> Game:
    """Build a fresh session. The island starts half full unless *populate* is False."""
    cfg = config or GameConfig()
    rng = DeterministicRNG(cfg.world_seed)
    island = get_island(cfg.island_index)

    start = Coordinate(cfg.player_start_x, cfg.player_start_y)
    grid = ObstacleGrid(cfg.grid_width, cfg.grid_height)
    if not grid.in_bounds(start):
        raise ValueError(f"Player start {start} is outside the {cfg.grid_width}x{cfg.grid_height} grid")

    state = GameState(seed=cfg.world_seed, grid=grid, player=Player(pos=start), island=island)
    catalog = catalog or GlyphCatalog()
    words = words or WordSupplier(rng)
    generator = NodeGenerator(cfg, rng, SpawnPlacement(cfg, rng), words)
    upgrades = UpgradeManager()
    event_log = EventLog(cfg.event_log_capacity)

    orchestrator = HarvestOrchestrator(
        config=cfg,
        state=state,
        catalog=catalog,
        generator=generator,
        words=words,
        multipliers=upgrades,
        event_log=event_log,
        clock=clock,
    )

    if populate:
        placed = generator.populate(state, island.initial_nodes)
        logger.info("Game ready on '%s' (seed=%d): %d nodes, player at %s",
                    island.name, cfg.world_seed, placed, start)

    return Game(
        config=cfg,
        state=state,
        catalog=catalog,
        orchestrator=orchestrator,
        generator=generator,
        upgrades=upgrades,
        event_log=event_log,
        clock=clock,
        last_update=clock(),
    )
