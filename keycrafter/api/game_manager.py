"""GameManager — singleton wrapper that owns the Game for the API.

Request handlers run on a thread pool, so every write to the game goes
through one lock (single-writer discipline): a batch of keystrokes is fully
resolved before another request may touch the state. Readers get an
atomically-swapped immutable Snapshot and never take the write lock.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from typing import TYPE_CHECKING

from keycrafter.engine.factory import Game, build_game

if TYPE_CHECKING:
    from keycrafter.config import GameConfig
    from keycrafter.core.snapshot import SaveSnapshot, Snapshot
    from keycrafter.engine.harvest import KeystrokeResult
    from keycrafter.systems.upgrades import Upgrade
    from keycrafter.utils.event_log import EventLog

logger = logging.getLogger(__name__)


class GameManager:
    """Thread-safe access to one game session."""

    def __init__(self, config: GameConfig) -> None:
        self._config = config
        self._write_lock = threading.Lock()
        self._snapshot_lock = threading.Lock()
        self._game: Game = build_game(config)
        self._latest_snapshot: Snapshot = self._game.snapshot()

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def event_log(self) -> EventLog:
        return self._game.event_log

    # -- reads --

    def get_snapshot(self) -> Snapshot:
        with self._snapshot_lock:
            return self._latest_snapshot

    def save_snapshot(self) -> SaveSnapshot:
        with self._write_lock:
            self._game.update()
            return self._game.save_snapshot()

    def upgrades(self) -> list[tuple[int, Upgrade, int]]:
        """``(index, upgrade, next_cost)`` for every upgrade."""
        with self._write_lock:
            mgr = self._game.upgrades
            return [(i, replace(u), mgr.next_cost(i) or 0) for i, u in enumerate(mgr.upgrades)]

    # -- writes --

    def press(self, keys: str) -> list[KeystrokeResult]:
        with self._write_lock:
            results = self._game.type_text(keys)
            self._game.update()
            self._publish()
            tick = self._game.state.tick
        logger.debug("Handled %d keys, tick now %d", len(keys), tick)
        return results

    def purchase_upgrade(self, index: int) -> int | None:
        with self._write_lock:
            cost = self._game.purchase_upgrade(index)
            self._publish()
        return cost

    def reset(self) -> None:
        """Throw the session away and start a fresh one from the same config."""
        with self._write_lock:
            self._game = build_game(self._config)
            self._publish()
        logger.info("GameManager reset.")

    def _publish(self) -> None:
        snap = self._game.snapshot()
        with self._snapshot_lock:
            self._latest_snapshot = snap
