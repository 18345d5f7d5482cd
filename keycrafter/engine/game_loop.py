"""GameLoop — the cooperative, tick-driven outer loop.

Each iteration:
  1. Poll — wait a bounded time for at most one input event
  2. Dispatch — hand a printable character to the HarvestOrchestrator
  3. Update — periodic housekeeping (play-time accounting)

Everything runs on one thread; a keystroke is fully resolved before the next
one is read.
"""

from __future__ import annotations

import logging
import queue
from typing import TYPE_CHECKING, Callable, Protocol

if TYPE_CHECKING:
    from keycrafter.engine.factory import Game
    from keycrafter.engine.harvest import KeystrokeResult

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset({"\x1b"})  # Esc


class KeySource(Protocol):
    """Anything that can hand out one key with a bounded wait."""

    @property
    def closed(self) -> bool: ...

    def poll(self, timeout: float) -> str | None: ...


class QueueKeySource:
    """Keys pushed from another thread (terminal reader, API handler)."""

    __slots__ = ("_queue", "_closed")

    def __init__(self) -> None:
        self._queue: queue.Queue[str] = queue.Queue()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed and self._queue.empty()

    def push(self, keys: str) -> None:
        for ch in keys:
            self._queue.put(ch)

    def close(self) -> None:
        self._closed = True

    def poll(self, timeout: float) -> str | None:
        try:
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None


class ScriptedKeySource:
    """Replays a fixed string of keys, one per poll."""

    __slots__ = ("_keys", "_index")

    def __init__(self, keys: str) -> None:
        self._keys = keys
        self._index = 0

    @property
    def closed(self) -> bool:
        return self._index >= len(self._keys)

    def poll(self, timeout: float) -> str | None:
        if self.closed:
            return None
        ch = self._keys[self._index]
        self._index += 1
        return ch


class AutoTypist:
    """Types the word of the closest node, one character per poll."""

    __slots__ = ("_game", "_max_words", "_words_done", "_pending")

    def __init__(self, game: Game, max_words: int = 10) -> None:
        self._game = game
        self._max_words = max_words
        self._words_done = 0
        self._pending = ""

    @property
    def closed(self) -> bool:
        return not self._pending and (self._words_done >= self._max_words or not self._game.state.nodes)

    def poll(self, timeout: float) -> str | None:
        if not self._pending:
            if self.closed:
                return None
            self._pending = self._next_word()
            self._words_done += 1
        ch, self._pending = self._pending[0], self._pending[1:]
        return ch

    def _next_word(self) -> str:
        game = self._game
        player = game.state.player.pos
        node = min(
            game.state.nodes,
            key=lambda n: player.manhattan(game.orchestrator.access_point(n)),
        )
        return node.target_word[len(node.typed_prefix):]


class GameLoop:
    """Drives a Game from a KeySource until the source closes or Esc is pressed."""

    __slots__ = ("_game", "_source", "_clock", "_stop_requested", "_on_key")

    def __init__(
        self,
        game: Game,
        source: KeySource,
        clock: Callable[[], float] | None = None,
        on_key: Callable[[KeystrokeResult], None] | None = None,
    ) -> None:
        self._game = game
        self._source = source
        self._clock = clock if clock is not None else game.clock
        self._stop_requested = False
        self._on_key = on_key

    @property
    def game(self) -> Game:
        return self._game

    def stop(self) -> None:
        self._stop_requested = True

    def tick_once(self) -> bool:
        """Poll once, dispatch, update. Returns False when the loop should end."""
        if self._stop_requested:
            return False

        ch = self._source.poll(self._game.config.poll_interval_seconds)
        if ch is not None:
            if ch in QUIT_KEYS:
                logger.info("Quit requested at tick %d.", self._game.state.tick)
                return False
            result = self._game.press(ch)
            if self._on_key is not None:
                self._on_key(result)
        elif self._source.closed:
            return False

        self.update()
        return True

    def update(self) -> None:
        """Housekeeping, at most once per update interval."""
        now = self._clock()
        if now - self._game.last_update >= self._game.config.update_interval_seconds:
            self._game.update(now)

    def run(self, max_ticks: int | None = None) -> int:
        """Run until the source is exhausted, Esc, `stop()` or *max_ticks*. Returns ticks run."""
        state = self._game.state
        logger.info("=== Game started (seed=%d) ===", state.seed)
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            if not self.tick_once():
                break
            ticks += 1
        logger.info("=== Game finished after %d keystrokes: %d wood, %d copper ===",
                    state.stats.keystrokes, state.player.wood, state.player.copper)
        return ticks
