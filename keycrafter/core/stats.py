"""Typing statistics accumulated over a session."""

from __future__ import annotations

from dataclasses import dataclass, field

from keycrafter.core.enums import ResourceKind
from keycrafter.core.resource_nodes import display_name


@dataclass(slots=True)
class GameStats:
    """Counters exposed to the persistence consumer."""

    keystrokes: int = 0
    characters_typed: int = 0       # keystrokes that advanced at least one node
    words_started: int = 0
    words_completed: int = 0
    mistakes_made: int = 0          # active attempts abandoned on a wrong letter
    resources_harvested: dict[str, int] = field(default_factory=dict)
    fastest_word_time: float | None = None
    total_word_seconds: float = 0.0
    completed_word_chars: int = 0
    play_time_seconds: float = 0.0

    def record_word(self, word: str, started_at: float | None, now: float) -> None:
        self.words_completed += 1
        if started_at is None:
            return
        elapsed = max(0.0, now - started_at)
        self.total_word_seconds += elapsed
        self.completed_word_chars += len(word)
        if elapsed > 0 and (self.fastest_word_time is None or elapsed < self.fastest_word_time):
            self.fastest_word_time = elapsed

    def record_harvest(self, kind: ResourceKind, amount: int) -> None:
        key = display_name(kind)
        self.resources_harvested[key] = self.resources_harvested.get(key, 0) + amount

    @property
    def average_wpm(self) -> float:
        # Standard five characters per word
        if self.total_word_seconds <= 0:
            return 0.0
        return (self.completed_word_chars / 5.0) / (self.total_word_seconds / 60.0)

    @property
    def accuracy(self) -> float:
        """Percentage of accepted characters not offset by a mistake."""
        if self.characters_typed == 0:
            return 100.0
        correct = max(0, self.characters_typed - self.mistakes_made)
        return correct / self.characters_typed * 100.0

    def copy(self) -> GameStats:
        return GameStats(
            keystrokes=self.keystrokes,
            characters_typed=self.characters_typed,
            words_started=self.words_started,
            words_completed=self.words_completed,
            mistakes_made=self.mistakes_made,
            resources_harvested=dict(self.resources_harvested),
            fastest_word_time=self.fastest_word_time,
            total_word_seconds=self.total_word_seconds,
            completed_word_chars=self.completed_word_chars,
            play_time_seconds=self.play_time_seconds,
        )
