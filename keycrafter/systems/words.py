"""Word supplier: random words per difficulty tier."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from keycrafter.core.enums import Domain, ResourceKind, WordDifficulty
from keycrafter.core.resource_nodes import difficulty_for

if TYPE_CHECKING:
    from keycrafter.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)

# Used when a pool is empty
FALLBACK_WORDS: dict[WordDifficulty, str] = {
    WordDifficulty.EASY: "tree",
    WordDifficulty.MEDIUM: "copper",
    WordDifficulty.HARD: "program",
}

DEFAULT_WORDS: dict[WordDifficulty, tuple[str, ...]] = {
    WordDifficulty.EASY: (
        "oak", "elm", "ash", "fir", "log", "axe", "saw", "cut", "bark", "twig",
        "leaf", "root", "seed", "moss", "pine", "wood", "fern", "sap", "hew", "stem",
    ),
    WordDifficulty.MEDIUM: (
        "copper", "anvil", "smelt", "forge", "ingot", "metal", "chisel", "hammer",
        "quarry", "mines", "nugget", "bronze", "tunnel", "rocks", "pebble", "carve",
    ),
    WordDifficulty.HARD: (
        "program", "crafting", "keyboard", "workbench", "pickaxe", "smeltery",
        "lumberjack", "prospector", "excavate", "blacksmith",
    ),
}


def parse_word_lines(text: str) -> tuple[str, ...]:
    """One word per line; surrounding whitespace and blank lines are dropped."""
    return tuple(word for word in (line.strip() for line in text.splitlines()) if word)


class WordSupplier:
    """Draws words from pre-loaded pools using the deterministic RNG."""

    __slots__ = ("_rng", "_pools")

    def __init__(
        self,
        rng: DeterministicRNG,
        pools: dict[WordDifficulty, Iterable[str]] | None = None,
    ) -> None:
        self._rng = rng
        source = DEFAULT_WORDS if pools is None else pools
        self._pools: dict[WordDifficulty, tuple[str, ...]] = {
            difficulty: tuple(source.get(difficulty, ())) for difficulty in WordDifficulty
        }

    def load_pool(self, difficulty: WordDifficulty, text: str) -> int:
        """Replace a pool from newline-separated text. Returns the word count."""
        words = parse_word_lines(text)
        self._pools[difficulty] = words
        logger.info("Loaded %d %s words", len(words), difficulty.name.lower())
        return len(words)

    def pool(self, difficulty: WordDifficulty) -> tuple[str, ...]:
        return self._pools[difficulty]

    def random_word(self, difficulty: WordDifficulty, draw: int = 0) -> str:
        words = self._pools[difficulty]
        if not words:
            return FALLBACK_WORDS[difficulty]
        return self._rng.choice(Domain.WORDS, draw, words)

    def word_for(self, kind: ResourceKind, draw: int = 0) -> str:
        return self.random_word(difficulty_for(kind), draw)
