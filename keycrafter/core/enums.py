"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class ResourceKind(IntEnum):
    """Harvestable node kinds. Kind-specific data lives in lookup tables."""

    WOOD = 0
    COPPER = 1


@unique
class WordDifficulty(IntEnum):
    """Word pool tiers, mapped 1:1 from resource kind."""

    EASY = 0    # 3-4 letters
    MEDIUM = 1  # 5-6 letters
    HARD = 2    # 7+ letters


@unique
class Domain(IntEnum):
    """RNG domains for deterministic randomness isolation."""

    SPAWN = 0
    KIND = 1
    YIELD = 2
    WORDS = 3
    SPAWN_CHANCE = 4


@unique
class EventCategory(IntEnum):
    """Categories for the game event feed."""

    WORD_STARTED = 0
    WORD_COMPLETED = 1
    WRONG_LETTER = 2
    PATH_NOT_FOUND = 3
    HARVEST = 4
    NODE_DEPLETED = 5
    ISLAND_CLEARED = 6
    NODE_SPAWNED = 7
    UPGRADE = 8
