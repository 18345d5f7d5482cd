"""Engine systems: RNG, spawn placement, node generation, words, upgrades."""

from keycrafter.systems.rng import DeterministicRNG
from keycrafter.systems.placement import SpawnPlacement
from keycrafter.systems.words import WordSupplier
from keycrafter.systems.upgrades import UpgradeManager
from keycrafter.systems.generator import NodeGenerator

__all__ = ["DeterministicRNG", "NodeGenerator", "SpawnPlacement", "UpgradeManager", "WordSupplier"]
