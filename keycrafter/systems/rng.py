"""Domain-separated deterministic RNG using xxhash.

Every random decision in a session is a pure function of
WorldSeed + Domain + Key + Slot, where Key is a per-state draw counter.
Replaying the same keystrokes with the same seed reproduces the game.
"""

from __future__ import annotations

import struct
from typing import Sequence, TypeVar

import xxhash

from keycrafter.core.enums import Domain

T = TypeVar("T")


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, slot), so there is
    no hidden state to keep in sync across threads or restarts.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, slot: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, slot)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, slot: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, slot) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, slot: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, slot)
        return low + int(f * (high - low + 1))

    def next_bool(self, domain: Domain, key: int, slot: int = 0, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        return self.next_float(domain, key, slot) < probability

    def choice(self, domain: Domain, key: int, items: Sequence[T], slot: int = 0) -> T:
        if not items:
            raise ValueError("choice() from an empty sequence")
        return items[self.next_int(domain, key, slot, 0, len(items) - 1)]
