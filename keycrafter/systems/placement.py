"""Spawn placement: rejection sampling inside the elliptical island.

A candidate is accepted when it lies well inside the island (away from the
coastline band) and is separated from every existing node. Placement never
fails loudly: after the attempt cap it returns None and the caller skips
spawning for this cycle.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Sequence

from keycrafter.core.enums import Domain, ResourceKind
from keycrafter.core.models import Coordinate

if TYPE_CHECKING:
    from keycrafter.config import GameConfig
    from keycrafter.core.islands import Island
    from keycrafter.systems.rng import DeterministicRNG

logger = logging.getLogger(__name__)


def island_radii(width: int, height: int) -> tuple[int, int]:
    """Land radii of the island drawn on a ``width x height`` area."""
    return width * 3 // 5, height * 3 // 5


def island_distance(pos: Coordinate, width: int, height: int) -> float:
    """Normalised elliptical distance from the play-area centre (1.0 = shore)."""
    rx, ry = island_radii(width, height)
    dx = (pos.x - width // 2) / rx
    dy = (pos.y - height // 2) / ry
    return math.sqrt(dx * dx + dy * dy)


def is_inside_island(pos: Coordinate, width: int, height: int, limit: float = 0.9) -> bool:
    return island_distance(pos, width, height) <= limit


def is_separated(pos: Coordinate, existing: Sequence[Coordinate], min_dx: int = 6, min_dy: int = 4) -> bool:
    """True when *pos* is far enough on x OR on y from every existing node."""
    return all(
        abs(pos.x - other.x) > min_dx or abs(pos.y - other.y) > min_dy
        for other in existing
    )


class SpawnPlacement:
    """Finds spawn positions and picks resource kinds for an island."""

    __slots__ = ("_config", "_rng")

    def __init__(self, config: GameConfig, rng: DeterministicRNG) -> None:
        self._config = config
        self._rng = rng

    def sample_position(
        self,
        existing: Sequence[Coordinate],
        width: int,
        height: int,
        draw: int = 0,
    ) -> Coordinate | None:
        """Bounded rejection sampling; None if every attempt was rejected."""
        cfg = self._config
        margin = cfg.spawn_margin
        if width - margin <= margin or height - margin <= margin:
            return None

        for attempt in range(cfg.spawn_max_attempts):
            x = self._rng.next_int(Domain.SPAWN, draw, attempt * 2, margin, width - margin - 1)
            y = self._rng.next_int(Domain.SPAWN, draw, attempt * 2 + 1, margin, height - margin - 1)
            pos = Coordinate(x, y)
            if not is_inside_island(pos, width, height, cfg.spawn_containment):
                continue
            if is_separated(pos, existing, cfg.min_separation_x, cfg.min_separation_y):
                return pos

        logger.debug("Placement exhausted after %d attempts (%d existing nodes)",
                     cfg.spawn_max_attempts, len(existing))
        return None

    def pick_kind(self, island: Island, draw: int = 0) -> ResourceKind:
        """Weighted draw over the island's resource pools."""
        total = island.total_weight
        if total <= 0:
            return island.pools[0].kind
        value = self._rng.next_int(Domain.KIND, draw, 0, 0, total - 1)
        for pool in island.pools:
            if value < pool.weight:
                return pool.kind
            value -= pool.weight
        return island.pools[0].kind

    def should_spawn(self, island: Island, draw: int = 0) -> bool:
        return self._rng.next_bool(Domain.SPAWN_CHANCE, draw, 0, island.spawn_chance)
