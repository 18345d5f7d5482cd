"""Obstacle grid: a bounded rectangle with a dynamic set of blocked cells."""

from __future__ import annotations

from typing import Iterable

from keycrafter.core.models import Coordinate
from keycrafter.core.pathfinding import Pathfinder


class ObstacleGrid:
    """Blocked-cell set over a fixed ``width x height`` play area.

    Cleared and repopulated once per harvest attempt; only `add_obstacle`,
    `block_rect` and `clear` mutate it.
    """

    __slots__ = ("width", "height", "_obstacles")

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._obstacles: set[Coordinate] = set()

    # -- access --

    def in_bounds(self, pos: Coordinate) -> bool:
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_walkable(self, pos: Coordinate) -> bool:
        return pos not in self._obstacles

    @property
    def obstacles(self) -> frozenset[Coordinate]:
        return frozenset(self._obstacles)

    def __len__(self) -> int:
        return len(self._obstacles)

    def __contains__(self, pos: Coordinate) -> bool:
        return pos in self._obstacles

    # -- mutation --

    def add_obstacle(self, pos: Coordinate) -> None:
        self._obstacles.add(pos)

    def add_obstacles(self, cells: Iterable[Coordinate]) -> None:
        self._obstacles.update(cells)

    def block_rect(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        keep_open: Coordinate | None = None,
    ) -> int:
        """Block every cell of the rectangle except *keep_open*. Returns cells added."""
        added = 0
        for dy in range(height):
            for dx in range(width):
                pos = Coordinate(x + dx, y + dy)
                if pos == keep_open:
                    continue
                self._obstacles.add(pos)
                added += 1
        return added

    def clear(self) -> None:
        self._obstacles.clear()

    # -- search --

    def find_path(self, start: Coordinate, goal: Coordinate) -> list[Coordinate] | None:
        """Shortest path from *start* to *goal* (see `Pathfinder.find_path`)."""
        return Pathfinder(self).find_path(start, goal)

    def copy(self) -> ObstacleGrid:
        new = ObstacleGrid.__new__(ObstacleGrid)
        new.width = self.width
        new.height = self.height
        new._obstacles = set(self._obstacles)
        return new
