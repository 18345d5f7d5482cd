"""A* pathfinding over the obstacle grid.

Provides a `Pathfinder` class that computes shortest 4-connected paths,
respecting the grid bounds and its current obstacle set.

Usage:
    pf = Pathfinder(grid)
    path = pf.find_path(start, goal)          # list[Coordinate] or None
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

from keycrafter.core.models import Coordinate

if TYPE_CHECKING:
    from keycrafter.core.grid import ObstacleGrid


class Pathfinder:
    """A* pathfinder with a Manhattan heuristic and unit step cost.

    Read-only with respect to the grid: the obstacle set is never touched.
    """

    __slots__ = ("_grid",)

    def __init__(self, grid: ObstacleGrid) -> None:
        self._grid = grid

    def find_path(self, start: Coordinate, goal: Coordinate) -> list[Coordinate] | None:
        """Compute an A* path from *start* to *goal*.

        Returns the cells to step through (excluding *start*, including
        *goal*), an empty list when already at the goal, or None when the
        open set empties before the goal is reached.
        """
        if start == goal:
            return []

        grid = self._grid
        if not grid.in_bounds(goal) or not grid.is_walkable(goal):
            return None

        width, height = grid.width, grid.height

        # Open set: (f_score, counter, x, y). The counter keeps pop order
        # stable for equal f, so ties resolve by insertion order.
        counter = 0
        open_heap: list[tuple[int, int, int, int]] = []
        heapq.heappush(open_heap, (start.manhattan(goal), counter, start.x, start.y))

        g_score: dict[Coordinate, int] = {start: 0}
        came_from: dict[Coordinate, Coordinate] = {}
        closed: set[Coordinate] = set()

        while open_heap:
            _, _, cx, cy = heapq.heappop(open_heap)
            current = Coordinate(cx, cy)

            if current == goal:
                return self._reconstruct(came_from, start, goal)

            if current in closed:
                continue
            closed.add(current)

            tentative_g = g_score[current] + 1
            for neighbor in current.neighbors(width, height):
                if neighbor in closed or not grid.is_walkable(neighbor):
                    continue
                if tentative_g < g_score.get(neighbor, tentative_g + 1):
                    g_score[neighbor] = tentative_g
                    came_from[neighbor] = current
                    counter += 1
                    f = tentative_g + neighbor.manhattan(goal)
                    heapq.heappush(open_heap, (f, counter, neighbor.x, neighbor.y))

        return None

    @staticmethod
    def _reconstruct(
        came_from: dict[Coordinate, Coordinate],
        start: Coordinate,
        goal: Coordinate,
    ) -> list[Coordinate]:
        """Push goal, walk predecessors back to (not including) start, reverse."""
        path: list[Coordinate] = [goal]
        current = came_from[goal]
        while current != start:
            path.append(current)
            current = came_from[current]
        path.reverse()
        return path
