"""Core data models: Coordinate, Player."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from keycrafter.core.enums import ResourceKind


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable 2D integer grid point.

    The type does not enforce bounds; the neighbour generator and the spawn
    placement constraint do.
    """

    x: int = 0
    y: int = 0

    def __add__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Coordinate) -> Coordinate:
        return Coordinate(self.x - other.x, self.y - other.y)

    def manhattan(self, other: Coordinate) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def neighbors(self, width: int, height: int) -> Iterator[Coordinate]:
        """Yield the in-bounds 4-connected neighbours (+x, -x, +y, -y)."""
        for dx, dy in _CARDINALS:
            nx, ny = self.x + dx, self.y + dy
            if 0 <= nx < width and 0 <= ny < height:
                yield Coordinate(nx, ny)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Expansion order for the neighbour generator (no diagonals)
_CARDINALS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(slots=True)
class Player:
    """The single player: a position plus harvested resource totals."""

    pos: Coordinate
    wood: int = 0
    copper: int = 0

    def count(self, kind: ResourceKind) -> int:
        if kind == ResourceKind.WOOD:
            return self.wood
        return self.copper

    def add(self, kind: ResourceKind, amount: int) -> None:
        if kind == ResourceKind.WOOD:
            self.wood += amount
        else:
            self.copper += amount

    def spend(self, kind: ResourceKind, amount: int) -> bool:
        """Deduct *amount* of *kind*; returns False (and changes nothing) if short."""
        if self.count(kind) < amount:
            return False
        self.add(kind, -amount)
        return True

    def copy(self) -> Player:
        return Player(pos=self.pos, wood=self.wood, copper=self.copper)
