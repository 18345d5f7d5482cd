"""Island definitions: which kinds spawn, how often, and how many at once."""

from __future__ import annotations

from dataclasses import dataclass

from keycrafter.core.enums import ResourceKind


@dataclass(frozen=True, slots=True)
class ResourcePool:
    kind: ResourceKind
    weight: int  # higher weight = more likely to spawn


@dataclass(frozen=True, slots=True)
class Island:
    """A playable island and its spawn rules."""

    name: str
    pools: tuple[ResourcePool, ...]
    max_nodes: int
    spawn_chance: float       # chance per successful harvest to add a node
    level_requirement: int = 0

    @property
    def total_weight(self) -> int:
        return sum(p.weight for p in self.pools)

    @property
    def initial_nodes(self) -> int:
        """A fresh game starts half full."""
        return self.max_nodes // 2


ISLANDS: tuple[Island, ...] = (
    Island(
        name="Starter Grove",
        pools=(
            ResourcePool(ResourceKind.WOOD, 60),
            ResourcePool(ResourceKind.COPPER, 50),
        ),
        max_nodes=6,
        spawn_chance=0.15,
        level_requirement=0,
    ),
)


def get_island(index: int) -> Island:
    if not 0 <= index < len(ISLANDS):
        raise ValueError(f"Unknown island index {index} (have {len(ISLANDS)})")
    return ISLANDS[index]
