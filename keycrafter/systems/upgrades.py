"""Upgrades: the per-kind yield multiplier provider."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from keycrafter.core.enums import ResourceKind
from keycrafter.core.resource_nodes import display_name

if TYPE_CHECKING:
    from keycrafter.core.models import Player

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Upgrade:
    name: str
    description: str
    cost_kind: ResourceKind
    cost_amount: int
    target_kind: ResourceKind
    bonus: float
    level: int = 0


def default_upgrades() -> list[Upgrade]:
    return [
        Upgrade("Better Axe", "+1 Wood per harvest", ResourceKind.WOOD, 10, ResourceKind.WOOD, 1.0),
        Upgrade("Better Pickaxe", "+1 Copper per harvest", ResourceKind.COPPER, 10, ResourceKind.COPPER, 1.0),
    ]


class UpgradeManager:
    """Owns upgrade levels and the multipliers they produce."""

    __slots__ = ("_upgrades", "_multipliers")

    def __init__(self, upgrades: list[Upgrade] | None = None) -> None:
        self._upgrades = upgrades if upgrades is not None else default_upgrades()
        self._multipliers: dict[ResourceKind, float] = {kind: 1.0 for kind in ResourceKind}

    @property
    def upgrades(self) -> tuple[Upgrade, ...]:
        return tuple(self._upgrades)

    def multiplier(self, kind: ResourceKind) -> float:
        return self._multipliers.get(kind, 1.0)

    def next_cost(self, index: int) -> int | None:
        upgrade = self._get(index)
        if upgrade is None:
            return None
        return self._cost(upgrade)

    def can_purchase(self, index: int, player: Player) -> bool:
        upgrade = self._get(index)
        if upgrade is None:
            return False
        return player.count(upgrade.cost_kind) >= self._cost(upgrade)

    def purchase(self, index: int, player: Player) -> int | None:
        """Pay for and apply an upgrade. Returns the cost paid, or None."""
        upgrade = self._get(index)
        if upgrade is None:
            return None
        cost = self._cost(upgrade)
        if not player.spend(upgrade.cost_kind, cost):
            return None
        self._multipliers[upgrade.target_kind] = self.multiplier(upgrade.target_kind) + upgrade.bonus
        upgrade.level += 1
        logger.info("Purchased %s (level %d) for %d %s",
                    upgrade.name, upgrade.level, cost, display_name(upgrade.cost_kind))
        return cost

    def levels(self) -> dict[str, int]:
        return {u.name: u.level for u in self._upgrades}

    def restore_levels(self, levels: dict[str, int]) -> None:
        """Re-apply saved upgrade levels on a fresh manager."""
        for upgrade in self._upgrades:
            level = levels.get(upgrade.name, 0)
            gained = level - upgrade.level
            if gained > 0:
                self._multipliers[upgrade.target_kind] = (
                    self.multiplier(upgrade.target_kind) + upgrade.bonus * gained
                )
                upgrade.level = level

    @staticmethod
    def _cost(upgrade: Upgrade) -> int:
        # Linear growth: +5 per level already bought
        return upgrade.cost_amount + upgrade.level * 5

    def _get(self, index: int) -> Upgrade | None:
        if 0 <= index < len(self._upgrades):
            return self._upgrades[index]
        return None
