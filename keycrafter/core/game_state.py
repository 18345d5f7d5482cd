"""Mutable authoritative game state — only mutated by the HarvestOrchestrator."""

from __future__ import annotations

from keycrafter.core.grid import ObstacleGrid
from keycrafter.core.islands import Island
from keycrafter.core.models import Coordinate, Player
from keycrafter.core.resource_nodes import ResourceNode
from keycrafter.core.stats import GameStats


class GameState:
    """The single source of truth for one game session.

    Nodes are kept in a list: iteration order is the order keystrokes are
    matched in, which decides who wins the player's position when several
    nodes advance on the same character.
    """

    __slots__ = ("seed", "tick", "player", "nodes", "grid", "island", "stats", "_next_node_id", "_draws")

    def __init__(
        self,
        seed: int,
        grid: ObstacleGrid,
        player: Player,
        island: Island,
    ) -> None:
        self.seed: int = seed
        self.tick: int = 0  # keystrokes handled so far
        self.player: Player = player
        self.nodes: list[ResourceNode] = []
        self.grid: ObstacleGrid = grid
        self.island: Island = island
        self.stats: GameStats = GameStats()
        self._next_node_id: int = 1
        self._draws: int = 0

    def allocate_node_id(self) -> int:
        nid = self._next_node_id
        self._next_node_id += 1
        return nid

    def next_draw(self) -> int:
        """Monotonic key for the stateless RNG; one per random decision."""
        draw = self._draws
        self._draws += 1
        return draw

    # -- node collection --

    def add_node(self, node: ResourceNode) -> None:
        self.nodes.append(node)

    def remove_node(self, node_id: int) -> ResourceNode | None:
        for idx, node in enumerate(self.nodes):
            if node.node_id == node_id:
                return self.nodes.pop(idx)
        return None

    def find_node(self, node_id: int) -> ResourceNode | None:
        for node in self.nodes:
            if node.node_id == node_id:
                return node
        return None

    def node_at(self, index: int) -> ResourceNode | None:
        """Bounds-checked lookup; an index invalidated by a retirement yields None."""
        if 0 <= index < len(self.nodes):
            return self.nodes[index]
        return None

    def node_positions(self) -> list[Coordinate]:
        return [n.pos for n in self.nodes]

    @property
    def is_full(self) -> bool:
        return len(self.nodes) >= self.island.max_nodes

    def move_player(self, pos: Coordinate) -> None:
        self.player.pos = pos
