"""Core data models and game state representation."""

from keycrafter.core.enums import Domain, EventCategory, ResourceKind, WordDifficulty
from keycrafter.core.models import Coordinate, Player
from keycrafter.core.grid import ObstacleGrid
from keycrafter.core.resource_nodes import ResourceNode
from keycrafter.core.game_state import GameState
from keycrafter.core.snapshot import SaveSnapshot, Snapshot

__all__ = [
    "Coordinate",
    "Domain",
    "EventCategory",
    "GameState",
    "ObstacleGrid",
    "Player",
    "ResourceKind",
    "ResourceNode",
    "SaveSnapshot",
    "Snapshot",
    "WordDifficulty",
]
