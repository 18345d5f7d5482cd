"""Engine layer: per-keystroke harvest orchestration and the game loop."""

from keycrafter.engine.harvest import HarvestOrchestrator, KeystrokeResult
from keycrafter.engine.factory import Game, build_game
from keycrafter.engine.game_loop import AutoTypist, GameLoop, QueueKeySource, ScriptedKeySource

__all__ = [
    "AutoTypist",
    "Game",
    "GameLoop",
    "HarvestOrchestrator",
    "KeystrokeResult",
    "QueueKeySource",
    "ScriptedKeySource",
    "build_game",
]
