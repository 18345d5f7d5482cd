"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for one game session."""

    # World
    world_seed: int = 42
    grid_width: int = 80
    grid_height: int = 24

    # Player
    player_start_x: int = 40
    player_start_y: int = 12
    harvest_range: int = 2               # Max Manhattan distance to the access point

    # Spawn placement
    spawn_margin: int = 4                # Keeps glyphs clear of the play-area border
    spawn_max_attempts: int = 100
    spawn_containment: float = 0.9       # Fraction of the island radius nodes may use
    min_separation_x: int = 6            # Nodes must differ by more than this on x ...
    min_separation_y: int = 4            # ... or by more than this on y

    # Island
    island_index: int = 0

    # Loop timing
    poll_interval_seconds: float = 0.05  # Bounded wait for one input event
    update_interval_seconds: float = 0.05

    # Events
    event_log_capacity: int = 200

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None
