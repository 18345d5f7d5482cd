"""Tests for spawn placement, kind selection and node generation."""

from collections import Counter

import pytest

from keycrafter.config import GameConfig
from keycrafter.core.enums import ResourceKind
from keycrafter.core.islands import ISLANDS, Island, ResourcePool, get_island
from keycrafter.core.models import Coordinate
from keycrafter.core.resource_nodes import RESOURCE_KINDS
from keycrafter.engine.factory import build_game
from keycrafter.systems.placement import (
    SpawnPlacement,
    island_distance,
    island_radii,
    is_inside_island,
    is_separated,
)
from keycrafter.systems.rng import DeterministicRNG


def _placement(seed: int = 42, **overrides) -> SpawnPlacement:
    return SpawnPlacement(GameConfig(**overrides), DeterministicRNG(seed))


# ---------------------------------------------------------------------------
# Geometry helpers
# ---------------------------------------------------------------------------

class TestIslandGeometry:
    def test_radii(self):
        assert island_radii(80, 24) == (48, 14)

    def test_centre_is_inside(self):
        assert island_distance(Coordinate(40, 12), 80, 24) == 0.0
        assert is_inside_island(Coordinate(40, 12), 80, 24)

    def test_far_corner_is_outside(self):
        assert not is_inside_island(Coordinate(0, 0), 80, 24)

    def test_containment_limit(self):
        # (40 + 43, 12) sits at 43/48 ~ 0.896 of the x radius
        assert is_inside_island(Coordinate(83, 12), 80, 24)
        assert not is_inside_island(Coordinate(84, 12), 80, 24)


class TestSeparation:
    def test_far_on_x_is_enough(self):
        assert is_separated(Coordinate(7, 0), [Coordinate(0, 0)])

    def test_far_on_y_is_enough(self):
        assert is_separated(Coordinate(0, 5), [Coordinate(0, 0)])

    def test_close_on_both_axes_rejected(self):
        assert not is_separated(Coordinate(6, 4), [Coordinate(0, 0)])
        assert not is_separated(Coordinate(-6, -4), [Coordinate(0, 0)])

    def test_empty_existing(self):
        assert is_separated(Coordinate(0, 0), [])


# ---------------------------------------------------------------------------
# Rejection sampling
# ---------------------------------------------------------------------------

class TestSamplePosition:
    def test_positions_are_contained_and_inset(self):
        placement = _placement()
        for draw in range(200):
            pos = placement.sample_position([], 80, 24, draw)
            assert pos is not None
            assert is_inside_island(pos, 80, 24, 0.9)
            assert 4 <= pos.x <= 75
            assert 4 <= pos.y <= 19

    def test_positions_respect_existing_nodes(self):
        placement = _placement(seed=7)
        existing: list[Coordinate] = []
        for draw in range(6):
            pos = placement.sample_position(existing, 80, 24, draw)
            assert pos is not None
            assert is_separated(pos, existing)
            existing.append(pos)

    def test_exhaustion_returns_none(self):
        placement = _placement()
        everywhere = [Coordinate(x, y) for x in range(80) for y in range(24)]
        assert placement.sample_position(everywhere, 80, 24, 0) is None

    def test_zero_attempts_returns_none(self):
        placement = _placement(spawn_max_attempts=0)
        assert placement.sample_position([], 80, 24, 0) is None

    def test_area_smaller_than_margins(self):
        placement = _placement()
        assert placement.sample_position([], 8, 8, 0) is None

    def test_same_draw_same_position(self):
        a = _placement(seed=3).sample_position([], 80, 24, 12)
        b = _placement(seed=3).sample_position([], 80, 24, 12)
        assert a == b


# ---------------------------------------------------------------------------
# Weighted kind selection
# ---------------------------------------------------------------------------

class TestPickKind:
    def test_weights_roughly_respected(self):
        placement = _placement()
        island = get_island(0)
        counts = Counter(placement.pick_kind(island, draw) for draw in range(2000))
        assert set(counts) == {ResourceKind.WOOD, ResourceKind.COPPER}
        # 60 / 110 ~ 0.545
        assert 0.45 < counts[ResourceKind.WOOD] / 2000 < 0.65

    def test_single_pool(self):
        placement = _placement()
        island = Island("Mine", (ResourcePool(ResourceKind.COPPER, 5),), max_nodes=2, spawn_chance=0.0)
        assert all(placement.pick_kind(island, d) == ResourceKind.COPPER for d in range(50))

    def test_zero_weight_falls_back_to_first_pool(self):
        placement = _placement()
        island = Island(
            "Barren",
            (ResourcePool(ResourceKind.COPPER, 0), ResourcePool(ResourceKind.WOOD, 0)),
            max_nodes=2,
            spawn_chance=0.0,
        )
        assert placement.pick_kind(island, 1) == ResourceKind.COPPER

    def test_spawn_chance_bounds(self):
        placement = _placement()
        never = Island("A", ISLANDS[0].pools, max_nodes=6, spawn_chance=0.0)
        always = Island("B", ISLANDS[0].pools, max_nodes=6, spawn_chance=1.0)
        assert not any(placement.should_spawn(never, d) for d in range(100))
        assert all(placement.should_spawn(always, d) for d in range(100))


# ---------------------------------------------------------------------------
# Islands and generation
# ---------------------------------------------------------------------------

class TestIslands:
    def test_starter_grove(self):
        island = get_island(0)
        assert island.name == "Starter Grove"
        assert island.max_nodes == 6
        assert island.initial_nodes == 3
        assert island.total_weight == 110

    def test_unknown_island(self):
        with pytest.raises(ValueError):
            get_island(len(ISLANDS))


class TestNodeGenerator:
    def test_new_game_starts_half_full(self):
        game = build_game(GameConfig(world_seed=9))
        assert len(game.state.nodes) == game.state.island.initial_nodes

    def test_generated_nodes_are_well_formed(self):
        game = build_game(GameConfig(world_seed=9))
        game.generator.populate(game.state, 3)
        ids = [n.node_id for n in game.state.nodes]
        assert len(ids) == len(set(ids))
        for n in game.state.nodes:
            kdef = RESOURCE_KINDS[n.kind]
            assert kdef.min_yield <= n.max_yield <= kdef.max_yield
            assert n.remaining_yield == n.max_yield
            assert n.typed_prefix == ""
            assert n.target_word and n.next_word

    def test_create_with_explicit_kind(self):
        game = build_game(GameConfig(), populate=False)
        node = game.generator.create(game.state, Coordinate(20, 8), ResourceKind.COPPER)
        assert node.kind == ResourceKind.COPPER
        assert node.pos == Coordinate(20, 8)
        assert node not in game.state.nodes

    def test_spawn_skipped_when_exhausted(self):
        game = build_game(GameConfig(spawn_max_attempts=0), populate=False)
        assert game.generator.spawn(game.state) is None
        assert game.generator.populate(game.state, 4) == 0
        assert game.state.nodes == []
