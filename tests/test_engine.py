"""
Tests for the tick driver.

Tests cover:
- Zero elapsed time leaves entity state unchanged
- Spawning does not depend on elapsed time
- Mass bookkeeping through spawning and starvation
- Multi-tick runs on a seeded population
"""

import pytest

from bugworld.config import WorldConfig
from bugworld.simulation.engine import tick
from bugworld.simulation.entity import Bug, Food
from bugworld.simulation.seeding import populate
from bugworld.simulation.stats import WorldStats
from bugworld.simulation.vector import Vector


def test_zero_delta_is_idempotent(make_world):
    world = make_world(
        Bug(Vector(0.0, 0.0), nutrition=2.0, mass=1.0),  # idles
        Bug(Vector(100.0, 0.0), nutrition=0.5, mass=1.0),  # crawls
        Bug(Vector(-100.0, 0.0), nutrition=0.5, mass=1.0),  # eats
        Food(Vector(-102.0, 0.0), quantity=1.0),
    )

    once = tick(0, world)
    twice = tick(0, once)

    assert once == world
    assert twice == world


def test_spawn_happens_at_zero_delta(make_world):
    world = make_world(Bug(Vector(0.0, 0.0), nutrition=1.0, mass=2.5))

    result = tick(0, world)

    assert result.seed == 2
    assert result.entities[1] == Bug(Vector(1.0, 0.0), nutrition=1.0, mass=0.1)


def test_tick_leaves_input_untouched(make_world):
    world = make_world(
        Bug(Vector(0.0, 0.0), nutrition=0.0, mass=1.0),
        Bug(Vector(30.0, 0.0), nutrition=1.0, mass=2.5),
        Food(Vector(31.0, 1.0), quantity=0.5),
    )
    snapshot = world.copy()

    tick(16, world)

    assert world == snapshot


def test_spawn_conserves_mass(make_world):
    world = make_world(Bug(Vector(0.0, 0.0), nutrition=1.0, mass=2.5))

    before = WorldStats.from_world(world)
    after = WorldStats.from_world(tick(16, world))

    assert after.bugs_alive == 2
    assert after.total_mass == pytest.approx(before.total_mass)


def test_starvation_conserves_biomass(make_world):
    world = make_world(Bug(Vector(0.0, 0.0), nutrition=0.0, mass=1.3))

    result = tick(16, world)
    stats = WorldStats.from_world(result)

    assert stats.bugs_alive == 0
    assert stats.food_count == 1
    assert stats.biomass == 1.3


def test_hungry_bug_eats_over_several_ticks(make_world):
    world = make_world(
        Bug(Vector(0.0, 0.0), nutrition=0.1, mass=1.0),
        Food(Vector(2.0, 0.0), quantity=0.004),
    )

    for _ in range(3):
        world = tick(16, world)

    assert 1 not in world.entities
    assert world.entities[0].nutrition > 0.1


def test_seeded_run_is_reproducible():
    config = WorldConfig(initial_bugs=20, initial_food=40, spawn_range=60, seed=3)

    def run():
        world = populate(config)
        for _ in range(25):
            world = tick(16, world)
        return world

    assert run() == run()


def test_multi_tick_run_keeps_world_consistent():
    world = populate(WorldConfig(initial_bugs=20, initial_food=40, spawn_range=60, seed=11))

    for _ in range(25):
        world = tick(16, world)

        assert all(entity_id < world.seed for entity_id in world.entities)
        assert all(isinstance(entity, (Bug, Food)) for entity in world.entities.values())
        assert all(food.quantity >= 0 for _, food in world.food())
