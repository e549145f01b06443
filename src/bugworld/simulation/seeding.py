"""Initial population - scatters food and bugs over the plane."""

from __future__ import annotations

import numpy as np

from ..config import WorldConfig
from .entity import Bug, Food
from .vector import Vector
from .world import World, empty, insert


def pick_seed(config: WorldConfig) -> int:
    """Get the configured random seed, or draw a fresh one."""
    if config.seed is not None:
        return config.seed
    return int(np.random.default_rng().integers(0, 2**31 - 1))


def populate(config: WorldConfig, seed: int | None = None) -> World:
    """
    Build a starting world.

    Food is inserted first, then bugs, each at integer coordinates drawn
    uniformly from [-spawn_range, spawn_range] on both axes.

    Args:
        config: Population sizes and starting values
        seed: Random seed (defaults to the configured one)

    Returns:
        The populated world. The same seed always gives the same world.
    """
    rng = np.random.default_rng(pick_seed(config) if seed is None else seed)
    world = empty()

    for x, y in _scatter(rng, config.initial_food, config.spawn_range):
        _, world = insert(Food(position=Vector(x, y), quantity=config.food_quantity), world)

    for x, y in _scatter(rng, config.initial_bugs, config.spawn_range):
        bug = Bug(position=Vector(x, y), nutrition=config.bug_nutrition, mass=config.bug_mass)
        _, world = insert(bug, world)

    return world


def _scatter(rng: np.random.Generator, count: int, spread: int) -> list[tuple[float, float]]:
    coords = rng.integers(-spread, spread, size=(count, 2), endpoint=True)
    return [(float(x), float(y)) for x, y in coords]
