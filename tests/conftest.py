"""Shared fixtures for the simulation tests."""

import pytest

from bugworld.config import BugConfig
from bugworld.simulation.entity import Entity
from bugworld.simulation.world import World


@pytest.fixture
def config() -> BugConfig:
    return BugConfig()


@pytest.fixture
def make_world():
    """Build a world by inserting entities in order, so ids are 0, 1, 2, ..."""

    def _make(*entities: Entity) -> World:
        world = World()
        for entity in entities:
            world.insert(entity)
        return world

    return _make
