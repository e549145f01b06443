"""Tick driver - one reasoning pass followed by one actuation pass."""

from __future__ import annotations

from ..config import BugConfig
from .actuation import perform
from .reasoning import reason
from .world import World

DEFAULT_CONFIG = BugConfig()


def tick(delta: float, world: World, config: BugConfig = DEFAULT_CONFIG) -> World:
    """
    Advance the world by one time step.

    Args:
        delta: Elapsed time in milliseconds. Must not be negative.
        world: Current world, left untouched
        config: Rule constants

    Returns:
        The next world.
    """
    actions = reason(world.entities, config)
    return perform(delta, actions, world, config)
