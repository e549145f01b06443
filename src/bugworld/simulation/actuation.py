"""Actuation - fold the decided actions into the next world."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from ..config import BugConfig
from .entity import Action, Bug, Consume, Crawl, Food, Idle, Spawn
from .vector import UNIT_X
from .world import World

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = BugConfig()


def burn(nutrition: float, cost: float) -> float:
    """Spend nutrition, never going below zero."""
    return max(0.0, nutrition - cost)


def perform(
    delta: float,
    actions: Mapping[int, Action],
    world: World,
    config: BugConfig = DEFAULT_CONFIG,
) -> World:
    """
    Apply every action to a copy of the world and return it.

    Actions run one at a time in ascending id order, each one seeing the
    entities added, changed or removed by those before it. An action whose
    bug is no longer in the world is skipped.

    Args:
        delta: Elapsed time for this tick, in milliseconds
        actions: Action per bug id
        world: The snapshot the actions were decided from (left untouched)
        config: Rule constants

    Returns:
        The next world.
    """
    new_world = world.copy()
    for bug_id in sorted(actions):
        bug = new_world.get(bug_id)
        if not isinstance(bug, Bug):
            continue

        action = actions[bug_id]
        if isinstance(action, Idle):
            _idle(new_world, bug_id, bug, delta, config)
        elif isinstance(action, Crawl):
            _crawl(new_world, bug_id, bug, action, delta, config)
        elif isinstance(action, Consume):
            _consume(new_world, bug_id, bug, action, delta, config)
        elif isinstance(action, Spawn):
            _spawn(new_world, bug_id, bug, config)

    return new_world


def _idle(world: World, bug_id: int, bug: Bug, delta: float, config: BugConfig) -> None:
    # Nutrition is not clamped here and may go negative; only burn() floors it.
    world.replace(
        bug_id,
        replace(
            bug,
            mass=bug.mass + delta * config.idle_growth,
            nutrition=bug.nutrition - delta * config.idle_decay,
        ),
    )


def _crawl(
    world: World,
    bug_id: int,
    bug: Bug,
    action: Crawl,
    delta: float,
    config: BugConfig,
) -> None:
    position = bug.position + action.direction * (delta * config.crawl_speed)
    nutrition = burn(bug.nutrition, delta * config.crawl_cost)

    if nutrition <= 0:
        # Starved: the body becomes food
        world.remove(bug_id)
        food_id = world.insert(Food(position=position, quantity=bug.mass))
        logger.debug("Bug #%d starved, left food #%d (%.3f)", bug_id, food_id, bug.mass)
        return

    world.replace(bug_id, replace(bug, position=position, nutrition=nutrition))


def _consume(
    world: World,
    bug_id: int,
    bug: Bug,
    action: Consume,
    delta: float,
    config: BugConfig,
) -> None:
    food = world.get(action.target)
    if not isinstance(food, Food):
        # Already eaten this tick
        return

    amount = min(food.quantity, delta * config.bite_rate)
    remaining = food.quantity - amount
    if remaining > 0:
        world.replace(action.target, replace(food, quantity=remaining))
    else:
        world.remove(action.target)
        logger.debug("Food #%d eaten up by bug #%d", action.target, bug_id)

    world.replace(bug_id, replace(bug, nutrition=bug.nutrition + amount))


def _spawn(world: World, bug_id: int, bug: Bug, config: BugConfig) -> None:
    offspring = Bug(
        position=bug.position + UNIT_X * config.offspring_offset,
        nutrition=config.offspring_nutrition,
        mass=config.offspring_mass,
    )
    offspring_id = world.insert(offspring)

    # Deductions are not clamped, the parent may end up with negative nutrition.
    world.replace(
        bug_id,
        replace(
            bug,
            mass=bug.mass - config.offspring_mass,
            nutrition=bug.nutrition - config.parent_nutrition_cost,
        ),
    )
    logger.debug("Bug #%d spawned bug #%d", bug_id, offspring_id)
