"""Reasoning - each bug picks one action from a read-only snapshot."""

from __future__ import annotations

from collections.abc import Mapping

from ..config import BugConfig
from .entity import Action, Bug, Consume, Crawl, Entity, Food, Idle, Spawn
from .vector import UNIT_X, ZERO, Vector

DEFAULT_CONFIG = BugConfig()


def attraction(
    position: Vector,
    entities: Mapping[int, Entity],
    config: BugConfig = DEFAULT_CONFIG,
) -> Vector:
    """
    Sum the pull of every entity on a point.

    Food attracts with strength 1 / distance. Other bugs repel with strength
    repulsion * mass / distance^3. Entities sitting exactly on the point have
    no direction and contribute nothing, which also covers the bug itself.
    """
    total = ZERO
    for entity in entities.values():
        offset = entity.position - position
        direction = offset.normalized()
        if direction is None:
            continue

        distance = offset.length
        if isinstance(entity, Food):
            magnitude = 1 / distance
        else:
            magnitude = -config.repulsion * entity.mass / distance**3
        total = total + direction * magnitude
    return total


def find_food(
    position: Vector,
    entities: Mapping[int, Entity],
    config: BugConfig = DEFAULT_CONFIG,
) -> int | None:
    """Get the id of the first food within eating range, in iteration order."""
    for entity_id, entity in entities.items():
        if isinstance(entity, Food) and position.distance_to(entity.position) < config.consume_radius:
            return entity_id
    return None


def decide(
    bug: Bug,
    entities: Mapping[int, Entity],
    config: BugConfig = DEFAULT_CONFIG,
) -> Action:
    """
    Decide what a bug does this tick.

    Rules, in priority order:
    - Heavy enough: spawn
    - Better fed than heavy: idle
    - Food within reach: eat it
    - Otherwise: crawl along the attraction field (+X when it is flat)
    """
    if bug.mass > config.spawn_mass:
        return Spawn()

    if bug.nutrition > bug.mass:
        return Idle()

    target = find_food(bug.position, entities, config)
    if target is not None:
        return Consume(target)

    direction = attraction(bug.position, entities, config).normalized()
    return Crawl(direction if direction is not None else UNIT_X)


def reason(
    entities: Mapping[int, Entity],
    config: BugConfig = DEFAULT_CONFIG,
) -> dict[int, Action]:
    """
    Decide an action for every bug. Food gets no action.

    Entities are scanned in ascending id order so that the food search
    resolves ties the same way on every run.
    """
    ordered = dict(sorted(entities.items()))
    return {
        entity_id: decide(entity, ordered, config)
        for entity_id, entity in ordered.items()
        if isinstance(entity, Bug)
    }
