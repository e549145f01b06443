"""Entities living in the world and the actions bugs can take."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Vector


@dataclass(frozen=True)
class Bug:
    """
    A living bug.

    Bugs have:
    - A position in the plane
    - Nutrition, burned by moving and replenished by eating
    - Mass, gained while resting and given away to offspring
    """

    position: Vector
    nutrition: float = 1.0
    mass: float = 1.0


@dataclass(frozen=True)
class Food:
    """A pile of food. Removed from the world once fully eaten."""

    position: Vector
    quantity: float = 1.0


Entity = Bug | Food


@dataclass(frozen=True)
class Idle:
    """Rest in place, gaining mass and losing nutrition."""


@dataclass(frozen=True)
class Crawl:
    """Move along a unit direction."""

    direction: Vector


@dataclass(frozen=True)
class Consume:
    """Eat from the food entity with the given id."""

    target: int


@dataclass(frozen=True)
class Spawn:
    """Split off an offspring."""


Action = Idle | Crawl | Consume | Spawn
