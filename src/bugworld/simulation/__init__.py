"""Simulation module - pure logic, no rendering."""

from .actuation import perform
from .engine import tick
from .entity import Action, Bug, Consume, Crawl, Entity, Food, Idle, Spawn
from .reasoning import reason
from .seeding import pick_seed, populate
from .stats import StatsHistory, WorldStats
from .vector import Vector
from .world import World, empty, insert

__all__ = [
    "Action",
    "Bug",
    "Consume",
    "Crawl",
    "Entity",
    "Food",
    "Idle",
    "Spawn",
    "StatsHistory",
    "Vector",
    "World",
    "WorldStats",
    "empty",
    "insert",
    "perform",
    "pick_seed",
    "populate",
    "reason",
    "tick",
]
