"""World statistics for the sidebar charts."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from .world import World


@dataclass
class WorldStats:
    """Summary of a single world snapshot."""

    tick: int = 0
    bugs_alive: int = 0
    food_count: int = 0
    total_mass: float = 0.0
    total_food: float = 0.0
    avg_nutrition: float = 0.0
    avg_mass: float = 0.0

    @property
    def biomass(self) -> float:
        """Bug mass plus food quantity."""
        return self.total_mass + self.total_food

    @classmethod
    def from_world(cls, world: World, tick: int = 0) -> WorldStats:
        """Compute statistics for a world."""
        bugs = [bug for _, bug in world.bugs()]
        food = [item for _, item in world.food()]

        stats = cls(
            tick=tick,
            bugs_alive=len(bugs),
            food_count=len(food),
            total_mass=sum(b.mass for b in bugs),
            total_food=sum(f.quantity for f in food),
        )

        # Compute averages across bugs
        if bugs:
            stats.avg_nutrition = sum(b.nutrition for b in bugs) / len(bugs)
            stats.avg_mass = stats.total_mass / len(bugs)

        return stats


class StatsHistory:
    """Tracks statistics over time for charting."""

    def __init__(self, max_length: int = 300):
        """
        Initialize stats history.

        Args:
            max_length: Maximum number of ticks to keep in history
        """
        self.max_length = max_length
        self.population: deque[int] = deque(maxlen=max_length)
        self.food_count: deque[int] = deque(maxlen=max_length)
        self.biomass: deque[float] = deque(maxlen=max_length)
        self.avg_nutrition: deque[float] = deque(maxlen=max_length)

    def record(self, stats: WorldStats) -> None:
        """Record current stats to history."""
        self.population.append(stats.bugs_alive)
        self.food_count.append(stats.food_count)
        self.biomass.append(stats.biomass)
        self.avg_nutrition.append(stats.avg_nutrition)

    def __len__(self) -> int:
        return len(self.population)
