"""Centralized configuration for the simulation."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BugConfig:
    """Rule constants for bug reasoning and actions."""

    # Reasoning thresholds
    spawn_mass: float = 2.0  # above this mass, a bug reproduces
    consume_radius: float = 5.0  # food strictly closer than this can be eaten
    repulsion: float = 10.0  # bug-to-bug repulsion strength

    # Idle
    idle_growth: float = 1 / 1000  # mass gained per unit of delta
    idle_decay: float = 1 / 100  # nutrition lost per unit of delta

    # Crawl
    crawl_speed: float = 0.02  # distance per unit of delta
    crawl_cost: float = 0.00001  # nutrition burned per unit of delta

    # Consume
    bite_rate: float = 0.0001  # food quantity eaten per unit of delta

    # Spawn
    offspring_offset: float = 1.0  # offspring placed this far along +X
    offspring_nutrition: float = 1.0
    offspring_mass: float = 0.1
    parent_nutrition_cost: float = 0.3


@dataclass
class WorldConfig:
    """Configuration for the initial population."""

    initial_bugs: int = 100
    initial_food: int = 400
    # Coordinates are integers drawn from [-spawn_range, spawn_range]
    spawn_range: int = 800
    bug_nutrition: float = 1.0
    bug_mass: float = 1.0
    food_quantity: float = 1.0
    # Random seed for reproducibility (None = random seed)
    seed: int | None = None


@dataclass
class RendererConfig:
    """Configuration for the Pygame renderer."""

    window_width: int = 1080
    window_height: int = 800
    sidebar_width: int = 280
    target_fps: int = 60
    # Upper bound for a single tick's delta, in milliseconds
    max_delta_ms: float = 32.0
    # Half-width of the square region of the plane shown in the viewport
    view_extent: float = 800.0
    food_radius: int = 2
    bug_radius_scale: float = 4.0  # screen pixels per unit of mass


@dataclass
class Config:
    """Main configuration container."""

    world: WorldConfig
    bug: BugConfig
    renderer: RendererConfig = field(default_factory=RendererConfig)

    @classmethod
    def default(cls) -> "Config":
        """Create default configuration."""
        return cls(
            world=WorldConfig(),
            bug=BugConfig(),
            renderer=RendererConfig(),
        )
