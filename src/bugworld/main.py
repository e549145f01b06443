"""Main entry point for the Bug World simulation."""

import logging

from .config import Config
from .renderer import PygameRenderer, SimulationMode
from .simulation import StatsHistory, WorldStats, pick_seed, populate, tick


def clamp_delta(delta_ms: float, max_delta_ms: float) -> float:
    """Keep a frame delta within [0, max_delta_ms] so long stalls don't destabilise a tick."""
    return max(0.0, min(delta_ms, max_delta_ms))


def main() -> None:
    """Run the bug world simulation."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = Config.default()

    seed = pick_seed(config.world)
    world = populate(config.world, seed)
    ticks = 0
    stats = WorldStats.from_world(world, ticks)
    history = StatsHistory()
    history.record(stats)

    renderer = PygameRenderer(config.renderer)

    print("Starting Bug World simulation...")
    print(f"  Seed: {seed}")
    print(f"  Bugs: {config.world.initial_bugs}")
    print(f"  Food: {config.world.initial_food}")
    print(f"  Spawn range: [-{config.world.spawn_range}, {config.world.spawn_range}]")
    print()
    print("Controls:")
    print("  - Click 'Run' or press SPACE to start simulation")
    print("  - Click 'Step' when paused to advance one tick")
    print("  - ESC to quit")
    print()

    delta = 0.0
    running = True
    while running:
        running = renderer.handle_events()

        if renderer.should_step():
            step_delta = clamp_delta(delta, config.renderer.max_delta_ms)
            for _ in range(renderer.get_steps_per_frame()):
                world = tick(step_delta, world, config.bug)
                ticks += 1

            stats = WorldStats.from_world(world, ticks)
            history.record(stats)

            if stats.bugs_alive == 0 and renderer.mode == SimulationMode.RUNNING:
                print(f"All bugs have died after {ticks} ticks.")
                renderer.set_mode(SimulationMode.PAUSED)

        renderer.render(world, stats, history)

        delta = renderer.tick()

    renderer.cleanup()
    print("Simulation ended.")


if __name__ == "__main__":
    main()
