"""Smoke tests for the renderer and host loop helpers, using SDL's dummy video driver."""

import pytest

from bugworld.config import RendererConfig
from bugworld.main import clamp_delta
from bugworld.simulation.entity import Bug, Food
from bugworld.simulation.stats import StatsHistory, WorldStats
from bugworld.simulation.vector import Vector


@pytest.fixture
def renderer(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    from bugworld.renderer import PygameRenderer

    renderer = PygameRenderer(RendererConfig())
    yield renderer
    renderer.cleanup()


def test_to_screen_centres_the_origin(renderer):
    assert renderer.to_screen(Vector(0.0, 0.0)) == (400, 400)
    assert renderer.to_screen(Vector(800.0, 800.0)) == (800, 0)
    assert renderer.to_screen(Vector(-800.0, -800.0)) == (0, 800)


def test_is_visible(renderer):
    assert renderer.is_visible((10, 10), 2)
    assert renderer.is_visible((-1, 10), 2)
    assert not renderer.is_visible((-50, 10), 2)


def test_render_a_frame(renderer, make_world):
    world = make_world(
        Bug(Vector(0.0, 0.0), nutrition=0.5, mass=1.0),
        Bug(Vector(5000.0, 0.0), nutrition=2.0, mass=1.0),
        Food(Vector(10.0, 10.0), quantity=0.5),
    )
    stats = WorldStats.from_world(world)
    history = StatsHistory()
    history.record(stats)
    history.record(stats)

    renderer.render(world, stats, history)


def test_stepping_while_paused(renderer):
    from bugworld.renderer import SimulationMode

    assert renderer.mode == SimulationMode.PAUSED
    assert not renderer.should_step()

    renderer.btn_step.on_click()
    assert renderer.should_step()
    assert not renderer.should_step()

    renderer.set_mode(SimulationMode.RUNNING)
    renderer.speed_selector.set_speed(4)
    assert renderer.should_step()
    assert renderer.get_steps_per_frame() == 4


def test_clamp_delta():
    assert clamp_delta(16.0, 32.0) == 16.0
    assert clamp_delta(500.0, 32.0) == 32.0
    assert clamp_delta(-3.0, 32.0) == 0.0
