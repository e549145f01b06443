"""Renderer module - visualization layer."""

from .pygame_renderer import PygameRenderer
from .ui import Button, SimulationMode, Sparkline, SpeedSelector

__all__ = [
    "Button",
    "PygameRenderer",
    "SimulationMode",
    "Sparkline",
    "SpeedSelector",
]
