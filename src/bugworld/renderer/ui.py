"""UI widgets for the simulation renderer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

import pygame


class SimulationMode(Enum):
    """Whether the host loop is ticking the world."""

    RUNNING = auto()
    PAUSED = auto()


@dataclass
class UIColors:
    """Color scheme for UI elements."""

    bg: tuple[int, int, int] = (30, 32, 40)
    bg_hover: tuple[int, int, int] = (45, 48, 58)
    bg_active: tuple[int, int, int] = (55, 58, 70)

    accent: tuple[int, int, int] = (100, 180, 255)
    accent_dim: tuple[int, int, int] = (60, 100, 140)

    text: tuple[int, int, int] = (220, 225, 235)
    text_dim: tuple[int, int, int] = (140, 145, 155)

    chart_population: tuple[int, int, int] = (80, 200, 220)
    chart_food: tuple[int, int, int] = (120, 200, 100)
    chart_biomass: tuple[int, int, int] = (255, 200, 80)
    chart_nutrition: tuple[int, int, int] = (255, 100, 100)
    chart_bg: tuple[int, int, int] = (25, 27, 35)


UI_COLORS = UIColors()


class Sparkline:
    """A mini line chart for a time series."""

    def __init__(
        self,
        width: int,
        height: int,
        color: tuple[int, int, int] = UI_COLORS.chart_population,
    ):
        self.rect = pygame.Rect(0, 0, width, height)
        self.color = color

    def points(
        self,
        data: Sequence[float | int],
        min_val: float | None = None,
    ) -> list[tuple[int, int]]:
        """Map data values onto pixel coordinates inside the chart."""
        if len(data) < 2:
            return []

        data_min = min(data) if min_val is None else min_val
        data_max = max(data)
        value_range = data_max - data_min if data_max > data_min else 1.0

        padding = 2
        chart_width = self.rect.width - padding * 2
        chart_height = self.rect.height - padding * 2

        points: list[tuple[int, int]] = []
        for i, value in enumerate(data):
            x = self.rect.x + padding + int(i * chart_width / (len(data) - 1))
            normalized = (value - data_min) / value_range
            y = self.rect.y + padding + int((1 - normalized) * chart_height)
            points.append((x, y))
        return points

    def render(
        self,
        surface: pygame.Surface,
        data: Sequence[float | int],
        min_val: float | None = None,
    ) -> None:
        """Draw the chart background and line."""
        pygame.draw.rect(surface, UI_COLORS.chart_bg, self.rect, border_radius=3)

        points = self.points(data, min_val)
        if points:
            pygame.draw.lines(surface, self.color, False, points, 2)


class Button:
    """A clickable button."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        on_click: Callable[[], None] | None = None,
        active: bool = False,
    ):
        """
        Initialize a button.

        Args:
            x: X position
            y: Y position
            width: Button width
            height: Button height
            text: Button text
            on_click: Callback when clicked
            active: Whether the button starts highlighted
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.on_click = on_click
        self.active = active
        self.hovered = False
        self.pressed = False

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle pygame events.

        Returns:
            True if event was consumed
        """
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            was_pressed = self.pressed
            self.pressed = False
            if was_pressed and self.rect.collidepoint(event.pos):
                if self.on_click:
                    self.on_click()
                return True

        elif event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)

        return False

    def render(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        if self.active:
            bg_color = UI_COLORS.accent
        elif self.pressed:
            bg_color = UI_COLORS.bg_active
        elif self.hovered:
            bg_color = UI_COLORS.bg_hover
        else:
            bg_color = UI_COLORS.bg

        pygame.draw.rect(surface, bg_color, self.rect, border_radius=4)
        border_color = UI_COLORS.accent if self.active else UI_COLORS.accent_dim
        pygame.draw.rect(surface, border_color, self.rect, width=1, border_radius=4)

        text_color = UI_COLORS.bg if self.active else UI_COLORS.text
        text_surface = font.render(self.text, True, text_color)
        surface.blit(text_surface, text_surface.get_rect(center=self.rect.center))


class SpeedSelector:
    """A button group choosing how many ticks run per frame."""

    SPEEDS = [1, 2, 4, 8]

    def __init__(self, x: int, y: int, button_width: int = 50, button_height: int = 24):
        self.buttons: list[Button] = []
        self.speed = 1

        for i, speed in enumerate(self.SPEEDS):
            self.buttons.append(
                Button(
                    x + i * (button_width + 4),
                    y,
                    button_width,
                    button_height,
                    f"{speed}x",
                    on_click=lambda s=speed: self.set_speed(s),
                    active=(speed == 1),
                )
            )

    def set_speed(self, speed: int) -> None:
        """Set speed and update button states."""
        self.speed = speed
        for btn, spd in zip(self.buttons, self.SPEEDS):
            btn.active = (spd == speed)

    def handle_event(self, event: pygame.event.Event) -> bool:
        return any(btn.handle_event(event) for btn in self.buttons)

    def render(self, surface: pygame.Surface, font: pygame.font.Font, y: int) -> None:
        for btn in self.buttons:
            btn.rect.y = y
            btn.render(surface, font)
