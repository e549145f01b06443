"""Pygame-CE renderer for visualizing the simulation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import pygame

from ..config import RendererConfig
from ..simulation.entity import Bug, Food
from ..simulation.vector import ZERO
from . import colors
from .ui import UI_COLORS, Button, SimulationMode, Sparkline, SpeedSelector

if TYPE_CHECKING:
    from ..simulation.stats import StatsHistory, WorldStats
    from ..simulation.vector import Vector
    from ..simulation.world import World


class PygameRenderer:
    """
    Pygame-based renderer for the bug simulation.

    Renders:
    - The visible square of the plane, centred on the origin
    - Bugs (sized by mass, colored by nutrition) and food
    - Sidebar with run controls, statistics and charts

    The renderer only reads the world; it never changes it.
    """

    def __init__(self, config: RendererConfig):
        """
        Initialize the renderer.

        Args:
            config: Renderer configuration
        """
        self.config = config
        self.window_width = config.window_width
        self.window_height = config.window_height
        self.sidebar_width = config.sidebar_width
        self.world_width = config.window_width - config.sidebar_width
        self.world_height = config.window_height
        self.scale = min(self.world_width, self.world_height) / (2 * config.view_extent)

        pygame.init()
        pygame.display.set_caption("Bug World")

        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        self.clock = pygame.time.Clock()

        self.font_small = pygame.font.Font(None, 18)

        self._world_surface = pygame.Surface((self.world_width, self.world_height))
        self._sidebar_surface = pygame.Surface((self.sidebar_width, self.window_height))

        self._fps_history: list[float] = []

        self.mode = SimulationMode.PAUSED
        self._pending_steps = 0

        self._init_ui()

    def _init_ui(self) -> None:
        padding = 12
        btn_width = 70
        btn_height = 26
        self.btn_run = Button(
            padding, 10, btn_width, btn_height, "Run",
            on_click=lambda: self.set_mode(SimulationMode.RUNNING),
        )
        self.btn_pause = Button(
            padding + btn_width + 4, 10, btn_width, btn_height, "Pause",
            on_click=lambda: self.set_mode(SimulationMode.PAUSED),
            active=True,
        )
        self.btn_step = Button(
            padding + (btn_width + 4) * 2, 10, btn_width, btn_height, "Step",
            on_click=self._on_step_click,
        )
        self.mode_buttons = [self.btn_run, self.btn_pause, self.btn_step]

        self.chart_population = Sparkline(90, 24, color=UI_COLORS.chart_population)
        self.chart_food = Sparkline(90, 24, color=UI_COLORS.chart_food)
        self.chart_biomass = Sparkline(90, 24, color=UI_COLORS.chart_biomass)
        self.chart_nutrition = Sparkline(90, 24, color=UI_COLORS.chart_nutrition)

        self.speed_selector = SpeedSelector(padding, 0)

    def set_mode(self, mode: SimulationMode) -> None:
        """Set simulation mode and update button states."""
        self.mode = mode
        self.btn_run.active = (mode == SimulationMode.RUNNING)
        self.btn_pause.active = (mode == SimulationMode.PAUSED)

    def _on_step_click(self) -> None:
        """Advance one tick while paused."""
        if self.mode == SimulationMode.PAUSED:
            self._pending_steps += 1

    def handle_events(self) -> bool:
        """
        Handle Pygame events.

        Returns:
            False if the window should close, True otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_SPACE:
                    if self.mode == SimulationMode.RUNNING:
                        self.set_mode(SimulationMode.PAUSED)
                    else:
                        self.set_mode(SimulationMode.RUNNING)

            for btn in self.mode_buttons:
                if btn.handle_event(event):
                    break
            else:
                self.speed_selector.handle_event(event)

        return True

    def should_step(self) -> bool:
        """Check if the world should be ticked this frame."""
        if self.mode == SimulationMode.RUNNING:
            return True
        if self._pending_steps > 0:
            self._pending_steps -= 1
            return True
        return False

    def get_steps_per_frame(self) -> int:
        """Get number of ticks to run per frame."""
        if self.mode == SimulationMode.PAUSED:
            return 1
        return self.speed_selector.speed

    def to_screen(self, position: Vector) -> tuple[int, int]:
        """Convert a world position to pixel coordinates in the world area."""
        screen_x = self.world_width / 2 + position.x * self.scale
        screen_y = self.world_height / 2 - position.y * self.scale
        return (int(screen_x), int(screen_y))

    def is_visible(self, screen_pos: tuple[int, int], radius: int) -> bool:
        """Check if a circle at a screen position overlaps the world area."""
        x, y = screen_pos
        return (
            -radius <= x <= self.world_width + radius
            and -radius <= y <= self.world_height + radius
        )

    def render(self, world: World, stats: WorldStats, history: StatsHistory) -> None:
        """
        Render the current state of the world.

        Args:
            world: The snapshot to draw
            stats: Statistics for this snapshot
            history: Recent statistics for the charts
        """
        self.screen.fill(colors.BG_DARK)

        self._render_world(world)
        self._render_sidebar(stats, history)

        self.screen.blit(self._world_surface, (self.sidebar_width, 0))
        self.screen.blit(self._sidebar_surface, (0, 0))

        pygame.display.flip()

        self._fps_history.append(self.clock.get_fps())
        if len(self._fps_history) > 60:
            self._fps_history.pop(0)

    def _render_world(self, world: World) -> None:
        self._world_surface.fill(colors.WORLD_BG)

        # Axes through the origin
        origin_x, origin_y = self.to_screen(ZERO)
        pygame.draw.line(
            self._world_surface, colors.WORLD_ORIGIN, (origin_x, 0), (origin_x, self.world_height), 1
        )
        pygame.draw.line(
            self._world_surface, colors.WORLD_ORIGIN, (0, origin_y), (self.world_width, origin_y), 1
        )

        for entity in world.entities.values():
            screen_pos = self.to_screen(entity.position)
            if isinstance(entity, Food):
                radius = self.config.food_radius
                if self.is_visible(screen_pos, radius):
                    color = colors.get_food_color(entity.quantity)
                    pygame.draw.circle(self._world_surface, color, screen_pos, radius)
            elif isinstance(entity, Bug):
                radius = max(1, int(entity.mass * self.config.bug_radius_scale))
                if self.is_visible(screen_pos, radius):
                    color = colors.get_bug_color(entity.nutrition, entity.mass)
                    pygame.draw.circle(self._world_surface, color, screen_pos, radius)
                    pygame.draw.circle(self._world_surface, colors.BUG_OUTLINE, screen_pos, radius, 1)

    def _render_sidebar(self, stats: WorldStats, history: StatsHistory) -> None:
        self._sidebar_surface.fill(colors.BG_SIDEBAR)

        pygame.draw.line(
            self._sidebar_surface,
            colors.DIVIDER,
            (self.sidebar_width - 1, 0),
            (self.sidebar_width - 1, self.window_height),
            2,
        )

        padding = 12
        y = 10

        for btn in self.mode_buttons:
            btn.render(self._sidebar_surface, self.font_small)
        y += 36

        avg_fps = float(np.mean(self._fps_history)) if self._fps_history else 0.0
        status_text = f"Tick: {stats.tick:,}   FPS: {avg_fps:.0f}"
        self._blit_text(status_text, padding, y, colors.TEXT_SECONDARY)
        y += 22

        y = self._render_divider(y, padding)
        y = self._render_stats_section(stats, history, y, padding)

        y = self._render_divider(y, padding)
        y = self._render_section_header("SPEED", y, padding)
        self.speed_selector.render(self._sidebar_surface, self.font_small, y)
        y += 35

        y = self._render_divider(y, padding)
        for hint in ["SPACE pause/resume", "ESC quit"]:
            self._blit_text(hint, padding, y, colors.TEXT_SECONDARY)
            y += 16

    def _render_stats_section(
        self, stats: WorldStats, history: StatsHistory, y: int, padding: int
    ) -> int:
        """Render the stats rows with charts and return the new y position."""
        y = self._render_section_header("LIVE STATS", y, padding)

        rows = [
            (f"Bugs: {stats.bugs_alive}", self.chart_population, history.population),
            (f"Food: {stats.food_count}", self.chart_food, history.food_count),
            (f"Biomass: {stats.biomass:.1f}", self.chart_biomass, history.biomass),
            (f"Nutrition: {stats.avg_nutrition:.2f}", self.chart_nutrition, history.avg_nutrition),
        ]
        for label, chart, series in rows:
            self._blit_text(label, padding, y + 4, colors.TEXT_PRIMARY)
            chart.rect.x = self.sidebar_width - padding - chart.rect.width
            chart.rect.y = y
            chart.render(self._sidebar_surface, list(series), min_val=0)
            y += 30

        self._blit_text(f"Avg mass: {stats.avg_mass:.2f}", padding, y, colors.TEXT_SECONDARY)
        return y + 22

    def _render_section_header(self, title: str, y: int, padding: int) -> int:
        self._blit_text(title, padding, y, UI_COLORS.accent)
        return y + 20

    def _render_divider(self, y: int, padding: int) -> int:
        pygame.draw.line(
            self._sidebar_surface, colors.DIVIDER,
            (padding, y), (self.sidebar_width - padding, y)
        )
        return y + 8

    def _blit_text(self, text: str, x: int, y: int, color: tuple[int, int, int]) -> None:
        surface = self.font_small.render(text, True, color)
        self._sidebar_surface.blit(surface, (x, y))

    def tick(self) -> float:
        """
        Advance the renderer clock and return delta time.

        Returns:
            Time elapsed since last tick in milliseconds.
        """
        return float(self.clock.tick(self.config.target_fps))

    def cleanup(self) -> None:
        """Clean up Pygame resources."""
        pygame.quit()

