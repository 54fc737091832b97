"""Pygame-powered presentation layer for Battle City."""

from __future__ import annotations

import logging
from typing import Optional

try:
    import pygame
except ImportError as exc:  # pragma: no cover - depends on runtime environment
    raise RuntimeError(
        "The pygame package is required to run the graphical version of Battle City."
    ) from exc

from battle_city.core.clock import SimulationClock
from battle_city.core.session import GamePhase, Session
from battle_city.core.settings import ArenaSettings
from battle_city.pygame.input import KeyboardInput
from battle_city.pygame.keybindings import KeyBindings
from battle_city.pygame.renderer import (
    draw_background,
    draw_base,
    draw_grid,
    draw_hud,
    draw_overlay,
    draw_power_ups,
    draw_projectiles,
    draw_tanks,
)
from battle_city.pygame.soundscape import Soundscape

logger = logging.getLogger(__name__)


class BattleCityApp:
    """Graphical client built on top of the core simulation."""

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        seed: Optional[int] = None,
        fps: int = 60,
        muted: bool = False,
        volume: float = 1.0,
        start_in_menu: bool = True,
        bindings: Optional[KeyBindings] = None,
    ) -> None:
        pygame.init()
        pygame.font.init()

        self.settings = settings or ArenaSettings(seed=seed)
        self.fps = fps
        self.screen = pygame.display.set_mode((self.settings.width, self.settings.height))
        pygame.display.set_caption("Battle City")

        self.font_small = pygame.font.SysFont("consolas", 14, bold=True)
        self.font_regular = pygame.font.SysFont("arial", 18, bold=True)
        self.font_large = pygame.font.SysFont(None, 64)

        self.clock = pygame.time.Clock()
        self.sim_clock = SimulationClock(self.settings.max_dt)
        self.running = True

        self.input = KeyboardInput(bindings)
        self.soundscape = Soundscape(enabled=not muted)
        self.soundscape.set_volume("master", volume)
        self.session = Session(self.settings, seed=seed, listeners=[self.soundscape])

        if not start_in_menu:
            self.start_game()

    # ------------------------------------------------------------------
    @property
    def state(self) -> GamePhase:
        return self.session.phase

    def start_game(self) -> None:
        self.session.start()
        self.sim_clock.reset()
        logger.debug("Started a new session (seed=%s)", self.settings.seed)

    # ------------------------------------------------------------------
    def run(self) -> None:
        """Main pygame loop."""

        while self.running:
            self.clock.tick(self.fps)
            dt = self.sim_clock.tick(pygame.time.get_ticks() / 1000.0)
            self._handle_events()
            self._update(dt)
            self._draw()
        pygame.quit()

    def _handle_events(self) -> None:
        for event in pygame.event.get():
            self.process_event(event)

    def process_event(self, event: pygame.event.Event) -> None:
        if self.input.is_quit(event):
            self.running = False
        elif self.input.is_start(event) and self.state is not GamePhase.PLAYING:
            self.start_game()

    def _update(self, dt: float) -> None:
        if self.state is not GamePhase.PLAYING:
            return
        self.session.update(dt, self.input.snapshot())

    def _draw(self) -> None:
        draw_background(self)
        if self.state is not GamePhase.MENU:
            draw_grid(self)
            draw_base(self)
            draw_power_ups(self)
            draw_tanks(self)
            draw_projectiles(self)
            draw_hud(self)
        draw_overlay(self)
        pygame.display.flip()


def run_pygame(**kwargs: object) -> None:
    """Convenience helper for launching the pygame client."""

    app = BattleCityApp(**kwargs)
    app.run()


__all__ = ["BattleCityApp", "run_pygame"]
