"""Game session: owns the world state and runs the per-tick update."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Iterable, List, Optional, Tuple

from battle_city.core.ai import update_enemy
from battle_city.core.clock import clamp_delta
from battle_city.core.combat import collect_power_ups, resolve_hits, tick_power_ups
from battle_city.core.entities import Base, Heading, PowerUp, Projectile, Tank, make_player
from battle_city.core.events import EventListener, GameEvent, HudSummary, InputState
from battle_city.core.grid import TileGrid
from battle_city.core.movement import update_player
from battle_city.core.projectiles import advance_projectiles
from battle_city.core.settings import ArenaSettings
from battle_city.core.waves import WaveDirector

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


class Session:
    """Own the mutable state of a Battle City match.

    A session starts in ``MENU``. :meth:`start` builds a fresh map, base,
    player and wave director and moves to ``PLAYING``. Once the phase leaves
    ``PLAYING`` no further simulation updates are applied.
    """

    def __init__(
        self,
        settings: Optional[ArenaSettings] = None,
        *,
        seed: Optional[int] = None,
        listeners: Iterable[EventListener] = (),
    ) -> None:
        self.settings = (settings or ArenaSettings()).validate()
        self.rng = random.Random(seed if seed is not None else self.settings.seed)
        self.phase = GamePhase.MENU
        self.final_score: Optional[int] = None
        self._listeners: List[EventListener] = list(listeners)

        self.ticks = 0
        self.elapsed = 0.0
        self._build_world()

    # ------------------------------------------------------------------
    # Lifecycle
    def _build_world(self) -> None:
        settings = self.settings
        # Map and base first: the player spawn point is derived from the base.
        self.grid = TileGrid(settings, rng=self.rng)
        tile = settings.tile_size
        self.base = Base(
            x=float((settings.cols // 2) * tile),
            y=float((settings.rows - 2) * tile),
            width=float(tile),
            height=float(tile),
        )
        spawn_x, spawn_y = self.spawn_point
        self.player: Tank = make_player(settings, spawn_x, spawn_y)
        self.waves = WaveDirector(settings)
        self.enemies: List[Tank] = []
        self.projectiles: List[Projectile] = []
        self.power_ups: List[PowerUp] = []
        self.frozen_timer = 0.0

    def start(self) -> None:
        self._build_world()
        self.respawn_player()
        self.final_score = None
        self.ticks = 0
        self.elapsed = 0.0
        self.phase = GamePhase.PLAYING
        logger.debug("Session started\n%s", "\n".join(self.grid.iter_rows()))

    def end_game(self) -> None:
        if self.phase is GamePhase.GAME_OVER:
            return
        self.phase = GamePhase.GAME_OVER
        self.final_score = self.player.player.score
        logger.info(
            "Game over on wave %d with score %d", self.waves.wave, self.final_score
        )
        self.emit(GameEvent.GAME_OVER)

    def destroy_base(self) -> None:
        if not self.base.alive:
            return
        self.base.alive = False
        self.emit(GameEvent.EXPLOSION)
        self.end_game()

    def respawn_player(self) -> None:
        player = self.player
        player.x, player.y = self.spawn_point
        player.heading = Heading.UP
        player.player.shield_timer = self.settings.respawn_shield
        logger.debug("Player respawned with %d lives", player.player.lives)

    # ------------------------------------------------------------------
    # Events
    def subscribe(self, listener: EventListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event)

    # ------------------------------------------------------------------
    # Properties
    @property
    def playing(self) -> bool:
        return self.phase is GamePhase.PLAYING

    @property
    def frozen(self) -> bool:
        return self.frozen_timer > 0

    @property
    def spawn_point(self) -> Tuple[float, float]:
        settings = self.settings
        tile = settings.tile_size
        return (
            self.base.x + (tile - settings.tank_size) / 2,
            self.base.y - 2 * tile + (tile - settings.tank_size) / 2,
        )

    @property
    def active_enemy_count(self) -> int:
        return sum(1 for enemy in self.enemies if enemy.active)

    def hud(self) -> HudSummary:
        traits = self.player.player
        return HudSummary(
            lives=traits.lives,
            score=traits.score,
            wave=self.waves.wave,
            enemies_remaining=self.active_enemy_count + self.waves.to_spawn,
        )

    # ------------------------------------------------------------------
    # Simulation
    def update(self, dt: float, controls: Optional[InputState] = None) -> None:
        if not self.playing:
            return
        dt = clamp_delta(dt, self.settings.max_dt)
        if dt <= 0:
            return
        controls = controls or InputState()

        update_player(self, dt, controls)
        self.waves.update(self, dt)
        if self.frozen_timer > 0:
            self.frozen_timer = max(0.0, self.frozen_timer - dt)

        advance_projectiles(self, dt)
        if not self.playing:
            return
        for enemy in self.enemies:
            update_enemy(self, enemy, dt)
        tick_power_ups(self, dt)

        resolve_hits(self)
        if not self.playing:
            return
        collect_power_ups(self)
        self.compact()

        self.ticks += 1
        self.elapsed += dt

    def compact(self) -> None:
        self.projectiles = [p for p in self.projectiles if p.active]
        self.enemies = [e for e in self.enemies if e.active]
        self.power_ups = [p for p in self.power_ups if p.active]


__all__ = ["GamePhase", "Session"]
