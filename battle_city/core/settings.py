"""Tunable constants shared by every simulation subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class ArenaSettings:
    """Configuration options for a Battle City session.

    Geometry is fixed for the lifetime of a session; create a new session to
    change it.
    """

    width: int = 800
    height: int = 600
    tile_size: int = 40
    seed: Optional[int] = None

    # Map generation
    border_rows_top: int = 2
    border_rows_bottom: int = 4
    border_cols: int = 2
    brick_chance: float = 0.20
    steel_chance: float = 0.05
    collision_epsilon: float = 0.5

    # Tanks
    tank_size: int = 32
    player_speed: float = 130.0
    fast_speed: float = 170.0
    fire_cooldown: float = 0.6
    rapid_fire_cooldown: float = 0.25
    rapid_fire_duration: float = 10.0
    wall_margin: float = 6.0
    tank_margin: float = 4.0
    slide_factor: float = 1.8
    slide_min: float = 0.5
    slide_max: float = 18.0
    starting_lives: int = 3
    respawn_shield: float = 3.0
    armored_health: int = 3

    # Projectiles
    projectile_speed: float = 450.0
    projectile_size: float = 6.0

    # Power-ups
    power_up_size: float = 30.0
    power_up_lifetime: float = 10.0
    power_up_drop_chance: float = 0.2
    shield_duration: float = 10.0
    freeze_duration: float = 5.0
    kill_score: int = 100

    # Enemy AI
    ai_reroll_chance: float = 0.005
    ai_random_fire_chance: float = 0.015
    ai_lookahead: float = 15.0
    direction_timer_min: float = 1.5
    direction_timer_spread: float = 2.0

    # Waves
    wave_base_quota: int = 5
    wave_quota_step: int = 2
    spawn_interval: float = 2.0
    wave_start_delay: float = 3.0

    # Clock
    max_dt: float = 0.1

    @property
    def cols(self) -> int:
        return self.width // self.tile_size

    @property
    def rows(self) -> int:
        return self.height // self.tile_size

    @property
    def lane_size(self) -> float:
        return self.tile_size / 2

    @property
    def lane_offset(self) -> float:
        return (self.tile_size - self.tank_size) / 2

    def spawn_points(self) -> Tuple[Tuple[float, float], ...]:
        """Top-row enemy spawn positions: left, centre and right."""

        top = float(self.tile_size)
        return (
            (float(self.tile_size), top),
            (self.width / 2 - self.tile_size / 2, top),
            (float(self.width - self.tile_size * 2), top),
        )

    def validate(self) -> "ArenaSettings":
        if self.tile_size <= 0:
            raise ValueError("tile_size must be positive")
        if self.width % self.tile_size or self.height % self.tile_size:
            raise ValueError("arena dimensions must be a multiple of tile_size")
        if not 0 < self.tank_size <= self.tile_size:
            raise ValueError("tank_size must fit inside a single tile")
        if self.wall_margin * 2 >= self.tank_size or self.tank_margin * 2 >= self.tank_size:
            raise ValueError("collision margins leave no collision box")
        if self.max_dt <= 0:
            raise ValueError("max_dt must be positive")
        if self.rows <= self.border_rows_top + self.border_rows_bottom:
            raise ValueError("arena too small for its border rows")
        return self


__all__ = ["ArenaSettings"]
