"""Rendering helpers for the pygame front-end."""

from battle_city.pygame.renderer.scene import (
    draw_background,
    draw_base,
    draw_frozen_overlay,
    draw_grid,
    draw_hud,
    draw_overlay,
    draw_power_ups,
    draw_projectiles,
    draw_tanks,
)

__all__ = [
    "draw_background",
    "draw_base",
    "draw_frozen_overlay",
    "draw_grid",
    "draw_hud",
    "draw_overlay",
    "draw_power_ups",
    "draw_projectiles",
    "draw_tanks",
]
