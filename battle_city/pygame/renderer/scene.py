"""Rendering helpers for the Battle City pygame client.

Every function reads the session owned by ``app`` and draws to
``app.screen``; none of them mutate simulation state.
"""

from __future__ import annotations

import math

import pygame

from battle_city.core.entities import Archetype, PowerUpKind, Side, Tank
from battle_city.core.grid import Tile
from battle_city.core.session import GamePhase

BACKGROUND = pygame.Color("#000000")
BRICK_FILL = pygame.Color("#a52a2a")
BRICK_EDGE = pygame.Color("#5d1a1a")
STEEL_FILL = pygame.Color("#999999")
STEEL_EDGE = pygame.Color("#eeeeee")
BASE_ALIVE = pygame.Color("#ffd700")
BASE_DEAD = pygame.Color("#333333")
HUD_TEXT = pygame.Color("#ffd700")
TRACK_COLOR = pygame.Color("#333333")
SHIELD_COLOR = pygame.Color("cyan")
ICE_COLOR = pygame.Color(224, 247, 250, 128)

PLAYER_COLORS = (pygame.Color("#2e7d32"), pygame.Color("#1b5e20"))
ENEMY_COLORS = {
    Archetype.NORMAL: pygame.Color("#c62828"),
    Archetype.FAST: pygame.Color("#f9a825"),
    Archetype.ARMORED: pygame.Color("#4e342e"),
}
ENEMY_BARREL = pygame.Color("#212121")
POWER_UP_COLORS = {
    PowerUpKind.SHIELD: pygame.Color("#0000ff"),
    PowerUpKind.LIFE: pygame.Color("#ff00ff"),
    PowerUpKind.RAPID_FIRE: pygame.Color("#ff0000"),
    PowerUpKind.FREEZE: pygame.Color("#00ffff"),
}
PROJECTILE_COLORS = {Side.PLAYER: pygame.Color("#ffffff"), Side.ENEMY: pygame.Color("#ffff00")}


def draw_background(app) -> None:
    app.screen.fill(BACKGROUND)


def draw_grid(app) -> None:
    surface = app.screen
    grid = app.session.grid
    size = grid.tile_size
    for row, tiles in enumerate(grid.tiles):
        for col, tile in enumerate(tiles):
            if tile is Tile.EMPTY:
                continue
            x, y = col * size, row * size
            if tile is Tile.BRICK:
                rect = pygame.Rect(x + 2, y + 2, size - 4, size - 4)
                pygame.draw.rect(surface, BRICK_FILL, rect)
                pygame.draw.rect(surface, BRICK_EDGE, rect, width=1)
                # Mortar lines
                mid = y + size // 2
                pygame.draw.line(surface, BRICK_EDGE, (x + 2, mid), (x + size - 3, mid))
                pygame.draw.line(surface, BRICK_EDGE, (x + size // 2, y + 2), (x + size // 2, mid))
            else:
                pygame.draw.rect(surface, STEEL_FILL, pygame.Rect(x, y, size, size))
                pygame.draw.rect(
                    surface, STEEL_EDGE, pygame.Rect(x + 5, y + 5, size - 10, size - 10), width=1
                )


def draw_base(app) -> None:
    base = app.session.base
    color = BASE_ALIVE if base.alive else BASE_DEAD
    x, y = base.x, base.y
    points = [
        (x + base.width * 0.5, y + base.height * 0.125),
        (x + base.width * 0.875, y + base.height * 0.875),
        (x + base.width * 0.125, y + base.height * 0.875),
    ]
    pygame.draw.polygon(app.screen, color, points)
    pygame.draw.polygon(app.screen, pygame.Color("white"), points, width=1)


def draw_power_ups(app) -> None:
    surface = app.screen
    for power_up in app.session.power_ups:
        radius = int(power_up.size / 2)
        center = (int(power_up.x + radius), int(power_up.y + radius))
        # Blink during the final seconds before expiry.
        if power_up.timer < 3.0 and int(power_up.timer * 6) % 2 == 0:
            continue
        pygame.draw.circle(surface, POWER_UP_COLORS[power_up.kind], center, radius - 1)
        pygame.draw.circle(surface, pygame.Color("white"), center, radius - 1, width=2)
        label = app.font_small.render(power_up.kind.value[0].upper(), True, pygame.Color("white"))
        surface.blit(label, label.get_rect(center=center))


def _tank_sprite(tank: Tank, body: pygame.Color, barrel: pygame.Color) -> pygame.Surface:
    pad = 6
    w, h = int(tank.width), int(tank.height)
    sprite = pygame.Surface((w + pad * 2, h + pad * 2), pygame.SRCALPHA)
    cx, cy = sprite.get_width() // 2, sprite.get_height() // 2
    pygame.draw.rect(sprite, body, pygame.Rect(cx - w // 2, cy - h // 2, w, h))
    pygame.draw.rect(sprite, TRACK_COLOR, pygame.Rect(cx - w // 2 - 2, cy - h // 2, 6, h))
    pygame.draw.rect(sprite, TRACK_COLOR, pygame.Rect(cx + w // 2 - 4, cy - h // 2, 6, h))
    pygame.draw.rect(sprite, barrel, pygame.Rect(cx - 8, cy - 8, 16, 16))
    pygame.draw.rect(sprite, barrel, pygame.Rect(cx - 3, cy - h // 2 - 5, 6, 15))
    # Sprites face up; pygame rotates counter-clockwise.
    return pygame.transform.rotate(sprite, -int(tank.heading))


def _blit_tank(app, tank: Tank, body: pygame.Color, barrel: pygame.Color) -> None:
    sprite = _tank_sprite(tank, body, barrel)
    cx, cy = tank.center
    app.screen.blit(sprite, sprite.get_rect(center=(int(cx), int(cy))))


def draw_tanks(app) -> None:
    session = app.session
    surface = app.screen

    player = session.player
    _blit_tank(app, player, *PLAYER_COLORS)
    if player.player.shield_timer > 0:
        cx, cy = player.center
        radius = int(player.width * 0.8)
        ring = pygame.Rect(0, 0, radius * 2, radius * 2)
        ring.center = (int(cx), int(cy))
        # Dashed ring
        for step in range(0, 360, 20):
            pygame.draw.arc(
                surface, SHIELD_COLOR, ring, math.radians(step), math.radians(step + 10), 2
            )

    for enemy in session.enemies:
        _blit_tank(app, enemy, ENEMY_COLORS[enemy.enemy.archetype], ENEMY_BARREL)

    if session.frozen:
        draw_frozen_overlay(app)


def draw_frozen_overlay(app) -> None:
    overlay = pygame.Surface(app.screen.get_size(), pygame.SRCALPHA)
    for enemy in app.session.enemies:
        rect = pygame.Rect(
            int(enemy.x) - 2, int(enemy.y) - 2, int(enemy.width) + 4, int(enemy.height) + 4
        )
        overlay.fill(ICE_COLOR, rect)
    app.screen.blit(overlay, (0, 0))


def draw_projectiles(app) -> None:
    for projectile in app.session.projectiles:
        pygame.draw.circle(
            app.screen,
            PROJECTILE_COLORS[projectile.side],
            (int(projectile.x), int(projectile.y)),
            int(projectile.size / 2),
        )


def draw_hud(app) -> None:
    surface = app.screen
    width = surface.get_width()
    hud = app.session.hud()

    bar = pygame.Surface((width, 40), pygame.SRCALPHA)
    bar.fill((0, 0, 0, 178))
    surface.blit(bar, (0, 0))

    font = app.font_regular
    left_items = [f"LIVES: {hud.lives}", f"SCORE: {hud.score}"]
    x = 20
    for text in left_items:
        rendered = font.render(text, True, HUD_TEXT)
        surface.blit(rendered, rendered.get_rect(midleft=(x, 20)))
        x += 130
    right = font.render(f"WAVE: {hud.wave}    ENEMIES: {hud.enemies_remaining}", True, HUD_TEXT)
    surface.blit(right, right.get_rect(midright=(width - 20, 20)))


def draw_overlay(app) -> None:
    session = app.session
    if session.phase is GamePhase.PLAYING:
        return
    surface = app.screen
    overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 200))
    surface.blit(overlay, (0, 0))

    center_x = surface.get_width() // 2
    center_y = surface.get_height() // 2
    if session.phase is GamePhase.MENU:
        lines = ["BATTLE CITY", "Defend the base", "Press Enter to start"]
    else:
        lines = ["GAME OVER", f"SCORE: {session.final_score or 0}", "Press Enter to play again"]

    for idx, line in enumerate(lines):
        font = app.font_large if idx == 0 else app.font_regular
        rendered = font.render(line, True, pygame.Color("white"))
        surface.blit(rendered, rendered.get_rect(center=(center_x, center_y - 60 + idx * 48)))

    help_surface = app.font_small.render(
        app.input.bindings.help_line(), True, pygame.Color(180, 180, 180)
    )
    surface.blit(help_surface, help_surface.get_rect(center=(center_x, surface.get_height() - 36)))


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
