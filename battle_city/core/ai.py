"""Finite-state controller for enemy tanks."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Tuple

from battle_city.core.entities import AIState, Heading, Tank
from battle_city.core.grid import Tile
from battle_city.core.movement import advance, can_move, shoot, tick_cooldown, turn

if TYPE_CHECKING:  # pragma: no cover
    from battle_city.core.session import Session


def reroll_state(rng: random.Random) -> AIState:
    """Mostly go for the base, sometimes wander, rarely hunt the player."""

    roll = rng.random()
    if roll < 0.7:
        return AIState.ATTACK_BASE
    if roll < 0.9:
        return AIState.PATROL
    return AIState.ATTACK_PLAYER


def heading_towards(tank: Tank, target_x: float, target_y: float) -> Heading:
    dx = target_x - tank.x
    dy = target_y - tank.y
    if abs(dx) > abs(dy):
        return Heading.RIGHT if dx > 0 else Heading.LEFT
    return Heading.DOWN if dy > 0 else Heading.UP


def choose_heading(session: "Session", tank: Tank) -> Heading:
    state = tank.enemy.ai_state
    if state is AIState.PATROL:
        return session.rng.choice(list(Heading))
    if state is AIState.ATTACK_PLAYER:
        target = session.player
        return heading_towards(tank, target.x, target.y)
    return heading_towards(tank, session.base.x, session.base.y)


def probe_ahead(tank: Tank, x: float, y: float, distance: float) -> Tuple[float, float]:
    """Point just past the front edge of a tank placed at ``(x, y)``."""

    dx, dy = tank.heading.vector
    reach = tank.width / 2 + distance
    return x + tank.width / 2 + dx * reach, y + tank.height / 2 + dy * reach


def update_enemy(session: "Session", tank: Tank, dt: float) -> None:
    settings = session.settings
    traits = tank.enemy
    rng = session.rng

    tick_cooldown(tank, dt)
    if session.frozen:
        return

    traits.direction_timer -= dt
    if rng.random() < settings.ai_reroll_chance:
        traits.ai_state = reroll_state(rng)

    if traits.direction_timer <= 0:
        turn(session, tank, choose_heading(session, tank))
        traits.direction_timer = (
            settings.direction_timer_min + rng.random() * settings.direction_timer_spread
        )

    nx, ny = advance(tank, dt)
    if can_move(session, tank, nx, ny):
        tank.x, tank.y = nx, ny
    else:
        traits.direction_timer = 0.0
        px, py = probe_ahead(tank, nx, ny, settings.ai_lookahead)
        ahead = session.grid.tile_at(px, py)
        if ahead is not None and ahead.tile is Tile.BRICK:
            shoot(session, tank)

    if rng.random() < settings.ai_random_fire_chance:
        shoot(session, tank)


__all__ = ["choose_heading", "heading_towards", "probe_ahead", "reroll_state", "update_enemy"]
