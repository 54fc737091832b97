"""Projectile versus tank resolution, rewards and power-up effects."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from battle_city.core.entities import PowerUp, PowerUpKind, Projectile, Side, Tank
from battle_city.core.events import GameEvent
from battle_city.core.geometry import rects_overlap

if TYPE_CHECKING:  # pragma: no cover
    from battle_city.core.session import Session

logger = logging.getLogger(__name__)


def resolve_hits(session: "Session") -> None:
    for projectile in session.projectiles:
        if not projectile.active:
            continue
        if projectile.side is Side.PLAYER:
            _hit_enemies(session, projectile)
        else:
            _hit_player(session, projectile)
        if not session.playing:
            return


def _hit_enemies(session: "Session", projectile: Projectile) -> None:
    for enemy in session.enemies:
        if enemy.active and rects_overlap(projectile.rect, enemy.rect):
            projectile.active = False
            damage_enemy(session, enemy)
            return


def _hit_player(session: "Session", projectile: Projectile) -> None:
    player = session.player
    traits = player.player
    if traits.shield_timer > 0:
        return
    if not rects_overlap(projectile.rect, player.rect):
        return
    projectile.active = False
    traits.lives -= 1
    session.emit(GameEvent.EXPLOSION)
    if traits.lives <= 0:
        session.end_game()
    else:
        session.respawn_player()


def damage_enemy(session: "Session", enemy: Tank) -> bool:
    """Apply one point of damage; return True if the enemy was destroyed."""

    traits = enemy.enemy
    traits.health -= 1
    if traits.health > 0:
        return False

    settings = session.settings
    enemy.active = False
    session.player.player.score += settings.kill_score
    session.emit(GameEvent.EXPLOSION)
    if session.rng.random() < settings.power_up_drop_chance:
        spawn_power_up(session, enemy.x, enemy.y, session.rng.choice(list(PowerUpKind)))
    return True


def spawn_power_up(session: "Session", x: float, y: float, kind: PowerUpKind) -> PowerUp:
    settings = session.settings
    power_up = PowerUp(
        x=x,
        y=y,
        kind=kind,
        timer=settings.power_up_lifetime,
        size=settings.power_up_size,
    )
    session.power_ups.append(power_up)
    logger.debug("Power-up %s dropped at (%.0f, %.0f)", kind.value, x, y)
    return power_up


def tick_power_ups(session: "Session", dt: float) -> None:
    for power_up in session.power_ups:
        power_up.timer -= dt
        if power_up.timer <= 0:
            power_up.active = False


def collect_power_ups(session: "Session") -> Optional[PowerUpKind]:
    collected: Optional[PowerUpKind] = None
    player = session.player
    for power_up in session.power_ups:
        if power_up.active and rects_overlap(player.rect, power_up.rect):
            apply_power_up(session, power_up.kind)
            power_up.active = False
            collected = power_up.kind
    return collected


def apply_power_up(session: "Session", kind: PowerUpKind) -> None:
    settings = session.settings
    player = session.player
    traits = player.player
    if kind is PowerUpKind.SHIELD:
        traits.shield_timer = settings.shield_duration
    elif kind is PowerUpKind.LIFE:
        traits.lives += 1
    elif kind is PowerUpKind.RAPID_FIRE:
        player.fire_cooldown = settings.rapid_fire_cooldown
        traits.rapid_fire_timer = settings.rapid_fire_duration
    elif kind is PowerUpKind.FREEZE:
        # Re-collecting restarts the countdown rather than adding to it.
        session.frozen_timer = settings.freeze_duration
    session.emit(GameEvent.POWER_UP_COLLECTED)
    logger.debug("Power-up %s collected", kind.value)


__all__ = [
    "apply_power_up",
    "collect_power_ups",
    "damage_enemy",
    "resolve_hits",
    "spawn_power_up",
    "tick_power_ups",
]
