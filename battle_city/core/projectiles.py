"""Projectile flight and impacts against the map and the base."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from battle_city.core.entities import Projectile
from battle_city.core.events import GameEvent
from battle_city.core.geometry import rects_overlap
from battle_city.core.grid import Tile

if TYPE_CHECKING:  # pragma: no cover
    from battle_city.core.session import Session

logger = logging.getLogger(__name__)


def step_projectile(session: "Session", projectile: Projectile, dt: float) -> None:
    settings = session.settings
    dx, dy = projectile.heading.vector
    projectile.x += dx * projectile.speed * dt
    projectile.y += dy * projectile.speed * dt

    if not (0 <= projectile.x <= settings.width and 0 <= projectile.y <= settings.height):
        projectile.active = False
        return

    hit = session.grid.tile_at(projectile.x, projectile.y)
    if hit is not None and hit.tile is not Tile.EMPTY:
        if hit.tile is Tile.BRICK:
            session.grid.set_tile(hit.row, hit.col, Tile.EMPTY)
            session.emit(GameEvent.EXPLOSION)
        projectile.active = False
        return

    if rects_overlap(projectile.rect, session.base.rect):
        projectile.active = False
        logger.debug("Base struck by %s projectile", projectile.side.value)
        session.destroy_base()


def advance_projectiles(session: "Session", dt: float) -> None:
    for projectile in session.projectiles:
        if not projectile.active:
            continue
        step_projectile(session, projectile, dt)
        if not session.playing:
            return


__all__ = ["advance_projectiles", "step_projectile"]
