"""Tank movement: intent resolution, lane snapping, collision and sliding."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

from battle_city.core.entities import Heading, Projectile, Tank
from battle_city.core.events import GameEvent, InputState
from battle_city.core.geometry import inset, rects_overlap
from battle_city.core.settings import ArenaSettings

if TYPE_CHECKING:  # pragma: no cover
    from battle_city.core.session import Session


def player_intent(controls: InputState) -> Optional[Heading]:
    """Pick at most one heading from the held directions.

    Up wins over down, down over left, left over right.
    """

    if controls.up:
        return Heading.UP
    if controls.down:
        return Heading.DOWN
    if controls.left:
        return Heading.LEFT
    if controls.right:
        return Heading.RIGHT
    return None


def snap_to_lane(value: float, settings: ArenaSettings) -> float:
    """Round a top-left coordinate to the nearest half-tile lane."""

    size = settings.lane_size
    offset = settings.lane_offset
    return math.floor((value - offset) / size + 0.5) * size + offset


def turn(session: "Session", tank: Tank, heading: Heading) -> None:
    """Face ``heading``, centring the tank on the cross axis when that spot is free."""

    if heading == tank.heading:
        return
    settings = session.settings
    if heading.is_vertical:
        nx, ny = snap_to_lane(tank.x, settings), tank.y
    else:
        nx, ny = tank.x, snap_to_lane(tank.y, settings)
    # A snap that would push the tank into a wall is skipped.
    if can_move(session, tank, nx, ny):
        tank.x, tank.y = nx, ny
    tank.heading = heading


def advance(tank: Tank, dt: float) -> Tuple[float, float]:
    dx, dy = tank.heading.vector
    step = tank.speed * dt
    return tank.x + dx * step, tank.y + dy * step


def blocking_tanks(session: "Session", tank: Tank) -> Iterator[Tank]:
    if tank.is_player:
        candidates = list(session.enemies)
    else:
        candidates = [session.player, *session.enemies]
    for other in candidates:
        if other is not tank and other.active:
            yield other


def can_move(session: "Session", tank: Tank, nx: float, ny: float) -> bool:
    settings = session.settings
    if nx < 0 or ny < 0:
        return False
    if nx + tank.width > settings.width or ny + tank.height > settings.height:
        return False

    body = (nx, ny, tank.width, tank.height)
    wall_box = inset(body, settings.wall_margin)
    if session.grid.collides(*wall_box):
        return False
    if rects_overlap(wall_box, session.base.rect):
        return False

    hull = inset(body, settings.tank_margin)
    for other in blocking_tanks(session, tank):
        if rects_overlap(hull, inset(other.rect, settings.tank_margin)):
            return False
    return True


def slide(session: "Session", tank: Tank, dt: float) -> bool:
    """Nudge a blocked tank towards the centre of its lane.

    Returns True when a nudge was applied.
    """

    settings = session.settings
    vertical = tank.heading.is_vertical
    current = tank.x if vertical else tank.y
    diff = snap_to_lane(current, settings) - current
    if not settings.slide_min < abs(diff) < settings.slide_max:
        return False

    max_step = tank.speed * dt * settings.slide_factor
    step = min(max_step, diff) if diff > 0 else max(-max_step, diff)
    nx, ny = (tank.x + step, tank.y) if vertical else (tank.x, tank.y + step)
    if not can_move(session, tank, nx, ny):
        return False
    tank.x, tank.y = nx, ny
    return True


def tick_cooldown(tank: Tank, dt: float) -> None:
    if tank.fire_timer > 0:
        tank.fire_timer = max(0.0, tank.fire_timer - dt)


def update_player(session: "Session", dt: float, controls: InputState) -> None:
    tank = session.player
    traits = tank.player
    tick_cooldown(tank, dt)
    if traits.shield_timer > 0:
        traits.shield_timer = max(0.0, traits.shield_timer - dt)
    if traits.rapid_fire_timer > 0:
        traits.rapid_fire_timer = max(0.0, traits.rapid_fire_timer - dt)
        if traits.rapid_fire_timer == 0.0:
            tank.fire_cooldown = tank.base_fire_cooldown

    heading = player_intent(controls)
    if heading is not None:
        turn(session, tank, heading)
        nx, ny = advance(tank, dt)
        if can_move(session, tank, nx, ny):
            tank.x, tank.y = nx, ny
        else:
            slide(session, tank, dt)

    if controls.fire:
        shoot(session, tank)


def move_enemy(session: "Session", tank: Tank, dt: float) -> bool:
    nx, ny = advance(tank, dt)
    if not can_move(session, tank, nx, ny):
        return False
    tank.x, tank.y = nx, ny
    return True


def shoot(session: "Session", tank: Tank) -> Optional[Projectile]:
    if tank.fire_timer > 0:
        return None
    settings = session.settings
    cx, cy = tank.center
    projectile = Projectile(
        x=cx,
        y=cy,
        heading=tank.heading,
        side=tank.side,
        speed=settings.projectile_speed,
        size=settings.projectile_size,
    )
    session.projectiles.append(projectile)
    tank.fire_timer = tank.fire_cooldown
    if tank.is_player:
        session.emit(GameEvent.SHOT_FIRED)
    return projectile


__all__ = [
    "advance",
    "blocking_tanks",
    "can_move",
    "move_enemy",
    "player_intent",
    "shoot",
    "slide",
    "snap_to_lane",
    "tick_cooldown",
    "turn",
    "update_player",
]
