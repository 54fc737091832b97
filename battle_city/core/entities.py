"""Entity records for tanks, projectiles, the base and power-ups."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple, Union

from battle_city.core.geometry import Rect
from battle_city.core.settings import ArenaSettings


class Heading(IntEnum):
    """Axis-aligned facing in degrees, clockwise from up."""

    UP = 0
    RIGHT = 90
    DOWN = 180
    LEFT = 270

    @property
    def vector(self) -> Tuple[int, int]:
        return _HEADING_VECTORS[self]

    @property
    def is_vertical(self) -> bool:
        return self in (Heading.UP, Heading.DOWN)


_HEADING_VECTORS = {
    Heading.UP: (0, -1),
    Heading.RIGHT: (1, 0),
    Heading.DOWN: (0, 1),
    Heading.LEFT: (-1, 0),
}


class Side(Enum):
    PLAYER = "player"
    ENEMY = "enemy"


class Archetype(Enum):
    NORMAL = "normal"
    FAST = "fast"
    ARMORED = "armored"


# Unlock order used by the wave director.
ARCHETYPE_ORDER = (Archetype.NORMAL, Archetype.FAST, Archetype.ARMORED)


class AIState(Enum):
    PATROL = "patrol"
    ATTACK_BASE = "attack_base"
    ATTACK_PLAYER = "attack_player"


class PowerUpKind(Enum):
    SHIELD = "shield"
    LIFE = "life"
    RAPID_FIRE = "rapid_fire"
    FREEZE = "freeze"


@dataclass
class PlayerTraits:
    lives: int = 3
    score: int = 0
    shield_timer: float = 0.0
    rapid_fire_timer: float = 0.0


@dataclass
class EnemyTraits:
    archetype: Archetype = Archetype.NORMAL
    health: int = 1
    ai_state: AIState = AIState.PATROL
    direction_timer: float = 0.0


@dataclass
class Tank:
    """A player or enemy tank.

    Shared movement state lives on the record itself; the role-specific
    fields are carried by ``variant``.
    """

    x: float
    y: float
    variant: Union[PlayerTraits, EnemyTraits]
    width: float = 32.0
    height: float = 32.0
    heading: Heading = Heading.UP
    speed: float = 130.0
    base_fire_cooldown: float = 0.6
    fire_cooldown: float = 0.6
    fire_timer: float = 0.0
    active: bool = True

    @property
    def is_player(self) -> bool:
        return isinstance(self.variant, PlayerTraits)

    @property
    def side(self) -> Side:
        return Side.PLAYER if self.is_player else Side.ENEMY

    @property
    def player(self) -> PlayerTraits:
        if not isinstance(self.variant, PlayerTraits):
            raise TypeError("tank is not controlled by the player")
        return self.variant

    @property
    def enemy(self) -> EnemyTraits:
        if not isinstance(self.variant, EnemyTraits):
            raise TypeError("tank is not an enemy")
        return self.variant

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.x + self.width / 2, self.y + self.height / 2)


@dataclass
class Projectile:
    x: float
    y: float
    heading: Heading
    side: Side
    speed: float = 450.0
    size: float = 6.0
    active: bool = True

    @property
    def rect(self) -> Rect:
        half = self.size / 2
        return (self.x - half, self.y - half, self.size, self.size)


@dataclass
class Base:
    x: float
    y: float
    width: float
    height: float
    alive: bool = True

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.width, self.height)


@dataclass
class PowerUp:
    x: float
    y: float
    kind: PowerUpKind
    timer: float = 10.0
    size: float = 30.0
    active: bool = True

    @property
    def rect(self) -> Rect:
        return (self.x, self.y, self.size, self.size)


@dataclass
class WaveState:
    wave: int = 0
    to_spawn: int = 0
    timer: float = 0.0


def make_player(settings: ArenaSettings, x: float, y: float) -> Tank:
    return Tank(
        x=x,
        y=y,
        variant=PlayerTraits(lives=settings.starting_lives),
        width=settings.tank_size,
        height=settings.tank_size,
        speed=settings.player_speed,
        base_fire_cooldown=settings.fire_cooldown,
        fire_cooldown=settings.fire_cooldown,
    )


def make_enemy(settings: ArenaSettings, archetype: Archetype, x: float, y: float) -> Tank:
    speed = settings.fast_speed if archetype is Archetype.FAST else settings.player_speed
    health = settings.armored_health if archetype is Archetype.ARMORED else 1
    return Tank(
        x=x,
        y=y,
        variant=EnemyTraits(archetype=archetype, health=health),
        width=settings.tank_size,
        height=settings.tank_size,
        speed=speed,
        base_fire_cooldown=settings.fire_cooldown,
        fire_cooldown=settings.fire_cooldown,
    )


__all__ = [
    "AIState",
    "ARCHETYPE_ORDER",
    "Archetype",
    "Base",
    "EnemyTraits",
    "Heading",
    "PlayerTraits",
    "PowerUp",
    "PowerUpKind",
    "Projectile",
    "Side",
    "Tank",
    "WaveState",
    "make_enemy",
    "make_player",
]
