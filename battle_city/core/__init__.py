"""Core simulation for Battle City, independent of rendering."""

from battle_city.core.clock import SimulationClock, clamp_delta
from battle_city.core.entities import (
    AIState,
    Archetype,
    Base,
    EnemyTraits,
    Heading,
    PlayerTraits,
    PowerUp,
    PowerUpKind,
    Projectile,
    Side,
    Tank,
    WaveState,
)
from battle_city.core.events import GameEvent, HudSummary, InputState
from battle_city.core.geometry import rectangles_overlap
from battle_city.core.grid import Tile, TileGrid, TileInfo
from battle_city.core.session import GamePhase, Session
from battle_city.core.settings import ArenaSettings
from battle_city.core.waves import WaveDirector

__all__ = [
    "AIState",
    "ArenaSettings",
    "Archetype",
    "Base",
    "EnemyTraits",
    "GameEvent",
    "GamePhase",
    "Heading",
    "HudSummary",
    "InputState",
    "PlayerTraits",
    "PowerUp",
    "PowerUpKind",
    "Projectile",
    "Session",
    "Side",
    "SimulationClock",
    "Tank",
    "Tile",
    "TileGrid",
    "TileInfo",
    "WaveDirector",
    "WaveState",
    "clamp_delta",
    "rectangles_overlap",
]
