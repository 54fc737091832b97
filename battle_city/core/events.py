"""Contracts between the simulation core and its collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class GameEvent(Enum):
    """Audible moments reported by the simulation."""

    SHOT_FIRED = "shot_fired"
    EXPLOSION = "explosion"
    POWER_UP_COLLECTED = "power_up_collected"
    GAME_OVER = "game_over"


# Listeners are fire-and-forget; the return value is ignored.
EventListener = Callable[[GameEvent], None]


@dataclass(frozen=True)
class InputState:
    """Snapshot of the logical controls for one tick."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    fire: bool = False


@dataclass(frozen=True)
class HudSummary:
    lives: int
    score: int
    wave: int
    enemies_remaining: int


__all__ = ["EventListener", "GameEvent", "HudSummary", "InputState"]
