"""Enemy wave pacing."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from battle_city.core.entities import ARCHETYPE_ORDER, Archetype, Tank, WaveState, make_enemy
from battle_city.core.settings import ArenaSettings

if TYPE_CHECKING:  # pragma: no cover
    from battle_city.core.session import Session

logger = logging.getLogger(__name__)

SPAWNING = "spawning"
WAITING_FOR_CLEAR = "waiting_for_clear"
ADVANCE = "advance"


class WaveDirector:
    """Spawn enemies one at a time and open the next wave once the field is clear."""

    def __init__(self, settings: ArenaSettings, state: Optional[WaveState] = None) -> None:
        self.settings = settings
        self.state = state or WaveState()

    @property
    def wave(self) -> int:
        return self.state.wave

    @property
    def to_spawn(self) -> int:
        return self.state.to_spawn

    def quota(self, wave: int) -> int:
        return self.settings.wave_base_quota + self.settings.wave_quota_step * (wave - 1)

    def unlocked_archetypes(self, wave: int) -> tuple[Archetype, ...]:
        return ARCHETYPE_ORDER[: max(1, min(len(ARCHETYPE_ORDER), wave))]

    def phase(self, active_enemies: int) -> str:
        if self.state.to_spawn > 0:
            return SPAWNING
        if active_enemies > 0:
            return WAITING_FOR_CLEAR
        return ADVANCE

    def update(self, session: "Session", dt: float) -> Optional[Tank]:
        state = self.state
        phase = self.phase(session.active_enemy_count)
        if phase == SPAWNING:
            state.timer -= dt
            if state.timer > 0:
                return None
            enemy = self.spawn(session)
            state.timer = self.settings.spawn_interval
            state.to_spawn -= 1
            return enemy
        if phase == ADVANCE:
            self.advance()
        return None

    def advance(self) -> None:
        state = self.state
        state.wave += 1
        state.to_spawn = self.quota(state.wave)
        state.timer = self.settings.wave_start_delay
        logger.debug("Wave %d begins with %d enemies", state.wave, state.to_spawn)

    def spawn(self, session: "Session") -> Tank:
        rng = session.rng
        x, y = rng.choice(self.settings.spawn_points())
        archetype = rng.choice(self.unlocked_archetypes(self.state.wave))
        enemy = make_enemy(self.settings, archetype, x, y)
        session.enemies.append(enemy)
        logger.debug("Spawned %s enemy at (%.0f, %.0f)", archetype.value, x, y)
        return enemy


__all__ = ["ADVANCE", "SPAWNING", "WAITING_FOR_CLEAR", "WaveDirector"]
