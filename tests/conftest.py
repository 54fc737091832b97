import random
from typing import Iterable, List

import pytest

from battle_city.core.events import GameEvent
from battle_city.core.session import Session
from battle_city.core.settings import ArenaSettings


class ScriptedRandom(random.Random):
    """Random source that replays queued rolls before falling back to ``default``."""

    def __init__(self, rolls: Iterable[float] = (), default: float = 0.99) -> None:
        super().__init__(0)
        self.rolls: List[float] = list(rolls)
        self.default = default

    def random(self) -> float:
        if self.rolls:
            return self.rolls.pop(0)
        return self.default


@pytest.fixture
def arena_settings() -> ArenaSettings:
    """Provide deterministic default geometry for gameplay tests."""

    return ArenaSettings(seed=1234)


@pytest.fixture
def open_session(arena_settings: ArenaSettings) -> Session:
    """A started session on an empty map whose random rolls never trigger."""

    session = Session(arena_settings)
    session.start()
    session.grid.clear()
    session.rng = ScriptedRandom()
    return session


@pytest.fixture
def recorded_events(open_session: Session) -> List[GameEvent]:
    events: List[GameEvent] = []
    open_session.subscribe(events.append)
    return events


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom so tests can queue exact rolls."""

    return ScriptedRandom
