"""Top-level package for the Battle City tank defence game."""

__version__ = "1.0.0"

from battle_city.core import (
    ArenaSettings,
    GameEvent,
    GamePhase,
    InputState,
    Session,
    SimulationClock,
    Tank,
    TileGrid,
)

__all__ = [
    "ArenaSettings",
    "GameEvent",
    "GamePhase",
    "InputState",
    "Session",
    "SimulationClock",
    "Tank",
    "TileGrid",
]

__all__.append("__version__")

try:
    from battle_city.pygame import BattleCityApp, run_pygame  # type: ignore[misc]
except (ImportError, RuntimeError):
    BattleCityApp = None

    def run_pygame(*_args, **_kwargs):  # type: ignore[override]
        raise RuntimeError(
            "The pygame front-end requires the optional pygame dependency. "
            "Install pygame to enable graphical gameplay."
        )

    __all__.extend(["BattleCityApp", "run_pygame"])
else:
    __all__.extend(["BattleCityApp", "run_pygame"])
