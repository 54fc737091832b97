"""Frame timing for the simulation step."""

from __future__ import annotations

import math
from typing import Optional


def clamp_delta(dt: float, max_dt: float) -> float:
    """Bound a frame delta to ``[0, max_dt]``; anomalies become zero."""

    if math.isnan(dt) or dt <= 0:
        return 0.0
    return min(dt, max_dt)


class SimulationClock:
    """Turn host frame timestamps (seconds) into bounded deltas."""

    def __init__(self, max_dt: float = 0.1) -> None:
        self.max_dt = max_dt
        self._last: Optional[float] = None

    def tick(self, timestamp: float) -> float:
        last = self._last
        self._last = timestamp
        if last is None:
            return 0.0
        return clamp_delta(timestamp - last, self.max_dt)

    def reset(self) -> None:
        self._last = None


__all__ = ["SimulationClock", "clamp_delta"]
