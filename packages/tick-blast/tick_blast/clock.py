"""Clock - tick index and pacing period for a round."""
from __future__ import annotations

from tick_blast.config import TICK_DURATION


class Clock:
    def __init__(self, period: float = TICK_DURATION) -> None:
        if period <= 0:
            raise ValueError("period must be positive")
        self._period = period
        self._tick = 0

    @property
    def period(self) -> float:
        """Seconds between ticks."""
        return self._period

    @property
    def tick(self) -> int:
        """Index of the next timeline entry to consume."""
        return self._tick

    @property
    def elapsed(self) -> float:
        return self._tick * self._period

    def advance(self) -> int:
        self._tick += 1
        return self._tick

    def reset(self) -> None:
        self._tick = 0
