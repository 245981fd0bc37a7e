"""Project-wide settings, frame timing and error reporting."""

from __future__ import annotations

import logging
import time
from typing import Callable, Union

SUCCESS = 0
FAILURE = -1

WIN_MAX_X = 672
WIN_MAX_Y = 864
COLOR_BIT = 32

_log = logging.getLogger("ghostchase")


class GameError(Exception):
    """Raised when the game cannot continue."""


class FrameClock:
    """Measures the time per frame, capped at one display refresh."""

    def __init__(
        self,
        refresh_rate: Union[float, Callable[[], float]] = 60.0,
        clock: Callable[[], float] = time.perf_counter,
    ) -> None:
        self._refresh_rate = refresh_rate
        self._clock = clock
        self._old_time = 0.0
        self._delta_second = 0.0

    def _current_refresh_rate(self) -> float:
        rate = self._refresh_rate
        return float(rate() if callable(rate) else rate)

    def tick(self) -> float:
        """Measure the time since the previous tick and return it in seconds."""
        now = self._clock()
        delta = now - self._old_time
        self._old_time = now
        limit = 1.0 / self._current_refresh_rate()
        self._delta_second = min(delta, limit)
        return self._delta_second

    @property
    def delta_second(self) -> float:
        return self._delta_second


def report_error(message: str) -> int:
    """Log ``message`` as an error and return the failure exit status."""
    _log.error("%s", message)
    return FAILURE