"""Timing of operations, measured only when debug logging is on."""

from __future__ import annotations

import logging
from time import perf_counter
from typing import Optional

_LOGGER = logging.getLogger("deltio")


def _format_duration(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.3f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.3f}µs"
    return f"{seconds * 1e9:.0f}ns"


class ActivitySpan:
    """Tracks when an activity started so its duration can be logged."""

    def __init__(self, started: Optional[float] = None) -> None:
        self._started = started

    @classmethod
    def start(cls) -> ActivitySpan:
        """Start a span; the clock is read only when debug logging is enabled."""
        if _LOGGER.isEnabledFor(logging.DEBUG):
            return cls(perf_counter())
        return cls()

    @property
    def elapsed(self) -> Optional[float]:
        """Seconds since the span started, or ``None`` if it is not timed."""
        if self._started is None:
            return None
        return perf_counter() - self._started

    def __str__(self) -> str:
        elapsed = self.elapsed
        if elapsed is None:
            return ""
        return f"({_format_duration(elapsed)})"