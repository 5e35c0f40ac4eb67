"""System clock adapter."""

from __future__ import annotations

import time
from datetime import datetime

from lib_log_console.application.ports.time import ClockPort


class SystemClock(ClockPort):
    """Local wall-clock timestamps plus :func:`time.perf_counter` readings."""

    def now(self) -> datetime:
        """Return the current local time as a timezone-aware datetime."""
        return datetime.now().astimezone()

    def monotonic(self) -> float:
        """Return a high-resolution monotonic reading in seconds."""
        return time.perf_counter()


__all__ = ["SystemClock"]
