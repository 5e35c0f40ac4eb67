from __future__ import annotations

from collections.abc import Iterator
from datetime import datetime

import pytest

from lib_log_console.config import DEBUG_ENV_VAR, DOTENV_ENV_VAR, LEVEL_ENV_VAR

FIXED_NOW = datetime(2023, 4, 1, 12, 34, 56, 789000)


class FixedClock:
    """Clock frozen at :data:`FIXED_NOW` with scripted monotonic readings."""

    def __init__(self, now: datetime = FIXED_NOW, readings: list[float] | None = None) -> None:
        self._now = now
        self._readings: Iterator[float] = iter(readings or [])
        self.monotonic_calls = 0

    def now(self) -> datetime:
        return self._now

    def monotonic(self) -> float:
        self.monotonic_calls += 1
        return next(self._readings, 0.0)


class RecordingSink:
    def __init__(self) -> None:
        self.writes: list[tuple[str, str, tuple[str, ...]]] = []

    def write(self, channel: str, line: str, *positionals: str) -> None:
        self.writes.append((channel, line, positionals))


@pytest.fixture(autouse=True)
def _clear_selectors(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host DEBUG/LOG_LEVEL values from leaking into tests."""

    for name in (DEBUG_ENV_VAR, LEVEL_ENV_VAR, DOTENV_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def recording_sink() -> RecordingSink:
    return RecordingSink()
