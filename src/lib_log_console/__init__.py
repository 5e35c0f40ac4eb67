"""Public package surface of the leveled console logger.

``Logger`` is the entry point; the colour helpers and ``serialize`` are
exported for callers that compose their own lines or assert on output.
"""

from __future__ import annotations

from .domain.colors import blue, gray, green, red, yellow
from .domain.entry import UNDEFINED, LogEntry, serialize
from .domain.levels import LogLevel
from .logger import Logger
from .runtime import RUNTIME_CONTEXT, RuntimeContext, get_variable

__all__ = [
    "Logger",
    "LogEntry",
    "LogLevel",
    "RUNTIME_CONTEXT",
    "RuntimeContext",
    "UNDEFINED",
    "blue",
    "get_variable",
    "gray",
    "green",
    "red",
    "serialize",
    "yellow",
]
