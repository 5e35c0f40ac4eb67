"""Domain value objects used by the console logging facade."""

from __future__ import annotations

from .colors import ColorScheme, colorize
from .entry import UNDEFINED, LogEntry, serialize
from .levels import LogLevel

__all__ = [
    "ColorScheme",
    "LogEntry",
    "LogLevel",
    "UNDEFINED",
    "colorize",
    "serialize",
]
