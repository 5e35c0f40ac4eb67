"""Use case turning a log call into one rendered line on a sink.

Purpose
-------
Own the line format ``<timestamp> <prefix> <message>`` and the per-level
colour schemes, then hand the result to the configured :class:`SinkPort`.

Contents
--------
* :data:`LEVEL_SCHEMES` – colour scheme applied per :class:`LogLevel`.
* :func:`format_timestamp` / :func:`format_prefix` / :func:`render_line`.
* :func:`create_emit_entry` – factory returning the emitter used by
  :class:`~lib_log_console.logger.Logger`.

System Role
-----------
Application-layer orchestrator: depends on the domain and on ports only, so
tests drive it with a fake clock and a recording sink.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from lib_log_console.application.ports import ClockPort, SinkPort
from lib_log_console.domain import ColorScheme, LogEntry, LogLevel, colorize, serialize

EmitCallable = Callable[..., LogEntry]

LEVEL_SCHEMES: Mapping[LogLevel, ColorScheme] = {
    LogLevel.DEBUG: ColorScheme(message="gray"),
    LogLevel.INFO: ColorScheme(prefix="blue"),
    LogLevel.SUCCESS: ColorScheme(timestamp="green", prefix="green"),
    LogLevel.WARNING: ColorScheme(timestamp="yellow", prefix="yellow"),
    LogLevel.ERROR: ColorScheme(timestamp="red", prefix="red"),
}


def format_timestamp(timestamp: datetime) -> str:
    """Return ``HH:MM:SS:mmm`` with unpadded milliseconds.

    Examples
    --------
    >>> format_timestamp(datetime(2023, 4, 1, 12, 34, 56, 789000))
    '12:34:56:789'
    >>> format_timestamp(datetime(2023, 4, 1, 9, 5, 7, 4000))
    '09:05:07:4'
    """
    return f"{timestamp:%H:%M:%S}:{timestamp.microsecond // 1000}"


def format_prefix(level: LogLevel, prefix: str) -> str:
    """Prepend the level glyph (if any) to the bracketed logger name."""

    glyph = level.glyph
    return f"{glyph} {prefix}" if glyph else prefix


def render_line(entry: LogEntry, prefix: str, scheme: ColorScheme | None = None) -> str:
    """Compose the coloured line for ``entry`` without positionals."""

    scheme = scheme or LEVEL_SCHEMES[entry.level]
    return " ".join(
        (
            colorize(scheme.timestamp, format_timestamp(entry.timestamp)),
            colorize(scheme.prefix, format_prefix(entry.level, prefix)),
            colorize(scheme.message, serialize(entry.message)),
        )
    )


def create_emit_entry(*, sink: SinkPort, clock: ClockPort) -> EmitCallable:
    """Build the emitter bound to ``sink`` and ``clock``.

    The returned callable takes ``(level, prefix, message, positionals)``,
    writes one line to the level's channel and returns the
    :class:`LogEntry` it rendered.
    """

    def emit(level: LogLevel, prefix: str, message: Any, positionals: tuple[Any, ...] = ()) -> LogEntry:
        entry = LogEntry(timestamp=clock.now(), level=level, message=message)
        line = render_line(entry, prefix)
        sink.write(level.channel, line, *(serialize(value) for value in positionals))
        return entry

    return emit


__all__ = [
    "EmitCallable",
    "LEVEL_SCHEMES",
    "create_emit_entry",
    "format_prefix",
    "format_timestamp",
    "render_line",
]
