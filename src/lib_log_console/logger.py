"""Leveled console logger façade.

Purpose
-------
Expose the small, ergonomic :class:`Logger` host code instantiates by name.
Construction snapshots the ``DEBUG``/``LOG_LEVEL`` selectors and freezes the
set of levels that print; every call then either returns immediately or
renders one coloured line through the emitter built by
:func:`~lib_log_console.application.use_cases.create_emit_entry`.

Contents
--------
* :class:`Logger` – per-level methods, ``extend`` and ``only``.
* :data:`DEFAULT_SINK` / :data:`DEFAULT_CLOCK` – collaborators chosen once
  per process.

System Role
-----------
Outer shell of the package: wires configuration, the runtime-selected sink
and the system clock into the application use case.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .adapters.clock import SystemClock
from .application.ports import ClockPort, SinkPort
from .application.use_cases.emit_entry import create_emit_entry
from .config import LoggerSettings, read_settings
from .domain.colors import gray
from .domain.entry import UNDEFINED, serialize
from .domain.levels import LogLevel
from .runtime import default_sink

StopCallable = Callable[..., None]

DEFAULT_SINK: SinkPort = default_sink()
DEFAULT_CLOCK: ClockPort = SystemClock()


def _noop_stop(message: Any = UNDEFINED, *positionals: Any) -> None:
    return None


class Logger:
    """Named logger writing human-readable, coloured lines.

    Parameters
    ----------
    name:
        Logger name rendered as ``[name]``; also matched against ``DEBUG``.
    sink:
        Output strategy; defaults to the one selected for the runtime context.
    clock:
        Time source for timestamps and ``info`` durations.
    settings:
        Selector snapshot; read from the environment when omitted.

    Examples
    --------
    >>> from datetime import datetime
    >>> class _Clock:
    ...     def now(self): return datetime(2023, 4, 1, 12, 34, 56, 789000)
    ...     def monotonic(self): return 0.0
    >>> class _Sink:
    ...     def write(self, channel, line, *positionals): print(channel, repr(line))
    >>> log = Logger("parser", sink=_Sink(), clock=_Clock(), settings=LoggerSettings("1"))
    >>> log.extend("lexer").prefix
    '[parser:lexer]'
    >>> log.warning("careful")
    warn '\\x1b[33m12:34:56:789\\x1b[0m \\x1b[33m⚠ [parser]\\x1b[0m careful'
    """

    __slots__ = ("_name", "_prefix", "_sink", "_clock", "_enabled", "_levels", "_emit")

    def __init__(
        self,
        name: str,
        *,
        sink: SinkPort | None = None,
        clock: ClockPort | None = None,
        settings: LoggerSettings | None = None,
    ) -> None:
        self._name = name
        self._prefix = f"[{name}]"
        self._sink = sink if sink is not None else DEFAULT_SINK
        self._clock = clock if clock is not None else DEFAULT_CLOCK

        settings = settings if settings is not None else read_settings()
        self._enabled = settings.is_enabled(name)
        self._levels = settings.enabled_levels(name)
        self._emit = create_emit_entry(sink=self._sink, clock=self._clock)

    @property
    def name(self) -> str:
        return self._name

    @property
    def prefix(self) -> str:
        return self._prefix

    @property
    def enabled(self) -> bool:
        """``True`` when ``DEBUG`` switched this logger on."""
        return self._enabled

    @property
    def levels(self) -> frozenset[LogLevel]:
        """Levels that print for this instance, fixed at construction."""
        return self._levels

    def is_level_enabled(self, level: LogLevel | str) -> bool:
        if isinstance(level, str):
            level = LogLevel.from_name(level)
        return level in self._levels

    def extend(self, domain: str) -> "Logger":
        """Return a child logger named ``<name>:<domain>``.

        The child re-reads the selectors; it shares only the sink and clock.
        """
        return Logger(f"{self._name}:{domain}", sink=self._sink, clock=self._clock)

    def debug(self, message: Any = UNDEFINED, *positionals: Any) -> None:
        self._log(LogLevel.DEBUG, message, positionals)

    def info(self, message: Any = UNDEFINED, *positionals: Any) -> StopCallable:
        """Log ``message`` and return a callable that logs the elapsed time.

        Calling the returned function with a closing message emits a second
        info line ending in the milliseconds elapsed since this call.
        """
        if LogLevel.INFO not in self._levels:
            return _noop_stop

        started = self._clock.monotonic()
        self._emit(LogLevel.INFO, self._prefix, message, positionals)

        def stop(closing: Any = UNDEFINED, *closing_positionals: Any) -> None:
            elapsed_ms = (self._clock.monotonic() - started) * 1000
            text = f"{serialize(closing)} {gray(f'{elapsed_ms:.2f}ms')}"
            self._emit(LogLevel.INFO, self._prefix, text, closing_positionals)

        return stop

    def success(self, message: Any = UNDEFINED, *positionals: Any) -> None:
        self._log(LogLevel.SUCCESS, message, positionals)

    def warning(self, message: Any = UNDEFINED, *positionals: Any) -> None:
        self._log(LogLevel.WARNING, message, positionals)

    warn = warning

    def error(self, message: Any = UNDEFINED, *positionals: Any) -> None:
        self._log(LogLevel.ERROR, message, positionals)

    def only(self, callback: Callable[[], Any]) -> None:
        """Run ``callback`` when logging is enabled, regardless of level."""
        if self._enabled:
            callback()

    def _log(self, level: LogLevel, message: Any, positionals: tuple[Any, ...]) -> None:
        if level not in self._levels:
            return
        self._emit(level, self._prefix, message, positionals)

    def __repr__(self) -> str:
        return f"Logger({self._name!r})"


__all__ = ["DEFAULT_CLOCK", "DEFAULT_SINK", "Logger", "StopCallable"]
