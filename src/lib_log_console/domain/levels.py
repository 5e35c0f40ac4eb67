"""Log level abstraction for the console facade.

Purpose
-------
Name the five levels a :class:`~lib_log_console.logger.Logger` exposes and
attach the presentation metadata (glyph, output channel) each one needs.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_GLYPH_TABLE`` / ``_CHANNEL_TABLE`` constants mapping levels to prefix
  glyphs and sink channels.

System Role
-----------
Levels are matched by equality, never compared by severity: a ``LOG_LEVEL``
selector switches on exactly one level. The enum therefore carries no
ordering helpers.
"""

from __future__ import annotations

import logging
from enum import Enum


class LogLevel(Enum):
    """Enumerated logging levels used throughout the system."""

    DEBUG = "debug"
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"

    @property
    def severity(self) -> str:
        """Return the lowercase level name a ``LOG_LEVEL`` selector must equal."""

        return self.value

    @property
    def glyph(self) -> str:
        """Return the glyph rendered in front of the prefix, or ``""``."""

        return _GLYPH_TABLE[self]

    @property
    def channel(self) -> str:
        """Return the sink channel (``log``, ``warn`` or ``error``)."""

        return _CHANNEL_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant closest to this level."""

        if self is LogLevel.SUCCESS:
            return logging.INFO
        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        """Resolve ``name`` case-insensitively; ``warn`` aliases ``warning``.

        Examples
        --------
        >>> LogLevel.from_name("WARN") is LogLevel.WARNING
        True
        """
        normalized = name.strip().lower()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_selector(cls, selector: str) -> "LogLevel | None":
        """Return the level whose :attr:`severity` equals ``selector`` exactly.

        Only the ``warn`` alias is translated; case and whitespace are not
        normalised, so ``"WARNING"`` selects nothing.

        Examples
        --------
        >>> LogLevel.from_selector("warn") is LogLevel.WARNING
        True
        >>> LogLevel.from_selector("WARNING") is None
        True
        """
        selector = _ALIASES.get(selector, selector)
        for level in cls:
            if level.severity == selector:
                return level
        return None


_ALIASES = {"warn": "warning"}

_GLYPH_TABLE = {
    LogLevel.DEBUG: "",
    LogLevel.INFO: "",
    LogLevel.SUCCESS: "✔",
    LogLevel.WARNING: "⚠",
    LogLevel.ERROR: "✖",
}
# Glyphs placed before the bracketed logger name.

_CHANNEL_TABLE = {
    LogLevel.DEBUG: "log",
    LogLevel.INFO: "log",
    LogLevel.SUCCESS: "log",
    LogLevel.WARNING: "warn",
    LogLevel.ERROR: "error",
}


__all__ = ["LogLevel"]
