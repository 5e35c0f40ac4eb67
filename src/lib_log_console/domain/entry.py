"""Ephemeral log entry and the message serialisation rules.

Purpose
-------
Hold the per-call value object and the total ``serialize`` function that
turns any message or positional argument into text.

Contents
--------
* :data:`UNDEFINED` – sentinel for an omitted message.
* :class:`LogEntry` – frozen dataclass built for every emitted line.
* :func:`serialize` – text conversion used by the formatter.

System Role
-----------
Domain layer; has no knowledge of colours, sinks, or configuration.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from .levels import LogLevel


class _Undefined:
    """Marker for "no message was passed"; renders as ``undefined``."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Any = _Undefined()


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Immutable record of a single log call.

    Attributes
    ----------
    timestamp:
        Wall-clock time of the call, in the host's local time.
    level:
        :class:`LogLevel` of the calling method.
    message:
        Primary message exactly as passed by the caller.
    """

    timestamp: datetime
    level: LogLevel
    message: Any


def serialize(value: Any) -> str:
    """Return the text form of ``value`` used in rendered lines.

    Containers are encoded as compact JSON; leaves ``json`` cannot encode
    fall back to ``str``; containers with keys ``json`` rejects render via
    ``str``. Self-referential containers raise ``ValueError``.

    Examples
    --------
    >>> serialize(UNDEFINED), serialize(None), serialize("x")
    ('undefined', 'null', 'x')
    >>> serialize({"a": 1})
    '{"a":1}'
    >>> serialize(3.5)
    '3.5'
    """
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, (dict, list, tuple)):
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
        except TypeError:
            # mapping keys json cannot encode (tuples, objects)
            return str(value)
    return str(value)


__all__ = ["LogEntry", "UNDEFINED", "serialize"]
