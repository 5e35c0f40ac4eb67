"""Output sinks for the two supported execution contexts.

Purpose
-------
Implement :class:`~lib_log_console.application.ports.SinkPort` for a regular
Python process (stdout/stderr streams) and for a browser-hosted interpreter
(the JavaScript ``console`` object exposed by Pyodide).

Contents
--------
* :func:`interpolate` – ``%s``-style directive expansion for stream output.
* :class:`ProcessSink` – newline-terminated writes to stdout/stderr.
* :class:`ConsoleSink` – forwards to ``console.log/warn/error``.

System Role
-----------
Adapter layer; the runtime module picks one of these once per process.
"""

from __future__ import annotations

import re
import sys
from importlib import import_module
from collections.abc import Sequence
from typing import Any, TextIO

from lib_log_console.application.ports.sink import SinkPort

_DIRECTIVE = re.compile(r"%([sdifjo%])")


def _coerce(flag: str, value: str) -> str:
    if flag in {"d", "i"}:
        try:
            return str(int(float(value)))
        except (ValueError, OverflowError):
            return "NaN"
    if flag == "f":
        try:
            return str(float(value))
        except ValueError:
            return "NaN"
    return value


def interpolate(line: str, positionals: Sequence[str]) -> str:
    """Expand ``%s %d %i %f %j %o`` in ``line`` from ``positionals``.

    Leftover positionals are appended separated by spaces; ``%%`` collapses
    to ``%``. Without positionals the line is returned untouched.

    Examples
    --------
    >>> interpolate("got %s and %d", ["a", "4.7"])
    'got a and 4'
    >>> interpolate("100%% of", ["x", "y"])
    '100% of x y'
    """
    if not positionals:
        return line
    remaining = list(positionals)

    def _substitute(match: re.Match[str]) -> str:
        flag = match.group(1)
        if flag == "%":
            return "%"
        if not remaining:
            return match.group(0)
        return _coerce(flag, remaining.pop(0))

    text = _DIRECTIVE.sub(_substitute, line)
    if remaining:
        text = " ".join([text, *remaining])
    return text


class ProcessSink(SinkPort):
    """Write lines to stdout (``log``) or stderr (``warn``/``error``)."""

    def __init__(self, *, stdout: TextIO | None = None, stderr: TextIO | None = None) -> None:
        """Pin the target streams; ``None`` resolves ``sys.*`` on every write."""
        self._stdout = stdout
        self._stderr = stderr

    def write(self, channel: str, line: str, *positionals: str) -> None:
        stream = self._stream_for(channel)
        stream.write(interpolate(line, positionals) + "\n")

    def _stream_for(self, channel: str) -> TextIO:
        if channel == "log":
            return self._stdout if self._stdout is not None else sys.stdout
        return self._stderr if self._stderr is not None else sys.stderr


class ConsoleSink(SinkPort):
    """Forward lines to a JavaScript-style ``console`` object.

    Positionals are passed through so the console performs its own
    interpolation; no newline is appended.
    """

    def __init__(self, console: Any | None = None) -> None:
        self._console = console if console is not None else browser_console()

    def write(self, channel: str, line: str, *positionals: str) -> None:
        method = getattr(self._console, channel)
        method(line, *positionals)


def browser_console() -> Any:
    """Return ``js.console`` from the Pyodide foreign-function module."""

    return import_module("js").console


__all__ = ["ConsoleSink", "ProcessSink", "browser_console", "interpolate"]
