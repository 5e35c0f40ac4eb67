"""Execution-context detection and host lookups.

Purpose
-------
Decide once, at import time, whether the interpreter runs as a regular
process or inside a browser (Pyodide/emscripten), and expose the two
context-sensitive operations the logger needs: reading a configuration value
and choosing the default sink.

Contents
--------
* :class:`RuntimeContext` and :data:`RUNTIME_CONTEXT`.
* :func:`detect_context` – platform probe.
* :func:`get_variable` – environment or browser-global lookup.
* :func:`default_sink` – sink strategy for the detected context.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from importlib import import_module
from collections.abc import Mapping
from typing import Any

from lib_log_console.adapters.sinks import ConsoleSink, ProcessSink
from lib_log_console.application.ports.sink import SinkPort

logger = logging.getLogger(__name__)


class RuntimeContext(Enum):
    """Host surfaces the logger can write to."""

    PROCESS = "process"
    CONSOLE = "console"


def detect_context(platform: str | None = None) -> RuntimeContext:
    """Return :attr:`RuntimeContext.CONSOLE` under emscripten, else PROCESS.

    Examples
    --------
    >>> detect_context("emscripten") is RuntimeContext.CONSOLE
    True
    >>> detect_context("linux") is RuntimeContext.PROCESS
    True
    """
    platform = sys.platform if platform is None else platform
    return RuntimeContext.CONSOLE if platform == "emscripten" else RuntimeContext.PROCESS


RUNTIME_CONTEXT = detect_context()
logger.debug("lib_log_console runtime context: %s", RUNTIME_CONTEXT.value)


def get_variable(name: str, *, context: RuntimeContext | None = None, source: Any = None) -> str | None:
    """Look up a configuration value by ``name``.

    Parameters
    ----------
    name:
        Variable name, e.g. ``"DEBUG"``.
    context:
        Overrides :data:`RUNTIME_CONTEXT`.
    source:
        PROCESS: mapping used instead of :data:`os.environ`. CONSOLE: object
        whose attributes replace the browser global scope.

    Returns
    -------
    str | None
        The value (coerced to ``str`` in the console context) or ``None``.

    Examples
    --------
    >>> get_variable("DEBUG", context=RuntimeContext.PROCESS, source={"DEBUG": "app"})
    'app'
    >>> from types import SimpleNamespace
    >>> get_variable("LOG_LEVEL", context=RuntimeContext.CONSOLE, source=SimpleNamespace(LOG_LEVEL=1))
    '1'
    """
    context = RUNTIME_CONTEXT if context is None else context
    if context is RuntimeContext.PROCESS:
        environ: Mapping[str, str] = os.environ if source is None else source
        return environ.get(name)

    scope = _browser_globals() if source is None else source
    value = getattr(scope, name, None)
    return None if value is None else str(value)


def _browser_globals() -> Any:
    return import_module("js")


def default_sink(context: RuntimeContext | None = None) -> SinkPort:
    """Return the sink strategy matching ``context``."""

    context = RUNTIME_CONTEXT if context is None else context
    if context is RuntimeContext.CONSOLE:
        return ConsoleSink()
    return ProcessSink()


__all__ = [
    "RUNTIME_CONTEXT",
    "RuntimeContext",
    "default_sink",
    "detect_context",
    "get_variable",
]
