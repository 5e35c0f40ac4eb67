"""Configuration sources for the console logger.

Purpose
-------
Centralise the names of the configuration variables, the snapshot taken when
a :class:`~lib_log_console.logger.Logger` is built, the gating rules derived
from that snapshot, and optional ``.env`` loading.

Contents
--------
* ``DEBUG_ENV_VAR`` / ``LEVEL_ENV_VAR`` / ``DOTENV_ENV_VAR`` constants.
* :class:`LoggerSettings` – immutable selector snapshot with gating helpers.
* :func:`read_settings` – snapshot the current configuration.
* :func:`enable_dotenv` / :func:`should_use_dotenv` – python-dotenv support.

System Role
-----------
Selectors are read once per logger; nothing here is consulted on the hot
path of a log call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .domain.levels import LogLevel
from .runtime import RuntimeContext, get_variable

logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "DEBUG"
LEVEL_ENV_VAR = "LOG_LEVEL"
DOTENV_ENV_VAR = "LOG_CONSOLE_USE_DOTENV"

_ENABLE_ALL = {"1", "true"}
_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}

_DOTENV_LOADED: Path | None = None


@dataclass(slots=True, frozen=True)
class LoggerSettings:
    """Selector values captured at logger construction.

    Attributes
    ----------
    debug_selector:
        Value of ``DEBUG``; ``"1"``/``"true"`` enable every logger, any other
        defined value enables loggers whose name starts with it.
    level_selector:
        Value of ``LOG_LEVEL``; when defined only the matching level prints.
    """

    debug_selector: str | None = None
    level_selector: str | None = None

    def is_enabled(self, name: str) -> bool:
        """Return ``True`` when logging is switched on for ``name``.

        Examples
        --------
        >>> LoggerSettings(debug_selector="true").is_enabled("any")
        True
        >>> LoggerSettings(debug_selector="parser").is_enabled("parser:lexer")
        True
        >>> LoggerSettings(debug_selector="http").is_enabled("parser")
        False
        """
        selector = self.debug_selector
        if selector is None:
            return False
        return selector in _ENABLE_ALL or name.startswith(selector)

    def enabled_levels(self, name: str) -> frozenset[LogLevel]:
        """Return the levels that print for a logger called ``name``.

        The selector must equal a level name exactly (``warn`` aliases
        ``warning``); anything else silences every level.

        Examples
        --------
        >>> sorted(level.value for level in LoggerSettings("1", "warn").enabled_levels("x"))
        ['warning']
        """
        if not self.is_enabled(name):
            return frozenset()
        if self.level_selector is None:
            return frozenset(LogLevel)
        level = LogLevel.from_selector(self.level_selector)
        return frozenset() if level is None else frozenset({level})


def read_settings(*, context: RuntimeContext | None = None, source: Any = None) -> LoggerSettings:
    """Snapshot ``DEBUG`` and ``LOG_LEVEL`` from the active context."""

    return LoggerSettings(
        debug_selector=get_variable(DEBUG_ENV_VAR, context=context, source=source),
        level_selector=get_variable(LEVEL_ENV_VAR, context=context, source=source),
    )


def should_use_dotenv(*, explicit: bool | None = None, env_value: str | None = None) -> bool:
    """Decide whether ``.env`` loading is requested.

    An explicit CLI flag wins; otherwise ``env_value`` is parsed as a boolean.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(env_value="yes")
    True
    >>> should_use_dotenv()
    False
    """
    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    normalized = env_value.strip().lower()
    if normalized in _FALSY:
        return False
    return normalized in _TRUTHY


def enable_dotenv(search_from: Path | None = None) -> Path | None:
    """Load the nearest ``.env`` upwards from ``search_from`` (default: cwd).

    Existing environment variables keep precedence. Returns the resolved path
    of the loaded file, or ``None`` when none was found.
    """
    global _DOTENV_LOADED

    if search_from is None:
        found = find_dotenv(usecwd=True)
        candidate = Path(found) if found else None
    else:
        candidate = _find_upwards(search_from.resolve())

    if candidate is None:
        logger.debug("No .env file found")
        return None

    resolved = candidate.resolve()
    load_dotenv(resolved, override=False)
    _DOTENV_LOADED = resolved
    logger.debug("Loaded environment from %s", resolved)
    return resolved


def _find_upwards(start: Path) -> Path | None:
    for directory in (start, *start.parents):
        candidate = directory / ".env"
        if candidate.is_file():
            return candidate
    return None


def loaded_dotenv_path() -> Path | None:
    """Return the `.env` file loaded by :func:`enable_dotenv`, if any."""

    return _DOTENV_LOADED


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_LOADED
    _DOTENV_LOADED = None


__all__ = [
    "DEBUG_ENV_VAR",
    "DOTENV_ENV_VAR",
    "LEVEL_ENV_VAR",
    "LoggerSettings",
    "enable_dotenv",
    "loaded_dotenv_path",
    "read_settings",
    "should_use_dotenv",
]
