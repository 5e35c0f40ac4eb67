"""ANSI colour helpers and per-role colour schemes.

The helpers wrap text unconditionally: there is no terminal capability
detection, so the same bytes are produced in a TTY, a pipe, or a browser
console.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

_RESET = "\x1b[0m"


def _wrap(code: int, text: str) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def yellow(text: str) -> str:
    """Wrap ``text`` in the yellow foreground escape.

    Examples
    --------
    >>> yellow("x")
    '\\x1b[33mx\\x1b[0m'
    """
    return _wrap(33, text)


def blue(text: str) -> str:
    return _wrap(34, text)


def gray(text: str) -> str:
    return _wrap(90, text)


def red(text: str) -> str:
    return _wrap(31, text)


def green(text: str) -> str:
    return _wrap(32, text)


COLOR_FUNCTIONS: Mapping[str, Callable[[str], str]] = {
    "yellow": yellow,
    "blue": blue,
    "gray": gray,
    "red": red,
    "green": green,
}


def colorize(color: str | None, text: str) -> str:
    """Apply the named colour to ``text``; ``None`` leaves it untouched."""

    if color is None:
        return text
    try:
        return COLOR_FUNCTIONS[color](text)
    except KeyError as exc:
        raise ValueError(f"Unknown color: {color!r}") from exc


@dataclass(slots=True, frozen=True)
class ColorScheme:
    """Colour assignment for the three rendered roles of a log line."""

    timestamp: str = "gray"
    prefix: str = "gray"
    message: str | None = None

    def __post_init__(self) -> None:
        for role in (self.timestamp, self.prefix, self.message):
            if role is not None and role not in COLOR_FUNCTIONS:
                raise ValueError(f"Unknown color: {role!r}")


__all__ = [
    "COLOR_FUNCTIONS",
    "ColorScheme",
    "blue",
    "colorize",
    "gray",
    "green",
    "red",
    "yellow",
]
