"""Sink port describing where rendered lines go.

Purpose
-------
Define the narrow protocol between the formatter and the host output surface
so the process (stream) and console (browser) strategies can be swapped
without touching the logger.

Contents
--------
* :class:`SinkPort` – runtime-checkable protocol with a single ``write``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SinkPort(Protocol):
    """Deliver one rendered line to a named channel."""

    def write(self, channel: str, line: str, *positionals: str) -> None:
        """Emit ``line`` on ``channel`` (``log``, ``warn`` or ``error``).

        ``positionals`` are already serialised and are handed to the host for
        ``%s``-style interpolation rather than joined up front.
        """


__all__ = ["SinkPort"]
