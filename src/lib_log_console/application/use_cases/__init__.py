"""Use cases of the console logging facade."""

from __future__ import annotations

from .emit_entry import LEVEL_SCHEMES, create_emit_entry, render_line

__all__ = ["LEVEL_SCHEMES", "create_emit_entry", "render_line"]
