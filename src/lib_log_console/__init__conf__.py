"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

import sys
from collections.abc import Callable

name = "lib_log_console"
title = "Leveled, colourised console logging for processes and browsers"
version = "0.1.0"
shell_command = "lib_log_console"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Write the metadata banner through ``writer`` one line at a time.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_console:\\n'
    """
    write = writer if writer is not None else sys.stdout.write
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    write(f"Info for {name}:\n")
    write("\n")
    for label, value in fields:
        write(f"    {label:<{pad}} = {value}\n")
