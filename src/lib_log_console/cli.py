"""Click command group for ``lib_log_console``.

Purpose
-------
Give packaging checks and curious users a way to see the logger's output
without writing code: print the metadata banner, emit one line per level, or
show the level table rendered with Rich.

Contents
--------
* :func:`cli` – root group handling ``--version`` and ``--use-dotenv``.
* :func:`cli_info`, :func:`cli_demo`, :func:`cli_levels` – subcommands.
* :func:`summary_info` – banner text shared with tests.
* :func:`main` – test-friendly runner returning an exit code.
"""

from __future__ import annotations

import logging
import os
from dataclasses import replace
from datetime import datetime
from collections.abc import Sequence

import click
from rich.console import Console
from rich.table import Table
from rich.text import Text

from . import __init__conf__
from . import config as log_config
from .application.use_cases.emit_entry import render_line
from .domain.entry import LogEntry
from .domain.levels import LogLevel
from .logger import Logger

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def summary_info() -> str:
    """Return the metadata banner printed by ``info``.

    Examples
    --------
    >>> "version" in summary_info()
    True
    """
    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also enabled by {log_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, use_dotenv: bool) -> None:
    """Leveled, colourised console logging."""

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    env_toggle = os.getenv(log_config.DOTENV_ENV_VAR)
    if log_config.should_use_dotenv(explicit=explicit, env_value=env_toggle):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(summary_info(), nl=False)
    loaded = log_config.loaded_dotenv_path()
    if loaded is not None:
        click.echo(f"    dotenv        = {loaded}")


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", default="demo", show_default=True, help="Logger name rendered in the prefix.")
@click.option("--force", is_flag=True, help="Print even when DEBUG does not select this logger.")
@click.option("--level", "level_selector", default=None, help="Print only this level (overrides LOG_LEVEL).")
def cli_demo(name: str, force: bool, level_selector: str | None) -> None:
    """Emit one sample line per level."""

    settings = log_config.read_settings()
    if force:
        settings = replace(settings, debug_selector="1")
    if level_selector is not None:
        settings = replace(settings, level_selector=level_selector)

    log = Logger(name, settings=settings)
    stop = log.info("starting demo")
    log.debug("payload %s", {"step": 1})
    log.success("step %d finished", 1)
    log.warning("disk usage at %d%%", 93)
    log.error("could not reach %s", "example.org")
    stop("demo done")


@cli.command("levels", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--name", default="demo", show_default=True, help="Logger name used in the sample column.")
def cli_levels(name: str) -> None:
    """Show each level's glyph, channel, stdlib level and a rendered sample."""

    table = Table(title="lib_log_console levels")
    table.add_column("Level")
    table.add_column("Glyph")
    table.add_column("Channel")
    table.add_column("logging")
    table.add_column("Sample")
    now = datetime.now().astimezone()
    for level in LogLevel:
        sample = render_line(LogEntry(timestamp=now, level=level, message="message"), f"[{name}]")
        table.add_row(
            level.severity,
            level.glyph or "-",
            level.channel,
            logging.getLevelName(level.to_python_level()),
            Text.from_ansi(sample),
        )
    Console().print(table)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command group and return its exit code.

    Examples
    --------
    >>> main(["--version"])
    lib_log_console version 0.1.0
    0
    """
    args = list(argv) if argv is not None else None
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, standalone_mode=False)
    except click.ClickException as error:
        error.show()
        return error.exit_code
    return 0


__all__ = ["cli", "main", "summary_info"]
