# topmark:header:start
#
#   project      : JsonWriter
#   file         : main.py
#   file_relpath : src/jsonwriter/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter Click CLI: a group holding shared options plus the subcommands.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``console``: the [`Console`][jsonwriter.cli.console.Console] for
  user-facing messages,
- ``verbosity_level``: the ``-v`` count,
- ``config_files`` / ``no_config``: inputs for configuration discovery.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import click

from jsonwriter.cli.cli_types import ColorMode
from jsonwriter.cli.commands.array import array_command
from jsonwriter.cli.commands.config import config_command
from jsonwriter.cli.commands.escape import escape_command
from jsonwriter.cli.commands.object import object_command
from jsonwriter.cli.commands.version import version_command
from jsonwriter.cli.console import Console
from jsonwriter.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from jsonwriter.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

    from jsonwriter.config.logging import JsonWriterLogger

logger: JsonWriterLogger = get_logger(__name__)


def resolve_color(color_mode: ColorMode | None, *, stdout_isatty: bool | None = None) -> bool:
    """Decide whether console messages are styled.

    An explicit ``--color always|never`` wins. Otherwise ``FORCE_COLOR`` (set and
    not ``"0"``) enables and ``NO_COLOR`` (set to anything) disables styling; if
    neither is set, messages are styled only when stdout is a terminal.

    Args:
        color_mode (ColorMode | None): Parsed ``--color`` value, None if not given.
        stdout_isatty (bool | None): TTY state to assume instead of probing stdout.

    Returns:
        bool: True if ANSI styles should be emitted.
    """
    if color_mode is ColorMode.ALWAYS:
        return True
    if color_mode is ColorMode.NEVER:
        return False

    force_color: str | None = os.environ.get("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if "NO_COLOR" in os.environ:
        return False

    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return stdout_isatty


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, config inputs) on the context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_files (tuple[Path, ...]): Extra config files from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.ensure_object(dict)

    log_level: int = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    # JSONWRITER_LOG_LEVEL wins over -v/-q for internal logging.
    env_level: int | None = resolve_env_log_level()
    setup_logging(level=env_level if env_level is not None else log_level)

    enable_color: bool = resolve_color(ColorMode.NEVER if no_color else color_mode)
    ctx.color = enable_color
    ctx.obj["console"] = Console(color=enable_color)

    ctx.obj["config_files"] = config_files
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="JsonWriter CLI: stream JSON objects, arrays and string literals to stdout.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Entry point for the JsonWriter CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )
    console: Console = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.echo("Hint: use 'jsonwriter object KEY=VALUE ...' to write an object.")
        console.echo()
        console.echo(ctx.get_help())


cli.add_command(object_command)

cli.add_command(array_command)

cli.add_command(escape_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
