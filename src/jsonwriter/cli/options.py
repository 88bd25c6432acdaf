# topmark:header:start
#
#   project      : JsonWriter
#   file         : options.py
#   file_relpath : src/jsonwriter/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config, writer
settings) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from jsonwriter.cli.cli_types import ColorMode, EnumChoiceParam
from jsonwriter.cli.errors import JsonWriterUsageError
from jsonwriter.config.logging import TRACE_LEVEL

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the verbose and quiet counts.

    Args:
        verbose_count (int): Number of times ``-v`` is passed.
        quiet_count (int): Number of times ``-q`` is passed.

    Returns:
        int: The logging level.

    Raises:
        JsonWriterUsageError: If both verbose and quiet flags are used.

    Behavior:
        ``-vvv`` sets TRACE, ``-vv`` DEBUG, ``-v`` INFO, ``-q`` ERROR.
        Default level is WARNING so config problems are reported on stderr.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise JsonWriterUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return TRACE_LEVEL
    if verbose_count == 2:  # -vv
        return logging.DEBUG
    if verbose_count == 1:  # -v
        return logging.INFO

    if quiet_count >= 1:  # -q
        return logging.ERROR

    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors on stderr.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color for console messages: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--config`` and ``--no-config`` options to a command."""
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(path_type=Path, dir_okay=False),
        multiple=True,
        help="Merge settings from this TOML file (repeatable; later files win).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml and jsonwriter.toml in the current directory.",
    )(f)
    return f


def common_writer_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add options overriding the writer settings (indent, type inference, newline)."""
    f = click.option(
        "-i",
        "--indent",
        "indent",
        type=click.IntRange(min=0),
        default=None,
        help="Spaces per nesting level; 0 writes compact JSON.",
    )(f)
    f = click.option(
        "--raw",
        "raw",
        is_flag=True,
        help="Write every value as a string (no number/boolean/null inference).",
    )(f)
    f = click.option(
        "--no-trailing-newline",
        "no_trailing_newline",
        is_flag=True,
        help="Do not terminate the document with a newline.",
    )(f)
    return f
