# topmark:header:start
#
#   project      : JsonWriter
#   file         : cmd_common.py
#   file_relpath : src/jsonwriter/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

These helpers encapsulate plumbing shared by several commands: resolving the
effective configuration, reading STDIN, and streaming a document to stdout.
They avoid policy (messages, which values to write).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from jsonwriter.cli.errors import (
    JsonWriterConfigError,
    JsonWriterEncodingError,
    JsonWriterIOError,
    JsonWriterUsageError,
)
from jsonwriter.config import ConfigError, MutableWriterConfig
from jsonwriter.config.logging import get_logger
from jsonwriter.core.sinks import StreamSink
from jsonwriter.core.writer import JsonWriter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from pathlib import Path

    import click

    from jsonwriter.cli.console import Console
    from jsonwriter.config import WriterConfig
    from jsonwriter.config.logging import JsonWriterLogger

logger: JsonWriterLogger = get_logger(__name__)

STDIN_MARKER: str = "-"


def get_console(ctx: click.Context) -> Console:
    """Return the console stored on the Click context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (count of ``-v`` flags, 0 if unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def resolve_writer_config(
    ctx: click.Context,
    *,
    indent: int | None = None,
    raw: bool = False,
    no_trailing_newline: bool = False,
) -> WriterConfig:
    """Load the layered configuration and apply command-line overrides.

    Args:
        ctx (click.Context): Current Click context (holds ``--config``/``--no-config``).
        indent (int | None): ``--indent`` value, or None if not given.
        raw (bool): ``--raw`` flag; disables type inference when set.
        no_trailing_newline (bool): ``--no-trailing-newline`` flag.

    Returns:
        WriterConfig: The effective, frozen configuration.

    Raises:
        JsonWriterConfigError: If a config file cannot be read or parsed.
    """
    ctx.ensure_object(dict)
    extra: tuple[Path, ...] = tuple(ctx.obj.get("config_files", ()))
    no_config: bool = bool(ctx.obj.get("no_config", False))

    try:
        draft: MutableWriterConfig = MutableWriterConfig.load_merged(
            extra_config_files=extra,
            no_config=no_config,
        )
    except ConfigError as exc:
        raise JsonWriterConfigError(str(exc)) from exc

    if indent is not None:
        draft.indent = indent
    if raw:
        draft.infer_types = False
    if no_trailing_newline:
        draft.trailing_newline = False

    config: WriterConfig = draft.freeze()
    logger.debug("Effective writer config: %s", config)
    return config


def read_stdin_bytes() -> bytes:
    """Read all of STDIN as raw bytes."""
    return sys.stdin.buffer.read()


def read_stdin_lines() -> list[str]:
    """Read STDIN as UTF-8 text and return its non-empty lines.

    Raises:
        JsonWriterEncodingError: If STDIN is not valid UTF-8.
    """
    data: bytes = read_stdin_bytes()
    try:
        text: str = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise JsonWriterEncodingError(f"STDIN is not valid UTF-8: {exc}") from exc
    return [line for line in text.splitlines() if line]


def expand_stdin_args(args: Iterable[str]) -> list[str]:
    """Replace a single ``-`` argument with the lines read from STDIN.

    Raises:
        JsonWriterUsageError: If ``-`` is given more than once.
    """
    items: list[str] = list(args)
    if items.count(STDIN_MARKER) > 1:
        raise JsonWriterUsageError("'-' (read from STDIN) may be given only once.")

    expanded: list[str] = []
    for item in items:
        if item == STDIN_MARKER:
            lines: list[str] = read_stdin_lines()
            logger.debug("Read %d line(s) from STDIN", len(lines))
            expanded.extend(lines)
        else:
            expanded.append(item)
    return expanded


def emit_document(config: WriterConfig, build: Callable[[JsonWriter], None]) -> None:
    """Stream one JSON document to the binary stdout.

    Args:
        config (WriterConfig): Effective configuration (indent, trailing newline).
        build (Callable[[JsonWriter], None]): Callback issuing the writer calls.

    Raises:
        JsonWriterIOError: If writing to stdout fails.
    """
    # Text already echoed through sys.stdout must precede the document.
    sys.stdout.flush()
    stream = sys.stdout.buffer
    writer = JsonWriter(StreamSink(stream), config.indent)
    try:
        build(writer)
        if config.trailing_newline:
            stream.write(b"\n")
        stream.flush()
    except OSError as exc:
        raise JsonWriterIOError(f"Cannot write output: {exc}") from exc
