# topmark:header:start
#
#   project      : JsonWriter
#   file         : errors.py
#   file_relpath : src/jsonwriter/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the JsonWriter CLI.

Raise these in commands to signal errors with standardized messages and exit
codes. They prefer the project console when one is present in the Click context
and fall back to Click's default styling otherwise.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from jsonwriter.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from jsonwriter.cli.console import Console


class JsonWriterError(click.ClickException):
    """Base class for all JsonWriter CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console: Console | None = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class JsonWriterUsageError(JsonWriterError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class JsonWriterConfigError(JsonWriterError):
    """Error for configuration errors (unreadable/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class JsonWriterEncodingError(JsonWriterError):
    """Error for input that cannot be decoded."""

    exit_code = ExitCode.ENCODING_ERROR


class JsonWriterIOError(JsonWriterError):
    """Error for I/O errors reading input or writing output."""

    exit_code = ExitCode.IO_ERROR
