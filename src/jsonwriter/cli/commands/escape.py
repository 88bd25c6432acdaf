# topmark:header:start
#
#   project      : JsonWriter
#   file         : escape.py
#   file_relpath : src/jsonwriter/cli/commands/escape.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter `escape` command.

Writes TEXT (or raw STDIN) as a single quoted JSON string literal. STDIN is
read as bytes and escaped without decoding, so control bytes and non-UTF-8
input reach the escaping routine unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonwriter.cli.cmd_common import (
    STDIN_MARKER,
    emit_document,
    read_stdin_bytes,
    resolve_writer_config,
)
from jsonwriter.core.escaping import encode_text

if TYPE_CHECKING:
    from jsonwriter.config import WriterConfig
    from jsonwriter.core.writer import JsonWriter


@click.command(
    name="escape",
    help="Write TEXT as a JSON string literal (reads STDIN when TEXT is omitted or '-').",
)
@click.argument("text", required=False)
@click.option(
    "--no-trailing-newline",
    "no_trailing_newline",
    is_flag=True,
    help="Do not terminate the literal with a newline.",
)
def escape_command(*, text: str | None, no_trailing_newline: bool) -> None:
    """Write a JSON string literal.

    Args:
        text (str | None): The text to escape; None or ``-`` reads STDIN.
        no_trailing_newline (bool): Omit the final newline.
    """
    ctx = click.get_current_context()
    config: WriterConfig = resolve_writer_config(ctx, no_trailing_newline=no_trailing_newline)

    data: bytes = (
        read_stdin_bytes() if text is None or text == STDIN_MARKER else encode_text(text)
    )

    def build(writer: JsonWriter) -> None:
        writer.value_str(data)

    emit_document(config, build)
