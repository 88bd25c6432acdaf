# topmark:header:start
#
#   project      : JsonWriter
#   file         : array.py
#   file_relpath : src/jsonwriter/cli/commands/array.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter `array` command.

Examples:
    ```console
    $ jsonwriter array x y 1 null
    ["x","y",1,null]
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonwriter.cli.cmd_common import emit_document, expand_stdin_args, resolve_writer_config
from jsonwriter.cli.options import common_writer_options
from jsonwriter.cli.values import infer_value
from jsonwriter.config.logging import get_logger

if TYPE_CHECKING:
    from jsonwriter.config import WriterConfig
    from jsonwriter.config.logging import JsonWriterLogger
    from jsonwriter.core.writer import JsonWriter

logger: JsonWriterLogger = get_logger(__name__)


@click.command(
    name="array",
    help=(
        "Write a JSON array from VALUES ('-' reads values from STDIN, one per line). "
        "Put '--' before VALUES that start with '-', such as negative numbers."
    ),
)
@click.argument("values", nargs=-1)
@common_writer_options
def array_command(
    *,
    values: tuple[str, ...],
    indent: int | None,
    raw: bool,
    no_trailing_newline: bool,
) -> None:
    """Write a JSON array.

    Args:
        values (tuple[str, ...]): Element arguments (``-`` for STDIN).
        indent (int | None): ``--indent`` override.
        raw (bool): Disable type inference.
        no_trailing_newline (bool): Omit the final newline.
    """
    ctx = click.get_current_context()
    config: WriterConfig = resolve_writer_config(
        ctx, indent=indent, raw=raw, no_trailing_newline=no_trailing_newline
    )
    items: list[str] = expand_stdin_args(values)
    logger.info("Writing array with %d element(s)", len(items))

    def build(writer: JsonWriter) -> None:
        writer.array_start()
        for item in items:
            writer.value(infer_value(item, infer_types=config.infer_types))
        writer.array_end()

    emit_document(config, build)
