# topmark:header:start
#
#   project      : JsonWriter
#   file         : object.py
#   file_relpath : src/jsonwriter/cli/commands/object.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter `object` command.

Writes one JSON object built from ``KEY=VALUE`` arguments, in argument order.
Keys are written as given; duplicate keys are not merged.

Examples:
    ```console
    $ jsonwriter object name=demo count=3 ok=true
    {"name":"demo","count":3,"ok":true}
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonwriter.cli.cmd_common import emit_document, expand_stdin_args, resolve_writer_config
from jsonwriter.cli.options import common_writer_options
from jsonwriter.cli.values import infer_value, parse_pair
from jsonwriter.config.logging import get_logger

if TYPE_CHECKING:
    from jsonwriter.config import WriterConfig
    from jsonwriter.config.logging import JsonWriterLogger
    from jsonwriter.core.writer import JsonWriter

logger: JsonWriterLogger = get_logger(__name__)


@click.command(
    name="object",
    help="Write a JSON object from KEY=VALUE pairs ('-' reads pairs from STDIN, one per line).",
)
@click.argument("pairs", nargs=-1)
@common_writer_options
def object_command(
    *,
    pairs: tuple[str, ...],
    indent: int | None,
    raw: bool,
    no_trailing_newline: bool,
) -> None:
    """Write a JSON object.

    Args:
        pairs (tuple[str, ...]): ``KEY=VALUE`` arguments (``-`` for STDIN).
        indent (int | None): ``--indent`` override.
        raw (bool): Disable type inference.
        no_trailing_newline (bool): Omit the final newline.
    """
    ctx = click.get_current_context()
    config: WriterConfig = resolve_writer_config(
        ctx, indent=indent, raw=raw, no_trailing_newline=no_trailing_newline
    )

    # Validate everything before the first byte is written.
    members: list[tuple[str, str]] = [parse_pair(arg) for arg in expand_stdin_args(pairs)]
    logger.info("Writing object with %d member(s)", len(members))

    def build(writer: JsonWriter) -> None:
        writer.object_start()
        for key, raw_value in members:
            writer.name(key)
            writer.value(infer_value(raw_value, infer_types=config.infer_types))
        writer.object_end()

    emit_document(config, build)
