# topmark:header:start
#
#   project      : JsonWriter
#   file         : config.py
#   file_relpath : src/jsonwriter/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter `config` command.

Writes the effective configuration (defaults, discovered files, ``--config``
files and command-line overrides) as a JSON object.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonwriter.cli.cmd_common import emit_document, resolve_writer_config
from jsonwriter.cli.options import common_writer_options
from jsonwriter.core.dump import write_value

if TYPE_CHECKING:
    from jsonwriter.config import WriterConfig
    from jsonwriter.core.writer import JsonWriter


@click.command(
    name="config",
    help="Show the effective configuration as JSON.",
)
@common_writer_options
def config_command(
    *,
    indent: int | None,
    raw: bool,
    no_trailing_newline: bool,
) -> None:
    """Write the effective configuration.

    Args:
        indent (int | None): ``--indent`` override.
        raw (bool): ``--raw`` override (reported as ``infer_types = false``).
        no_trailing_newline (bool): Omit the final newline.
    """
    ctx = click.get_current_context()
    config: WriterConfig = resolve_writer_config(
        ctx, indent=indent, raw=raw, no_trailing_newline=no_trailing_newline
    )

    def build(writer: JsonWriter) -> None:
        write_value(writer, config)

    emit_document(config, build)
