# topmark:header:start
#
#   project      : JsonWriter
#   file         : version.py
#   file_relpath : src/jsonwriter/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter `version` command.

Prints the installed JsonWriter version. The JSON form is produced by the
streaming writer itself, always compact, regardless of configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonwriter.cli.cli_types import EnumChoiceParam, OutputFormat
from jsonwriter.cli.cmd_common import emit_document, get_console, get_effective_verbosity
from jsonwriter.config import WriterConfig
from jsonwriter.constants import JSONWRITER_VERSION

if TYPE_CHECKING:
    from jsonwriter.cli.console import Console
    from jsonwriter.core.writer import JsonWriter


@click.command(
    name="version",
    help="Show the installed version of JsonWriter.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the installed version of JsonWriter.

    Args:
        output_format (OutputFormat | None): Optional output format (text by default).
    """
    ctx = click.get_current_context()
    console: Console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:

        def build(writer: JsonWriter) -> None:
            writer.object_start()
            writer.name("version")
            writer.value_str(JSONWRITER_VERSION)
            writer.object_end()

        emit_document(WriterConfig(), build)
    elif fmt == OutputFormat.MARKDOWN:
        console.echo(f"**JsonWriter {JSONWRITER_VERSION}**")
    elif get_effective_verbosity(ctx) > 0:
        console.echo(console.styled("JsonWriter version:", bold=True, underline=True))
        console.echo(f"    {JSONWRITER_VERSION}")
    else:
        console.echo(JSONWRITER_VERSION)
