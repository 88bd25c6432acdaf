# topmark:header:start
#
#   project      : JsonWriter
#   file         : console.py
#   file_relpath : src/jsonwriter/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console for the human-readable side of the CLI.

JSON documents never pass through the console: commands stream them to the
binary stdout via a [`StreamSink`][jsonwriter.core.sinks.StreamSink]. The
console only carries help hints, version text and error messages, and drops
all styling when color is disabled so that piped text stays plain.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import click


@dataclass(frozen=True)
class Console:
    """Text output bound to one color decision.

    Attributes:
        color (bool): Whether ANSI styles are emitted.
    """

    color: bool = False

    def echo(self, text: str = "") -> None:
        """Write a line of text to stdout."""
        click.echo(text, color=self.color)

    def error(self, text: str) -> None:
        """Write an error line to stderr, in red when color is enabled."""
        click.echo(self.styled(text, fg="bright_red"), err=True, color=self.color)

    def styled(self, text: str, **style: Any) -> str:
        """Return ``text`` wrapped in `click.style` (unchanged without color)."""
        return click.style(text, **style) if self.color else text
