# topmark:header:start
#
#   project      : JsonWriter
#   file         : __main__.py
#   file_relpath : src/jsonwriter/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running JsonWriter via ``python -m jsonwriter``.

Delegates to [`jsonwriter.cli.main.cli`][jsonwriter.cli.main.cli], the same
entry point as the ``jsonwriter`` console script.

Examples:
    Build an object from key/value pairs::

        python -m jsonwriter object name=demo count=3
"""

from __future__ import annotations

from jsonwriter.cli.main import cli

if __name__ == "__main__":
    cli()
