# topmark:header:start
#
#   project      : JsonWriter
#   file         : errors.py
#   file_relpath : src/jsonwriter/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration errors.

These are Click-free; the CLI maps them onto its own exceptions and exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(Exception):
    """A configuration file could not be read or parsed.

    Attributes:
        path (Path | None): The offending file, if any.
    """

    path: Path | None

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
