# topmark:header:start
#
#   project      : JsonWriter
#   file         : keys.py
#   file_relpath : src/jsonwriter/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML key names for JsonWriter configuration.

Keys defined here are the external configuration API as it appears in
``jsonwriter.toml`` and in ``[tool.jsonwriter]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML keys used by JsonWriter configuration."""

    KEY_INDENT: Final[str] = "indent"
    KEY_INFER_TYPES: Final[str] = "infer_types"
    KEY_TRAILING_NEWLINE: Final[str] = "trailing_newline"

    ALL_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_INDENT,
            KEY_INFER_TYPES,
            KEY_TRAILING_NEWLINE,
        }
    )
