# topmark:header:start
#
#   project      : JsonWriter
#   file         : __init__.py
#   file_relpath : src/jsonwriter/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter configuration: model, TOML loading and logging setup.

Build configs with `MutableWriterConfig` (mutable), then `freeze()` into a
`WriterConfig`. To tweak a frozen config, `thaw()` it, edit, and freeze again.
"""

from __future__ import annotations

from jsonwriter.config.errors import ConfigError
from jsonwriter.config.model import MutableWriterConfig, WriterConfig

__all__ = [
    "ConfigError",
    "MutableWriterConfig",
    "WriterConfig",
]
