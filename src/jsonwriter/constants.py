# topmark:header:start
#
#   project      : JsonWriter
#   file         : constants.py
#   file_relpath : src/jsonwriter/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

JSONWRITER_VERSION: str = get_version("jsonwriter")

# Config file names, in same-directory merge order (later wins):
PYPROJECT_TOML_NAME: str = "pyproject.toml"
JSONWRITER_TOML_NAME: str = "jsonwriter.toml"

# Table holding the settings inside pyproject.toml: [tool.jsonwriter]
PYPROJECT_TOOL_TABLE: str = "jsonwriter"
