# topmark:header:start
#
#   project      : JsonWriter
#   file         : __init__.py
#   file_relpath : src/jsonwriter/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core streaming encoder.

Separation of concerns:

1) Sinks (where bytes go)
   - [`jsonwriter.core.sinks`][jsonwriter.core.sinks]

2) String escaping (bytes -> quoted literal)
   - [`jsonwriter.core.escaping`][jsonwriter.core.escaping]

3) The writer state machine (separators, indentation, nesting)
   - [`jsonwriter.core.writer`][jsonwriter.core.writer]

4) Value traversal on top of the writer
   - [`jsonwriter.core.dump`][jsonwriter.core.dump]

Rule of thumb: nothing under `jsonwriter.core` imports `click` or reads
configuration files.
"""

from __future__ import annotations

from jsonwriter.core.dump import dump, dumps, write_value
from jsonwriter.core.escaping import encode_text, escape_string, write_string
from jsonwriter.core.sinks import BufferSink, Sink, StreamSink, TextStreamSink
from jsonwriter.core.writer import JsonWriter, SepStatus

__all__ = [
    "BufferSink",
    "JsonWriter",
    "SepStatus",
    "Sink",
    "StreamSink",
    "TextStreamSink",
    "dump",
    "dumps",
    "encode_text",
    "escape_string",
    "write_string",
    "write_value",
]
