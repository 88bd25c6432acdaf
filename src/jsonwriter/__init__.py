# topmark:header:start
#
#   project      : JsonWriter
#   file         : __init__.py
#   file_relpath : src/jsonwriter/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JsonWriter package.

JsonWriter is a streaming, forward-only JSON encoder. It turns a sequence of
write calls into (optionally pretty-printed) JSON text, writing each token to a
sink as it goes instead of building a document in memory. A small CLI builds
JSON objects and arrays from command-line arguments.
"""

from __future__ import annotations

from jsonwriter.core import (
    BufferSink,
    JsonWriter,
    SepStatus,
    Sink,
    StreamSink,
    TextStreamSink,
    dump,
    dumps,
    escape_string,
)

__all__ = [
    "BufferSink",
    "JsonWriter",
    "SepStatus",
    "Sink",
    "StreamSink",
    "TextStreamSink",
    "dump",
    "dumps",
    "escape_string",
]
