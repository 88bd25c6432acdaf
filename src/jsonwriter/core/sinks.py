# topmark:header:start
#
#   project      : JsonWriter
#   file         : sinks.py
#   file_relpath : src/jsonwriter/core/sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output sinks consumed by [`JsonWriter`][jsonwriter.core.writer.JsonWriter].

A sink is anything exposing ``write(data: bytes)``. The writer holds a
non-owning reference: it never opens, closes or flushes a sink, and it does
not intercept failures raised by ``write()``.

Any binary stream (`io.BytesIO`, a file opened in ``"wb"`` mode,
``sys.stdout.buffer``) already satisfies the [`Sink`][jsonwriter.core.sinks.Sink]
protocol. The small adapters below cover the remaining cases:

- [`BufferSink`][jsonwriter.core.sinks.BufferSink]: collect output in memory.
- [`StreamSink`][jsonwriter.core.sinks.StreamSink]: forward to a binary stream.
- [`TextStreamSink`][jsonwriter.core.sinks.TextStreamSink]: decode and forward
  to a text stream.
"""

from __future__ import annotations

import codecs
from typing import BinaryIO, Protocol, TextIO


class Sink(Protocol):
    """Minimal capability the writer consumes: a write-bytes operation."""

    def write(self, data: bytes, /) -> object:
        """Write ``data`` to the destination."""
        ...


class BufferSink:
    """In-memory sink accumulating all written bytes.

    Attributes:
        buffer (bytearray): The bytes written so far.
        writes (int): Number of ``write()`` calls received.
    """

    buffer: bytearray
    writes: int

    def __init__(self) -> None:
        self.buffer = bytearray()
        self.writes = 0

    def write(self, data: bytes | bytearray | memoryview, /) -> int:
        """Append ``data`` to the buffer.

        Args:
            data (bytes | bytearray | memoryview): Bytes-like chunk to append.

        Returns:
            int: Number of bytes appended.
        """
        self.writes += 1
        self.buffer += data
        return len(memoryview(data))

    def getvalue(self) -> bytes:
        """Return the accumulated bytes."""
        return bytes(self.buffer)

    def getvalue_text(self, encoding: str = "utf-8") -> str:
        """Return the accumulated bytes decoded as text (invalid sequences replaced)."""
        return self.buffer.decode(encoding, errors="replace")


class StreamSink:
    """Sink forwarding to a binary stream.

    Args:
        stream (BinaryIO): Destination stream; ownership stays with the caller.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self.stream = stream

    def write(self, data: bytes, /) -> int:
        """Forward ``data`` to the wrapped stream."""
        return self.stream.write(data)


class TextStreamSink:
    """Sink decoding bytes and forwarding them to a text stream.

    Decoding is incremental so a multi-byte sequence split across two
    ``write()`` calls is reassembled. Invalid sequences are replaced with
    U+FFFD since a text stream cannot carry raw bytes.

    Args:
        stream (TextIO): Destination text stream; ownership stays with the caller.
        encoding (str): Encoding of the bytes produced by the writer.
    """

    def __init__(self, stream: TextIO, encoding: str = "utf-8") -> None:
        self.stream = stream
        self._decoder = codecs.getincrementaldecoder(encoding)(errors="replace")

    def write(self, data: bytes, /) -> int:
        """Decode ``data`` and write the resulting text to the wrapped stream."""
        text: str = self._decoder.decode(data)
        if text:
            self.stream.write(text)
        return len(data)
