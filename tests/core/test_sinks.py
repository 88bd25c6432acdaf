# topmark:header:start
#
#   project      : JsonWriter
#   file         : test_sinks.py
#   file_relpath : tests/core/test_sinks.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the sink adapters."""

from __future__ import annotations

import io

from jsonwriter.core.sinks import BufferSink, StreamSink, TextStreamSink
from jsonwriter.core.writer import JsonWriter


def test_buffer_sink_collects_bytes(sink: BufferSink) -> None:
    assert sink.write(b"ab") == 2
    assert sink.write(memoryview(b"cd")) == 2
    assert sink.getvalue() == b"abcd"
    assert sink.writes == 2


def test_buffer_sink_text_replaces_invalid_utf8(sink: BufferSink) -> None:
    sink.write(b"ok\xff")
    assert sink.getvalue_text() == "ok�"


def test_stream_sink_forwards_to_binary_stream() -> None:
    stream = io.BytesIO()
    w = JsonWriter(StreamSink(stream))
    w.array_start()
    w.value("a")
    w.array_end()
    assert stream.getvalue() == b'["a"]'
    assert not stream.closed


def test_text_stream_sink_reassembles_split_sequences() -> None:
    out = io.StringIO()
    ts = TextStreamSink(out)
    euro: bytes = "€".encode()
    ts.write(euro[:1])
    assert out.getvalue() == ""
    ts.write(euro[1:] + b"!")
    assert out.getvalue() == "€!"


def test_writer_to_text_stream() -> None:
    out = io.StringIO()
    w = JsonWriter(TextStreamSink(out), indent=2)
    w.object_start()
    w.name("k")
    w.value("vé")
    w.object_end()
    assert out.getvalue() == '{\n  "k": "vé"\n}'
