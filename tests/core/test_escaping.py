# topmark:header:start
#
#   project      : JsonWriter
#   file         : test_escaping.py
#   file_relpath : tests/core/test_escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for JSON string escaping.

Escaped literals are checked byte for byte and, where meaningful, decoded
with the standard library's `json` module to confirm the round-trip.
"""

from __future__ import annotations

import json

import pytest

from jsonwriter.core.escaping import encode_text, escape_string, write_string
from jsonwriter.core.sinks import BufferSink

CONTROL_BYTES: list[int] = [*range(0x20), 0x7F]


@pytest.mark.parametrize("byte", CONTROL_BYTES)
def test_control_bytes_round_trip(byte: int) -> None:
    """Every control byte and DEL decodes back to the original character."""
    literal: bytes = escape_string(bytes([byte]))
    assert json.loads(literal) == chr(byte)
    # Control bytes never appear raw in the literal.
    assert all(b >= 0x20 and b != 0x7F for b in literal)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (b"\b", b'"\\b"'),
        (b"\f", b'"\\f"'),
        (b"\n", b'"\\n"'),
        (b"\r", b'"\\r"'),
        (b"\t", b'"\\t"'),
        (b"\x00", b'"\\u0000"'),
        (b"\x01", b'"\\u0001"'),
        (b"\x0b", b'"\\u000b"'),
        (b"\x1f", b'"\\u001f"'),
        (b"\x7f", b'"\\u007f"'),
    ],
)
def test_control_escape_forms(raw: bytes, expected: bytes) -> None:
    """Five control bytes use short escapes; the rest use lowercase `\\u00XX`."""
    assert escape_string(raw) == expected


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (b'"', b'"\\""'),
        (b"\\", b'"\\\\"'),
        (b'say "hi" \\o/', b'"say \\"hi\\" \\\\o/"'),
        (b'a\tb"c', b'"a\\tb\\"c"'),
        (b"", b'""'),
        (b"plain text", b'"plain text"'),
        (b"/", b'"/"'),
    ],
)
def test_quote_and_backslash(raw: bytes, expected: bytes) -> None:
    literal: bytes = escape_string(raw)
    assert literal == expected
    assert json.loads(literal) == raw.decode("ascii")


def test_high_bytes_pass_through() -> None:
    """Bytes >= 0x80 are copied unchanged, valid UTF-8 or not."""
    assert escape_string("é€😀".encode()) == b'"' + "é€😀".encode() + b'"'
    assert escape_string(b"\xff\xfe") == b'"\xff\xfe"'


def test_str_input_is_utf8_encoded() -> None:
    assert escape_string("naïve\n") == b'"na\xc3\xafve\\n"'


def test_encode_text_restores_surrogate_escapes() -> None:
    """Undecodable bytes smuggled in as lone surrogates come back as raw bytes."""
    text: str = b"ok\xff".decode("utf-8", errors="surrogateescape")
    assert encode_text(text) == b"ok\xff"


def test_runs_are_written_in_chunks() -> None:
    """Unescaped bytes are batched: one write per run, not per byte."""
    sink = BufferSink()
    write_string(sink, b"abcdef" * 100)
    # opening quote, the run, closing quote
    assert sink.writes == 3

    sink = BufferSink()
    write_string(sink, b'ab"cd')
    # quote, "ab", \", "cd", quote
    assert sink.writes == 5
    assert sink.getvalue() == b'"ab\\"cd"'


def test_adjacent_escapes_do_not_write_empty_runs() -> None:
    sink = BufferSink()
    write_string(sink, b"\n\n")
    assert sink.writes == 4
    assert sink.getvalue() == b'"\\n\\n"'


def test_accepts_bytes_like_inputs() -> None:
    assert escape_string(bytearray(b"x\ty")) == b'"x\\ty"'
    assert escape_string(memoryview(b"x\ty")[1:]) == b'"\\ty"'
