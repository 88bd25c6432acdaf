# topmark:header:start
#
#   project      : JsonWriter
#   file         : escaping.py
#   file_relpath : src/jsonwriter/core/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""JSON string escaping.

[`write_string`][jsonwriter.core.escaping.write_string] turns an arbitrary byte
sequence into a quoted JSON string literal and writes it to a sink in a single
left-to-right pass.

Escaping rules:
- ``"`` and ``\`` are prefixed with a backslash.
- Control bytes (0x00-0x1F) and DEL (0x7F) are escaped: ``\b \f \n \r \t`` for
  those five, ``\u00XX`` (lowercase hex) for the others.
- Every other byte, including bytes >= 0x80, is copied unchanged. Non-ASCII
  input is therefore only valid in the output when it is valid UTF-8 already;
  it is neither validated nor escaped.

Unescaped bytes are batched into runs and written as one chunk at each escape
boundary, so the number of ``write()`` calls scales with the number of escaped
bytes, not with the input length.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from jsonwriter.core.sinks import BufferSink

if TYPE_CHECKING:
    from jsonwriter.core.sinks import Sink

QUOTE: Final[int] = 0x22
BACKSLASH: Final[int] = 0x5C
DEL: Final[int] = 0x7F

_QUOTE_BYTES: Final[bytes] = b'"'
_UNICODE_ESC: Final[bytes] = b"\\u00"
_HEX_DIGITS: Final[bytes] = b"0123456789abcdef"

# Two-character escapes; all other control bytes use the \u00XX form.
_SHORT_ESCAPES: Final[dict[int, bytes]] = {
    0x08: b"\\b",
    0x0C: b"\\f",
    0x0A: b"\\n",
    0x0D: b"\\r",
    0x09: b"\\t",
}


def _control_escape(c: int) -> bytes:
    """Return the escape sequence for control byte ``c``."""
    short: bytes | None = _SHORT_ESCAPES.get(c)
    if short is not None:
        return short
    return _UNICODE_ESC + bytes((_HEX_DIGITS[(c >> 4) & 0xF], _HEX_DIGITS[c & 0xF]))


def write_string(sink: Sink, data: bytes | bytearray | memoryview) -> None:
    r"""Write ``data`` to ``sink`` as a quoted, escaped JSON string literal.

    Args:
        sink (Sink): Destination for the encoded literal.
        data (bytes | bytearray | memoryview): Raw bytes to encode.

    Example:
        ```python
        sink = BufferSink()
        write_string(sink, b'a\tb"c')
        assert sink.getvalue() == b'"a\\tb\\"c"'
        ```
    """
    view = memoryview(data).cast("B")

    sink.write(_QUOTE_BYTES)

    start: int = 0
    for pos, c in enumerate(view):
        if c == QUOTE or c == BACKSLASH:
            if pos > start:
                sink.write(bytes(view[start:pos]))
            sink.write(bytes((BACKSLASH, c)))
            start = pos + 1
        elif c <= 0x1F or c == DEL:
            if pos > start:
                sink.write(bytes(view[start:pos]))
            sink.write(_control_escape(c))
            start = pos + 1

    if start < len(view):
        sink.write(bytes(view[start:]))

    sink.write(_QUOTE_BYTES)


def encode_text(text: str) -> bytes:
    """Encode ``text`` as UTF-8, mapping surrogate escapes back to their raw bytes.

    Command-line arguments and file names that are not valid UTF-8 reach Python as
    lone surrogates (PEP 383); ``surrogateescape`` restores the original bytes.
    """
    return text.encode("utf-8", errors="surrogateescape")


def escape_string(data: bytes | bytearray | memoryview | str) -> bytes:
    """Return the quoted, escaped JSON literal for ``data``.

    ``str`` input is encoded with [`encode_text`][jsonwriter.core.escaping.encode_text] first.

    Args:
        data (bytes | bytearray | memoryview | str): Text or raw bytes to encode.

    Returns:
        bytes: The complete literal, including the surrounding quotes.
    """
    raw: bytes | bytearray | memoryview = encode_text(data) if isinstance(data, str) else data
    sink = BufferSink()
    write_string(sink, raw)
    return sink.getvalue()
