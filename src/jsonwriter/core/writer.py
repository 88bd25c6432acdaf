# topmark:header:start
#
#   project      : JsonWriter
#   file         : writer.py
#   file_relpath : src/jsonwriter/core/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Streaming, forward-only JSON writer.

[`JsonWriter`][jsonwriter.core.writer.JsonWriter] turns a sequence of primitive
write calls into JSON text, emitting every token to a sink as soon as it is
requested. No document tree is built and nothing is buffered across calls.

Separator placement is driven by a three-state machine
([`SepStatus`][jsonwriter.core.writer.SepStatus]) recording what the previous
token was:

| status  | set after                 | next token gets    |
|---------|---------------------------|--------------------|
| `NONE`  | a member name             | nothing            |
| `FIRST` | a container start         | newline + indent   |
| `NEXT`  | a value or container end  | comma + newline + indent |

Newlines and indentation are only emitted when the writer was created with
``indent > 0``.

The writer trusts its caller: unbalanced start/end calls and names written
outside objects produce malformed output without any error being raised.

Example:
    ```python
    sink = BufferSink()
    w = JsonWriter(sink)
    w.object_start()
    w.name("a")
    w.value(1)
    w.name("b")
    w.value_bool(True)
    w.object_end()
    assert sink.getvalue() == b'{"a":1,"b":true}'
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

from jsonwriter.config.logging import get_logger
from jsonwriter.core.escaping import encode_text, write_string

if TYPE_CHECKING:
    from jsonwriter.config.logging import JsonWriterLogger
    from jsonwriter.core.sinks import Sink

logger: JsonWriterLogger = get_logger(__name__)

OBJ_START: Final[bytes] = b"{"
OBJ_END: Final[bytes] = b"}"
ARR_START: Final[bytes] = b"["
ARR_END: Final[bytes] = b"]"
VALUE_SEP: Final[bytes] = b","
NAME_SEP: Final[bytes] = b":"
NAME_SEP_PRETTY: Final[bytes] = b": "
TRUE: Final[bytes] = b"true"
FALSE: Final[bytes] = b"false"
NULL: Final[bytes] = b"null"

TextLike = str | bytes | bytearray | memoryview

# Integers are converted in pieces of this many digits, below the interpreter's
# smallest allowed int/str conversion limit.
_DIGIT_CHUNK: Final[int] = 500
_CHUNK_BASE: Final[int] = 10**_DIGIT_CHUNK


class SepStatus(Enum):
    """What the previously emitted token was.

    Attributes:
        NONE: Nothing yet, or a member name (the value follows on the same line).
        FIRST: A container was just opened (no comma, but a new indented line).
        NEXT: A value or a closed container (comma and a new indented line).
    """

    NONE = "none"
    FIRST = "first"
    NEXT = "next"


def _int_digits(n: int) -> bytes:
    """Return the decimal representation of ``n``, however many digits it has."""
    # int.__repr__ so IntEnum members render as their number, not their name.
    if -_CHUNK_BASE < n < _CHUNK_BASE:
        return int.__repr__(n).encode("ascii")

    rest: int = abs(n)
    pieces: list[int] = []
    while rest:
        rest, low = divmod(rest, _CHUNK_BASE)
        pieces.append(low)

    head: str = ("-" if n < 0 else "") + int.__repr__(pieces.pop())
    tail: str = "".join(int.__repr__(p).zfill(_DIGIT_CHUNK) for p in reversed(pieces))
    return (head + tail).encode("ascii")


def _as_bytes(text: TextLike, start: int, end: int | None) -> bytes | memoryview:
    """Reduce a text-like argument to the byte range ``[start:end]``."""
    if isinstance(text, str):
        return encode_text(text)[start:end]
    view = memoryview(text).cast("B")
    return view[start:end]


class JsonWriter:
    """Streaming JSON writer bound to one sink and one indent width.

    Args:
        sink (Sink): Destination; the writer never opens, closes or flushes it.
        indent (int): Spaces per nesting level. ``0`` disables pretty-printing
            (no newlines, and ``":"`` instead of ``": "`` between name and value).

    Attributes:
        sink (Sink): The destination sink.
        indent (int): Spaces per nesting level.
        level (int): Number of currently open containers.
        sep_status (SepStatus): Separator state (see module docstring).
    """

    sink: Sink
    indent: int
    level: int
    sep_status: SepStatus

    def __init__(self, sink: Sink, indent: int = 0) -> None:
        if indent < 0:
            raise ValueError(f"indent must be >= 0, got {indent}")
        self.sink = sink
        self.indent = indent
        self.level = 0
        self.sep_status = SepStatus.NONE
        logger.trace("JsonWriter created (indent=%d, sink=%s)", indent, type(sink).__name__)

    # --- containers ---

    def array_start(self) -> None:
        """Open an array."""
        self._value_sep()
        self.sink.write(ARR_START)
        self.sep_status = SepStatus.FIRST
        self.level += 1

    def array_end(self) -> None:
        """Close the innermost array."""
        self.level -= 1
        self._indent()
        self.sink.write(ARR_END)
        self.sep_status = SepStatus.NEXT

    def object_start(self) -> None:
        """Open an object."""
        self._value_sep()
        self.sink.write(OBJ_START)
        self.sep_status = SepStatus.FIRST
        self.level += 1

    def object_end(self) -> None:
        """Close the innermost object."""
        self.level -= 1
        self._indent()
        self.sink.write(OBJ_END)
        self.sep_status = SepStatus.NEXT

    # --- names ---

    def name(self, text: TextLike, start: int = 0, end: int | None = None) -> None:
        """Write an object member name followed by the name separator.

        ``str`` names are UTF-8 encoded; bytes-like names are used as is. The
        optional ``start``/``end`` select a byte range of the encoded name.

        Args:
            text (TextLike): The member name.
            start (int): First byte of the range to write.
            end (int | None): End of the range (exclusive); None for the whole input.
        """
        self._value_sep()
        write_string(self.sink, _as_bytes(text, start, end))
        self.sink.write(NAME_SEP_PRETTY if self.indent else NAME_SEP)
        self.sep_status = SepStatus.NONE

    # --- values ---

    def value(
        self,
        obj: TextLike | int | bool | None,
        start: int = 0,
        end: int | None = None,
    ) -> None:
        """Write a scalar value, dispatching on its Python type.

        Args:
            obj (TextLike | int | bool | None): The value. Strings and bytes-like
                objects become JSON strings, ``bool`` becomes ``true``/``false``,
                ``int`` a decimal number and ``None`` becomes ``null``.
            start (int): First byte of the range to write (strings only).
            end (int | None): End of the range (strings only).

        Raises:
            TypeError: If ``obj`` is of an unsupported type (e.g. ``float``).
        """
        if obj is None:
            self.value_null()
        elif isinstance(obj, bool):
            self.value_bool(obj)
        elif isinstance(obj, int):
            self.value_int(obj)
        elif isinstance(obj, (str, bytes, bytearray, memoryview)):
            self.value_str(obj, start, end)
        else:
            raise TypeError(f"Unsupported JSON value type: {type(obj).__name__}")

    def value_str(self, text: TextLike, start: int = 0, end: int | None = None) -> None:
        """Write a string value (see [`name`][jsonwriter.core.writer.JsonWriter.name])."""
        self._value_sep()
        write_string(self.sink, _as_bytes(text, start, end))
        self.sep_status = SepStatus.NEXT

    def value_int(self, n: int) -> None:
        """Write an integer as a bare decimal number."""
        self._value_sep()
        self.sink.write(_int_digits(n))
        self.sep_status = SepStatus.NEXT

    def value_bool(self, b: bool) -> None:
        """Write ``true`` or ``false``."""
        self._value_sep()
        self.sink.write(TRUE if b else FALSE)
        self.sep_status = SepStatus.NEXT

    def value_null(self) -> None:
        """Write ``null``."""
        self._value_sep()
        self.sink.write(NULL)
        self.sep_status = SepStatus.NEXT

    # --- separators ---

    def _value_sep(self) -> None:
        """Emit the comma (after a value) and the line break that precede a token."""
        if self.sep_status is SepStatus.NEXT:
            self.sink.write(VALUE_SEP)
        self._indent()

    def _indent(self) -> None:
        """Emit a newline and indentation unless a name was just written."""
        if self.indent and self.sep_status is not SepStatus.NONE:
            self.sink.write(b"\n" + b" " * (self.level * self.indent))
