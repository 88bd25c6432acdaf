# topmark:header:start
#
#   project      : JsonWriter
#   file         : dump.py
#   file_relpath : src/jsonwriter/core/dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serialize plain Python values through a streaming writer.

[`dump`][jsonwriter.core.dump.dump] walks a Python value and issues the matching
[`JsonWriter`][jsonwriter.core.writer.JsonWriter] calls, so tokens reach the
sink while the value is traversed.

Conversions:
  - Mapping -> object (keys must be ``str`` or bytes-like)
  - list/tuple -> array
  - str/bytes/bytearray/memoryview -> string
  - bool, int, None -> ``true``/``false``, number, ``null``
  - Enum -> its ``.value`` (converted recursively)
  - PurePath -> ``str``
  - object with callable ``.to_dict()`` -> its ``to_dict()`` result

Anything else (``float``, ``set``, arbitrary objects) raises ``TypeError``.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from pathlib import PurePath
from typing import TYPE_CHECKING, Any, cast

from jsonwriter.config.logging import get_logger
from jsonwriter.core.sinks import BufferSink
from jsonwriter.core.writer import JsonWriter

if TYPE_CHECKING:
    from jsonwriter.config.logging import JsonWriterLogger
    from jsonwriter.core.sinks import Sink

logger: JsonWriterLogger = get_logger(__name__)

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def write_value(writer: JsonWriter, obj: object) -> None:
    """Write ``obj`` (and everything nested in it) to ``writer``.

    Args:
        writer (JsonWriter): The writer receiving the calls.
        obj (object): The value to serialize.

    Raises:
        TypeError: If ``obj`` or a nested value has no JSON representation, or a
            mapping key is not text.
    """
    if obj is None or (isinstance(obj, (bool, int)) and not isinstance(obj, Enum)):
        writer.value(obj)
        return

    if isinstance(obj, _TEXT_TYPES):
        writer.value_str(obj)
        return

    if isinstance(obj, Enum):
        write_value(writer, obj.value)
        return

    if isinstance(obj, PurePath):
        writer.value_str(str(obj))
        return

    to_dict: Any | None = getattr(obj, "to_dict", None)
    if callable(to_dict):
        write_value(writer, to_dict())
        return

    if isinstance(obj, Mapping):
        mapping: Mapping[object, object] = cast("Mapping[object, object]", obj)
        writer.object_start()
        for key, item in mapping.items():
            if not isinstance(key, _TEXT_TYPES):
                raise TypeError(f"Object keys must be str or bytes, not {type(key).__name__}")
            writer.name(key)
            write_value(writer, item)
        writer.object_end()
        return

    if isinstance(obj, (list, tuple)):
        writer.array_start()
        for item in cast("list[object] | tuple[object, ...]", obj):
            write_value(writer, item)
        writer.array_end()
        return

    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def dump(obj: object, sink: Sink, *, indent: int = 0) -> None:
    """Serialize ``obj`` to ``sink``.

    Args:
        obj (object): The value to serialize.
        sink (Sink): Destination for the JSON text.
        indent (int): Spaces per nesting level (0 for compact output).
    """
    logger.debug("Dumping %s (indent=%d)", type(obj).__name__, indent)
    write_value(JsonWriter(sink, indent), obj)


def dumps(obj: object, *, indent: int = 0) -> str:
    """Serialize ``obj`` to a JSON string.

    Args:
        obj (object): The value to serialize.
        indent (int): Spaces per nesting level (0 for compact output).

    Returns:
        str: The JSON text (without a trailing newline).
    """
    sink = BufferSink()
    dump(obj, sink, indent=indent)
    return sink.getvalue_text()
