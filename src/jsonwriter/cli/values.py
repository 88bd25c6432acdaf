# topmark:header:start
#
#   project      : JsonWriter
#   file         : values.py
#   file_relpath : src/jsonwriter/cli/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn command-line arguments into JSON values.

With type inference enabled (the default):

| argument            | JSON            |
|---------------------|-----------------|
| ``true`` / ``false``| boolean         |
| ``null``            | null            |
| ``-12``, ``0``, ``7`` | number        |
| anything else       | string          |

Numbers follow JSON's integer grammar, so ``007`` and ``+1`` stay strings. So
does ``-0``, which would otherwise come out as ``0``.
"""

from __future__ import annotations

import re
from typing import Final

from jsonwriter.cli.errors import JsonWriterUsageError

_INT_RE: Final[re.Pattern[str]] = re.compile(r"0|-?[1-9][0-9]*")

# Digits per int() call, below the interpreter's smallest allowed str/int limit.
_DIGIT_CHUNK: Final[int] = 500

_LITERALS: Final[dict[str, bool | None]] = {
    "true": True,
    "false": False,
    "null": None,
}

PAIR_SEP: Final[str] = "="


def infer_value(text: str, *, infer_types: bool = True) -> str | int | bool | None:
    """Return the JSON value represented by a command-line argument.

    Args:
        text (str): The raw argument.
        infer_types (bool): If False, always return ``text`` unchanged.

    Returns:
        str | int | bool | None: The inferred value.
    """
    if not infer_types:
        return text
    if text in _LITERALS:
        return _LITERALS[text]
    if _INT_RE.fullmatch(text):
        return _parse_int(text)
    return text


def _parse_int(text: str) -> int:
    """Convert a matched integer literal of any length to ``int``."""
    digits: str = text.removeprefix("-")
    value: int = 0
    for i in range(0, len(digits), _DIGIT_CHUNK):
        chunk: str = digits[i : i + _DIGIT_CHUNK]
        value = value * 10 ** len(chunk) + int(chunk)
    return -value if text.startswith("-") else value


def parse_pair(arg: str) -> tuple[str, str]:
    """Split a ``KEY=VALUE`` argument at the first ``=``.

    Args:
        arg (str): The argument to split.

    Returns:
        tuple[str, str]: The key and the raw value (the value may contain ``=``).

    Raises:
        JsonWriterUsageError: If ``arg`` has no ``=``.
    """
    key, sep, value = arg.partition(PAIR_SEP)
    if not sep:
        raise JsonWriterUsageError(f"Expected KEY=VALUE, got {arg!r}")
    return key, value
