# topmark:header:start
#
#   project      : JsonWriter
#   file         : test_dump.py
#   file_relpath : tests/core/test_dump.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `dump`/`dumps`, the value traversal on top of the writer."""

from __future__ import annotations

import io
import json
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

import pytest

from jsonwriter.core.dump import dump, dumps


class Color(Enum):
    RED = "red"


@dataclass
class Point:
    x: int
    y: int

    def to_dict(self) -> dict[str, int]:
        return {"x": self.x, "y": self.y}


def test_dumps_matches_stdlib_compact() -> None:
    value = {"a": [1, -2, True, None], "b": {"c": "d\ne"}, "e": []}
    assert dumps(value) == json.dumps(value, separators=(",", ":"))


def test_dumps_pretty() -> None:
    value = {"name": "demo", "tags": ["a", "b"]}
    assert dumps(value, indent=2) == json.dumps(value, indent=2)


def test_tuple_and_bytes() -> None:
    assert dumps((b"x", bytearray(b"y"))) == '["x","y"]'


def test_enum_path_and_to_dict() -> None:
    value = {"color": Color.RED, "path": PurePosixPath("a/b"), "point": Point(1, 2)}
    assert dumps(value) == '{"color":"red","path":"a/b","point":{"x":1,"y":2}}'


def test_bytes_keys_allowed() -> None:
    assert dumps({b"k": 1}) == '{"k":1}'


@pytest.mark.parametrize("bad", [1.0, {1, 2}, object()])
def test_unsupported_values_raise(bad: object) -> None:
    with pytest.raises(TypeError, match="not JSON serializable"):
        dumps({"k": [bad]})


def test_non_text_keys_raise() -> None:
    with pytest.raises(TypeError, match="keys must be str or bytes"):
        dumps({1: "one"})


def test_dump_streams_to_binary_sink() -> None:
    stream = io.BytesIO()
    dump(["é", 1], stream)
    assert stream.getvalue() == '["é",1]'.encode()
