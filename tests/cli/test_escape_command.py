# topmark:header:start
#
#   project      : JsonWriter
#   file         : test_escape_command.py
#   file_relpath : tests/cli/test_escape_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `escape` writes one JSON string literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.usefixtures("isolation")


@mark_cli
@parametrize(
    ("text", "expected"),
    [
        ("plain", '"plain"'),
        ("", '""'),
        ('say "hi"', '"say \\"hi\\""'),
        ("a\\b", '"a\\\\b"'),
        ("line\nbreak", '"line\\nbreak"'),
        ("bell\x07", '"bell\\u0007"'),
        ("caf\u00e9", '"caf\u00e9"'),
    ],
)
def test_escape_argument(text: str, expected: str) -> None:
    result = run_cli(["escape", text])
    assert_SUCCESS(result)
    assert result.stdout == expected + "\n"


@mark_cli
def test_escape_reads_stdin_bytes_verbatim() -> None:
    result = run_cli(["escape"], input_text=b"\x00\x1f\x7f\"\n")
    assert_SUCCESS(result)
    assert result.stdout_bytes == b'"\\u0000\\u001f\\u007f\\"\\n"\n'


@mark_cli
def test_escape_dash_reads_stdin() -> None:
    result = run_cli(["escape", "--no-trailing-newline", "-"], input_text="x\ty")
    assert_SUCCESS(result)
    assert result.stdout == '"x\\ty"'


@mark_cli
def test_escape_passes_high_bytes_through() -> None:
    result = run_cli(["escape"], input_text=b"\xc3\xa9\xff")
    assert_SUCCESS(result)
    assert result.stdout_bytes == b'"\xc3\xa9\xff"\n'


@mark_cli
def test_escape_honors_trailing_newline_config(isolation: Path) -> None:
    (isolation / "jsonwriter.toml").write_text("trailing_newline = false\n", encoding="utf-8")
    result = run_cli(["escape", "x"])
    assert_SUCCESS(result)
    assert result.stdout == '"x"'
