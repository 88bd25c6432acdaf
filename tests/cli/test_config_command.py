# topmark:header:start
#
#   project      : JsonWriter
#   file         : test_config_command.py
#   file_relpath : tests/cli/test_config_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `config` output and layered configuration.

Precedence under test: defaults < pyproject.toml < jsonwriter.toml < --config
files < command-line options.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from tests.cli.conftest import assert_CONFIG_ERROR, assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


def _config(stdout: str) -> dict[str, Any]:
    data: Any = json.loads(stdout)
    assert isinstance(data, dict)
    return data


@mark_cli
def test_config_defaults(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["config"])
    assert_SUCCESS(result)
    assert result.stdout == (
        '{"indent":0,"infer_types":true,"trailing_newline":true,"config_files":[]}\n'
    )


@mark_cli
def test_config_layering(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        "[tool.jsonwriter]\nindent = 2\ninfer_types = false\n", encoding="utf-8"
    )
    (tmp_path / "jsonwriter.toml").write_text("indent = 4\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["config"])
    assert_SUCCESS(result)
    data: dict[str, Any] = _config(result.stdout)
    assert data["indent"] == 4
    assert data["infer_types"] is False
    assert [p.rsplit("/", 1)[-1].rsplit("\\", 1)[-1] for p in data["config_files"]] == [
        "pyproject.toml",
        "jsonwriter.toml",
    ]
    # The document itself uses the configured indentation.
    assert result.stdout.startswith('{\n    "indent": 4,')


@mark_cli
def test_explicit_config_and_cli_override(tmp_path: Path) -> None:
    (tmp_path / "jsonwriter.toml").write_text("indent = 4\n", encoding="utf-8")
    extra: Path = tmp_path / "extra.toml"
    extra.write_text("indent = 1\ntrailing_newline = false\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--config", str(extra), "config"])
    assert_SUCCESS(result)
    assert _config(result.stdout)["indent"] == 1
    assert not result.stdout.endswith("\n")

    result = run_cli_in(tmp_path, ["--config", str(extra), "config", "--indent", "0", "--raw"])
    assert_SUCCESS(result)
    data: dict[str, Any] = _config(result.stdout)
    assert data["indent"] == 0
    assert data["infer_types"] is False


@mark_cli
def test_no_config_ignores_discovered_files(tmp_path: Path) -> None:
    (tmp_path / "jsonwriter.toml").write_text("indent = 4\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["--no-config", "config"])
    assert_SUCCESS(result)
    assert _config(result.stdout)["indent"] == 0


@mark_cli
def test_discovered_config_drives_object_command(tmp_path: Path) -> None:
    (tmp_path / "jsonwriter.toml").write_text("infer_types = false\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["object", "n=1"])
    assert_SUCCESS(result)
    assert result.stdout == '{"n":"1"}\n'


@mark_cli
def test_invalid_toml_is_config_error(tmp_path: Path) -> None:
    (tmp_path / "jsonwriter.toml").write_text("indent = = 2\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["config"])
    assert_CONFIG_ERROR(result)
    assert result.stdout == ""
    assert "Invalid TOML" in result.stderr


@mark_cli
def test_missing_explicit_config_is_config_error(tmp_path: Path) -> None:
    result = run_cli(["--no-config", "--config", str(tmp_path / "nope.toml"), "config"])
    assert_CONFIG_ERROR(result)


@mark_cli
def test_bad_value_type_warns_and_falls_back(tmp_path: Path) -> None:
    (tmp_path / "jsonwriter.toml").write_text('indent = "wide"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["config"])
    assert_SUCCESS(result)
    assert _config(result.stdout)["indent"] == 0
    assert "Expected int" in result.stderr
