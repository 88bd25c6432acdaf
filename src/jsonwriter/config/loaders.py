# topmark:header:start
#
#   project      : JsonWriter
#   file         : loaders.py
#   file_relpath : src/jsonwriter/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
checked getters validate value shapes: a mistyped value logs a warning and is
treated as absent, so a user mistake never changes the defaults silently nor
crashes the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsonwriter.config.errors import ConfigError
from jsonwriter.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from jsonwriter.config.logging import JsonWriterLogger

TomlTable = dict[str, Any]

logger: JsonWriterLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``jsonwriter.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        logger.error("Error decoding %s as UTF-8: %s", path, e)
        raise ConfigError(f"Config file {path} is not valid UTF-8: {e}", path=path) from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}", path=path) from e

    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_int_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    if isinstance(value, bool):
        logger.warning("Expected int in %s, got bool: %r", loc, value)
        return None

    if isinstance(value, int):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    return None


def get_bool_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> bool | None:
    """Return an optional bool value, warning when present but not `bool`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning(
        "Expected bool in %s.%s, got %s: %r", where, key, type(value).__name__, value
    )
    return None


def warn_unknown_keys(table: TomlTable, known: frozenset[str], *, where: str) -> list[str]:
    """Log a warning for every key in ``table`` that is not in ``known``.

    Returns:
        list[str]: The unknown keys, sorted.
    """
    unknown: list[str] = sorted(k for k in table if k not in known)
    for key in unknown:
        logger.warning("Ignoring unknown config key %s.%s", where, key)
    return unknown
