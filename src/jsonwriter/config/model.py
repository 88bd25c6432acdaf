# topmark:header:start
#
#   project      : JsonWriter
#   file         : model.py
#   file_relpath : src/jsonwriter/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `WriterConfig`: an immutable snapshot used by the CLI when creating writers.
    - `MutableWriterConfig`: a mutable builder used during discovery/merge; it
      can be frozen into `WriterConfig` and thawed back for edits.

Merge order (lowest -> highest precedence):
    1) Built-in defaults
    2) ``[tool.jsonwriter]`` in ``pyproject.toml`` (discovery directory)
    3) ``jsonwriter.toml`` (discovery directory)
    4) Extra config files passed explicitly via ``--config`` (in the order provided)
    5) CLI overrides (applied by the caller on the thawed draft)

Fields of the mutable builder are tri-state (``None`` means "not set by this
layer") so a later layer only overrides what it actually specifies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from jsonwriter.config.keys import Toml
from jsonwriter.config.loaders import (
    get_bool_value_or_none_checked,
    get_int_value_or_none_checked,
    load_toml_dict,
    warn_unknown_keys,
)
from jsonwriter.config.logging import get_logger
from jsonwriter.constants import (
    JSONWRITER_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_TABLE,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from jsonwriter.config.loaders import TomlTable
    from jsonwriter.config.logging import JsonWriterLogger

logger: JsonWriterLogger = get_logger(__name__)

DEFAULT_INDENT: int = 0
DEFAULT_INFER_TYPES: bool = True
DEFAULT_TRAILING_NEWLINE: bool = True


@dataclass(frozen=True, slots=True)
class WriterConfig:
    """Immutable runtime configuration.

    Attributes:
        indent (int): Spaces per nesting level (0 = compact output).
        infer_types (bool): Whether CLI arguments like ``42`` or ``true`` become
            numbers/booleans instead of strings.
        trailing_newline (bool): Whether the CLI terminates documents with ``\\n``.
        config_files (tuple[Path, ...]): Config files that contributed to this snapshot.
    """

    indent: int = DEFAULT_INDENT
    infer_types: bool = DEFAULT_INFER_TYPES
    trailing_newline: bool = DEFAULT_TRAILING_NEWLINE
    config_files: tuple[Path, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Return the settings as a plain mapping (TOML key names)."""
        return {
            Toml.KEY_INDENT: self.indent,
            Toml.KEY_INFER_TYPES: self.infer_types,
            Toml.KEY_TRAILING_NEWLINE: self.trailing_newline,
            "config_files": [str(p) for p in self.config_files],
        }

    def thaw(self) -> MutableWriterConfig:
        """Return a mutable copy of this frozen config."""
        return MutableWriterConfig(
            indent=self.indent,
            infer_types=self.infer_types,
            trailing_newline=self.trailing_newline,
            config_files=list(self.config_files),
        )


@dataclass
class MutableWriterConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        indent (int | None): Spaces per nesting level, or None when unset.
        infer_types (bool | None): Type inference for CLI values, or None when unset.
        trailing_newline (bool | None): Newline after CLI documents, or None when unset.
        config_files (list[Path]): Files merged into this draft, in merge order.
    """

    indent: int | None = None
    infer_types: bool | None = None
    trailing_newline: bool | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------

    def sanitize(self) -> None:
        """Drop values that cannot be used (negative indents)."""
        if self.indent is not None and self.indent < 0:
            logger.warning("Ignoring negative indent %d; using %d", self.indent, DEFAULT_INDENT)
            self.indent = None

    def freeze(self) -> WriterConfig:
        """Freeze this builder into an immutable `WriterConfig`, filling in defaults."""
        self.sanitize()
        return WriterConfig(
            indent=self.indent if self.indent is not None else DEFAULT_INDENT,
            infer_types=self.infer_types
            if self.infer_types is not None
            else DEFAULT_INFER_TYPES,
            trailing_newline=self.trailing_newline
            if self.trailing_newline is not None
            else DEFAULT_TRAILING_NEWLINE,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------

    @classmethod
    def from_defaults(cls) -> MutableWriterConfig:
        """Return a draft holding the built-in defaults."""
        return cls(
            indent=DEFAULT_INDENT,
            infer_types=DEFAULT_INFER_TYPES,
            trailing_newline=DEFAULT_TRAILING_NEWLINE,
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, where: str) -> MutableWriterConfig:
        """Build a draft from a parsed settings table.

        Args:
            data (TomlTable): The settings table (already extracted from
                ``[tool.jsonwriter]`` for ``pyproject.toml``).
            where (str): Human-readable location used in warnings.

        Returns:
            MutableWriterConfig: A draft where absent or invalid keys are None.
        """
        warn_unknown_keys(data, Toml.ALL_KEYS, where=where)
        indent: int | None = get_int_value_or_none_checked(data, Toml.KEY_INDENT, where=where)
        if indent is not None and indent < 0:
            logger.warning("Ignoring negative indent in %s.%s: %d", where, Toml.KEY_INDENT, indent)
            indent = None
        return cls(
            indent=indent,
            infer_types=get_bool_value_or_none_checked(data, Toml.KEY_INFER_TYPES, where=where),
            trailing_newline=get_bool_value_or_none_checked(
                data, Toml.KEY_TRAILING_NEWLINE, where=where
            ),
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableWriterConfig | None:
        """Load configuration from a single TOML file.

        For ``pyproject.toml`` only the ``[tool.jsonwriter]`` table is used.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableWriterConfig | None: The draft, or None if a ``pyproject.toml``
                has no ``[tool.jsonwriter]`` table.

        Raises:
            ConfigError: If the file cannot be read or parsed (see
                [`load_toml_dict`][jsonwriter.config.loaders.load_toml_dict]).
        """
        logger.debug("Loading config from TOML file: %s", path)
        toml_data: TomlTable = load_toml_dict(path)

        where: str
        if path.name == PYPROJECT_TOML_NAME:
            tool: object = toml_data.get("tool")
            tool_section: object = (
                tool.get(PYPROJECT_TOOL_TABLE) if isinstance(tool, dict) else None
            )
            if not isinstance(tool_section, dict):
                logger.debug("No [tool.%s] table in %s", PYPROJECT_TOOL_TABLE, path)
                return None
            toml_data = tool_section
            where = f"{path}:[tool.{PYPROJECT_TOOL_TABLE}]"
        else:
            where = str(path)

        draft: MutableWriterConfig = cls.from_toml_dict(toml_data, where=where)
        draft.config_files = [path]
        logger.debug("Loaded config draft: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files present in ``start``, in merge order.

        ``pyproject.toml`` comes first and ``jsonwriter.toml`` second so the
        dedicated file wins when both set the same key.
        """
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, JSONWRITER_TOML_NAME):
            p: Path = start / name
            if p.is_file():
                logger.debug("Discovered config file: %s", p)
                found.append(p)
        return found

    @classmethod
    def load_merged(
        cls,
        *,
        anchor: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableWriterConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            anchor (Path | None): Directory searched for config files (CWD if None).
            extra_config_files (Iterable[Path] | None): Explicit config files merged
                after discovery, in the given order.
            no_config (bool): If True, skip discovery (explicit files still apply).

        Returns:
            MutableWriterConfig: A draft ready to receive CLI overrides and be frozen.
        """
        draft: MutableWriterConfig = cls.from_defaults()

        if not no_config:
            for cfg_path in cls.discover_local_config_files(anchor or Path.cwd()):
                mc: MutableWriterConfig | None = cls.from_toml_file(cfg_path)
                if mc is not None:
                    draft = draft.merge_with(mc)

        for extra in extra_config_files or ():
            mc = cls.from_toml_file(Path(extra))
            if mc is not None:
                draft = draft.merge_with(mc)

        return draft

    # ------------------------------- Merging -------------------------------

    def merge_with(self, other: MutableWriterConfig) -> MutableWriterConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableWriterConfig(
            indent=other.indent if other.indent is not None else self.indent,
            infer_types=other.infer_types if other.infer_types is not None else self.infer_types,
            trailing_newline=other.trailing_newline
            if other.trailing_newline is not None
            else self.trailing_newline,
            config_files=self.config_files + other.config_files,
        )
