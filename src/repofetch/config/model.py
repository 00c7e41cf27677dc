# topmark:header:start
#
#   project      : Repofetch
#   file         : model.py
#   file_relpath : src/repofetch/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Layered Repofetch configuration.

`MutableConfig` collects values from the built-in defaults, the repository's
configuration files and CLI overrides; `MutableConfig.freeze` turns it into the
immutable `Config` the gathering stage reads.

Merge order (lowest → highest precedence):
    1) Built-in defaults
    2) ``[tool.repofetch]`` in ``<root>/pyproject.toml``
    3) ``<root>/repofetch.toml``
    4) Files passed explicitly via ``--config`` (in the order provided)
    5) CLI options

TOML keys (``repofetch.toml`` top level, or ``[tool.repofetch]``)::

    authors = 3                      # maximum number of authors shown
    exclude = [".git", "target"]     # gitignore-style directory patterns
    license-files = ["LICENSE", "COPYING"]  # license file name prefixes
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from repofetch.config.loaders import (
    get_int_value_or_none_checked,
    get_string_list_value_or_none_checked,
    load_toml_dict,
)
from repofetch.config.logging import get_logger
from repofetch.constants import (
    DEFAULT_EXCLUDED_DIRS,
    DEFAULT_LICENSE_PREFIXES,
    DEFAULT_MAX_AUTHORS,
    PYPROJECT_TOML_NAME,
    REPOFETCH_TOML_NAME,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from repofetch.config.logging import RepofetchLogger
    from repofetch.config.types import ArgsLike, TomlTable

logger: RepofetchLogger = get_logger(__name__)

KEY_AUTHORS: Final[str] = "authors"
KEY_EXCLUDE: Final[str] = "exclude"
KEY_LICENSE_FILES: Final[str] = "license-files"

# Marker recorded in `config_files` when CLI options were applied.
CLI_OVERRIDE_STR: Final[str] = "<CLI overrides>"


# ------------------ Immutable runtime config ------------------
@dataclass(frozen=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        max_authors (int): Maximum number of authors shown.
        exclude (tuple[str, ...]): Gitignore-style patterns of directories skipped
            while counting lines.
        license_files (tuple[str, ...]): File name prefixes of license files.
        config_files (tuple[Path | str, ...]): Configuration sources that were applied.
    """

    max_authors: int = DEFAULT_MAX_AUTHORS
    exclude: tuple[str, ...] = DEFAULT_EXCLUDED_DIRS
    license_files: tuple[str, ...] = DEFAULT_LICENSE_PREFIXES
    config_files: tuple[Path | str, ...] = ()


# -------------------------- Mutable builder --------------------------
@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left at None are unset in this layer and inherit from the layer
    below when merged.
    """

    max_authors: int | None = None
    exclude: list[str] | None = None
    license_files: list[str] | None = None
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset fields with defaults."""
        return Config(
            max_authors=self.max_authors if self.max_authors is not None else DEFAULT_MAX_AUTHORS,
            exclude=tuple(self.exclude) if self.exclude is not None else DEFAULT_EXCLUDED_DIRS,
            license_files=tuple(self.license_files)
            if self.license_files is not None
            else DEFAULT_LICENSE_PREFIXES,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls(
            max_authors=DEFAULT_MAX_AUTHORS,
            exclude=list(DEFAULT_EXCLUDED_DIRS),
            license_files=list(DEFAULT_LICENSE_PREFIXES),
        )

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableConfig:
        """Build a configuration layer from parsed TOML.

        Invalid values are logged and left unset, so the layer below wins.

        Args:
            data (TomlTable): The Repofetch table (top level of ``repofetch.toml`` or
                ``[tool.repofetch]``).
            config_file (Path | None): Source file, used in diagnostics.

        Returns:
            MutableConfig: The parsed layer.
        """
        where = str(config_file) if config_file else "<dict>"
        known = {KEY_AUTHORS, KEY_EXCLUDE, KEY_LICENSE_FILES}
        for key in data:
            if key not in known:
                logger.warning("Unknown configuration key %r in %s", key, where)

        return cls(
            max_authors=get_int_value_or_none_checked(data, KEY_AUTHORS, where=where),
            exclude=get_string_list_value_or_none_checked(data, KEY_EXCLUDE, where=where),
            license_files=get_string_list_value_or_none_checked(
                data, KEY_LICENSE_FILES, where=where
            ),
            config_files=[config_file] if config_file else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``repofetch.toml`` and ``pyproject.toml``; for the latter only
        the ``[tool.repofetch]`` section is read.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed layer; None if the file holds no
                Repofetch section.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)

        toml_data: TomlTable = load_toml_dict(path)

        if path.name == PYPROJECT_TOML_NAME:
            tool_table: Any = toml_data.get("tool", {})
            tool_section: Any = (
                tool_table.get("repofetch", {}) if isinstance(tool_table, dict) else None
            )
            if not isinstance(tool_section, dict) or not tool_section:
                logger.debug("No [tool.repofetch] section in %s", path)
                return None
            toml_data = tool_section

        draft: MutableConfig = cls.from_toml_dict(toml_data, config_file=path)
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def discover_local_config_files(cls, root: Path) -> list[Path]:
        """Return the configuration files present in ``root``, lowest precedence first."""
        found: list[Path] = []
        for name in (PYPROJECT_TOML_NAME, REPOFETCH_TOML_NAME):
            candidate = root / name
            if candidate.is_file():
                found.append(candidate)
        logger.trace("Discovered config files in %s: %s", root, found)
        return found

    @classmethod
    def load_merged(
        cls,
        root: Path,
        *,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge the configuration layers into a draft `MutableConfig`.

        Args:
            root (Path): Repository root whose configuration files are read.
            extra_config_files (Iterable[Path] | None): Explicit additional config
                files merged after the discovered ones, in the given order.
            no_config (bool): If True, skip every configuration file.

        Returns:
            MutableConfig: A draft ready to receive CLI overrides and be frozen.
        """
        draft: MutableConfig = cls.from_defaults()
        if no_config:
            return draft

        for cfg_path in [*cls.discover_local_config_files(root), *(extra_config_files or ())]:
            layer: MutableConfig | None = cls.from_toml_file(Path(cfg_path))
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        return MutableConfig(
            max_authors=other.max_authors if other.max_authors is not None else self.max_authors,
            exclude=list(other.exclude) if other.exclude is not None else self.exclude,
            license_files=list(other.license_files)
            if other.license_files is not None
            else self.license_files,
            config_files=self.config_files + other.config_files,
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply overrides from a parsed arguments mapping (CLI or API).

        Recognized keys: ``max_authors`` (int or None), ``exclude`` (patterns added to
        the configured ones). Keys that drive file discovery (``--config``,
        ``--no-config``) are handled by `load_merged`.

        Args:
            args (ArgsLike): Parsed arguments mapping.

        Returns:
            MutableConfig: This builder, updated in place.
        """
        logger.debug("Applying CLI arguments to MutableConfig: %s", args)
        self.config_files.append(CLI_OVERRIDE_STR)

        if args.get("max_authors") is not None:
            self.max_authors = int(args["max_authors"])
        if args.get("exclude"):
            self.exclude = [*(self.exclude or []), *args["exclude"]]
        if args.get("license_files"):
            self.license_files = list(args["license_files"])
        return self
