# topmark:header:start
#
#   project      : Repofetch
#   file         : constants.py
#   file_relpath : src/repofetch/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repofetch Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

REPOFETCH_VERSION: str = get_version("repofetch")

# Per-directory configuration files, lowest precedence first.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
REPOFETCH_TOML_NAME: str = "repofetch.toml"

# Package holding the bundled `<language>.ascii` logo templates.
LOGO_RESOURCE_PACKAGE: str = "repofetch.rendering.resources"

DEFAULT_MAX_AUTHORS: int = 3
DEFAULT_EXCLUDED_DIRS: tuple[str, ...] = (".git", "target")
DEFAULT_LICENSE_PREFIXES: tuple[str, ...] = ("LICENSE", "COPYING")

UNKNOWN_LICENSE: str = "Unknown"

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "REPOFETCH_LOG_LEVEL"
