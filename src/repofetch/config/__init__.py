# topmark:header:start
#
#   project      : Repofetch
#   file         : __init__.py
#   file_relpath : src/repofetch/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Repofetch.

Defines the immutable `Config` and its `MutableConfig` builder, and the logging
setup shared by every module. Configuration is read with `tomlkit` from
``repofetch.toml`` or the ``[tool.repofetch]`` table of ``pyproject.toml``.
"""

from __future__ import annotations

from repofetch.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
