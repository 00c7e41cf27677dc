# topmark:header:start
#
#   project      : Repofetch
#   file         : types.py
#   file_relpath : src/repofetch/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Lightweight config types and aliases.

Kept free of other Repofetch imports so low-level modules can use them without
import cycles.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Generic mapping accepted by config loaders (click params dicts, plain dicts in tests).
ArgsLike = Mapping[str, Any]

# Parsed TOML content as plain Python containers.
TomlTable = dict[str, Any]
