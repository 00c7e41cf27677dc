# topmark:header:start
#
#   project      : Repofetch
#   file         : loaders.py
#   file_relpath : src/repofetch/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Read and
parse errors are logged and yield an empty table, so a broken configuration file
never prevents a summary from being rendered.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from repofetch.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from repofetch.config.logging import RepofetchLogger
    from repofetch.config.types import TomlTable

logger: RepofetchLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``repofetch.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content; an empty dict on failure.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def get_int_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> int | None:
    """Return an optional non-negative int, warning when present but invalid.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc = f"{where}.{key}"
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
        return None
    if value < 0:
        logger.warning("Expected a non-negative int in %s, got %d", loc, value)
        return None
    return value


def get_string_list_value_or_none_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
) -> list[str] | None:
    """Return an optional list of strings, warning when present but invalid.

    A list holding any non-string item is rejected as a whole.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc = f"{where}.{key}"
    if not isinstance(value, list):
        logger.warning("Expected list in %s, got %s: %r", loc, type(value).__name__, value)
        return None
    items = cast("list[Any]", value)
    if not all(isinstance(item, str) for item in items):
        logger.warning("Expected a list of strings in %s, got %r", loc, items)
        return None
    return [str(item) for item in items]
