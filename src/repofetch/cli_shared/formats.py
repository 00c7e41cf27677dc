# topmark:header:start
#
#   project      : Repofetch
#   file         : formats.py
#   file_relpath : src/repofetch/cli_shared/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats of the informational commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format of `languages` and `version`.

    Attributes:
        DEFAULT: Human-readable text.
        JSON: A single JSON document (never colored).
    """

    DEFAULT = "default"
    JSON = "json"
