# topmark:header:start
#
#   project      : Repofetch
#   file         : color.py
#   file_relpath : src/repofetch/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color helpers for Repofetch.

- `ColorMode` enum.
- Color-mode resolution based on CLI flags, environment, and output format.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from repofetch.config.logging import get_logger

if TYPE_CHECKING:
    from repofetch.config.logging import RepofetchLogger


logger: RepofetchLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None = None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Machine formats**: If `output_format` is `"json"`, return False.
        2. **CLI override**: If `color_mode_override` is `ALWAYS` → True; if `NEVER` → False.
        3. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        4. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode_override (ColorMode | None): Parsed `--color` value; None means
            "not provided".
        output_format (str | None): Structured output mode; `"json"` suppresses color.
        stdout_isatty (bool | None): Optional override for TTY detection. When None,
            the function calls `sys.stdout.isatty()` and falls back to False on error.

    Returns:
        bool: True if ANSI color should be enabled.
    """
    # 1) Machine formats never use color
    if output_format and output_format.lower() == "json":
        return False

    # 2) CLI overrides
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    # 3) Env overrides
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False

    # 4) Auto: TTY?
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: stdout_isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
