# topmark:header:start
#
#   project      : Repofetch
#   file         : colorizer.py
#   file_relpath : src/repofetch/rendering/colorizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn marked-up logo lines into ANSI-colored text.

Every marker segment of a line is wrapped with `click.style` in the palette color
its marker selects; text before the first marker is emitted as is. Because the
escape sequences are invisible on screen but still count as characters for
``str.ljust``, the colorizer also reports how many extra characters it added,
so the layout can widen its padding by exactly that amount.

`click.style(text, fg=<name>)` always emits ``ESC[<30-37|90-97>m`` (5 chars)
before the text and ``ESC[0m`` (4 chars) after it, hence `ESCAPE_OVERHEAD`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

import click

from repofetch.rendering.markup import parse_line

if TYPE_CHECKING:
    from collections.abc import Sequence

NEUTRAL_COLOR: Final[str] = "white"

# len("\x1b[37m") + len("\x1b[0m")
ESCAPE_OVERHEAD: Final[int] = 9


@dataclass(frozen=True)
class ColorizedLine:
    """Result of colorizing one template line.

    Attributes:
        text (str): The line with markers replaced by escape sequences.
        extra_width (int): Characters added by escape sequences (invisible on screen).
    """

    text: str
    extra_width: int


def resolve_color(palette: Sequence[str], index: int | None) -> str:
    """Return the palette color selected by ``index``.

    Args:
        palette (Sequence[str]): Ordered click color names.
        index (int | None): Palette slot; None selects the first color.

    Returns:
        str: ``palette[index]`` when in range, otherwise `NEUTRAL_COLOR`.
    """
    if index is None:
        index = 0
    if 0 <= index < len(palette):
        return palette[index]
    return NEUTRAL_COLOR


def primary_color(palette: Sequence[str]) -> str:
    """Return the first palette color, or `NEUTRAL_COLOR` for an empty palette."""
    return resolve_color(palette, 0)


def escape_overhead(*, enable_color: bool = True) -> int:
    """Return the invisible width one styled segment adds (0 when color is off)."""
    return ESCAPE_OVERHEAD if enable_color else 0


def colorize_line(
    line: str,
    palette: Sequence[str],
    *,
    enable_color: bool = True,
) -> ColorizedLine:
    """Colorize a marked-up line with ``palette``.

    Args:
        line (str): One line of a logo template.
        palette (Sequence[str]): Ordered click color names for the language.
        enable_color (bool): If False, markers are still removed but no escape
            sequences are emitted (and the extra width is 0).

    Returns:
        ColorizedLine: The rendered text and the padding adjustment, which equals
            ``number of marker segments × escape_overhead()``. A line without
            markers is returned unchanged with zero extra width.
    """
    if not line:
        return ColorizedLine("", 0)

    parts: list[str] = []
    styled = 0
    for segment in parse_line(line):
        if not segment.is_marked:
            parts.append(segment.text)
            continue
        if enable_color:
            parts.append(click.style(segment.text, fg=resolve_color(palette, segment.index)))
        else:
            parts.append(segment.text)
        styled += 1

    return ColorizedLine("".join(parts), styled * escape_overhead(enable_color=enable_color))
