# topmark:header:start
#
#   project      : Repofetch
#   file         : markup.py
#   file_relpath : src/repofetch/rendering/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-marker tokenizer for logo templates.

Logo templates are plain text with inline markers of the exact form ``{d}``,
where ``d`` is a single decimal digit selecting a palette slot. A marker colors
the text that follows it, up to the next marker or the end of the line::

    {0}  ______  {1}__
    {0} / ____/ {1}/ /

Grammar (per line)::

    line    := text? (marker text)*
    marker  := '{' DIGIT '}'
    text    := any characters; a '{' that does not start a marker is literal

The tokenizer never fails: anything that is not a well-formed marker (a lone
``{``, ``{x}``, ``{12}``, an unterminated ``{3``) is kept as literal text.
There is no nesting and no escape for the delimiter itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

MARKER_RE: re.Pattern[str] = re.compile(r"\{([0-9])\}")


@dataclass(frozen=True)
class Segment:
    """A run of text with the palette slot that colors it.

    Attributes:
        text (str): The visible characters of the run (may be empty right after a
            marker, e.g. ``"{0}{1}x"``).
        index (int | None): Palette slot selected by the preceding marker, or None
            for text that precedes every marker on the line.
    """

    text: str
    index: int | None = None

    @property
    def is_marked(self) -> bool:
        """Return True when the segment was introduced by a marker."""
        return self.index is not None


def parse_line(line: str) -> tuple[Segment, ...]:
    """Split a template line into segments.

    Args:
        line (str): One line of a logo template (no line terminator).

    Returns:
        tuple[Segment, ...]: Leading unmarked text (omitted when empty) followed by
            one segment per marker, in order. An empty line yields no segments.
    """
    segments: list[Segment] = []
    pos = 0
    index: int | None = None
    for match in MARKER_RE.finditer(line):
        text = line[pos : match.start()]
        if index is not None or text:
            segments.append(Segment(text, index))
        index = int(match.group(1))
        pos = match.end()
    tail = line[pos:]
    if index is not None or tail:
        segments.append(Segment(tail, index))
    return tuple(segments)


def strip_markers(line: str) -> str:
    """Return ``line`` with every well-formed marker removed."""
    return MARKER_RE.sub("", line)


def visual_width(line: str) -> int:
    """Return the number of characters a viewer sees for a marked-up line.

    Marker prefixes are excluded; everything else, including malformed marker
    text, is counted. Must be computed on the template, before colorization adds
    invisible escape sequences.

    Args:
        line (str): One line of a logo template.

    Returns:
        int: The on-screen width in characters.
    """
    return sum(len(segment.text) for segment in parse_line(line))


def logo_width(lines: Iterable[str]) -> int:
    """Return the widest visual width over all lines (0 for no lines)."""
    return max((visual_width(line) for line in lines), default=0)
