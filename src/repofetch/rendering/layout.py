# topmark:header:start
#
#   project      : Repofetch
#   file         : layout.py
#   file_relpath : src/repofetch/rendering/layout.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Side-by-side composition of a language logo and the summary info block.

Layout rules:
    - The logo column is as wide as the widest logo line (visual width, markers
      excluded), so all info lines start at the same screen column.
    - Each colorized logo line is left-justified to that width plus the invisible
      width its escape sequences add; an empty colorized line gets the plain width.
    - One space separates the logo column from the info text.
    - When the info block runs out, the remaining logo rows carry no info.
    - When the info block is longer than the logo, the logo column continues
      as blank padding so no info line is dropped.

Nothing here raises on malformed input: unknown palette slots fall back to the
neutral color and malformed markers are rendered as literal text.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import TYPE_CHECKING

import click

from repofetch.config.logging import get_logger
from repofetch.rendering.colorizer import colorize_line, primary_color
from repofetch.rendering.logos import get_logo_lines
from repofetch.rendering.markup import logo_width

if TYPE_CHECKING:
    from collections.abc import Sequence

    from repofetch.config.logging import RepofetchLogger
    from repofetch.summary import Summary

logger: RepofetchLogger = get_logger(__name__)

PROJECT_LABEL = "Project: "
LANGUAGE_LABEL = "Language: "
AUTHOR_LABEL = "Author: "
AUTHORS_LABEL = "Authors: "
REPO_LABEL = "Repo: "
LINES_LABEL = "Number of lines: "
LICENSE_LABEL = "License: "


def style_label(label: str, palette: Sequence[str], *, enable_color: bool = True) -> str:
    """Return ``label`` in bold and in the first palette color."""
    if not enable_color:
        return label
    return click.style(label, fg=primary_color(palette), bold=True)


def build_info_lines(summary: Summary, *, enable_color: bool = True) -> list[str]:
    """Build the info block shown to the right of the logo.

    Args:
        summary (Summary): The gathered facts.
        enable_color (bool): Whether labels are styled.

    Returns:
        list[str]: One entry per info row. Authors get one row each; the first
            carries the label and the following ones a blank label of the same
            width. No author row is emitted when there are no authors.
    """
    palette = summary.language.palette

    def _row(label: str, value: object) -> str:
        return f"{style_label(label, palette, enable_color=enable_color)}{value}"

    lines: list[str] = [
        _row(PROJECT_LABEL, summary.repository_name),
        _row(LANGUAGE_LABEL, summary.language.value),
    ]

    if summary.authors:
        title = AUTHORS_LABEL if len(summary.authors) > 1 else AUTHOR_LABEL
        lines.append(_row(title, summary.authors[0]))
        blank = " " * len(title)
        lines.extend(_row(blank, author) for author in summary.authors[1:])

    lines.append(_row(REPO_LABEL, summary.repository_url))
    lines.append(_row(LINES_LABEL, summary.line_count))
    lines.append(_row(LICENSE_LABEL, summary.license_label))
    return lines


def compose_rows(
    logo_lines: Sequence[str],
    info_lines: Sequence[str],
    palette: Sequence[str],
    *,
    enable_color: bool = True,
) -> list[str]:
    """Pair logo lines with info lines, one output row per pair.

    Args:
        logo_lines (Sequence[str]): Marked-up logo template lines.
        info_lines (Sequence[str]): Ready-to-print info lines.
        palette (Sequence[str]): Palette used to resolve the logo markers.
        enable_color (bool): Whether to emit escape sequences.

    Returns:
        list[str]: ``max(len(logo_lines), len(info_lines))`` rows, so exactly
            ``len(logo_lines)`` rows whenever the info block fits next to the logo.
    """
    left_pad = logo_width(logo_lines)
    rows: list[str] = []
    for logo_line, info_line in zip_longest(logo_lines, info_lines, fillvalue=""):
        colorized = colorize_line(logo_line, palette, enable_color=enable_color)
        pad = left_pad if not colorized.text else left_pad + colorized.extra_width
        rows.append(f"{colorized.text.ljust(pad)} {info_line}")

    if len(info_lines) > len(logo_lines):
        logger.debug(
            "Info block (%d lines) is longer than the logo (%d lines); padded the logo column",
            len(info_lines),
            len(logo_lines),
        )
    return rows


def compose_summary(summary: Summary, *, enable_color: bool = True) -> str:
    """Render ``summary`` next to its language logo.

    Args:
        summary (Summary): The gathered facts.
        enable_color (bool): Whether to emit ANSI escape sequences.

    Returns:
        str: The final text, one newline-terminated row per output row.
    """
    logo_lines = get_logo_lines(summary.language)
    info_lines = build_info_lines(summary, enable_color=enable_color)
    rows = compose_rows(
        logo_lines,
        info_lines,
        summary.language.palette,
        enable_color=enable_color,
    )
    return "".join(f"{row}\n" for row in rows)
