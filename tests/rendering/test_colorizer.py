# topmark:header:start
#
#   project      : Repofetch
#   file         : test_colorizer.py
#   file_relpath : tests/rendering/test_colorizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for palette resolution and line colorization."""

from __future__ import annotations

import click

from repofetch.rendering.colorizer import (
    ESCAPE_OVERHEAD,
    NEUTRAL_COLOR,
    ColorizedLine,
    colorize_line,
    escape_overhead,
    primary_color,
    resolve_color,
)
from tests.conftest import parametrize


@parametrize(
    ("palette", "index", "expected"),
    [
        (("red", "blue"), 0, "red"),
        (("red", "blue"), 1, "blue"),
        (("red", "blue"), 2, NEUTRAL_COLOR),
        (("red",), 9, NEUTRAL_COLOR),
        ((), 0, NEUTRAL_COLOR),
        (("green",), None, "green"),
    ],
)
def test_resolve_color(palette: tuple[str, ...], index: int | None, expected: str) -> None:
    """In-range slots select the palette color; anything else is neutral."""
    assert resolve_color(palette, index) == expected


def test_primary_color_falls_back_to_neutral() -> None:
    """An empty palette labels in the neutral color."""
    assert primary_color(("cyan", "red")) == "cyan"
    assert primary_color(()) == NEUTRAL_COLOR


def test_overhead_matches_click_style() -> None:
    """The fixed overhead equals what click.style adds for one foreground color."""
    for color in ("white", "bright_red", "blue"):
        assert len(click.style("x", fg=color)) - 1 == ESCAPE_OVERHEAD
    assert escape_overhead(enable_color=False) == 0


def test_empty_line() -> None:
    """An empty line colorizes to nothing."""
    assert colorize_line("", ("red",)) == ColorizedLine("", 0)


def test_line_without_markers_is_unchanged() -> None:
    """Plain lines are neither styled nor widened."""
    assert colorize_line("  ___  ", ("red",)) == ColorizedLine("  ___  ", 0)


def test_marked_segments_are_styled() -> None:
    """Each marker segment is wrapped in its palette color."""
    result = colorize_line("ab{0}cd{1}ef", ("red", "blue"))
    assert result.text == "ab" + click.style("cd", fg="red") + click.style("ef", fg="blue")
    assert result.extra_width == 2 * ESCAPE_OVERHEAD


def test_out_of_range_marker_uses_neutral_color() -> None:
    """A marker beyond the palette never fails; it renders in the neutral color."""
    result = colorize_line("{7}x", ("red",))
    assert result.text == click.style("x", fg=NEUTRAL_COLOR)
    assert result.extra_width == ESCAPE_OVERHEAD


def test_empty_marker_segment_still_counts() -> None:
    """A marker followed directly by another marker still emits an escape pair."""
    result = colorize_line("{0}{1}x", ("red", "blue"))
    assert result.extra_width == 2 * ESCAPE_OVERHEAD
    assert click.unstyle(result.text) == "x"


def test_color_disabled() -> None:
    """Without color, markers are dropped and no overhead is reported."""
    assert colorize_line("{0}ab{1}cd", ("red", "blue"), enable_color=False) == ColorizedLine(
        "abcd", 0
    )
