# topmark:header:start
#
#   project      : Repofetch
#   file         : test_markup_property.py
#   file_relpath : tests/rendering/test_markup_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Property-based tests for markers, widths and colorization.

These tests use Hypothesis to generate logo-like lines made of text runs and
``{d}`` markers, then check the width and escape-overhead invariants the layout
composer relies on.
"""

from __future__ import annotations

import click
from hypothesis import given
from hypothesis import strategies as st

from repofetch.rendering.colorizer import ESCAPE_OVERHEAD, colorize_line
from repofetch.rendering.markup import parse_line, strip_markers, visual_width
from tests.strategies_repofetch import count_markers, marked_lines, palettes, plain_text


@given(plain_text())
def test_plain_text_width_is_length(line: str) -> None:
    """A line without `{` measures exactly its length."""
    assert visual_width(line) == len(line)


@given(plain_text(), palettes())
def test_plain_text_is_not_colorized(line: str, palette: tuple[str, ...]) -> None:
    """A line without markers comes back unchanged with zero extra width."""
    result = colorize_line(line, palette)
    assert result.text == line
    assert result.extra_width == 0


@given(marked_lines())
def test_strip_then_measure_equals_measure(line: str) -> None:
    """Removing markers first does not change the visual width."""
    assert visual_width(strip_markers(line)) == visual_width(line)
    assert len(strip_markers(line)) == visual_width(line)


@given(marked_lines(), palettes())
def test_extra_width_is_markers_times_overhead(line: str, palette: tuple[str, ...]) -> None:
    """Every marker adds one escape pair; the reported extra width matches it."""
    result = colorize_line(line, palette)
    if line:
        assert result.extra_width == count_markers(line) * ESCAPE_OVERHEAD
    else:
        assert result.extra_width == 0
    assert len(result.text) == visual_width(line) + result.extra_width
    assert click.unstyle(result.text) == strip_markers(line)


@given(marked_lines(), palettes())
def test_color_disabled_has_no_overhead(line: str, palette: tuple[str, ...]) -> None:
    """Without color, markers vanish and nothing invisible is added."""
    result = colorize_line(line, palette, enable_color=False)
    assert result.text == strip_markers(line)
    assert result.extra_width == 0


@given(marked_lines())
def test_segments_cover_the_visible_text(line: str) -> None:
    """Concatenated segment texts are the line without markers."""
    assert "".join(s.text for s in parse_line(line)) == strip_markers(line)
