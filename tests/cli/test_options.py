# topmark:header:start
#
#   project      : Repofetch
#   file         : test_options.py
#   file_relpath : tests/cli/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for shared CLI option resolution (verbosity and color)."""

from __future__ import annotations

import logging

import click
import pytest

from repofetch.cli.cli_types import EnumChoiceParam
from repofetch.cli.errors import RepofetchUsageError
from repofetch.cli.options import resolve_verbosity, verbosity_to_log_level
from repofetch.cli_shared.color import ColorMode, resolve_color_mode
from repofetch.config.logging import TRACE_LEVEL
from tests.conftest import parametrize


@parametrize(
    ("verbose", "quiet", "expected"),
    [(0, 0, 0), (2, 0, 2), (0, 1, -1)],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    """Verbose counts are positive, quiet counts negative."""
    assert resolve_verbosity(verbose, quiet) == expected


def test_resolve_verbosity_rejects_both() -> None:
    """-v and -q together are a usage error."""
    with pytest.raises(RepofetchUsageError):
        resolve_verbosity(1, 1)


@parametrize(
    ("verbosity", "level"),
    [
        (-1, logging.CRITICAL),
        (0, logging.CRITICAL),
        (1, logging.INFO),
        (2, logging.DEBUG),
        (3, TRACE_LEVEL),
        (5, TRACE_LEVEL),
    ],
)
def test_verbosity_to_log_level(verbosity: int, level: int) -> None:
    """Each extra -v lowers the log threshold."""
    assert verbosity_to_log_level(verbosity) == level


def test_json_output_never_uses_color() -> None:
    """Machine output is plain even when color is forced."""
    assert (
        resolve_color_mode(color_mode_override=ColorMode.ALWAYS, output_format="json") is False
    )


def test_cli_override_beats_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """--color wins over FORCE_COLOR and NO_COLOR."""
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.ALWAYS) is True
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.NEVER) is False


def test_environment_beats_tty_detection(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR enables color off a TTY; NO_COLOR disables it on one."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=False) is True
    monkeypatch.setenv("FORCE_COLOR", "0")
    monkeypatch.setenv("NO_COLOR", "")
    assert resolve_color_mode(color_mode_override=None, stdout_isatty=True) is False


@parametrize("isatty", [True, False])
def test_auto_follows_tty(isatty: bool) -> None:
    """Without overrides the TTY status decides."""
    assert resolve_color_mode(color_mode_override=ColorMode.AUTO, stdout_isatty=isatty) is isatty


def test_enum_choice_param_is_case_insensitive() -> None:
    """Enum values are matched ignoring case."""
    param_type = EnumChoiceParam(ColorMode)
    assert param_type.convert("ALWAYS", None, None) is ColorMode.ALWAYS
    assert param_type.convert(ColorMode.NEVER, None, None) is ColorMode.NEVER


def test_enum_choice_param_rejects_unknown_values() -> None:
    """Unknown values raise a Click parameter error listing the choices."""
    with pytest.raises(click.BadParameter, match="auto, always, never"):
        EnumChoiceParam(ColorMode).convert("sometimes", None, None)
