# topmark:header:start
#
#   project      : Repofetch
#   file         : options.py
#   file_relpath : src/repofetch/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color) and their
resolution logic, so commands and groups can stay thin. The helpers here are
Click-aware.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, ParamSpec, TypeVar

import click

from repofetch.cli.cli_types import EnumChoiceParam
from repofetch.cli.errors import RepofetchUsageError
from repofetch.cli_shared.color import ColorMode
from repofetch.config.logging import TRACE_LEVEL, get_logger

if TYPE_CHECKING:
    from repofetch.config.logging import RepofetchLogger

P = ParamSpec("P")
R = TypeVar("R")

logger: RepofetchLogger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        RepofetchUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise RepofetchUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if verbose_count:
        return verbose_count
    return -quiet_count


def verbosity_to_log_level(verbosity: int) -> int:
    """Map program-output verbosity to an internal logging level.

    Three or more -v flags set TRACE, two set DEBUG, one sets INFO. Otherwise only
    CRITICAL records are shown, so the summary on stdout stays clean.
    """
    if verbosity >= 3:  # -vvv
        return TRACE_LEVEL
    if verbosity == 2:  # -vv
        return logging.DEBUG
    if verbosity == 1:  # -v
        return logging.INFO
    return logging.CRITICAL


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Reduce informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --color and --no-color options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add --config and --no-config options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with configuration options added.
    """
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(exists=True, dir_okay=False),
        multiple=True,
        help="Additional TOML configuration file(s), merged after the repository's own.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore pyproject.toml, repofetch.toml and --config files.",
    )(f)
    return f
