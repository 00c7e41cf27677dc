# topmark:header:start
#
#   project      : Repofetch
#   file         : main.py
#   file_relpath : src/repofetch/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repofetch command-line entry point.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the shared console from there. Invoked without a
subcommand, `repofetch` renders the summary of the current directory.
"""

from __future__ import annotations

import click

from repofetch.cli.commands.languages import languages_command
from repofetch.cli.commands.show import show_command
from repofetch.cli.commands.version import version_command
from repofetch.cli.console import ClickConsole
from repofetch.cli.options import (
    common_color_options,
    common_verbose_options,
    resolve_verbosity,
    verbosity_to_log_level,
)
from repofetch.cli_shared.color import ColorMode, resolve_color_mode
from repofetch.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity
    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # Internal logging: the environment wins over -v
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else verbosity_to_log_level(level_cli)
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    logger.debug("CLI state: verbosity=%d color=%s", level_cli, enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Repofetch: show a summary of a git repository next to its language logo.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Repofetch CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        ctx.invoke(show_command)


cli.add_command(show_command)

cli.add_command(languages_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
