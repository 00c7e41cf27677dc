# topmark:header:start
#
#   project      : Repofetch
#   file         : show.py
#   file_relpath : src/repofetch/cli/commands/show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repofetch `show` command.

Gathers the facts of the repository rooted at PATH (default: the current
directory) and prints them next to the logo of its dominant language. This is
also what `repofetch` runs when invoked without a subcommand.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from repofetch.cli.cmd_common import get_console
from repofetch.cli.errors import RepofetchCliError, RepofetchUnexpectedError
from repofetch.cli.options import common_config_options
from repofetch.config.logging import get_logger
from repofetch.config.model import MutableConfig
from repofetch.core.errors import RepofetchError
from repofetch.gather.summary import gather_summary
from repofetch.rendering.layout import compose_summary

if TYPE_CHECKING:
    from repofetch.cli_shared.console_api import ConsoleLike
    from repofetch.config.logging import RepofetchLogger
    from repofetch.config.model import Config

logger: RepofetchLogger = get_logger(__name__)


def render_repository(console: ConsoleLike, root: Path, config: Config) -> None:
    """Gather the summary of ``root`` and print it.

    Raises:
        RepofetchCliError: When gathering fails; carries the matching exit code.
    """
    try:
        summary = gather_summary(root, config)
    except RepofetchError as e:
        logger.debug("Gathering failed: %s (%s)", e.kind.name, e.message)
        raise RepofetchCliError.from_error(e) from e
    except OSError as e:
        raise RepofetchUnexpectedError(f"{type(e).__name__}: {e}") from e

    console.print(compose_summary(summary, enable_color=console.enable_color), nl=False)


@click.command(
    name="show",
    help="Show the summary of the repository rooted at PATH (default: current directory).",
)
@click.argument(
    "path",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    required=False,
)
@click.option(
    "--authors",
    "max_authors",
    type=click.IntRange(min=0),
    default=None,
    help="Maximum number of authors to show (default: 3).",
)
@click.option(
    "--exclude",
    "-e",
    "exclude",
    multiple=True,
    help="Skip directories matching this gitignore-style pattern while counting lines.",
)
@common_config_options
def show_command(
    *,
    path: Path = Path("."),
    max_authors: int | None = None,
    exclude: tuple[str, ...] = (),
    config_files: tuple[str, ...] = (),
    no_config: bool = False,
) -> None:
    """Render the repository summary.

    Args:
        path (Path): Repository root.
        max_authors (int | None): Overrides the configured author count.
        exclude (tuple[str, ...]): Directory patterns added to the configured ones.
        config_files (tuple[str, ...]): Extra configuration files.
        no_config (bool): Ignore every configuration file.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)

    draft = MutableConfig.load_merged(
        path,
        extra_config_files=[Path(p) for p in config_files],
        no_config=no_config,
    )
    draft.apply_cli_args({"max_authors": max_authors, "exclude": list(exclude)})
    config = draft.freeze()
    logger.debug("Effective config: %s", config)

    render_repository(console, path, config)
