# topmark:header:start
#
#   project      : Repofetch
#   file         : version.py
#   file_relpath : src/repofetch/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repofetch `version` command.

Prints the current Repofetch version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from repofetch.cli.cli_types import EnumChoiceParam
from repofetch.cli.cmd_common import get_console, get_effective_verbosity
from repofetch.cli_shared.formats import OutputFormat
from repofetch.constants import REPOFETCH_VERSION


@click.command(
    name="version",
    help="Show the current version of Repofetch.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of Repofetch.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": REPOFETCH_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("Repofetch version:", bold=True, underline=True))
        console.print(f"    {console.styled(REPOFETCH_VERSION, bold=True)}")
    else:
        console.print(console.styled(REPOFETCH_VERSION, bold=True))
