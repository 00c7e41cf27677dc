# topmark:header:start
#
#   project      : Repofetch
#   file         : cmd_common.py
#   file_relpath : src/repofetch/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by the Repofetch subcommands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from repofetch.cli.console import ClickConsole

if TYPE_CHECKING:
    import click

    from repofetch.cli_shared.console_api import ConsoleLike


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored by the group, creating a plain one when absent.

    Commands invoked directly (without the `cli` group, e.g. in tests) have no
    shared state yet.
    """
    ctx.ensure_object(dict)
    console: ConsoleLike | None = ctx.obj.get("console")
    if console is None:
        console = ClickConsole(enable_color=False)
        ctx.obj["console"] = console
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored by the group (0 when unset)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))
