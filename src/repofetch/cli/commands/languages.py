# topmark:header:start
#
#   project      : Repofetch
#   file         : languages.py
#   file_relpath : src/repofetch/cli/commands/languages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repofetch `languages` command.

Lists the languages Repofetch recognizes, in tie-break order, with their palette
and (with ``--long``) the file extensions and names that identify them. Names given
as arguments (``repofetch languages rust c++``) restrict the listing to those
languages; they are matched case-insensitively against display names and
identifiers.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from repofetch.cli.cli_types import EnumChoiceParam
from repofetch.cli.cmd_common import get_console, get_effective_verbosity
from repofetch.cli.errors import RepofetchUsageError
from repofetch.cli_shared.formats import OutputFormat
from repofetch.languages import LANGUAGE_SPECS, Language, get_language_spec

if TYPE_CHECKING:
    from repofetch.languages.registry import LanguageSpec


def select_language_specs(names: tuple[str, ...]) -> tuple[LanguageSpec, ...]:
    """Return the specs of the named languages in tie-break order (all when empty).

    Raises:
        RepofetchUsageError: When a name matches no supported language.
    """
    if not names:
        return LANGUAGE_SPECS
    selected: set[Language] = set()
    for name in names:
        language = Language.from_name(name)
        if language is None:
            raise RepofetchUsageError(f"Unknown language: {name!r}")
        selected.add(language)
    return tuple(get_language_spec(language) for language in Language if language in selected)


@click.command(
    name="languages",
    help="List the supported languages.",
)
@click.argument("names", nargs=-1, metavar="[NAME]...")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show the extensions and file names of each language.",
)
def languages_command(
    *,
    names: tuple[str, ...] = (),
    output_format: OutputFormat | None = None,
    show_details: bool = False,
) -> None:
    """List supported languages.

    Args:
        names (tuple[str, ...]): Languages to show; every language when empty.
        output_format (OutputFormat | None): Output format; human-readable when None.
        show_details (bool): Include extensions and file names.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    show_details = show_details or get_effective_verbosity(ctx) > 0
    specs = select_language_specs(names)

    if fmt == OutputFormat.JSON:
        payload = [
            {
                "name": spec.language.value,
                "palette": list(spec.language.palette),
                "extensions": list(spec.extensions),
                "filenames": list(spec.filenames),
            }
            for spec in specs
        ]
        console.print(json.dumps(payload, indent=2))
        return

    width = max(len(spec.language.value) for spec in specs)
    for spec in specs:
        language = spec.language
        name = console.styled(f"{language.value:<{width}}", fg=language.palette[0], bold=True)
        palette = ", ".join(language.palette)
        if show_details:
            patterns = ", ".join([*spec.extensions, *spec.filenames])
            console.print(f"{name}  {palette:<22} {patterns}")
        else:
            console.print(f"{name}  {palette}")
