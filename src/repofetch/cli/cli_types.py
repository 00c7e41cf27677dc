# topmark:header:start
#
#   project      : Repofetch
#   file         : cli_types.py
#   file_relpath : src/repofetch/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types for Repofetch.

Defines `EnumChoiceParam`, a Click parameter type that parses a string-valued
`Enum` (`ColorMode`, `OutputFormat`) case-insensitively.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, Protocol, TypeVar

import click

if TYPE_CHECKING:

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

        def fail(
            self,
            message: str,
            param: click.Parameter | None = None,
            ctx: click.Context | None = None,
        ) -> None: ...

else:
    ParamTypeBase = click.ParamType

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """Convert a command-line string into a member of ``enum_cls``.

    Members are matched by value, ignoring case; the values are listed in help
    output and offered for shell completion.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.choices: list[str] = [str(member.value) for member in enum_cls]

    def get_metavar(self, param: click.Parameter, ctx: click.Context | None = None) -> str:
        """Show the accepted values as ``[a|b|c]``."""
        return f"[{'|'.join(self.choices)}]"

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        key = str(value).lower()
        for member in self.enum_cls:
            if str(member.value).lower() == key:
                return member
        self.fail(f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}", param, ctx)
        return None

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[click.shell_completion.CompletionItem]:
        """Complete the enum values starting with ``incomplete``."""
        from click.shell_completion import CompletionItem

        prefix = incomplete.lower()
        return [CompletionItem(c) for c in self.choices if c.lower().startswith(prefix)]

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"
