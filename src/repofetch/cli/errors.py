# topmark:header:start
#
#   project      : Repofetch
#   file         : errors.py
#   file_relpath : src/repofetch/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Repofetch CLI.

Usage:
    Commands raise these exceptions to terminate with a one-line message on
    stderr and a specific exit code. Data-gathering failures
    (`repofetch.core.errors.RepofetchError`) are converted with
    `RepofetchCliError.from_error`.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from repofetch.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from repofetch.core.errors import RepofetchError


class RepofetchCliError(click.ClickException):
    """Base class for all Repofetch CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    @classmethod
    def from_error(cls, error: RepofetchError) -> RepofetchCliError:
        """Build a CLI error carrying the message and exit code of ``error``."""
        return cls(error.message, exit_code=int(error.exit_code))

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
        if console is not None:
            console.error(f"Error: {self.format_message()}")
            return
        super().show(file)


class RepofetchUsageError(RepofetchCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class RepofetchUnexpectedError(RepofetchCliError):
    """Error for unhandled/unknown errors (last-resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR
