# topmark:header:start
#
#   project      : Repofetch
#   file         : errors.py
#   file_relpath : src/repofetch/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error kinds raised while gathering repository facts.

Each failure a summary run can hit is one `ErrorKind` member carrying its fixed,
human-readable message and the exit code the CLI terminates with. Gathering code
raises `RepofetchError` with a kind (and optionally a detail string); the CLI turns
it into a one-line diagnostic on stderr.

Rendering never raises these: every malformed render input has a defined fallback.
"""

from __future__ import annotations

from enum import Enum

from repofetch.core.exit_codes import ExitCode


class ErrorKind(Enum):
    """Fatal precondition failures, each with its message and exit code."""

    SOURCE_NOT_FOUND = (
        "Could not find any source code in this directory",
        ExitCode.SOURCE_NOT_FOUND,
    )
    VCS_UNAVAILABLE = ("Git failed to execute", ExitCode.VCS_UNAVAILABLE)
    METADATA_UNREADABLE = (
        "Could not retrieve git configuration data",
        ExitCode.METADATA_UNREADABLE,
    )
    DIRECTORY_UNREADABLE = ("Could not read directory", ExitCode.DIRECTORY_UNREADABLE)
    NOT_A_REPOSITORY = (
        "You are not at the root of a Git repository",
        ExitCode.NOT_A_REPOSITORY,
    )

    @property
    def message(self) -> str:
        """Return the fixed user-facing message of this kind."""
        return self.value[0]

    @property
    def exit_code(self) -> ExitCode:
        """Return the process exit code associated with this kind."""
        return self.value[1]


class RepofetchError(Exception):
    """A fatal data-gathering failure.

    Args:
        kind (ErrorKind): What went wrong.
        detail (str | None): Optional context (a path, an underlying error) that is
            appended to the fixed message.
    """

    def __init__(self, kind: ErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        """Return the full one-line diagnostic."""
        if self.detail:
            return f"{self.kind.message}: {self.detail}"
        return self.kind.message

    @property
    def exit_code(self) -> ExitCode:
        """Return the exit code for this failure."""
        return self.kind.exit_code
