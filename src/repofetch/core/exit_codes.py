# topmark:header:start
#
#   project      : Repofetch
#   file         : exit_codes.py
#   file_relpath : src/repofetch/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the Repofetch CLI.

Repofetch aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. Every fatal data-gathering failure gets
its own code so scripts can tell *why* no summary was rendered.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the Repofetch CLI.

    Attributes:
        SUCCESS: The summary was rendered.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        NOT_A_REPOSITORY: The target directory is not the root of a git
            repository. Mirrors BSD ``EX_DATAERR (65)``.
        SOURCE_NOT_FOUND: No source file of a supported language was found.
            Mirrors BSD ``EX_NOINPUT (66)``.
        VCS_UNAVAILABLE: The ``git`` executable cannot be run. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        DIRECTORY_UNREADABLE: The target directory cannot be listed. Mirrors
            BSD ``EX_IOERR (74)``.
        METADATA_UNREADABLE: The repository configuration cannot be read.
            Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    NOT_A_REPOSITORY = 65  # EX_DATAERR
    SOURCE_NOT_FOUND = 66  # EX_NOINPUT
    VCS_UNAVAILABLE = 69  # EX_UNAVAILABLE
    DIRECTORY_UNREADABLE = 74  # EX_IOERR
    METADATA_UNREADABLE = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
