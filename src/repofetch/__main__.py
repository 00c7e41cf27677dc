# topmark:header:start
#
#   project      : Repofetch
#   file         : __main__.py
#   file_relpath : src/repofetch/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Repofetch via ``python -m repofetch``.

It delegates directly to :func:`repofetch.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how Repofetch is launched.

Examples:
    Render the summary for the current directory::

        python -m repofetch
"""

from __future__ import annotations

from repofetch.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
