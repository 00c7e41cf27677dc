# topmark:header:start
#
#   project      : Repofetch
#   file         : __init__.py
#   file_relpath : src/repofetch/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across Repofetch.

The ``repofetch.core`` package provides small building blocks that are safe to
import from anywhere in the codebase (CLI, gathering, rendering, tests).

Included modules:

- ``exit_codes``
  Centralized exit codes for the CLI, aligned with BSD-style ``sysexits``
  where practical.

- ``errors``
  The tagged error kinds raised while gathering repository facts.
"""

from __future__ import annotations
