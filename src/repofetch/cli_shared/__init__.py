# topmark:header:start
#
#   project      : Repofetch
#   file         : __init__.py
#   file_relpath : src/repofetch/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by CLI frontends (color resolution, console protocol)."""

from __future__ import annotations
