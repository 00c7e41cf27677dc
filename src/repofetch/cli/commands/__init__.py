# topmark:header:start
#
#   project      : Repofetch
#   file         : __init__.py
#   file_relpath : src/repofetch/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repofetch CLI subcommands (``show``, ``languages``, ``version``)."""
