# topmark:header:start
#
#   project      : Repofetch
#   file         : __init__.py
#   file_relpath : src/repofetch/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Repofetch package.

Repofetch renders a terminal summary of a source repository: the dominant
language with its ASCII-art logo, the most active authors, the license and the
number of code lines, laid out side by side. It exposes a click CLI and a small
typed API (`repofetch.gather.summary.gather_summary` and
`repofetch.rendering.layout.compose_summary`).
"""

from __future__ import annotations
