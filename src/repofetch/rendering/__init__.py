# topmark:header:start
#
#   project      : Repofetch
#   file         : __init__.py
#   file_relpath : src/repofetch/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering engine for Repofetch.

This package turns a gathered `repofetch.summary.Summary` into terminal text.

Public modules:
    - repofetch.rendering.markup: marker tokenizer and visual widths
    - repofetch.rendering.colorizer: palette resolution and ANSI wrapping
    - repofetch.rendering.logos: bundled logo templates
    - repofetch.rendering.layout: side-by-side composition
    - repofetch.rendering.colored_enum: enums carrying a color palette
"""

from __future__ import annotations
