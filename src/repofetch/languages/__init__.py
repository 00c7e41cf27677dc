# topmark:header:start
#
#   project      : Repofetch
#   file         : __init__.py
#   file_relpath : src/repofetch/languages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Supported languages and their classification rules.

`Language` is the closed enumeration every summary is rendered for; each member
carries its display name and palette. `LANGUAGE_SPECS` maps file names and
extensions to languages and describes their comment syntax.
"""

from __future__ import annotations

from repofetch.languages.model import Language
from repofetch.languages.registry import (
    LANGUAGE_SPECS,
    LanguageSpec,
    get_language_spec,
    language_for_path,
    spec_for_path,
)

__all__ = [
    "LANGUAGE_SPECS",
    "Language",
    "LanguageSpec",
    "get_language_spec",
    "language_for_path",
    "spec_for_path",
]
