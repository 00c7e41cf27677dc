# topmark:header:start
#
#   project      : Repofetch
#   file         : registry.py
#   file_relpath : src/repofetch/languages/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification rules for every supported language.

Defines `LanguageSpec`, which describes how to recognize a language's source
files (by extension or exact file name) and how its comments look, and the
`LANGUAGE_SPECS` table holding exactly one spec per `Language` member.

Matching is name-based only: the lowercase suffix is looked up first against the
exact file name table, then against the extension table. Files that match no
spec are not counted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from repofetch.config.logging import get_logger
from repofetch.languages.model import Language

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from repofetch.config.logging import RepofetchLogger

logger: RepofetchLogger = get_logger(__name__)

_C_LINE: tuple[str, ...] = ("//",)
_C_BLOCK: tuple[tuple[str, str], ...] = (("/*", "*/"),)


@dataclass(frozen=True)
class LanguageSpec:
    """How to recognize and count one language.

    Attributes:
        language (Language): The language this spec describes.
        extensions (tuple[str, ...]): Lowercase file suffixes including the dot.
        filenames (tuple[str, ...]): Exact file names (e.g. ``Rakefile``).
        line_comments (tuple[str, ...]): Prefixes starting a comment that runs to
            the end of the line.
        block_comments (tuple[tuple[str, str], ...]): ``(start, end)`` delimiter
            pairs of block comments. Nesting is not tracked.
    """

    language: Language
    extensions: tuple[str, ...]
    filenames: tuple[str, ...] = ()
    line_comments: tuple[str, ...] = field(default=())
    block_comments: tuple[tuple[str, str], ...] = field(default=())


LANGUAGE_SPECS: tuple[LanguageSpec, ...] = (
    LanguageSpec(Language.C, (".c", ".h"), (), _C_LINE, _C_BLOCK),
    LanguageSpec(Language.CLOJURE, (".clj", ".cljc"), (), (";",)),
    LanguageSpec(
        Language.CPP,
        (".cc", ".cpp", ".cxx", ".c++", ".hh", ".hpp", ".hxx", ".inl"),
        (),
        _C_LINE,
        _C_BLOCK,
    ),
    LanguageSpec(Language.CSHARP, (".cs",), (), _C_LINE, _C_BLOCK),
    LanguageSpec(Language.GO, (".go",), (), _C_LINE, _C_BLOCK),
    LanguageSpec(Language.HASKELL, (".hs",), (), ("--",), (("{-", "-}"),)),
    LanguageSpec(Language.JAVA, (".java",), (), _C_LINE, _C_BLOCK),
    LanguageSpec(Language.LISP, (".lisp", ".lsp"), (), (";",), (("#|", "|#"),)),
    LanguageSpec(Language.LUA, (".lua",), (), ("--",), (("--[[", "]]"),)),
    LanguageSpec(Language.PYTHON, (".py", ".pyw"), (), ("#",)),
    LanguageSpec(Language.R, (".r",), (), ("#",)),
    LanguageSpec(
        Language.RUBY,
        (".rb",),
        ("Rakefile", "Gemfile"),
        ("#",),
        (("=begin", "=end"),),
    ),
    LanguageSpec(Language.RUST, (".rs",), (), _C_LINE, _C_BLOCK),
    LanguageSpec(Language.SCALA, (".scala", ".sc"), (), _C_LINE, _C_BLOCK),
    LanguageSpec(Language.SHELL, (".sh", ".bash"), (), ("#",)),
    LanguageSpec(Language.TYPESCRIPT, (".ts", ".mts", ".cts"), (), _C_LINE, _C_BLOCK),
    LanguageSpec(Language.JAVASCRIPT, (".js", ".mjs", ".cjs"), (), _C_LINE, _C_BLOCK),
)


def _index_specs() -> tuple[Mapping[str, LanguageSpec], Mapping[str, LanguageSpec]]:
    by_extension: dict[str, LanguageSpec] = {}
    by_filename: dict[str, LanguageSpec] = {}
    for spec in LANGUAGE_SPECS:
        for ext in spec.extensions:
            if ext in by_extension:
                logger.warning(
                    "Extension %s claimed by both %s and %s; keeping %s",
                    ext,
                    by_extension[ext].language.value,
                    spec.language.value,
                    by_extension[ext].language.value,
                )
                continue
            by_extension[ext] = spec
        for name in spec.filenames:
            by_filename.setdefault(name, spec)
    return MappingProxyType(by_extension), MappingProxyType(by_filename)


_BY_EXTENSION, _BY_FILENAME = _index_specs()


def get_language_spec(language: Language) -> LanguageSpec:
    """Return the `LanguageSpec` of ``language``.

    Args:
        language (Language): The language to look up.

    Returns:
        LanguageSpec: Its classification rules.
    """
    for spec in LANGUAGE_SPECS:
        if spec.language is language:
            return spec
    # LANGUAGE_SPECS covers every member; tests enforce it.
    raise KeyError(language)


def spec_for_path(path: Path) -> LanguageSpec | None:
    """Return the language spec matching ``path`` by name, or None.

    Args:
        path (Path): A file path; only its name is inspected.

    Returns:
        LanguageSpec | None: The matching spec, or None for unsupported files.
    """
    spec = _BY_FILENAME.get(path.name)
    if spec is not None:
        return spec
    return _BY_EXTENSION.get(path.suffix.lower())


def language_for_path(path: Path) -> Language | None:
    """Return the language of ``path`` by name, or None."""
    spec = spec_for_path(path)
    return spec.language if spec else None
