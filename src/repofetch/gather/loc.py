# topmark:header:start
#
#   project      : Repofetch
#   file         : loc.py
#   file_relpath : src/repofetch/gather/loc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source-line statistics per language.

Walks a directory tree, classifies each file with `repofetch.languages` and
counts its code lines, i.e. lines that are neither blank nor entirely comment.
Excluded directories are given as gitignore-style patterns (``.git``,
``target``, ``build/``, ``vendor/**``) evaluated relative to the walk root.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import GitIgnoreSpec

from repofetch.config.logging import get_logger
from repofetch.constants import DEFAULT_EXCLUDED_DIRS
from repofetch.languages.model import Language
from repofetch.languages.registry import spec_for_path

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from repofetch.config.logging import RepofetchLogger
    from repofetch.languages.registry import LanguageSpec

logger: RepofetchLogger = get_logger(__name__)

LanguageStats = dict[Language, int]


def _skip_string(rest: str) -> int:
    """Return the index just past the double-quoted literal opening ``rest``.

    An unterminated literal runs to the end of the line.
    """
    pos = 1
    while pos < len(rest):
        if rest[pos] == "\\":
            pos += 2
            continue
        if rest[pos] == '"':
            return pos + 1
        pos += 1
    return len(rest)


def _strip_comments(
    line: str,
    spec: LanguageSpec,
    open_end: str | None,
) -> tuple[str, str | None]:
    """Remove comment text from ``line``.

    Delimiters are matched left to right: a line comment ends the line, a block
    opener starts a span that may continue on later lines, and delimiters inside a
    double-quoted string literal are ignored.

    Args:
        line (str): The stripped source line.
        spec (LanguageSpec): Comment syntax of the file's language.
        open_end (str | None): End delimiter of a block comment still open from a
            previous line, or None.

    Returns:
        tuple[str, str | None]: The code left on the line and the end delimiter of
            a block comment left open at the end of the line.
    """
    code: list[str] = []
    rest = line
    while rest:
        if open_end is not None:
            pos = rest.find(open_end)
            if pos < 0:
                return "".join(code), open_end
            rest = rest[pos + len(open_end) :]
            open_end = None
            continue

        # Earliest delimiter wins; longer delimiters first on a tie (`--[[` over `--`).
        found: tuple[int, str, str | None] | None = None
        candidates: list[tuple[str, str | None]] = [
            ('"', '"'),
            *spec.block_comments,
            *((prefix, None) for prefix in spec.line_comments),
        ]
        for start, end in candidates:
            pos = rest.find(start)
            if pos < 0:
                continue
            if found is None or pos < found[0] or (pos == found[0] and len(start) > len(found[1])):
                found = (pos, start, end)
        if found is None:
            code.append(rest)
            break

        pos, start, end = found
        code.append(rest[:pos])
        if end is None:
            break
        if start == '"':
            stop = pos + _skip_string(rest[pos:])
            code.append(rest[pos:stop])
            rest = rest[stop:]
            continue
        rest = rest[pos + len(start) :]
        open_end = end
    return "".join(code), open_end


def count_code_lines(text: str, spec: LanguageSpec) -> int:
    """Count the code lines of ``text``.

    A line counts when anything other than whitespace remains after removing its
    comments. Block comments do not nest, and comment delimiters quoted in a
    string literal do not start a comment.

    Args:
        text (str): The file contents.
        spec (LanguageSpec): Comment syntax of the file's language.

    Returns:
        int: Number of code lines.
    """
    count = 0
    open_end: str | None = None
    for raw in text.splitlines():
        line = raw.strip()
        if not line:
            continue
        line, open_end = _strip_comments(line, spec, open_end)
        if line.strip():
            count += 1
    return count


def build_exclude_spec(exclude: Iterable[str]) -> GitIgnoreSpec:
    """Compile gitignore-style directory patterns."""
    return GitIgnoreSpec.from_lines(exclude)


def collect_language_stats(
    root: Path | str,
    exclude: Iterable[str] = DEFAULT_EXCLUDED_DIRS,
) -> LanguageStats:
    """Sum code lines per language below ``root``.

    Args:
        root (Path | str): Directory to walk.
        exclude (Iterable[str]): Gitignore-style patterns of directories to skip.

    Returns:
        LanguageStats: Code-line totals per language; languages without files are
            absent. Files that cannot be read or decoded are skipped.
    """
    root_path = Path(root)
    exclude_spec = build_exclude_spec(exclude)
    stats: LanguageStats = {}
    files_seen = 0

    for dirpath, dirnames, filenames in os.walk(root_path):
        current = Path(dirpath)
        rel_dir = current.relative_to(root_path)

        kept: list[str] = []
        for name in sorted(dirnames):
            rel = (rel_dir / name).as_posix()
            if exclude_spec.match_file(f"{rel}/"):
                logger.trace("Skipping excluded directory %s", rel)
                continue
            kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            path = current / name
            spec = spec_for_path(path)
            if spec is None:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping unreadable file %s: %s", path, e)
                continue
            lines = count_code_lines(text, spec)
            stats[spec.language] = stats.get(spec.language, 0) + lines
            files_seen += 1
            logger.trace("%s: %s, %d code lines", path, spec.language.value, lines)

    logger.debug(
        "Counted %d source file(s) below %s: %s",
        files_seen,
        root_path,
        {language.value: n for language, n in stats.items()},
    )
    return stats


def total_lines(stats: Mapping[Language, int]) -> int:
    """Return the total number of code lines over all languages."""
    return sum(stats.values())


def dominant_language(counts: Mapping[Language, int]) -> Language | None:
    """Return the language with the most code lines.

    Args:
        counts (Mapping[Language, int]): Code lines per language.

    Returns:
        Language | None: The language with the highest non-zero count; ties go to
            the language declared first in `Language`. None when every count is zero
            or the mapping is empty.
    """
    best: Language | None = None
    best_count = 0
    for language in Language:
        count = counts.get(language, 0)
        if count > best_count:
            best, best_count = language, count
    return best
