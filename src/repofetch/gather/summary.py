# topmark:header:start
#
#   project      : Repofetch
#   file         : summary.py
#   file_relpath : src/repofetch/gather/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble a `Summary` for a repository root.

Steps run in a fixed order and the first failure aborts the run:

1. count code lines per language,
2. select the dominant language (``SOURCE_NOT_FOUND`` when there is none),
3. check that git can be executed (``VCS_UNAVAILABLE``),
4. open the repository at the root (``NOT_A_REPOSITORY``),
5. rank the authors,
6. read the remote URL and project name,
7. detect the license.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from repofetch.config.logging import get_logger
from repofetch.config.model import Config
from repofetch.core.errors import ErrorKind, RepofetchError
from repofetch.gather.git import get_authors, is_git_installed, open_repository, read_remote
from repofetch.gather.license import license_label
from repofetch.gather.loc import collect_language_stats, dominant_language, total_lines
from repofetch.summary import Summary

if TYPE_CHECKING:
    from repofetch.config.logging import RepofetchLogger

logger: RepofetchLogger = get_logger(__name__)


def gather_summary(root: Path | str, config: Config | None = None) -> Summary:
    """Collect every fact shown for the repository rooted at ``root``.

    Args:
        root (Path | str): Working tree root of the repository.
        config (Config | None): Runtime configuration; defaults when None.

    Returns:
        Summary: The gathered facts.

    Raises:
        RepofetchError: When one of the steps above fails.
    """
    config = config or Config()
    root_path = Path(root)
    logger.info("Gathering summary for %s", root_path)
    if not root_path.is_dir():
        raise RepofetchError(ErrorKind.DIRECTORY_UNREADABLE, str(root_path))

    stats = collect_language_stats(root_path, config.exclude)
    language = dominant_language(stats)
    if language is None:
        raise RepofetchError(ErrorKind.SOURCE_NOT_FOUND)
    logger.debug("Dominant language: %s", language.value)

    if not is_git_installed():
        raise RepofetchError(ErrorKind.VCS_UNAVAILABLE)

    repo = open_repository(root_path)
    try:
        authors = get_authors(repo, config.max_authors)
        remote = read_remote(repo)
    finally:
        repo.close()

    summary = Summary(
        language=language,
        authors=tuple(authors),
        repository_name=remote.name,
        repository_url=remote.url,
        line_count=total_lines(stats),
        license_label=license_label(root_path, config.license_files),
    )
    logger.debug("Summary: %s", summary)
    return summary
