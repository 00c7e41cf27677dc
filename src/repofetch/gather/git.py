# topmark:header:start
#
#   project      : Repofetch
#   file         : git.py
#   file_relpath : src/repofetch/gather/git.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Git repository facts: remote, project name and authors.

Repository access goes through GitPython. GitPython probes the ``git`` binary when
it is first imported, so the import is deferred to the functions that need it;
`is_git_installed` can therefore be called (and fail cleanly) on systems without
git.
"""

from __future__ import annotations

import configparser
import subprocess
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from repofetch.config.logging import get_logger
from repofetch.core.errors import ErrorKind, RepofetchError

if TYPE_CHECKING:
    from git import Repo

    from repofetch.config.logging import RepofetchLogger

logger: RepofetchLogger = get_logger(__name__)

# Remotes consulted for the project URL, highest priority first.
REMOTE_PRIORITY: tuple[str, ...] = ("upstream", "origin")

AUTHOR_LOG_FORMAT = "--format=%aN"


@dataclass(frozen=True)
class RemoteInfo:
    """Project name and URL read from the repository configuration.

    Attributes:
        name (str): Last path component of the URL without a ``.git`` suffix.
        url (str): The remote URL as configured (empty when no remote is set).
    """

    name: str = ""
    url: str = ""


def is_git_installed() -> bool:
    """Return True when ``git --version`` runs successfully."""
    try:
        proc = subprocess.run(
            ["git", "--version"],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        logger.debug("git is not executable: %s", e)
        return False
    logger.trace("git --version -> %d %s", proc.returncode, proc.stdout.strip())
    return proc.returncode == 0


def open_repository(path: Path | str) -> Repo:
    """Open the repository whose working tree root is ``path``.

    Parent directories are not searched: a subdirectory of a working tree is not
    a repository root.

    Args:
        path (Path | str): Candidate repository root.

    Returns:
        Repo: The opened repository.

    Raises:
        RepofetchError: ``NOT_A_REPOSITORY`` when ``path`` is not a repository root,
            ``VCS_UNAVAILABLE`` when GitPython cannot find a git executable.
    """
    try:
        from git import InvalidGitRepositoryError, NoSuchPathError, Repo
    except ImportError as e:
        raise RepofetchError(ErrorKind.VCS_UNAVAILABLE, str(e)) from e

    root = Path(path)
    try:
        repo = Repo(root)
    except (InvalidGitRepositoryError, NoSuchPathError) as e:
        logger.debug("No repository at %s: %r", root, e)
        raise RepofetchError(ErrorKind.NOT_A_REPOSITORY) from e

    logger.debug("Opened repository at %s (git dir %s)", root, repo.git_dir)
    return repo


def project_name_from_url(url: str) -> str:
    """Derive the project name from a remote URL.

    ``https://github.com/o2sh/onefetch.git`` and ``git@host:o2sh/onefetch`` both give
    ``onefetch``; everything from the first ``.git`` in the last component on is
    dropped.
    """
    last = url.rstrip("/").rsplit("/", 1)[-1]
    # scp-like URLs without a path separator: "host:project.git"
    last = last.rsplit(":", 1)[-1]
    return last.split(".git", 1)[0]


def read_remote(repo: Repo) -> RemoteInfo:
    """Read the project URL and name from the repository configuration.

    ``remote.upstream.url`` takes precedence over ``remote.origin.url``.

    Args:
        repo (Repo): An opened repository.

    Returns:
        RemoteInfo: Name and URL; both empty when no such remote is configured.

    Raises:
        RepofetchError: ``METADATA_UNREADABLE`` when the configuration cannot be read.
    """
    try:
        reader = repo.config_reader()
        for remote in REMOTE_PRIORITY:
            url = reader.get_value(f'remote "{remote}"', "url", default="")
            if url:
                url = str(url)
                logger.debug("Using remote %s: %s", remote, url)
                return RemoteInfo(name=project_name_from_url(url), url=url)
    except (configparser.Error, OSError, ValueError) as e:
        raise RepofetchError(ErrorKind.METADATA_UNREADABLE, str(e)) from e

    logger.debug("No upstream or origin remote configured")
    return RemoteInfo()


def rank_authors(names: list[str], limit: int) -> list[str]:
    """Rank author names by number of occurrences.

    Args:
        names (list[str]): One entry per commit, newest first.
        limit (int): Maximum number of authors to return.

    Returns:
        list[str]: Distinct names, most commits first; ties keep the order of
            first appearance.
    """
    counts = Counter(name for name in names if name)
    # Counter preserves insertion order and sorted() is stable.
    ranked = sorted(counts, key=lambda name: counts[name], reverse=True)
    return ranked[: max(limit, 0)]


def get_authors(repo: Repo, limit: int) -> list[str]:
    """Return the repository's top authors.

    Args:
        repo (Repo): An opened repository.
        limit (int): Maximum number of authors.

    Returns:
        list[str]: Author display names, most commits first. Empty for a repository
            without commits.

    Raises:
        RepofetchError: ``VCS_UNAVAILABLE`` when ``git log`` cannot be executed.
    """
    from git import GitCommandError, GitCommandNotFound

    if not repo.head.is_valid():
        logger.debug("Repository has no commits yet")
        return []

    try:
        output: str = repo.git.log(AUTHOR_LOG_FORMAT)
    except GitCommandNotFound as e:
        raise RepofetchError(ErrorKind.VCS_UNAVAILABLE, str(e)) from e
    except GitCommandError as e:
        raise RepofetchError(ErrorKind.VCS_UNAVAILABLE, e.stderr.strip() or str(e)) from e

    names = [line.strip() for line in output.splitlines()]
    authors = rank_authors(names, limit)
    logger.debug("Found %d commit(s); top authors: %s", len(names), authors)
    return authors
