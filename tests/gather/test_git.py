# topmark:header:start
#
#   project      : Repofetch
#   file         : test_git.py
#   file_relpath : tests/gather/test_git.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for repository opening, remote metadata and author ranking.

Repositories are created in ``tmp_path`` with GitPython; the tests are skipped
when no ``git`` executable is available.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from repofetch.core.errors import ErrorKind, RepofetchError
from repofetch.gather.git import (
    RemoteInfo,
    get_authors,
    is_git_installed,
    open_repository,
    project_name_from_url,
    rank_authors,
    read_remote,
)
from tests.conftest import (
    commit_as,
    init_repo,
    mark_integration,
    parametrize,
    requires_git,
    write_files,
)

if TYPE_CHECKING:
    from pathlib import Path


@parametrize(
    ("url", "expected"),
    [
        ("https://github.com/o2sh/onefetch.git", "onefetch"),
        ("https://github.com/o2sh/onefetch", "onefetch"),
        ("https://github.com/o2sh/onefetch/", "onefetch"),
        ("git@github.com:o2sh/onefetch.git", "onefetch"),
        ("git@example.com:onefetch.git", "onefetch"),
        ("/srv/git/my.github.io.git", "my"),
        ("", ""),
    ],
)
def test_project_name_from_url(url: str, expected: str) -> None:
    """The last path component is used, cut at the first ".git"."""
    assert project_name_from_url(url) == expected


def test_rank_authors_counts_and_keeps_first_seen_order() -> None:
    """Most commits first; ties keep the order of first appearance."""
    names = ["Dave", "Alice", "Carol", "Bob", "Alice", "Carol", "Alice"]
    assert rank_authors(names, 3) == ["Alice", "Carol", "Dave"]
    assert rank_authors(names, 10) == ["Alice", "Carol", "Dave", "Bob"]
    assert rank_authors(names, 0) == []
    assert rank_authors([], 3) == []


@requires_git
def test_is_git_installed() -> None:
    """The git binary is detected when present."""
    assert is_git_installed()


def test_is_git_installed_without_git(monkeypatch: pytest.MonkeyPatch) -> None:
    """A missing executable is reported as not installed, not raised."""
    monkeypatch.setenv("PATH", "")
    assert not is_git_installed()


@requires_git
@mark_integration
def test_open_repository_requires_root(tmp_path: Path) -> None:
    """Subdirectories and plain directories are not repository roots."""
    init_repo(tmp_path).close()
    (tmp_path / "sub").mkdir()

    repo = open_repository(tmp_path)
    repo.close()

    with pytest.raises(RepofetchError) as excinfo:
        open_repository(tmp_path / "sub")
    assert excinfo.value.kind is ErrorKind.NOT_A_REPOSITORY
    assert excinfo.value.exit_code == 65


@requires_git
@mark_integration
def test_open_missing_path(tmp_path: Path) -> None:
    """A path that does not exist is not a repository."""
    with pytest.raises(RepofetchError) as excinfo:
        open_repository(tmp_path / "missing")
    assert excinfo.value.kind is ErrorKind.NOT_A_REPOSITORY


@requires_git
@mark_integration
def test_authors_of_sample_repository(rust_repo: Path) -> None:
    """Authors are ranked by commit count and truncated."""
    repo = open_repository(rust_repo)
    try:
        assert get_authors(repo, 3) == ["Alice", "Carol", "Dave"]
        assert get_authors(repo, 1) == ["Alice"]
    finally:
        repo.close()


@requires_git
@mark_integration
def test_repository_without_commits_has_no_authors(tmp_path: Path) -> None:
    """An empty history yields no authors instead of an error."""
    repo = init_repo(tmp_path)
    try:
        assert get_authors(repo, 3) == []
    finally:
        repo.close()


@requires_git
@mark_integration
def test_upstream_remote_wins_over_origin(tmp_path: Path) -> None:
    """`remote.upstream.url` takes precedence over `remote.origin.url`."""
    repo = init_repo(tmp_path)
    write_files(tmp_path, {"a.py": "x = 1\n"})
    commit_as(repo, "Alice", ["a.py"])
    repo.create_remote("origin", "https://github.com/me/fork.git")
    assert read_remote(repo) == RemoteInfo("fork", "https://github.com/me/fork.git")

    repo.create_remote("upstream", "https://github.com/them/project.git")
    assert read_remote(repo) == RemoteInfo("project", "https://github.com/them/project.git")
    repo.close()


@requires_git
@mark_integration
def test_no_remote(tmp_path: Path) -> None:
    """Without remotes, name and URL are empty."""
    repo = init_repo(tmp_path)
    try:
        assert read_remote(repo) == RemoteInfo()
    finally:
        repo.close()
