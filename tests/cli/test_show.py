# topmark:header:start
#
#   project      : Repofetch
#   file         : test_show.py
#   file_relpath : tests/cli/test_show.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: rendering a repository summary with `show` and the bare group."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, requires_git, write_files

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def author_column(output: str) -> list[str]:
    """Return the author names of a rendered summary, in display order."""
    names: list[str] = []
    for line in output.splitlines():
        if "Author" in line:
            names.append(line.split(": ", 1)[1].strip())
        elif names and "Repo: " not in line and line.strip():
            names.append(line.split()[-1])
        elif names:
            break
    return names


@mark_cli
@requires_git
def test_bare_invocation_renders_current_directory(rust_repo: Path) -> None:
    """`repofetch` without a subcommand renders the working directory."""
    result: Result = run_cli_in(rust_repo, ["--no-color"])

    assert_SUCCESS(result)
    out = result.output
    assert "Project: onefetch" in out
    assert "Language: Rust" in out
    assert "Authors: Alice" in out
    assert author_column(out) == ["Alice", "Carol", "Dave"]
    assert "Repo: https://github.com/o2sh/onefetch.git" in out
    assert "Number of lines: 9" in out
    assert "License: MIT" in out
    assert "\x1b[" not in out


@mark_cli
@requires_git
def test_show_with_path_and_author_limit(rust_repo: Path) -> None:
    """`show PATH --authors 1` renders a single author."""
    result: Result = run_cli(["--no-color", "show", str(rust_repo), "--authors", "1"])

    assert_SUCCESS(result)
    assert "Author: Alice" in result.output
    assert "Authors:" not in result.output


@mark_cli
@requires_git
def test_show_rows_align_info_column(rust_repo: Path) -> None:
    """Every row starting with a logo line puts the info text in the same column."""
    result: Result = run_cli(["--no-color", "show", str(rust_repo)])

    assert_SUCCESS(result)
    lines = result.output.splitlines()
    project_row = next(line for line in lines if "Project: " in line)
    column = project_row.index("Project: ")
    language_row = next(line for line in lines if "Language: " in line)
    assert language_row.index("Language: ") == column


@mark_cli
@requires_git
def test_show_color_always_emits_escapes(rust_repo: Path) -> None:
    """`--color always` colors the logo and labels even when not on a terminal."""
    result: Result = run_cli(["--color", "always", "show", str(rust_repo)])

    assert_SUCCESS(result)
    assert "\x1b[" in result.output


@mark_cli
@requires_git
def test_show_honors_repository_config(rust_repo: Path) -> None:
    """`repofetch.toml` in the repository root is applied."""
    write_files(rust_repo, {"repofetch.toml": "authors = 2\n"})

    result: Result = run_cli(["--no-color", "show", str(rust_repo)])

    assert_SUCCESS(result)
    assert author_column(result.output) == ["Alice", "Carol"]


@mark_cli
@requires_git
def test_show_cli_overrides_config(rust_repo: Path) -> None:
    """`--authors` wins over the configuration file; `--no-config` ignores it."""
    write_files(rust_repo, {"repofetch.toml": "authors = 2\n"})

    result: Result = run_cli(["--no-color", "show", str(rust_repo), "--authors", "1"])
    assert_SUCCESS(result)
    assert "Author: Alice" in result.output

    result = run_cli(["--no-color", "show", str(rust_repo), "--no-config"])
    assert_SUCCESS(result)
    assert author_column(result.output) == ["Alice", "Carol", "Dave"]


@mark_cli
@requires_git
def test_show_exclude_option_adds_patterns(rust_repo: Path) -> None:
    """`--exclude` skips directories in addition to the configured ones."""
    write_files(rust_repo, {"vendor/lib.rs": "fn a() {}\nfn b() {}\n"})

    result: Result = run_cli(["--no-color", "show", str(rust_repo)])
    assert "Number of lines: 11" in result.output

    result = run_cli(["--no-color", "show", str(rust_repo), "-e", "vendor"])
    assert_SUCCESS(result)
    assert "Number of lines: 9" in result.output
