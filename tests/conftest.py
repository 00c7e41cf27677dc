# topmark:header:start
#
#   project      : Repofetch
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Repofetch test suite.

Sets up global fixtures, typed pytest-mark wrappers, and helpers that build
throw-away git repositories in ``tmp_path`` with GitPython.

Notes:
    Tests should respect the immutable/mutable configuration split: build configs
    with `repofetch.config.MutableConfig`, then `freeze()` them into a
    `repofetch.config.Config` (see `make_config`).
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from repofetch.config import MutableConfig, logging

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from pathlib import Path

    from git import Repo

    from repofetch.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

GIT_AVAILABLE: bool = shutil.which("git") is not None

# Selected with `pytest --hypothesis-profile=thorough` (see `nox -s property_test`).
settings.register_profile("thorough", max_examples=1000, deadline=None)


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
requires_git: DecoratorType[Any] = as_typed_mark(
    pytest.mark.skipif(not GIT_AVAILABLE, reason="git executable not available")
)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


@pytest.fixture(autouse=True)
def silence_repofetch_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Repofetch's runtime log level is not forced via env during tests.

    Also clears the color-forcing variables so color auto-detection sees a
    non-TTY stream and stays off.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("REPOFETCH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level so failing tests show the full gathering trail."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def write_files(root: Path, files: Mapping[str, str]) -> list[str]:
    """Create ``files`` (relative path → content) below ``root``.

    Returns:
        list[str]: The relative paths, in the given order.
    """
    for rel, content in files.items():
        target = root / rel
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return list(files)


def init_repo(root: Path) -> Repo:
    """Initialize an empty repository in ``root`` with a local identity."""
    from git import Repo

    repo = Repo.init(root)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Repofetch Tests")
        writer.set_value("user", "email", "tests@example.invalid")
    return repo


def commit_as(repo: Repo, author: str, paths: Sequence[str], message: str = "change") -> None:
    """Stage ``paths`` and commit them with ``author`` as author and committer."""
    from git import Actor

    actor = Actor(author, f"{author.lower().replace(' ', '.')}@example.invalid")
    repo.index.add(list(paths))
    repo.index.commit(message, author=actor, committer=actor)


@pytest.fixture
def rust_repo(tmp_path: Path) -> Path:
    """A small Rust repository with three authors, an origin remote and an MIT license.

    Commits: Alice ×3, Bob ×1, Carol ×2, Dave ×1.
    """
    root = tmp_path / "onefetch"
    root.mkdir()
    repo = init_repo(root)

    write_files(
        root,
        {
            "src/main.rs": "// entry point\nfn main() {\n    println!(\"hi\");\n}\n",
            "LICENSE": MIT_LICENSE_TEXT,
        },
    )
    commit_as(repo, "Alice", ["src/main.rs", "LICENSE"], "initial")
    for i, author in enumerate(["Carol", "Alice", "Bob", "Carol", "Alice", "Dave"]):
        rel = f"src/mod{i}.rs"
        write_files(root, {rel: f"pub fn f{i}() {{}}\n"})
        commit_as(repo, author, [rel], f"add {rel}")

    repo.create_remote("origin", "https://github.com/o2sh/onefetch.git")
    repo.close()
    return root


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Attribute values set on the defaults before freezing.

    Returns:
        Config: The frozen configuration.
    """
    draft = MutableConfig.from_defaults()
    for key, value in overrides.items():
        setattr(draft, key, value)
    return draft.freeze()


MIT_LICENSE_TEXT = """MIT License

Copyright (c) 2025 Example

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.
"""

APACHE_LICENSE_TEXT = """
                                 Apache License
                           Version 2.0, January 2004
                        http://www.apache.org/licenses/

   TERMS AND CONDITIONS FOR USE, REPRODUCTION, AND DISTRIBUTION
"""
