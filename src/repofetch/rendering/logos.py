# topmark:header:start
#
#   project      : Repofetch
#   file         : logos.py
#   file_relpath : src/repofetch/rendering/logos.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bundled ASCII-art logos, one per language.

Logos are package data (``repofetch/rendering/resources/<name>.ascii``) using the
``{d}`` color markers described in `repofetch.rendering.markup`. `LOGO_RESOURCES`
is the total mapping from `Language` to its template; adding a language means
adding one entry here, one ``.ascii`` file and one `Language` member.
"""

from __future__ import annotations

import functools
from importlib.resources import files
from types import MappingProxyType
from typing import TYPE_CHECKING

from repofetch.config.logging import get_logger
from repofetch.constants import LOGO_RESOURCE_PACKAGE
from repofetch.languages.model import Language

if TYPE_CHECKING:
    from collections.abc import Mapping

    from repofetch.config.logging import RepofetchLogger

logger: RepofetchLogger = get_logger(__name__)

LOGO_RESOURCES: Mapping[Language, str] = MappingProxyType(
    {
        Language.C: "c.ascii",
        Language.CLOJURE: "clojure.ascii",
        Language.CPP: "cpp.ascii",
        Language.CSHARP: "csharp.ascii",
        Language.GO: "go.ascii",
        Language.HASKELL: "haskell.ascii",
        Language.JAVA: "java.ascii",
        Language.LISP: "lisp.ascii",
        Language.LUA: "lua.ascii",
        Language.PYTHON: "python.ascii",
        Language.R: "r.ascii",
        Language.RUBY: "ruby.ascii",
        Language.RUST: "rust.ascii",
        Language.SCALA: "scala.ascii",
        Language.SHELL: "shell.ascii",
        Language.TYPESCRIPT: "typescript.ascii",
        Language.JAVASCRIPT: "javascript.ascii",
    }
)


@functools.cache
def get_logo(language: Language) -> str:
    """Return the raw logo template of ``language``.

    Args:
        language (Language): The language whose logo to load.

    Returns:
        str: The template text, markers included, without a trailing newline.
    """
    name = LOGO_RESOURCES[language]
    text = files(LOGO_RESOURCE_PACKAGE).joinpath(name).read_text(encoding="utf-8")
    logger.trace("Loaded logo %s for %s (%d chars)", name, language.value, len(text))
    return text.rstrip("\n")


def get_logo_lines(language: Language) -> list[str]:
    """Return the logo template of ``language`` split into lines."""
    return get_logo(language).splitlines()
