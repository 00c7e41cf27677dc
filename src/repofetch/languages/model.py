# topmark:header:start
#
#   project      : Repofetch
#   file         : model.py
#   file_relpath : src/repofetch/languages/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The closed set of languages Repofetch can summarize.

Each `Language` member carries its display name (the enum value) and the palette
used to colorize its logo and the info labels. Declaration order is significant:
it is the tie-break order used by dominant-language selection.
"""

from __future__ import annotations

from repofetch.rendering.colored_enum import PaletteStrEnum


class Language(PaletteStrEnum):
    """Supported languages.

    Value format: (display name: str, palette: tuple of click color names)
    """

    C = ("C", ("bright_blue", "blue"))
    CLOJURE = ("Clojure", ("cyan",))
    CPP = ("C++", ("yellow",))
    CSHARP = ("C#", ("white",))
    GO = ("Go", ("white",))
    HASKELL = ("Haskell", ("cyan",))
    JAVA = ("Java", ("bright_blue", "red"))
    LISP = ("Lisp", ("yellow",))
    LUA = ("Lua", ("blue",))
    PYTHON = ("Python", ("magenta",))
    R = ("R", ("blue",))
    RUBY = ("Ruby", ("magenta",))
    RUST = ("Rust", ("white", "bright_red"))
    SCALA = ("Scala", ("blue",))
    SHELL = ("Shell", ("green",))
    TYPESCRIPT = ("TypeScript", ("cyan",))
    JAVASCRIPT = ("JavaScript", ("bright_yellow",))

    @classmethod
    def from_name(cls, name: str) -> Language | None:
        """Look up a member by display name or identifier, case-insensitively.

        Args:
            name (str): ``"C++"``, ``"cpp"``, ``"rust"``, ...

        Returns:
            Language | None: The matching member, or None when unknown.
        """
        key = name.strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        return None
