# topmark:header:start
#
#   project      : Repofetch
#   file         : summary.py
#   file_relpath : src/repofetch/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The immutable record of gathered repository facts.

A `Summary` is built once from the gathering stage
(`repofetch.gather.summary.gather_summary`) and handed to the layout composer
(`repofetch.rendering.layout.compose_summary`). It holds plain values only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from repofetch.constants import UNKNOWN_LICENSE

if TYPE_CHECKING:
    from repofetch.languages.model import Language


@dataclass(frozen=True)
class Summary:
    """Facts rendered next to the language logo.

    Attributes:
        language (Language): Dominant language of the repository.
        authors (tuple[str, ...]): Display names, most commits first; ties keep the
            order in which authors were first seen.
        repository_name (str): Project name derived from the remote URL (may be empty).
        repository_url (str): Remote URL (may be empty).
        line_count (int): Total code lines over all supported languages.
        license_label (str): ``"Unknown"`` or a ``", "``-joined list of license names.
    """

    language: Language
    authors: tuple[str, ...] = field(default=())
    repository_name: str = ""
    repository_url: str = ""
    line_count: int = 0
    license_label: str = UNKNOWN_LICENSE

    def __post_init__(self) -> None:
        # Accept any iterable of names but store a tuple.
        object.__setattr__(self, "authors", tuple(self.authors))
        if self.line_count < 0:
            raise ValueError(f"line_count must be non-negative, got {self.line_count}")
