# topmark:header:start
#
#   project      : Repofetch
#   file         : license.py
#   file_relpath : src/repofetch/gather/license.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""License detection from top-level license files.

Candidate files are the regular files directly in the repository root whose name
starts with one of the configured prefixes (``LICENSE``, ``LICENSE-MIT``,
``LICENSE.txt``, ``COPYING`` ...). Each file is identified from its
normalized text (lowercase, whitespace collapsed): a license title at the start of
the text wins, because full license texts quote other licenses (GPL-3.0 refers to
the AGPL, MPL-2.0 lists GPL variants as secondary licenses). Texts without a known
title are matched on phrases that occur in one license only.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from repofetch.config.logging import get_logger
from repofetch.constants import DEFAULT_LICENSE_PREFIXES, UNKNOWN_LICENSE
from repofetch.core.errors import ErrorKind, RepofetchError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from repofetch.config.logging import RepofetchLogger

logger: RepofetchLogger = get_logger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


# Normalized characters searched for a license title.
TITLE_SEARCH_CHARS = 500


@dataclass(frozen=True)
class LicenseFingerprint:
    """Phrases identifying one license.

    Attributes:
        spdx_id (str): SPDX identifier reported for a match.
        phrases (tuple[str, ...]): Normalized phrases that must all occur anywhere in
            the text. They avoid wording that other licenses quote.
        title (tuple[str, ...]): Normalized phrases of the license's own heading,
            searched only at the start of the text. Empty for untitled licenses.
    """

    spdx_id: str
    phrases: tuple[str, ...]
    title: tuple[str, ...] = ()

    def matches_title(self, head: str) -> bool:
        """Return True when the heading phrases all occur in ``head``."""
        return bool(self.title) and all(phrase in head for phrase in self.title)

    def matches(self, normalized: str) -> bool:
        """Return True when every phrase occurs in ``normalized``."""
        return all(phrase in normalized for phrase in self.phrases)


# Licenses that name other licenses (MPL and EPL list GPL variants as secondary
# licenses; GPL-3.0 mentions the AGPL and LGPL) come before the licenses they name.
LICENSE_FINGERPRINTS: tuple[LicenseFingerprint, ...] = (
    LicenseFingerprint(
        "MPL-2.0",
        ("mozilla public license", "2.0"),
        ("mozilla public license", "2.0"),
    ),
    LicenseFingerprint(
        "EPL-2.0",
        ("eclipse public license", "2.0"),
        ("eclipse public license", "2.0"),
    ),
    LicenseFingerprint(
        "AGPL-3.0",
        ("gnu affero general public license", "remote network interaction"),
        ("gnu affero general public license", "version 3"),
    ),
    LicenseFingerprint(
        "LGPL-3.0",
        (
            "gnu lesser general public license",
            "incorporates the terms and conditions of version 3 of the gnu general public license",
        ),
        ("gnu lesser general public license", "version 3"),
    ),
    LicenseFingerprint(
        "LGPL-2.1",
        ("gnu lesser general public license", "version 2.1"),
        ("gnu lesser general public license", "version 2.1"),
    ),
    LicenseFingerprint(
        "GPL-3.0",
        ("gnu general public license", "version 3"),
        ("gnu general public license", "version 3"),
    ),
    LicenseFingerprint(
        "GPL-2.0",
        ("gnu general public license", "version 2"),
        ("gnu general public license", "version 2"),
    ),
    LicenseFingerprint(
        "Apache-2.0",
        ("apache license", "version 2.0"),
        ("apache license", "version 2.0"),
    ),
    LicenseFingerprint(
        "BSL-1.0",
        ("boost software license", "version 1.0"),
        ("boost software license", "version 1.0"),
    ),
    LicenseFingerprint("CC0-1.0", ("cc0 1.0 universal",), ("cc0 1.0 universal",)),
    LicenseFingerprint("Unlicense", ("this is free and unencumbered software",)),
    LicenseFingerprint(
        "BSD-3-Clause",
        (
            "redistribution and use in source and binary forms",
            "neither the name of",
        ),
    ),
    LicenseFingerprint(
        "BSD-2-Clause",
        ("redistribution and use in source and binary forms",),
    ),
    LicenseFingerprint(
        "MIT",
        ("permission is hereby granted, free of charge, to any person obtaining a copy",),
    ),
    LicenseFingerprint(
        "ISC",
        ("permission to use, copy, modify, and/or distribute this software for any purpose",),
    ),
    LicenseFingerprint(
        "Zlib",
        ("this software is provided 'as-is', without any express or implied warranty",),
    ),
)


def normalize_license_text(text: str) -> str:
    """Lowercase ``text`` and collapse every whitespace run into one space."""
    return _WHITESPACE_RE.sub(" ", text.lower()).strip()


def identify_license(text: str) -> str | None:
    """Return the SPDX id of the license in ``text``, or None if unrecognized.

    A license whose own title opens the text wins. Otherwise the first fingerprint
    whose phrases occur anywhere in the text is used.
    """
    normalized = normalize_license_text(text)
    head = normalized[:TITLE_SEARCH_CHARS]
    for fingerprint in LICENSE_FINGERPRINTS:
        if fingerprint.matches_title(head):
            return fingerprint.spdx_id
    for fingerprint in LICENSE_FINGERPRINTS:
        if fingerprint.matches(normalized):
            return fingerprint.spdx_id
    return None


def find_license_files(
    root: Path | str,
    prefixes: Iterable[str] = DEFAULT_LICENSE_PREFIXES,
) -> list[Path]:
    """List the candidate license files in ``root``.

    Args:
        root (Path | str): Repository root; subdirectories are not searched.
        prefixes (Iterable[str]): File name prefixes of license files.

    Returns:
        list[Path]: Matching regular files, sorted by name.

    Raises:
        RepofetchError: ``DIRECTORY_UNREADABLE`` when ``root`` cannot be listed.
    """
    prefix_tuple = tuple(prefixes)
    root_path = Path(root)
    if not prefix_tuple:
        return []
    try:
        with os.scandir(root_path) as entries:
            found = [
                Path(entry.path)
                for entry in entries
                if entry.name.startswith(prefix_tuple) and entry.is_file()
            ]
    except OSError as e:
        raise RepofetchError(ErrorKind.DIRECTORY_UNREADABLE, str(root_path)) from e
    return sorted(found, key=lambda p: p.name)


def detect_licenses(
    root: Path | str,
    prefixes: Iterable[str] = DEFAULT_LICENSE_PREFIXES,
) -> list[str]:
    """Identify the licenses of the license files in ``root``.

    Args:
        root (Path | str): Repository root.
        prefixes (Iterable[str]): File name prefixes of license files.

    Returns:
        list[str]: SPDX ids in file name order, without duplicates. Unreadable or
            unrecognized files contribute nothing.
    """
    licenses: list[str] = []
    for path in find_license_files(root, prefixes):
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug("Cannot read license file %s: %s", path, e)
            continue
        spdx_id = identify_license(text)
        if spdx_id is None:
            logger.info("Unrecognized license text in %s", path.name)
            continue
        logger.debug("%s: %s", path.name, spdx_id)
        if spdx_id not in licenses:
            licenses.append(spdx_id)
    return licenses


def license_label(root: Path | str, prefixes: Iterable[str] = DEFAULT_LICENSE_PREFIXES) -> str:
    """Return the ``", "``-joined license ids of ``root``, or ``"Unknown"``."""
    licenses = detect_licenses(root, prefixes)
    return ", ".join(licenses) if licenses else UNKNOWN_LICENSE
