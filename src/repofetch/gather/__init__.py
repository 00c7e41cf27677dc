# topmark:header:start
#
#   project      : Repofetch
#   file         : __init__.py
#   file_relpath : src/repofetch/gather/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data gathering for the repository summary.

These modules talk to the filesystem and to git. Everything they find ends up
in plain values (strings, counts, a `Language`) on a
`repofetch.summary.Summary`; rendering never calls back into them.

Modules:
    - repofetch.gather.loc: language classification, code-line counting,
      dominant-language selection
    - repofetch.gather.git: repository opening, remote metadata, authors
    - repofetch.gather.license: license file detection
    - repofetch.gather.summary: assembles a `Summary` for a directory
"""

from __future__ import annotations
