# topmark:header:start
#
#   project      : Repofetch
#   file         : colored_enum.py
#   file_relpath : src/repofetch/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Palette-aware enum primitives for human-facing rendering.

This module provides a small base enum that stores a textual value while
attaching an ordered color palette to each member.

Key types:
    - `Palette`: a tuple of click color names (``"bright_blue"``, ``"red"``, ...).
    - `PaletteStrEnum`: `str, Enum` that stores the enum's text value and a
      palette. The enum `.value` remains a plain string, while the palette is
      exposed via `.palette`.

Design:
    `PaletteStrEnum` keeps `_value_` as the plain `str` and stores the palette
    separately (`_palette`). This preserves Enum semantics (hashing, equality,
    `repr`) and lets members be printed directly as display names.

Example:
    ```python
    class Flavor(PaletteStrEnum):
        PLAIN = ("plain", ("white",))
        HOT = ("hot", ("red", "yellow"))

    print(Flavor.HOT.value)      # 'hot'
    print(Flavor.HOT.palette)    # ('red', 'yellow')
    ```
"""

from __future__ import annotations

from enum import Enum

Palette = tuple[str, ...]


class PaletteStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated color palette.

    The enum member remains a `str` (so Enum internals, hashing, repr, etc.
    behave normally), and the palette is stored separately on the instance.
    """

    _value_: str
    _palette: Palette

    def __new__(cls, text: str, palette: Palette) -> PaletteStrEnum:
        """Construct a member with a palette.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            palette (Palette): Ordered click color names; slot ``i`` is selected by
                the ``{i}`` marker in logo templates.

        Returns:
            PaletteStrEnum: The newly constructed enum member.
        """
        obj: PaletteStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._palette = tuple(palette)
        return obj

    def __str__(self) -> str:
        """Return the display text of the member."""
        return self._value_

    @property
    def value(self) -> str:
        """Return the textual value of the enum member.

        Returns:
            str: The string value associated with this member.
        """
        return self._value_

    @property
    def palette(self) -> Palette:
        """Return the color palette associated with this member.

        Returns:
            Palette: Ordered click color names (may be empty).
        """
        return self._palette
