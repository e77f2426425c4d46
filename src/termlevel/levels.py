"""Ordered color levels a terminal can support."""

from __future__ import annotations

from enum import IntEnum

from .errors import UnknownColorLevelError


class ColorLevel(IntEnum):
    """Color capability of a terminal, ranked from least to most capable.

    Members compare by rank, so ``level >= ColorLevel.EXTENDED`` reads as
    "supports at least 256 colors".
    """

    NONE = 0
    BASIC = 1  # 16 colors, 4-bit ANSI
    EXTENDED = 2  # 256 colors, 8-bit
    TRUE_COLOR = 3  # 24-bit RGB

    def __str__(self) -> str:
        return _NAMES[self]

    @property
    def label(self) -> str:
        """Short name of the level: ``none``, ``ansi``, ``256`` or ``true``."""
        return _NAMES[self]

    def supports(self, other: ColorLevel) -> bool:
        """Return True if this level is at least as capable as ``other``."""
        return self >= other

    @classmethod
    def parse(cls, text: str) -> ColorLevel:
        """Look up a level by short name or member name.

        Accepts the short names produced by ``str()`` (``"none"``, ``"ansi"``,
        ``"256"``, ``"true"``) as well as member names in any case
        (``"basic"``, ``"true_color"``, ``"truecolor"``).

        Args:
            text: The name to look up.

        Returns:
            ColorLevel: The matching level.

        Raises:
            UnknownColorLevelError: If ``text`` names no level.
        """
        key = text.strip().lower()
        if (level := _ALIASES.get(key)) is None:
            raise UnknownColorLevelError(text)
        return level


_NAMES = {
    ColorLevel.NONE: "none",
    ColorLevel.BASIC: "ansi",
    ColorLevel.EXTENDED: "256",
    ColorLevel.TRUE_COLOR: "true",
}

_ALIASES = {
    **{name: level for level, name in _NAMES.items()},
    **{level.name.lower(): level for level in ColorLevel},
    "truecolor": ColorLevel.TRUE_COLOR,
    "16": ColorLevel.BASIC,
}
