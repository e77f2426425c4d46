"""Unit tests for termlevel.levels.ColorLevel."""

import pytest

from termlevel.errors import UnknownColorLevelError
from termlevel.levels import ColorLevel

# pylint: disable=magic-value-comparison


def test_levels_are_totally_ordered():
    """NONE < BASIC < EXTENDED < TRUE_COLOR."""
    assert ColorLevel.NONE < ColorLevel.BASIC < ColorLevel.EXTENDED < ColorLevel.TRUE_COLOR
    assert sorted(ColorLevel, reverse=True)[0] is ColorLevel.TRUE_COLOR


@pytest.mark.parametrize(
    ("level", "name"),
    [
        (ColorLevel.NONE, "none"),
        (ColorLevel.BASIC, "ansi"),
        (ColorLevel.EXTENDED, "256"),
        (ColorLevel.TRUE_COLOR, "true"),
    ],
)
def test_string_names(level, name):
    """str() and .label give the short level name."""
    assert str(level) == name
    assert level.label == name
    assert f"{level}" == name


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("none", ColorLevel.NONE),
        ("ansi", ColorLevel.BASIC),
        ("16", ColorLevel.BASIC),
        ("basic", ColorLevel.BASIC),
        ("256", ColorLevel.EXTENDED),
        ("EXTENDED", ColorLevel.EXTENDED),
        ("true", ColorLevel.TRUE_COLOR),
        ("TrueColor", ColorLevel.TRUE_COLOR),
        ("true_color", ColorLevel.TRUE_COLOR),
        ("  256 ", ColorLevel.EXTENDED),
    ],
)
def test_parse_accepts_short_and_member_names(text, expected):
    """parse() resolves short names and member names case-insensitively."""
    assert ColorLevel.parse(text) is expected


def test_parse_unknown_raises():
    """Unknown names raise UnknownColorLevelError, which is also a ValueError."""
    with pytest.raises(UnknownColorLevelError) as excinfo:
        ColorLevel.parse("millions")
    assert excinfo.value.name == "millions"
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize(
    ("level", "other", "expected"),
    [
        (ColorLevel.TRUE_COLOR, ColorLevel.EXTENDED, True),
        (ColorLevel.EXTENDED, ColorLevel.EXTENDED, True),
        (ColorLevel.BASIC, ColorLevel.EXTENDED, False),
        (ColorLevel.NONE, ColorLevel.NONE, True),
    ],
)
def test_supports_at_least(level, other, expected):
    """supports() follows the total order."""
    assert level.supports(other) is expected
