"""Unit tests for termlevel.errors."""

from termlevel import errors

# pylint: disable=magic-value-comparison


def test_invalid_term_program_version_message():
    """InvalidTermProgramVersionError names the offending version."""
    error = errors.InvalidTermProgramVersionError("abc")
    assert str(error) == "Invalid TERM_PROGRAM_VERSION 'abc'."
    assert error.version == "abc"
    assert isinstance(error, errors.DetectionError)


def test_probe_unavailable_message():
    """ProbeUnavailableError includes the reason when given."""
    assert (
        str(errors.ProbeUnavailableError("/proc/version", "No such file or directory"))
        == "Cannot read WSL probe file '/proc/version': No such file or directory"
    )
    assert (
        str(errors.ProbeUnavailableError("/proc/version"))
        == "Cannot read WSL probe file '/proc/version'."
    )


def test_unknown_color_level_is_value_error():
    """UnknownColorLevelError is both a TermLevelError and a ValueError."""
    error = errors.UnknownColorLevelError("millions")
    assert isinstance(error, errors.TermLevelError)
    assert isinstance(error, ValueError)
    assert str(error) == "Unknown color level 'millions'."
