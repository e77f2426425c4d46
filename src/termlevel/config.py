"""Configuration utilities for TERMLEVEL.

This module centralizes the constants that drive color detection and the
small helpers that read environment overrides.
"""

import os
from pathlib import Path
from typing import NamedTuple

from .levels import ColorLevel

# TERM value known to lack true color while supporting 256 colors
NO_TRUE_COLOR_TERM = "screen"  # pragma: no mutate

# JetBrains terminals leave TERM unset but render true color
JETBRAINS_EMULATOR = "JetBrains-JediTerm"  # pragma: no mutate

TRUE_COLOR_COLORTERMS = ("truecolor", "24bit")
TRUE_COLOR_PROGRAMS = frozenset({"Terminus", "Hyper"})
ITERM_PROGRAM = "iTerm.app"
ITERM_TRUE_COLOR_MAJOR = 3
APPLE_TERMINAL_PROGRAM = "Apple_Terminal"

# WSL kernels report the vendor in /proc/version
# WSL1: "Linux version 4.4.0-19041-Microsoft (Microsoft@Microsoft.com) ..."
# WSL2: "Linux version 5.15.90.1-microsoft-standard-WSL2 ..."
WSL_MARKERS = ("Microsoft", "microsoft")
PROBE_READ_SIZE = 1024
DEFAULT_PROC_VERSION_PATH = Path("/proc/version")
PROC_VERSION_PATH_ENVVAR = "TERMLEVEL_PROC_VERSION_PATH"  # pragma: no mutate


class SpecialTerm(NamedTuple):
    """Fallback classification for a known TERM value."""

    level: ColorLevel
    needs_vtp: bool


# Consulted only when the environment rules yield no color.
# Keys are matched against TERM on Windows hosts; see ``match_special_term``.
WINDOWS_EMPTY_TERM = SpecialTerm(ColorLevel.TRUE_COLOR, True)  # conhost, Windows Terminal
WINDOWS_UNKNOWN_TERM = SpecialTerm(ColorLevel.BASIC, True)
SPECIAL_TERMS: dict[str, SpecialTerm] = {
    "dumb": SpecialTerm(ColorLevel.NONE, False),
    "cygwin": SpecialTerm(ColorLevel.BASIC, False),  # legacy Cygwin console
}
SPECIAL_TERM_SUBSTRINGS: tuple[tuple[str, SpecialTerm], ...] = (
    ("256color", SpecialTerm(ColorLevel.EXTENDED, False)),
)
SPECIAL_TERM_PREFIXES: tuple[tuple[str, SpecialTerm], ...] = (
    ("xterm", SpecialTerm(ColorLevel.EXTENDED, False)),  # ConEmu, mintty, Git Bash
)


def match_special_term(term: str) -> SpecialTerm:
    """Return the fallback entry for a TERM value seen on a Windows host.

    Exact names are checked first, then substrings, then prefixes. Unknown
    non-empty values get basic color with virtual terminal processing.

    Args:
        term: The TERM value.

    Returns:
        SpecialTerm: The level and VTP requirement for the terminal.
    """
    if not term:
        return WINDOWS_EMPTY_TERM
    if (entry := SPECIAL_TERMS.get(term)) is not None:
        return entry
    for fragment, entry in SPECIAL_TERM_SUBSTRINGS:
        if fragment in term:
            return entry
    for prefix, entry in SPECIAL_TERM_PREFIXES:
        if term.startswith(prefix):
            return entry
    return WINDOWS_UNKNOWN_TERM


def get_proc_version_path() -> Path:
    """Get the kernel version file used by the WSL probe.

    Returns:
        The path in ``TERMLEVEL_PROC_VERSION_PATH`` when set, else ``/proc/version``.
    """
    if value := os.environ.get(PROC_VERSION_PATH_ENVVAR):
        return Path(value)
    return DEFAULT_PROC_VERSION_PATH
