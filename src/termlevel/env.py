"""Snapshot of the environment signals read by the color classifier."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass


def host_is_windows() -> bool:
    """Return True when running on the Windows family of hosts."""
    return sys.platform == "win32" or os.name == "nt"


@dataclass(frozen=True)
class EnvSnapshot:
    """Immutable bundle of the inputs for one classification.

    String signals read as ``""`` when the variable is unset. ``no_color``
    keeps the raw value so that an empty but present ``NO_COLOR`` still
    counts as present.
    """

    term: str = ""
    terminal_emulator: str = ""
    colorterm: str = ""
    term_program: str = ""
    term_program_version: str = ""
    force_color: str = ""
    no_color: str | None = None
    is_windows: bool = False

    @classmethod
    def from_environ(
        cls,
        environ: Mapping[str, str] | None = None,
        is_windows: bool | None = None,
    ) -> EnvSnapshot:
        """Read the color signals from an environment mapping.

        Args:
            environ: Mapping to read from; defaults to ``os.environ`` read live.
            is_windows: Host family override; detected from the interpreter if None.

        Returns:
            EnvSnapshot: The captured signals.
        """
        env = os.environ if environ is None else environ
        return cls(
            term=env.get("TERM", ""),
            terminal_emulator=env.get("TERMINAL_EMULATOR", ""),
            colorterm=env.get("COLORTERM", ""),
            term_program=env.get("TERM_PROGRAM", ""),
            term_program_version=env.get("TERM_PROGRAM_VERSION", ""),
            force_color=env.get("FORCE_COLOR", ""),
            no_color=env.get("NO_COLOR"),
            is_windows=host_is_windows() if is_windows is None else is_windows,
        )

    @property
    def no_color_present(self) -> bool:
        """True if NO_COLOR is set, whatever its value."""
        return self.no_color is not None
