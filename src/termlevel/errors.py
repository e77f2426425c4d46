"""Error definitions for terminal color detection.

Detection errors are recorded on the classifier for diagnostics and never
raised out of the query functions.
"""

# ============================================================================
#                           General errors
# ============================================================================


class TermLevelError(Exception):
    """Base class for termlevel errors."""


class UnknownColorLevelError(TermLevelError, ValueError):
    """Raised when a color level name cannot be resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown color level '{name}'.")
        self.name = name


# ============================================================================
#                   Recoverable detection errors
# ============================================================================


class DetectionError(TermLevelError):
    """Base class for recoverable failures while probing the environment."""


class InvalidTermProgramVersionError(DetectionError):
    """Recorded when TERM_PROGRAM_VERSION has no integer major component."""

    def __init__(self, version: str) -> None:
        super().__init__(f"Invalid TERM_PROGRAM_VERSION '{version}'.")
        self.version = version


class ProbeUnavailableError(DetectionError):
    """Recorded when the kernel version file for the WSL probe cannot be read."""

    def __init__(self, path: str, reason: str = "") -> None:
        message = f"Cannot read WSL probe file '{path}'"
        super().__init__(f"{message}: {reason}" if reason else f"{message}.")
        self.path = path
        self.reason = reason
