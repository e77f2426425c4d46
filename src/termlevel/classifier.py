"""Terminal color level classifier.

``ColorClassifier`` turns the environment signals of a process into a
:class:`~termlevel.levels.ColorLevel`. Detection runs in this order:

1. ``TERMINAL_EMULATOR=JetBrains-JediTerm`` reports true color, unless
   ``TERM=screen``.
2. The ordered environment rules in :mod:`termlevel.rules`.
3. When the rules find no color, the special-terminal table in
   :mod:`termlevel.config` (Windows consoles) and the WSL probe.

Detection never raises. Recoverable failures are logged and kept in
``last_error`` for inspection.

The module-level functions act on a process-default classifier built on
first use. Tests should prefer their own ``ColorClassifier`` instance, or
call ``reset_default_classifier()`` between cases.

Example:
    ```py
    >>> from termlevel import ColorClassifier, ColorLevel
    >>> classifier = ColorClassifier(environ={"COLORTERM": "truecolor"})
    >>> classifier.detect_color_level() is ColorLevel.TRUE_COLOR
    True
    ```
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator, Mapping
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass
from pathlib import Path

from . import config
from .env import EnvSnapshot
from .errors import DetectionError
from .levels import ColorLevel
from .rules import ENV_RULES, Rule, evaluate_rules
from .wsl import WSLProbe

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Detection:
    """Result of one classification."""

    level: ColorLevel
    needs_vtp: bool = False  # Windows consoles must opt in to ANSI sequences
    rule: str = ""


class ColorClassifier:
    """Classify a terminal's color capability from its environment.

    Cached state (the no-color flag, the supports-color flag and the saved
    value used by ``force_enable_color``) lives on the instance and is guarded
    by a lock.

    Args:
        environ: Environment mapping to read; ``os.environ`` (read live) if None.
        is_windows: Host family override; detected from the interpreter if None.
        probe: WSL probe to use; a fresh ``WSLProbe`` if None.
        proc_version_path: Kernel version file for a fresh probe.
        rules: Ordered environment rules; defaults to ``ENV_RULES``.
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        environ: Mapping[str, str] | None = None,
        *,
        is_windows: bool | None = None,
        probe: WSLProbe | None = None,
        proc_version_path: Path | None = None,
        rules: tuple[Rule, ...] = ENV_RULES,
    ) -> None:
        self._environ = environ
        self._is_windows = is_windows
        self._probe = probe if probe is not None else WSLProbe(proc_version_path)
        self._rules = rules
        self._lock = threading.RLock()
        self._level = ColorLevel.NONE
        self._needs_vtp = False
        self._no_color = False
        self._supports_color = False
        self._saved_supports_color = False
        self._last_error: DetectionError | None = None
        self.refresh()

    # ------------------------------------------------------------------
    # Detection
    # ------------------------------------------------------------------

    def snapshot(self) -> EnvSnapshot:
        """Capture the current environment signals."""
        return EnvSnapshot.from_environ(self._environ, is_windows=self._is_windows)

    def detect(self, snapshot: EnvSnapshot | None = None) -> Detection:
        """Classify ``snapshot`` (or the live environment) without caching it.

        Args:
            snapshot: Signals to classify; captured from the environment if None.

        Returns:
            Detection: The level and whether VTP must be enabled.
        """
        snap = self.snapshot() if snapshot is None else snapshot

        if (
            snap.term != config.NO_TRUE_COLOR_TERM
            and snap.terminal_emulator == config.JETBRAINS_EMULATOR
        ):
            logger.debug(
                "True color on %s, is win: %s", snap.terminal_emulator, snap.is_windows
            )
            return Detection(ColorLevel.TRUE_COLOR, False, "jetbrains")

        rule, result = evaluate_rules(snap, self._rules)
        rule_name = rule.name if rule is not None else ""
        if result.error is not None:
            self._record_error(result.error)
        logger.debug("Color level %s from rule %r", result.level, rule_name)

        if result.level is not ColorLevel.NONE:
            return Detection(result.level, False, rule_name)

        logger.debug("Level none, falling back to special terminal check")
        return self._detect_special_term(snap)

    def detect_color_level(self) -> ColorLevel:
        """Return the color level of the live environment.

        The environment is read again on every call; the cached level used by
        the ``is_support_*`` queries is left untouched.
        """
        return self.detect().level

    def refresh(self) -> ColorLevel:
        """Detect the color level and store it as the cached state.

        Returns:
            ColorLevel: The newly cached level.
        """
        snap = self.snapshot()
        detection = self.detect(snap)
        with self._lock:
            self._level = detection.level
            self._needs_vtp = detection.needs_vtp
            self._supports_color = detection.level is not ColorLevel.NONE
            self._no_color = snap.no_color_present
        return detection.level

    def _detect_special_term(self, snap: EnvSnapshot) -> Detection:
        if snap.is_windows:
            entry = config.match_special_term(snap.term)
            return Detection(entry.level, entry.needs_vtp, "special-term")
        if not snap.term and self.is_wsl():
            # WSL consoles are hosted by Windows Terminal or conhost
            return Detection(ColorLevel.TRUE_COLOR, False, "wsl")
        return Detection(ColorLevel.NONE, False, "")

    def is_wsl(self) -> bool:
        """Return True if the host is WSL. Probed once per probe object."""
        first = not self._probe.probed
        is_wsl = self._probe.detect()
        if first and self._probe.error is not None:
            self._record_error(self._probe.error)
        return is_wsl

    def _record_error(self, error: DetectionError) -> None:
        logger.debug("Recorded detection error: %s", error)
        with self._lock:
            self._last_error = error

    # ------------------------------------------------------------------
    # Cached queries
    # ------------------------------------------------------------------

    @property
    def color_level(self) -> ColorLevel:
        """Level stored by the last ``refresh()``."""
        with self._lock:
            return self._level

    @property
    def needs_vtp(self) -> bool:
        """True if the last ``refresh()`` found a Windows console needing VTP."""
        with self._lock:
            return self._needs_vtp

    @property
    def last_error(self) -> DetectionError | None:
        """Most recent recoverable detection error, for diagnostics only."""
        with self._lock:
            return self._last_error

    @property
    def wsl_contents(self) -> str:
        """Raw contents of the WSL probe file, empty until probed."""
        return self._probe.contents

    def no_color(self) -> bool:
        """Return True if NO_COLOR was present, whatever its value.

        Callers should check this before the ``is_support_*`` queries; the
        computed level does not account for it.
        """
        with self._lock:
            return self._no_color

    def is_support_color(self) -> bool:
        """Return True if the terminal supports color."""
        with self._lock:
            return self._supports_color

    def is_support_256_color(self) -> bool:
        """Return True if the terminal supports 256 colors."""
        with self._lock:
            return self._level >= ColorLevel.EXTENDED

    def is_support_true_color(self) -> bool:
        """Return True if the terminal supports true color."""
        with self._lock:
            return self._level == ColorLevel.TRUE_COLOR

    # ------------------------------------------------------------------
    # Test overrides
    # ------------------------------------------------------------------

    def force_enable_color(self) -> None:
        """Force color support on. Pair with ``revert_color_support()``.

        Example:
            ```py
            classifier.force_enable_color()
            try:
                ...
            finally:
                classifier.revert_color_support()
            ```
        """
        with self._lock:
            self._no_color = False
            self._saved_supports_color = self._supports_color
            self._supports_color = True

    def revert_color_support(self) -> None:
        """Restore the supports-color value saved by ``force_enable_color()``.

        The no-color flag is recomputed from the live NO_COLOR variable.
        """
        snap = self.snapshot()
        with self._lock:
            self._supports_color = self._saved_supports_color
            self._no_color = snap.no_color_present

    @contextmanager
    def forced_color(self) -> Iterator[ColorClassifier]:
        """Context manager around ``force_enable_color``/``revert_color_support``."""
        self.force_enable_color()
        try:
            yield self
        finally:
            self.revert_color_support()


# ============================================================================
#                   Process-default classifier
# ============================================================================

_default_lock = threading.Lock()
_default: ColorClassifier | None = None


def default_classifier() -> ColorClassifier:
    """Return the process-default classifier, building it on first use."""
    global _default  # pylint: disable=global-statement
    with _default_lock:
        if _default is None:
            _default = ColorClassifier()
        return _default


def reset_default_classifier() -> None:
    """Drop the process-default classifier so the next call rebuilds it."""
    global _default  # pylint: disable=global-statement
    with _default_lock:
        _default = None


def detect_color_level() -> ColorLevel:
    """Detect the color level of the live environment."""
    return default_classifier().detect_color_level()


def no_color() -> bool:
    """Return True if NO_COLOR is present."""
    return default_classifier().no_color()


def is_support_color() -> bool:
    """Return True if the terminal supports color."""
    return default_classifier().is_support_color()


def is_support_256_color() -> bool:
    """Return True if the terminal supports 256 colors."""
    return default_classifier().is_support_256_color()


def is_support_true_color() -> bool:
    """Return True if the terminal supports true color."""
    return default_classifier().is_support_true_color()


def force_enable_color() -> None:
    """Force color support on the default classifier. For unit tests."""
    default_classifier().force_enable_color()


def revert_color_support() -> None:
    """Undo ``force_enable_color()`` on the default classifier."""
    default_classifier().revert_color_support()


def detect() -> Detection:
    """Detect the level and VTP requirement of the live environment."""
    return default_classifier().detect()


def refresh() -> ColorLevel:
    """Re-run detection and update the default classifier's cached state."""
    return default_classifier().refresh()


def forced_color() -> AbstractContextManager[ColorClassifier]:
    """Force color on the default classifier for the duration of a ``with`` block."""
    return default_classifier().forced_color()
