"""One-shot detection of Windows Subsystem for Linux hosts.

The kernel version pseudo-file names the vendor on WSL kernels. Sample
``/proc/version`` contents:

- Debian/Alpine: ``Linux version 4.19.121-linuxkit (root@18b3f92ade35) ...``
- WSL1: ``Linux version 4.4.0-19041-Microsoft (Microsoft@Microsoft.com) ...``
- macOS: no such file.

The file is read at most once per probe; a missing or unreadable file means
"not WSL".
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path

from . import config
from .errors import ProbeUnavailableError

logger = logging.getLogger(__name__)


class WSLProbe:
    """Memoized WSL check backed by a kernel version file.

    Once ``detect()`` has run, ``is_wsl`` and ``contents`` never change for the
    lifetime of the probe.
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path
        self._lock = threading.Lock()
        self._done = False
        self._is_wsl = False
        self._contents = ""
        self._error: ProbeUnavailableError | None = None

    @property
    def path(self) -> Path:
        """Kernel version file this probe reads."""
        return self._path if self._path is not None else config.get_proc_version_path()

    @property
    def probed(self) -> bool:
        """True once the file has been read (or the read has failed)."""
        return self._done

    @property
    def contents(self) -> str:
        """Raw contents read from the probe file, empty if unread or unreadable."""
        return self._contents

    @property
    def error(self) -> ProbeUnavailableError | None:
        """The read failure, if the probe file was unavailable."""
        return self._error

    def detect(self) -> bool:
        """Return True if the host kernel identifies as WSL.

        Returns:
            bool: The cached result, computing it on first call.
        """
        with self._lock:
            if not self._done:
                self._done = True
                self._is_wsl = self._read()
            return self._is_wsl

    def _read(self) -> bool:
        path = self.path
        try:
            with path.open("rb") as fh:
                data = fh.read(config.PROBE_READ_SIZE)
        except OSError as exc:
            self._error = ProbeUnavailableError(str(path), exc.strerror or "")
            logger.debug("WSL probe unavailable: %s", self._error)
            return False

        self._contents = data.decode("utf-8", errors="replace")
        is_wsl = any(marker in self._contents for marker in config.WSL_MARKERS)
        logger.debug("WSL probe read %s: wsl=%s", path, is_wsl)
        return is_wsl
