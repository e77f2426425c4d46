"""Global pytest fixtures for TERMLEVEL."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from termlevel import reset_default_classifier
from termlevel.config import PROC_VERSION_PATH_ENVVAR

if TYPE_CHECKING:
    from pathlib import Path

COLOR_ENV_VARS = (
    "TERM",
    "TERMINAL_EMULATOR",
    "COLORTERM",
    "TERM_PROGRAM",
    "TERM_PROGRAM_VERSION",
    "FORCE_COLOR",
    "NO_COLOR",
    "WT_SESSION",
    "VTE_VERSION",
)


@pytest.fixture(autouse=True)
def _clean_color_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Isolate every test from the runner's terminal.

    Clears the color signals, points the WSL probe at a file that does not
    exist, and drops the process-default classifier before and after the test.
    """
    for name in COLOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(PROC_VERSION_PATH_ENVVAR, str(tmp_path / "no-proc-version"))
    reset_default_classifier()
    yield
    reset_default_classifier()
