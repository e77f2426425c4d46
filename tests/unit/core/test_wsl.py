"""Unit tests for termlevel.wsl.WSLProbe."""

from __future__ import annotations

import pytest

from termlevel.config import PROC_VERSION_PATH_ENVVAR
from termlevel.errors import ProbeUnavailableError
from termlevel.wsl import WSLProbe

from tests.helpers.classifiers import LINUX_PROC_VERSION, WSL1_PROC_VERSION

# pylint: disable=magic-value-comparison

WSL2_PROC_VERSION = (
    "Linux version 5.15.90.1-microsoft-standard-WSL2 (oe-user@oe-host) "
    "(x86_64-msft-linux-gcc (GCC) 9.3.0) #1 SMP Fri Jan 27 02:56:13 UTC 2023\n"
)


@pytest.mark.parametrize(
    ("contents", "expected"),
    [
        (WSL1_PROC_VERSION, True),
        (WSL2_PROC_VERSION, True),
        (LINUX_PROC_VERSION, False),
        ("", False),
    ],
)
def test_detect_from_contents(tmp_path, contents, expected):
    """The vendor marker in the kernel version identifies WSL."""
    path = tmp_path / "version"
    path.write_text(contents)
    probe = WSLProbe(path)
    assert probe.detect() is expected
    assert probe.contents == contents
    assert probe.error is None


def test_missing_file_is_not_wsl(tmp_path):
    """A missing probe file reads as "not WSL" and records why."""
    probe = WSLProbe(tmp_path / "absent")
    assert probe.detect() is False
    assert probe.probed is True
    assert probe.contents == ""
    assert isinstance(probe.error, ProbeUnavailableError)
    assert probe.error.path == str(tmp_path / "absent")


def test_probe_runs_once(tmp_path):
    """Once computed, the result and raw contents never change."""
    path = tmp_path / "version"
    path.write_text(WSL1_PROC_VERSION)
    probe = WSLProbe(path)
    assert probe.detect() is True

    path.write_text(LINUX_PROC_VERSION)
    assert probe.detect() is True
    assert probe.contents == WSL1_PROC_VERSION

    path.unlink()
    assert probe.detect() is True
    assert probe.error is None


def test_probe_reads_at_most_1024_bytes(tmp_path):
    """Only the head of the file is read."""
    path = tmp_path / "version"
    path.write_text("x" * 2000 + "Microsoft")
    probe = WSLProbe(path)
    assert probe.detect() is False
    assert len(probe.contents) == 1024


def test_default_path_honors_env_override(monkeypatch, tmp_path):
    """Without an explicit path the probe reads TERMLEVEL_PROC_VERSION_PATH."""
    path = tmp_path / "version"
    path.write_text(WSL2_PROC_VERSION)
    monkeypatch.setenv(PROC_VERSION_PATH_ENVVAR, str(path))
    probe = WSLProbe()
    assert probe.path == path
    assert probe.detect() is True
