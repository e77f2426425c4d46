"""OSC-8 hyperlink utilities for the termlevel CLI.

Provides a small heuristic to detect whether the active text stream supports
OSC-8 terminal hyperlinks and a helper to render a URL as a clickable link,
falling back to plain text when unsupported. Pure formatting only.
"""

import os
import sys
from typing import TextIO

from termlevel.env import EnvSnapshot

OSC8_PROGRAMS = frozenset({"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"})
OSC8_TERM_PREFIXES = ("alacritty", "konsole", "xterm-kitty")


def supports_osc8(
    stream: TextIO | None = None, snapshot: EnvSnapshot | None = None
) -> bool:
    """Heuristically detect whether the target stream supports OSC-8 hyperlinks.

    Args:
        stream: File-like text stream to probe; defaults to ``sys.stdout``.
        snapshot: Environment signals; read from ``os.environ`` if None.

    Returns:
        bool: ``True`` if hyperlinks should be emitted; ``False`` otherwise.

    Notes:
        - Returns ``False`` when the stream is not a TTY (e.g., piped or redirected).
        - Returns ``False`` for ``TERM=dumb``.
        - Uses a conservative allowlist based on terminal identifiers
          (e.g., VS Code, iTerm2, WezTerm, Kitty, JetBrains, Windows Terminal).
    """
    stream = stream or sys.stdout
    if not getattr(stream, "isatty", lambda: False)():
        return False
    env = snapshot or EnvSnapshot.from_environ()
    if env.term == "dumb":
        return False
    return bool(
        env.term_program.lower() in OSC8_PROGRAMS
        or env.terminal_emulator == "JetBrains-JediTerm"
        or env.term.startswith(OSC8_TERM_PREFIXES)
        or _has_vte_or_wt()
    )


def _has_vte_or_wt() -> bool:
    # Windows Terminal and VTE (GNOME Terminal, Tilix) are not color signals
    return bool(os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"))


def hyperlink(url: str, text: str | None = None) -> str:
    """Return an OSC-8 hyperlink with a graceful fallback for unsupported terminals.

    Args:
        url: Target URL.
        text: Visible label; defaults to the URL itself.

    Returns:
        str: The label wrapped in OSC-8 sequences when supported, otherwise a
        plain URL string.

    Notes:
        - Uses BEL (``\\x07``) as the OSC-8 terminator for broad terminal support.
    """
    if not supports_osc8():
        return url
    label = text or url
    return f"\x1b]8;;{url}\x07{label}\x1b]8;;\x07"  # OSC 8 ; ; URL BEL
