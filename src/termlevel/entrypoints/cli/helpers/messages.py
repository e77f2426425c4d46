"""Terminal message helpers for the termlevel CLI.

Small helpers for rendering user-visible lines with sensible emoji→ASCII fallbacks.
Messages write to stderr so stdout stays machine-readable, and drop styling
when NO_COLOR is present.
"""

import click

from termlevel.env import EnvSnapshot


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr.

    Args:
        character: A single Unicode character to probe (e.g., "⚠️", "✅").

    Returns:
        bool: True if encoding succeeds; False on `UnicodeEncodeError`.
    """

    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    if _supports_character(emoji):
        return emoji
    return fallback


def caution_glyph() -> str:
    """Warning marker: "⚠️", or "[!]" when stderr cannot encode it."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success_glyph() -> str:
    """Success marker: "✅", or "[OK]" when stderr cannot encode it."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def _color_override() -> bool | None:
    # None lets Click decide from the stream; False strips styling
    return False if EnvSnapshot.from_environ().no_color_present else None


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to **stderr** with a caution glyph.

    Args:
        msg: The message to display.

    Example:
        ``⚠️  Terminal supports 256 colors, true color requested.``
    """
    g = caution_glyph()
    click.secho(
        f"{g}  {msg}", fg="yellow", bold=True, err=True, color=_color_override()
    )


def success(msg: str) -> None:
    """Emit a green, bold success line to **stderr** with a success glyph.

    Args:
        msg: The message to display.
    """
    g = success_glyph()
    click.secho(
        f"{g}  {msg}", fg="green", bold=True, err=True, color=_color_override()
    )
