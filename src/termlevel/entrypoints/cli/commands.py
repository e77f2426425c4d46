"""TERMLEVEL commands: report and test the terminal's color level.

Behavior
- Results go to **stdout** (level names, JSON, ``NAME=value`` lines) so they can
  be consumed by scripts; human-oriented notices go to **stderr**.
- Every invocation classifies the live environment with a fresh
  ``ColorClassifier``; nothing is cached between runs.

Exit codes
- ``detect`` and ``env`` always exit 0.
- ``check LEVEL`` exits 0 when color is allowed and the terminal supports at
  least ``LEVEL``, 1 otherwise, 2 on an unknown ``LEVEL``.
"""

from __future__ import annotations

import json
import logging

import click

from termlevel.classifier import ColorClassifier
from termlevel.errors import UnknownColorLevelError
from termlevel.levels import ColorLevel

from .helpers import success, warn

logger = logging.getLogger(__name__)

ENV_SIGNALS = (
    "TERM",
    "TERMINAL_EMULATOR",
    "COLORTERM",
    "TERM_PROGRAM",
    "TERM_PROGRAM_VERSION",
    "FORCE_COLOR",
    "NO_COLOR",
)
UNSET = "<unset>"


def _classifier(ctx: click.Context) -> ColorClassifier:
    ctx.ensure_object(dict)
    if "classifier" not in ctx.obj:
        ctx.obj["classifier"] = ColorClassifier()
    return ctx.obj["classifier"]


class ColorLevelParamType(click.ParamType):
    """Click parameter type accepting any name understood by ``ColorLevel.parse``."""

    name = "level"

    def convert(
        self,
        value: str | ColorLevel,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> ColorLevel:
        if isinstance(value, ColorLevel):
            return value
        try:
            return ColorLevel.parse(value)
        except UnknownColorLevelError as e:
            self.fail(f"{e} Choose from: none, ansi, 256, true.", param, ctx)


@click.command()
@click.option("--json", "as_json", is_flag=True, help="Print a JSON object.")
@click.pass_context
def detect(ctx: click.Context, as_json: bool) -> None:
    """Print the color level of the current terminal (none, ansi, 256, true)."""
    classifier = _classifier(ctx)
    detection = classifier.detect()
    if classifier.last_error is not None:
        logger.info("Detection degraded: %s", classifier.last_error)

    if not as_json:
        click.echo(str(detection.level))
        return

    payload = {
        "level": int(detection.level),
        "name": str(detection.level),
        "needs_vtp": detection.needs_vtp,
        "no_color": classifier.no_color(),
        "rule": detection.rule,
        "wsl": classifier.is_wsl(),
    }
    click.echo(json.dumps(payload, sort_keys=True))


@click.command()
@click.argument("level", type=ColorLevelParamType())
@click.pass_context
def check(ctx: click.Context, level: ColorLevel) -> None:
    """Exit 0 if the terminal supports at least LEVEL colors, 1 otherwise.

    NO_COLOR, when present, makes every check except ``none`` fail.
    """
    classifier = _classifier(ctx)
    detected = classifier.detect_color_level()
    logger.debug("check: requested=%s detected=%s", level, detected)

    if level is not ColorLevel.NONE and classifier.no_color():
        warn("NO_COLOR is set, color output is disabled.")
        ctx.exit(1)
    if not detected.supports(level):
        warn(f"Terminal supports '{detected}', '{level}' requested.")
        ctx.exit(1)
    success(f"Terminal supports '{detected}'.")


@click.command()
@click.pass_context
def env(ctx: click.Context) -> None:
    """List the environment signals used for detection."""
    classifier = _classifier(ctx)
    snap = classifier.snapshot()
    values = {
        "TERM": snap.term,
        "TERMINAL_EMULATOR": snap.terminal_emulator,
        "COLORTERM": snap.colorterm,
        "TERM_PROGRAM": snap.term_program,
        "TERM_PROGRAM_VERSION": snap.term_program_version,
        "FORCE_COLOR": snap.force_color,
    }
    for name in ENV_SIGNALS:
        if name == "NO_COLOR":
            value = UNSET if snap.no_color is None else snap.no_color
        else:
            value = values[name] or UNSET
        click.echo(f"{name}={value}")
    click.echo(f"windows={str(snap.is_windows).lower()}")
    click.echo(f"wsl={str(classifier.is_wsl()).lower()}")
