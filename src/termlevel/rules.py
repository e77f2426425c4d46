"""Ordered environment rules for color level detection.

Each rule pairs a predicate over an :class:`~termlevel.env.EnvSnapshot` with
the level it yields. Rules are evaluated in the order of ``ENV_RULES`` and
the first match wins; the last rule always matches.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import NamedTuple

from . import config
from .env import EnvSnapshot
from .errors import DetectionError, InvalidTermProgramVersionError
from .levels import ColorLevel


class RuleResult(NamedTuple):
    """Level produced by a rule, with any recoverable error met on the way."""

    level: ColorLevel
    error: DetectionError | None = None


Resolver = Callable[[EnvSnapshot], RuleResult]

# signed ASCII integer, no whitespace or underscores
_MAJOR_VERSION = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Rule:
    """A named predicate and the level it yields when it matches."""

    name: str
    predicate: Callable[[EnvSnapshot], bool]
    result: ColorLevel | Resolver

    def evaluate(self, snapshot: EnvSnapshot) -> RuleResult | None:
        """Return the rule's result for ``snapshot``, or None if it does not match."""
        if not self.predicate(snapshot):
            return None
        if isinstance(self.result, ColorLevel):
            return RuleResult(self.result)
        return self.result(snapshot)


def iterm_level(snapshot: EnvSnapshot) -> RuleResult:
    """Classify iTerm2 from the major component of TERM_PROGRAM_VERSION.

    Only the text before the first ``.`` is parsed, and it must be plain
    ASCII digits with an optional sign. Version 3 renders true color; other
    versions, and unparsable ones, get 256 colors.
    """
    version = snapshot.term_program_version
    if not version:
        return RuleResult(ColorLevel.EXTENDED)
    major = version.split(".", 1)[0]
    if not _MAJOR_VERSION.fullmatch(major):
        return RuleResult(
            ColorLevel.EXTENDED, InvalidTermProgramVersionError(version)
        )
    if int(major) == config.ITERM_TRUE_COLOR_MAJOR:
        return RuleResult(ColorLevel.TRUE_COLOR)
    return RuleResult(ColorLevel.EXTENDED)


ENV_RULES: tuple[Rule, ...] = (
    Rule(
        "screen",
        lambda s: s.term == config.NO_TRUE_COLOR_TERM,
        ColorLevel.EXTENDED,
    ),
    Rule(
        "colorterm-truecolor",
        lambda s: any(v in s.colorterm for v in config.TRUE_COLOR_COLORTERMS),
        ColorLevel.TRUE_COLOR,
    ),
    Rule(
        "colorterm-or-force-color",
        lambda s: bool(s.colorterm or s.force_color),
        ColorLevel.BASIC,
    ),
    Rule(
        "apple-terminal",
        lambda s: s.term_program == config.APPLE_TERMINAL_PROGRAM,
        ColorLevel.EXTENDED,
    ),
    Rule(
        "truecolor-program",
        lambda s: s.term_program in config.TRUE_COLOR_PROGRAMS,
        ColorLevel.TRUE_COLOR,
    ),
    Rule(
        "iterm",
        lambda s: s.term_program == config.ITERM_PROGRAM,
        iterm_level,
    ),
    # A full implementation would read max_colors from terminfo.
    Rule(
        "term-set",
        lambda s: not s.is_windows and bool(s.term),
        ColorLevel.BASIC,
    ),
    Rule("no-signal", lambda s: True, ColorLevel.NONE),
)


def evaluate_rules(
    snapshot: EnvSnapshot, rules: Sequence[Rule] = ENV_RULES
) -> tuple[Rule | None, RuleResult]:
    """Evaluate ``rules`` in order and return the first match.

    Args:
        snapshot: The environment signals to classify.
        rules: Ordered rules; defaults to ``ENV_RULES``.

    Returns:
        tuple: The matching rule (None if nothing matched) and its result.
    """
    for rule in rules:
        if (result := rule.evaluate(snapshot)) is not None:
            return rule, result
    return None, RuleResult(ColorLevel.NONE)
