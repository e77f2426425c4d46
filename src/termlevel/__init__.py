"""TERMLEVEL

Terminal color-capability detection. Inspects the environment a process runs
in and classifies the terminal into an ordered color level (none, 16-color,
256-color, true color) so renderers can decide which escape sequences to emit.
"""

from .classifier import (
    ColorClassifier,
    Detection,
    default_classifier,
    detect,
    detect_color_level,
    force_enable_color,
    forced_color,
    is_support_256_color,
    is_support_color,
    is_support_true_color,
    no_color,
    refresh,
    reset_default_classifier,
    revert_color_support,
)
from .env import EnvSnapshot
from .levels import ColorLevel

__all__ = [
    "__version__",
    "ColorClassifier",
    "ColorLevel",
    "Detection",
    "EnvSnapshot",
    "default_classifier",
    "detect",
    "detect_color_level",
    "force_enable_color",
    "forced_color",
    "is_support_256_color",
    "is_support_color",
    "is_support_true_color",
    "no_color",
    "refresh",
    "reset_default_classifier",
    "revert_color_support",
]
__version__ = "0.1.0"
