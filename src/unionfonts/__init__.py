"""union-fonts - OpenType feature and numeric weight helpers for system fonts.

union-fonts is a thin adapter over a GUI toolkit's font APIs. It turns a mapping
of OpenType feature tags to values into native font-descriptor attributes, and
numeric weights (100-900) into named weights.

Example:
    >>> from unionfonts import OpenTypeFeatures, Weight, system_font
    >>> font = system_font(
    ...     16,
    ...     Weight.BOLD,
    ...     open_type_features={OpenTypeFeatures.character_variant(9): 1},
    ... )

The native toolkit (AppKit or Qt) is picked automatically; without one the
plain system font value is returned and features are ignored.
"""

__version__ = "0.1.0"
__author__ = "Ben Sage"

from unionfonts.backends import configure, get_backend, select_backend, set_backend
from unionfonts.core import font_weight, system_font, system_font_with_flags
from unionfonts.domain import (
    DISCRETIONARY_LIGATURES,
    KERNING,
    SLASHED_ZERO,
    STANDARD_LIGATURES,
    Design,
    FeatureSetting,
    Font,
    OpenTypeFeatures,
    StyledView,
    Weight,
    character_variant,
    stylistic_set,
    weight_from_int,
)

__all__ = [
    "DISCRETIONARY_LIGATURES",
    "KERNING",
    "SLASHED_ZERO",
    "STANDARD_LIGATURES",
    "Design",
    "FeatureSetting",
    "Font",
    "OpenTypeFeatures",
    "StyledView",
    "Weight",
    "__author__",
    "__version__",
    "character_variant",
    "configure",
    "font_weight",
    "get_backend",
    "select_backend",
    "set_backend",
    "stylistic_set",
    "system_font",
    "system_font_with_flags",
    "weight_from_int",
]
