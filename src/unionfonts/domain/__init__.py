"""Domain models for union-fonts.

This module contains the value types shared by the builder and the backends.
All models are immutable and independent of any native toolkit.

Key classes:
- Weight, Design: Named font weights and system designs
- FeatureSetting: A single OpenType feature tag/value pair
- Font: A system font value with optional feature settings
- StyledView: A view with a weight override (toolkit-less fallback)
- OpenTypeFeatures: Registry of common feature tags
"""

from unionfonts.domain.features import (
    DISCRETIONARY_LIGATURES,
    KERNING,
    SLASHED_ZERO,
    STANDARD_LIGATURES,
    OpenTypeFeatures,
    character_variant,
    stylistic_set,
)
from unionfonts.domain.font import (
    NUMERIC_WEIGHTS,
    Design,
    FeatureSetting,
    Font,
    StyledView,
    Weight,
    feature_settings,
    flags_to_values,
    resolve_weight,
    weight_from_int,
)

__all__: list[str] = [
    # Enums
    "Weight",
    "Design",
    # Core types
    "FeatureSetting",
    "Font",
    "StyledView",
    # Feature registry
    "OpenTypeFeatures",
    "STANDARD_LIGATURES",
    "DISCRETIONARY_LIGATURES",
    "KERNING",
    "SLASHED_ZERO",
    "character_variant",
    "stylistic_set",
    # Conversions
    "NUMERIC_WEIGHTS",
    "weight_from_int",
    "resolve_weight",
    "feature_settings",
    "flags_to_values",
]
