"""Font construction for union-fonts.

Key functions:
- system_font: Build a system font with OpenType feature values
- system_font_with_flags: Same, from on/off feature flags
- font_weight: Apply a (numeric) weight to a view
"""

from unionfonts.core.builder import system_font, system_font_with_flags
from unionfonts.core.modifiers import font_weight

__all__ = [
    "font_weight",
    "system_font",
    "system_font_with_flags",
]
