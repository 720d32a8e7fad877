"""OpenType feature tag registry.

Named constants for common OpenType features and formatting helpers for the
numbered feature families (character variants ``cv01``-``cv99`` and stylistic
sets ``ss01``-``ss20``).
"""

from unionfonts.exceptions import FatalPreconditionError

STANDARD_LIGATURES = "liga"
DISCRETIONARY_LIGATURES = "dlig"
KERNING = "kern"
SLASHED_ZERO = "zero"

CHARACTER_VARIANT_RANGE = range(1, 100)
STYLISTIC_SET_RANGE = range(1, 21)


def _numbered_tag(prefix: str, number: int, valid: range, message: str) -> str:
    # bool is an int subclass; True must not pass as cv01
    if isinstance(number, bool) or not isinstance(number, int) or number not in valid:
        raise FatalPreconditionError(message)
    return f"{prefix}{number:02d}"


def character_variant(number: int) -> str:
    """Return the character variant tag for ``number``.

    Args:
        number: Variant number, 1 to 99 inclusive

    Returns:
        Tag such as ``"cv09"``

    Raises:
        FatalPreconditionError: If ``number`` is outside 1-99
    """
    return _numbered_tag(
        "cv", number, CHARACTER_VARIANT_RANGE, "Character variant must be between 1 and 99"
    )


def stylistic_set(number: int) -> str:
    """Return the stylistic set tag for ``number``.

    Args:
        number: Set number, 1 to 20 inclusive

    Returns:
        Tag such as ``"ss01"``

    Raises:
        FatalPreconditionError: If ``number`` is outside 1-20
    """
    return _numbered_tag("ss", number, STYLISTIC_SET_RANGE, "Stylistic set must be between 1 and 20")


class OpenTypeFeatures:
    """Namespace of well-known OpenType feature tags."""

    STANDARD_LIGATURES = STANDARD_LIGATURES
    DISCRETIONARY_LIGATURES = DISCRETIONARY_LIGATURES
    KERNING = KERNING
    SLASHED_ZERO = SLASHED_ZERO

    character_variant = staticmethod(character_variant)
    stylistic_set = staticmethod(stylistic_set)

    @classmethod
    def named(cls) -> dict[str, str]:
        """Map constant names to their tags."""
        return {
            "STANDARD_LIGATURES": cls.STANDARD_LIGATURES,
            "DISCRETIONARY_LIGATURES": cls.DISCRETIONARY_LIGATURES,
            "KERNING": cls.KERNING,
            "SLASHED_ZERO": cls.SLASHED_ZERO,
        }
