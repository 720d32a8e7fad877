"""Font value types.

This module defines the toolkit-level font value and the enumerations it is
built from. A ``Font`` describes a system font request (size, weight, design)
plus the OpenType feature settings applied to it, and optionally carries the
native font object a backend produced for it.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from unionfonts.exceptions import FatalPreconditionError


class Weight(str, Enum):
    """Named font weights."""

    ULTRA_LIGHT = "ultraLight"
    THIN = "thin"
    LIGHT = "light"
    REGULAR = "regular"
    MEDIUM = "medium"
    SEMIBOLD = "semibold"
    BOLD = "bold"
    HEAVY = "heavy"
    BLACK = "black"


class Design(str, Enum):
    """Named system font designs."""

    DEFAULT = "default"
    SERIF = "serif"
    ROUNDED = "rounded"
    MONOSPACED = "monospaced"


# 100 -> THIN and 200 -> ULTRA_LIGHT is the established mapping of this API
# and must stay as is.
NUMERIC_WEIGHTS: dict[int, Weight] = {
    100: Weight.THIN,
    200: Weight.ULTRA_LIGHT,
    300: Weight.LIGHT,
    400: Weight.REGULAR,
    500: Weight.MEDIUM,
    600: Weight.SEMIBOLD,
    700: Weight.BOLD,
    800: Weight.HEAVY,
    900: Weight.BLACK,
}


def weight_from_int(value: int) -> Weight:
    """Convert a numeric weight (100, 200, ... 900) to a named weight.

    Raises:
        FatalPreconditionError: If ``value`` is not one of the nine standard weights
    """
    if isinstance(value, bool) or not isinstance(value, int) or value not in NUMERIC_WEIGHTS:
        raise FatalPreconditionError(f"Unsupported weight {value}")
    return NUMERIC_WEIGHTS[value]


def resolve_weight(value: "int | Weight") -> Weight:
    """Accept either a named weight or a numeric one."""
    if isinstance(value, Weight):
        return value
    return weight_from_int(value)


@dataclass(frozen=True)
class FeatureSetting:
    """One OpenType feature setting: a 4-character tag and its value.

    Attributes:
        tag: OpenType feature tag, e.g. "liga"
        value: 0 disables, 1 enables, higher values select alternates
    """

    tag: str
    value: int

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"tag": self.tag, "value": self.value}


def feature_settings(features: Mapping[str, int]) -> tuple[FeatureSetting, ...]:
    """Convert a feature map into settings ordered by tag."""
    return tuple(FeatureSetting(tag, int(value)) for tag, value in sorted(features.items()))


def flags_to_values(features: Mapping[str, bool]) -> dict[str, int]:
    """Convert an on/off feature map into a valued one."""
    return {tag: 1 if enabled else 0 for tag, enabled in features.items()}


@dataclass(frozen=True)
class Font:
    """A system font value.

    Two fonts compare equal when their size, weight, design and feature
    settings are equal; the native handle and backend name are ignored.

    Attributes:
        size: Point size
        weight: Named weight
        design: Named system design
        features: Applied OpenType feature settings, ordered by tag
        native: Native font object produced by a backend, if any
        backend: Name of the backend that produced ``native``
        source: Backend instance that produced ``native``; weight changes
            are rebuilt through it
    """

    size: float
    weight: Weight = Weight.REGULAR
    design: Design = Design.DEFAULT
    features: tuple[FeatureSetting, ...] = ()
    native: Any = field(default=None, compare=False, repr=False)
    backend: str | None = field(default=None, compare=False)
    source: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def system(
        cls,
        size: float,
        weight: Weight = Weight.REGULAR,
        design: Design = Design.DEFAULT,
    ) -> "Font":
        """The plain system font for a size, weight and design."""
        return cls(size=size, weight=weight, design=design)

    @property
    def feature_map(self) -> dict[str, int]:
        """Feature settings as a tag -> value mapping."""
        return {setting.tag: setting.value for setting in self.features}

    def with_weight(self, value: "int | Weight") -> "Font":
        """Return this font with a different weight.

        Args:
            value: Named weight, or a numeric one (100, 200, ... 900)

        Returns:
            New font. A font with feature settings is rebuilt so its native
            font follows the new weight.

        Raises:
            FatalPreconditionError: If a numeric ``value`` is unsupported
        """
        weight = resolve_weight(value)
        if not self.features:
            return replace(self, weight=weight, native=None, backend=None, source=None)

        from unionfonts.core.builder import system_font

        return system_font(
            self.size,
            weight,
            self.design,
            open_type_features=self.feature_map,
            backend=self.source,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary (without the native handle)."""
        return {
            "size": self.size,
            "weight": self.weight.value,
            "design": self.design.value,
            "features": [setting.to_dict() for setting in self.features],
            "backend": self.backend,
        }


@dataclass(frozen=True)
class StyledView:
    """A view paired with a font weight override.

    Returned by the weight modifier when no native toolkit is available.
    """

    content: Any
    font_weight: Weight
