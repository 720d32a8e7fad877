"""Backend used when no native toolkit is importable.

OpenType features cannot be applied without a toolkit, so the builder returns
the plain system font value. Views get a ``StyledView`` wrapper.
"""

from collections.abc import Mapping, Sequence
from dataclasses import replace
from typing import Any

from unionfonts.backends.base import FontBackend
from unionfonts.domain.font import Design, FeatureSetting, Font, StyledView, Weight


class FallbackBackend(FontBackend):
    """Toolkit-less backend; native fonts are plain ``Font`` values."""

    name = "none"
    supports_features = False

    @property
    def weights(self) -> Mapping[Weight, Any]:
        return {weight: weight for weight in Weight}

    @property
    def designs(self) -> Mapping[Design, Any]:
        return {}

    def system_font(self, size: float, native_weight: Any) -> Font:
        return Font.system(size, native_weight)

    def apply_design(self, font: Any, native_design: Any, size: float) -> None:
        return None

    def apply_features(
        self, font: Any, settings: Sequence[FeatureSetting], size: float
    ) -> None:
        return None

    def apply_view_weight(self, view: Any, weight: Weight) -> StyledView:
        if isinstance(view, StyledView):
            return replace(view, font_weight=weight)
        return StyledView(content=view, font_weight=weight)
