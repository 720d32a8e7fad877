"""Qt backend (PyQt6).

Fonts are ``QFont`` instances. Feature settings use ``QFont.setFeature``,
available from Qt 6.7; older bindings keep the un-featured font. Qt has no
rounded system design, so only serif is overridden (through a style hint).
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from PyQt6.QtGui import QFont

from unionfonts.backends.base import FontBackend
from unionfonts.domain.font import Design, FeatureSetting, Weight

logger = logging.getLogger(__name__)

_WEIGHTS: dict[Weight, QFont.Weight] = {
    Weight.ULTRA_LIGHT: QFont.Weight.ExtraLight,
    Weight.THIN: QFont.Weight.Thin,
    Weight.LIGHT: QFont.Weight.Light,
    Weight.REGULAR: QFont.Weight.Normal,
    Weight.MEDIUM: QFont.Weight.Medium,
    Weight.SEMIBOLD: QFont.Weight.DemiBold,
    Weight.BOLD: QFont.Weight.Bold,
    Weight.HEAVY: QFont.Weight.ExtraBold,
    Weight.BLACK: QFont.Weight.Black,
}

_DESIGNS: dict[Design, QFont.StyleHint] = {
    Design.SERIF: QFont.StyleHint.Serif,
}

_GENERIC_FAMILIES: dict[QFont.StyleHint, str] = {
    QFont.StyleHint.Serif: "serif",
}


class QtBackend(FontBackend):
    """Builds ``QFont`` objects."""

    name = "qt"

    @property
    def weights(self) -> Mapping[Weight, Any]:
        return _WEIGHTS

    @property
    def designs(self) -> Mapping[Design, Any]:
        return _DESIGNS

    def system_font(self, size: float, native_weight: Any) -> QFont:
        font = QFont()
        font.setPointSizeF(size)
        font.setWeight(native_weight)
        return font

    def apply_design(self, font: Any, native_design: Any, size: float) -> QFont | None:
        family = _GENERIC_FAMILIES.get(native_design)
        if family is None:
            return None
        designed = QFont(font)
        designed.setFamily(family)
        designed.setStyleHint(native_design)
        designed.setPointSizeF(size)
        return designed

    def apply_features(
        self, font: Any, settings: Sequence[FeatureSetting], size: float
    ) -> QFont | None:
        tag_type = getattr(QFont, "Tag", None)
        if tag_type is None or not hasattr(QFont, "setFeature"):
            logger.debug("QFont.setFeature unavailable (Qt < 6.7)")
            return None

        featured = QFont(font)
        for setting in settings:
            try:
                tag = tag_type.fromString(setting.tag)
                if tag is None:
                    logger.debug("Rejected OpenType tag %r", setting.tag)
                    return None
                featured.setFeature(tag, setting.value)
            except (OverflowError, TypeError, ValueError):
                logger.debug("Rejected OpenType setting %r=%r", setting.tag, setting.value)
                return None
        featured.setPointSizeF(size)
        return featured

    def apply_view_weight(self, view: Any, weight: Weight) -> Any:
        font = QFont(view.font())
        font.setWeight(self.native_weight(weight))
        view.setFont(font)
        return view
