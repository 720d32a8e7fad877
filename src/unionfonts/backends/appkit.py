"""AppKit backend (macOS, via pyobjc).

Fonts are ``NSFont`` instances. Feature settings become CoreText feature
records (``kCTFontOpenTypeFeatureTag`` / ``kCTFontOpenTypeFeatureValue``)
stored under the descriptor's feature-settings attribute.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from AppKit import (
    NSFont,
    NSFontDescriptorSystemDesignRounded,
    NSFontDescriptorSystemDesignSerif,
    NSFontFeatureSettingsAttribute,
    NSFontTraitsAttribute,
    NSFontWeightBlack,
    NSFontWeightBold,
    NSFontWeightHeavy,
    NSFontWeightLight,
    NSFontWeightMedium,
    NSFontWeightRegular,
    NSFontWeightSemibold,
    NSFontWeightThin,
    NSFontWeightTrait,
    NSFontWeightUltraLight,
)
from CoreText import kCTFontOpenTypeFeatureTag, kCTFontOpenTypeFeatureValue

from unionfonts.backends.base import FontBackend
from unionfonts.domain.font import Design, FeatureSetting, Weight

logger = logging.getLogger(__name__)

_WEIGHTS: dict[Weight, float] = {
    Weight.ULTRA_LIGHT: NSFontWeightUltraLight,
    Weight.THIN: NSFontWeightThin,
    Weight.LIGHT: NSFontWeightLight,
    Weight.REGULAR: NSFontWeightRegular,
    Weight.MEDIUM: NSFontWeightMedium,
    Weight.SEMIBOLD: NSFontWeightSemibold,
    Weight.BOLD: NSFontWeightBold,
    Weight.HEAVY: NSFontWeightHeavy,
    Weight.BLACK: NSFontWeightBlack,
}

_DESIGNS: dict[Design, Any] = {
    Design.SERIF: NSFontDescriptorSystemDesignSerif,
    Design.ROUNDED: NSFontDescriptorSystemDesignRounded,
}


class AppKitBackend(FontBackend):
    """Builds ``NSFont`` objects through ``NSFontDescriptor``."""

    name = "appkit"

    @property
    def weights(self) -> Mapping[Weight, Any]:
        return _WEIGHTS

    @property
    def designs(self) -> Mapping[Design, Any]:
        return _DESIGNS

    def system_font(self, size: float, native_weight: Any) -> Any:
        return NSFont.systemFontOfSize_weight_(size, native_weight)

    def apply_design(self, font: Any, native_design: Any, size: float) -> Any | None:
        descriptor = font.fontDescriptor().fontDescriptorWithDesign_(native_design)
        if descriptor is None:
            return None
        return NSFont.fontWithDescriptor_size_(descriptor, size)

    def apply_features(
        self, font: Any, settings: Sequence[FeatureSetting], size: float
    ) -> Any | None:
        records = [
            {
                kCTFontOpenTypeFeatureTag: setting.tag,
                kCTFontOpenTypeFeatureValue: setting.value,
            }
            for setting in settings
        ]
        descriptor = font.fontDescriptor().fontDescriptorByAddingAttributes_(
            {NSFontFeatureSettingsAttribute: records}
        )
        return NSFont.fontWithDescriptor_size_(descriptor, size)

    def apply_view_weight(self, view: Any, weight: Weight) -> Any:
        current = view.font()
        native_weight = self.native_weight(weight)
        descriptor = current.fontDescriptor().fontDescriptorByAddingAttributes_(
            {NSFontTraitsAttribute: {NSFontWeightTrait: native_weight}}
        )
        font = NSFont.fontWithDescriptor_size_(descriptor, current.pointSize())
        if font is None:
            logger.debug(
                "Weight trait %s not applicable to %s, using system font",
                weight.value, current.fontName()
            )
            font = NSFont.systemFontOfSize_weight_(current.pointSize(), native_weight)
        view.setFont_(font)
        return view
