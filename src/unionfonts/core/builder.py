"""System font construction with OpenType feature settings.

The builder owns the platform-independent steps: short-circuiting empty
feature maps, mapping weight and design through the backend's tables,
normalizing the feature map, and degrading to the best font built so far
when a native derivation fails. Backends only perform the native calls.
"""

import logging
from collections.abc import Mapping

from unionfonts.backends import FontBackend, get_backend
from unionfonts.domain.font import Design, Font, Weight, feature_settings, flags_to_values

logger = logging.getLogger(__name__)


def system_font(
    size: float,
    weight: Weight = Weight.REGULAR,
    design: Design = Design.DEFAULT,
    *,
    open_type_features: Mapping[str, int],
    backend: FontBackend | None = None,
) -> Font:
    """Build a system font with OpenType feature settings.

    Never raises for native failures: a design that cannot be applied keeps
    the base font, and features that cannot be applied keep the designed font.

    Args:
        size: Point size
        weight: Named weight
        design: Named system design
        open_type_features: Feature tag -> value (0 off, 1 on, >1 alternates)
        backend: Backend to use instead of the active one

    Returns:
        Font value. With no features, or without a native toolkit, this is
        ``Font.system(size, weight, design)``.
    """
    if not open_type_features:
        return Font.system(size, weight, design)

    backend = backend if backend is not None else get_backend()
    if not backend.supports_features:
        logger.debug(
            "Backend %s cannot apply OpenType features, ignoring %d setting(s)",
            backend.name, len(open_type_features)
        )
        return Font.system(size, weight, design)

    native = backend.system_font(size, backend.native_weight(weight))

    native_design = backend.native_design(design)
    if native_design is not None:
        designed = backend.apply_design(native, native_design, size)
        if designed is None:
            logger.debug("Design %s unavailable on %s, keeping base font", design, backend.name)
        else:
            native = designed

    settings = feature_settings(open_type_features)
    featured = backend.apply_features(native, settings, size)
    if featured is None:
        logger.debug(
            "Could not apply features %s on %s, keeping font without them",
            ", ".join(setting.tag for setting in settings), backend.name
        )
    else:
        native = featured

    return Font(
        size=size,
        weight=weight,
        design=design,
        features=settings,
        native=native,
        backend=backend.name,
        source=backend,
    )


def system_font_with_flags(
    size: float,
    weight: Weight = Weight.REGULAR,
    design: Design = Design.DEFAULT,
    *,
    features: Mapping[str, bool],
    backend: FontBackend | None = None,
) -> Font:
    """Build a system font from on/off feature flags.

    ``True`` becomes 1 and ``False`` becomes 0; see ``system_font``.
    """
    return system_font(
        size,
        weight,
        design,
        open_type_features=flags_to_values(features),
        backend=backend,
    )
