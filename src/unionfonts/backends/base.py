"""Capability interface implemented once per native toolkit."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from unionfonts.domain.font import Design, FeatureSetting, Weight


class FontBackend(ABC):
    """Native font operations the builder needs from a toolkit.

    Subclasses fill in the weight and design tables and the four native
    operations. The ``apply_*`` font operations return ``None`` when the
    toolkit cannot derive the requested font; callers then keep the font
    they already have.
    """

    name: ClassVar[str]
    supports_features: ClassVar[bool] = True

    @property
    @abstractmethod
    def weights(self) -> Mapping[Weight, Any]:
        """Named weight -> native weight. Must contain ``Weight.REGULAR``."""

    @property
    @abstractmethod
    def designs(self) -> Mapping[Design, Any]:
        """Named design -> native system design, for designs the toolkit has."""

    def native_weight(self, weight: Any) -> Any:
        """Native weight for ``weight``; unknown values map to regular."""
        try:
            return self.weights[weight]
        except (KeyError, TypeError):
            return self.weights[Weight.REGULAR]

    def native_design(self, design: Any) -> Any | None:
        """Native design override for ``design``, or ``None`` for no override.

        ``Design.MONOSPACED`` has no override.
        """
        if design in (Design.DEFAULT, Design.MONOSPACED):
            return None
        try:
            return self.designs.get(design)
        except TypeError:
            return None

    @abstractmethod
    def system_font(self, size: float, native_weight: Any) -> Any:
        """Create the native system font of ``size`` at ``native_weight``."""

    @abstractmethod
    def apply_design(self, font: Any, native_design: Any, size: float) -> Any | None:
        """Re-derive ``font`` with a system design."""

    @abstractmethod
    def apply_features(
        self, font: Any, settings: Sequence[FeatureSetting], size: float
    ) -> Any | None:
        """Derive a font from ``font`` whose descriptor carries ``settings``."""

    @abstractmethod
    def apply_view_weight(self, view: Any, weight: Weight) -> Any:
        """Apply ``weight`` to a view's font and return the modified view."""

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"
