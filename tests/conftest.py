"""Shared fixtures for union-fonts tests."""

from collections.abc import Mapping, Sequence
from typing import Any

import pytest

from unionfonts.backends import FontBackend, set_backend
from unionfonts.domain import Design, FeatureSetting, Weight


class RecordingBackend(FontBackend):
    """Backend whose native fonts are plain dicts; records every call."""

    name = "recording"

    def __init__(self, fail_design: bool = False, fail_features: bool = False) -> None:
        self.fail_design = fail_design
        self.fail_features = fail_features
        self.calls: list[tuple[str, Any]] = []

    @property
    def weights(self) -> Mapping[Weight, Any]:
        return {
            Weight.ULTRA_LIGHT: -0.8,
            Weight.THIN: -0.6,
            Weight.LIGHT: -0.4,
            Weight.REGULAR: 0.0,
            Weight.MEDIUM: 0.23,
            Weight.SEMIBOLD: 0.3,
            Weight.BOLD: 0.4,
            Weight.HEAVY: 0.56,
            Weight.BLACK: 0.62,
        }

    @property
    def designs(self) -> Mapping[Design, Any]:
        return {Design.SERIF: "native-serif", Design.ROUNDED: "native-rounded"}

    def system_font(self, size: float, native_weight: Any) -> dict[str, Any]:
        self.calls.append(("system_font", (size, native_weight)))
        return {"size": size, "weight": native_weight}

    def apply_design(self, font: Any, native_design: Any, size: float) -> dict[str, Any] | None:
        self.calls.append(("apply_design", native_design))
        if self.fail_design:
            return None
        return {**font, "design": native_design}

    def apply_features(
        self, font: Any, settings: Sequence[FeatureSetting], size: float
    ) -> dict[str, Any] | None:
        self.calls.append(("apply_features", tuple(settings)))
        if self.fail_features:
            return None
        return {**font, "features": [{"tag": s.tag, "value": s.value} for s in settings]}

    def apply_view_weight(self, view: Any, weight: Weight) -> Any:
        self.calls.append(("apply_view_weight", weight))
        view["weight"] = self.native_weight(weight)
        return view

    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture(autouse=True)
def reset_active_backend():
    """Make every test start without an active backend."""
    set_backend(None)
    yield
    set_backend(None)


@pytest.fixture
def recording_backend() -> RecordingBackend:
    return RecordingBackend()
