"""Unit tests for numeric weights on fonts and views."""

import pytest
from conftest import RecordingBackend

from unionfonts import Font, StyledView, Weight, font_weight, set_backend, system_font, weight_from_int
from unionfonts.backends import FallbackBackend
from unionfonts.domain import Design
from unionfonts.exceptions import FatalPreconditionError


class TestWeightFromInt:
    """Tests for weight_from_int."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (100, Weight.THIN),
            (200, Weight.ULTRA_LIGHT),
            (300, Weight.LIGHT),
            (400, Weight.REGULAR),
            (500, Weight.MEDIUM),
            (600, Weight.SEMIBOLD),
            (700, Weight.BOLD),
            (800, Weight.HEAVY),
            (900, Weight.BLACK),
        ],
    )
    def test_standard_weights(self, value, expected):
        assert weight_from_int(value) is expected

    def test_lightest_pair_order(self):
        """100 is thin and 200 is ultraLight."""
        assert weight_from_int(100) is Weight.THIN
        assert weight_from_int(200) is Weight.ULTRA_LIGHT

    @pytest.mark.parametrize("value", [0, 50, 150, 450, 1000, -100, 950])
    def test_unsupported_is_fatal(self, value):
        with pytest.raises(FatalPreconditionError, match=f"Unsupported weight {value}"):
            weight_from_int(value)

    @pytest.mark.parametrize("value", [700.0, "700", True, None])
    def test_non_integer_is_fatal(self, value):
        with pytest.raises(FatalPreconditionError):
            weight_from_int(value)  # type: ignore[arg-type]


class TestFontWithWeight:
    """Tests for Font.with_weight."""

    def test_numeric_weight(self):
        font = Font.system(16).with_weight(700)
        assert font == Font.system(16, Weight.BOLD)

    def test_named_weight(self):
        font = Font.system(16, design=Design.SERIF).with_weight(Weight.LIGHT)
        assert font.weight is Weight.LIGHT
        assert font.design is Design.SERIF

    def test_unsupported_is_fatal(self):
        with pytest.raises(FatalPreconditionError):
            Font.system(16).with_weight(750)

    def test_featured_font_is_rebuilt(self, recording_backend):
        """The native font follows the new weight."""
        set_backend(recording_backend)
        font = system_font(16, open_type_features={"liga": 1})

        heavier = font.with_weight(800)

        assert heavier.weight is Weight.HEAVY
        assert heavier.feature_map == {"liga": 1}
        assert heavier.native["weight"] == recording_backend.weights[Weight.HEAVY]
        assert heavier.backend == "recording"

    def test_rebuilt_through_producing_backend(self):
        """An explicit backend is reused even when another one is active."""
        producer = RecordingBackend()
        set_backend(FallbackBackend())
        font = system_font(16, design=Design.SERIF, open_type_features={"liga": 1}, backend=producer)

        heavier = font.with_weight(700)

        assert heavier.feature_map == {"liga": 1}
        assert heavier.backend == "recording"
        assert heavier.source is producer
        assert heavier.native["weight"] == producer.weights[Weight.BOLD]
        assert heavier.native["design"] == "native-serif"
        assert producer.call_names().count("system_font") == 2

    def test_plain_font_drops_native(self):
        font = Font(16, native=object(), backend="qt", source=FallbackBackend()).with_weight(900)
        assert font.weight is Weight.BLACK
        assert font.native is None
        assert font.source is None


class TestFontWeightModifier:
    """Tests for the font_weight view modifier."""

    def test_fallback_wraps_view(self):
        styled = font_weight("label", 700, backend=FallbackBackend())
        assert styled == StyledView(content="label", font_weight=Weight.BOLD)

    def test_fallback_rewraps_styled_view(self):
        backend = FallbackBackend()
        styled = font_weight(font_weight("label", 700, backend=backend), 300, backend=backend)
        assert styled == StyledView(content="label", font_weight=Weight.LIGHT)

    def test_uses_active_backend(self, recording_backend):
        set_backend(recording_backend)
        view = {"text": "Hello"}

        result = font_weight(view, 600)

        assert result is view
        assert view["weight"] == recording_backend.weights[Weight.SEMIBOLD]
        assert recording_backend.calls == [("apply_view_weight", Weight.SEMIBOLD)]

    def test_named_weight(self, recording_backend):
        font_weight({}, Weight.BLACK, backend=recording_backend)
        assert recording_backend.calls == [("apply_view_weight", Weight.BLACK)]

    def test_unsupported_is_fatal_before_backend(self, recording_backend):
        with pytest.raises(FatalPreconditionError):
            font_weight({}, 123, backend=recording_backend)
        assert recording_backend.calls == []
