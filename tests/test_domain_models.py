"""Tests for domain models to verify they work correctly."""

from dataclasses import FrozenInstanceError

import pytest

from unionfonts.domain import (
    Design,
    FeatureSetting,
    Font,
    StyledView,
    Weight,
    feature_settings,
    flags_to_values,
)


class TestEnums:
    """Tests for Weight and Design."""

    def test_weight_members(self) -> None:
        """Test the nine named weights."""
        assert [w.value for w in Weight] == [
            "ultraLight",
            "thin",
            "light",
            "regular",
            "medium",
            "semibold",
            "bold",
            "heavy",
            "black",
        ]

    def test_design_members(self) -> None:
        """Test the four named designs."""
        assert {d.value for d in Design} == {"default", "serif", "rounded", "monospaced"}

    def test_lookup_by_value(self) -> None:
        assert Weight("semibold") is Weight.SEMIBOLD
        assert Design("rounded") is Design.ROUNDED


class TestFeatureSetting:
    """Tests for FeatureSetting and feature map conversion."""

    def test_to_dict(self) -> None:
        assert FeatureSetting("liga", 1).to_dict() == {"tag": "liga", "value": 1}

    def test_settings_sorted_by_tag(self) -> None:
        """Insertion order of the map does not matter."""
        a = feature_settings({"zero": 0, "cv09": 1, "liga": 1})
        b = feature_settings({"liga": 1, "zero": 0, "cv09": 1})
        assert a == b
        assert [s.tag for s in a] == ["cv09", "liga", "zero"]

    def test_multi_valued_feature(self) -> None:
        assert feature_settings({"salt": 3}) == (FeatureSetting("salt", 3),)

    def test_flags_to_values(self) -> None:
        assert flags_to_values({"liga": True, "zero": False}) == {"liga": 1, "zero": 0}

    def test_setting_immutable(self) -> None:
        setting = FeatureSetting("kern", 1)
        with pytest.raises(FrozenInstanceError):
            setting.value = 0  # type: ignore


class TestFont:
    """Tests for the Font value."""

    def test_system_defaults(self) -> None:
        """Test default weight and design."""
        font = Font.system(16)
        assert font.size == 16
        assert font.weight is Weight.REGULAR
        assert font.design is Design.DEFAULT
        assert font.features == ()
        assert font.native is None
        assert font.backend is None

    def test_equality_ignores_native(self) -> None:
        """Native handle and backend name are not part of equality."""
        settings = feature_settings({"liga": 1})
        a = Font(16, Weight.BOLD, Design.SERIF, settings, native=object(), backend="qt")
        b = Font(16, Weight.BOLD, Design.SERIF, settings)
        assert a == b

    def test_features_part_of_equality(self) -> None:
        plain = Font.system(16)
        featured = Font(16, features=feature_settings({"liga": 1}))
        assert plain != featured

    def test_feature_map(self) -> None:
        font = Font(12, features=feature_settings({"ss01": 1, "kern": 0}))
        assert font.feature_map == {"kern": 0, "ss01": 1}

    def test_font_immutable(self) -> None:
        font = Font.system(16)
        with pytest.raises(FrozenInstanceError):
            font.size = 12  # type: ignore

    def test_to_dict(self) -> None:
        font = Font(14, Weight.LIGHT, Design.ROUNDED, feature_settings({"cv10": 1}), backend="qt")
        assert font.to_dict() == {
            "size": 14,
            "weight": "light",
            "design": "rounded",
            "features": [{"tag": "cv10", "value": 1}],
            "backend": "qt",
        }

    def test_hashable(self) -> None:
        """Fonts can be used as cache keys."""
        assert len({Font.system(16), Font.system(16), Font.system(17)}) == 2


class TestStyledView:
    """Tests for StyledView."""

    def test_wraps_content(self) -> None:
        view = StyledView(content="label", font_weight=Weight.BOLD)
        assert view.content == "label"
        assert view.font_weight is Weight.BOLD
