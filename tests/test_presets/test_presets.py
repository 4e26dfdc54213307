"""Tests for preset reference handling."""

import pytest

from style_engine.presets import get_slug_from_preset_value, is_preset_value, preset_css_var
from style_engine.schema import PRESET_CSS_VAR


class TestGetSlugFromPresetValue:
    def test_simple_slug(self):
        assert get_slug_from_preset_value("var:preset|color|texas-flood", "color") == "texas-flood"

    def test_camel_case_slug(self):
        assert get_slug_from_preset_value("var:preset|color|heavenlyBlue", "color") == "heavenly-blue"

    def test_property_key_must_match(self):
        assert get_slug_from_preset_value("var:preset|background-color|red", "color") is None

    def test_property_key_is_not_a_prefix_match(self):
        assert get_slug_from_preset_value("var:preset|background-color|red", "background") is None

    def test_wrong_namespace(self):
        assert get_slug_from_preset_value("var:cheese|color|fantastic", "color") is None

    def test_slug_is_after_last_pipe(self):
        assert get_slug_from_preset_value("var:preset|color|a|b", "color") == "b"

    def test_empty_slug(self):
        assert get_slug_from_preset_value("var:preset|color|", "color") is None

    @pytest.mark.parametrize("value", [None, 42, {"top": "var:preset|color|red"}, ["x"]])
    def test_non_string(self, value):
        assert get_slug_from_preset_value(value, "color") is None


class TestIsPresetValue:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("var:preset|color|red", True),
            ("var:cheese|color|red", True),
            ("var(--x)", False),
            ("#fff", False),
            (None, False),
            ({"var:": "x"}, False),
        ],
    )
    def test_detection(self, value, expected):
        assert is_preset_value(value) is expected


class TestPresetCssVar:
    def test_renders_custom_property_reference(self):
        assert preset_css_var(PRESET_CSS_VAR, property="color", slug="swampy-yellow") == (
            "var(--wp--preset--color--swampy-yellow)"
        )
