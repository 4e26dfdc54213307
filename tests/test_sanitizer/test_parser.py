"""Tests for the CSS declaration parser."""

import pytest

from style_engine.errors import DeclarationError
from style_engine.sanitizer import Declaration, parse_declaration


class TestParseDeclaration:
    def test_simple(self):
        d = parse_declaration("color: #fff")
        assert d == Declaration(property="color", value="#fff")

    def test_property_lowercased(self):
        assert parse_declaration("COLOR: red").property == "color"

    def test_trailing_semicolon_and_whitespace(self):
        d = parse_declaration("  margin :  1px 2px ;  ")
        assert d.property == "margin"
        assert d.value == "1px 2px"
        assert str(d) == "margin: 1px 2px"

    def test_font_list_with_strings(self):
        d = parse_declaration("font-family: \"Open Sans\", 'Noto', sans-serif")
        assert d.value == "\"Open Sans\", 'Noto', sans-serif"
        assert d.functions == ()

    def test_functions_collected_outermost_first(self):
        d = parse_declaration("background: linear-gradient(90deg, rgba(0, 0, 0, 0.5) 0%, var(--x) 100%)")
        assert d.functions == ("linear-gradient", "rgba", "var")

    def test_function_names_lowercased(self):
        assert parse_declaration("width: CALC(100% - 2px)").functions == ("calc",)

    def test_nested_group(self):
        d = parse_declaration("width: calc((100% - 2px) * 2)")
        assert d.functions == ("calc",)

    def test_url_unquoted(self):
        d = parse_declaration("background-image: url(https://example.com/a.png)")
        assert d.urls == ("https://example.com/a.png",)

    def test_url_quoted(self):
        d = parse_declaration("background-image: url( 'img/a b.png' )")
        assert d.urls == ("img/a b.png",)

    def test_slash_and_important(self):
        d = parse_declaration("font: 12px/1.5 serif !important")
        assert d.value == "12px/1.5 serif !important"

    def test_preset_var_style(self):
        d = parse_declaration("border-left-color: var(--wp--preset--color--swampy-yellow)")
        assert d.functions == ("var",)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "color",
            "color:",
            "color: ",
            ": red",
            "color: red; width: 1px",
            "color: red }",
            "color: expression(alert(1)",
            "width: 1px & 2px",
            "a=b: c",
            "color: @red",
            "color: \\72 ed",
            "color: <b>",
            "color: var:preset|color|red",
            "font-family: \"unterminated",
            "width: (1px",
        ],
    )
    def test_invalid(self, text):
        with pytest.raises(DeclarationError):
            parse_declaration(text)

    def test_error_carries_position(self):
        with pytest.raises(DeclarationError) as info:
            parse_declaration("color: red & blue")
        assert info.value.column is not None
