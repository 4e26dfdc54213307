"""Static style definitions for block style attributes.

The table is built once at import time and never mutated. Category order
(color, border, spacing, typography) and definition order within each
category determine the order of generated declarations and class names.
"""

from __future__ import annotations

from style_engine.model.definition import RuleKind, StyleDefinition, StyleSchema

__all__ = ["BLOCK_STYLE_DEFINITIONS", "PRESET_CSS_VAR"]

PRESET_CSS_VAR = "--wp--preset--$property--$slug"


def _simple(category: str, name: str, prop: str, **kwargs) -> StyleDefinition:
    return StyleDefinition(
        path=(category, name),
        kind=RuleKind.SIMPLE,
        properties={"default": prop},
        **kwargs,
    )


def _box(category: str, name: str, prop: str, sides: str, **kwargs) -> StyleDefinition:
    return StyleDefinition(
        path=(category, name),
        kind=RuleKind.BOX,
        properties={"default": prop, "sides": sides},
        **kwargs,
    )


def _border_side(side: str) -> StyleDefinition:
    return StyleDefinition(
        path=("border", side),
        kind=RuleKind.SIDE_GROUP,
        css_vars={"color": PRESET_CSS_VAR},
    )


BLOCK_STYLE_DEFINITIONS = StyleSchema(
    groups={
        "color": (
            _simple(
                "color", "text", "color",
                classnames={"has-text-color": True, "has-$slug-color": "color"},
            ),
            _simple(
                "color", "background", "background-color",
                classnames={
                    "has-background": True,
                    "has-$slug-background-color": "background-color",
                },
            ),
            _simple(
                "color", "gradient", "background",
                classnames={
                    "has-background": True,
                    "has-$slug-gradient-background": "background",
                },
            ),
        ),
        "border": (
            _box(
                "border", "color", "border-color", "border-$side-color",
                classnames={
                    "has-border-color": True,
                    "has-$slug-border-color": "border-color",
                },
            ),
            _box("border", "radius", "border-radius", "border-$side-radius"),
            _box("border", "style", "border-style", "border-$side-style"),
            _box("border", "width", "border-width", "border-$side-width"),
            _border_side("top"),
            _border_side("right"),
            _border_side("bottom"),
            _border_side("left"),
        ),
        "spacing": (
            _box("spacing", "padding", "padding", "padding-$side"),
            _box("spacing", "margin", "margin", "margin-$side"),
        ),
        "typography": (
            _simple(
                "typography", "fontSize", "font-size",
                classnames={"has-$slug-font-size": "font-size"},
            ),
            _simple(
                "typography", "fontFamily", "font-family",
                classnames={"has-$slug-font-family": "font-family"},
            ),
            _simple("typography", "fontStyle", "font-style"),
            _simple("typography", "fontWeight", "font-weight"),
            _simple("typography", "lineHeight", "line-height"),
            _simple("typography", "textDecoration", "text-decoration"),
            _simple("typography", "textTransform", "text-transform"),
            _simple("typography", "letterSpacing", "letter-spacing"),
        ),
    }
)
