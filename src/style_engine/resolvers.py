"""Resolvers that turn one raw style value into ordered CSS rules.

Each resolver returns a list of ``(property, value)`` pairs. Duplicate
properties are kept; merging is never implicit.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable

from style_engine.model.definition import RuleKind, StyleDefinition, StyleSchema
from style_engine.presets import get_slug_from_preset_value, preset_css_var
from style_engine.templates import substitute, to_kebab_case

__all__ = ["CSSRule", "format_scalar", "get_css_rules", "get_css_side_rules", "resolve_css"]

CSSRule = tuple[str, str]


def format_scalar(value: object) -> str | None:
    """Render a scalar style value as CSS text, or None if it has no CSS form."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return None


def get_css_rules(value: object, definition: StyleDefinition) -> list[CSSRule]:
    """Default resolver: one rule for a scalar, one per side for a box mapping."""
    if value is None or value == "":
        return []

    if isinstance(value, Mapping):
        template = definition.sides_template
        if definition.kind is not RuleKind.BOX or template is None:
            return []
        rules: list[CSSRule] = []
        for side, side_value in value.items():
            text = format_scalar(side_value)
            if not text:
                continue
            rules.append((substitute(template, side=to_kebab_case(str(side))), text))
        return rules

    text = format_scalar(value)
    if text is None:
        return []
    return [(definition.properties["default"], text)]


def get_css_side_rules(
    value: object, definition: StyleDefinition, schema: StyleSchema
) -> list[CSSRule]:
    """Resolve a side group such as ``border.top = {color, width, style}``.

    Each sub-property borrows the ``sides`` template of its sibling definition
    (``border.color`` -> ``border-$side-color``). Preset colors become CSS
    custom property references. Rules follow the key order of *value*.
    """
    if not isinstance(value, Mapping) or not value:
        return []

    category, side = definition.path
    rules: list[CSSRule] = []
    for sub_property, sub_value in value.items():
        if sub_value is None or sub_value == "":
            continue
        sibling = schema.get((category, str(sub_property)))
        if sibling is None or sibling.sides_template is None:
            continue
        prop = substitute(sibling.sides_template, side=side)

        text = format_scalar(sub_value)
        template = definition.css_vars.get(sub_property)
        if template is not None:
            slug = get_slug_from_preset_value(sub_value, sub_property)
            if slug:
                text = preset_css_var(template, property=sub_property, slug=slug)
        if text is None:
            continue
        rules.append((prop, text))
    return rules


Resolver = Callable[[object, StyleDefinition, StyleSchema], list[CSSRule]]

_RESOLVERS: dict[RuleKind, Resolver] = {
    RuleKind.SIMPLE: lambda value, definition, schema: get_css_rules(value, definition),
    RuleKind.BOX: lambda value, definition, schema: get_css_rules(value, definition),
    RuleKind.SIDE_GROUP: get_css_side_rules,
}


def resolve_css(
    value: object, definition: StyleDefinition, schema: StyleSchema
) -> list[CSSRule]:
    """Dispatch *value* to the resolver for ``definition.kind``."""
    return _RESOLVERS[definition.kind](value, definition, schema)
