"""Preset reference handling: ``var:preset|<property>|<slug>`` values."""

from __future__ import annotations

from style_engine.templates import substitute, to_kebab_case

__all__ = ["get_slug_from_preset_value", "is_preset_value", "preset_css_var"]

PRESET_MARKER = "var:"


def is_preset_value(value: object) -> bool:
    """Return True for string values that reference a preset in any form."""
    return isinstance(value, str) and PRESET_MARKER in value


def get_slug_from_preset_value(value: object, property_key: str) -> str | None:
    """Extract the kebab-case slug from a preset reference.

    ``get_slug_from_preset_value("var:preset|color|heavenlyBlue", "color")``
    returns ``"heavenly-blue"``. Returns None when *value* is not a string or
    does not reference a preset for *property_key*.
    """
    if not isinstance(value, str) or f"var:preset|{property_key}|" not in value:
        return None
    slug = to_kebab_case(value[value.rindex("|") + 1:])
    return slug or None


def preset_css_var(template: str, property: str, slug: str) -> str:
    """Render a CSS custom property reference, e.g. ``var(--wp--preset--color--red)``."""
    return f"var({substitute(template, property=property, slug=slug)})"
