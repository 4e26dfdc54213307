"""Allow-list policy applied by the CSS sanitizer."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SanitizerPolicy"]

SAFE_STYLE_PROPERTIES = frozenset({
    "background",
    "background-color",
    "background-image",
    "background-position",
    "background-size",
    "background-attachment",
    "background-blend-mode",
    "border",
    "border-radius",
    "border-width",
    "border-color",
    "border-style",
    "border-right",
    "border-right-color",
    "border-right-style",
    "border-right-width",
    "border-bottom",
    "border-bottom-color",
    "border-bottom-style",
    "border-bottom-width",
    "border-left",
    "border-left-color",
    "border-left-style",
    "border-left-width",
    "border-top",
    "border-top-color",
    "border-top-style",
    "border-top-width",
    "border-top-left-radius",
    "border-top-right-radius",
    "border-bottom-left-radius",
    "border-bottom-right-radius",
    "border-spacing",
    "border-collapse",
    "caption-side",
    "columns",
    "column-count",
    "column-fill",
    "column-gap",
    "column-rule",
    "column-span",
    "column-width",
    "color",
    "filter",
    "font",
    "font-family",
    "font-size",
    "font-style",
    "font-variant",
    "font-weight",
    "letter-spacing",
    "line-height",
    "text-align",
    "text-decoration",
    "text-indent",
    "text-transform",
    "height",
    "min-height",
    "max-height",
    "width",
    "min-width",
    "max-width",
    "margin",
    "margin-right",
    "margin-bottom",
    "margin-left",
    "margin-top",
    "padding",
    "padding-right",
    "padding-bottom",
    "padding-left",
    "padding-top",
    "flex",
    "flex-basis",
    "flex-direction",
    "flex-flow",
    "flex-grow",
    "flex-shrink",
    "gap",
    "row-gap",
    "grid-template-columns",
    "grid-auto-columns",
    "grid-column-start",
    "grid-column-end",
    "grid-column-gap",
    "grid-template-rows",
    "grid-auto-rows",
    "grid-row-start",
    "grid-row-end",
    "grid-row-gap",
    "grid-gap",
    "justify-content",
    "justify-items",
    "justify-self",
    "align-content",
    "align-items",
    "align-self",
    "clear",
    "cursor",
    "direction",
    "float",
    "list-style-type",
    "object-position",
    "overflow",
    "vertical-align",
})

# Properties whose values may contain url() references.
URL_PROPERTIES = frozenset({
    "background",
    "background-image",
    "cursor",
})

# Properties whose values may contain gradient functions.
GRADIENT_PROPERTIES = frozenset({"background", "background-image"})

SAFE_FUNCTIONS = frozenset({"calc", "var", "rgb", "rgba", "hsl", "hsla"})

GRADIENT_FUNCTIONS = frozenset({
    "linear-gradient",
    "radial-gradient",
    "repeating-linear-gradient",
    "repeating-radial-gradient",
})


@dataclass(frozen=True)
class SanitizerPolicy:
    """Which properties, functions, and URL schemes a declaration may use."""

    allowed_properties: frozenset[str] = SAFE_STYLE_PROPERTIES
    url_properties: frozenset[str] = URL_PROPERTIES
    gradient_properties: frozenset[str] = GRADIENT_PROPERTIES
    allowed_functions: frozenset[str] = SAFE_FUNCTIONS
    gradient_functions: frozenset[str] = GRADIENT_FUNCTIONS
    allowed_protocols: frozenset[str] = frozenset({"http", "https"})

    def allows_property(self, prop: str) -> bool:
        return prop in self.allowed_properties
