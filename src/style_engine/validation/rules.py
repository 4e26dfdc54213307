"""Lint rules for block style objects.

``generate()`` drops anything it cannot use without saying why. Each rule
here takes the style object and the engine that would compile it, and
returns Diagnostic objects explaining what would be dropped.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from style_engine.model.definition import RuleKind
from style_engine.model.diagnostic import Diagnostic, Severity
from style_engine.presets import get_slug_from_preset_value, is_preset_value
from style_engine.resolvers import format_scalar

if TYPE_CHECKING:
    from style_engine.engine import StyleEngine


BOX_SIDES = frozenset({"top", "right", "bottom", "left"})
BOX_CORNERS = frozenset({"topLeft", "topRight", "bottomLeft", "bottomRight"})


def _known_categories(block_styles: object, engine: StyleEngine):
    """Yield (category, value) for mapping categories known to the schema."""
    if not isinstance(block_styles, Mapping):
        return
    for category in engine.schema.categories():
        value = block_styles.get(category)
        if isinstance(value, Mapping) and value:
            yield category, value


def _defined_values(block_styles: object, engine: StyleEngine):
    """Yield (definition, value) for every non-empty value with a definition."""
    for category, group in _known_categories(block_styles, engine):
        for definition in engine.schema.definitions(category):
            value = group.get(definition.name)
            if value is None or value == "" or value == {}:
                continue
            yield definition, value


# ---------------------------------------------------------------------------
# Input shape (ERROR / INFO)
# ---------------------------------------------------------------------------


def check_is_mapping(block_styles: object, engine: StyleEngine) -> list[Diagnostic]:
    """The style attribute must be a non-empty mapping."""
    if not isinstance(block_styles, Mapping):
        return [
            Diagnostic(
                rule="check_is_mapping",
                severity=Severity.ERROR,
                message=f"Style object must be a mapping, got {type(block_styles).__name__}.",
                fix="Pass a JSON object such as {\"color\": {\"text\": \"#fff\"}}.",
            )
        ]
    if not block_styles:
        return [
            Diagnostic(
                rule="check_is_mapping",
                severity=Severity.INFO,
                message="Style object is empty; nothing will be generated.",
            )
        ]
    return []


# ---------------------------------------------------------------------------
# Unknown keys (WARNING)
# ---------------------------------------------------------------------------


def check_unknown_categories(block_styles: object, engine: StyleEngine) -> list[Diagnostic]:
    """Top-level keys must name a schema category."""
    if not isinstance(block_styles, Mapping):
        return []
    known = set(engine.schema.categories())
    return [
        Diagnostic(
            rule="check_unknown_categories",
            severity=Severity.WARNING,
            message=f"Unknown style category '{key}' is ignored.",
            path=(str(key),),
            fix=f"Use one of: {', '.join(engine.schema.categories())}.",
        )
        for key in block_styles
        if key not in known
    ]


def check_unknown_definitions(block_styles: object, engine: StyleEngine) -> list[Diagnostic]:
    """Keys inside a known category must have a style definition."""
    diagnostics: list[Diagnostic] = []
    for category, group in _known_categories(block_styles, engine):
        names = [d.name for d in engine.schema.definitions(category)]
        for key in group:
            if key not in names:
                diagnostics.append(
                    Diagnostic(
                        rule="check_unknown_definitions",
                        severity=Severity.WARNING,
                        message=f"No style definition for '{category}.{key}'; it is ignored.",
                        path=(category, str(key)),
                        fix=f"Known '{category}' keys: {', '.join(names)}.",
                    )
                )
    return diagnostics


# ---------------------------------------------------------------------------
# Value shapes (WARNING)
# ---------------------------------------------------------------------------


def check_value_shapes(block_styles: object, engine: StyleEngine) -> list[Diagnostic]:
    """Values must have the shape their definition's resolver expects."""
    diagnostics: list[Diagnostic] = []

    def warn(path: tuple[str, ...], message: str) -> None:
        diagnostics.append(
            Diagnostic(
                rule="check_value_shapes",
                severity=Severity.WARNING,
                message=message,
                path=path,
            )
        )

    for definition, value in _defined_values(block_styles, engine):
        label = ".".join(definition.path)
        if definition.kind is RuleKind.SIDE_GROUP:
            if not isinstance(value, Mapping):
                warn(definition.path, f"'{label}' expects a mapping of color/width/style.")
                continue
            for key in value:
                sibling = engine.schema.get((definition.category, str(key)))
                if sibling is None or sibling.sides_template is None:
                    warn(
                        definition.path + (str(key),),
                        f"'{key}' is not a side property of '{definition.category}'.",
                    )
            continue

        if isinstance(value, Mapping):
            if definition.kind is RuleKind.SIMPLE:
                warn(definition.path, f"'{label}' does not accept per-side values.")
                continue
            for key, side_value in value.items():
                if key not in BOX_SIDES and key not in BOX_CORNERS:
                    warn(definition.path + (str(key),), f"'{key}' is not a box side or corner.")
                elif side_value and format_scalar(side_value) is None:
                    warn(definition.path + (str(key),), f"'{label}.{key}' must be a string or number.")
            continue

        if format_scalar(value) is None:
            warn(definition.path, f"'{label}' must be a string or number, got {type(value).__name__}.")
    return diagnostics


# ---------------------------------------------------------------------------
# Presets (WARNING)
# ---------------------------------------------------------------------------


def check_preset_references(block_styles: object, engine: StyleEngine) -> list[Diagnostic]:
    """Preset references must resolve to a class name or CSS variable."""
    diagnostics: list[Diagnostic] = []
    for definition, value in _defined_values(block_styles, engine):
        if definition.kind is RuleKind.SIDE_GROUP:
            if not isinstance(value, Mapping):
                continue
            for key, sub_value in value.items():
                if not is_preset_value(sub_value):
                    continue
                if key in definition.css_vars and get_slug_from_preset_value(sub_value, key):
                    continue
                diagnostics.append(_unresolved_preset(definition.path + (str(key),), sub_value))
            continue

        if not is_preset_value(value):
            continue
        keys = [k for k in definition.classnames.values() if isinstance(k, str)]
        if not any(get_slug_from_preset_value(value, k) for k in keys):
            diagnostics.append(_unresolved_preset(definition.path, value))
    return diagnostics


def _unresolved_preset(path: tuple[str, ...], value: object) -> Diagnostic:
    return Diagnostic(
        rule="check_preset_references",
        severity=Severity.WARNING,
        message=f"Preset reference {value!r} does not resolve and produces no CSS.",
        path=path,
        fix="Use the form var:preset|<property>|<slug> with the property this style expects.",
    )


# ---------------------------------------------------------------------------
# Sanitizer (WARNING)
# ---------------------------------------------------------------------------


def check_sanitizer(block_styles: object, engine: StyleEngine) -> list[Diagnostic]:
    """Every generated declaration must pass the CSS sanitizer."""
    diagnostics: list[Diagnostic] = []
    for definition, value in _defined_values(block_styles, engine):
        for prop, css_value in engine.get_css(value, definition):
            declaration = f"{prop}: {css_value}"
            reason = engine.sanitizer.explain(declaration)
            if reason is None:
                continue
            diagnostics.append(
                Diagnostic(
                    rule="check_sanitizer",
                    severity=Severity.WARNING,
                    message=f"Declaration '{declaration}' is dropped: {reason}.",
                    path=definition.path,
                )
            )
    return diagnostics


ALL_RULES = [
    check_is_mapping,
    check_unknown_categories,
    check_unknown_definitions,
    check_value_shapes,
    check_preset_references,
    check_sanitizer,
]
