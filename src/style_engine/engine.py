"""The style engine: compiles block style objects into CSS and class names."""

from __future__ import annotations

import html
import logging
from collections.abc import Mapping

from style_engine.model.definition import RuleKind, StyleDefinition, StyleSchema
from style_engine.model.result import CompilationResult, GenerateOptions
from style_engine.presets import get_slug_from_preset_value, is_preset_value
from style_engine.resolvers import CSSRule, resolve_css
from style_engine.sanitizer import CSSSanitizer
from style_engine.schema import BLOCK_STYLE_DEFINITIONS
from style_engine.templates import substitute

__all__ = ["StyleEngine", "generate", "get_style_engine", "get_style_value"]

logger = logging.getLogger(__name__)


def _is_empty(value: object) -> bool:
    return value is None or value is False or value == "" or (
        isinstance(value, (Mapping, list, tuple)) and not value
    )


def get_style_value(block_styles: Mapping, path: tuple[str, ...]) -> object:
    """Walk *path* through nested mappings; None if any step is missing."""
    current: object = block_styles
    for key in path:
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


class StyleEngine:
    """Generate inline CSS and class names from a block's style attribute.

    The engine holds only its read-only schema and sanitizer, so one
    instance can serve any number of concurrent callers.
    """

    def __init__(
        self,
        schema: StyleSchema | None = None,
        sanitizer: CSSSanitizer | None = None,
    ) -> None:
        self.schema = schema or BLOCK_STYLE_DEFINITIONS
        self.sanitizer = sanitizer or CSSSanitizer()

    def get_classnames(self, value: object, definition: StyleDefinition) -> list[str]:
        """Class names for *value*: fixed ones plus preset-derived ``$slug`` ones."""
        classnames: list[str] = []
        for pattern, property_key in definition.classnames.items():
            if property_key is True:
                classnames.append(pattern)
                continue
            if not isinstance(property_key, str):
                continue
            slug = get_slug_from_preset_value(value, property_key)
            if slug:
                classnames.append(substitute(pattern, slug=slug))
        return classnames

    def get_css(self, value: object, definition: StyleDefinition) -> list[CSSRule]:
        """CSS rules for *value*; plain preset references produce none."""
        if definition.kind is not RuleKind.SIDE_GROUP and is_preset_value(value):
            return []
        return resolve_css(value, definition, self.schema)

    def collect(self, block_styles: Mapping) -> tuple[list[CSSRule], list[str]]:
        """Gather raw CSS rules and class names in schema order."""
        css_rules: list[CSSRule] = []
        classnames: list[str] = []
        for category, definitions in self.schema:
            if _is_empty(block_styles.get(category)):
                continue
            for definition in definitions:
                value = get_style_value(block_styles, definition.path)
                if _is_empty(value):
                    continue
                classnames.extend(self.get_classnames(value, definition))
                css_rules.extend(self.get_css(value, definition))
        return css_rules, classnames

    def build_css(
        self, css_rules: list[CSSRule], options: GenerateOptions | None = None
    ) -> str:
        """Sanitize and join rules into declaration text.

        Inline declarations are HTML-escaped for a ``style`` attribute. With a
        selector the output targets a style tag, where entities are not
        decoded, so only the sanitizer applies.
        """
        selector = options.selector if options is not None else None
        output = ""
        for prop, value in css_rules:
            filtered = self.sanitizer.filter(f"{prop}: {value}")
            if filtered and selector is None:
                filtered = html.escape(filtered)
            if filtered:
                output += f"{filtered}; "
        css = output.strip()
        if css and selector:
            css = f"{selector} {{ {css} }}"
        return css

    def generate(
        self, block_styles: object, options: GenerateOptions | None = None
    ) -> CompilationResult | None:
        """Compile *block_styles* into a :class:`CompilationResult`.

        Returns None for an empty or non-mapping input. Unknown keys,
        malformed presets, and rejected declarations are silently omitted.
        """
        if not isinstance(block_styles, Mapping) or not block_styles:
            return None

        css_rules, classnames = self.collect(block_styles)
        css = self.build_css(css_rules, options)
        unique_classnames = list(dict.fromkeys(classnames))

        if not css and not unique_classnames:
            logger.debug("No styles generated for keys %s", sorted(map(str, block_styles)))

        return CompilationResult(
            css=css or None,
            classnames=" ".join(unique_classnames) or None,
        )


_DEFAULT_ENGINE = StyleEngine()


def get_style_engine() -> StyleEngine:
    """Return the process-wide default engine."""
    return _DEFAULT_ENGINE


def generate(
    block_styles: object, options: GenerateOptions | None = None
) -> CompilationResult | None:
    """Compile *block_styles* with the default engine."""
    return _DEFAULT_ENGINE.generate(block_styles, options)
