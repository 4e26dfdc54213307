"""Style object linter: runs all lint rules and reports diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from style_engine.model.diagnostic import Diagnostic
from style_engine.validation.rules import ALL_RULES

if TYPE_CHECKING:
    from style_engine.engine import StyleEngine


class ValidationError(Exception):
    """Raised when linting produces ERROR-severity diagnostics."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [str(d) for d in diagnostics if d.is_error]
        super().__init__(
            f"Validation failed with {len(messages)} error(s): " + "; ".join(messages)
        )


RuleFunc = Callable[[object, "StyleEngine"], list[Diagnostic]]


def validate(
    block_styles: object,
    engine: StyleEngine | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run all lint rules against *block_styles*.

    Returns the full list of diagnostics (errors, warnings, info).
    """
    if engine is None:
        from style_engine.engine import get_style_engine

        engine = get_style_engine()
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(block_styles, engine))
    return diagnostics


def validate_or_raise(
    block_styles: object,
    engine: StyleEngine | None = None,
    extra_rules: list[RuleFunc] | None = None,
) -> list[Diagnostic]:
    """Run linting; raises :class:`ValidationError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings/info) when no errors are found.
    """
    diagnostics = validate(block_styles, engine=engine, extra_rules=extra_rules)
    errors = [d for d in diagnostics if d.is_error]
    if errors:
        raise ValidationError(errors)
    return diagnostics
