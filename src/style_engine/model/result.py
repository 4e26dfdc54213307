"""Compilation output and per-call options."""

from __future__ import annotations

from dataclasses import dataclass

# Characters that would let a selector escape its rule block or the markup.
_SELECTOR_FORBIDDEN = frozenset("{};<>")


@dataclass(frozen=True)
class CompilationResult:
    """CSS declarations and class names generated from one style object.

    Either field is None when nothing contributed to it.
    """

    css: str | None = None
    classnames: str | None = None

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {}
        if self.css:
            data["css"] = self.css
        if self.classnames:
            data["classnames"] = self.classnames
        return data


@dataclass(frozen=True)
class GenerateOptions:
    """Options for a single ``generate()`` call.

    When ``selector`` is set, the css output is a complete rule
    (``.selector { color: red; }``) suitable for a style tag instead of
    bare declarations for a ``style`` attribute.
    """

    selector: str | None = None

    def __post_init__(self) -> None:
        if self.selector is None:
            return
        if not self.selector.strip():
            raise ValueError("selector must not be blank")
        bad = _SELECTOR_FORBIDDEN.intersection(self.selector)
        if bad:
            raise ValueError(f"selector contains forbidden characters: {''.join(sorted(bad))}")
