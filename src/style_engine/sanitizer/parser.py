"""Lark-based parser for single CSS declarations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from style_engine.errors import DeclarationError

__all__ = ["Declaration", "parse_declaration"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

_PARSER = Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="declaration")


@dataclass(frozen=True)
class Declaration:
    """A parsed declaration and the constructs its value uses.

    Attributes:
        property: Lowercased property name.
        value: Value text with surrounding whitespace and ``;`` removed.
        functions: Lowercased names of every function call, outermost first.
        urls: Targets of every ``url()`` token, unquoted.
    """

    property: str
    value: str
    functions: tuple[str, ...] = ()
    urls: tuple[str, ...] = ()

    def __str__(self) -> str:
        return f"{self.property}: {self.value}"


@dataclass(frozen=True)
class _Term:
    kind: str  # "function" or "url"
    value: str


def _flatten(items: list) -> list[_Term]:
    terms: list[_Term] = []
    for item in items:
        if isinstance(item, list):
            terms.extend(item)
        elif isinstance(item, _Term):
            terms.append(item)
    return terms


def _unquote(raw: str) -> str:
    raw = raw.strip()
    if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in "\"'":
        return raw[1:-1]
    return raw


class DeclarationTransformer(Transformer):
    """Collapse a declaration parse tree into its property and value terms."""

    def URL(self, token: Token) -> _Term:
        inner = token.value[token.value.index("(") + 1: token.value.rindex(")")]
        return _Term("url", _unquote(inner))

    def function(self, items: list) -> list[_Term]:
        name = str(items[0])[:-1].lower()
        return [_Term("function", name)] + _flatten(items[1:])

    def group(self, items: list) -> list[_Term]:
        return _flatten(items)

    def value(self, items: list) -> list[_Term]:
        return _flatten(items)

    def comma(self, items: list) -> list[_Term]:
        return []

    def slash(self, items: list) -> list[_Term]:
        return []

    def times(self, items: list) -> list[_Term]:
        return []

    def declaration(self, items: list) -> tuple[str, list[_Term]]:
        return str(items[0]).lower(), items[1]


def parse_declaration(text: str) -> Declaration:
    """Parse one ``property: value`` declaration.

    Raises :class:`DeclarationError` when *text* is not a single well-formed
    declaration made of allowed tokens.
    """
    try:
        tree = _PARSER.parse(text)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise DeclarationError(str(e), line=line, column=column) from e
    prop, terms = DeclarationTransformer().transform(tree)
    value = text.split(":", 1)[1].strip().removesuffix(";").rstrip()
    return Declaration(
        property=prop,
        value=value,
        functions=tuple(t.value for t in terms if t.kind == "function"),
        urls=tuple(t.value for t in terms if t.kind == "url"),
    )
