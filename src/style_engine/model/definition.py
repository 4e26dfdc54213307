"""Style definition model: RuleKind, StyleDefinition, and StyleSchema."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Iterator, Mapping

from style_engine.errors import SchemaError


class RuleKind(StrEnum):
    """How a definition turns a raw style value into CSS rules.

    simple:     scalar value -> one rule using the ``default`` property.
    box:        scalar value -> ``default`` rule; mapping -> one rule per side.
    side_group: mapping of sub-properties (color/width/style) for one side.
    """

    SIMPLE = "simple"
    BOX = "box"
    SIDE_GROUP = "side_group"


@dataclass(frozen=True)
class StyleDefinition:
    """A single schema entry mapping a style attribute path to CSS.

    Attributes:
        path: Keys locating the raw value in the style object, e.g.
            ``("spacing", "padding")``.
        kind: The resolver used to produce CSS rules.
        properties: ``default`` CSS property and, for box rules, a ``sides``
            template containing ``$side``.
        classnames: Classname template -> ``True`` (always emitted) or the
            preset property key whose slug fills ``$slug``.
        css_vars: Sub-property -> custom property template with ``$property``
            and ``$slug`` placeholders (side groups only).
    """

    path: tuple[str, str]
    kind: RuleKind
    properties: Mapping[str, str] = field(default_factory=dict)
    classnames: Mapping[str, str | bool] = field(default_factory=dict)
    css_vars: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("properties", "classnames", "css_vars"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        object.__setattr__(self, "path", tuple(self.path))
        if len(self.path) != 2 or not all(self.path):
            raise SchemaError(f"Definition path must have two keys, got {self.path!r}")
        label = ".".join(self.path)
        if self.kind is RuleKind.SIDE_GROUP:
            if self.properties:
                raise SchemaError(f"Side group {label} must not declare properties")
            return
        if not self.properties.get("default"):
            raise SchemaError(f"Definition {label} requires a default property")
        if self.kind is RuleKind.BOX and "$side" not in self.properties.get("sides", ""):
            raise SchemaError(f"Box definition {label} requires a $side template")

    @property
    def category(self) -> str:
        return self.path[0]

    @property
    def name(self) -> str:
        return self.path[1]

    @property
    def sides_template(self) -> str | None:
        return self.properties.get("sides")

    def to_dict(self) -> dict[str, object]:
        data: dict[str, object] = {"path": list(self.path), "kind": self.kind.value}
        if self.properties:
            data["properties"] = dict(self.properties)
        if self.classnames:
            data["classnames"] = dict(self.classnames)
        if self.css_vars:
            data["css_vars"] = dict(self.css_vars)
        return data


@dataclass(frozen=True)
class StyleSchema:
    """An ordered, immutable table of style definitions grouped by category."""

    groups: Mapping[str, tuple[StyleDefinition, ...]]

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "groups",
            MappingProxyType({k: tuple(v) for k, v in self.groups.items()}),
        )
        seen: set[tuple[str, str]] = set()
        for category, definitions in self.groups.items():
            for definition in definitions:
                if definition.category != category:
                    raise SchemaError(
                        f"Definition {'.'.join(definition.path)} filed under '{category}'"
                    )
                if definition.path in seen:
                    raise SchemaError(f"Duplicate definition path {definition.path!r}")
                seen.add(definition.path)

    def __iter__(self) -> Iterator[tuple[str, tuple[StyleDefinition, ...]]]:
        return iter(self.groups.items())

    def categories(self) -> list[str]:
        return list(self.groups)

    def definitions(self, category: str) -> tuple[StyleDefinition, ...]:
        return self.groups.get(category, ())

    def get(self, path: tuple[str, ...] | list[str]) -> StyleDefinition | None:
        """Return the definition at *path*, or None if there is none."""
        if len(path) != 2:
            return None
        for definition in self.definitions(path[0]):
            if definition.name == path[1]:
                return definition
        return None

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        return {
            category: [d.to_dict() for d in definitions]
            for category, definitions in self.groups.items()
        }
