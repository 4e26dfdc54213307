"""Tests for style definitions and the static schema table."""

import pytest

from style_engine.errors import SchemaError
from style_engine.model.definition import RuleKind, StyleDefinition, StyleSchema
from style_engine.schema import BLOCK_STYLE_DEFINITIONS


# ---------------------------------------------------------------------------
# StyleDefinition
# ---------------------------------------------------------------------------


class TestStyleDefinition:
    def test_category_and_name(self):
        d = StyleDefinition(path=("color", "text"), kind=RuleKind.SIMPLE, properties={"default": "color"})
        assert d.category == "color"
        assert d.name == "text"
        assert d.sides_template is None

    def test_is_frozen(self):
        d = StyleDefinition(path=("color", "text"), kind=RuleKind.SIMPLE, properties={"default": "color"})
        with pytest.raises(AttributeError):
            d.kind = RuleKind.BOX  # type: ignore[misc]

    def test_mappings_are_copied(self):
        properties = {"default": "color"}
        d = StyleDefinition(path=("color", "text"), kind=RuleKind.SIMPLE, properties=properties)
        properties["default"] = "background-color"
        assert d.properties["default"] == "color"

    @pytest.mark.parametrize("path", [("color",), ("a", "b", "c"), ("color", "")])
    def test_path_must_have_two_keys(self, path):
        with pytest.raises(SchemaError):
            StyleDefinition(path=path, kind=RuleKind.SIMPLE, properties={"default": "color"})

    def test_simple_requires_default(self):
        with pytest.raises(SchemaError, match="default property"):
            StyleDefinition(path=("color", "text"), kind=RuleKind.SIMPLE)

    def test_box_requires_side_template(self):
        with pytest.raises(SchemaError, match=r"\$side"):
            StyleDefinition(
                path=("spacing", "padding"),
                kind=RuleKind.BOX,
                properties={"default": "padding", "sides": "padding-top"},
            )

    def test_side_group_rejects_properties(self):
        with pytest.raises(SchemaError):
            StyleDefinition(
                path=("border", "top"),
                kind=RuleKind.SIDE_GROUP,
                properties={"default": "border-top"},
            )

    def test_to_dict(self):
        d = BLOCK_STYLE_DEFINITIONS.get(("border", "top"))
        assert d.to_dict() == {
            "path": ["border", "top"],
            "kind": "side_group",
            "css_vars": {"color": "--wp--preset--$property--$slug"},
        }


# ---------------------------------------------------------------------------
# StyleSchema
# ---------------------------------------------------------------------------


def _def(category: str, name: str) -> StyleDefinition:
    return StyleDefinition(path=(category, name), kind=RuleKind.SIMPLE, properties={"default": name})


class TestStyleSchema:
    def test_duplicate_path_rejected(self):
        with pytest.raises(SchemaError, match="Duplicate"):
            StyleSchema(groups={"color": (_def("color", "text"), _def("color", "text"))})

    def test_definition_in_wrong_category_rejected(self):
        with pytest.raises(SchemaError):
            StyleSchema(groups={"color": (_def("spacing", "margin"),)})

    def test_get_missing(self):
        assert BLOCK_STYLE_DEFINITIONS.get(("spacing", "gap")) is None
        assert BLOCK_STYLE_DEFINITIONS.get(("nope", "text")) is None
        assert BLOCK_STYLE_DEFINITIONS.get(("color",)) is None

    def test_definitions_for_unknown_category(self):
        assert BLOCK_STYLE_DEFINITIONS.definitions("pageBreakAfter") == ()


class TestBlockStyleDefinitions:
    def test_category_order(self):
        assert BLOCK_STYLE_DEFINITIONS.categories() == ["color", "border", "spacing", "typography"]

    def test_border_order(self):
        names = [d.name for d in BLOCK_STYLE_DEFINITIONS.definitions("border")]
        assert names == ["color", "radius", "style", "width", "top", "right", "bottom", "left"]

    def test_paths_unique(self):
        paths = [d.path for _, group in BLOCK_STYLE_DEFINITIONS for d in group]
        assert len(paths) == len(set(paths))

    def test_border_sides_are_side_groups(self):
        for side in ("top", "right", "bottom", "left"):
            definition = BLOCK_STYLE_DEFINITIONS.get(("border", side))
            assert definition.kind is RuleKind.SIDE_GROUP
            assert definition.css_vars == {"color": "--wp--preset--$property--$slug"}

    def test_border_siblings_have_side_templates(self):
        for name in ("color", "width", "style"):
            definition = BLOCK_STYLE_DEFINITIONS.get(("border", name))
            assert definition.sides_template == f"border-$side-{name}"

    def test_text_color_classnames(self):
        definition = BLOCK_STYLE_DEFINITIONS.get(("color", "text"))
        assert definition.classnames == {"has-text-color": True, "has-$slug-color": "color"}

    def test_groups_cannot_be_mutated(self):
        with pytest.raises(TypeError):
            BLOCK_STYLE_DEFINITIONS.groups["spacing"] = ()  # type: ignore[index]

    @pytest.mark.parametrize("field_name", ["properties", "classnames"])
    def test_definition_mappings_cannot_be_mutated(self, field_name):
        definition = BLOCK_STYLE_DEFINITIONS.get(("color", "text"))
        with pytest.raises(TypeError):
            getattr(definition, field_name)["injected"] = True

    def test_side_group_css_vars_cannot_be_mutated(self):
        definition = BLOCK_STYLE_DEFINITIONS.get(("border", "top"))
        with pytest.raises(TypeError):
            definition.css_vars["width"] = "--x"  # type: ignore[index]

    def test_to_dict_lists_all_categories(self):
        data = BLOCK_STYLE_DEFINITIONS.to_dict()
        assert list(data) == ["color", "border", "spacing", "typography"]
        assert len(data["typography"]) == 8
