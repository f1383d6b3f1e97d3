"""Unit tests for the canonical design model."""

import pytest
from pydantic import ValidationError

from design_export.model import (
    CanonicalDesign,
    Component,
    DesignTokens,
    ExportFormat,
    ExportResult,
    UnknownFormatError,
)


class TestExportFormat:
    """Tests for the ExportFormat enum."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fmt, extension, content_type",
        [
            (ExportFormat.FRAMER, "json", "application/json"),
            (ExportFormat.FIGMA, "json", "application/json"),
            (ExportFormat.WEBFLOW, "json", "application/json"),
            (ExportFormat.HTML, "html", "text/html"),
        ],
    )
    def test_extension_and_mime(self, fmt, extension, content_type):
        assert fmt.file_extension == extension
        assert fmt.content_type == content_type

    @pytest.mark.unit
    def test_parse_accepts_strings_and_members(self):
        assert ExportFormat.parse("figma") is ExportFormat.FIGMA
        assert ExportFormat.parse(" HTML ") is ExportFormat.HTML
        assert ExportFormat.parse(ExportFormat.WEBFLOW) is ExportFormat.WEBFLOW

    @pytest.mark.unit
    def test_parse_unknown_raises(self):
        with pytest.raises(UnknownFormatError, match="sketch") as exc_info:
            ExportFormat.parse("sketch")
        assert "framer" in str(exc_info.value)
        assert isinstance(exc_info.value, ValueError)


class TestComponent:
    """Tests for Component validation."""

    @pytest.mark.unit
    def test_accepts_wire_aliases(self, hero_component):
        component = Component.model_validate(hero_component)
        assert component.bg_color == "#3B82F6"
        assert component.text_color == "#FFFFFF"

    @pytest.mark.unit
    def test_accepts_python_names(self):
        component = Component(id="c1", type="hero", bg_color="#000000")
        assert component.bg_color == "#000000"

    @pytest.mark.unit
    def test_defaults(self):
        component = Component(id="c1", type="hero")
        assert component.title == ""
        assert component.width == 100
        assert component.height == 400
        assert component.properties == {}

    @pytest.mark.unit
    def test_nulls_are_defaulted(self):
        component = Component.model_validate(
            {
                "id": "c1",
                "type": "hero",
                "title": None,
                "bgColor": None,
                "properties": None,
            }
        )
        assert component.title == ""
        assert component.bg_color == "#FFFFFF"
        assert component.properties == {}

    @pytest.mark.unit
    def test_numeric_id_is_stringified(self):
        assert Component.model_validate({"id": 7, "type": "cta"}).id == "7"

    @pytest.mark.unit
    def test_integer_geometry_stays_integer(self):
        component = Component(id="c1", type="hero", width=50, height=300)
        assert isinstance(component.width, int)
        assert Component(id="c1", type="hero", x=12.5).x == 12.5

    @pytest.mark.unit
    def test_missing_type_is_rejected(self):
        with pytest.raises(ValidationError):
            Component.model_validate({"id": "c1"})

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_geometry_is_rejected(self, value):
        with pytest.raises(ValidationError):
            Component.model_validate({"id": "c1", "type": "hero", "width": value})

    @pytest.mark.unit
    def test_is_frozen(self):
        component = Component(id="c1", type="hero")
        with pytest.raises(ValidationError):
            component.title = "changed"


class TestDesignTokens:
    """Tests for DesignTokens defaulting."""

    @pytest.mark.unit
    def test_missing_groups_default_to_empty(self):
        tokens = DesignTokens.model_validate({})
        assert tokens.colors == {}
        assert tokens.typography == {}
        assert tokens.spacing == {}

    @pytest.mark.unit
    def test_null_group_defaults_to_empty(self):
        tokens = DesignTokens.model_validate({"colors": None})
        assert tokens.colors == {}

    @pytest.mark.unit
    def test_extra_groups_are_kept(self):
        tokens = DesignTokens.model_validate({"shadows": {"sm": "0 1px 2px"}})
        groups = tokens.groups()
        assert list(groups) == ["colors", "typography", "spacing", "shadows"]
        assert groups["shadows"] == {"sm": "0 1px 2px"}

    @pytest.mark.unit
    def test_color_order_is_preserved(self, design_tokens):
        tokens = DesignTokens.model_validate(design_tokens)
        assert list(tokens.colors) == ["primary", "secondary", "accent"]


class TestCanonicalDesign:
    """Tests for the read-only design view."""

    @pytest.mark.unit
    def test_build_from_dicts(self, components, design_tokens):
        design = CanonicalDesign.build(components, design_tokens)
        assert len(design) == len(components)
        assert design.component_ids == tuple(c["id"] for c in components)
        assert design.colors["primary"] == "#3B82F6"

    @pytest.mark.unit
    def test_build_with_nothing(self):
        design = CanonicalDesign.build()
        assert len(design) == 0
        assert design.colors == {}
        assert design.typography == {}
        assert design.spacing == {}

    @pytest.mark.unit
    @pytest.mark.parametrize("components", [5, "hero", {"id": "c1", "type": "hero"}])
    def test_build_rejects_non_list_components(self, components):
        with pytest.raises(ValueError, match="components must be a list"):
            CanonicalDesign.build(components)

    @pytest.mark.unit
    def test_from_payload_rejects_scalar_components(self):
        with pytest.raises(ValueError):
            CanonicalDesign.from_payload({"components": 5})

    @pytest.mark.unit
    def test_iteration_preserves_order(self, components):
        design = CanonicalDesign.build(components)
        assert [c.id for c in design] == [c["id"] for c in components]

    @pytest.mark.unit
    def test_from_payload_mapping(self, components, design_tokens):
        design = CanonicalDesign.from_payload(
            {"components": components, "designTokens": design_tokens}
        )
        assert len(design) == len(components)
        assert design.spacing["md"] == "1rem"

    @pytest.mark.unit
    def test_from_payload_explicit_tokens_win(self, components):
        design = CanonicalDesign.from_payload(
            {"components": components, "designTokens": {"colors": {"a": "#000000"}}},
            {"colors": {"b": "#FFFFFF"}},
        )
        assert design.colors == {"b": "#FFFFFF"}

    @pytest.mark.unit
    def test_from_payload_list(self, components):
        design = CanonicalDesign.from_payload(components)
        assert len(design) == len(components)
        assert design.colors == {}


class TestExportResult:
    """Tests for the export descriptor."""

    @pytest.mark.unit
    def test_to_dict_uses_wire_names(self):
        result = ExportResult(
            url="memory://exports/Site/html-1.html",
            file_key="exports/Site/html-1.html",
            format=ExportFormat.HTML,
            file_name="Site.html",
        )
        assert result.to_dict() == {
            "url": "memory://exports/Site/html-1.html",
            "fileKey": "exports/Site/html-1.html",
            "format": "html",
            "fileName": "Site.html",
        }
