"""Unit tests for the component-graph adapter."""

import json

import pytest

from design_export.adapters import ExportContext
from design_export.adapters.component_graph import ComponentGraphAdapter
from design_export.model import CanonicalDesign, ExportFormat


@pytest.fixture
def adapter():
    """Create a ComponentGraphAdapter instance."""
    return ComponentGraphAdapter()


class TestComponentGraphAdapter:
    """Tests for ComponentGraphAdapter."""

    @pytest.mark.unit
    def test_format(self, adapter):
        assert adapter.format is ExportFormat.FRAMER
        assert adapter.file_extension == "json"
        assert adapter.content_type == "application/json"
        assert adapter.file_name("Site") == "Site-framer.json"

    @pytest.mark.unit
    def test_document_header(self, adapter, design, export_context):
        payload = adapter.render(design, export_context)
        assert payload["version"] == "1.0.0"
        assert payload["name"] == export_context.project_name
        assert payload["metadata"] == {
            "exportedAt": "2025-01-15T10:30:00.000Z",
            "format": "framer",
        }

    @pytest.mark.unit
    def test_tokens_copied_verbatim(self, adapter, design, design_tokens, export_context):
        payload = adapter.render(design, export_context)
        assert payload["designTokens"] == design_tokens

    @pytest.mark.unit
    def test_components_preserve_count_and_order(self, adapter, design, export_context):
        payload = adapter.render(design, export_context)
        assert len(payload["components"]) == len(design)
        assert [c["id"] for c in payload["components"]] == list(design.component_ids)

    @pytest.mark.unit
    def test_component_descriptor(self, adapter, design, export_context):
        descriptor = adapter.render(design, export_context)["components"][0]
        assert descriptor["name"] == "Hero Section"
        assert descriptor["type"] == "hero"
        assert descriptor["children"] == []
        assert descriptor["props"] == {
            "title": "Hero Section",
            "content": "Welcome to our website",
            "backgroundColor": "#3B82F6",
            "textColor": "#FFFFFF",
            "width": 100,
            "height": 400,
            "x": 0,
            "y": 0,
        }

    @pytest.mark.unit
    def test_properties_merge_last(self, adapter, export_context):
        design = CanonicalDesign.build(
            [
                {
                    "id": "c1",
                    "type": "cta",
                    "width": 100,
                    "properties": {"width": 50, "buttonLabel": "Go"},
                }
            ]
        )
        props = adapter.render(design, export_context)["components"][0]["props"]
        assert props["width"] == 50
        assert props["buttonLabel"] == "Go"
        assert list(props)[-1] == "buttonLabel"

    @pytest.mark.unit
    def test_whole_float_geometry_stays_integral(self, adapter, export_context):
        design = CanonicalDesign.build([{"id": "c1", "type": "hero", "width": 100.0, "x": 2.5}])
        props = adapter.render(design, export_context)["components"][0]["props"]
        assert props["width"] == 100 and isinstance(props["width"], int)
        assert props["x"] == 2.5

    @pytest.mark.unit
    def test_single_frame_geometry(self, adapter, design, export_context):
        frames = adapter.render(design, export_context)["frames"]
        assert len(frames) == 1
        assert frames[0]["width"] == 1440
        assert frames[0]["height"] == 400 * len(design)
        assert frames[0]["children"] == list(design.component_ids)

    @pytest.mark.unit
    def test_empty_design(self, adapter, export_context):
        payload = adapter.render(CanonicalDesign.build(), export_context)
        assert payload["components"] == []
        assert payload["frames"][0]["height"] == 0
        assert payload["frames"][0]["children"] == []
        assert payload["designTokens"] == {"colors": {}, "typography": {}, "spacing": {}}

    @pytest.mark.unit
    def test_serialized_payload_is_json(self, adapter, design, export_context):
        text = adapter.export_payload(design, export_context)
        assert json.loads(text)["name"] == export_context.project_name
        assert text.startswith("{\n  ")

    @pytest.mark.unit
    def test_unencodable_properties_raise(self, adapter, export_context):
        design = CanonicalDesign.build(
            [{"id": "c1", "type": "hero", "properties": {"tags": {"a", "b"}}}]
        )
        with pytest.raises(TypeError):
            adapter.export_payload(design, export_context)

    @pytest.mark.unit
    def test_timestamp_is_the_only_difference(self, adapter, design, export_context):
        later = ExportContext(
            project_name=export_context.project_name,
            exported_at=export_context.exported_at.replace(year=2030),
        )
        first = adapter.render(design, export_context)
        second = adapter.render(design, later)
        assert first["metadata"]["exportedAt"] != second["metadata"]["exportedAt"]
        first["metadata"].pop("exportedAt")
        second["metadata"].pop("exportedAt")
        assert first == second
