"""Unit tests for the node-document adapter."""

import pytest

from design_export.adapters.node_document import NodeDocumentAdapter
from design_export.adapters.node_document.lib import solid_paint
from design_export.model import CanonicalDesign, ExportFormat


@pytest.fixture
def adapter():
    """Create a NodeDocumentAdapter instance."""
    return NodeDocumentAdapter()


def _frames(payload):
    return payload["document"]["children"][0]["children"]


class TestSolidPaint:
    """Tests for paint construction."""

    @pytest.mark.unit
    def test_normalized_channels(self):
        paint = solid_paint("#FF0000")
        assert paint["type"] == "SOLID"
        assert paint["blendMode"] == "NORMAL"
        assert paint["color"] == {"r": 1.0, "g": 0.0, "b": 0.0, "a": 1}

    @pytest.mark.unit
    def test_malformed_color_is_black(self):
        assert solid_paint("oops")["color"] == {"r": 0.0, "g": 0.0, "b": 0.0, "a": 1}


class TestNodeDocumentAdapter:
    """Tests for NodeDocumentAdapter."""

    @pytest.mark.unit
    def test_format(self, adapter):
        assert adapter.format is ExportFormat.FIGMA
        assert adapter.file_name("Site") == "Site-figma.json"

    @pytest.mark.unit
    def test_document_structure(self, adapter, design, export_context):
        payload = adapter.render(design, export_context)
        document = payload["document"]
        assert document["type"] == "DOCUMENT"
        assert document["id"] == "0:0"
        assert len(document["children"]) == 1
        canvas = document["children"][0]
        assert canvas["type"] == "CANVAS"
        assert canvas["name"] == "Page 1"
        assert payload["lastModified"] == "2025-01-15T10:30:00.000Z"
        assert payload["assets"] == []

    @pytest.mark.unit
    def test_frame_geometry_is_scaled(self, adapter, design, export_context):
        """A 100 x 400 component becomes a 1000 x 4000 frame."""
        frame = _frames(adapter.render(design, export_context))[0]
        assert frame["type"] == "FRAME"
        assert frame["width"] == 1000
        assert frame["height"] == 4000
        assert (frame["x"], frame["y"]) == (0, 0)

    @pytest.mark.unit
    def test_frame_ids_follow_position(self, adapter, design, export_context):
        frames = _frames(adapter.render(design, export_context))
        assert [f["id"] for f in frames] == [f"{i}:0" for i in range(len(design))]
        assert [f["children"][0]["id"] for f in frames] == [
            f"{i}:1" for i in range(len(design))
        ]

    @pytest.mark.unit
    def test_whole_float_geometry_stays_integral(self, adapter, export_context):
        design = CanonicalDesign.build(
            [{"id": "c1", "type": "hero", "width": 100.0, "height": 40.5}]
        )
        text = adapter.export_payload(design, export_context)
        assert '"width": 1000,' in text
        assert '"height": 405,' in text

    @pytest.mark.unit
    def test_frame_has_single_text_child(self, adapter, design, export_context):
        frame = _frames(adapter.render(design, export_context))[0]
        assert len(frame["children"]) == 1
        text = frame["children"][0]
        assert text["type"] == "TEXT"
        assert text["characters"] == "Welcome to our website"
        assert text["fills"][0]["color"] == {"r": 1.0, "g": 1.0, "b": 1.0, "a": 1}

    @pytest.mark.unit
    def test_frame_fill_from_background(self, adapter, design, export_context):
        color = _frames(adapter.render(design, export_context))[0]["fills"][0]["color"]
        assert color["r"] == pytest.approx(59 / 255)
        assert color["g"] == pytest.approx(130 / 255)
        assert color["b"] == pytest.approx(246 / 255)

    @pytest.mark.unit
    def test_raw_content_is_not_escaped(self, adapter, export_context):
        design = CanonicalDesign.build([{"id": "c1", "type": "text", "content": "<b>&</b>"}])
        text = _frames(adapter.render(design, export_context))[0]["children"][0]
        assert text["characters"] == "<b>&</b>"

    @pytest.mark.unit
    def test_color_styles_follow_token_order(self, adapter, design, export_context):
        styles = adapter.render(design, export_context)["styles"]
        assert [s["name"] for s in styles] == [
            "Color/primary",
            "Color/secondary",
            "Color/accent",
        ]
        assert styles[0]["description"] == "Color token: primary"
        assert styles[0]["remote"] is False
        assert len(styles[0]["paints"]) == 1

    @pytest.mark.unit
    def test_style_keys_are_stable(self, adapter, design, export_context):
        first = adapter.render(design, export_context)["styles"]
        second = adapter.render(design, export_context)["styles"]
        assert [s["key"] for s in first] == [s["key"] for s in second]
        assert len({s["key"] for s in first}) == len(first)

    @pytest.mark.unit
    def test_empty_design(self, adapter, export_context):
        payload = adapter.render(CanonicalDesign.build(), export_context)
        assert _frames(payload) == []
        assert payload["styles"] == []
