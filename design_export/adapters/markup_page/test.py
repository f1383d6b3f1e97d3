"""Unit tests for the markup adapter."""

import re

import pytest

from design_export.adapters.markup_page import BREAKPOINTS, MarkupAdapter
from design_export.model import CanonicalDesign, ExportFormat


@pytest.fixture
def adapter():
    """Create a MarkupAdapter instance."""
    return MarkupAdapter()


class TestMarkupAdapter:
    """Tests for MarkupAdapter."""

    @pytest.mark.unit
    def test_format(self, adapter):
        assert adapter.format is ExportFormat.HTML
        assert adapter.content_type == "text/html"
        assert adapter.file_name("Site") == "Site.html"

    @pytest.mark.unit
    def test_document_skeleton(self, adapter, design, export_context):
        html = adapter.render(design, export_context)
        assert html.startswith("<!DOCTYPE html>")
        assert '<html lang="en">' in html
        assert "<title>Test Project</title>" in html
        assert html.rstrip().endswith("</html>")

    @pytest.mark.unit
    def test_serialize_is_identity(self, adapter, design, export_context):
        html = adapter.render(design, export_context)
        assert adapter.export_payload(design, export_context) == html

    @pytest.mark.unit
    def test_css_variables_per_color_token(self, adapter, export_context):
        design = CanonicalDesign.build(
            [], {"colors": {"Primary": "#3B82F6", "darkBg": "#111827"}}
        )
        html = adapter.render(design, export_context)
        assert "--color-primary: #3B82F6;" in html
        assert "--color-darkbg: #111827;" in html

    @pytest.mark.unit
    def test_one_section_per_component_in_order(self, adapter, design, export_context):
        html = adapter.render(design, export_context)
        sections = re.findall(r'<section class="component component-([^"]+)"', html)
        assert sections == [c.type for c in design]
        assert html.count("<section") == len(design)

    @pytest.mark.unit
    def test_hero_class_and_inline_style(self, adapter, design, export_context):
        html = adapter.render(design, export_context)
        assert (
            '<section class="component component-hero" style="background-color: '
            '#3B82F6; color: #FFFFFF; width: 100%; height: 400px;">'
        ) in html

    @pytest.mark.unit
    def test_title_and_content_are_escaped(self, adapter, export_context):
        design = CanonicalDesign.build(
            [
                {
                    "id": "c1",
                    "type": "text",
                    "title": "Tom & Jerry",
                    "content": '<script>alert("x")</script>',
                }
            ]
        )
        html = adapter.render(design, export_context)
        assert "<h2>Tom &amp; Jerry</h2>" in html
        assert "<script>" not in html
        assert "<p>&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;</p>" in html

    @pytest.mark.unit
    def test_project_name_is_escaped(self, adapter, design, export_context):
        from design_export.adapters import ExportContext

        context = ExportContext(
            project_name="<Acme>", exported_at=export_context.exported_at
        )
        assert "<title>&lt;Acme&gt;</title>" in adapter.render(design, context)

    @pytest.mark.unit
    def test_malformed_color_cannot_break_attribute(self, adapter, export_context):
        design = CanonicalDesign.build(
            [{"id": "c1", "type": "hero", "bgColor": '"><script>'}]
        )
        html = adapter.render(design, export_context)
        assert "<script>" not in html

    @pytest.mark.unit
    def test_whole_float_geometry_prints_as_integer(self, adapter, export_context):
        design = CanonicalDesign.build(
            [{"id": "c1", "type": "hero", "width": 100.0, "height": 400.0}]
        )
        html = adapter.render(design, export_context)
        assert "width: 100%; height: 400px;" in html

    @pytest.mark.unit
    def test_color_tokens_cannot_close_style_block(self, adapter, export_context):
        design = CanonicalDesign.build(
            [],
            {"colors": {"evil": "red;}</style><script>alert(1)</script>", "a b": "#FFFFFF"}},
        )
        html = adapter.render(design, export_context)
        assert "<script>" not in html
        assert html.count("</style>") == 1
        assert "--color-ab: #FFFFFF;" in html

    @pytest.mark.unit
    def test_fixed_breakpoints(self, adapter, export_context):
        html = adapter.render(CanonicalDesign.build(), export_context)
        assert [bp.max_width for bp in BREAKPOINTS] == [768, 480]
        assert "@media (max-width: 768px)" in html
        assert "@media (max-width: 480px)" in html
        assert "padding: 30px 15px;" in html
        assert "font-size: 1.25rem;" in html

    @pytest.mark.unit
    def test_empty_design(self, adapter, export_context):
        html = adapter.render(CanonicalDesign.build(), export_context)
        assert "<section" not in html
        assert '<div class="container">' in html
        assert ":root {" in html
