"""Unit tests for the CMS page adapter."""

import pytest

from design_export.adapters.cms_page import CmsPageAdapter, short_name
from design_export.model import CanonicalDesign, ExportFormat


@pytest.fixture
def adapter():
    """Create a CmsPageAdapter instance."""
    return CmsPageAdapter()


def _elements(payload):
    return payload["pages"][0]["children"]


class TestShortName:
    """Tests for short_name slugging."""

    @pytest.mark.unit
    def test_lowercases_and_dashes(self):
        assert short_name("Test Project") == "test-project"

    @pytest.mark.unit
    def test_collapses_whitespace_runs(self):
        assert short_name("My   Big\tSite") == "my-big-site"


class TestCmsPageAdapter:
    """Tests for CmsPageAdapter."""

    @pytest.mark.unit
    def test_format(self, adapter):
        assert adapter.format is ExportFormat.WEBFLOW
        assert adapter.file_name("Site") == "Site-webflow.json"

    @pytest.mark.unit
    def test_site_header(self, adapter, design, export_context):
        payload = adapter.render(design, export_context)
        assert payload["name"] == "Test Project"
        assert payload["shortName"] == "test-project"
        assert len(payload["pages"]) == 1

    @pytest.mark.unit
    def test_home_page(self, adapter, design, export_context):
        page = adapter.render(design, export_context)["pages"][0]
        assert page["name"] == "Home"
        assert page["slug"] == "index"
        assert page["title"] == "Test Project - Home"

    @pytest.mark.unit
    def test_element_per_component(self, adapter, design, export_context):
        elements = _elements(adapter.render(design, export_context))
        assert [e["_id"] for e in elements] == list(design.component_ids)
        assert all(e["tag"] == "div" for e in elements)

    @pytest.mark.unit
    def test_hero_class_name(self, adapter, design, export_context):
        element = _elements(adapter.render(design, export_context))[0]
        assert element["classes"] == ["component-hero"]
        assert element["customAttributes"] == {"data-component-type": "hero"}
        assert element["text"] == "Hero Section"

    @pytest.mark.unit
    def test_inline_style(self, adapter, export_context):
        design = CanonicalDesign.build(
            [
                {
                    "id": "c1",
                    "type": "features",
                    "x": 10,
                    "y": 420,
                    "width": 80,
                    "height": 300,
                    "bgColor": "#F3F4F6",
                    "textColor": "#111827",
                }
            ]
        )
        style = _elements(adapter.render(design, export_context))[0]["style"]
        assert style == {
            "backgroundColor": "#F3F4F6",
            "color": "#111827",
            "width": "80%",
            "height": "300px",
            "position": "relative",
            "left": "10%",
            "top": "420px",
        }

    @pytest.mark.unit
    def test_whole_float_geometry_prints_as_integer(self, adapter, export_context):
        design = CanonicalDesign.build(
            [{"id": "c1", "type": "hero", "x": 0.0, "y": 420.0, "width": 80.0, "height": 300.0}]
        )
        style = _elements(adapter.render(design, export_context))[0]["style"]
        assert (style["width"], style["height"]) == ("80%", "300px")
        assert (style["left"], style["top"]) == ("0%", "420px")

    @pytest.mark.unit
    def test_single_paragraph_child(self, adapter, design, export_context):
        element = _elements(adapter.render(design, export_context))[0]
        assert len(element["children"]) == 1
        assert element["children"][0]["tag"] == "p"
        assert element["children"][0]["text"] == "Welcome to our website"

    @pytest.mark.unit
    def test_global_styles_copied(self, adapter, design, design_tokens, export_context):
        payload = adapter.render(design, export_context)
        assert payload["globalStyles"] == design_tokens

    @pytest.mark.unit
    def test_default_locale_always_present(self, adapter, export_context):
        payload = adapter.render(CanonicalDesign.build(), export_context)
        assert len(payload["cmsLocales"]) == 1
        locale = payload["cmsLocales"][0]
        assert (locale["name"], locale["default"], locale["code"]) == (
            "English",
            True,
            "en",
        )

    @pytest.mark.unit
    def test_empty_design(self, adapter, export_context):
        payload = adapter.render(CanonicalDesign.build(), export_context)
        assert _elements(payload) == []
        assert payload["globalStyles"] == {"colors": {}, "typography": {}, "spacing": {}}

    @pytest.mark.unit
    def test_output_is_fully_deterministic(self, adapter, design, export_context):
        assert adapter.export_payload(design, export_context) == adapter.export_payload(
            design, export_context
        )
