"""Unit tests for the adapters module.

Tests for:
- ExportAdapter abstract base class
- Adapter registry (register_adapter, get_adapter, list_adapters)
- Lenient-decode warnings
- ExportContext timestamps and stable ids
"""

from datetime import datetime, timedelta, timezone

import pytest

from design_export.adapters import (
    ExportAdapter,
    ExportContext,
    get_adapter,
    list_adapters,
    plain_number,
    register_adapter,
    stable_id,
)
from design_export.model import CanonicalDesign, ExportFormat, UnknownFormatError


class TestExportAdapterContract:
    """Tests for ExportAdapter abstract base class contract."""

    @pytest.mark.unit
    def test_export_adapter_is_abstract(self):
        """ExportAdapter cannot be instantiated directly."""
        with pytest.raises(TypeError, match="abstract"):
            ExportAdapter()  # type: ignore

    @pytest.mark.unit
    def test_concrete_adapter_requires_render(self):
        """Concrete adapters must implement render."""

        class IncompleteAdapter(ExportAdapter):
            @property
            def format(self) -> ExportFormat:
                return ExportFormat.HTML

        with pytest.raises(TypeError, match="abstract"):
            IncompleteAdapter()

    @pytest.mark.unit
    def test_defaults_derive_from_format(self):
        class PlainAdapter(ExportAdapter):
            @property
            def format(self) -> ExportFormat:
                return ExportFormat.FIGMA

            def render(self, design, context):
                return {"count": len(design)}

        adapter = PlainAdapter()
        assert adapter.file_extension == "json"
        assert adapter.content_type == "application/json"
        assert adapter.file_name("Site") == "Site-figma.json"


class TestAdapterRegistry:
    """Tests for adapter registry functions."""

    @pytest.mark.unit
    def test_every_format_has_an_adapter(self):
        """The registry covers the closed set of formats, in enum order."""
        assert list_adapters() == list(ExportFormat)

    @pytest.mark.unit
    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_get_adapter_by_member(self, fmt):
        adapter = get_adapter(fmt)
        assert adapter.format is fmt
        assert isinstance(adapter, ExportAdapter)

    @pytest.mark.unit
    def test_get_adapter_by_string(self):
        assert get_adapter("webflow").format is ExportFormat.WEBFLOW

    @pytest.mark.unit
    def test_get_adapter_returns_fresh_instances(self):
        assert get_adapter("html") is not get_adapter("html")

    @pytest.mark.unit
    def test_get_adapter_unknown_raises(self):
        with pytest.raises(UnknownFormatError):
            get_adapter("sketch")

    @pytest.mark.unit
    def test_second_adapter_for_same_format_rejected(self):
        list_adapters()

        class DuplicateAdapter(ExportAdapter):
            @property
            def format(self) -> ExportFormat:
                return ExportFormat.HTML

            def render(self, design, context):
                return ""

        with pytest.raises(ValueError, match="already handled"):
            register_adapter(DuplicateAdapter)
        assert type(get_adapter("html")).__name__ == "MarkupAdapter"


class TestCollectWarnings:
    """Tests for lenient-decode diagnostics."""

    @pytest.mark.unit
    def test_clean_design_has_no_warnings(self, design):
        assert get_adapter("html").collect_warnings(design) == []

    @pytest.mark.unit
    def test_malformed_component_colors(self):
        design = CanonicalDesign.build(
            [{"id": "c1", "type": "hero", "bgColor": "blue", "textColor": "#FFF"}]
        )
        warnings = get_adapter("figma").collect_warnings(design)
        assert [w.code for w in warnings] == ["malformed_color", "malformed_color"]
        assert all(w.component_id == "c1" for w in warnings)
        assert warnings[0].value == "blue"

    @pytest.mark.unit
    def test_malformed_color_token(self):
        design = CanonicalDesign.build([], {"colors": {"brand": "rebeccapurple"}})
        warnings = get_adapter("figma").collect_warnings(design)
        assert len(warnings) == 1
        assert warnings[0].component_id is None
        assert "brand" in warnings[0].message

    @pytest.mark.unit
    def test_duplicate_ids(self):
        design = CanonicalDesign.build(
            [{"id": "c1", "type": "hero"}, {"id": "c1", "type": "cta"}]
        )
        warnings = get_adapter("framer").collect_warnings(design)
        assert [w.code for w in warnings] == ["duplicate_id"]


class TestExportContext:
    """Tests for ExportContext."""

    @pytest.mark.unit
    def test_timestamp_utc_with_millis(self):
        context = ExportContext("Site", datetime(2025, 1, 15, 10, 30, tzinfo=timezone.utc))
        assert context.timestamp == "2025-01-15T10:30:00.000Z"

    @pytest.mark.unit
    def test_timestamp_converts_offsets(self):
        tz = timezone(timedelta(hours=2))
        context = ExportContext("Site", datetime(2025, 1, 15, 12, 30, 0, 5000, tzinfo=tz))
        assert context.timestamp == "2025-01-15T10:30:00.005Z"

    @pytest.mark.unit
    def test_naive_timestamp_treated_as_utc(self):
        context = ExportContext("Site", datetime(2025, 1, 15, 10, 30))
        assert context.timestamp == "2025-01-15T10:30:00.000Z"


class TestStableId:
    """Tests for stable_id."""

    @pytest.mark.unit
    def test_same_parts_same_id(self):
        assert stable_id("a", "b") == stable_id("a", "b")

    @pytest.mark.unit
    def test_part_boundaries_matter(self):
        assert stable_id("ab", "c") != stable_id("a", "bc")

    @pytest.mark.unit
    def test_length(self):
        assert len(stable_id("x")) == 24
        assert len(stable_id("x", length=40)) == 40


class TestPlainNumber:
    """Tests for plain_number."""

    @pytest.mark.unit
    def test_whole_float_becomes_int(self):
        result = plain_number(100.0)
        assert result == 100
        assert isinstance(result, int)

    @pytest.mark.unit
    def test_fraction_and_int_unchanged(self):
        assert plain_number(12.5) == 12.5
        assert plain_number(7) == 7

    @pytest.mark.unit
    def test_serialize_rejects_nan(self):
        adapter = get_adapter("framer")
        with pytest.raises(ValueError):
            adapter.serialize({"ratio": float("nan")})
