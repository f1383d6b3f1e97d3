"""Tests for the export dispatcher."""

import json
import logging
from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from design_export.dispatch import (
    ExportDispatcher,
    ExportError,
    export_design,
    render_payload,
)
from design_export.model import (
    CanonicalDesign,
    ExportFormat,
    ExportResult,
    UnknownFormatError,
)
from design_export.storage import InMemoryStorage, StorageError, StoredObject

FIXED_TIME = datetime(2025, 1, 15, 10, 30, tzinfo=UTC)


def _strip_volatile(fmt: ExportFormat, text: str):
    """Drop the embedded timestamp so payloads can be compared."""
    if fmt is ExportFormat.HTML:
        return text
    payload = json.loads(text)
    if fmt is ExportFormat.FRAMER:
        payload["metadata"].pop("exportedAt")
    if fmt is ExportFormat.FIGMA:
        payload.pop("lastModified")
    return payload


class FailingStorage:
    """Storage double whose writes always fail."""

    def put(self, key: str, content: bytes | str, content_type: str) -> StoredObject:
        raise StorageError("bucket unavailable", key=key, status_code=503)


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def dispatcher(storage):
    ids = iter(f"id{i}" for i in range(100))
    return ExportDispatcher(
        storage, clock=lambda: FIXED_TIME, id_factory=lambda: next(ids)
    )


class TestExportDispatcher:
    """Tests for ExportDispatcher.export."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fmt, file_name, extension, content_type",
        [
            ("framer", "Test Project-framer.json", "json", "application/json"),
            ("figma", "Test Project-figma.json", "json", "application/json"),
            ("webflow", "Test Project-webflow.json", "json", "application/json"),
            ("html", "Test Project.html", "html", "text/html"),
        ],
    )
    def test_result_descriptor(
        self,
        dispatcher,
        storage,
        components,
        design_tokens,
        fmt,
        file_name,
        extension,
        content_type,
    ):
        result = dispatcher.export(fmt, components, design_tokens, "Test Project")

        assert isinstance(result, ExportResult)
        assert result.format is ExportFormat(fmt)
        assert result.file_name == file_name
        assert result.file_key == f"exports/Test Project/{fmt}-id0.{extension}"
        assert result.url == f"memory://{result.file_key}"
        assert result.content_type == content_type
        assert storage.content_type(result.file_key) == content_type
        assert result.size_bytes == len(storage.get(result.file_key))

    @pytest.mark.unit
    def test_project_key_replaces_name_in_path(self, dispatcher, components):
        result = dispatcher.export("framer", components, None, "Test Project", project_key=123)
        assert result.file_key == "exports/123/framer-id0.json"
        assert result.file_name == "Test Project-framer.json"

    @pytest.mark.unit
    def test_stored_payload_matches_render(self, dispatcher, storage, components, design_tokens):
        result = dispatcher.export("webflow", components, design_tokens, "Test Project")
        design = CanonicalDesign.build(components, design_tokens)
        expected = render_payload("webflow", design, "Test Project", FIXED_TIME)
        assert storage.get(result.file_key).decode("utf-8") == expected

    @pytest.mark.unit
    def test_accepts_prepared_design(self, dispatcher, storage, design):
        result = dispatcher.export(ExportFormat.FRAMER, design, None, "Test Project")
        payload = json.loads(storage.get(result.file_key))
        assert len(payload["components"]) == len(design)

    @pytest.mark.unit
    def test_unique_keys_for_identical_calls(self, storage, components):
        dispatcher = ExportDispatcher(storage)
        first = dispatcher.export("html", components, None, "Site")
        second = dispatcher.export("html", components, None, "Site")
        assert first.file_key != second.file_key
        assert len(storage) == 2

    @pytest.mark.unit
    def test_to_dict(self, dispatcher, components):
        result = dispatcher.export("html", components, None, "Site")
        assert result.to_dict() == {
            "url": "memory://exports/Site/html-id0.html",
            "fileKey": "exports/Site/html-id0.html",
            "format": "html",
            "fileName": "Site.html",
        }


class TestDeterminism:
    """Identical inputs give identical payloads apart from volatile fields."""

    @pytest.mark.unit
    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_payloads_equal_modulo_timestamp(self, storage, components, design_tokens, fmt):
        dispatcher = ExportDispatcher(storage)
        first = dispatcher.export(fmt, components, design_tokens, "Test Project")
        second = dispatcher.export(fmt, components, design_tokens, "Test Project")

        assert first.file_key != second.file_key
        first_payload = _strip_volatile(fmt, storage.get(first.file_key).decode())
        second_payload = _strip_volatile(fmt, storage.get(second.file_key).decode())
        assert first_payload == second_payload

    @pytest.mark.unit
    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_byte_identical_with_fixed_clock(self, design, fmt):
        first = render_payload(fmt, design, "Test Project", FIXED_TIME)
        second = render_payload(fmt, design, "Test Project", FIXED_TIME)
        assert first == second


class TestEdgeCases:
    """Empty designs and token defaulting across every format."""

    @pytest.mark.unit
    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_empty_tokens_succeed(self, dispatcher, storage, components, fmt):
        result = dispatcher.export(fmt, components, {}, "Test Project")
        content = storage.get(result.file_key).decode()
        if fmt is ExportFormat.FRAMER:
            assert json.loads(content)["designTokens"] == {
                "colors": {},
                "typography": {},
                "spacing": {},
            }
        elif fmt is ExportFormat.FIGMA:
            assert json.loads(content)["styles"] == []
        elif fmt is ExportFormat.WEBFLOW:
            assert json.loads(content)["globalStyles"] == {
                "colors": {},
                "typography": {},
                "spacing": {},
            }
        else:
            assert ":root {" in content

    @pytest.mark.unit
    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_empty_design_succeeds(self, dispatcher, storage, fmt):
        result = dispatcher.export(fmt, [], None, "Empty")
        content = storage.get(result.file_key).decode()
        if fmt is ExportFormat.HTML:
            assert "<section" not in content
            assert content.rstrip().endswith("</html>")
        else:
            assert isinstance(json.loads(content), dict)


class TestErrorHandling:
    """Error taxonomy of the dispatcher."""

    @pytest.mark.unit
    def test_unknown_format_fails_before_rendering(self, storage, components):
        calls = []
        dispatcher = ExportDispatcher(storage, clock=lambda: calls.append(1) or FIXED_TIME)
        with pytest.raises(UnknownFormatError):
            dispatcher.export("sketch", components, None, "Site")
        assert calls == []
        assert len(storage) == 0

    @pytest.mark.unit
    def test_adapter_failure_is_wrapped(self, dispatcher, storage):
        components = [{"id": "c1", "type": "hero", "properties": {"tags": {"a"}}}]
        with pytest.raises(ExportError) as exc_info:
            dispatcher.export("framer", components, None, "Site")
        assert exc_info.value.format is ExportFormat.FRAMER
        assert isinstance(exc_info.value.__cause__, TypeError)
        assert "framer" in str(exc_info.value)
        assert len(storage) == 0

    @pytest.mark.unit
    def test_invalid_component_is_wrapped(self, dispatcher):
        with pytest.raises(ExportError) as exc_info:
            dispatcher.export("html", [{"title": "no id"}], None, "Site")
        assert exc_info.value.format is ExportFormat.HTML

    @pytest.mark.unit
    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_non_finite_geometry_is_wrapped(self, dispatcher, storage, fmt):
        components = [{"id": "c1", "type": "hero", "width": float("nan")}]
        with pytest.raises(ExportError) as exc_info:
            dispatcher.export(fmt, components, None, "Site")
        assert exc_info.value.format is fmt
        assert isinstance(exc_info.value.__cause__, ValidationError)
        assert len(storage) == 0

    @pytest.mark.unit
    def test_non_finite_property_is_wrapped(self, dispatcher, storage):
        components = [{"id": "c1", "type": "hero", "properties": {"ratio": float("inf")}}]
        with pytest.raises(ExportError) as exc_info:
            dispatcher.export("framer", components, None, "Site")
        assert isinstance(exc_info.value.__cause__, ValueError)
        assert len(storage) == 0

    @pytest.mark.unit
    def test_storage_failure_is_wrapped(self, components):
        dispatcher = ExportDispatcher(FailingStorage())
        with pytest.raises(ExportError) as exc_info:
            dispatcher.export("webflow", components, None, "Site")
        assert exc_info.value.format is ExportFormat.WEBFLOW
        assert isinstance(exc_info.value.__cause__, StorageError)

    @pytest.mark.unit
    def test_malformed_colors_warn_but_export(self, dispatcher, caplog):
        components = [{"id": "c1", "type": "hero", "bgColor": "not-a-color"}]
        with caplog.at_level(logging.WARNING, logger="design_export.dispatch.lib"):
            result = dispatcher.export("figma", components, None, "Site")
        assert [w.code for w in result.warnings] == ["malformed_color"]
        assert "not-a-color" in caplog.text


class TestExportDesign:
    """Tests for the export_design convenience function."""

    @pytest.mark.unit
    def test_uses_given_storage(self, storage, components, design_tokens):
        result = export_design("html", components, design_tokens, "Site", storage=storage)
        assert result.file_key in storage.keys()

    @pytest.mark.unit
    def test_uses_configured_storage(self, monkeypatch, tmp_path, components):
        monkeypatch.setenv("EXPORT_STORAGE_BACKEND", "local")
        monkeypatch.setenv("EXPORT_STORAGE_DIR", str(tmp_path))
        result = export_design("html", components, None, "Site", project_key=7)
        stored = tmp_path / result.file_key
        assert stored.exists()
        assert result.url == stored.resolve().as_uri()
