"""Tests for storage backends."""

import httpx
import pytest

from design_export.storage import (
    HttpBlobStorage,
    InMemoryStorage,
    LocalFileStorage,
    StorageError,
    create_storage,
)

# =============================================================================
# In-memory backend
# =============================================================================


class TestInMemoryStorage:
    """Tests for InMemoryStorage."""

    @pytest.mark.unit
    def test_put_and_get(self):
        storage = InMemoryStorage()
        stored = storage.put("exports/a/html-1.html", "<p>é</p>", "text/html")
        assert stored.url == "memory://exports/a/html-1.html"
        assert stored.key == "exports/a/html-1.html"
        assert stored.size_bytes == len("<p>é</p>".encode("utf-8"))
        assert storage.get("exports/a/html-1.html") == "<p>é</p>".encode("utf-8")
        assert storage.content_type("exports/a/html-1.html") == "text/html"

    @pytest.mark.unit
    def test_bytes_are_stored_as_is(self):
        storage = InMemoryStorage()
        storage.put("k", b"\x00\x01", "application/octet-stream")
        assert storage.get("k") == b"\x00\x01"

    @pytest.mark.unit
    def test_missing_key_raises(self):
        with pytest.raises(KeyError):
            InMemoryStorage().get("nope")

    @pytest.mark.unit
    def test_keys_and_len(self):
        storage = InMemoryStorage()
        storage.put("a", "1", "text/plain")
        storage.put("b", "2", "text/plain")
        assert storage.keys() == ["a", "b"]
        assert len(storage) == 2


# =============================================================================
# Filesystem backend
# =============================================================================


class TestLocalFileStorage:
    """Tests for LocalFileStorage."""

    @pytest.mark.unit
    def test_writes_nested_file(self, tmp_path):
        storage = LocalFileStorage(tmp_path)
        stored = storage.put("exports/Site/framer-1.json", "{}", "application/json")
        path = tmp_path / "exports" / "Site" / "framer-1.json"
        assert path.read_text() == "{}"
        assert stored.url == path.resolve().as_uri()
        assert stored.size_bytes == 2

    @pytest.mark.unit
    def test_public_base_url(self, tmp_path):
        storage = LocalFileStorage(tmp_path, base_url="https://cdn.example.com/")
        stored = storage.put("exports/Site/html-1.html", "<html/>", "text/html")
        assert stored.url == "https://cdn.example.com/exports/Site/html-1.html"

    @pytest.mark.unit
    def test_key_cannot_escape_root(self, tmp_path):
        storage = LocalFileStorage(tmp_path / "root")
        with pytest.raises(StorageError, match="escapes"):
            storage.put("exports/../../outside.json", "{}", "application/json")
        assert not (tmp_path / "outside.json").exists()

    @pytest.mark.unit
    def test_write_failure_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "exports"
        blocker.write_text("a file, not a directory")
        storage = LocalFileStorage(tmp_path)
        with pytest.raises(StorageError) as exc_info:
            storage.put("exports/Site/html-1.html", "<html/>", "text/html")
        assert exc_info.value.key == "exports/Site/html-1.html"


# =============================================================================
# HTTP backend
# =============================================================================


def _mock_storage(handler, **kwargs) -> HttpBlobStorage:
    return HttpBlobStorage(
        "https://blobs.example.com/bucket/",
        transport=httpx.MockTransport(handler),
        **kwargs,
    )


class TestHttpBlobStorage:
    """Tests for HttpBlobStorage using httpx.MockTransport."""

    @pytest.mark.unit
    def test_put_request(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["url"] = str(request.url)
            seen["content_type"] = request.headers["Content-Type"]
            seen["auth"] = request.headers.get("Authorization")
            seen["body"] = request.content
            return httpx.Response(201)

        storage = _mock_storage(handler, token="secret")
        stored = storage.put("exports/My Site/html-1.html", "<html/>", "text/html")

        assert seen["method"] == "PUT"
        assert seen["url"] == "https://blobs.example.com/bucket/exports/My%20Site/html-1.html"
        assert seen["content_type"] == "text/html"
        assert seen["auth"] == "Bearer secret"
        assert seen["body"] == b"<html/>"
        assert stored.url == seen["url"]
        assert stored.size_bytes == 7

    @pytest.mark.unit
    def test_location_header_wins(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, headers={"Location": "https://cdn.example.com/x"})

        stored = _mock_storage(handler).put("x", "{}", "application/json")
        assert stored.url == "https://cdn.example.com/x"

    @pytest.mark.unit
    def test_no_auth_header_without_token(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert "Authorization" not in request.headers
            return httpx.Response(200)

        _mock_storage(handler).put("x", "{}", "application/json")

    @pytest.mark.unit
    def test_error_status_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, text="unavailable")

        with pytest.raises(StorageError) as exc_info:
            _mock_storage(handler).put("x", "{}", "application/json")
        assert exc_info.value.status_code == 503
        assert exc_info.value.key == "x"

    @pytest.mark.unit
    def test_transport_error_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(StorageError, match="Upload failed"):
            _mock_storage(handler).put("x", "{}", "application/json")

    @pytest.mark.unit
    def test_timeout_raises(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(StorageError, match="timed out"):
            _mock_storage(handler).put("x", "{}", "application/json")


# =============================================================================
# Factory
# =============================================================================


class TestCreateStorage:
    """Tests for create_storage."""

    @pytest.mark.unit
    def test_default_is_local(self, monkeypatch, tmp_path):
        monkeypatch.delenv("EXPORT_STORAGE_BACKEND", raising=False)
        monkeypatch.setenv("EXPORT_STORAGE_DIR", str(tmp_path))
        storage = create_storage()
        assert isinstance(storage, LocalFileStorage)
        assert storage.root == tmp_path

    @pytest.mark.unit
    def test_memory_from_env(self, monkeypatch):
        monkeypatch.setenv("EXPORT_STORAGE_BACKEND", "memory")
        assert isinstance(create_storage(), InMemoryStorage)

    @pytest.mark.unit
    def test_explicit_backend_wins(self, monkeypatch):
        monkeypatch.setenv("EXPORT_STORAGE_BACKEND", "local")
        assert isinstance(create_storage("MEMORY"), InMemoryStorage)

    @pytest.mark.unit
    def test_http_requires_url(self, monkeypatch):
        monkeypatch.delenv("EXPORT_STORAGE_URL", raising=False)
        with pytest.raises(ValueError, match="EXPORT_STORAGE_URL"):
            create_storage("http")

    @pytest.mark.unit
    def test_http_from_env(self, monkeypatch):
        monkeypatch.setenv("EXPORT_STORAGE_URL", "https://blobs.example.com")
        monkeypatch.setenv("EXPORT_STORAGE_TIMEOUT", "5")
        storage = create_storage("http")
        assert isinstance(storage, HttpBlobStorage)
        assert storage.timeout == 5.0

    @pytest.mark.unit
    def test_unknown_backend(self):
        with pytest.raises(ValueError, match="Unknown storage backend"):
            create_storage("s4")
