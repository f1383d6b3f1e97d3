"""HTTP blob-store backend.

Uploads objects with ``PUT <base_url>/<key>``. Works with any store that
accepts plain PUT uploads (S3-compatible presigned endpoints, static file
gateways, simple upload services).
"""

import logging
from urllib.parse import quote

import httpx

from .protocol import StorageError, StoredObject, to_bytes

logger = logging.getLogger(__name__)


class HttpBlobStorage:
    """HTTP client for a PUT-based blob store.

    Example:
        >>> storage = HttpBlobStorage("https://blobs.example.com/bucket")
        >>> obj = storage.put("exports/site/html-1.html", "<html/>", "text/html")
        >>> obj.url
        'https://blobs.example.com/bucket/exports/site/html-1.html'

    Attributes:
        base_url: Store endpoint; keys are appended as path segments.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: Store endpoint.
            token: Optional bearer token.
            timeout: Request timeout in seconds.
            transport: Custom httpx transport (tests use MockTransport).
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.Client(
            timeout=timeout, headers=headers, transport=transport
        )

    def __del__(self) -> None:
        """Clean up HTTP client."""
        if hasattr(self, "_client"):
            self._client.close()

    def put(self, key: str, content: bytes | str, content_type: str) -> StoredObject:
        """Upload content.

        Returns:
            StoredObject whose URL is the response ``Location`` header when
            present, otherwise the upload URL.

        Raises:
            StorageError: On a non-2xx response, timeout or transport error.
        """
        url = f"{self.base_url}/{quote(key)}"
        data = to_bytes(content)

        try:
            response = self._client.put(
                url, content=data, headers={"Content-Type": content_type}
            )
        except httpx.TimeoutException as e:
            raise StorageError(f"Upload timed out: {e}", key=key) from e
        except httpx.RequestError as e:
            raise StorageError(f"Upload failed: {e}", key=key) from e

        if not response.is_success:
            raise StorageError(
                f"Blob store returned {response.status_code}",
                key=key,
                status_code=response.status_code,
            )

        logger.debug(f"Uploaded {len(data)} bytes to {url}")
        return StoredObject(
            key=key,
            url=response.headers.get("Location", url),
            content_type=content_type,
            size_bytes=len(data),
        )
