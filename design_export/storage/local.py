"""Filesystem storage backend.

Writes each object to ``<root>/<key>``. URLs point at ``base_url/<key>``
when a public prefix is configured, otherwise at the file itself.
"""

import logging
from pathlib import Path

from .protocol import StorageError, StoredObject, to_bytes

logger = logging.getLogger(__name__)


class LocalFileStorage:
    """Store exports as files under a root directory.

    Args:
        root: Directory that receives the objects (created on demand).
        base_url: Optional public URL prefix served from ``root``.
    """

    def __init__(self, root: Path | str, base_url: str | None = None):
        self.root = Path(root)
        self.base_url = base_url.rstrip("/") if base_url else None

    def put(self, key: str, content: bytes | str, content_type: str) -> StoredObject:
        """Write content to ``root/key``.

        Raises:
            StorageError: If the key escapes the root or the write fails.
        """
        path = self._resolve(key)
        data = to_bytes(content)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
        except OSError as e:
            raise StorageError(f"Failed to write {path}: {e}", key=key) from e

        logger.debug(f"Wrote {len(data)} bytes to {path}")
        return StoredObject(
            key=key,
            url=self._url_for(key, path),
            content_type=content_type,
            size_bytes=len(data),
        )

    def _resolve(self, key: str) -> Path:
        root = self.root.resolve()
        path = (root / key).resolve()
        if not path.is_relative_to(root):
            raise StorageError(f"Key escapes storage root: {key}", key=key)
        return path

    def _url_for(self, key: str, path: Path) -> str:
        if self.base_url:
            return f"{self.base_url}/{key}"
        return path.as_uri()
