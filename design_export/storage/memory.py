"""In-memory storage backend, used by tests and previews."""

import logging
import threading

from .protocol import StoredObject, to_bytes

logger = logging.getLogger(__name__)


class InMemoryStorage:
    """Dict-backed storage returning ``memory://`` URLs.

    Example:
        >>> storage = InMemoryStorage()
        >>> storage.put("exports/a.json", "{}", "application/json").url
        'memory://exports/a.json'
        >>> storage.get("exports/a.json")
        b'{}'
    """

    def __init__(self) -> None:
        self._objects: dict[str, tuple[bytes, str]] = {}
        self._lock = threading.Lock()

    def put(self, key: str, content: bytes | str, content_type: str) -> StoredObject:
        data = to_bytes(content)
        with self._lock:
            self._objects[key] = (data, content_type)
        logger.debug(f"Stored {len(data)} bytes at memory://{key}")
        return StoredObject(
            key=key,
            url=f"memory://{key}",
            content_type=content_type,
            size_bytes=len(data),
        )

    def get(self, key: str) -> bytes:
        """Return stored content.

        Raises:
            KeyError: If nothing was stored under ``key``.
        """
        with self._lock:
            return self._objects[key][0]

    def content_type(self, key: str) -> str:
        with self._lock:
            return self._objects[key][1]

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._objects)

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)
