"""Storage protocol for exported files.

Defines the interface the export dispatcher writes through. The engine
treats storage as an external blob store; the backends in this package are
reference implementations for local use and tests.
"""

from dataclasses import dataclass
from typing import Protocol


class StorageError(Exception):
    """Error raised by a storage backend while persisting an object."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        status_code: int | None = None,
    ):
        super().__init__(message)
        self.key = key
        self.status_code = status_code


@dataclass(frozen=True)
class StoredObject:
    """Location of a persisted object.

    Attributes:
        key: Storage-internal key the object was written under.
        url: Retrievable URL of the object.
        content_type: MIME type recorded with the object.
        size_bytes: Size of the stored content.
    """

    key: str
    url: str
    content_type: str
    size_bytes: int


class ExportStorage(Protocol):
    """Protocol defining the blob-store interface.

    Implementations must be durable once ``put`` returns and must let
    failures propagate; the dispatcher never retries.
    """

    def put(self, key: str, content: bytes | str, content_type: str) -> StoredObject:
        """Persist content under a key.

        Args:
            key: Slash-separated object key.
            content: Payload; strings are stored UTF-8 encoded.
            content_type: MIME type of the payload.

        Returns:
            StoredObject with a retrievable URL.
        """
        ...


def to_bytes(content: bytes | str) -> bytes:
    """Encode string payloads as UTF-8."""
    return content.encode("utf-8") if isinstance(content, str) else content


__all__ = [
    "ExportStorage",
    "StorageError",
    "StoredObject",
    "to_bytes",
]
