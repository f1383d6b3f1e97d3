"""Storage backends for exported files.

Available backends:
- InMemoryStorage: Dict-backed storage for tests and previews
- LocalFileStorage: Files under a root directory
- HttpBlobStorage: PUT uploads to an HTTP blob store
"""

from .factory import create_storage
from .blob import HttpBlobStorage
from .local import LocalFileStorage
from .memory import InMemoryStorage
from .protocol import ExportStorage, StorageError, StoredObject

__all__ = [
    "ExportStorage",
    "StorageError",
    "StoredObject",
    "InMemoryStorage",
    "LocalFileStorage",
    "HttpBlobStorage",
    "create_storage",
]
