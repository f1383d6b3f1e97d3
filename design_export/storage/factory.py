"""Storage factory driven by configuration."""

from design_export.config import EnvVar, get_environment, get_storage_dir

from .protocol import ExportStorage


def create_storage(backend: str | None = None) -> ExportStorage:
    """Create the configured storage backend.

    Args:
        backend: Backend name ("local", "memory" or "http"). Falls back to
            EXPORT_STORAGE_BACKEND.

    Returns:
        A storage backend instance.

    Raises:
        ValueError: If the backend is unknown or the http backend has no URL.
    """
    name = (backend or get_environment(EnvVar.EXPORT_STORAGE_BACKEND)).lower()

    if name == "local":
        from .local import LocalFileStorage

        return LocalFileStorage(
            root=get_storage_dir(),
            base_url=get_environment(EnvVar.EXPORT_PUBLIC_BASE_URL),
        )

    if name == "memory":
        from .memory import InMemoryStorage

        return InMemoryStorage()

    if name == "http":
        from .blob import HttpBlobStorage

        url = get_environment(EnvVar.EXPORT_STORAGE_URL)
        if not url:
            raise ValueError("EXPORT_STORAGE_URL must be set for the http backend")
        return HttpBlobStorage(
            base_url=url,
            token=get_environment(EnvVar.EXPORT_STORAGE_TOKEN),
            timeout=get_environment(EnvVar.EXPORT_STORAGE_TIMEOUT),
        )

    raise ValueError(f"Unknown storage backend '{name}'. Available: local, memory, http")
