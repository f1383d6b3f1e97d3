"""Export dispatcher.

Resolves a format selector to its adapter, renders and serializes the
design, writes the payload through the storage collaborator and returns an
ExportResult. Exports are not idempotent: every call stores a new object
under a fresh unique id, and two formats embed the export timestamp.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from typing import Any
from uuid import uuid4

from design_export.adapters import ExportContext, get_adapter
from design_export.model import (
    CanonicalDesign,
    Component,
    DesignTokens,
    ExportFormat,
    ExportResult,
)
from design_export.storage import ExportStorage, create_storage

logger = logging.getLogger(__name__)

ComponentsInput = CanonicalDesign | Iterable[Component | Mapping[str, Any]] | None
TokensInput = DesignTokens | Mapping[str, Any] | None


class ExportError(Exception):
    """Rendering or storage failed for an export.

    The original exception is chained as ``__cause__``.

    Attributes:
        format: Format that was being exported.
    """

    def __init__(self, message: str, format: ExportFormat):
        super().__init__(message)
        self.format = format


def _utc_now() -> datetime:
    return datetime.now(UTC)


def _unique_id() -> str:
    return uuid4().hex


def _as_design(components: ComponentsInput, tokens: TokensInput) -> CanonicalDesign:
    if isinstance(components, CanonicalDesign):
        return components
    return CanonicalDesign.build(components, tokens)


def render_payload(
    fmt: ExportFormat | str,
    design: CanonicalDesign,
    project_name: str,
    exported_at: datetime | None = None,
) -> str:
    """Render and serialize a design without storing it.

    Args:
        fmt: Target format.
        design: Design to render.
        project_name: Display name embedded in the payload.
        exported_at: Timestamp to embed. Defaults to now (UTC).

    Returns:
        str: Serialized payload.

    Raises:
        UnknownFormatError: If the selector names no format.
    """
    adapter = get_adapter(fmt)
    context = ExportContext(project_name, exported_at or _utc_now())
    return adapter.export_payload(design, context)


class ExportDispatcher:
    """Routes export requests to adapters and persists the results.

    Example:
        >>> from design_export.storage import InMemoryStorage
        >>> dispatcher = ExportDispatcher(InMemoryStorage())
        >>> result = dispatcher.export("html", components, tokens, "My Site")
        >>> result.file_name
        'My Site.html'

    Args:
        storage: Blob-store collaborator.
        clock: Source of export timestamps (defaults to UTC now).
        id_factory: Source of the unique id in storage keys.
    """

    def __init__(
        self,
        storage: ExportStorage,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        self._storage = storage
        self._clock = clock or _utc_now
        self._id_factory = id_factory or _unique_id

    def export(
        self,
        fmt: ExportFormat | str,
        components: ComponentsInput,
        tokens: TokensInput = None,
        project_name: str = "",
        project_key: str | int | None = None,
    ) -> ExportResult:
        """Export a design in one format.

        Args:
            fmt: Target format ("framer", "figma", "webflow", "html").
            components: Component records, or a prepared CanonicalDesign
                (``tokens`` is then ignored).
            tokens: Design tokens; missing groups default to empty.
            project_name: Display name, used in the payload and file name.
            project_key: Storage path segment. Defaults to ``project_name``.

        Returns:
            ExportResult describing the stored artifact.

        Raises:
            UnknownFormatError: Before any rendering, for unknown selectors.
            ExportError: If validation, rendering or the storage write fails.
        """
        fmt = ExportFormat.parse(fmt)
        adapter = get_adapter(fmt)

        try:
            design = _as_design(components, tokens)
            warnings = adapter.collect_warnings(design)
            content = adapter.export_payload(
                design, ExportContext(project_name, self._clock())
            )
        except Exception as e:
            logger.error(f"Rendering {fmt.value} export for '{project_name}' failed: {e}")
            raise ExportError(f"Failed to export to {fmt.value}: {e}", fmt) from e

        for warning in warnings:
            logger.warning(f"{fmt.value} export of '{project_name}': {warning.message}")

        key = self.build_key(fmt, project_name, project_key)
        try:
            stored = self._storage.put(key, content, adapter.content_type)
        except Exception as e:
            logger.error(f"Storing {fmt.value} export at {key} failed: {e}")
            raise ExportError(f"Failed to store {fmt.value} export: {e}", fmt) from e

        logger.info(
            f"Exported {len(design)} component(s) of '{project_name}' "
            f"as {fmt.value} to {stored.url} ({stored.size_bytes} bytes)"
        )
        return ExportResult(
            url=stored.url,
            file_key=key,
            format=fmt,
            file_name=adapter.file_name(project_name),
            content_type=adapter.content_type,
            size_bytes=stored.size_bytes,
            warnings=warnings,
        )

    def build_key(
        self,
        fmt: ExportFormat,
        project_name: str,
        project_key: str | int | None = None,
    ) -> str:
        """Storage key ``exports/<project>/<format>-<uniqueId>.<ext>``.

        The project segment is used verbatim; see DESIGN.md on sanitization.
        """
        segment = project_name if project_key is None else project_key
        return f"exports/{segment}/{fmt.value}-{self._id_factory()}.{fmt.file_extension}"


def export_design(
    fmt: ExportFormat | str,
    components: ComponentsInput,
    tokens: TokensInput = None,
    project_name: str = "",
    *,
    project_key: str | int | None = None,
    storage: ExportStorage | None = None,
) -> ExportResult:
    """Export a design through the configured storage backend.

    Convenience wrapper around ExportDispatcher for one-off calls.
    """
    dispatcher = ExportDispatcher(storage or create_storage())
    return dispatcher.export(fmt, components, tokens, project_name, project_key)


__all__ = [
    "ExportDispatcher",
    "ExportError",
    "export_design",
    "render_payload",
]
