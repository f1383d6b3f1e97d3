"""Adapter abstraction for design export.

This module defines the abstract base class for export adapters and
provides a registry/factory for accessing them by format.
"""

import hashlib
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from design_export.color import is_valid_hex
from design_export.model import CanonicalDesign, ExportFormat, ExportWarning


@dataclass(frozen=True)
class ExportContext:
    """Per-call values an adapter may embed besides the design itself.

    Attributes:
        project_name: Display name of the project.
        exported_at: Export timestamp (the only clock an adapter sees).
    """

    project_name: str
    exported_at: datetime

    @property
    def timestamp(self) -> str:
        """ISO-8601 UTC timestamp with millisecond precision and a Z suffix."""
        moment = self.exported_at
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=UTC)
        iso = moment.astimezone(UTC).isoformat(timespec="milliseconds")
        return iso.replace("+00:00", "Z")


def stable_id(*parts: str, length: int = 24) -> str:
    """Derive a hex id from its parts.

    Used wherever a target format wants an opaque id that is not supplied
    by the design, so that identical inputs produce identical payloads.
    """
    digest = hashlib.sha1("\x1f".join(parts).encode("utf-8")).hexdigest()
    return digest[:length]


def plain_number(value: int | float) -> int | float:
    """Drop the fractional part of whole-number floats (``100.0`` becomes ``100``).

    Keeps geometry printed the same whether the design stored ``100`` or
    ``100.0``.
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class ExportAdapter(ABC):
    """Abstract base class for export adapters.

    Each adapter renders a CanonicalDesign into the native payload of one
    external tool. Adapters are stateless: they never call each other and
    hold nothing between calls.

    Subclasses must implement:
        - format: The ExportFormat this adapter renders
        - render: Design to format-native payload

    JSON adapters inherit ``serialize``; text formats override it.

    Example:
        >>> class MyAdapter(ExportAdapter):
        ...     @property
        ...     def format(self) -> ExportFormat:
        ...         return ExportFormat.HTML
        ...     def render(self, design, context):
        ...         return f"<p>{len(design)}</p>"
    """

    @property
    @abstractmethod
    def format(self) -> ExportFormat:
        """Format rendered by this adapter."""
        ...

    @property
    def file_extension(self) -> str:
        """Output file extension without the dot."""
        return self.format.file_extension

    @property
    def content_type(self) -> str:
        """MIME type of the serialized payload."""
        return self.format.content_type

    @abstractmethod
    def render(self, design: CanonicalDesign, context: ExportContext) -> Any:
        """Render a design to the format-native payload.

        Args:
            design: Components and tokens to render.
            context: Project name and export timestamp.

        Returns:
            The payload (a JSON-compatible structure or a string).
        """
        ...

    def serialize(self, payload: Any) -> str:
        """Serialize a rendered payload.

        Raises:
            TypeError: If ``properties`` carried values JSON cannot encode.
            ValueError: If the payload holds NaN or infinity.
        """
        return json.dumps(payload, indent=2, ensure_ascii=False, allow_nan=False)

    def export_payload(self, design: CanonicalDesign, context: ExportContext) -> str:
        """Render and serialize in one step."""
        return self.serialize(self.render(design, context))

    def file_name(self, project_name: str) -> str:
        """Suggested download name for an export of this format."""
        return f"{project_name}-{self.format.value}.{self.file_extension}"

    def collect_warnings(self, design: CanonicalDesign) -> list[ExportWarning]:
        """Report input that will be decoded leniently.

        Nothing here fails the export: malformed colors render as black and
        duplicate ids are emitted as given.

        Args:
            design: Design about to be rendered.

        Returns:
            List of warnings, components first, then color tokens.
        """
        warnings: list[ExportWarning] = []
        seen: set[str] = set()

        for component in design:
            if component.id in seen:
                warnings.append(
                    ExportWarning(
                        code="duplicate_id",
                        message=f"Component id '{component.id}' is not unique",
                        component_id=component.id,
                        value=component.id,
                    )
                )
            seen.add(component.id)

            for field_name, value in (
                ("bgColor", component.bg_color),
                ("textColor", component.text_color),
            ):
                if not is_valid_hex(value):
                    warnings.append(
                        ExportWarning(
                            code="malformed_color",
                            message=f"{field_name} '{value}' is not a 6-digit hex color",
                            component_id=component.id,
                            value=str(value),
                        )
                    )

        for name, value in design.colors.items():
            if not is_valid_hex(value):
                warnings.append(
                    ExportWarning(
                        code="malformed_color",
                        message=f"Color token '{name}' value '{value}' is not a 6-digit hex color",
                        value=str(value),
                    )
                )

        return warnings


# Adapter registry - populated by adapter modules on import
_registry: dict[ExportFormat, type[ExportAdapter]] = {}

_ADAPTER_MODULES = ("component_graph", "node_document", "cms_page", "markup_page")


def register_adapter(adapter_cls: type[ExportAdapter]) -> type[ExportAdapter]:
    """Register an adapter class in the registry.

    Uses a temporary instance to retrieve the adapter format.

    Args:
        adapter_cls: The adapter class to register.

    Returns:
        The adapter class (for decorator chaining).

    Raises:
        ValueError: If another adapter already renders the same format.
    """
    fmt = adapter_cls().format
    existing = _registry.get(fmt)
    if existing is not None and existing is not adapter_cls:
        raise ValueError(
            f"Format '{fmt.value}' already handled by {existing.__name__}"
        )
    _registry[fmt] = adapter_cls
    return adapter_cls


def get_adapter(fmt: ExportFormat | str) -> ExportAdapter:
    """Get an adapter instance for a format.

    Args:
        fmt: ExportFormat member or its string value (e.g. "figma").

    Returns:
        ExportAdapter: A fresh instance of the registered adapter.

    Raises:
        UnknownFormatError: If the selector names no format.
        KeyError: If the format has no registered adapter.

    Example:
        >>> adapter = get_adapter("html")
        >>> adapter.file_extension
        'html'
    """
    fmt = ExportFormat.parse(fmt)
    if fmt not in _registry:
        _import_adapters()
        if fmt not in _registry:
            raise KeyError(f"No adapter registered for format '{fmt.value}'")
    return _registry[fmt]()


def list_adapters() -> list[ExportFormat]:
    """List formats with a registered adapter, in enum order."""
    _import_adapters()
    return [fmt for fmt in ExportFormat if fmt in _registry]


def _import_adapters() -> None:
    """Import adapter modules to trigger registration."""
    import importlib

    for module_name in _ADAPTER_MODULES:
        importlib.import_module(f"design_export.adapters.{module_name}")


__all__ = [
    "ExportAdapter",
    "ExportContext",
    "get_adapter",
    "list_adapters",
    "plain_number",
    "register_adapter",
    "stable_id",
]
