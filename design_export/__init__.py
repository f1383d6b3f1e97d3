"""design-export: render canonical designs to Framer, Figma, Webflow and HTML."""

from design_export.adapters import ExportAdapter, get_adapter, list_adapters
from design_export.dispatch import (
    ExportDispatcher,
    ExportError,
    export_design,
    render_payload,
)
from design_export.model import (
    CanonicalDesign,
    Component,
    DesignTokens,
    ExportFormat,
    ExportResult,
    ExportWarning,
    UnknownFormatError,
)

__all__ = [
    # Model
    "CanonicalDesign",
    "Component",
    "DesignTokens",
    "ExportFormat",
    "ExportResult",
    "ExportWarning",
    "UnknownFormatError",
    # Adapters
    "ExportAdapter",
    "get_adapter",
    "list_adapters",
    # Dispatch
    "ExportDispatcher",
    "ExportError",
    "export_design",
    "render_payload",
]
