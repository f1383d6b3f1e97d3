"""Export dispatch: format selection, rendering and persistence."""

from design_export.dispatch.lib import (
    ExportDispatcher,
    ExportError,
    export_design,
    render_payload,
)

__all__ = [
    "ExportDispatcher",
    "ExportError",
    "export_design",
    "render_payload",
]
