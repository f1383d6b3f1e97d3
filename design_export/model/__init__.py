"""Canonical design model and export descriptors."""

from design_export.model.lib import (
    CanonicalDesign,
    Component,
    DesignTokens,
    ExportFormat,
    ExportResult,
    ExportWarning,
    UnknownFormatError,
)

__all__ = [
    # Input model
    "Component",
    "DesignTokens",
    "CanonicalDesign",
    # Formats
    "ExportFormat",
    "UnknownFormatError",
    # Output descriptors
    "ExportResult",
    "ExportWarning",
]
