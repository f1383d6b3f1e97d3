"""Node-document export (figma)."""

from design_export.adapters.node_document.lib import GEOMETRY_SCALE, NodeDocumentAdapter

__all__ = ["GEOMETRY_SCALE", "NodeDocumentAdapter"]
