"""Component-graph export (framer)."""

from design_export.adapters.component_graph.lib import (
    FRAME_HEIGHT_PER_COMPONENT,
    FRAME_WIDTH,
    ComponentGraphAdapter,
)

__all__ = [
    "ComponentGraphAdapter",
    "FRAME_HEIGHT_PER_COMPONENT",
    "FRAME_WIDTH",
]
