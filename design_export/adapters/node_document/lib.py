"""Node-document adapter for graphic node-tree design tools.

Renders one DOCUMENT with a single CANVAS. Each component becomes a FRAME
with one TEXT child; color tokens become reusable paint styles so the
palette can be imported without the node tree.

Node ids follow the ``"<index>:<child>"`` scheme of the target format and
are assigned from the component's position, not its id, so they are stable
for a given input order.
"""

from typing import Any

from design_export.adapters.lib import (
    ExportAdapter,
    ExportContext,
    plain_number,
    register_adapter,
    stable_id,
)
from design_export.color import hex_to_rgb
from design_export.model import CanonicalDesign, Component, ExportFormat

# Canonical geometry is percent/px sized; the canvas uses a 10x larger space
GEOMETRY_SCALE = 10


def solid_paint(value: str) -> dict[str, Any]:
    """Build an opaque SOLID paint from a hex color (black if malformed)."""
    r, g, b = hex_to_rgb(value).normalized()
    return {
        "blendMode": "NORMAL",
        "type": "SOLID",
        "color": {"r": r, "g": g, "b": b, "a": 1},
    }


@register_adapter
class NodeDocumentAdapter(ExportAdapter):
    """Renders a design as a single-canvas node tree with color styles."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.FIGMA

    def render(self, design: CanonicalDesign, context: ExportContext) -> dict[str, Any]:
        """Build the node document.

        Args:
            design: Components and tokens to render.
            context: Project name and export timestamp.

        Returns:
            dict: JSON-compatible document.
        """
        return {
            "name": context.project_name,
            "lastModified": context.timestamp,
            "schemaVersion": 0,
            "document": {
                "id": "0:0",
                "name": context.project_name,
                "type": "DOCUMENT",
                "children": [
                    {
                        "id": "1:0",
                        "name": "Page 1",
                        "type": "CANVAS",
                        "children": [
                            self._frame(index, component)
                            for index, component in enumerate(design)
                        ],
                    }
                ],
            },
            "assets": [],
            "styles": [
                self._color_style(name, value) for name, value in design.colors.items()
            ],
        }

    def _frame(self, index: int, component: Component) -> dict[str, Any]:
        return {
            "id": f"{index}:0",
            "name": component.title,
            "type": "FRAME",
            "x": plain_number(component.x),
            "y": plain_number(component.y),
            "width": plain_number(component.width * GEOMETRY_SCALE),
            "height": plain_number(component.height * GEOMETRY_SCALE),
            "fills": [solid_paint(component.bg_color)],
            "children": [
                {
                    "id": f"{index}:1",
                    "name": "Text",
                    "type": "TEXT",
                    "characters": component.content,
                    "fills": [solid_paint(component.text_color)],
                }
            ],
        }

    def _color_style(self, name: str, value: Any) -> dict[str, Any]:
        style_name = f"Color/{name}"
        return {
            "key": stable_id("style", style_name, length=40),
            "name": style_name,
            "description": f"Color token: {name}",
            "remote": False,
            "paints": [solid_paint(value)],
        }
