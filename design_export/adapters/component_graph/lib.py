"""Component-graph adapter for property-tree design tools.

The target tool models a page as a flat list of components plus shallow
frames that reference them by id, so components are never nested here.

Example output:
    ```json
    {
      "version": "1.0.0",
      "name": "My Site",
      "metadata": {"exportedAt": "2025-01-01T00:00:00.000Z", "format": "framer"},
      "designTokens": {"colors": {}, "typography": {}, "spacing": {}},
      "components": [
        {"id": "c1", "name": "Hero", "type": "hero", "props": {...}, "children": []}
      ],
      "frames": [
        {"id": "frame-1", "name": "Main Frame", "width": 1440, "height": 400,
         "children": ["c1"]}
      ]
    }
    ```
"""

from typing import Any

from design_export.adapters.lib import (
    ExportAdapter,
    ExportContext,
    plain_number,
    register_adapter,
)
from design_export.model import CanonicalDesign, Component, ExportFormat

SCHEMA_VERSION = "1.0.0"
FRAME_WIDTH = 1440
FRAME_HEIGHT_PER_COMPONENT = 400


@register_adapter
class ComponentGraphAdapter(ExportAdapter):
    """Renders a design as a flat component list inside one frame."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.FRAMER

    def render(self, design: CanonicalDesign, context: ExportContext) -> dict[str, Any]:
        """Build the component-graph document.

        Args:
            design: Components and tokens to render.
            context: Project name and export timestamp.

        Returns:
            dict: JSON-compatible document.
        """
        return {
            "version": SCHEMA_VERSION,
            "name": context.project_name,
            "metadata": {
                "exportedAt": context.timestamp,
                "format": self.format.value,
            },
            "designTokens": design.tokens.groups(),
            "components": [self._component(c) for c in design],
            "frames": [
                {
                    "id": "frame-1",
                    "name": "Main Frame",
                    "width": FRAME_WIDTH,
                    "height": FRAME_HEIGHT_PER_COMPONENT * len(design),
                    "children": list(design.component_ids),
                }
            ],
        }

    def _component(self, component: Component) -> dict[str, Any]:
        return {
            "id": component.id,
            "name": component.title,
            "type": component.type,
            "props": self._props(component),
            "children": [],
        }

    def _props(self, component: Component) -> dict[str, Any]:
        """Explicit fields first, then ``properties``.

        Keys in ``properties`` override the explicit fields of the same name
        (``{"width": 50}`` replaces the component width).
        """
        props: dict[str, Any] = {
            "title": component.title,
            "content": component.content,
            "backgroundColor": component.bg_color,
            "textColor": component.text_color,
            "width": plain_number(component.width),
            "height": plain_number(component.height),
            "x": plain_number(component.x),
            "y": plain_number(component.y),
        }
        props.update(component.properties)
        return props
