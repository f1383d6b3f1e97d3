"""CMS page adapter for page-builder tools.

Renders a site with a single "Home" page. Every component becomes a
``div`` element carrying its title, a ``component-<type>`` class and an
inline style; its content goes into one ``p`` child. Token groups are
copied through as global styles and one default English locale is always
declared.

Element ids the design does not supply are derived from the project name,
so identical inputs yield identical sites.
"""

import re
from typing import Any

from design_export.adapters.lib import (
    ExportAdapter,
    ExportContext,
    plain_number,
    register_adapter,
    stable_id,
)
from design_export.model import CanonicalDesign, Component, ExportFormat

AUTHOR = "ai-builder"

_WHITESPACE = re.compile(r"\s+")


def short_name(project_name: str) -> str:
    """Slug used by the target tool: lower case, whitespace runs as dashes."""
    return _WHITESPACE.sub("-", project_name.lower())


@register_adapter
class CmsPageAdapter(ExportAdapter):
    """Renders a design as a one-page CMS site."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.WEBFLOW

    def render(self, design: CanonicalDesign, context: ExportContext) -> dict[str, Any]:
        """Build the site document.

        Args:
            design: Components and tokens to render.
            context: Project name (the timestamp is not used).

        Returns:
            dict: JSON-compatible site document.
        """
        project = context.project_name
        return {
            "_id": stable_id(project, "site"),
            "name": project,
            "shortName": short_name(project),
            "createdBy": AUTHOR,
            "updatedBy": AUTHOR,
            "pages": [
                {
                    "_id": stable_id(project, "page", "index"),
                    "name": "Home",
                    "slug": "index",
                    "title": f"{project} - Home",
                    "rootElementId": stable_id(project, "page", "index", "root"),
                    "children": [self._element(project, c) for c in design],
                }
            ],
            "globalStyles": {
                "colors": design.colors,
                "typography": design.typography,
                "spacing": design.spacing,
            },
            "cmsLocales": [
                {
                    "_id": stable_id(project, "locale", "en"),
                    "name": "English",
                    "default": True,
                    "code": "en",
                }
            ],
        }

    def _element(self, project: str, component: Component) -> dict[str, Any]:
        return {
            "_id": component.id,
            "tag": "div",
            "text": component.title,
            "role": "section",
            "classes": [f"component-{component.type}"],
            "customAttributes": {"data-component-type": component.type},
            "style": {
                "backgroundColor": component.bg_color,
                "color": component.text_color,
                "width": f"{plain_number(component.width)}%",
                "height": f"{plain_number(component.height)}px",
                "position": "relative",
                "left": f"{plain_number(component.x)}%",
                "top": f"{plain_number(component.y)}px",
            },
            "children": [
                {
                    "_id": stable_id(project, "element", component.id, "p"),
                    "tag": "p",
                    "text": component.content,
                }
            ],
        }
