"""Markup adapter producing a self-contained HTML document.

Color tokens become CSS custom properties (``--color-<name>``); each
component becomes a ``<section>`` with inline colors and size. Responsive
breakpoints are fixed constants of this format, not derived from the design.
"""

import re
from dataclasses import dataclass

from design_export.adapters.lib import (
    ExportAdapter,
    ExportContext,
    plain_number,
    register_adapter,
)
from design_export.markup import escape_html
from design_export.model import CanonicalDesign, Component, ExportFormat


@dataclass(frozen=True)
class Breakpoint:
    """Responsive overrides applied at or below ``max_width`` pixels."""

    max_width: int
    section_padding: str
    heading_size: str
    body_size: str


BREAKPOINTS: tuple[Breakpoint, ...] = (
    Breakpoint(768, "30px 15px", "1.5rem", "0.95rem"),
    Breakpoint(480, "20px 10px", "1.25rem", "0.9rem"),
)

# Characters that could end a declaration or the style element
_CSS_UNSAFE = re.compile(r"[<>{};]")
_CSS_NAME_UNSAFE = re.compile(r"[^a-z0-9_-]")

BASE_RULES = """\
    * {
      margin: 0;
      padding: 0;
      box-sizing: border-box;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Oxygen, Ubuntu, Cantarell, sans-serif;
      line-height: 1.6;
      color: #333;
    }

    .container {
      max-width: 1440px;
      margin: 0 auto;
      padding: 0 20px;
    }

    .component {
      padding: 40px 20px;
      margin: 20px 0;
      border-radius: 8px;
      transition: all 0.3s ease;
    }

    .component-content {
      max-width: 1200px;
      margin: 0 auto;
    }

    .component-content h2 {
      font-size: 2rem;
      margin-bottom: 1rem;
      font-weight: 600;
    }

    .component-content p {
      font-size: 1rem;
      line-height: 1.8;
      opacity: 0.9;
    }"""

MEDIA_RULE = """\
    @media (max-width: {max_width}px) {{
      .component {{
        padding: {section_padding};
      }}

      .component-content h2 {{
        font-size: {heading_size};
      }}

      .component-content p {{
        font-size: {body_size};
      }}
    }}"""

SECTION = """
  <section class="component component-{type}" style="{style}">
    <div class="component-content">
      <h2>{title}</h2>
      <p>{content}</p>
    </div>
  </section>
"""

DOCUMENT = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{title}</title>
  <style>
    :root {{
{variables}
    }}

{base_rules}

    /* Responsive Design */
{media_rules}
  </style>
</head>
<body>
  <div class="container">
{sections}
  </div>
</body>
</html>"""


@register_adapter
class MarkupAdapter(ExportAdapter):
    """Renders a design as one static HTML page with embedded CSS."""

    @property
    def format(self) -> ExportFormat:
        return ExportFormat.HTML

    def file_name(self, project_name: str) -> str:
        return f"{project_name}.html"

    def serialize(self, payload: str) -> str:
        return payload

    def render(self, design: CanonicalDesign, context: ExportContext) -> str:
        """Build the HTML document.

        Args:
            design: Components and tokens to render.
            context: Project name (the timestamp is not used).

        Returns:
            str: Complete HTML document.
        """
        return DOCUMENT.format(
            title=escape_html(context.project_name),
            variables=self._css_variables(design),
            base_rules=BASE_RULES,
            media_rules="\n\n".join(
                MEDIA_RULE.format(**vars(bp)) for bp in BREAKPOINTS
            ),
            sections="\n".join(self._section(c) for c in design),
        )

    def _css_variables(self, design: CanonicalDesign) -> str:
        return "\n".join(
            f"  --color-{_CSS_NAME_UNSAFE.sub('', str(name).lower())}: "
            f"{_CSS_UNSAFE.sub('', str(value))};"
            for name, value in design.colors.items()
        )

    def _section(self, component: Component) -> str:
        # Attribute values are escaped as well so a malformed color cannot
        # break out of the style attribute
        style = (
            f"background-color: {component.bg_color}; "
            f"color: {component.text_color}; "
            f"width: {plain_number(component.width)}%; "
            f"height: {plain_number(component.height)}px;"
        )
        return SECTION.format(
            type=escape_html(component.type),
            style=escape_html(style),
            title=escape_html(component.title),
            content=escape_html(component.content),
        )
