"""HTML escaping for markup output."""

from design_export.markup.lib import escape_html

__all__ = ["escape_html"]
