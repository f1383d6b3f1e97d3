"""Static HTML/CSS export (html)."""

from design_export.adapters.markup_page.lib import BREAKPOINTS, Breakpoint, MarkupAdapter

__all__ = ["BREAKPOINTS", "Breakpoint", "MarkupAdapter"]
