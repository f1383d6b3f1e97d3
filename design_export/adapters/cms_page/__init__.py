"""CMS page export (webflow)."""

from design_export.adapters.cms_page.lib import CmsPageAdapter, short_name

__all__ = ["CmsPageAdapter", "short_name"]
