"""
Sitemap package.
"""

from .sitemap_comp import SITEMAP_NAMESPACE, render_sitemap_xml, sitemap_entries

__all__ = [
    "SITEMAP_NAMESPACE",
    "render_sitemap_xml",
    "sitemap_entries",
]
