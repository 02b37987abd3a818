"""
SEO package.
"""

from .meta_render_comp import page_title, render_meta_tags, resolve_seo_values

__all__ = [
    "page_title",
    "render_meta_tags",
    "resolve_seo_values",
]
