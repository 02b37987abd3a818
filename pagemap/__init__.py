"""
pagemap - screen discovery and manifest builder.

Annotated screens register route/navigation/access/SEO descriptors; the
discovery pipeline resolves them against zone defaults into a manifest that
navigation, breadcrumbs, sitemap and access checks read from.
"""

from pagemap.__version__ import __version__

__all__ = ["__version__"]
