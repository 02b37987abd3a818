"""
Breadcrumbs package.
"""

from .breadcrumb_chain_comp import BreadcrumbChainResolver, LabelResolver, uri_prefixes

__all__ = [
    "BreadcrumbChainResolver",
    "LabelResolver",
    "uri_prefixes",
]
