"""
Services package.
"""

from .access_svc import AccessService
from .breadcrumb_svc import BreadcrumbService
from .config_svc import ConfigService
from .manifest_svc import ManifestService
from .meta_svc import MetaService
from .navigation_svc import NavigationService
from .sitemap_svc import SitemapService
from .url_resolver_svc import ManifestUrlResolver, UrlResolver

__all__ = [
    "AccessService",
    "BreadcrumbService",
    "ConfigService",
    "ManifestService",
    "ManifestUrlResolver",
    "MetaService",
    "NavigationService",
    "SitemapService",
    "UrlResolver",
]
