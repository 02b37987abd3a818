"""
FastAPI dependency injection helpers for web endpoints.

ARCHITECTURE:
- Endpoints ONLY inject services, obtained from the process-wide Application
- Endpoints are thin presentation layers that call services and format responses
- Tests swap the Application with pagemap.app.set_application()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.services.breadcrumb_svc import BreadcrumbService
    from pagemap.services.manifest_svc import ManifestService
    from pagemap.services.meta_svc import MetaService
    from pagemap.services.navigation_svc import NavigationService
    from pagemap.services.sitemap_svc import SitemapService


def get_discovery_config() -> DiscoveryConfig:
    """Get the typed configuration the Application was built with."""
    from pagemap.app import get_application

    return get_application().config


def get_manifest_service() -> ManifestService:
    """Get ManifestService instance."""
    from pagemap.app import get_application

    return get_application().manifest


def get_navigation_service() -> NavigationService:
    """Get NavigationService instance."""
    from pagemap.app import get_application

    return get_application().navigation


def get_breadcrumb_service() -> BreadcrumbService:
    from pagemap.app import get_application

    return get_application().breadcrumbs


def get_sitemap_service() -> SitemapService:
    from pagemap.app import get_application

    return get_application().sitemap


def get_meta_service() -> MetaService:
    from pagemap.app import get_application

    return get_application().meta
