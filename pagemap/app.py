"""
Application composition root and dependency injection container.

Architecture:
- Application owns: config, manifest repository, URL resolver and every
  manifest consumer (navigation, breadcrumbs, sitemap, meta, access)
- Services are registered via register_service() in __init__
- Access services via: application.get_service("name") or the typed properties
- Do NOT construct services directly in interfaces; go through Application

The process-wide instance is created lazily by get_application().
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Any

from pagemap.services.access_svc import AccessService
from pagemap.services.breadcrumb_svc import BreadcrumbService
from pagemap.services.config_svc import ConfigService
from pagemap.services.manifest_svc import ManifestService
from pagemap.services.meta_svc import MetaService
from pagemap.services.navigation_svc import NavigationService
from pagemap.services.sitemap_svc import SitemapService
from pagemap.services.url_resolver_svc import ManifestUrlResolver

if TYPE_CHECKING:
    from pagemap.components.breadcrumbs.breadcrumb_chain_comp import Translator
    from pagemap.components.discovery.discovery_engine_comp import DiscoveryEngine
    from pagemap.components.discovery.entity_registry_comp import AttributeSource
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.services.url_resolver_svc import UrlResolver

logger = logging.getLogger(__name__)


class Application:
    """
    Composition root.

    Args:
        config_service: Config source (default: a fresh ConfigService)
        source: Attribute source override for discovery
        engine: Discovery engine override
        url_resolver: URL generator override (default: resolve against the manifest)
        translator: Breadcrumb translation lookup
    """

    def __init__(
        self,
        config_service: ConfigService | None = None,
        source: AttributeSource | None = None,
        engine: DiscoveryEngine | None = None,
        url_resolver: UrlResolver | None = None,
        translator: Translator | None = None,
    ) -> None:
        self._config_service = config_service or ConfigService()
        self.config: DiscoveryConfig = self._config_service.get_discovery_config()
        self.services: dict[str, Any] = {}

        manifest = ManifestService(self.config, source=source, engine=engine)
        urls = url_resolver or ManifestUrlResolver(manifest, base_url=self.config.sitemap.base_url)

        self.register_service("config", self._config_service)
        self.register_service("manifest", manifest)
        self.register_service("urls", urls)
        self.register_service("navigation", NavigationService(manifest, self.config, url_resolver=urls))
        self.register_service(
            "breadcrumbs",
            BreadcrumbService(manifest, self.config, url_resolver=urls, translator=translator),
        )
        self.register_service("sitemap", SitemapService(manifest, self.config))
        self.register_service("meta", MetaService(manifest, self.config))
        self.register_service("access", AccessService(manifest))

        logger.debug("[app] Registered services: %s", ", ".join(self.services))

    def register_service(self, name: str, service: Any) -> None:
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """
        Get a registered service by name.

        Raises:
            KeyError: If service not registered
        """
        if name not in self.services:
            raise KeyError(f"Service '{name}' not found. Available services: {list(self.services.keys())}")
        return self.services[name]

    @property
    def manifest(self) -> ManifestService:
        return self.services["manifest"]

    @property
    def navigation(self) -> NavigationService:
        return self.services["navigation"]

    @property
    def breadcrumbs(self) -> BreadcrumbService:
        return self.services["breadcrumbs"]

    @property
    def sitemap(self) -> SitemapService:
        return self.services["sitemap"]

    @property
    def meta(self) -> MetaService:
        return self.services["meta"]

    @property
    def access(self) -> AccessService:
        return self.services["access"]

    @property
    def urls(self) -> UrlResolver:
        return self.services["urls"]


_application: Application | None = None
_application_lock = threading.Lock()


def get_application() -> Application:
    """Process-wide Application, created on first use from the default configuration."""
    global _application
    if _application is None:
        with _application_lock:
            if _application is None:
                _application = Application()
    return _application


def set_application(app: Application | None) -> None:
    """Replace (or reset with None) the process-wide Application."""
    global _application
    with _application_lock:
        _application = app
