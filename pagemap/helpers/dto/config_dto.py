"""
Config domain DTOs.

Typed view over the composed configuration dict. Built once at process
start by ConfigService and passed explicitly into processors and services.

Rules:
- Import only stdlib, typing and sibling DTO modules
- Pure data structures only (no I/O, no config loading)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pagemap.helpers.dto.zone_dto import ZoneRegistry

ROUTE_NAMING_CLASS = "class"
ROUTE_NAMING_URI = "uri"


@dataclass(frozen=True)
class CacheConfig:
    enabled: bool = False
    path: str | None = None


@dataclass(frozen=True)
class SeoDefaults:
    title_suffix: str = ""
    default_description: str | None = None
    default_og_image: str | None = None
    twitter_site: str | None = None
    site_name: str = "pagemap"


@dataclass(frozen=True)
class SitemapConfig:
    base_url: str = ""
    path: str | None = None
    include_last_modified: bool = True
    exclude_zones: tuple[str, ...] = ("admin", "customer", "api")


@dataclass(frozen=True)
class BreadcrumbConfig:
    home_label: str = "Home"
    home_route: str = "home"
    use_translation: bool = False
    translation_prefix: str = "breadcrumbs"


@dataclass(frozen=True)
class NavigationConfig:
    max_depth: int = 3


@dataclass(frozen=True)
class DiscoveryConfig:
    """Everything the discovery pipeline and its consumers need to know."""

    zones: ZoneRegistry = field(default_factory=ZoneRegistry)
    modules: tuple[str, ...] = ()
    exclude: tuple[str, ...] = ()
    route_naming: str = ROUTE_NAMING_CLASS
    naming_root: str = "app.screens"
    auth_tag: str = "auth"
    cache: CacheConfig = field(default_factory=CacheConfig)
    seo: SeoDefaults = field(default_factory=SeoDefaults)
    sitemap: SitemapConfig = field(default_factory=SitemapConfig)
    breadcrumbs: BreadcrumbConfig = field(default_factory=BreadcrumbConfig)
    navigation: NavigationConfig = field(default_factory=NavigationConfig)
    debug: bool = False

    @property
    def default_zone(self) -> str:
        return self.zones.default_zone


@dataclass
class ConfigResult:
    """Result from ConfigService.get_config - wraps the composed configuration dict."""

    config: dict[str, Any]
