"""
Domain DTOs (Data Transfer Objects) used across multiple layers.

Domain DTOs live in helpers/dto/<domain>_dto.py and form cross-layer contracts
(interfaces -> services -> workflows -> components).

Rules for DTO modules:
- Import only stdlib, typing and sibling DTO modules
- Contain ONLY dataclass/type definitions and simple type aliases
- No I/O, no business logic
"""

from __future__ import annotations

from pagemap.helpers.dto.access_dto import AccessDecision
from pagemap.helpers.dto.config_dto import (
    BreadcrumbConfig,
    CacheConfig,
    DiscoveryConfig,
    NavigationConfig,
    SeoDefaults,
    SitemapConfig,
)
from pagemap.helpers.dto.entity_dto import EntityFacts, RawAccess, RawNavigation, RawRoute, RawSeo
from pagemap.helpers.dto.manifest_dto import (
    AccessSpec,
    ComponentIdentity,
    ComponentRecord,
    DiscoveryInfo,
    DiscoveryResult,
    Manifest,
    NavigationSpec,
    OpenGraph,
    RecordDraft,
    RequireMode,
    RouteCollision,
    RouteSpec,
    SeoSpec,
    SitemapFrequency,
    SkippedEntity,
)
from pagemap.helpers.dto.navigation_dto import Breadcrumb, NavGroup, NavItem, NavNode
from pagemap.helpers.dto.seo_dto import SeoContext
from pagemap.helpers.dto.sitemap_dto import SitemapEntry
from pagemap.helpers.dto.zone_dto import NavigationDefaults, ZoneConfig, ZoneRegistry

__all__ = [
    "AccessDecision",
    "AccessSpec",
    "Breadcrumb",
    "BreadcrumbConfig",
    "CacheConfig",
    "ComponentIdentity",
    "ComponentRecord",
    "DiscoveryConfig",
    "DiscoveryInfo",
    "DiscoveryResult",
    "EntityFacts",
    "Manifest",
    "NavGroup",
    "NavItem",
    "NavNode",
    "NavigationConfig",
    "NavigationDefaults",
    "NavigationSpec",
    "OpenGraph",
    "RawAccess",
    "RawNavigation",
    "RawRoute",
    "RawSeo",
    "RecordDraft",
    "RequireMode",
    "RouteCollision",
    "RouteSpec",
    "SeoContext",
    "SeoDefaults",
    "SeoSpec",
    "SitemapConfig",
    "SitemapEntry",
    "SitemapFrequency",
    "SkippedEntity",
    "ZoneConfig",
    "ZoneRegistry",
]
