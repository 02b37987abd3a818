"""
Manifest domain DTOs.

A ComponentRecord is the fully-resolved description of one screen: route,
navigation placement, access rule, SEO metadata and the final middleware
stack. The manifest maps final route names to records and is the single
source every consumer (navigation, breadcrumbs, sitemap, access checks)
reads from.

Rules:
- Import only stdlib, typing and sibling DTO modules
- Pure data structures with simple derived properties
- Records are immutable once produced by the pipeline
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pagemap.helpers.dto.zone_dto import ZoneConfig


def robots_directive(noindex: bool, nofollow: bool) -> str:
    """Robots meta content, e.g. "noindex, follow"."""
    return ", ".join(("noindex" if noindex else "index", "nofollow" if nofollow else "follow"))


class RequireMode(str, Enum):
    """How multiple permissions/roles combine."""

    ALL = "all"
    ANY = "any"


class SitemapFrequency(str, Enum):
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True)
class RouteSpec:
    uri_pattern: str
    zone: str
    full_uri: str
    final_name: str
    generated_name: str
    zone_config: ZoneConfig
    declared_name: str | None = None
    extra_middleware: tuple[str, ...] = ()
    path_constraints: Mapping[str, str] = field(default_factory=dict)
    http_methods: tuple[str, ...] = ("GET",)
    domain: str | None = None
    parameter_names: tuple[str, ...] = ()
    required_parameter_names: tuple[str, ...] = ()

    @property
    def has_required_parameter(self) -> bool:
        return bool(self.required_parameter_names)


@dataclass(frozen=True)
class NavigationSpec:
    label: str
    group_path: str | None = None
    group_segments: tuple[str, ...] = ()
    icon: str | None = None
    sort_order: int = 100
    hidden: bool = False
    badge: str | None = None
    badge_color: str | None = None
    parent_route_name: str | None = None
    extra_meta: Mapping[str, Any] = field(default_factory=dict)
    route_name: str | None = None
    has_params: bool = False
    auto_generated: bool = False


@dataclass(frozen=True)
class AccessSpec:
    permissions: tuple[str, ...] = ()
    roles: tuple[str, ...] = ()
    require_mode: RequireMode = RequireMode.ALL
    guard: str | None = None
    authenticated: bool = False
    redirect_route_name: str | None = None
    denied_status_code: int = 403
    has_wildcards: bool = False
    middleware: tuple[str, ...] = ()
    auto_generated: bool = False
    from_zone: str | None = None

    @property
    def is_public(self) -> bool:
        return not self.permissions and not self.roles and not self.authenticated


@dataclass(frozen=True)
class OpenGraph:
    title: str | None = None
    description: str | None = None
    image: str | None = None
    type: str | None = "website"


@dataclass(frozen=True)
class SeoSpec:
    title: str | None = None
    full_title: str | None = None
    description: str | None = None
    noindex: bool = False
    nofollow: bool = False
    sitemap_priority: float = 0.5
    sitemap_frequency: SitemapFrequency = SitemapFrequency.WEEKLY
    sitemap_include: bool = True
    sitemap_eligible: bool = False
    canonical: str | None = None
    open_graph: OpenGraph = field(default_factory=OpenGraph)
    twitter_card_type: str | None = "summary"
    keywords: tuple[str, ...] = ()
    extra_meta: Mapping[str, str] = field(default_factory=dict)
    auto_generated: bool = False

    @property
    def robots(self) -> str:
        return robots_directive(self.noindex, self.nofollow)


@dataclass(frozen=True)
class ComponentIdentity:
    entity_id: str
    short_name: str
    namespace_path: str
    source_path: str | None = None


@dataclass(frozen=True)
class DiscoveryInfo:
    """Pipeline provenance. The timestamp never takes part in equality."""

    processors: tuple[str, ...] = ()
    discovered_at: str | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ComponentRecord:
    route: RouteSpec
    navigation: NavigationSpec
    access: AccessSpec
    seo: SeoSpec
    component: ComponentIdentity
    middleware_stack: tuple[str, ...] = ()
    custom_meta: Mapping[str, Any] | None = None
    discovery: DiscoveryInfo = field(default_factory=DiscoveryInfo)

    @property
    def route_name(self) -> str:
        return self.route.final_name

    @property
    def zone(self) -> str:
        return self.route.zone

    @property
    def full_uri(self) -> str:
        return self.route.full_uri

    @property
    def entity_id(self) -> str:
        return self.component.entity_id


# Resolved route name -> record. Consumers receive read-only mappings.
Manifest = Mapping[str, ComponentRecord]


@dataclass(frozen=True)
class RecordDraft:
    """Record under construction; each processor returns an updated copy."""

    route: RouteSpec | None = None
    component: ComponentIdentity | None = None
    navigation: NavigationSpec | None = None
    access: AccessSpec | None = None
    middleware_stack: tuple[str, ...] | None = None
    seo: SeoSpec | None = None


@dataclass(frozen=True)
class RouteCollision:
    route_name: str
    replaced_entity_id: str
    winner_entity_id: str


@dataclass(frozen=True)
class SkippedEntity:
    entity_id: str
    reason: str


@dataclass(frozen=True)
class DiscoveryResult:
    manifest: Manifest
    collisions: tuple[RouteCollision, ...] = ()
    skipped: tuple[SkippedEntity, ...] = ()
    processors: tuple[str, ...] = ()
    duration_s: float = field(default=0.0, compare=False)


@dataclass(frozen=True)
class ManifestSummary:
    """Route counts for a manifest. ``by_zone`` keeps first-seen zone order."""

    total: int = 0
    public: int = 0
    protected: int = 0
    navigation: int = 0
    sitemap: int = 0
    by_zone: Mapping[str, int] = field(default_factory=dict)
