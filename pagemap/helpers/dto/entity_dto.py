"""
Entity DTOs: the raw, declared metadata of a routable screen.

These mirror the four declarative attributes a screen can carry (route,
navigation, access, SEO) plus the structural facts the pipeline needs.
Values here are unresolved: zone defaults, generated names and derived
flags are applied later by the processors.

Rules:
- Import only stdlib and typing (no pagemap.* imports)
- Pure data structures only
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RawRoute:
    """Declared route. ``zone=None`` means the configured default zone."""

    uri: str
    name: str | None = None
    zone: str | None = None
    middleware: tuple[str, ...] = ()
    where: Mapping[str, str] = field(default_factory=dict)
    methods: tuple[str, ...] = ("GET",)
    domain: str | None = None


@dataclass(frozen=True)
class RawNavigation:
    """Declared menu placement."""

    label: str
    group: str | None = None
    icon: str | None = None
    sort: int = 100
    hidden: bool = False
    badge: str | None = None
    badge_color: str | None = None
    parent: str | None = None
    meta: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class RawAccess:
    """Declared access rule. ``permission`` and ``roles`` accept a string or a sequence."""

    permission: str | Sequence[str] | None = None
    roles: str | Sequence[str] | None = None
    require: str = "all"
    guard: str | None = None
    authenticated: bool = True
    redirect_to: str | None = None
    http_code: int = 403


@dataclass(frozen=True)
class RawSeo:
    """Declared SEO/sitemap metadata."""

    title: str | None = None
    description: str | None = None
    noindex: bool = False
    nofollow: bool = False
    sitemap_priority: float = 0.5
    sitemap_frequency: str = "weekly"
    sitemap_include: bool = True
    canonical: str | None = None
    og_title: str | None = None
    og_description: str | None = None
    og_image: str | None = None
    og_type: str | None = "website"
    twitter_card: str | None = "summary"
    keywords: tuple[str, ...] = ()
    meta: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EntityFacts:
    """Everything the attribute source knows about one candidate screen."""

    entity_id: str
    short_name: str
    namespace_path: str
    source_path: str | None = None
    route: RawRoute | None = None
    navigation: RawNavigation | None = None
    access: RawAccess | None = None
    seo: RawSeo | None = None
    custom_meta: Callable[[], Mapping[str, Any]] | None = field(default=None, compare=False)

    @property
    def supports_custom_meta(self) -> bool:
        return self.custom_meta is not None
