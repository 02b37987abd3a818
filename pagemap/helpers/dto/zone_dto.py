"""
Zone domain DTOs.

A zone is a named partition of the application (admin, customer, frontend,
api) with its own URI prefix and default security/navigation policy.

Rules:
- Import only stdlib and typing (no pagemap.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

DEFAULT_MIDDLEWARE_TAG = "web"


@dataclass(frozen=True)
class NavigationDefaults:
    """Navigation group/icon inherited by screens of a zone."""

    group: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class ZoneConfig:
    """Static configuration of one zone. Loaded once at process start."""

    name: str
    uri_prefix: str = ""
    middleware_tags: tuple[str, ...] = (DEFAULT_MIDDLEWARE_TAG,)
    default_permission: str | None = None
    default_role: str | None = None
    guard: str | None = None
    navigation_defaults: NavigationDefaults = field(default_factory=NavigationDefaults)
    rate_limit: str | None = None
    layout: str | None = None
    domain: str | None = None

    @classmethod
    def minimal(cls, name: str, default_middleware: str = DEFAULT_MIDDLEWARE_TAG) -> ZoneConfig:
        """Fallback used for zones that are declared by a screen but not configured."""
        return cls(name=name, uri_prefix="", middleware_tags=(default_middleware,))

    @classmethod
    def from_mapping(
        cls, name: str, data: Mapping[str, Any], default_middleware: str = DEFAULT_MIDDLEWARE_TAG
    ) -> ZoneConfig:
        """Build from a config mapping using the YAML key names; no ``middleware`` key means the default tag."""
        nav = data.get("navigation") or {}
        middleware = data.get("middleware")
        return cls(
            name=name,
            uri_prefix=str(data.get("prefix") or ""),
            middleware_tags=tuple(middleware) if middleware is not None else (default_middleware,),
            default_permission=data.get("default_permission"),
            default_role=data.get("default_role"),
            guard=data.get("guard"),
            navigation_defaults=NavigationDefaults(group=nav.get("group"), icon=nav.get("icon")),
            rate_limit=data.get("rate_limit"),
            layout=data.get("layout"),
            domain=data.get("domain"),
        )


@dataclass(frozen=True)
class ZoneRegistry:
    """Immutable set of configured zones plus the designated default zone."""

    zones: Mapping[str, ZoneConfig] = field(default_factory=dict)
    default_zone: str = "frontend"
    default_middleware: str = DEFAULT_MIDDLEWARE_TAG

    def get(self, name: str) -> ZoneConfig | None:
        return self.zones.get(name)

    def resolve(self, name: str | None) -> ZoneConfig:
        """Return the configured zone, or a minimal fallback if it is not configured."""
        zone_name = name or self.default_zone
        config = self.zones.get(zone_name)
        if config is None:
            return ZoneConfig.minimal(zone_name, self.default_middleware)
        return config

    def names(self) -> list[str]:
        return list(self.zones)

    def __contains__(self, name: object) -> bool:
        return name in self.zones

    def __iter__(self) -> Iterator[ZoneConfig]:
        return iter(self.zones.values())
