"""
Navigation and breadcrumb DTOs produced for rendering.

Rules:
- Import only stdlib and typing (no pagemap.* imports)
- Pure data structures only
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class NavItem:
    """A leaf menu entry."""

    label: str
    route_name: str | None
    url: str | None
    icon: str | None = None
    sort_order: int = 100
    badge: str | None = None
    badge_color: str | None = None
    active: bool = False
    has_params: bool = False
    meta: Mapping[str, Any] = field(default_factory=dict)
    depth: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "item",
            "label": self.label,
            "route_name": self.route_name,
            "url": self.url,
            "icon": self.icon,
            "sort": self.sort_order,
            "badge": self.badge,
            "badge_color": self.badge_color,
            "active": self.active,
            "has_params": self.has_params,
            "meta": dict(self.meta),
            "depth": self.depth,
        }


@dataclass(frozen=True)
class NavGroup:
    """A menu group; its sort order is the minimum of everything beneath it."""

    label: str
    sort_order: int
    depth: int = 0
    children: tuple[NavNode, ...] = ()

    @property
    def items(self) -> list[NavItem]:
        return [c for c in self.children if isinstance(c, NavItem)]

    @property
    def groups(self) -> list[NavGroup]:
        return [c for c in self.children if isinstance(c, NavGroup)]

    @property
    def is_active(self) -> bool:
        return any(c.is_active if isinstance(c, NavGroup) else c.active for c in self.children)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "group",
            "label": self.label,
            "sort": self.sort_order,
            "depth": self.depth,
            "active": self.is_active,
            "children": [c.to_dict() for c in self.children],
        }


NavNode = Union[NavItem, NavGroup]


@dataclass(frozen=True)
class Breadcrumb:
    label: str
    url: str | None
    active: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"label": self.label, "url": self.url, "active": self.active}
