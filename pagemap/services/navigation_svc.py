"""
NavigationService - menu trees per zone.

Reads navigation-eligible records from the manifest, filters them by the
actor's access when asked, and hands them to the tree builder.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pagemap.components.access.permission_comp import actor_satisfies
from pagemap.components.navigation.nav_tree_comp import build_nav_tree, flat_nav_items

if TYPE_CHECKING:
    from pagemap.components.access.permission_comp import PermissionChecker
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.manifest_dto import ComponentRecord
    from pagemap.helpers.dto.navigation_dto import NavItem, NavNode
    from pagemap.services.manifest_svc import ManifestService
    from pagemap.services.url_resolver_svc import UrlResolver

logger = logging.getLogger(__name__)


class NavigationService:
    """Builds navigation menus from the manifest."""

    def __init__(
        self,
        manifest: ManifestService,
        config: DiscoveryConfig,
        url_resolver: UrlResolver | None = None,
    ) -> None:
        self.manifest = manifest
        self.config = config
        self.url_resolver = url_resolver

    def _visible(
        self,
        zone: str,
        filter_by_permissions: bool,
        actor: PermissionChecker | None,
    ) -> list[ComponentRecord]:
        records = list(self.manifest.navigation_for_zone(zone).values())
        if filter_by_permissions:
            records = [r for r in records if actor_satisfies(r.access, actor)]
        return records

    def for_zone(
        self,
        zone: str,
        filter_by_permissions: bool = True,
        actor: PermissionChecker | None = None,
        current_route: str | None = None,
    ) -> list[NavNode]:
        """
        Menu tree for one zone.

        Args:
            zone: Zone name
            filter_by_permissions: Drop entries the actor may not open
            actor: Current actor; None means anonymous (only public entries pass)
            current_route: Route being served, for active flags

        Returns:
            Ordered top-level nodes
        """
        records = self._visible(zone, filter_by_permissions, actor)
        url_for = self.url_resolver.url_for if self.url_resolver is not None else None
        return build_nav_tree(records, url_for, current_route, self.config.navigation.max_depth)

    def all(
        self,
        filter_by_permissions: bool = True,
        actor: PermissionChecker | None = None,
        current_route: str | None = None,
    ) -> dict[str, list[NavNode]]:
        """Menu trees for every configured zone."""
        return {
            zone: self.for_zone(zone, filter_by_permissions, actor, current_route)
            for zone in self.config.zones.names()
        }

    def flat_for_zone(
        self,
        zone: str,
        filter_by_permissions: bool = True,
        actor: PermissionChecker | None = None,
        current_route: str | None = None,
    ) -> list[NavItem]:
        """Ungrouped entries for one zone, ordered by sort order."""
        records = self._visible(zone, filter_by_permissions, actor)
        url_for = self.url_resolver.url_for if self.url_resolver is not None else None
        return flat_nav_items(records, url_for, current_route)
