"""
BreadcrumbService - breadcrumb chains over the current manifest.

Dynamic label resolvers registered here survive manifest reloads; a fresh
chain resolver is built over the current manifest snapshot per call.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pagemap.components.breadcrumbs.breadcrumb_chain_comp import BreadcrumbChainResolver

if TYPE_CHECKING:
    from pagemap.components.breadcrumbs.breadcrumb_chain_comp import LabelResolver, Translator
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.navigation_dto import Breadcrumb
    from pagemap.services.manifest_svc import ManifestService
    from pagemap.services.url_resolver_svc import UrlResolver

logger = logging.getLogger(__name__)


class BreadcrumbService:
    def __init__(
        self,
        manifest: ManifestService,
        config: DiscoveryConfig,
        url_resolver: UrlResolver | None = None,
        translator: Translator | None = None,
    ) -> None:
        self.manifest = manifest
        self.config = config
        self.url_resolver = url_resolver
        self.translator = translator
        self._resolvers: dict[str, LabelResolver] = {}

    def register_resolver(self, pattern: str, resolver: LabelResolver) -> BreadcrumbService:
        """
        Register a dynamic label for a route name or wildcard pattern.

        The resolver receives (route name, parameters) and returns a label, or
        None to fall through to the navigation label.
        """
        self._resolvers[pattern] = resolver
        return self

    def chain_resolver(self) -> BreadcrumbChainResolver:
        url_for = self.url_resolver.url_for if self.url_resolver is not None else None
        resolver = BreadcrumbChainResolver(
            self.manifest.all(),
            self.manifest.find_by_uri,
            url_for=url_for,
            config=self.config.breadcrumbs,
            translator=self.translator,
        )
        for pattern, label_resolver in self._resolvers.items():
            resolver.register_resolver(pattern, label_resolver)
        return resolver

    def generate(self, route_name: str | None, parameters: Mapping[str, Any] | None = None) -> list[Breadcrumb]:
        """Breadcrumbs for ``route_name`` (home first, target last and active)."""
        return self.chain_resolver().generate(route_name, parameters)
