"""
MetaService - SEO head tags for a request.

Request state lives in a SeoContext the caller owns, never on the service.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pagemap.components.seo.meta_render_comp import page_title, render_meta_tags, resolve_seo_values

if TYPE_CHECKING:
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.seo_dto import SeoContext
    from pagemap.services.manifest_svc import ManifestService


class MetaService:
    def __init__(self, manifest: ManifestService, config: DiscoveryConfig) -> None:
        self.manifest = manifest
        self.config = config

    def resolve(self, route_name: str | None, context: SeoContext | None = None) -> dict[str, Any]:
        """Resolved SEO values: context overrides > manifest > global fallback."""
        record = self.manifest.get(route_name) if route_name else None
        return resolve_seo_values(
            record.seo if record is not None else None,
            self.config.seo,
            overrides=context.overrides if context is not None else None,
            parameters=context.parameters if context is not None else None,
        )

    def title(self, route_name: str | None, context: SeoContext | None = None) -> str:
        return page_title(self.resolve(route_name, context), self.config.seo.site_name)

    def render(self, route_name: str | None, context: SeoContext | None = None) -> str:
        return render_meta_tags(
            self.resolve(route_name, context),
            self.config.seo,
            base_url=self.config.sitemap.base_url,
            current_url=context.current_url if context is not None else None,
        )
