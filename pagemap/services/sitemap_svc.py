"""SitemapService - sitemap entries and XML from the manifest's public routes."""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING

from pagemap.components.sitemap.sitemap_comp import render_sitemap_xml, sitemap_entries
from pagemap.helpers.exceptions import ConfigurationError

if TYPE_CHECKING:
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.sitemap_dto import SitemapEntry
    from pagemap.services.manifest_svc import ManifestService

logger = logging.getLogger(__name__)


class SitemapService:
    def __init__(self, manifest: ManifestService, config: DiscoveryConfig) -> None:
        self.manifest = manifest
        self.config = config

    def _last_modified(self) -> str | None:
        if not self.config.sitemap.include_last_modified:
            return None
        return datetime.now(timezone.utc).isoformat(timespec="seconds")

    def entries(self) -> list[SitemapEntry]:
        """Entries ordered by priority (highest first), then location."""
        return sitemap_entries(
            self.manifest.public_routes().values(),
            base_url=self.config.sitemap.base_url,
            last_modified=self._last_modified(),
        )

    def count(self) -> int:
        return len(self.entries())

    def generate(self) -> str:
        return render_sitemap_xml(self.entries())

    def save(self, path: str | os.PathLike[str] | None = None) -> Path:
        """
        Write the sitemap, creating parent directories.

        Raises:
            ConfigurationError: no path given and none configured
            OSError: the file could not be written
        """
        target = path or self.config.sitemap.path
        if not target:
            raise ConfigurationError("Sitemap path not configured (sitemap.path)")

        out = Path(target)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(self.generate(), encoding="utf-8")
        logger.info("[sitemap] Wrote %s", out)
        return out
