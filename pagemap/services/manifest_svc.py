"""
ManifestService - owns the manifest lifecycle.

Loads the manifest from the cache artifact when caching is enabled and the
file exists, otherwise computes it with the discovery workflow. The manifest
and its secondary indices are memoized until ``clear()``; indices are built
lazily on their first query.

Thread safety: many concurrent readers, one loader. First access of the
manifest and of each index is guarded by a re-entrant lock with a
double-checked memo, so racing first readers converge on one result.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING

from pagemap.components.discovery.uri_pattern_comp import normalize_uri
from pagemap.components.manifest.manifest_codec_comp import read_manifest_cache
from pagemap.components.manifest.manifest_summary_comp import summarize_manifest
from pagemap.helpers.exceptions import ConfigurationError, ManifestCacheError
from pagemap.workflows.discovery.discover_manifest_wf import discover_manifest_workflow
from pagemap.workflows.manifest.rebuild_manifest_cache_wf import rebuild_manifest_cache_workflow

if TYPE_CHECKING:
    from pagemap.components.discovery.discovery_engine_comp import DiscoveryEngine
    from pagemap.components.discovery.entity_registry_comp import AttributeSource
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.manifest_dto import ComponentRecord, DiscoveryResult, Manifest, ManifestSummary

logger = logging.getLogger(__name__)

RecordFilter = Callable[["ComponentRecord"], bool]


class ManifestService:
    """
    Manifest repository: cache-or-compute loading plus indexed, filtered views.

    Args:
        config: Typed discovery configuration
        source: Attribute source for fresh computation (default: configured modules)
        engine: Discovery engine (default: the four standard processors)
    """

    def __init__(
        self,
        config: DiscoveryConfig,
        source: AttributeSource | None = None,
        engine: DiscoveryEngine | None = None,
    ) -> None:
        self.config = config
        self.source = source
        self.engine = engine
        self._lock = threading.RLock()
        self._manifest: Manifest | None = None
        self._by_uri: dict[str, ComponentRecord] | None = None
        self._by_entity: dict[str, ComponentRecord] | None = None
        self._last_result: DiscoveryResult | None = None
        self._loaded_from_cache = False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @property
    def cache_path(self) -> Path | None:
        return Path(self.config.cache.path) if self.config.cache.path else None

    def is_cached(self) -> bool:
        """True if a cache artifact exists at the configured path."""
        path = self.cache_path
        return path is not None and path.is_file()

    @property
    def loaded_from_cache(self) -> bool:
        return self._loaded_from_cache

    @property
    def last_result(self) -> DiscoveryResult | None:
        """Result of the last fresh discovery run (None if loaded from cache or not loaded)."""
        return self._last_result

    def _manifest_or_load(self) -> Manifest:
        manifest = self._manifest
        if manifest is not None:
            return manifest
        with self._lock:
            if self._manifest is None:
                self._manifest = self._load()
            return self._manifest

    def _load(self) -> Manifest:
        path = self.cache_path
        if self.config.cache.enabled and path is not None and path.is_file():
            try:
                manifest = read_manifest_cache(path)
            except ManifestCacheError as e:
                logger.warning("[manifest] Cache unusable, discovering instead: %s", e)
            else:
                logger.info("[manifest] Loaded %d routes from cache %s", len(manifest), path)
                self._loaded_from_cache = True
                self._last_result = None
                return manifest

        result = discover_manifest_workflow(self.config, source=self.source, engine=self.engine)
        self._loaded_from_cache = False
        self._last_result = result
        return result.manifest

    def clear(self) -> None:
        """Drop the memoized manifest and indices; the next query reloads."""
        with self._lock:
            self._manifest = None
            self._by_uri = None
            self._by_entity = None
            self._last_result = None
            self._loaded_from_cache = False

    # ------------------------------------------------------------------
    # Cache artifact
    # ------------------------------------------------------------------

    def rebuild(self, force: bool = False) -> DiscoveryResult | None:
        """
        Discover fresh and write the cache artifact.

        Returns:
            The persisted result, or None when a cache exists and ``force`` is False

        Raises:
            ConfigurationError: no cache path configured
            OSError: the artifact could not be written
        """
        path = self.cache_path
        if path is None:
            raise ConfigurationError("Manifest cache path not configured (cache.path)")
        if path.exists() and not force:
            logger.info("[manifest] Cache already exists at %s; not regenerating without force", path)
            return None

        with self._lock:
            result = rebuild_manifest_cache_workflow(self.config, path, source=self.source, engine=self.engine)
            self.clear()
            self._manifest = result.manifest
            self._last_result = result
        return result

    def clear_cache(self) -> bool:
        """
        Delete the cache artifact and in-memory state.

        Returns:
            True if a file was removed
        """
        self.clear()
        path = self.cache_path
        if path is None:
            logger.warning("[manifest] Manifest cache path not configured")
            return False
        if not path.exists():
            logger.info("[manifest] No cache at %s", path)
            return False
        path.unlink()
        logger.info("[manifest] Removed cache %s", path)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def all(self) -> Manifest:
        return self._manifest_or_load()

    def get(self, route_name: str) -> ComponentRecord | None:
        return self._manifest_or_load().get(route_name)

    def _uri_index(self) -> dict[str, ComponentRecord]:
        index = self._by_uri
        if index is not None:
            return index
        with self._lock:
            if self._by_uri is None:
                self._by_uri = {record.full_uri: record for record in self._manifest_or_load().values()}
            return self._by_uri

    def _entity_index(self) -> dict[str, ComponentRecord]:
        index = self._by_entity
        if index is not None:
            return index
        with self._lock:
            if self._by_entity is None:
                self._by_entity = {record.entity_id: record for record in self._manifest_or_load().values()}
            return self._by_entity

    def find_by_uri(self, uri: str) -> ComponentRecord | None:
        return self._uri_index().get(normalize_uri(uri))

    def find_by_entity(self, entity_id: str) -> ComponentRecord | None:
        return self._entity_index().get(entity_id)

    def filter(self, predicate: RecordFilter) -> Manifest:
        return MappingProxyType({name: r for name, r in self._manifest_or_load().items() if predicate(r)})

    def by_zone(self, zone: str) -> Manifest:
        return self.filter(lambda r: r.zone == zone)

    def public_routes(self) -> Manifest:
        """Public, sitemap-eligible records outside the sitemap's excluded zones."""
        excluded = set(self.config.sitemap.exclude_zones)
        return self.filter(lambda r: r.access.is_public and r.seo.sitemap_eligible and r.zone not in excluded)

    def navigation_items(self) -> Manifest:
        return self.filter(lambda r: not r.navigation.hidden)

    def navigation_for_zone(self, zone: str) -> Manifest:
        return self.filter(lambda r: r.zone == zone and not r.navigation.hidden)

    def summary(self) -> ManifestSummary:
        return summarize_manifest(self._manifest_or_load())
