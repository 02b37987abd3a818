"""Rebuild manifest cache workflow - compute fresh and persist the cache artifact."""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

from pagemap.components.manifest.manifest_codec_comp import write_manifest_cache
from pagemap.workflows.discovery.discover_manifest_wf import discover_manifest_workflow

if TYPE_CHECKING:
    from pagemap.components.discovery.discovery_engine_comp import DiscoveryEngine
    from pagemap.components.discovery.entity_registry_comp import AttributeSource
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.manifest_dto import DiscoveryResult

logger = logging.getLogger(__name__)


def rebuild_manifest_cache_workflow(
    config: DiscoveryConfig,
    cache_path: str | os.PathLike[str],
    source: AttributeSource | None = None,
    engine: DiscoveryEngine | None = None,
) -> DiscoveryResult:
    """
    Discover and write the manifest to ``cache_path``.

    Args:
        config: Typed discovery configuration
        cache_path: Destination of the cache artifact
        source: Attribute source override
        engine: Engine override

    Returns:
        The DiscoveryResult that was persisted

    Raises:
        OSError: the cache file could not be written
    """
    logger.info("[cache] Rebuilding manifest cache at %s", cache_path)

    result = discover_manifest_workflow(config, source=source, engine=engine)
    write_manifest_cache(cache_path, result.manifest)

    logger.info("[cache] Cached %d routes (%d skipped)", len(result.manifest), len(result.skipped))
    return result
