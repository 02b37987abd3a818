"""
Discovery workflow - build the engine and compute a fresh manifest.

ARCHITECTURE:
- Pure workflow: takes config and an attribute source as parameters
- Does NOT import services or interfaces
- Callers (ManifestService, tests) decide what to do with the result

USAGE:
    from pagemap.workflows.discovery.discover_manifest_wf import discover_manifest_workflow

    result = discover_manifest_workflow(config, source)
    manifest = result.manifest
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pagemap.components.discovery.access_processor_comp import AccessProcessor
from pagemap.components.discovery.discovery_engine_comp import DiscoveryEngine
from pagemap.components.discovery.entity_registry_comp import ModuleAttributeSource
from pagemap.components.discovery.navigation_processor_comp import NavigationProcessor
from pagemap.components.discovery.route_processor_comp import RouteProcessor
from pagemap.components.discovery.seo_processor_comp import SeoProcessor

if TYPE_CHECKING:
    from pagemap.components.discovery.entity_registry_comp import AttributeSource, EntityRegistry
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.manifest_dto import DiscoveryResult

logger = logging.getLogger(__name__)


def create_default_engine(config: DiscoveryConfig) -> DiscoveryEngine:
    """Engine with the four standard processors registered."""
    engine = DiscoveryEngine(config)
    engine.add_processor(RouteProcessor(config))
    engine.add_processor(NavigationProcessor(config))
    engine.add_processor(AccessProcessor(config))
    engine.add_processor(SeoProcessor(config))
    return engine


def create_attribute_source(config: DiscoveryConfig, registry: EntityRegistry | None = None) -> ModuleAttributeSource:
    """Attribute source over the configured modules and exclusion patterns."""
    return ModuleAttributeSource(config.modules, registry=registry, exclude=config.exclude)


def discover_manifest_workflow(
    config: DiscoveryConfig,
    source: AttributeSource | None = None,
    engine: DiscoveryEngine | None = None,
) -> DiscoveryResult:
    """
    Run discovery once.

    Args:
        config: Typed discovery configuration
        source: Attribute source (default: configured modules + default registry)
        engine: Engine to run (default: the four standard processors)

    Returns:
        DiscoveryResult with the read-only manifest, collisions and skipped entities
    """
    if source is None:
        source = create_attribute_source(config)
    if engine is None:
        engine = create_default_engine(config)

    logger.info("[discovery] Running discovery with %s", ", ".join(engine.processor_names))
    result = engine.discover(source)

    for collision in result.collisions:
        logger.debug(
            "[discovery] Collision on %s: %s replaced by %s",
            collision.route_name,
            collision.replaced_entity_id,
            collision.winner_entity_id,
        )
    return result
