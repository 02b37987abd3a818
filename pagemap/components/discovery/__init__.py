"""
Discovery package.
"""

from .access_processor_comp import AccessProcessor
from .discovery_engine_comp import DiscoveryEngine, finalize_record, manifest_key
from .entity_registry_comp import AttributeSource, EntityRegistry, ModuleAttributeSource, default_registry, routable
from .navigation_processor_comp import NavigationProcessor
from .processor_base_comp import PRIORITY_ACCESS, PRIORITY_NAVIGATION, PRIORITY_ROUTE, PRIORITY_SEO, Processor
from .route_processor_comp import RouteProcessor
from .seo_processor_comp import SeoProcessor

__all__ = [
    "PRIORITY_ACCESS",
    "PRIORITY_NAVIGATION",
    "PRIORITY_ROUTE",
    "PRIORITY_SEO",
    "AccessProcessor",
    "AttributeSource",
    "DiscoveryEngine",
    "EntityRegistry",
    "ModuleAttributeSource",
    "NavigationProcessor",
    "Processor",
    "RouteProcessor",
    "SeoProcessor",
    "default_registry",
    "finalize_record",
    "manifest_key",
    "routable",
]
