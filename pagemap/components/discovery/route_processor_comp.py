"""
Route processor (priority 10).

Resolves the declared route against its zone: full URI, parameter names,
generated and final route name. Also records the entity identity. Entities
without a declared route are never processed and never reach the manifest.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING

from pagemap.components.discovery.processor_base_comp import PRIORITY_ROUTE, Processor
from pagemap.components.discovery.uri_pattern_comp import build_full_uri, parse_parameters, strip_parameters
from pagemap.helpers.dto.config_dto import ROUTE_NAMING_URI
from pagemap.helpers.dto.manifest_dto import ComponentIdentity, RouteSpec
from pagemap.helpers.text_helper import class_name_to_slug, unique_ordered

if TYPE_CHECKING:
    from pagemap.helpers.dto.entity_dto import EntityFacts, RawRoute
    from pagemap.helpers.dto.manifest_dto import RecordDraft

logger = logging.getLogger(__name__)


class RouteProcessor(Processor):
    default_priority = PRIORITY_ROUTE

    def should_process(self, entity: EntityFacts) -> bool:
        return entity.route is not None

    def process(self, entity: EntityFacts, draft: RecordDraft) -> RecordDraft:
        raw = entity.route
        if raw is None:
            return draft

        zone_name = raw.zone or self.config.default_zone
        zone_config = self.config.zones.resolve(zone_name)
        if zone_name not in self.config.zones:
            logger.debug("[discovery] Zone %r is not configured; using minimal defaults for %s", zone_name, entity.entity_id)

        names, required = parse_parameters(raw.uri)
        generated = self.generate_route_name(entity, raw, zone_name)

        route = RouteSpec(
            uri_pattern=raw.uri,
            zone=zone_name,
            full_uri=build_full_uri(zone_config.uri_prefix, raw.uri),
            final_name=raw.name or generated,
            generated_name=generated,
            zone_config=zone_config,
            declared_name=raw.name,
            extra_middleware=unique_ordered(raw.middleware),
            path_constraints=dict(raw.where),
            http_methods=tuple(m.upper() for m in raw.methods) or ("GET",),
            domain=raw.domain or zone_config.domain,
            parameter_names=names,
            required_parameter_names=required,
        )
        component = ComponentIdentity(
            entity_id=entity.entity_id,
            short_name=entity.short_name,
            namespace_path=entity.namespace_path,
            source_path=entity.source_path,
        )
        return dataclasses.replace(draft, route=route, component=component)

    def generate_route_name(self, entity: EntityFacts, raw: RawRoute, zone_name: str) -> str:
        """Deterministic name for routes that do not declare one."""
        if self.config.route_naming == ROUTE_NAMING_URI:
            return self._name_from_uri(raw, zone_name)
        return self._name_from_namespace(entity, zone_name)

    def _zone_parts(self, zone_name: str) -> list[str]:
        return [] if zone_name == self.config.default_zone else [zone_name]

    def _name_from_namespace(self, entity: EntityFacts, zone_name: str) -> str:
        parts = self._zone_parts(zone_name)

        root = self.config.naming_root.strip(".")
        namespace = entity.namespace_path
        if root and (namespace == root or namespace.startswith(root + ".")):
            relative = namespace[len(root) :].strip(".")
            parts.extend(class_name_to_slug(p) for p in relative.split(".") if p)

        parts.append(class_name_to_slug(entity.short_name))
        return ".".join(parts)

    def _name_from_uri(self, raw: RawRoute, zone_name: str) -> str:
        return ".".join(self._zone_parts(zone_name) + strip_parameters(raw.uri))
