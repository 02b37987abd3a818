"""
Discovery engine: runs every entity through the ordered processor chain and
assembles the manifest.

One failing entity never aborts the run. Its error is recorded as a
SkippedEntity and discovery continues with the next one. Entities that never
receive a route are dropped silently since that is ordinary filtering.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from pagemap.helpers.dto.manifest_dto import (
    ComponentRecord,
    DiscoveryInfo,
    DiscoveryResult,
    RecordDraft,
    RouteCollision,
    SkippedEntity,
)
from pagemap.helpers.exceptions import IncompleteRecordError
from pagemap.helpers.json_helper import json_native

if TYPE_CHECKING:
    from pagemap.components.discovery.entity_registry_comp import AttributeSource
    from pagemap.components.discovery.processor_base_comp import Processor
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.entity_dto import EntityFacts

logger = logging.getLogger(__name__)


def manifest_key(record: ComponentRecord) -> str:
    """Manifest key: the final route name, or the entity id when no name resolved."""
    return record.route_name or record.entity_id


def finalize_record(
    draft: RecordDraft,
    entity_id: str,
    custom_meta: Mapping[str, Any] | None = None,
    discovery: DiscoveryInfo | None = None,
) -> ComponentRecord:
    """Turn a completed draft into an immutable record."""
    route, component, navigation = draft.route, draft.component, draft.navigation
    access, seo, stack = draft.access, draft.seo, draft.middleware_stack
    if route is None or component is None or navigation is None or access is None or seo is None or stack is None:
        missing = [
            name
            for name in ("route", "component", "navigation", "access", "seo", "middleware_stack")
            if getattr(draft, name) is None
        ]
        raise IncompleteRecordError(f"Record for {entity_id} is missing: {', '.join(missing)}")

    return ComponentRecord(
        route=route,
        navigation=navigation,
        access=access,
        seo=seo,
        component=component,
        middleware_stack=stack,
        custom_meta=custom_meta,
        discovery=discovery or DiscoveryInfo(),
    )


class DiscoveryEngine:
    """
    Ordered processor chain.

    Processors are sorted once by ascending priority (stable for equal
    priorities) and the order is cached until another processor is added.
    """

    def __init__(self, config: DiscoveryConfig, processors: Iterable[Processor] = ()) -> None:
        self.config = config
        self._registered: list[Processor] = []
        self._ordered: tuple[Processor, ...] | None = None
        for processor in processors:
            self.add_processor(processor)

    def add_processor(self, processor: Processor) -> DiscoveryEngine:
        self._registered.append(processor)
        self._ordered = None
        return self

    @property
    def processors(self) -> tuple[Processor, ...]:
        if self._ordered is None:
            self._ordered = tuple(sorted(self._registered, key=lambda p: p.priority()))
        return self._ordered

    @property
    def processor_names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.processors)

    def process_entity(self, entity: EntityFacts, discovered_at: str | None = None) -> ComponentRecord | None:
        """
        Build one record.

        Returns:
            The record, or None if the entity never received a route

        Raises:
            IncompleteRecordError: processors left a spec unresolved
        """
        draft = RecordDraft()
        for processor in self.processors:
            if not processor.should_process(entity):
                continue
            draft = processor.process(entity, draft)

        if draft.route is None:
            return None

        custom_meta = None
        if entity.custom_meta is not None:
            custom_meta = json_native(dict(entity.custom_meta()))

        return finalize_record(
            draft,
            entity.entity_id,
            custom_meta=custom_meta,
            discovery=DiscoveryInfo(processors=self.processor_names, discovered_at=discovered_at),
        )

    def discover(self, source: AttributeSource) -> DiscoveryResult:
        """Run the pipeline over every entity the source yields."""
        started = time.perf_counter()
        discovered_at = datetime.now(timezone.utc).isoformat()

        manifest: dict[str, ComponentRecord] = {}
        collisions: list[RouteCollision] = []
        skipped: list[SkippedEntity] = []

        for entity_id in source.entity_ids():
            try:
                entity = source.describe(entity_id)
                record = self.process_entity(entity, discovered_at)
            except Exception as e:
                logger.warning("[discovery] Skipping %s: %s", entity_id, e, exc_info=self.config.debug)
                skipped.append(SkippedEntity(entity_id=entity_id, reason=str(e)))
                continue

            if record is None:
                continue

            key = manifest_key(record)
            previous = manifest.get(key)
            if previous is not None:
                collision = RouteCollision(
                    route_name=key,
                    replaced_entity_id=previous.entity_id,
                    winner_entity_id=record.entity_id,
                )
                collisions.append(collision)
                logger.warning(
                    "[discovery] Route name %r claimed by %s and %s; keeping %s",
                    key,
                    previous.entity_id,
                    record.entity_id,
                    record.entity_id,
                )
            manifest[key] = record

        duration = time.perf_counter() - started
        logger.info(
            "[discovery] Discovered %d routes (%d skipped, %d collisions) in %.3fs",
            len(manifest),
            len(skipped),
            len(collisions),
            duration,
        )
        return DiscoveryResult(
            manifest=MappingProxyType(manifest),
            collisions=tuple(collisions),
            skipped=tuple(skipped),
            processors=self.processor_names,
            duration_s=duration,
        )
