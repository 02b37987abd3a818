"""
Processor contract for the discovery pipeline.

Each processor derives one kind of metadata (route, navigation, access, SEO)
for a record. Processors run in ascending priority; later processors read
what earlier ones produced on the draft, so the order is a hard dependency:
route (10) -> navigation (20) -> access (30) -> SEO (40).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from pagemap.helpers.text_helper import class_name_to_label

if TYPE_CHECKING:
    from pagemap.helpers.dto.config_dto import DiscoveryConfig
    from pagemap.helpers.dto.entity_dto import EntityFacts
    from pagemap.helpers.dto.manifest_dto import RecordDraft

PRIORITY_ROUTE = 10
PRIORITY_NAVIGATION = 20
PRIORITY_ACCESS = 30
PRIORITY_SEO = 40


class Processor(ABC):
    """Base processor. Subclasses set ``default_priority`` and implement ``process``."""

    default_priority: int = 100

    def __init__(self, config: DiscoveryConfig) -> None:
        self.config = config

    @property
    def name(self) -> str:
        return type(self).__name__

    def priority(self) -> int:
        return self.default_priority

    def should_process(self, entity: EntityFacts) -> bool:
        return True

    @abstractmethod
    def process(self, entity: EntityFacts, draft: RecordDraft) -> RecordDraft:
        """Return an updated copy of ``draft`` with this processor's fragment applied."""


def default_label(entity: EntityFacts) -> str:
    """Label synthesized from the entity's short name when none is declared."""
    return class_name_to_label(entity.short_name) or entity.short_name
