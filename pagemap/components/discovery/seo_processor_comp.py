"""
SEO processor (priority 40).

Must run after the access processor: sitemap eligibility and the default
``noindex`` flag both depend on whether the record is public.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from pagemap.components.discovery.processor_base_comp import PRIORITY_SEO, Processor, default_label
from pagemap.helpers.dto.manifest_dto import OpenGraph, SeoSpec, SitemapFrequency
from pagemap.helpers.exceptions import IncompleteRecordError, InvalidAttributeError
from pagemap.helpers.json_helper import json_native

if TYPE_CHECKING:
    from pagemap.helpers.dto.entity_dto import EntityFacts, RawSeo
    from pagemap.helpers.dto.manifest_dto import RecordDraft


def parse_frequency(value: str | SitemapFrequency) -> SitemapFrequency:
    try:
        return SitemapFrequency(value.lower() if isinstance(value, str) else value)
    except ValueError as e:
        raise InvalidAttributeError(f"Unknown sitemap frequency: {value!r}") from e


def parse_priority(value: float) -> float:
    priority = float(value)
    if not 0.0 <= priority <= 1.0:
        raise InvalidAttributeError(f"Sitemap priority must be within [0, 1], got {priority}")
    return priority


class SeoProcessor(Processor):
    default_priority = PRIORITY_SEO

    def process(self, entity: EntityFacts, draft: RecordDraft) -> RecordDraft:
        if draft.route is None:
            return draft
        if draft.access is None:
            raise IncompleteRecordError(f"SEO processing for {entity.entity_id} requires the access rule to be resolved first")

        is_public = draft.access.is_public
        if entity.seo is not None:
            seo = self._resolve(entity.seo, is_public)
        else:
            label = draft.navigation.label if draft.navigation is not None else default_label(entity)
            seo = self._synthesize(label, is_public)
        return dataclasses.replace(draft, seo=seo)

    def _full_title(self, title: str | None) -> str | None:
        if title and self.config.seo.title_suffix:
            return title + self.config.seo.title_suffix
        return title

    def _resolve(self, raw: RawSeo, is_public: bool) -> SeoSpec:
        include = bool(raw.sitemap_include)
        noindex = bool(raw.noindex)
        return SeoSpec(
            title=raw.title,
            full_title=self._full_title(raw.title),
            description=raw.description,
            noindex=noindex,
            nofollow=bool(raw.nofollow),
            sitemap_priority=parse_priority(raw.sitemap_priority),
            sitemap_frequency=parse_frequency(raw.sitemap_frequency),
            sitemap_include=include,
            sitemap_eligible=include and not noindex and is_public,
            canonical=raw.canonical,
            open_graph=OpenGraph(
                title=raw.og_title,
                description=raw.og_description,
                image=raw.og_image or self.config.seo.default_og_image,
                type=raw.og_type,
            ),
            twitter_card_type=raw.twitter_card,
            keywords=tuple(raw.keywords),
            extra_meta=json_native(raw.meta),
        )

    def _synthesize(self, label: str, is_public: bool) -> SeoSpec:
        return SeoSpec(
            title=label,
            full_title=self._full_title(label),
            description=self.config.seo.default_description,
            noindex=not is_public,
            nofollow=False,
            sitemap_include=True,
            sitemap_eligible=is_public,
            open_graph=OpenGraph(image=self.config.seo.default_og_image),
            auto_generated=True,
        )
