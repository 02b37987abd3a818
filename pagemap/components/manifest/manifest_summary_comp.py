"""Route counts over a manifest, for reporting after discovery."""

from __future__ import annotations

from collections import Counter

from pagemap.helpers.dto.manifest_dto import Manifest, ManifestSummary


def summarize_manifest(manifest: Manifest) -> ManifestSummary:
    """
    Count routes by access, menu visibility, sitemap eligibility and zone.

    Every record is either public or protected. Navigation counts records
    not hidden from menus; sitemap counts sitemap-eligible records.
    """
    records = list(manifest.values())
    public = sum(1 for r in records if r.access.is_public)
    return ManifestSummary(
        total=len(records),
        public=public,
        protected=len(records) - public,
        navigation=sum(1 for r in records if not r.navigation.hidden),
        sitemap=sum(1 for r in records if r.seo.sitemap_eligible),
        by_zone=dict(Counter(r.zone for r in records)),
    )
