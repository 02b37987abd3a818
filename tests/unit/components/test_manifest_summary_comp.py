"""Unit tests for manifest route counts."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from pagemap.components.manifest.manifest_summary_comp import summarize_manifest
from pagemap.helpers.dto.manifest_dto import DiscoveryResult, ManifestSummary

pytestmark = pytest.mark.unit


class TestSummarizeManifest:
    def test_sample_counts(self, sample_result: DiscoveryResult) -> None:
        summary = summarize_manifest(sample_result.manifest)

        assert summary.total == 6
        assert summary.public == 2
        assert summary.protected == 4
        assert summary.navigation == 4
        assert summary.sitemap == 2

    def test_zones_in_first_seen_order(self, sample_result: DiscoveryResult) -> None:
        by_zone = summarize_manifest(sample_result.manifest).by_zone

        assert list(by_zone.items()) == [("admin", 3), ("customer", 1), ("frontend", 2)]
        assert sum(by_zone.values()) == len(sample_result.manifest)

    def test_empty_manifest(self) -> None:
        assert summarize_manifest(MappingProxyType({})) == ManifestSummary()
