"""Unit tests for ManifestService loading, caching and queries."""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from pagemap.components.discovery.entity_registry_comp import EntityRegistry
from pagemap.helpers.dto.config_dto import DiscoveryConfig
from pagemap.helpers.exceptions import ConfigurationError
from pagemap.services import manifest_svc
from pagemap.services.config_svc import ConfigService
from pagemap.services.manifest_svc import ManifestService
from tests.fixtures.screens import SAMPLE_ROUTE_NAMES

pytestmark = pytest.mark.unit


class TestManifestLoading:
    def test_computes_when_no_cache(self, manifest_service: ManifestService) -> None:
        assert sorted(manifest_service.all()) == sorted(SAMPLE_ROUTE_NAMES)
        assert manifest_service.loaded_from_cache is False
        assert manifest_service.last_result is not None

    def test_loads_from_cache_when_present(
        self, manifest_service: ManifestService, discovery_config: DiscoveryConfig, cache_file: Path
    ) -> None:
        manifest_service.rebuild()
        assert cache_file.is_file()

        # an empty source proves the records come from the artifact
        cached = ManifestService(discovery_config, source=EntityRegistry())
        assert dict(cached.all()) == dict(manifest_service.all())
        assert cached.loaded_from_cache is True
        assert cached.last_result is None

    def test_cache_ignored_when_disabled(self, config_overrides, manifest_service: ManifestService) -> None:
        manifest_service.rebuild()
        config_overrides["cache"]["enabled"] = False
        config = ConfigService(overrides=config_overrides).get_discovery_config()

        fresh = ManifestService(config, source=EntityRegistry())
        assert len(fresh.all()) == 0
        assert fresh.loaded_from_cache is False

    def test_corrupt_cache_falls_back_to_discovery(self, manifest_service: ManifestService, cache_file: Path) -> None:
        cache_file.parent.mkdir(parents=True)
        cache_file.write_text("{not json", encoding="utf-8")

        assert sorted(manifest_service.all()) == sorted(SAMPLE_ROUTE_NAMES)
        assert manifest_service.loaded_from_cache is False

    def test_manifest_is_memoized_until_clear(self, manifest_service: ManifestService) -> None:
        first = manifest_service.all()
        assert manifest_service.all() is first

        manifest_service.clear()
        assert manifest_service.all() is not first

    def test_concurrent_first_access_discovers_once(
        self, manifest_service: ManifestService, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        calls = []
        original = manifest_svc.discover_manifest_workflow
        barrier = threading.Barrier(8)

        def counting_workflow(*args, **kwargs):
            calls.append(1)
            return original(*args, **kwargs)

        def first_query(_: int):
            barrier.wait()
            return manifest_service.find_by_uri("/admin/dashboard")

        monkeypatch.setattr(manifest_svc, "discover_manifest_workflow", counting_workflow)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(first_query, range(8)))

        assert len(calls) == 1
        assert all(r is results[0] for r in results)
        assert results[0].route_name == "admin.dashboard"

    def test_concurrent_entity_lookups_build_index_once(
        self, manifest_service: ManifestService, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        manifest_service.all()
        builds = []
        original = manifest_service._manifest_or_load
        barrier = threading.Barrier(8)

        def counting_load():
            # only an index build reaches the manifest from find_by_entity
            builds.append(1)
            return original()

        def first_lookup(_: int):
            barrier.wait()
            return manifest_service.find_by_entity("tests.fixtures.screens.Dashboard")

        monkeypatch.setattr(manifest_service, "_manifest_or_load", counting_load)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(first_lookup, range(8)))

        assert len(builds) == 1
        assert all(r is results[0] for r in results)
        assert results[0].route_name == "admin.dashboard"
        assert manifest_service.find_by_entity("tests.fixtures.screens.Missing") is None
        assert len(builds) == 1


class TestManifestCacheArtifact:
    def test_rebuild_writes_cache(self, manifest_service: ManifestService, cache_file: Path) -> None:
        result = manifest_service.rebuild()

        assert result is not None
        assert cache_file.is_file()
        assert manifest_service.is_cached()
        assert sorted(result.manifest) == sorted(SAMPLE_ROUTE_NAMES)

    def test_rebuild_without_force_keeps_existing(self, manifest_service: ManifestService, cache_file: Path) -> None:
        manifest_service.rebuild()
        cache_file.write_text("sentinel", encoding="utf-8")

        assert manifest_service.rebuild() is None
        assert cache_file.read_text(encoding="utf-8") == "sentinel"

        assert manifest_service.rebuild(force=True) is not None
        assert cache_file.read_text(encoding="utf-8") != "sentinel"

    def test_rebuild_needs_a_path(self, config_overrides, sample_registry: EntityRegistry) -> None:
        config_overrides["cache"]["path"] = None
        config = ConfigService(overrides=config_overrides).get_discovery_config()

        with pytest.raises(ConfigurationError, match="cache.path"):
            ManifestService(config, source=sample_registry).rebuild()

    def test_clear_cache(self, manifest_service: ManifestService, cache_file: Path) -> None:
        manifest_service.rebuild()

        assert manifest_service.clear_cache() is True
        assert not cache_file.exists()
        assert manifest_service.clear_cache() is False


class TestManifestQueries:
    def test_get(self, manifest_service: ManifestService) -> None:
        assert manifest_service.get("home").full_uri == "/"
        assert manifest_service.get("missing") is None

    def test_find_by_uri_normalizes(self, manifest_service: ManifestService) -> None:
        assert manifest_service.find_by_uri("admin//users/").route_name == "admin.users.index"
        assert manifest_service.find_by_uri("/admin/users/{user}").route_name == "admin.users.show"
        assert manifest_service.find_by_uri("/nowhere") is None

    def test_find_by_entity(self, manifest_service: ManifestService) -> None:
        record = manifest_service.find_by_entity("tests.fixtures.screens.Dashboard")
        assert record is not None
        assert record.route_name == "admin.dashboard"

    def test_by_zone(self, manifest_service: ManifestService) -> None:
        assert sorted(manifest_service.by_zone("admin")) == ["admin.dashboard", "admin.users.index", "admin.users.show"]

    def test_public_routes(self, manifest_service: ManifestService) -> None:
        assert sorted(manifest_service.public_routes()) == ["about-page", "home"]

    def test_navigation_views_skip_hidden(self, manifest_service: ManifestService) -> None:
        assert sorted(manifest_service.navigation_for_zone("admin")) == ["admin.dashboard", "admin.users.index"]
        assert "about-page" not in manifest_service.navigation_items()

    def test_filter_views_are_read_only(self, manifest_service: ManifestService) -> None:
        view = manifest_service.filter(lambda r: True)
        with pytest.raises(TypeError):
            view["x"] = None  # type: ignore[index]

    def test_summary_agrees_with_views(self, manifest_service: ManifestService) -> None:
        summary = manifest_service.summary()

        assert summary.total == len(manifest_service.all())
        assert summary.navigation == len(manifest_service.navigation_items())
        assert summary.by_zone["admin"] == len(manifest_service.by_zone("admin"))
