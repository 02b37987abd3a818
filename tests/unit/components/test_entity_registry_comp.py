"""Unit tests for EntityRegistry, the routable decorator and ModuleAttributeSource."""

from __future__ import annotations

import pytest

from pagemap.components.discovery.entity_registry_comp import (
    EntityRegistry,
    ModuleAttributeSource,
    entity_id_for,
    routable,
)
from pagemap.helpers.dto.entity_dto import RawNavigation, RawRoute
from pagemap.helpers.exceptions import EntityLoadError
from tests.fixtures import screens

pytestmark = pytest.mark.unit


class TestEntityRegistry:
    def test_decorator_registers_and_returns_target(self, registry: EntityRegistry) -> None:
        @routable(RawRoute("/reports", zone="admin"), navigation=RawNavigation("Reports"), registry=registry)
        class Reports:
            pass

        facts = registry.describe(entity_id_for(Reports))
        assert Reports.__name__ == "Reports"
        assert facts.short_name == "Reports"
        assert facts.route == RawRoute("/reports", zone="admin")
        assert facts.navigation == RawNavigation("Reports")

    def test_string_route_means_default_zone_uri(self, registry: EntityRegistry) -> None:
        @routable("/about", registry=registry)
        class About:
            pass

        facts = registry.describe(entity_id_for(About))
        assert facts.route == RawRoute(uri="/about")

    def test_functions_can_be_registered(self, registry: EntityRegistry) -> None:
        @routable("/health", registry=registry, entity_id="health")
        def health():
            return "ok"

        assert "health" in registry
        assert registry.describe("health").short_name == "health"

    def test_registration_order_is_kept_on_replace(self, registry: EntityRegistry) -> None:
        class A:
            pass

        class B:
            pass

        registry.register(A, "/a", entity_id="a")
        registry.register(B, "/b", entity_id="b")
        registry.register(A, "/a2", entity_id="a")

        assert registry.entity_ids() == ["a", "b"]
        assert registry.describe("a").route == RawRoute(uri="/a2")

    def test_describe_unknown_raises(self, registry: EntityRegistry) -> None:
        with pytest.raises(EntityLoadError):
            registry.describe("missing")

    def test_remove_and_clear(self, registry: EntityRegistry) -> None:
        class A:
            pass

        registry.register(A, "/a", entity_id="a")
        registry.register(A, "/b", entity_id="b")
        registry.remove("a")
        assert len(registry) == 1
        registry.clear()
        assert len(registry) == 0

    def test_custom_meta_provider_is_detected(self, sample_registry: EntityRegistry) -> None:
        facts = sample_registry.describe(entity_id_for(screens.UsersShow))
        assert facts.supports_custom_meta
        assert facts.custom_meta is not None
        assert facts.custom_meta()["model"] == "User"


class TestModuleAttributeSource:
    def test_imports_modules_and_lists_entities(self, sample_registry: EntityRegistry) -> None:
        source = ModuleAttributeSource(["tests.fixtures.screens"], registry=sample_registry)
        ids = source.entity_ids()

        assert entity_id_for(screens.Dashboard) in ids
        assert source.failed_modules == {}

    def test_exclusion_patterns(self, sample_registry: EntityRegistry) -> None:
        source = ModuleAttributeSource([], registry=sample_registry, exclude=["*.Users*"])
        ids = source.entity_ids()

        assert entity_id_for(screens.UsersIndex) not in ids
        assert entity_id_for(screens.UsersShow) not in ids
        assert entity_id_for(screens.Dashboard) in ids

    def test_failed_import_is_recorded_not_raised(self, registry: EntityRegistry) -> None:
        source = ModuleAttributeSource(["tests.fixtures.does_not_exist"], registry=registry)

        assert source.entity_ids() == []
        assert "tests.fixtures.does_not_exist" in source.failed_modules
