"""Unit tests for breadcrumb chain resolution."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from pagemap.components.breadcrumbs.breadcrumb_chain_comp import BreadcrumbChainResolver, uri_prefixes
from pagemap.components.discovery.entity_registry_comp import EntityRegistry
from pagemap.components.discovery.uri_pattern_comp import fill_uri
from pagemap.helpers.dto.config_dto import BreadcrumbConfig
from pagemap.helpers.dto.entity_dto import RawNavigation, RawRoute
from pagemap.helpers.dto.manifest_dto import DiscoveryResult, Manifest
from pagemap.helpers.exceptions import UrlGenerationError

pytestmark = pytest.mark.unit


def _resolver(manifest: Manifest, **kwargs: Any) -> BreadcrumbChainResolver:
    by_uri = {record.full_uri: record for record in manifest.values()}

    def url_for(name: str, params: Mapping[str, Any]) -> str:
        record = manifest.get(name)
        if record is None:
            raise UrlGenerationError(f"Route [{name}] not defined")
        return fill_uri(record.full_uri, params)[0]

    return BreadcrumbChainResolver(manifest, by_uri.get, url_for=url_for, **kwargs)


def _register(registry: EntityRegistry, name: str, uri: str, navigation: RawNavigation) -> None:
    registry.register(object, RawRoute(uri, name=name), navigation=navigation, entity_id=name)


class TestUriPrefixes:
    def test_parameter_segments_are_skipped(self) -> None:
        assert uri_prefixes("/admin/users/{user}") == ["/admin", "/admin/users"]

    def test_root(self) -> None:
        assert uri_prefixes("/") == []


class TestGenerate:
    def test_explicit_parent_chain(self, sample_result: DiscoveryResult) -> None:
        crumbs = _resolver(sample_result.manifest).generate("admin.users.show", {"user": 5})

        assert [c.label for c in crumbs] == ["Home", "All Users", "User Detail"]
        assert [c.url for c in crumbs] == ["/", "/admin/users", "/admin/users/5"]
        assert [c.active for c in crumbs] == [False, False, True]

    def test_home_route_is_not_repeated(self, sample_result: DiscoveryResult) -> None:
        crumbs = _resolver(sample_result.manifest).generate("home")

        assert [c.label for c in crumbs] == ["Home"]
        assert crumbs[0].active is True

    def test_unknown_route_gives_active_home(self, sample_result: DiscoveryResult) -> None:
        for target in ("nope", None):
            crumbs = _resolver(sample_result.manifest).generate(target)
            assert len(crumbs) == 1
            assert crumbs[0].label == "Home"
            assert crumbs[0].active is True

    def test_missing_parameter_leaves_url_empty(self, sample_result: DiscoveryResult) -> None:
        crumbs = _resolver(sample_result.manifest).generate("admin.users.show")
        assert crumbs[-1].url is None

    def test_ancestors_inferred_from_uri(self, engine, registry: EntityRegistry) -> None:
        """/users/{user}/edit has no parent link; /users is found by URI prefix."""
        _register(registry, "users", "/users", RawNavigation("Users"))
        _register(registry, "users.edit", "/users/{user}/edit", RawNavigation("Edit"))
        manifest = engine.discover(registry).manifest

        crumbs = _resolver(manifest).generate("users.edit", {"user": 7})
        assert [c.label for c in crumbs] == ["Home", "Users", "Edit"]
        assert crumbs[-1].url == "/users/7/edit"

    def test_parameterized_parent_found_by_static_prefix(self, engine, registry: EntityRegistry) -> None:
        _register(registry, "users", "/admin/users", RawNavigation("Users"))
        _register(registry, "users.show", "/admin/users/{user}", RawNavigation("Show"))
        manifest = engine.discover(registry).manifest

        assert [c.label for c in _resolver(manifest).generate("users.show", {"user": 1})] == ["Home", "Users", "Show"]

    def test_parent_cycle_terminates(self, engine, registry: EntityRegistry) -> None:
        _register(registry, "a", "/a", RawNavigation("A", parent="b"))
        _register(registry, "b", "/b", RawNavigation("B", parent="a"))
        manifest = engine.discover(registry).manifest

        crumbs = _resolver(manifest).generate("a")
        assert [c.label for c in crumbs] == ["Home", "B", "A"]

    def test_self_parent_terminates(self, engine, registry: EntityRegistry) -> None:
        _register(registry, "a", "/a", RawNavigation("A", parent="a"))
        manifest = engine.discover(registry).manifest

        assert [c.label for c in _resolver(manifest).generate("a")] == ["Home", "A"]

    def test_unknown_parent_stops_chain(self, engine, registry: EntityRegistry) -> None:
        _register(registry, "a", "/a", RawNavigation("A", parent="ghost"))
        manifest = engine.discover(registry).manifest

        assert [c.label for c in _resolver(manifest).generate("a")] == ["Home", "A"]


class TestLabels:
    def test_placeholders_filled_from_parameters(self, engine, registry: EntityRegistry) -> None:
        _register(registry, "order", "/orders/{order}", RawNavigation("Order #{order}"))
        manifest = engine.discover(registry).manifest

        assert _resolver(manifest).generate("order", {"order": 42})[-1].label == "Order #42"

    def test_dynamic_resolver_takes_precedence(self, sample_result: DiscoveryResult) -> None:
        resolver = _resolver(sample_result.manifest)
        resolver.register_resolver("admin.users.show", lambda name, params: f"User {params['user']}")

        assert resolver.generate("admin.users.show", {"user": 9})[-1].label == "User 9"

    def test_resolver_returning_none_falls_through(self, sample_result: DiscoveryResult) -> None:
        resolver = _resolver(sample_result.manifest)
        resolver.register_resolver("admin.*", lambda name, params: None)

        assert resolver.generate("admin.users.index")[-1].label == "All Users"

    def test_translation_used_when_enabled(self, sample_result: DiscoveryResult) -> None:
        translations = {"crumbs.home": "Domů", "crumbs.admin.users.index": "Uživatelé"}
        resolver = _resolver(
            sample_result.manifest,
            config=BreadcrumbConfig(use_translation=True, translation_prefix="crumbs"),
            translator=translations.get,
        )
        crumbs = resolver.generate("admin.users.show", {"user": 1})

        assert [c.label for c in crumbs] == ["Domů", "Uživatelé", "User Detail"]

    def test_translation_ignored_when_disabled(self, sample_result: DiscoveryResult) -> None:
        resolver = _resolver(sample_result.manifest, translator=lambda key: "translated")
        assert resolver.generate("admin.users.index")[-1].label == "All Users"
