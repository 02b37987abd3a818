"""Unit tests for the navigation, access and SEO processors."""

from __future__ import annotations

import dataclasses

import pytest

from pagemap.components.discovery.access_processor_comp import AccessProcessor, as_tuple
from pagemap.components.discovery.navigation_processor_comp import AUTO_SORT_ORDER, NavigationProcessor
from pagemap.components.discovery.route_processor_comp import RouteProcessor
from pagemap.components.discovery.seo_processor_comp import SeoProcessor
from pagemap.helpers.dto.config_dto import DiscoveryConfig
from pagemap.helpers.dto.entity_dto import EntityFacts, RawAccess, RawNavigation, RawRoute, RawSeo
from pagemap.helpers.dto.manifest_dto import RecordDraft, RequireMode, SitemapFrequency
from pagemap.helpers.exceptions import IncompleteRecordError, InvalidAttributeError


def _entity(
    route: RawRoute | None = None,
    navigation: RawNavigation | None = None,
    access: RawAccess | None = None,
    seo: RawSeo | None = None,
    short_name: str = "ReportsPage",
) -> EntityFacts:
    return EntityFacts(
        entity_id=f"app.screens.{short_name}",
        short_name=short_name,
        namespace_path="app.screens",
        route=route,
        navigation=navigation,
        access=access,
        seo=seo,
    )


def _run(config: DiscoveryConfig, entity: EntityFacts, *processor_types) -> RecordDraft:
    draft = RecordDraft()
    for processor_type in processor_types:
        draft = processor_type(config).process(entity, draft)
    return draft


class TestNavigationProcessor:
    @pytest.mark.unit
    def test_explicit_navigation_inherits_zone_group_and_icon(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/reports", zone="admin"), RawNavigation("Reports", sort=5))
        nav = _run(discovery_config, entity, RouteProcessor, NavigationProcessor).navigation

        assert nav is not None
        assert nav.label == "Reports"
        assert nav.group_path == "Administration"
        assert nav.icon == "cog"
        assert nav.sort_order == 5
        assert nav.auto_generated is False

    @pytest.mark.unit
    def test_declared_group_and_icon_override_zone(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/reports", zone="admin"), RawNavigation("Reports", group="Stats.Monthly", icon="chart"))
        nav = _run(discovery_config, entity, RouteProcessor, NavigationProcessor).navigation

        assert nav is not None
        assert nav.group_segments == ("Stats", "Monthly")
        assert nav.icon == "chart"

    @pytest.mark.unit
    def test_synthesized_navigation_is_hidden(self, discovery_config: DiscoveryConfig) -> None:
        """Screens without navigation still get a label, but never show in menus."""
        nav = _run(discovery_config, _entity(RawRoute("/reports")), RouteProcessor, NavigationProcessor).navigation

        assert nav is not None
        assert nav.hidden is True
        assert nav.auto_generated is True
        assert nav.label == "Reports"
        assert nav.sort_order == AUTO_SORT_ORDER

    @pytest.mark.unit
    def test_has_params_follows_required_parameters(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/reports/{year}"), RawNavigation("Year"))
        nav = _run(discovery_config, entity, RouteProcessor, NavigationProcessor).navigation

        assert nav is not None
        assert nav.has_params is True

    @pytest.mark.unit
    def test_no_route_leaves_draft_alone(self, discovery_config: DiscoveryConfig) -> None:
        draft = NavigationProcessor(discovery_config).process(_entity(navigation=RawNavigation("X")), RecordDraft())
        assert draft == RecordDraft()


class TestAccessProcessor:
    @pytest.mark.unit
    def test_as_tuple_normalizes_declarations(self) -> None:
        assert as_tuple(None) == ()
        assert as_tuple("") == ()
        assert as_tuple("a.view") == ("a.view",)
        assert as_tuple(["a", "b", "a", ""]) == ("a", "b")

    @pytest.mark.unit
    def test_explicit_permissions_build_middleware(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/reports", zone="admin"), access=RawAccess(permission=["reports.view", "reports.export"]))
        draft = _run(discovery_config, entity, RouteProcessor, AccessProcessor)

        assert draft.access is not None
        assert draft.access.permissions == ("reports.view", "reports.export")
        assert draft.access.is_public is False
        # zone already authenticates, so no second auth tag
        assert draft.middleware_stack == ("web", "auth", "verified", "permission:reports.view,reports.export")

    @pytest.mark.unit
    def test_any_mode_joins_with_pipe(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/reports"), access=RawAccess(roles=["editor", "admin"], require="ANY"))
        draft = _run(discovery_config, entity, RouteProcessor, AccessProcessor)

        assert draft.access is not None
        assert draft.access.require_mode is RequireMode.ANY
        assert draft.middleware_stack == ("web", "auth", "role:editor|admin")

    @pytest.mark.unit
    def test_guard_is_part_of_auth_tag(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/reports"), access=RawAccess(guard="staff"))
        draft = _run(discovery_config, entity, RouteProcessor, AccessProcessor)

        assert draft.middleware_stack == ("web", "auth:staff")

    @pytest.mark.unit
    def test_synthesized_access_uses_zone_defaults(self, discovery_config: DiscoveryConfig) -> None:
        draft = _run(discovery_config, _entity(RawRoute("/reports", zone="admin")), RouteProcessor, AccessProcessor)

        assert draft.access is not None
        assert draft.access.auto_generated is True
        assert draft.access.from_zone == "admin"
        assert draft.access.permissions == ("admin.*",)
        assert draft.access.roles == ("admin",)
        assert draft.access.has_wildcards is True
        assert draft.access.authenticated is True

    @pytest.mark.unit
    def test_public_zone_synthesizes_public_access(self, discovery_config: DiscoveryConfig) -> None:
        draft = _run(discovery_config, _entity(RawRoute("/reports")), RouteProcessor, AccessProcessor)

        assert draft.access is not None
        assert draft.access.is_public is True
        assert draft.middleware_stack == ("web",)

    @pytest.mark.unit
    def test_rate_limit_goes_last(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/orders", zone="customer", middleware=("log",)))
        draft = _run(discovery_config, entity, RouteProcessor, AccessProcessor)

        assert draft.middleware_stack is not None
        assert draft.middleware_stack[0] == "web"
        assert draft.middleware_stack[-1] == "throttle:60,1"
        assert draft.middleware_stack.index("log") < draft.middleware_stack.index("permission:customer.*")

    @pytest.mark.unit
    def test_unknown_require_mode_is_rejected(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/reports"), access=RawAccess(permission="x", require="most"))
        with pytest.raises(InvalidAttributeError):
            _run(discovery_config, entity, RouteProcessor, AccessProcessor)


class TestSeoProcessor:
    FULL_CHAIN = (RouteProcessor, NavigationProcessor, AccessProcessor, SeoProcessor)

    @pytest.mark.unit
    def test_public_explicit_seo_is_sitemap_eligible(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/reports"), seo=RawSeo(title="Reports", sitemap_frequency="Daily"))
        seo = _run(discovery_config, entity, *self.FULL_CHAIN).seo

        assert seo is not None
        assert seo.sitemap_eligible is True
        assert seo.sitemap_frequency is SitemapFrequency.DAILY
        assert seo.robots == "index, follow"

    @pytest.mark.unit
    def test_noindex_or_exclusion_removes_from_sitemap(self, discovery_config: DiscoveryConfig) -> None:
        noindex = _run(discovery_config, _entity(RawRoute("/a"), seo=RawSeo(noindex=True)), *self.FULL_CHAIN).seo
        excluded = _run(discovery_config, _entity(RawRoute("/b"), seo=RawSeo(sitemap_include=False)), *self.FULL_CHAIN).seo

        assert noindex is not None and excluded is not None
        assert noindex.sitemap_eligible is False
        assert excluded.sitemap_eligible is False

    @pytest.mark.unit
    def test_protected_route_is_never_eligible(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/a"), access=RawAccess(permission="x"), seo=RawSeo(title="A"))
        seo = _run(discovery_config, entity, *self.FULL_CHAIN).seo

        assert seo is not None
        assert seo.sitemap_eligible is False

    @pytest.mark.unit
    def test_title_suffix_applies_to_full_title(self, discovery_config: DiscoveryConfig) -> None:
        config = dataclasses.replace(
            discovery_config, seo=dataclasses.replace(discovery_config.seo, title_suffix=" | Shop")
        )
        seo = _run(config, _entity(RawRoute("/a"), seo=RawSeo(title="Reports")), *self.FULL_CHAIN).seo

        assert seo is not None
        assert seo.title == "Reports"
        assert seo.full_title == "Reports | Shop"

    @pytest.mark.unit
    def test_synthesized_seo_uses_navigation_label(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/a", zone="admin"), navigation=RawNavigation("Monthly Reports"))
        seo = _run(discovery_config, entity, *self.FULL_CHAIN).seo

        assert seo is not None
        assert seo.auto_generated is True
        assert seo.title == "Monthly Reports"
        assert seo.noindex is True
        assert seo.sitemap_eligible is False

    @pytest.mark.unit
    @pytest.mark.parametrize("priority", [-0.1, 1.5])
    def test_priority_out_of_range_is_rejected(self, discovery_config: DiscoveryConfig, priority: float) -> None:
        entity = _entity(RawRoute("/a"), seo=RawSeo(sitemap_priority=priority))
        with pytest.raises(InvalidAttributeError):
            _run(discovery_config, entity, *self.FULL_CHAIN)

    @pytest.mark.unit
    def test_unknown_frequency_is_rejected(self, discovery_config: DiscoveryConfig) -> None:
        entity = _entity(RawRoute("/a"), seo=RawSeo(sitemap_frequency="sometimes"))
        with pytest.raises(InvalidAttributeError):
            _run(discovery_config, entity, *self.FULL_CHAIN)

    @pytest.mark.unit
    def test_requires_access_to_run_first(self, discovery_config: DiscoveryConfig) -> None:
        """Running SEO before access is an ordering bug and is reported as such."""
        entity = _entity(RawRoute("/a"), seo=RawSeo(title="A"))
        with pytest.raises(IncompleteRecordError):
            _run(discovery_config, entity, RouteProcessor, NavigationProcessor, SeoProcessor)
