"""
Navigation processor (priority 20).

Explicit navigation attributes inherit the zone's default group/icon when
they leave them unset. Screens without one get a synthesized entry that is
hidden from menus but still provides a label for breadcrumbs and SEO.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from pagemap.components.discovery.processor_base_comp import PRIORITY_NAVIGATION, Processor, default_label
from pagemap.helpers.dto.manifest_dto import NavigationSpec
from pagemap.helpers.json_helper import json_native

if TYPE_CHECKING:
    from pagemap.helpers.dto.entity_dto import EntityFacts, RawNavigation
    from pagemap.helpers.dto.manifest_dto import RecordDraft, RouteSpec

# Auto-generated entries sort after everything declared
AUTO_SORT_ORDER = 999


def split_group(group: str | None) -> tuple[str, ...]:
    if not group:
        return ()
    return tuple(s for s in group.split(".") if s)


class NavigationProcessor(Processor):
    default_priority = PRIORITY_NAVIGATION

    def process(self, entity: EntityFacts, draft: RecordDraft) -> RecordDraft:
        if draft.route is None:
            return draft

        if entity.navigation is not None:
            navigation = self._resolve(entity.navigation, draft.route)
        else:
            navigation = self._synthesize(entity, draft.route)
        return dataclasses.replace(draft, navigation=navigation)

    def _resolve(self, raw: RawNavigation, route: RouteSpec) -> NavigationSpec:
        defaults = route.zone_config.navigation_defaults
        group = raw.group if raw.group is not None else defaults.group
        icon = raw.icon if raw.icon is not None else defaults.icon

        return NavigationSpec(
            label=raw.label,
            group_path=group,
            group_segments=split_group(group),
            icon=icon,
            sort_order=int(raw.sort),
            hidden=bool(raw.hidden),
            badge=raw.badge,
            badge_color=raw.badge_color,
            parent_route_name=raw.parent,
            extra_meta=json_native(raw.meta),
            route_name=route.final_name,
            has_params=route.has_required_parameter,
        )

    def _synthesize(self, entity: EntityFacts, route: RouteSpec) -> NavigationSpec:
        defaults = route.zone_config.navigation_defaults
        return NavigationSpec(
            label=default_label(entity),
            group_path=defaults.group,
            group_segments=split_group(defaults.group),
            icon=defaults.icon,
            sort_order=AUTO_SORT_ORDER,
            hidden=True,
            route_name=route.final_name,
            has_params=route.has_required_parameter,
            auto_generated=True,
        )
