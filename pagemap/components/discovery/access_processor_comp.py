"""
Access processor (priority 30).

Resolves the access rule (explicit, or synthesized from zone defaults) and
computes the final middleware stack. It runs after the route processor so
it is the first stage that knows zone tags, route tags and access tags at
once.

Stack order: zone tags, route extra tags, access-derived tags, rate limit.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from pagemap.components.discovery.processor_base_comp import PRIORITY_ACCESS, Processor
from pagemap.helpers.dto.manifest_dto import AccessSpec, RequireMode
from pagemap.helpers.exceptions import InvalidAttributeError
from pagemap.helpers.text_helper import has_wildcard, unique_ordered

if TYPE_CHECKING:
    from pagemap.helpers.dto.entity_dto import EntityFacts, RawAccess
    from pagemap.helpers.dto.manifest_dto import RecordDraft, RouteSpec

RATE_LIMIT_TAG = "throttle"
PERMISSION_TAG = "permission"
ROLE_TAG = "role"


def as_tuple(value: str | Sequence[str] | None) -> tuple[str, ...]:
    """Normalize a string/sequence/None declaration to an ordered, duplicate-free tuple."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    return unique_ordered(v for v in value if v)


def parse_require_mode(value: str | RequireMode) -> RequireMode:
    try:
        return RequireMode(value.lower() if isinstance(value, str) else value)
    except ValueError as e:
        raise InvalidAttributeError(f"Unknown access require mode: {value!r}") from e


class AccessProcessor(Processor):
    default_priority = PRIORITY_ACCESS

    def process(self, entity: EntityFacts, draft: RecordDraft) -> RecordDraft:
        if draft.route is None:
            return draft

        if entity.access is not None:
            access = self._resolve(entity.access)
        else:
            access = self._synthesize(draft.route)

        stack = self.build_middleware_stack(draft.route, access)
        return dataclasses.replace(draft, access=access, middleware_stack=stack)

    def is_auth_tag(self, tag: str) -> bool:
        return tag == self.config.auth_tag or tag.startswith(self.config.auth_tag + ":")

    def has_auth_tag(self, tags: Iterable[str]) -> bool:
        return any(self.is_auth_tag(t) for t in tags)

    def _resolve(self, raw: RawAccess) -> AccessSpec:
        permissions = as_tuple(raw.permission)
        roles = as_tuple(raw.roles)
        require = parse_require_mode(raw.require)
        return self._spec(
            permissions=permissions,
            roles=roles,
            require=require,
            guard=raw.guard,
            authenticated=bool(raw.authenticated),
            redirect=raw.redirect_to,
            http_code=int(raw.http_code),
        )

    def _synthesize(self, route: RouteSpec) -> AccessSpec:
        zone = route.zone_config
        spec = self._spec(
            permissions=as_tuple(zone.default_permission),
            roles=as_tuple(zone.default_role),
            require=RequireMode.ALL,
            guard=zone.guard,
            authenticated=self.has_auth_tag(zone.middleware_tags),
            redirect=None,
            http_code=403,
        )
        return dataclasses.replace(spec, auto_generated=True, from_zone=route.zone)

    def _spec(
        self,
        permissions: tuple[str, ...],
        roles: tuple[str, ...],
        require: RequireMode,
        guard: str | None,
        authenticated: bool,
        redirect: str | None,
        http_code: int,
    ) -> AccessSpec:
        return AccessSpec(
            permissions=permissions,
            roles=roles,
            require_mode=require,
            guard=guard,
            authenticated=authenticated,
            redirect_route_name=redirect,
            denied_status_code=http_code,
            has_wildcards=any(has_wildcard(p) for p in permissions),
            middleware=self.access_tags(permissions, roles, require, guard, authenticated),
        )

    def access_tags(
        self,
        permissions: tuple[str, ...],
        roles: tuple[str, ...],
        require: RequireMode,
        guard: str | None,
        authenticated: bool,
    ) -> tuple[str, ...]:
        """Middleware tags that enforce an access rule."""
        tags: list[str] = []
        if authenticated:
            tags.append(f"{self.config.auth_tag}:{guard}" if guard else self.config.auth_tag)

        joiner = "|" if require is RequireMode.ANY else ","
        if permissions:
            tags.append(f"{PERMISSION_TAG}:" + joiner.join(permissions))
        if roles:
            tags.append(f"{ROLE_TAG}:" + joiner.join(roles))
        return tuple(tags)

    def build_middleware_stack(self, route: RouteSpec, access: AccessSpec) -> tuple[str, ...]:
        stack: list[str] = list(route.zone_config.middleware_tags)
        stack.extend(route.extra_middleware)

        for tag in access.middleware:
            # one authentication tag is enough, whichever guard it names
            if self.is_auth_tag(tag) and self.has_auth_tag(stack):
                continue
            stack.append(tag)

        if route.zone_config.rate_limit:
            stack.append(f"{RATE_LIMIT_TAG}:{route.zone_config.rate_limit}")

        return unique_ordered(stack)
