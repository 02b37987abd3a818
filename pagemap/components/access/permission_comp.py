"""
Permission evaluation against a record's access rule.

The actor is anything implementing PermissionChecker. Nothing is probed at
runtime: callers either pass a checker or pass None, and None is denied for
every non-public rule. Errors raised by the checker also deny.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from pagemap.helpers.dto.manifest_dto import RequireMode
from pagemap.helpers.text_helper import has_wildcard, unique_ordered, wildcard_to_regex

if TYPE_CHECKING:
    from pagemap.helpers.dto.manifest_dto import AccessSpec

logger = logging.getLogger(__name__)


@runtime_checkable
class PermissionChecker(Protocol):
    """Capabilities of the current actor."""

    def has_any_permission(self, permissions: Iterable[str]) -> bool: ...

    def has_all_permissions(self, permissions: Iterable[str]) -> bool: ...

    def has_any_role(self, roles: Iterable[str]) -> bool: ...

    def has_all_roles(self, roles: Iterable[str]) -> bool: ...

    def all_granted_permissions(self) -> Iterable[str]: ...


def expand_wildcard_permissions(permissions: Iterable[str], granted: Iterable[str]) -> tuple[str, ...]:
    """
    Replace wildcard patterns with the granted permissions they match.

    Example:
        >>> expand_wildcard_permissions(["admin.*"], ["admin.users.view", "billing.view"])
        ('admin.users.view',)
    """
    granted = tuple(granted)
    expanded: list[str] = []
    for permission in permissions:
        if not has_wildcard(permission):
            expanded.append(permission)
            continue
        pattern = wildcard_to_regex(permission)
        expanded.extend(g for g in granted if pattern.match(g))
    return unique_ordered(expanded)


def _permissions_met(access: AccessSpec, actor: PermissionChecker) -> bool:
    permissions = access.permissions
    if not access.has_wildcards:
        if access.require_mode is RequireMode.ANY:
            return actor.has_any_permission(permissions)
        return actor.has_all_permissions(permissions)

    granted = tuple(actor.all_granted_permissions())
    if access.require_mode is RequireMode.ALL:
        # a pattern that matches nothing the actor holds is an unmet requirement
        for permission in permissions:
            if has_wildcard(permission) and not expand_wildcard_permissions([permission], granted):
                return False

    expanded = expand_wildcard_permissions(permissions, granted)
    if not expanded:
        return False
    if access.require_mode is RequireMode.ANY:
        return actor.has_any_permission(expanded)
    return actor.has_all_permissions(expanded)


def _roles_met(access: AccessSpec, actor: PermissionChecker) -> bool:
    if access.require_mode is RequireMode.ANY:
        return actor.has_any_role(access.roles)
    return actor.has_all_roles(access.roles)


def actor_satisfies(access: AccessSpec, actor: PermissionChecker | None) -> bool:
    """
    Does the actor satisfy an access rule?

    Public rules always pass. Any non-public rule needs an actor. Permissions
    and roles are checked independently, both honouring the require mode.
    """
    if access.is_public:
        return True
    if actor is None:
        return False

    try:
        if access.permissions and not _permissions_met(access, actor):
            return False
        if access.roles and not _roles_met(access, actor):
            return False
    except Exception as e:
        logger.warning("[access] Permission check failed, denying: %s", e)
        return False
    return True
