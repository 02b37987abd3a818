"""
AccessService - enforce a screen's access rule for an actor.

Outcomes:
- unknown screen: allowed (nothing restricts it)
- authentication required and absent: 401, or the configured redirect
- capabilities not met: the record's denied status (403 by default), or the redirect
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pagemap.components.access.permission_comp import actor_satisfies
from pagemap.helpers.dto.access_dto import AccessDecision

if TYPE_CHECKING:
    from pagemap.components.access.permission_comp import PermissionChecker
    from pagemap.helpers.dto.manifest_dto import ComponentRecord
    from pagemap.services.manifest_svc import ManifestService

logger = logging.getLogger(__name__)

UNAUTHENTICATED_STATUS = 401


class AccessService:
    def __init__(self, manifest: ManifestService) -> None:
        self.manifest = manifest

    def lookup(self, target: str) -> ComponentRecord | None:
        """Find a record by route name, falling back to entity id."""
        return self.manifest.get(target) or self.manifest.find_by_entity(target)

    def authorize(
        self,
        target: str,
        actor: PermissionChecker | None,
        authenticated: bool | None = None,
    ) -> AccessDecision:
        """
        Check whether ``actor`` may open the screen identified by ``target``.

        Args:
            target: Route name or entity id
            actor: Current actor capabilities (None for anonymous)
            authenticated: Whether the request is authenticated (default: actor is not None)
        """
        record = self.lookup(target)
        if record is None:
            return AccessDecision.allow(reason="no access rule")

        access = record.access
        if access.is_public:
            return AccessDecision.allow(reason="public")

        is_authenticated = actor is not None if authenticated is None else authenticated
        if access.authenticated and not is_authenticated:
            logger.debug("[access] %s requires authentication", record.route_name)
            return AccessDecision(
                allowed=False,
                status_code=UNAUTHENTICATED_STATUS,
                redirect_route_name=access.redirect_route_name,
                reason="unauthenticated",
            )

        if (access.permissions or access.roles) and not actor_satisfies(access, actor):
            logger.debug("[access] Actor lacks capabilities for %s", record.route_name)
            return AccessDecision(
                allowed=False,
                status_code=access.denied_status_code,
                redirect_route_name=access.redirect_route_name,
                reason="forbidden",
            )

        return AccessDecision.allow(reason="granted")
