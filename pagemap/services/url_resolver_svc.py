"""
URL resolution against the manifest.

Stands in for a web framework's named-route URL generator. Anything with a
matching ``url_for`` can be used instead (UrlResolver protocol).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol
from urllib.parse import urlencode

from pagemap.components.discovery.uri_pattern_comp import fill_uri
from pagemap.helpers.exceptions import UrlGenerationError

if TYPE_CHECKING:
    from pagemap.services.manifest_svc import ManifestService


class UrlResolver(Protocol):
    def url_for(self, route_name: str, params: Mapping[str, Any] | None = None) -> str:
        """Raises UrlGenerationError when no URL can be produced."""
        ...


class ManifestUrlResolver:
    """
    Builds URLs from manifest records.

    Parameter tokens are filled from ``params``; missing optional segments
    are dropped and leftover parameters become the query string.
    """

    def __init__(self, manifest: ManifestService, base_url: str = "") -> None:
        self.manifest = manifest
        self.base_url = base_url.rstrip("/")

    def url_for(self, route_name: str, params: Mapping[str, Any] | None = None) -> str:
        record = self.manifest.get(route_name)
        if record is None:
            raise UrlGenerationError(f"Route [{route_name}] not defined")

        params = dict(params or {})
        path, used = fill_uri(record.full_uri, params)

        extra = {k: v for k, v in params.items() if k not in used and v is not None}
        if extra:
            path = f"{path}?{urlencode(extra, doseq=True)}"
        return self.base_url + path

    def path_for(self, route_name: str) -> str | None:
        """URL for a parameterless route, or None."""
        try:
            return self.url_for(route_name)
        except UrlGenerationError:
            return None
