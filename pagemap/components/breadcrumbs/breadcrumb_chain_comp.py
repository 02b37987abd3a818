"""
Breadcrumb chain resolution.

Ancestors come from an explicit ``parent`` link when the record declares
one (walked recursively); otherwise they are inferred from the URI
structure: every static prefix of the record's full URI that matches
another record's full URI becomes an ancestor.

Parent links can form cycles. The walk keeps a visited set, is bounded by
the manifest size, and stops at the first revisit.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pagemap.components.discovery.uri_pattern_comp import is_parameter_segment, path_segments
from pagemap.helpers.dto.config_dto import BreadcrumbConfig
from pagemap.helpers.dto.manifest_dto import ComponentRecord
from pagemap.helpers.dto.navigation_dto import Breadcrumb
from pagemap.helpers.exceptions import UrlGenerationError
from pagemap.helpers.text_helper import matches_pattern, substitute_placeholders

logger = logging.getLogger(__name__)

# (route name, parameters) -> label, or None to fall through
LabelResolver = Callable[[str, Mapping[str, Any]], "str | None"]
# (route name, parameters) -> URL; may raise UrlGenerationError
ParamUrlFor = Callable[[str, Mapping[str, Any]], str]
# translation key -> translated text, or None when there is no entry
Translator = Callable[[str], "str | None"]


def uri_prefixes(full_uri: str) -> list[str]:
    """Static prefixes of a URI, shortest first: /admin/users/{user} -> [/admin, /admin/users]."""
    prefixes: list[str] = []
    current = ""
    for segment in path_segments(full_uri):
        if is_parameter_segment(segment):
            continue
        current += "/" + segment
        prefixes.append(current)
    return prefixes


class BreadcrumbChainResolver:
    """
    Builds breadcrumb chains over one manifest snapshot.

    Args:
        manifest: Route name -> record
        find_by_uri: Full URI -> record lookup
        url_for: URL generator; failures degrade to ``url=None``
        config: Home crumb and translation settings
        translator: Optional translation lookup, used when enabled in config
    """

    def __init__(
        self,
        manifest: Mapping[str, ComponentRecord],
        find_by_uri: Callable[[str], ComponentRecord | None],
        url_for: ParamUrlFor | None = None,
        config: BreadcrumbConfig | None = None,
        translator: Translator | None = None,
    ) -> None:
        self.manifest = manifest
        self.find_by_uri = find_by_uri
        self.url_for = url_for
        self.config = config or BreadcrumbConfig()
        self.translator = translator
        self._resolvers: dict[str, LabelResolver] = {}

    def register_resolver(self, pattern: str, resolver: LabelResolver) -> BreadcrumbChainResolver:
        """Register a dynamic label resolver for a route name or wildcard pattern."""
        self._resolvers[pattern] = resolver
        return self

    @property
    def resolvers(self) -> Mapping[str, LabelResolver]:
        return dict(self._resolvers)

    # ------------------------------------------------------------------
    # Chain
    # ------------------------------------------------------------------

    def generate(self, route_name: str | None, parameters: Mapping[str, Any] | None = None) -> list[Breadcrumb]:
        """Breadcrumbs for ``route_name``: home first, the target last and active."""
        params = dict(parameters or {})
        if not route_name or route_name not in self.manifest:
            return [self.home_crumb(active=True)]

        crumbs = [self.home_crumb(active=False)]
        for record in self.ancestry(route_name):
            # the home crumb already stands for the home route
            if record.route_name == self.config.home_route and len(crumbs) == 1:
                continue
            crumbs.append(Breadcrumb(label=self.label_for(record, params), url=self.url_for_record(record, params)))

        last = crumbs[-1]
        crumbs[-1] = Breadcrumb(label=last.label, url=last.url, active=True)
        return crumbs

    def ancestry(self, route_name: str) -> list[ComponentRecord]:
        """Records from the outermost ancestor down to ``route_name`` itself."""
        record = self.manifest[route_name]
        chain = [record]
        visited = {route_name}
        limit = len(self.manifest)

        current = record
        while len(chain) <= limit:
            parent_name = current.navigation.parent_route_name
            if not parent_name:
                chain.extend(reversed(self._unvisited(self.infer_ancestors(current), visited)))
                break

            if parent_name in visited:
                logger.warning("[breadcrumbs] Parent cycle at %s -> %s; chain truncated", current.route_name, parent_name)
                break

            parent = self.manifest.get(parent_name)
            if parent is None:
                logger.debug("[breadcrumbs] Unknown parent %s for %s", parent_name, current.route_name)
                break

            visited.add(parent_name)
            chain.append(parent)
            current = parent

        chain.reverse()
        return chain

    def infer_ancestors(self, record: ComponentRecord) -> list[ComponentRecord]:
        """Ancestors implied by URI structure, outermost first."""
        ancestors: list[ComponentRecord] = []
        for prefix in uri_prefixes(record.full_uri):
            if prefix == record.full_uri:
                continue
            match = self.find_by_uri(prefix)
            if match is not None and match.entity_id != record.entity_id:
                ancestors.append(match)
        return ancestors

    @staticmethod
    def _unvisited(records: Iterable[ComponentRecord], visited: set[str]) -> list[ComponentRecord]:
        result = []
        for record in records:
            if record.route_name not in visited:
                visited.add(record.route_name)
                result.append(record)
        return result

    # ------------------------------------------------------------------
    # Crumb parts
    # ------------------------------------------------------------------

    def home_crumb(self, active: bool) -> Breadcrumb:
        label = self.config.home_label
        translated = self._translate(self.config.home_route)
        url = None
        if self.url_for is not None:
            try:
                url = self.url_for(self.config.home_route, {})
            except UrlGenerationError:
                url = None
        return Breadcrumb(label=translated or label, url=url, active=active)

    def label_for(self, record: ComponentRecord, parameters: Mapping[str, Any]) -> str:
        """
        Label precedence: dynamic resolver, then the navigation label with
        ``{placeholders}`` filled, then a translation entry if one exists.
        """
        route_name = record.route_name
        for pattern, resolver in self._resolvers.items():
            if matches_pattern(route_name, pattern):
                resolved = resolver(route_name, parameters)
                if resolved is not None:
                    return resolved

        label = substitute_placeholders(record.navigation.label or record.component.short_name, dict(parameters))
        translated = self._translate(route_name)
        return translated if translated is not None else label

    def url_for_record(self, record: ComponentRecord, parameters: Mapping[str, Any]) -> str | None:
        if self.url_for is None:
            return None
        if any(parameters.get(p) in (None, "") for p in record.route.required_parameter_names):
            return None

        needed = {p: parameters[p] for p in record.route.parameter_names if parameters.get(p) not in (None, "")}
        try:
            return self.url_for(record.route_name, needed)
        except UrlGenerationError as e:
            logger.debug("[breadcrumbs] No URL for %s: %s", record.route_name, e)
            return None

    def _translate(self, route_name: str) -> str | None:
        if not self.config.use_translation or self.translator is None:
            return None
        key = f"{self.config.translation_prefix}.{route_name}"
        translated = self.translator(key)
        if translated is None or translated == key:
            return None
        return translated
