"""
Static entity registration and the attribute source the engine consumes.

Screens register a descriptor at import time with the ``routable`` decorator:

    @routable(RawRoute("/dashboard", zone="admin"), navigation=RawNavigation("Dashboard"))
    class Dashboard: ...

``ModuleAttributeSource`` imports the configured modules so their screens
self-register, then hands the registered facts to the discovery engine.
"""

from __future__ import annotations

import fnmatch
import importlib
import inspect
import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Protocol, TypeVar

from pagemap.helpers.dto.entity_dto import EntityFacts, RawAccess, RawNavigation, RawRoute, RawSeo
from pagemap.helpers.exceptions import EntityLoadError

logger = logging.getLogger(__name__)

T = TypeVar("T")

CUSTOM_META_ATTRIBUTE = "discovery_meta"


class AttributeSource(Protocol):
    """What the discovery engine needs from wherever entities come from."""

    def entity_ids(self) -> Iterable[str]: ...

    def describe(self, entity_id: str) -> EntityFacts: ...


def entity_id_for(target: Any) -> str:
    return f"{target.__module__}.{target.__qualname__}"


def _source_path(target: Any) -> str | None:
    try:
        return inspect.getsourcefile(target)
    except TypeError:
        return None


def _custom_meta_provider(target: Any) -> Callable[[], Mapping[str, Any]] | None:
    provider = getattr(target, CUSTOM_META_ATTRIBUTE, None)
    return provider if callable(provider) else None


class EntityRegistry:
    """
    Registration table of routable entities, in registration order.

    Re-registering an id replaces its facts but keeps its original position.
    Also usable directly as an AttributeSource.
    """

    def __init__(self) -> None:
        self._entries: dict[str, EntityFacts] = {}
        self._lock = threading.Lock()

    def register(
        self,
        target: Any,
        route: RawRoute | str | None = None,
        navigation: RawNavigation | None = None,
        access: RawAccess | None = None,
        seo: RawSeo | None = None,
        entity_id: str | None = None,
    ) -> EntityFacts:
        """
        Register a class or function as a routable entity.

        Args:
            target: The screen class/function
            route: Route descriptor, or a bare URI pattern for a default-zone route
            navigation: Menu placement
            access: Access rule
            seo: SEO/sitemap metadata
            entity_id: Override the derived ``module.QualName`` identifier

        Returns:
            The registered facts
        """
        if isinstance(route, str):
            route = RawRoute(uri=route)

        facts = EntityFacts(
            entity_id=entity_id or entity_id_for(target),
            short_name=target.__name__,
            namespace_path=target.__module__,
            source_path=_source_path(target),
            route=route,
            navigation=navigation,
            access=access,
            seo=seo,
            custom_meta=_custom_meta_provider(target),
        )
        self.add(facts)
        return facts

    def add(self, facts: EntityFacts) -> None:
        with self._lock:
            if facts.entity_id in self._entries:
                logger.debug("[registry] Replacing registration for %s", facts.entity_id)
            self._entries[facts.entity_id] = facts

    def remove(self, entity_id: str) -> None:
        with self._lock:
            self._entries.pop(entity_id, None)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def entity_ids(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def describe(self, entity_id: str) -> EntityFacts:
        try:
            return self._entries[entity_id]
        except KeyError:
            raise EntityLoadError(f"Entity {entity_id} is not registered") from None

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# Process-wide registry used by the decorator when none is given
default_registry = EntityRegistry()


def routable(
    route: RawRoute | str | None = None,
    *,
    navigation: RawNavigation | None = None,
    access: RawAccess | None = None,
    seo: RawSeo | None = None,
    entity_id: str | None = None,
    registry: EntityRegistry | None = None,
) -> Callable[[T], T]:
    """Class/function decorator registering the target as a routable screen."""

    def decorator(target: T) -> T:
        (registry if registry is not None else default_registry).register(
            target,
            route=route,
            navigation=navigation,
            access=access,
            seo=seo,
            entity_id=entity_id,
        )
        return target

    return decorator


class ModuleAttributeSource:
    """
    Attribute source backed by importable modules and a registry.

    Modules are imported once, on first enumeration. A module that fails to
    import is logged and skipped; the rest of the run continues.
    """

    def __init__(
        self,
        modules: Iterable[str],
        registry: EntityRegistry | None = None,
        exclude: Iterable[str] = (),
    ) -> None:
        self.modules = tuple(modules)
        self.registry = registry if registry is not None else default_registry
        self.exclude = tuple(exclude)
        self.failed_modules: dict[str, str] = {}
        self._loaded = False

    def load(self) -> None:
        if self._loaded:
            return
        for module_name in self.modules:
            try:
                importlib.import_module(module_name)
            except Exception as e:
                self.failed_modules[module_name] = str(e)
                logger.warning("[registry] Could not import %s: %s", module_name, e)
        self._loaded = True

    def is_excluded(self, entity_id: str) -> bool:
        return any(fnmatch.fnmatchcase(entity_id, pattern) for pattern in self.exclude)

    def entity_ids(self) -> list[str]:
        self.load()
        return [e for e in self.registry.entity_ids() if not self.is_excluded(e)]

    def describe(self, entity_id: str) -> EntityFacts:
        return self.registry.describe(entity_id)
