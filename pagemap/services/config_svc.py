#!/usr/bin/env python3
# ======================================================================
#  Config Service - Configuration loading and caching
#  - Loads config from YAML files and env vars
#  - Caches composed config for performance
#  - Builds the typed DiscoveryConfig handed to the pipeline
# ======================================================================

from __future__ import annotations

import contextlib
import logging
import os
from collections.abc import Mapping
from typing import Any

import yaml

from pagemap.helpers.dto.config_dto import (
    ROUTE_NAMING_CLASS,
    ROUTE_NAMING_URI,
    BreadcrumbConfig,
    CacheConfig,
    ConfigResult,
    DiscoveryConfig,
    NavigationConfig,
    SeoDefaults,
    SitemapConfig,
)
from pagemap.helpers.dto.zone_dto import DEFAULT_MIDDLEWARE_TAG, ZoneConfig, ZoneRegistry
from pagemap.helpers.exceptions import ConfigurationError

# ======================================================================
# Environment overrides (flat env var -> nested config key path)
# ======================================================================
ENV_OVERRIDES: dict[str, tuple[str, ...]] = {
    "PAGEMAP_CACHE_ENABLED": ("cache", "enabled"),
    "PAGEMAP_CACHE_PATH": ("cache", "path"),
    "PAGEMAP_DEFAULT_ZONE": ("default_zone",),
    "PAGEMAP_ROUTE_NAMING": ("route_naming",),
    "PAGEMAP_BASE_URL": ("sitemap", "base_url"),
    "PAGEMAP_DEBUG": ("debug",),
}

ROUTE_NAMING_STRATEGIES = (ROUTE_NAMING_CLASS, ROUTE_NAMING_URI)


def _parse_env_value(value: str) -> Any:
    """Typed value from an env string: booleans, ints, floats, else the string."""
    if value.lower() in ("true", "false"):
        return value.lower() == "true"
    if value.isdigit():
        return int(value)
    if value.replace(".", "", 1).replace("-", "", 1).isdigit():
        return float(value)
    return value


def _section(cfg: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    """Nested config table; absent or null means empty."""
    value = cfg.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"{key} must be a mapping, got {type(value).__name__}")
    return value


class ConfigService:
    """
    Service for loading and caching pagemap configuration.

    Loads config from multiple sources (defaults → YAML → overrides → env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        self._overrides = overrides or {}
        self._config: dict[str, Any] | None = None
        self._discovery_config: DiscoveryConfig | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> ConfigResult:
        """
        Get the composed configuration.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            ConfigResult wrapping the complete configuration dict
        """
        if self._config is None or force_reload:
            self._config = self._compose(self._overrides)
            self._discovery_config = None
        return ConfigResult(config=self._config)

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Get a config value by dotted path.

        Example:
            >>> service.get("default_zone")
            'frontend'
            >>> service.get("navigation.max_depth", 3)
            3
        """
        node: Any = self.get_config().config
        for part in key_path.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def reload(self) -> ConfigResult:
        """Force reload configuration from all sources."""
        self._logger.info("Reloading configuration from all sources")
        return self.get_config(force_reload=True)

    def get_discovery_config(self) -> DiscoveryConfig:
        """
        Typed configuration for the discovery pipeline and its consumers.

        Raises:
            ConfigurationError: a value has the wrong type or an unknown option
        """
        if self._discovery_config is None:
            self._discovery_config = self.build_discovery_config(self.get_config().config)
        return self._discovery_config

    # ----------------------------------------------------------------------
    # Typed conversion
    # ----------------------------------------------------------------------

    @staticmethod
    def build_discovery_config(cfg: dict[str, Any]) -> DiscoveryConfig:
        route_naming = str(cfg.get("route_naming") or ROUTE_NAMING_CLASS)
        if route_naming not in ROUTE_NAMING_STRATEGIES:
            raise ConfigurationError(
                f"route_naming must be one of {', '.join(ROUTE_NAMING_STRATEGIES)}, got {route_naming!r}"
            )

        nav = _section(cfg, "navigation")
        try:
            max_depth = int(nav.get("max_depth", 3))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"navigation.max_depth must be an integer: {e}") from e
        if max_depth < 1:
            raise ConfigurationError(f"navigation.max_depth must be at least 1, got {max_depth}")

        zones_cfg = cfg.get("zones") or {}
        if not isinstance(zones_cfg, Mapping):
            raise ConfigurationError("zones must be a mapping of zone name to settings")
        for name, data in zones_cfg.items():
            if data is not None and not isinstance(data, Mapping):
                raise ConfigurationError(f"zones.{name} must be a mapping, got {type(data).__name__}")
        default_middleware = str(cfg.get("default_middleware") or DEFAULT_MIDDLEWARE_TAG)
        zones = ZoneRegistry(
            zones={
                name: ZoneConfig.from_mapping(name, data, default_middleware)
                for name, data in zones_cfg.items()
                if data is not None
            },
            default_zone=str(cfg.get("default_zone") or "frontend"),
            default_middleware=default_middleware,
        )

        cache = _section(cfg, "cache")
        seo = _section(cfg, "seo")
        sitemap = _section(cfg, "sitemap")
        breadcrumbs = _section(cfg, "breadcrumbs")

        return DiscoveryConfig(
            zones=zones,
            modules=tuple(cfg.get("modules") or ()),
            exclude=tuple(cfg.get("exclude") or ()),
            route_naming=route_naming,
            naming_root=str(cfg.get("naming_root") or ""),
            auth_tag=str(cfg.get("auth_tag") or "auth"),
            cache=CacheConfig(enabled=bool(cache.get("enabled")), path=cache.get("path") or None),
            seo=SeoDefaults(
                title_suffix=str(seo.get("title_suffix") or ""),
                default_description=seo.get("default_description") or None,
                default_og_image=seo.get("default_og_image") or None,
                twitter_site=seo.get("twitter_site") or None,
                site_name=str(seo.get("site_name") or "pagemap"),
            ),
            sitemap=SitemapConfig(
                base_url=str(sitemap.get("base_url") or "").rstrip("/"),
                path=sitemap.get("path") or None,
                include_last_modified=bool(sitemap.get("include_last_modified", True)),
                exclude_zones=tuple(sitemap.get("exclude_zones") or ()),
            ),
            breadcrumbs=BreadcrumbConfig(
                home_label=str(breadcrumbs.get("home_label") or "Home"),
                home_route=str(breadcrumbs.get("home_route") or "home"),
                use_translation=bool(breadcrumbs.get("use_translation", False)),
                translation_prefix=str(breadcrumbs.get("translation_prefix") or "breadcrumbs"),
            ),
            navigation=NavigationConfig(max_depth=max_depth),
            debug=bool(cfg.get("debug", False)),
        )

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self, overrides: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Load final configuration from:
          1) Built-in defaults
          2) /etc/pagemap/config.yaml  (if present)
          3) ./config/pagemap.yaml
          4) $PAGEMAP_CONFIG_PATH (if set)
          5) overrides dict passed in
          6) Environment variables (PAGEMAP_*)

        Returns merged config as dict.
        """
        cfg = self._default_config()

        # 1) System-wide YAML
        self._deep_merge(cfg, self._load_yaml("/etc/pagemap/config.yaml"))

        # 2) Repo-local config
        repo_cfg = self._load_yaml(os.path.join(os.getcwd(), "config", "pagemap.yaml"))
        if repo_cfg:
            self._deep_merge(cfg, repo_cfg)

        # 3) Optional path via env
        env_path = os.getenv("PAGEMAP_CONFIG_PATH")
        if env_path:
            self._deep_merge(cfg, self._load_yaml(env_path))

        # 4) Direct overrides
        if overrides:
            self._deep_merge(cfg, overrides)

        # 5) Environment variable overrides (flat -> nested mapping)
        self._apply_env_overrides(cfg)

        with contextlib.suppress(Exception):
            self._logger.debug("compose() loaded config; keys: %s", list(cfg.keys()))

        return cfg

    def _default_config(self) -> dict[str, Any]:
        """Base defaults. Zones match the stock admin/customer/frontend/api layout."""
        return {
            "modules": [],
            "exclude": ["*.Abstract*", "*.Base*"],
            "zones": {
                "admin": {
                    "prefix": "/admin",
                    "middleware": ["web", "auth", "verified"],
                    "default_permission": "admin.*",
                    "default_role": "admin",
                    "guard": "web",
                    "layout": "layouts.admin",
                    "domain": None,
                    "rate_limit": None,
                    "navigation": {"group": "Administration", "icon": "cog"},
                },
                "customer": {
                    "prefix": "/account",
                    "middleware": ["web", "auth", "verified"],
                    "default_permission": "customer.*",
                    "default_role": None,
                    "guard": "web",
                    "layout": "layouts.customer",
                    "domain": None,
                    "rate_limit": "60,1",
                    "navigation": {"group": "Account", "icon": "user"},
                },
                "frontend": {
                    "prefix": "",
                    "middleware": ["web"],
                    "default_permission": None,
                    "default_role": None,
                    "guard": None,
                    "layout": "layouts.app",
                    "domain": None,
                    "rate_limit": None,
                    "navigation": {"group": None, "icon": None},
                },
                "api": {
                    "prefix": "/api",
                    "middleware": ["api", "auth:sanctum"],
                    "default_permission": "api.*",
                    "default_role": None,
                    "guard": "sanctum",
                    "layout": None,
                    "domain": None,
                    "rate_limit": "60,1",
                    "navigation": {"group": None, "icon": None},
                },
            },
            "default_zone": "frontend",
            "default_middleware": DEFAULT_MIDDLEWARE_TAG,
            "auth_tag": "auth",
            "route_naming": ROUTE_NAMING_CLASS,
            "naming_root": "app.screens",
            "cache": {
                "enabled": False,
                "path": os.path.join("cache", "pagemap-manifest.json"),
            },
            "seo": {
                "title_suffix": "",
                "default_description": None,
                "default_og_image": None,
                "twitter_site": None,
                "site_name": "pagemap",
            },
            "sitemap": {
                "base_url": "",
                "path": os.path.join("public", "sitemap.xml"),
                "include_last_modified": True,
                "exclude_zones": ["admin", "customer", "api"],
            },
            "breadcrumbs": {
                "home_label": "Home",
                "home_route": "home",
                "use_translation": False,
                "translation_prefix": "breadcrumbs",
            },
            "navigation": {"max_depth": 3},
            "debug": False,
        }

    def _deep_merge(self, a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
        """
        Recursively merge dict b into dict a (mutates a, returns it).
        """
        for k, v in b.items():
            if isinstance(v, dict) and isinstance(a.get(k), dict):
                self._deep_merge(a[k], v)
            else:
                a[k] = v
        return a

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning("[config] Ignoring unreadable config file %s: %s", path, e)
            return {}
        if not isinstance(data, dict):
            self._logger.warning("[config] Ignoring %s: top level is not a mapping", path)
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Apply the supported environment overrides.

        Supported:
          PAGEMAP_CACHE_ENABLED=true
          PAGEMAP_CACHE_PATH=/var/cache/pagemap/manifest.json
          PAGEMAP_DEFAULT_ZONE=frontend
          PAGEMAP_ROUTE_NAMING=uri
          PAGEMAP_BASE_URL=https://example.com
          PAGEMAP_DEBUG=true
        """
        for env_key, path in ENV_OVERRIDES.items():
            raw = os.environ.get(env_key)
            if raw is None:
                continue

            # Paths and URLs stay strings
            value: Any = raw if path[-1] in ("path", "base_url", "default_zone", "route_naming") else _parse_env_value(raw)

            node = cfg
            for part in path[:-1]:
                if not isinstance(node.get(part), dict):
                    node[part] = {}
                node = node[part]
            node[path[-1]] = value
            self._logger.debug("[config] %s applied to %s", env_key, ".".join(path))
