"""
Pytest fixtures and configuration for the test suite.

Every test runs with PAGEMAP_* environment variables removed and the
working directory set to a temporary path, so no local config file or
cache leaks into a test. Paths for the cache and sitemap point into the
same temporary directory.
"""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

from pagemap.app import Application, set_application
from pagemap.components.discovery.entity_registry_comp import EntityRegistry
from pagemap.helpers.dto.config_dto import DiscoveryConfig
from pagemap.helpers.dto.manifest_dto import DiscoveryResult
from pagemap.services.config_svc import ConfigService
from pagemap.services.manifest_svc import ManifestService
from pagemap.workflows.discovery.discover_manifest_wf import create_default_engine
from tests.fixtures.actors import FakeActor
from tests.fixtures.screens import SAMPLE_REGISTRY

BASE_URL = "https://example.com"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None, None, None]:
    """No PAGEMAP_* env vars, cwd in tmp, no process-wide Application."""
    for key in list(os.environ):
        if key.startswith("PAGEMAP_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    set_application(None)
    yield
    set_application(None)


@pytest.fixture
def cache_file(tmp_path: Path) -> Path:
    return tmp_path / "cache" / "manifest.json"


@pytest.fixture
def sitemap_file(tmp_path: Path) -> Path:
    return tmp_path / "public" / "sitemap.xml"


@pytest.fixture
def config_overrides(cache_file: Path, sitemap_file: Path) -> dict[str, Any]:
    """Stock zones; names derived from class names only; paths under tmp."""
    return {
        "naming_root": "",
        "cache": {"enabled": True, "path": str(cache_file)},
        "sitemap": {
            "base_url": BASE_URL,
            "path": str(sitemap_file),
            "include_last_modified": False,
        },
    }


@pytest.fixture
def config_service(config_overrides: dict[str, Any]) -> ConfigService:
    return ConfigService(overrides=config_overrides)


@pytest.fixture
def discovery_config(config_service: ConfigService) -> DiscoveryConfig:
    return config_service.get_discovery_config()


@pytest.fixture
def sample_registry() -> EntityRegistry:
    return SAMPLE_REGISTRY


@pytest.fixture
def registry() -> EntityRegistry:
    """Empty registry for tests that declare their own screens."""
    return EntityRegistry()


@pytest.fixture
def engine(discovery_config: DiscoveryConfig):
    return create_default_engine(discovery_config)


@pytest.fixture
def sample_result(engine, sample_registry: EntityRegistry) -> DiscoveryResult:
    return engine.discover(sample_registry)


@pytest.fixture
def manifest_service(discovery_config: DiscoveryConfig, sample_registry: EntityRegistry) -> ManifestService:
    return ManifestService(discovery_config, source=sample_registry)


@pytest.fixture
def application(config_service: ConfigService, sample_registry: EntityRegistry) -> Application:
    """Application over the sample screens, installed as the process-wide instance."""
    app = Application(config_service=config_service, source=sample_registry)
    set_application(app)
    return app


@pytest.fixture
def admin_actor() -> FakeActor:
    return FakeActor(permissions=["admin.dashboard.view", "admin.users.view"], roles=["admin"])
