"""
CLI Bootstrap Service - service container for CLI commands.

Architecture:
- This is a SERVICE layer module (interfaces → services)
- CLI commands SHOULD use these bootstrap functions to get service instances
- Commands do not need the process-wide Application; each invocation
  builds what it needs from the current configuration
"""

from __future__ import annotations

from pagemap.app import Application
from pagemap.services.config_svc import ConfigService


def get_config_service() -> ConfigService:
    """
    Get ConfigService instance for CLI operations.

    Returns:
        ConfigService instance
    """
    return ConfigService()


def get_application() -> Application:
    """
    Build an Application for one CLI invocation.

    Raises:
        ConfigurationError: the configuration is invalid
    """
    return Application(config_service=get_config_service())
