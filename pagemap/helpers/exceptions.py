"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class PagemapError(Exception):
    """Base class for all pagemap errors."""


class ConfigurationError(PagemapError):
    """Raised when configuration is missing or has an invalid value."""


class InvalidAttributeError(PagemapError):
    """Raised when a declared route/navigation/access/SEO attribute holds an invalid value."""


class EntityLoadError(PagemapError):
    """Raised when the attribute source cannot load or describe an entity."""


class IncompleteRecordError(PagemapError):
    """Raised when the processor chain finishes without producing every required spec."""


class ManifestCacheError(PagemapError):
    """Raised when the manifest cache artifact is missing, unreadable or corrupt."""


class UrlGenerationError(PagemapError):
    """Raised when a URL cannot be generated for a route (unknown route or missing parameter)."""
