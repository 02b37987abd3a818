"""
Helpers package.
"""

from .exceptions import (
    ConfigurationError,
    EntityLoadError,
    IncompleteRecordError,
    InvalidAttributeError,
    ManifestCacheError,
    PagemapError,
    UrlGenerationError,
)
from .logging_helper import (
    PagemapLogFilter,
    clear_log_context,
    configure_logging,
    set_log_context,
)
from .text_helper import (
    class_name_to_label,
    class_name_to_slug,
    matches_pattern,
    substitute_placeholders,
    unique_ordered,
)

__all__ = [
    "ConfigurationError",
    "EntityLoadError",
    "IncompleteRecordError",
    "InvalidAttributeError",
    "ManifestCacheError",
    "PagemapError",
    "PagemapLogFilter",
    "UrlGenerationError",
    "class_name_to_label",
    "class_name_to_slug",
    "clear_log_context",
    "configure_logging",
    "matches_pattern",
    "set_log_context",
    "substitute_placeholders",
    "unique_ordered",
]
