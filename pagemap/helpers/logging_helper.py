"""
Logging helpers: identity/role tagging filter and thread-local log context.

Module naming drives the tags: a logger named ``pagemap.services.manifest_svc``
is rendered as ``[Manifest] [Service]``. Third-party loggers keep their
full name.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(pagemap_identity_tag)s %(pagemap_role_tag)s %(context_str)s%(message)s"

# Module suffix -> role tag
_ROLE_SUFFIXES: dict[str, str] = {
    "_svc": "Service",
    "_wf": "Workflow",
    "_comp": "Component",
    "_helper": "Helper",
    "_dto": "DTO",
    "_if": "Interface",
    "_cli": "CLI",
}

_context = threading.local()


def set_log_context(**values: Any) -> None:
    """Attach key/value context to every record logged from the current thread."""
    current = getattr(_context, "values", None)
    if current is None:
        current = {}
        _context.values = current
    current.update(values)


def clear_log_context() -> None:
    """Drop all context values for the current thread."""
    _context.values = {}


def get_log_context() -> dict[str, Any]:
    """Return a copy of the current thread's log context."""
    return dict(getattr(_context, "values", None) or {})


def _derive_tags(name: str) -> tuple[str, str]:
    last = name.rsplit(".", 1)[-1]
    for suffix, role in _ROLE_SUFFIXES.items():
        if last.endswith(suffix):
            stem = last[: -len(suffix)]
            if not stem.strip("_"):
                return name, ""
            identity = " ".join(part.capitalize() for part in stem.split("_") if part)
            return f"[{identity}]", f"[{role}]"
    return name, ""


class PagemapLogFilter(logging.Filter):
    """
    Adds ``pagemap_identity_tag``, ``pagemap_role_tag`` and ``context_str``
    attributes to each record. Never suppresses a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            identity, role = _derive_tags(str(record.name or ""))
        except Exception:
            identity, role = str(getattr(record, "name", "")), ""
        record.pagemap_identity_tag = identity
        record.pagemap_role_tag = role

        values = get_log_context()
        if values:
            record.context_str = "[" + " ".join(f"{k}={v}" for k, v in values.items()) + "] "
        else:
            record.context_str = ""
        return True


def configure_logging(level: int | str = logging.INFO, fmt: str = DEFAULT_LOG_FORMAT) -> None:
    """Install a stream handler carrying PagemapLogFilter on the root logger (idempotent)."""
    root = logging.getLogger()
    for handler in root.handlers:
        if any(isinstance(f, PagemapLogFilter) for f in handler.filters):
            root.setLevel(level)
            return

    handler = logging.StreamHandler()
    handler.addFilter(PagemapLogFilter())
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)
    root.setLevel(level)

