"""
Request-scoped SEO DTOs.

Rules:
- Import only stdlib and typing (no pagemap.* imports)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class SeoContext:
    """
    Per-request SEO state handed to the rendering boundary.

    Precedence when resolving a value: explicit ``overrides`` > manifest
    SEO record > global fallback. ``parameters`` fill ``{placeholders}``
    in titles and descriptions.
    """

    overrides: dict[str, Any] = field(default_factory=dict)
    parameters: dict[str, Any] = field(default_factory=dict)
    current_url: str | None = None

    def set(self, key: str, value: Any) -> SeoContext:
        self.overrides[key] = value
        return self

    def set_many(self, values: dict[str, Any]) -> SeoContext:
        self.overrides.update(values)
        return self

    def clear(self) -> SeoContext:
        self.overrides.clear()
        return self
