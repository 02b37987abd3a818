"""
Sitemap DTOs.

Rules:
- Import only stdlib and typing (no pagemap.* imports)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SitemapEntry:
    loc: str
    priority: float
    change_frequency: str
    last_modified: str | None = None
