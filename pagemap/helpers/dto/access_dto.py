"""
Access-enforcement DTOs.

Rules:
- Import only stdlib and typing (no pagemap.* imports)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of checking an actor against a screen's access rule."""

    allowed: bool
    status_code: int = 200
    redirect_route_name: str | None = None
    reason: str = ""

    @classmethod
    def allow(cls, reason: str = "") -> AccessDecision:
        return cls(allowed=True, reason=reason)
