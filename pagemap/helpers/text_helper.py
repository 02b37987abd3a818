"""Text helpers for route-name slugs, human labels and wildcard patterns."""

from __future__ import annotations

import re
from collections.abc import Iterable

_CAPITAL = re.compile(r"(?<!^)(?<![_\-\s])[A-Z]")
_LABEL_SUFFIX = re.compile(r"(Page|Component|View|Screen|Index|Show|Edit|Create|List)$")

WILDCARD = "*"


def class_name_to_slug(name: str) -> str:
    """
    Convert a class or module name to a route-friendly slug.

    UserDashboard -> user-dashboard, users_index -> users-index
    """
    slug = _CAPITAL.sub(lambda m: "-" + m.group(0), name)
    return slug.replace("_", "-").lower()


def class_name_to_label(name: str) -> str:
    """
    Convert a class name to a human-readable label.

    Strips common screen suffix words and inserts spaces before internal
    capitals: UserDashboardPage -> User Dashboard, UsersIndex -> Users.
    Falls back to the spaced original name when stripping leaves nothing.
    """
    base = name.replace("_", " ").strip()
    stripped = _LABEL_SUFFIX.sub("", base) or base
    return _CAPITAL.sub(lambda m: " " + m.group(0), stripped).strip()


def has_wildcard(pattern: str) -> bool:
    return WILDCARD in pattern


def wildcard_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a trailing/embedded ``*`` pattern into an anchored regex."""
    escaped = re.escape(pattern).replace(re.escape(WILDCARD), ".*")
    return re.compile(f"^{escaped}$")


def matches_pattern(value: str, pattern: str) -> bool:
    """Exact match, or wildcard match when the pattern contains ``*``."""
    if value == pattern:
        return True
    if has_wildcard(pattern):
        return wildcard_to_regex(pattern).match(value) is not None
    return False


def unique_ordered(values: Iterable[str]) -> tuple[str, ...]:
    """Deduplicate preserving first-seen order."""
    return tuple(dict.fromkeys(values))


def substitute_placeholders(template: str, values: dict[str, object]) -> str:
    """Replace ``{key}`` placeholders with values; unknown placeholders are left alone."""
    result = template
    for key, value in values.items():
        result = result.replace("{" + str(key) + "}", str(value))
    return result
