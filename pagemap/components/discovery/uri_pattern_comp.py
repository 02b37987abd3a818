"""URI pattern parsing: parameter tokens, normalization and substitution."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pagemap.helpers.exceptions import UrlGenerationError

# {name} is required, {name?} is optional
PARAMETER_TOKEN = re.compile(r"\{(\w+)(\?)?\}")
_MULTI_SLASH = re.compile(r"/{2,}")


def parse_parameters(uri: str) -> tuple[tuple[str, ...], tuple[str, ...]]:
    """
    Extract parameter names from a URI pattern.

    Returns:
        (all parameter names, required parameter names), both in declaration order

    Example:
        >>> parse_parameters("/products/{id}/{slug?}")
        (('id', 'slug'), ('id',))
    """
    names: list[str] = []
    required: list[str] = []
    for match in PARAMETER_TOKEN.finditer(uri):
        names.append(match.group(1))
        if not match.group(2):
            required.append(match.group(1))
    return tuple(names), tuple(required)


def normalize_uri(uri: str) -> str:
    """Exactly one leading slash, no duplicate slashes, no trailing slash except the root."""
    path = _MULTI_SLASH.sub("/", "/" + uri.strip().strip("/"))
    return path if path == "/" else path.rstrip("/")


def build_full_uri(zone_prefix: str, pattern: str) -> str:
    """Join a zone prefix and a route pattern into a normalized absolute path."""
    prefix = (zone_prefix or "").strip().rstrip("/")
    return normalize_uri(f"{prefix}/{pattern.lstrip('/')}")


def path_segments(uri: str) -> list[str]:
    return [s for s in uri.strip("/").split("/") if s]


def is_parameter_segment(segment: str) -> bool:
    return segment.startswith("{")


def strip_parameters(uri: str) -> list[str]:
    """Path segments with parameter tokens removed."""
    return [s for s in path_segments(PARAMETER_TOKEN.sub("", uri)) if not is_parameter_segment(s)]


def fill_uri(uri: str, params: Mapping[str, Any]) -> tuple[str, set[str]]:
    """
    Substitute parameter tokens with values.

    Missing optional parameters drop their token; missing required ones raise.

    Returns:
        (filled path, names of the parameters that were consumed)

    Raises:
        UrlGenerationError: a required parameter has no value
    """
    used: set[str] = set()

    def _replace(match: re.Match[str]) -> str:
        name, optional = match.group(1), bool(match.group(2))
        value = params.get(name)
        if value is None or value == "":
            if optional:
                return ""
            raise UrlGenerationError(f"Missing required parameter [{name}] for URI [{uri}]")
        used.add(name)
        return str(value)

    return normalize_uri(PARAMETER_TOKEN.sub(_replace, uri)), used
