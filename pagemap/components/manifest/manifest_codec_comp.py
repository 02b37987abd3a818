"""
Manifest cache artifact: JSON encoding and atomic file I/O.

Document shape:
    {"format": 1, "generated_at": "<iso>", "records": {"<route name>": {...}}}

Every ComponentRecord field round-trips. Tuples are stored as lists and
enums as their values; decoding restores both. Free-form metadata
(``extra_meta``, ``custom_meta``) is already JSON-native when the pipeline
builds a record, so it is read back as-is.
"""

from __future__ import annotations

import contextlib
import dataclasses
import json
import logging
import os
import tempfile
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pagemap.helpers.dto.manifest_dto import (
    AccessSpec,
    ComponentIdentity,
    ComponentRecord,
    DiscoveryInfo,
    Manifest,
    NavigationSpec,
    OpenGraph,
    RequireMode,
    RouteSpec,
    SeoSpec,
    SitemapFrequency,
)
from pagemap.helpers.dto.zone_dto import NavigationDefaults, ZoneConfig
from pagemap.helpers.exceptions import ManifestCacheError

logger = logging.getLogger(__name__)

CACHE_FORMAT_VERSION = 1


def to_jsonable(value: Any) -> Any:
    """Recursively convert DTOs to JSON-compatible structures."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in value]
    return value


def _build(cls: type, data: Mapping[str, Any], **nested: Callable[[Any], Any]) -> Any:
    """
    Rebuild a dataclass from its encoded form.

    Top-level lists become tuples; ``nested`` maps field names to decoders.
    Absent fields fall back to the dataclass default.
    """
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if f.name not in data:
            continue
        value = data[f.name]
        if f.name in nested and value is not None:
            value = nested[f.name](value)
        elif isinstance(value, list):
            value = tuple(value)
        kwargs[f.name] = value
    return cls(**kwargs)


def _decode_zone(data: Mapping[str, Any]) -> ZoneConfig:
    return _build(ZoneConfig, data, navigation_defaults=lambda d: _build(NavigationDefaults, d))


def decode_record(data: Mapping[str, Any]) -> ComponentRecord:
    return ComponentRecord(
        route=_build(RouteSpec, data["route"], zone_config=_decode_zone),
        navigation=_build(NavigationSpec, data["navigation"]),
        access=_build(AccessSpec, data["access"], require_mode=RequireMode),
        seo=_build(
            SeoSpec,
            data["seo"],
            sitemap_frequency=SitemapFrequency,
            open_graph=lambda d: _build(OpenGraph, d),
        ),
        component=_build(ComponentIdentity, data["component"]),
        middleware_stack=tuple(data.get("middleware_stack") or ()),
        custom_meta=data.get("custom_meta"),
        discovery=_build(DiscoveryInfo, data.get("discovery") or {}),
    )


def encode_manifest(manifest: Manifest, generated_at: str | None = None) -> dict[str, Any]:
    return {
        "format": CACHE_FORMAT_VERSION,
        "generated_at": generated_at or datetime.now(timezone.utc).isoformat(),
        "records": {name: to_jsonable(record) for name, record in manifest.items()},
    }


def decode_manifest(document: Any) -> Manifest:
    """
    Rebuild a manifest from an encoded document.

    Raises:
        ManifestCacheError: unknown format version or malformed records
    """
    if not isinstance(document, Mapping) or document.get("format") != CACHE_FORMAT_VERSION:
        raise ManifestCacheError("Unsupported manifest cache format")

    records = document.get("records")
    if not isinstance(records, Mapping):
        raise ManifestCacheError("Manifest cache has no records table")

    manifest: dict[str, ComponentRecord] = {}
    for name, data in records.items():
        try:
            manifest[name] = decode_record(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ManifestCacheError(f"Malformed cache record {name!r}: {e}") from e
    return MappingProxyType(manifest)


def write_manifest_cache(path: str | os.PathLike[str], manifest: Manifest) -> Path:
    """
    Write the manifest atomically (temp file in the same directory, then replace).

    Parent directories are created as needed.
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)

    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(encode_manifest(manifest), f, indent=2, ensure_ascii=False)
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise

    logger.info("[cache] Wrote %d records to %s", len(manifest), target)
    return target


def read_manifest_cache(path: str | os.PathLike[str]) -> Manifest:
    """
    Load a manifest from the cache file.

    Raises:
        ManifestCacheError: file missing, unreadable, not JSON, or malformed
    """
    target = Path(path)
    try:
        with target.open(encoding="utf-8") as f:
            document = json.load(f)
    except FileNotFoundError as e:
        raise ManifestCacheError(f"Manifest cache not found: {target}") from e
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ManifestCacheError(f"Manifest cache unreadable: {target}: {e}") from e
    return decode_manifest(document)
