"""Pydantic request/response models for the HTTP API."""

from .discovery_types import (
    AccessResponse,
    BreadcrumbResponse,
    BreadcrumbsResponse,
    ComponentRecordResponse,
    ManifestResponse,
    MetaResponse,
    NavigationResponse,
    NavigationSpecResponse,
    NavNodeResponse,
    RouteResponse,
    SeoResponse,
)

__all__ = [
    "AccessResponse",
    "BreadcrumbResponse",
    "BreadcrumbsResponse",
    "ComponentRecordResponse",
    "ManifestResponse",
    "MetaResponse",
    "NavNodeResponse",
    "NavigationResponse",
    "NavigationSpecResponse",
    "RouteResponse",
    "SeoResponse",
]
