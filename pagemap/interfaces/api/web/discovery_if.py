"""Read-only manifest, navigation, breadcrumb, meta and sitemap endpoints."""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from pagemap.helpers.dto.seo_dto import SeoContext
from pagemap.interfaces.api.types.discovery_types import (
    BreadcrumbsResponse,
    ComponentRecordResponse,
    ManifestResponse,
    MetaResponse,
    NavigationResponse,
)
from pagemap.interfaces.api.web.dependencies import (
    get_breadcrumb_service,
    get_discovery_config,
    get_manifest_service,
    get_meta_service,
    get_navigation_service,
    get_sitemap_service,
)

router = APIRouter(prefix="/api/pagemap", tags=["Discovery"])


# ──────────────────────────────────────────────────────────────────────
# Manifest
# ──────────────────────────────────────────────────────────────────────


@router.get("/manifest")
async def web_manifest(
    zone: str | None = None,
    manifest_service: Any = Depends(get_manifest_service),
) -> ManifestResponse:
    """Every manifest record, optionally limited to one zone."""
    manifest = manifest_service.by_zone(zone) if zone else manifest_service.all()
    return ManifestResponse.from_dto(manifest)


@router.get("/manifest/{route_name}")
async def web_manifest_record(
    route_name: str,
    manifest_service: Any = Depends(get_manifest_service),
) -> ComponentRecordResponse:
    record = manifest_service.get(route_name)
    if record is None:
        raise HTTPException(status_code=404, detail=f"Route '{route_name}' not found")
    return ComponentRecordResponse.from_dto(record)


# ──────────────────────────────────────────────────────────────────────
# Navigation and breadcrumbs
# ──────────────────────────────────────────────────────────────────────


@router.get("/navigation/{zone}")
async def web_navigation(
    zone: str,
    current_route: str | None = None,
    config: Any = Depends(get_discovery_config),
    navigation_service: Any = Depends(get_navigation_service),
) -> NavigationResponse:
    """Anonymous menu for a zone: only public entries are listed."""
    if zone not in config.zones:
        raise HTTPException(status_code=404, detail=f"Zone '{zone}' not configured")
    nodes = navigation_service.for_zone(zone, current_route=current_route)
    return NavigationResponse.from_dto(zone, nodes)


@router.get("/breadcrumbs/{route_name}")
async def web_breadcrumbs(
    route_name: str,
    request: Request,
    breadcrumb_service: Any = Depends(get_breadcrumb_service),
) -> BreadcrumbsResponse:
    """Breadcrumb chain; query parameters fill the route's parameter tokens."""
    crumbs = breadcrumb_service.generate(route_name, dict(request.query_params))
    return BreadcrumbsResponse.from_dto(route_name, crumbs)


# ──────────────────────────────────────────────────────────────────────
# SEO
# ──────────────────────────────────────────────────────────────────────


@router.get("/meta/{route_name}")
async def web_meta(
    route_name: str,
    request: Request,
    manifest_service: Any = Depends(get_manifest_service),
    meta_service: Any = Depends(get_meta_service),
) -> MetaResponse:
    """Head tags for a route; query parameters fill title/description placeholders."""
    if manifest_service.get(route_name) is None:
        raise HTTPException(status_code=404, detail=f"Route '{route_name}' not found")
    context = SeoContext(parameters=dict(request.query_params))
    return MetaResponse(
        route_name=route_name,
        title=meta_service.title(route_name, context),
        html=meta_service.render(route_name, context),
    )


@router.get("/sitemap.xml")
async def web_sitemap(
    sitemap_service: Any = Depends(get_sitemap_service),
) -> Response:
    return Response(content=sitemap_service.generate(), media_type="application/xml")
