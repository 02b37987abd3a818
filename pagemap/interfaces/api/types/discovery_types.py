"""Discovery API types - Pydantic models for manifest, navigation and breadcrumb endpoints.

External API contracts; each model converts from its DTO via ``from_dto``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel, Field

from pagemap.helpers.dto.navigation_dto import NavGroup

if TYPE_CHECKING:
    from pagemap.helpers.dto.manifest_dto import ComponentRecord, Manifest
    from pagemap.helpers.dto.navigation_dto import Breadcrumb, NavItem, NavNode


class RouteResponse(BaseModel):
    uri_pattern: str
    full_uri: str
    zone: str
    http_methods: list[str]
    parameters: list[str] = Field(default_factory=list, description="Every parameter token, in order")
    required_parameters: list[str] = Field(default_factory=list)
    constraints: dict[str, str] = Field(default_factory=dict)
    domain: str | None = None


class NavigationSpecResponse(BaseModel):
    label: str
    group: str | None = None
    icon: str | None = None
    sort: int
    hidden: bool
    badge: str | None = None
    badge_color: str | None = None
    parent: str | None = None


class AccessResponse(BaseModel):
    is_public: bool
    authenticated: bool
    permissions: list[str]
    roles: list[str]
    require: str
    guard: str | None = None
    redirect_to: str | None = None
    denied_status_code: int


class SeoResponse(BaseModel):
    title: str | None = None
    full_title: str | None = None
    description: str | None = None
    robots: str
    sitemap_eligible: bool
    sitemap_priority: float
    sitemap_frequency: str


class ComponentRecordResponse(BaseModel):
    """One manifest record."""

    route_name: str = Field(..., description="Final route name (manifest key)")
    entity_id: str
    short_name: str
    route: RouteResponse
    navigation: NavigationSpecResponse
    access: AccessResponse
    seo: SeoResponse
    middleware: list[str]
    custom_meta: dict[str, Any] | None = None

    @classmethod
    def from_dto(cls, dto: ComponentRecord) -> ComponentRecordResponse:
        """Convert ComponentRecord DTO to Pydantic response model."""
        route, nav, access, seo = dto.route, dto.navigation, dto.access, dto.seo
        return cls(
            route_name=dto.route_name,
            entity_id=dto.entity_id,
            short_name=dto.component.short_name,
            route=RouteResponse(
                uri_pattern=route.uri_pattern,
                full_uri=route.full_uri,
                zone=route.zone,
                http_methods=list(route.http_methods),
                parameters=list(route.parameter_names),
                required_parameters=list(route.required_parameter_names),
                constraints=dict(route.path_constraints),
                domain=route.domain,
            ),
            navigation=NavigationSpecResponse(
                label=nav.label,
                group=nav.group_path,
                icon=nav.icon,
                sort=nav.sort_order,
                hidden=nav.hidden,
                badge=nav.badge,
                badge_color=nav.badge_color,
                parent=nav.parent_route_name,
            ),
            access=AccessResponse(
                is_public=access.is_public,
                authenticated=access.authenticated,
                permissions=list(access.permissions),
                roles=list(access.roles),
                require=access.require_mode.value,
                guard=access.guard,
                redirect_to=access.redirect_route_name,
                denied_status_code=access.denied_status_code,
            ),
            seo=SeoResponse(
                title=seo.title,
                full_title=seo.full_title,
                description=seo.description,
                robots=seo.robots,
                sitemap_eligible=seo.sitemap_eligible,
                sitemap_priority=seo.sitemap_priority,
                sitemap_frequency=seo.sitemap_frequency.value,
            ),
            middleware=list(dto.middleware_stack),
            custom_meta=dict(dto.custom_meta) if dto.custom_meta is not None else None,
        )


class ManifestResponse(BaseModel):
    """Response for the manifest listing."""

    count: int = Field(..., description="Number of records")
    records: list[ComponentRecordResponse]

    @classmethod
    def from_dto(cls, manifest: Manifest) -> ManifestResponse:
        records = [ComponentRecordResponse.from_dto(record) for record in manifest.values()]
        return cls(count=len(records), records=records)


class NavNodeResponse(BaseModel):
    """A menu item or group; groups carry their children."""

    type: Literal["item", "group"]
    label: str
    sort: int
    depth: int
    active: bool
    route_name: str | None = None
    url: str | None = None
    icon: str | None = None
    badge: str | None = None
    badge_color: str | None = None
    has_params: bool = False
    meta: dict[str, Any] = Field(default_factory=dict)
    children: list[NavNodeResponse] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: NavNode) -> NavNodeResponse:
        if isinstance(dto, NavGroup):
            return cls(
                type="group",
                label=dto.label,
                sort=dto.sort_order,
                depth=dto.depth,
                active=dto.is_active,
                children=[cls.from_dto(child) for child in dto.children],
            )
        return cls._from_item(dto)

    @classmethod
    def _from_item(cls, dto: NavItem) -> NavNodeResponse:
        return cls(
            type="item",
            label=dto.label,
            sort=dto.sort_order,
            depth=dto.depth,
            active=dto.active,
            route_name=dto.route_name,
            url=dto.url,
            icon=dto.icon,
            badge=dto.badge,
            badge_color=dto.badge_color,
            has_params=dto.has_params,
            meta=dict(dto.meta),
        )


class NavigationResponse(BaseModel):
    zone: str
    items: list[NavNodeResponse]

    @classmethod
    def from_dto(cls, zone: str, nodes: list[NavNode]) -> NavigationResponse:
        return cls(zone=zone, items=[NavNodeResponse.from_dto(node) for node in nodes])


class BreadcrumbResponse(BaseModel):
    label: str
    url: str | None = None
    active: bool = False

    @classmethod
    def from_dto(cls, dto: Breadcrumb) -> BreadcrumbResponse:
        return cls(label=dto.label, url=dto.url, active=dto.active)


class BreadcrumbsResponse(BaseModel):
    route_name: str
    breadcrumbs: list[BreadcrumbResponse]

    @classmethod
    def from_dto(cls, route_name: str, crumbs: list[Breadcrumb]) -> BreadcrumbsResponse:
        return cls(route_name=route_name, breadcrumbs=[BreadcrumbResponse.from_dto(c) for c in crumbs])


class MetaResponse(BaseModel):
    """Resolved head tags for a route."""

    route_name: str
    title: str
    html: str = Field(..., description="Rendered <title> and <meta>/<link> tags")
