"""
SEO meta value resolution and HTML tag rendering.

Values are resolved per request with precedence: explicit overrides, then
the manifest SeoSpec, then global fallbacks (site name, default description
and image). ``{placeholders}`` in text values are filled from request
parameters.
"""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pagemap.helpers.dto.manifest_dto import robots_directive
from pagemap.helpers.text_helper import substitute_placeholders

if TYPE_CHECKING:
    from pagemap.helpers.dto.config_dto import SeoDefaults
    from pagemap.helpers.dto.manifest_dto import SeoSpec

# Text values that accept {placeholders}
TEMPLATED_KEYS = ("title", "full_title", "description", "og_title", "og_description")


def seo_fallback_values(defaults: SeoDefaults) -> dict[str, Any]:
    """Values used when no manifest record exists for the route."""
    return {
        "title": defaults.site_name,
        "full_title": defaults.site_name,
        "description": defaults.default_description,
        "noindex": False,
        "nofollow": False,
        "canonical": None,
        "keywords": [],
        "og_title": None,
        "og_description": None,
        "og_image": defaults.default_og_image,
        "og_type": "website",
        "twitter_card": "summary",
        "meta": {},
    }


def seo_spec_values(seo: SeoSpec) -> dict[str, Any]:
    """Flatten a SeoSpec to the rendering key set."""
    return {
        "title": seo.title,
        "full_title": seo.full_title,
        "description": seo.description,
        "noindex": seo.noindex,
        "nofollow": seo.nofollow,
        "canonical": seo.canonical,
        "keywords": list(seo.keywords),
        "og_title": seo.open_graph.title,
        "og_description": seo.open_graph.description,
        "og_image": seo.open_graph.image,
        "og_type": seo.open_graph.type,
        "twitter_card": seo.twitter_card_type,
        "meta": dict(seo.extra_meta),
    }


def resolve_seo_values(
    seo: SeoSpec | None,
    defaults: SeoDefaults,
    overrides: Mapping[str, Any] | None = None,
    parameters: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Merge fallback, manifest and override values into one flat mapping."""
    values = seo_fallback_values(defaults)
    if seo is not None:
        manifest_values = seo_spec_values(seo)
        values.update({k: v for k, v in manifest_values.items() if v is not None})

    overrides = dict(overrides or {})
    # an overridden title without its own full title keeps the configured suffix
    if "title" in overrides and "full_title" not in overrides and overrides["title"]:
        overrides["full_title"] = f"{overrides['title']}{defaults.title_suffix}"
    values.update(overrides)

    if parameters:
        params = dict(parameters)
        for key in TEMPLATED_KEYS:
            if isinstance(values.get(key), str):
                values[key] = substitute_placeholders(values[key], params)

    if "robots" not in overrides:
        values["robots"] = robots_directive(bool(values.get("noindex")), bool(values.get("nofollow")))
    return values


def absolute_url(value: str, base_url: str) -> str:
    if value.startswith(("http://", "https://")) or not base_url:
        return value
    return base_url.rstrip("/") + "/" + value.lstrip("/")


def page_title(values: Mapping[str, Any], site_name: str) -> str:
    return values.get("full_title") or values.get("title") or site_name


def _meta(attr: str, name: str, content: Any) -> str:
    return f'<meta {attr}="{html.escape(str(name))}" content="{html.escape(str(content))}">'


def render_meta_tags(
    values: Mapping[str, Any],
    defaults: SeoDefaults,
    base_url: str = "",
    current_url: str | None = None,
) -> str:
    """Render resolved values as head tags, one per line, all content escaped."""
    tags = [f"<title>{html.escape(page_title(values, defaults.site_name))}</title>"]

    if values.get("description"):
        tags.append(_meta("name", "description", values["description"]))
    tags.append(_meta("name", "robots", values.get("robots") or "index, follow"))

    if values.get("canonical"):
        tags.append(f'<link rel="canonical" href="{html.escape(absolute_url(values["canonical"], base_url))}">')

    keywords = values.get("keywords") or []
    if keywords:
        tags.append(_meta("name", "keywords", ", ".join(keywords)))

    og_title = values.get("og_title") or values.get("title")
    og_description = values.get("og_description") or values.get("description")
    og_image = values.get("og_image")
    image_url = absolute_url(og_image, base_url) if og_image else None

    # Open Graph
    if og_title:
        tags.append(_meta("property", "og:title", og_title))
    if og_description:
        tags.append(_meta("property", "og:description", og_description))
    if image_url:
        tags.append(_meta("property", "og:image", image_url))
    if values.get("og_type"):
        tags.append(_meta("property", "og:type", values["og_type"]))
    if current_url:
        tags.append(_meta("property", "og:url", current_url))
    tags.append(_meta("property", "og:site_name", defaults.site_name))

    # Twitter
    tags.append(_meta("name", "twitter:card", values.get("twitter_card") or "summary"))
    if defaults.twitter_site:
        tags.append(_meta("name", "twitter:site", defaults.twitter_site))
    if og_title:
        tags.append(_meta("name", "twitter:title", og_title))
    if og_description:
        tags.append(_meta("name", "twitter:description", og_description))
    if image_url:
        tags.append(_meta("name", "twitter:image", image_url))

    for name, content in (values.get("meta") or {}).items():
        tags.append(_meta("name", name, content))

    return "\n".join(tags)
