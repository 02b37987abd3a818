"""Sitemap entries and sitemaps.org XML rendering."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from collections.abc import Iterable
from typing import TYPE_CHECKING

from pagemap.helpers.dto.sitemap_dto import SitemapEntry

if TYPE_CHECKING:
    from pagemap.helpers.dto.manifest_dto import ComponentRecord

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def sitemap_url(base_url: str, full_uri: str) -> str:
    return base_url.rstrip("/") + full_uri


def sitemap_entries(
    records: Iterable[ComponentRecord],
    base_url: str = "",
    last_modified: str | None = None,
) -> list[SitemapEntry]:
    """
    Entries for records that can have a static URL.

    Records whose route needs a parameter are left out. Ordered by priority
    (highest first), then location.
    """
    entries = [
        SitemapEntry(
            loc=sitemap_url(base_url, record.full_uri),
            priority=record.seo.sitemap_priority,
            change_frequency=record.seo.sitemap_frequency.value,
            last_modified=last_modified,
        )
        for record in records
        if not record.route.has_required_parameter
    ]
    entries.sort(key=lambda e: (-e.priority, e.loc))
    return entries


def render_sitemap_xml(entries: Iterable[SitemapEntry]) -> str:
    ET.register_namespace("", SITEMAP_NAMESPACE)
    urlset = ET.Element(f"{{{SITEMAP_NAMESPACE}}}urlset")

    for entry in entries:
        url = ET.SubElement(urlset, f"{{{SITEMAP_NAMESPACE}}}url")
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}loc").text = entry.loc
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}priority").text = f"{entry.priority:.1f}"
        ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}changefreq").text = entry.change_frequency
        if entry.last_modified:
            ET.SubElement(url, f"{{{SITEMAP_NAMESPACE}}}lastmod").text = entry.last_modified

    ET.indent(urlset)
    return XML_DECLARATION + "\n" + ET.tostring(urlset, encoding="unicode") + "\n"
