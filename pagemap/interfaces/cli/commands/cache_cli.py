"""
Cache command: discover every screen and write the manifest cache file.

Architecture:
- Uses CLI bootstrap service to get an Application for this invocation
- Does NOT depend on a running server (separate process)
- Calls ManifestService.rebuild for the work, then prints route counts
"""

from __future__ import annotations

import argparse
from typing import TYPE_CHECKING

from pagemap.helpers.exceptions import ConfigurationError, ManifestCacheError
from pagemap.interfaces.cli.cli_ui import print_error, print_info, run_with_status, show_fields, show_table
from pagemap.services.cli_bootstrap_svc import get_application

if TYPE_CHECKING:
    from pagemap.helpers.dto.manifest_dto import Manifest, ManifestSummary


def show_routes(manifest: Manifest) -> None:
    rows = [
        (
            name,
            record.full_uri,
            record.zone,
            "Public" if record.access.is_public else "Protected",
            "No" if record.navigation.hidden else "Yes",
        )
        for name, record in manifest.items()
    ]
    show_table(("Route Name", "URI", "Zone", "Access", "Navigation"), rows)


def show_summary(summary: ManifestSummary) -> None:
    show_table(
        ("Metric", "Count"),
        [
            ("Total Components", summary.total),
            ("Public Routes", summary.public),
            ("Protected Routes", summary.protected),
            ("Navigation Items", summary.navigation),
            ("Sitemap Entries", summary.sitemap),
        ],
        title="Summary",
    )
    show_table(("Zone", "Components"), list(summary.by_zone.items()), title="By Zone")


def cmd_cache(args: argparse.Namespace) -> int:
    """Write the manifest cache (refuses to overwrite unless --force), then summarize it."""
    try:
        manifest = get_application().manifest
        result = run_with_status("Discovering screens...", manifest.rebuild, force=getattr(args, "force", False))
    except (ConfigurationError, ManifestCacheError, OSError) as e:
        print_error(f"Error writing manifest cache: {e}")
        return 1

    if result is None:
        print_info(f"Manifest cache already exists at {manifest.cache_path}. Use --force to regenerate.")
        return 0

    fields = {
        "Routes": len(result.manifest),
        "File": manifest.cache_path,
        "Duration": f"{result.duration_s:.3f}s",
    }
    if result.collisions:
        fields["Collisions"] = ", ".join(sorted({c.route_name for c in result.collisions}))
    if result.skipped:
        fields["Skipped"] = "; ".join(f"{s.entity_id}: {s.reason}" for s in result.skipped)
    show_fields("Manifest Cached", fields)

    if getattr(args, "show", False):
        show_routes(result.manifest)
    show_summary(manifest.summary())
    return 0
