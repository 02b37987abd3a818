"""Sitemap command: write sitemap.xml, or preview its URLs with --show."""

from __future__ import annotations

import argparse

from pagemap.helpers.exceptions import ConfigurationError, ManifestCacheError
from pagemap.interfaces.cli.cli_ui import print_error, print_info, print_success, print_warning, show_table
from pagemap.services.cli_bootstrap_svc import get_application


def _show_urls(entries) -> int:
    if not entries:
        print_warning("No routes eligible for sitemap.")
        return 0

    rows = [(e.loc, f"{e.priority:.1f}", e.change_frequency) for e in entries]
    show_table(("URL", "Priority", "Frequency"), rows)
    print_info(f"Total: {len(rows)} URLs")
    return 0


def cmd_sitemap(args: argparse.Namespace) -> int:
    """Generate the sitemap from public screens."""
    try:
        sitemap = get_application().sitemap
        if getattr(args, "show", False):
            return _show_urls(sitemap.entries())

        path = sitemap.save(getattr(args, "output", None))
        count = sitemap.count()
    except (ConfigurationError, ManifestCacheError, OSError) as e:
        print_error(f"Error generating sitemap: {e}")
        return 1

    print_success(f"Sitemap generated with {count} URLs: {path}")
    return 0
