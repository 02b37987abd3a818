"""
List command: show manifest records, optionally filtered.

Output is a rich table, or JSON (the cache artifact's record shape) with --json.
"""

from __future__ import annotations

import argparse
import json
from typing import TYPE_CHECKING

from pagemap.components.manifest.manifest_codec_comp import to_jsonable
from pagemap.helpers.exceptions import ConfigurationError, ManifestCacheError
from pagemap.interfaces.cli.cli_ui import console, print_error, print_info, print_warning, show_table
from pagemap.services.cli_bootstrap_svc import get_application

if TYPE_CHECKING:
    from pagemap.helpers.dto.manifest_dto import ComponentRecord

MAX_MIDDLEWARE_SHOWN = 3


def _matches(record: ComponentRecord, args: argparse.Namespace) -> bool:
    if args.zone and record.zone != args.zone:
        return False
    if args.public and not record.access.is_public:
        return False
    return not (args.nav and record.navigation.hidden)


def _middleware_summary(middleware: tuple[str, ...]) -> str:
    if len(middleware) > MAX_MIDDLEWARE_SHOWN:
        return ", ".join(middleware[:MAX_MIDDLEWARE_SHOWN]) + "..."
    return ", ".join(middleware)


def cmd_list(args: argparse.Namespace) -> int:
    """List discovered screens."""
    try:
        manifest = get_application().manifest.all()
    except (ConfigurationError, ManifestCacheError, OSError) as e:
        print_error(f"Error loading manifest: {e}")
        return 1

    selected = {name: record for name, record in manifest.items() if _matches(record, args)}
    if not selected:
        print_warning("No components found matching the criteria.")
        return 0

    if args.json:
        console.print_json(json.dumps(to_jsonable(selected)))
        return 0

    rows = [
        (
            name,
            record.full_uri,
            record.zone,
            record.component.short_name,
            "✓ Public" if record.access.is_public else "✗ Protected",
            record.navigation.label if not record.navigation.hidden else None,
            _middleware_summary(record.middleware_stack),
        )
        for name, record in selected.items()
    ]
    show_table(("Route Name", "URI", "Zone", "Component", "Access", "Nav Label", "Middleware"), rows)
    print_info(f"Total: {len(selected)} components")
    return 0
