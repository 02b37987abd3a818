"""Clear command: delete the manifest cache file."""

from __future__ import annotations

import argparse

from pagemap.helpers.exceptions import ConfigurationError, ManifestCacheError
from pagemap.interfaces.cli.cli_ui import print_error, print_info, print_success
from pagemap.services.cli_bootstrap_svc import get_application


def cmd_clear(args: argparse.Namespace) -> int:
    """Remove the cache file so the next load discovers fresh."""
    try:
        manifest = get_application().manifest
        removed = manifest.clear_cache()
    except (ConfigurationError, ManifestCacheError, OSError) as e:
        print_error(f"Error clearing manifest cache: {e}")
        return 1

    if removed:
        print_success(f"Manifest cache cleared: {manifest.cache_path}")
    else:
        print_info("No manifest cache to clear")
    return 0
