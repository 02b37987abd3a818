#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import logging

from pagemap.helpers.logging_helper import configure_logging, set_log_context
from pagemap.interfaces.cli.commands.cache_cli import cmd_cache
from pagemap.interfaces.cli.commands.clear_cli import cmd_clear
from pagemap.interfaces.cli.commands.list_cli import cmd_list
from pagemap.interfaces.cli.commands.sitemap_cli import cmd_sitemap


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="pagemap",
        description="pagemap - route, navigation, access and SEO manifest for declared screens",
        epilog="Examples:\n"
        "  pagemap cache                              # Write the manifest cache\n"
        "  pagemap cache --force                      # Rewrite an existing cache\n"
        "  pagemap cache --force --show               # Rewrite and print every route\n"
        "  pagemap list --zone admin --nav            # Admin screens shown in menus\n"
        "  pagemap sitemap --show                     # Preview sitemap URLs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("-v", "--verbose", action="store_true", help="log debug output")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'pagemap <command> --help' for command-specific help)",
    )

    # cache: Discover and persist the manifest
    s = sub.add_parser("cache", help="Discover screens and write the manifest cache")
    s.add_argument("--force", action="store_true", help="overwrite an existing cache file")
    s.add_argument("--show", action="store_true", help="also print every cached route")
    s.set_defaults(func=cmd_cache)

    # clear: Remove the manifest cache
    s = sub.add_parser("clear", help="Delete the manifest cache file")
    s.set_defaults(func=cmd_clear)

    # list: Show manifest records
    s = sub.add_parser("list", help="List discovered screens and their configuration")
    s.add_argument("--zone", help="only screens in this zone")
    s.add_argument("--public", action="store_true", help="only public screens")
    s.add_argument("--nav", action="store_true", help="only screens shown in navigation")
    s.add_argument("--json", action="store_true", help="print JSON instead of a table")
    s.set_defaults(func=cmd_list)

    # sitemap: Generate sitemap.xml
    s = sub.add_parser("sitemap", help="Generate the XML sitemap from public screens")
    group = s.add_mutually_exclusive_group()
    group.add_argument("--output", metavar="PATH", help="write here instead of sitemap.path")
    group.add_argument("--show", action="store_true", help="list sitemap URLs instead of writing the file")
    s.set_defaults(func=cmd_sitemap)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)
    set_log_context(cmd=args.cmd)

    result: int = args.func(args)
    return result


if __name__ == "__main__":
    raise SystemExit(main())
