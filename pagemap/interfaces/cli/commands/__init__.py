"""
Commands package.
"""

from .cache_cli import cmd_cache
from .clear_cli import cmd_clear
from .list_cli import cmd_list
from .sitemap_cli import cmd_sitemap

__all__ = [
    "cmd_cache",
    "cmd_clear",
    "cmd_list",
    "cmd_sitemap",
]
