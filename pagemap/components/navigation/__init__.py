"""
Navigation package.
"""

from .nav_tree_comp import build_nav_tree, flat_nav_items, is_active_route, iter_nav_items, make_nav_item

__all__ = [
    "build_nav_tree",
    "flat_nav_items",
    "is_active_route",
    "iter_nav_items",
    "make_nav_item",
]
