"""
Navigation tree construction.

Records are placed into nested groups keyed by their dot-separated group
path. Each group takes the minimum sort order of anything beneath it, so a
group surfaces at the position of its most prominent child. Groups nested
deeper than ``max_depth`` are merged into their parent rather than dropped.

Ordering at every level is ascending sort order, ties broken by the order in
which entries were first seen.
"""

from __future__ import annotations

import dataclasses
import itertools
import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pagemap.helpers.dto.navigation_dto import NavGroup, NavItem, NavNode
from pagemap.helpers.exceptions import UrlGenerationError

if TYPE_CHECKING:
    from pagemap.helpers.dto.manifest_dto import ComponentRecord

logger = logging.getLogger(__name__)

UrlFor = Callable[[str], str]


def is_active_route(route_name: str | None, current_route: str | None) -> bool:
    """True if ``route_name`` is the current route or a dot-prefixed ancestor of it."""
    if not route_name or not current_route:
        return False
    return current_route == route_name or current_route.startswith(route_name + ".")


def item_url(record: ComponentRecord, url_for: UrlFor | None) -> str | None:
    """Static URL for a menu entry, or None when none can be produced."""
    if url_for is None or record.route.has_required_parameter:
        return None
    try:
        return url_for(record.route_name)
    except UrlGenerationError as e:
        logger.debug("[navigation] No URL for %s: %s", record.route_name, e)
        return None


def make_nav_item(
    record: ComponentRecord,
    url_for: UrlFor | None = None,
    current_route: str | None = None,
    depth: int = 0,
) -> NavItem:
    nav = record.navigation
    return NavItem(
        label=nav.label,
        route_name=record.route_name,
        url=item_url(record, url_for),
        icon=nav.icon,
        sort_order=nav.sort_order,
        badge=nav.badge,
        badge_color=nav.badge_color,
        active=is_active_route(record.route_name, current_route),
        has_params=record.route.has_required_parameter,
        meta=dict(nav.extra_meta),
        depth=depth,
    )


@dataclass
class _GroupBucket:
    """Mutable group under construction."""

    label: str
    seq: int
    sort_order: int | None = None
    # (seq, NavItem | _GroupBucket) in first-seen order
    entries: list[tuple[int, NavItem | _GroupBucket]] = field(default_factory=list)
    subgroups: dict[str, _GroupBucket] = field(default_factory=dict)

    def observe(self, sort_order: int) -> None:
        self.sort_order = sort_order if self.sort_order is None else min(self.sort_order, sort_order)


def _populate(items: Iterable[tuple[NavItem, tuple[str, ...]]]) -> _GroupBucket:
    counter = itertools.count()
    root = _GroupBucket(label="", seq=next(counter))

    for item, segments in items:
        bucket = root
        for segment in segments:
            child = bucket.subgroups.get(segment)
            if child is None:
                child = _GroupBucket(label=segment, seq=next(counter))
                bucket.subgroups[segment] = child
                bucket.entries.append((child.seq, child))
            child.observe(item.sort_order)
            bucket = child
        bucket.entries.append((next(counter), item))
    return root


def _materialize(bucket: _GroupBucket, depth: int, max_depth: int) -> list[tuple[int, int, NavNode]]:
    """Children of ``bucket`` as (sort, seq, node) placed at ``depth``."""
    nodes: list[tuple[int, int, NavNode]] = []
    for seq, entry in bucket.entries:
        if isinstance(entry, NavItem):
            nodes.append((entry.sort_order, seq, dataclasses.replace(entry, depth=depth)))
            continue

        if depth >= max_depth:
            # too deep: splice the group's contents into this level
            nodes.extend(_materialize(entry, depth, max_depth))
            continue

        children = _materialize(entry, depth + 1, max_depth)
        sort_order = entry.sort_order if entry.sort_order is not None else 0
        group = NavGroup(label=entry.label, sort_order=sort_order, depth=depth, children=_ordered(children))
        nodes.append((sort_order, seq, group))
    return nodes


def _ordered(nodes: list[tuple[int, int, NavNode]]) -> tuple[NavNode, ...]:
    return tuple(node for _, _, node in sorted(nodes, key=lambda n: (n[0], n[1])))


def build_nav_tree(
    records: Iterable[ComponentRecord],
    url_for: UrlFor | None = None,
    current_route: str | None = None,
    max_depth: int = 3,
) -> list[NavNode]:
    """
    Build the ordered menu tree for a set of navigation-eligible records.

    Args:
        records: Records in discovery order (already filtered for visibility/access)
        url_for: Route name -> URL; may raise UrlGenerationError
        current_route: Name of the route being served, for the active flag
        max_depth: Maximum number of nested group levels (>= 1)

    Returns:
        Top-level nodes: ungrouped items and groups, interleaved by sort order
    """
    placed = (
        (make_nav_item(record, url_for, current_route), record.navigation.group_segments)
        for record in records
    )
    root = _populate(placed)
    return list(_ordered(_materialize(root, 0, max(1, max_depth))))


def iter_nav_items(nodes: Iterable[NavNode]) -> Iterator[NavItem]:
    """Depth-first walk over every leaf item of a tree."""
    for node in nodes:
        if isinstance(node, NavGroup):
            yield from iter_nav_items(node.children)
        else:
            yield node


def flat_nav_items(
    records: Iterable[ComponentRecord],
    url_for: UrlFor | None = None,
    current_route: str | None = None,
) -> list[NavItem]:
    """Ungrouped menu entries ordered by sort order, then discovery order."""
    items = [make_nav_item(record, url_for, current_route) for record in records]
    return [item for _, item in sorted(enumerate(items), key=lambda p: (p[1].sort_order, p[0]))]
