"""
Content Selection and Ordering

Orders and filters loaded records for a specific presentation context.

All sorts are stable and the loader hands records over in filename order, so
records that compare equal keep their filename order on every platform.
Absent optional fields fall back to default ordering values; nothing here raises.
"""

from functools import cmp_to_key
from typing import Iterable, List, Optional, Tuple

from vitrine.contexts.content.loader import ContentRecord
from vitrine.contexts.content.schemas import VentureStatus

# Order reported for ventures without an explicit order; they still sort after every ordered venture
DEFAULT_ORDER = 999


# Blog posts


def is_listed(record: ContentRecord) -> bool:
    """A post is listed unless its header explicitly sets published: false."""
    return record.metadata.published is not False


def select_posts(
    records: Iterable[ContentRecord], include_unpublished: bool = False
) -> List[ContentRecord]:
    """
    Filter unpublished posts and sort newest first.

    Args:
        records: Post records in filename order
        include_unpublished: Keep posts marked published: false

    Returns:
        Posts sorted by date descending; equal dates keep their input order
    """
    posts = [r for r in records if include_unpublished or is_listed(r)]
    return sorted(posts, key=lambda r: r.metadata.date, reverse=True)


def filter_posts_by_category(records: Iterable[ContentRecord], category: str) -> List[ContentRecord]:
    """Posts whose category matches, ignoring case."""
    wanted = category.lower()
    return [r for r in records if r.metadata.category.lower() == wanted]


def filter_posts_by_tag(records: Iterable[ContentRecord], tag: str) -> List[ContentRecord]:
    """Posts carrying the tag, ignoring case."""
    wanted = tag.lower()
    return [r for r in records if any(t.lower() == wanted for t in r.metadata.tags)]


def adjacent_posts(
    posts: List[ContentRecord], slug: str
) -> Tuple[Optional[ContentRecord], Optional[ContentRecord]]:
    """
    Find the neighbours of a post in a newest-first listing.

    Returns:
        (previous, next) where previous is the older neighbour and next the newer
        one. Both are None when the slug is not in the listing.
    """
    index = next((i for i, post in enumerate(posts) if post.slug == slug), None)
    if index is None:
        return None, None

    previous = posts[index + 1] if index < len(posts) - 1 else None
    following = posts[index - 1] if index > 0 else None
    return previous, following


# Experience entries


def _compare_experiences(a: ContentRecord, b: ContentRecord) -> int:
    order_a, order_b = a.metadata.order, b.metadata.order
    if order_a is not None and order_b is not None:
        return order_a - order_b

    # Current roles first
    if a.metadata.current and not b.metadata.current:
        return -1
    if b.metadata.current and not a.metadata.current:
        return 1
    return 0


def sort_experiences(records: Iterable[ContentRecord]) -> List[ContentRecord]:
    """
    Order experience entries for the timeline.

    Entries that both carry an explicit order compare by it; otherwise current
    roles come before completed ones; otherwise input order is kept.
    """
    return sorted(records, key=cmp_to_key(_compare_experiences))


# Ventures


def venture_order(record: ContentRecord) -> int:
    """Explicit order of a venture for display, or DEFAULT_ORDER when absent."""
    order = record.metadata.order
    return DEFAULT_ORDER if order is None else order


def sort_ventures(records: Iterable[ContentRecord]) -> List[ContentRecord]:
    """Ventures by explicit order; ventures without one sort after every venture that has one."""
    return sorted(records, key=_venture_sort_key)


def _venture_sort_key(record: ContentRecord) -> Tuple[bool, int]:
    order = record.metadata.order
    return (order is None, order or 0)


def featured_ventures(records: Iterable[ContentRecord]) -> List[ContentRecord]:
    """Ventures flagged featured: true, preserving input order."""
    return [r for r in records if r.metadata.featured is True]


def filter_ventures_by_status(
    records: Iterable[ContentRecord], status: VentureStatus
) -> List[ContentRecord]:
    """Ventures with the given development status."""
    status = VentureStatus(status)
    return [r for r in records if r.metadata.status == status]
