"""Unit tests for content selection and ordering rules."""

from datetime import date
from pathlib import Path

import pytest

from vitrine.contexts.content.loader import ContentCategory, ContentRecord
from vitrine.contexts.content.schemas import (
    ExperienceFrontmatter,
    PostFrontmatter,
    VentureFrontmatter,
    VentureStatus,
)
from vitrine.contexts.content.selectors import (
    DEFAULT_ORDER,
    adjacent_posts,
    featured_ventures,
    filter_posts_by_category,
    filter_posts_by_tag,
    select_posts,
    sort_experiences,
    sort_ventures,
    venture_order,
    filter_ventures_by_status,
)


def _record(category, slug, metadata):
    return ContentRecord(
        slug=slug,
        category=category,
        metadata=metadata,
        content="",
        source_path=Path(f"{category.directory}/{slug}.mdx"),
    )


def post(slug, day, published=None, category="AI", tags=("python",)):
    meta = PostFrontmatter.model_validate(
        {
            "title": slug.title(),
            "description": "d",
            "date": day,
            "author": "a",
            "category": category,
            "tags": list(tags),
            "published": published,
        }
    )
    return _record(ContentCategory.POSTS, slug, meta)


def experience(slug, current=False, order=None):
    meta = ExperienceFrontmatter.model_validate(
        {
            "title": slug,
            "company": "c",
            "startDate": "2020",
            "endDate": "Present" if current else "2021",
            "current": current,
            "description": "d",
            "technologies": [],
            "order": order,
        }
    )
    return _record(ContentCategory.EXPERIENCES, slug, meta)


def venture(slug, order=None, featured=False, status="live"):
    meta = VentureFrontmatter.model_validate(
        {
            "title": slug,
            "description": "d",
            "icon": "zap",
            "status": status,
            "technologies": [],
            "order": order,
            "featured": featured,
        }
    )
    return _record(ContentCategory.VENTURES, slug, meta)


@pytest.mark.unit
def test_posts_newest_first():
    posts = [post("a", date(2024, 1, 1)), post("b", date(2025, 6, 1)), post("c", date(2024, 12, 1))]

    assert [p.slug for p in select_posts(posts)] == ["b", "c", "a"]


@pytest.mark.unit
def test_posts_on_same_date_keep_input_order():
    posts = [post("a", date(2025, 1, 1)), post("b", date(2025, 1, 1)), post("c", date(2025, 1, 1))]

    assert [p.slug for p in select_posts(posts)] == ["a", "b", "c"]


@pytest.mark.unit
def test_unpublished_posts_excluded():
    """Test that only an explicit published: false hides a post."""
    posts = [
        post("hidden", date(2025, 1, 3), published=False),
        post("shown", date(2025, 1, 2), published=True),
        post("unset", date(2025, 1, 1)),
    ]

    assert [p.slug for p in select_posts(posts)] == ["shown", "unset"]
    assert [p.slug for p in select_posts(posts, include_unpublished=True)] == ["hidden", "shown", "unset"]


@pytest.mark.unit
def test_filter_posts_case_insensitive():
    posts = [
        post("a", date(2025, 1, 1), category="AI", tags=["Python"]),
        post("b", date(2025, 1, 1), category="Engineering", tags=["go"]),
    ]

    assert [p.slug for p in filter_posts_by_category(posts, "ai")] == ["a"]
    assert [p.slug for p in filter_posts_by_tag(posts, "PYTHON")] == ["a"]
    assert filter_posts_by_tag(posts, "rust") == []


@pytest.mark.unit
def test_adjacent_posts():
    """Test that previous is the older neighbour and next the newer one."""
    posts = [post("newest", date(2025, 3, 1)), post("middle", date(2025, 2, 1)), post("oldest", date(2025, 1, 1))]

    previous, following = adjacent_posts(posts, "middle")
    assert previous.slug == "oldest"
    assert following.slug == "newest"

    assert adjacent_posts(posts, "newest")[1] is None
    assert adjacent_posts(posts, "oldest")[0] is None
    assert adjacent_posts(posts, "missing") == (None, None)


@pytest.mark.unit
def test_experiences_by_explicit_order():
    records = [experience("third", order=3), experience("first", order=1), experience("second", order=2)]

    assert [r.slug for r in sort_experiences(records)] == ["first", "second", "third"]


@pytest.mark.unit
def test_current_experience_first_without_order():
    records = [experience("old"), experience("now", current=True), experience("older")]

    assert [r.slug for r in sort_experiences(records)] == ["now", "old", "older"]


@pytest.mark.unit
def test_explicit_order_beats_current_flag():
    records = [experience("now", current=True, order=2), experience("before", order=1)]

    assert [r.slug for r in sort_experiences(records)] == ["before", "now"]


@pytest.mark.unit
def test_ventures_without_order_sort_last():
    records = [venture("unordered"), venture("second", order=2), venture("first", order=1)]

    assert [r.slug for r in sort_ventures(records)] == ["first", "second", "unordered"]
    assert venture_order(records[0]) == DEFAULT_ORDER


@pytest.mark.unit
def test_large_explicit_order_still_precedes_unordered():
    records = [venture("a-unordered"), venture("b-big", order=1000), venture("c-default", order=DEFAULT_ORDER)]

    assert [r.slug for r in sort_ventures(records)] == ["c-default", "b-big", "a-unordered"]


@pytest.mark.unit
def test_ventures_with_equal_order_keep_input_order():
    records = [venture("b"), venture("a"), venture("c", order=5)]

    assert [r.slug for r in sort_ventures(records)] == ["c", "b", "a"]


@pytest.mark.unit
def test_featured_and_status_filters():
    records = [
        venture("a", featured=True, status="building"),
        venture("b", status="live"),
        venture("c", featured=True, status="live"),
    ]

    assert [r.slug for r in featured_ventures(records)] == ["a", "c"]
    assert [r.slug for r in filter_ventures_by_status(records, VentureStatus.LIVE)] == ["b", "c"]
    assert [r.slug for r in filter_ventures_by_status(records, "building")] == ["a"]


@pytest.mark.unit
def test_ventures_explicit_order():
    records = [venture("x", order=3), venture("y", order=1), venture("z", order=2)]

    assert [r.metadata.order for r in sort_ventures(records)] == [1, 2, 3]
