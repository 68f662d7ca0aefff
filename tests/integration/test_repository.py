"""
Integration tests for ContentRepository over an on-disk content store.
Tests: content files → loader → selectors → presentation-ordered records.
"""

import pytest

from vitrine.contexts.content import ContentNotFoundError, ContentRepository


@pytest.mark.integration
def test_all_posts_newest_first_without_drafts(content_root):
    repository = ContentRepository(content_root)

    assert [p.slug for p in repository.all_posts()] == ["beta", "delta", "alpha"]
    assert [p.slug for p in repository.all_posts(include_unpublished=True)] == [
        "draft",
        "beta",
        "delta",
        "alpha",
    ]


@pytest.mark.integration
def test_posts_by_category_and_tag(content_root):
    repository = ContentRepository(content_root)

    assert [p.slug for p in repository.posts_by_category("ENGINEERING")] == ["beta", "delta"]
    assert [p.slug for p in repository.posts_by_tag("payments")] == ["beta", "delta"]
    assert repository.posts_by_tag("draft") == []


@pytest.mark.integration
def test_unpublished_post_reachable_by_identifier(content_root):
    repository = ContentRepository(content_root)

    assert repository.post("draft").metadata.published is False


@pytest.mark.integration
def test_invalid_post_not_found(content_root):
    repository = ContentRepository(content_root)

    with pytest.raises(ContentNotFoundError):
        repository.post("broken")
    with pytest.raises(ContentNotFoundError):
        repository.post("nope")


@pytest.mark.integration
def test_experience_timeline_order(content_root):
    repository = ContentRepository(content_root)

    records = repository.all_experiences()

    assert [r.slug for r in records] == ["b-safaricom", "a-freelance", "c-intern"]
    assert records[2].metadata.start_date == "2019"


@pytest.mark.integration
def test_ventures(content_root):
    repository = ContentRepository(content_root)

    assert [v.slug for v in repository.all_ventures()] == ["two", "one", "three"]
    assert [v.slug for v in repository.featured_ventures()] == ["one"]
    assert repository.venture("one").metadata.metrics["users"] == 100

    with pytest.raises(ContentNotFoundError):
        repository.venture("four")


@pytest.mark.integration
def test_empty_store(tmp_path):
    repository = ContentRepository(tmp_path)

    assert repository.all_posts() == []
    assert repository.all_experiences() == []
    assert repository.all_ventures() == []


@pytest.mark.integration
def test_loading_twice_is_deterministic(content_root):
    """Test that unchanged content yields identical ordered output on every load."""
    repository = ContentRepository(content_root)

    assert repository.all_posts() == repository.all_posts()
    assert repository.all_experiences() == repository.all_experiences()
    assert repository.all_ventures() == repository.all_ventures()
