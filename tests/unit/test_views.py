"""Unit tests for record-to-view mapping."""

from datetime import date
from pathlib import Path

import pytest

from vitrine.contexts.content.loader import ContentCategory, ContentRecord
from vitrine.contexts.content.schemas import (
    ExperienceFrontmatter,
    PostFrontmatter,
    VentureFrontmatter,
)
from vitrine.contexts.presentation.badges import BadgeVariant
from vitrine.contexts.presentation.icons import Icon
from vitrine.contexts.presentation.views import (
    calculate_reading_time,
    experience_item,
    post_card,
    post_page,
    share_links,
    venture_card,
    venture_metrics,
    venture_page,
)


def post_record(content="", **overrides):
    data = {
        "title": "Hello World",
        "description": "First post",
        "date": date(2025, 1, 5),
        "author": "ammly",
        "category": "AI",
        "tags": ["python", "ai", "rag", "kenya", "llm"],
        **overrides,
    }
    return ContentRecord(
        slug="hello-world",
        category=ContentCategory.POSTS,
        metadata=PostFrontmatter.model_validate(data),
        content=content,
        source_path=Path("blog/hello-world.mdx"),
    )


def venture_record(**overrides):
    data = {
        "title": "Sheria AI",
        "description": "Legal research",
        "icon": "scale",
        "status": "live",
        "technologies": ["Python", "FastAPI", "PostgreSQL", "Redis", "Docker"],
        **overrides,
    }
    return ContentRecord(
        slug="sheria",
        category=ContentCategory.VENTURES,
        metadata=VentureFrontmatter.model_validate(data),
        content="## Overview\n\nText.",
        source_path=Path("ventures/sheria.mdx"),
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "words, expected",
    [(0, "0 min read"), (1, "1 min read"), (200, "1 min read"), (201, "2 min read"), (450, "3 min read")],
)
def test_reading_time_rounds_up(words, expected):
    assert calculate_reading_time(" ".join(["word"] * words)) == expected


@pytest.mark.unit
def test_reading_time_counts_whitespace_separated_tokens():
    assert calculate_reading_time("one\ntwo\t\tthree   four") == "1 min read"


@pytest.mark.unit
def test_post_card():
    card = post_card(post_record(content="word " * 450))

    assert card.url == "/blog/hello-world/"
    assert card.tags == ["python", "ai", "rag"]
    assert card.hidden_tag_count == 2
    assert card.date == "January 5, 2025"
    assert card.date_iso == "2025-01-05"
    assert card.reading_time == "3 min read"


@pytest.mark.unit
def test_post_card_header_reading_time_wins():
    card = post_card(post_record(content="word " * 450, readingTime="10 min read"))
    assert card.reading_time == "10 min read"


@pytest.mark.unit
def test_post_page():
    content = "## Getting Started\n\nIntro.\n\n### Install\n\nSteps."
    older = post_record()

    page = post_page(post_record(content=content), "https://ammly.xyz/", previous=older)

    assert page.author_initial == "A"
    assert len(page.all_tags) == 5
    assert [(e.id, e.level) for e in page.toc] == [("getting-started", 2), ("install", 3)]
    assert 'id="getting-started"' in page.html
    assert page.share.page_url == "https://ammly.xyz/blog/hello-world"
    assert page.previous.url == "/blog/hello-world/"
    assert page.next is None


@pytest.mark.unit
def test_share_links_are_url_encoded():
    links = share_links("https://ammly.xyz/blog/a", "Hello & Goodbye")

    assert links.twitter == (
        "https://twitter.com/intent/tweet?text=Hello%20%26%20Goodbye"
        "&url=https%3A%2F%2Fammly.xyz%2Fblog%2Fa"
    )
    assert links.linkedin == (
        "https://www.linkedin.com/sharing/share-offsite/?url=https%3A%2F%2Fammly.xyz%2Fblog%2Fa"
    )


@pytest.mark.unit
def test_venture_metrics():
    """Test label capitalisation, icons, and the trailing legacy custom metric."""
    metrics = {"customLabel": "Partners", "customValue": 4, "users": 1200, "speed": "2x"}

    views = venture_metrics(metrics)

    assert [(m.label, m.value) for m in views] == [("Users", "1200"), ("Speed", "2x"), ("Partners", "4")]
    assert [m.icon for m in views] == [Icon.USERS, Icon.ZAP, Icon.TRENDING]
    assert len(venture_metrics(metrics, limit=2)) == 2


@pytest.mark.unit
def test_venture_metrics_incomplete_legacy_pair_skipped():
    assert venture_metrics({"customLabel": "Partners"}) == []


@pytest.mark.unit
def test_venture_card():
    card = venture_card(venture_record(metrics={"a": 1, "b": 2, "c": 3, "d": 4}))

    assert card.url == "/projects/sheria/"
    assert card.name == "Sheria AI"
    assert card.icon is Icon.SCALE
    assert card.status_label == "Live"
    assert card.status_variant is BadgeVariant.SUCCESS
    assert len(card.metrics) == 3
    assert card.technologies == ["Python", "FastAPI", "PostgreSQL", "Redis"]
    assert card.hidden_technology_count == 1


@pytest.mark.unit
def test_venture_card_unknown_icon_falls_back():
    assert venture_card(venture_record(icon="rocket-ship")).icon is Icon.SCALE


@pytest.mark.unit
def test_venture_page():
    page = venture_page(venture_record(github="https://github.com/x/y", screenshots=["/a.png"]))

    assert page.github == "https://github.com/x/y"
    assert page.link is None
    assert page.screenshots == ["/a.png"]
    assert len(page.all_technologies) == 5
    assert 'id="overview"' in page.html


@pytest.mark.unit
def test_experience_item():
    record = ContentRecord(
        slug="safaricom",
        category=ContentCategory.EXPERIENCES,
        metadata=ExperienceFrontmatter.model_validate(
            {
                "title": "Software Engineer",
                "company": "Safaricom PLC",
                "startDate": "Jan 2023",
                "endDate": "Present",
                "current": True,
                "description": "Platforms",
                "technologies": ["Python"],
            }
        ),
        content="",
        source_path=Path("experiences/safaricom.mdx"),
    )

    item = experience_item(record)

    assert item.id == "safaricom"
    assert item.date_range == "Jan 2023 - Present"
    assert item.current is True
    assert item.achievements == []
    assert item.location is None
