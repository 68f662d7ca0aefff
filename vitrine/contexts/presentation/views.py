"""
Presentation Views

Maps ContentRecords to the exact fields each page or card needs. Views are
plain dataclasses computed on every render; nothing here holds state.
"""

import math
from dataclasses import dataclass, field
from typing import List, Optional
from urllib.parse import quote

from vitrine.contexts.content.loader import ContentRecord
from vitrine.contexts.presentation.badges import BadgeVariant, status_badge
from vitrine.contexts.presentation.icons import Icon, metric_icon
from vitrine.contexts.presentation.renderer import render_markdown
from vitrine.contexts.presentation.toc import TableOfContents, TocEntry
from vitrine.utils.timestamp import format_display_date

WORDS_PER_MINUTE = 200

CARD_TAG_LIMIT = 3
CARD_METRIC_LIMIT = 3
CARD_TECHNOLOGY_LIMIT = 4

# Legacy metric keys rendered as a single trailing metric
LEGACY_METRIC_KEYS = ("customLabel", "customValue")


def calculate_reading_time(content: str) -> str:
    """
    Estimate reading time at 200 words per minute, rounding up.

    Words are whitespace-separated tokens.

    Example:
        A 450-word body gives "3 min read".
    """
    word_count = len(content.split()) if content else 0
    minutes = math.ceil(word_count / WORDS_PER_MINUTE)
    return f"{minutes} min read"


def post_url(slug: str) -> str:
    return f"/blog/{slug}/"


def venture_url(slug: str) -> str:
    return f"/projects/{slug}/"


def absolute_url(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


@dataclass
class ShareLinks:
    """Social sharing targets for a page."""

    page_url: str
    twitter: str
    linkedin: str


def share_links(page_url: str, title: str) -> ShareLinks:
    """Build Twitter and LinkedIn share URLs for a page."""
    share_text = quote(title, safe="")
    share_url = quote(page_url, safe="")
    return ShareLinks(
        page_url=page_url,
        twitter=f"https://twitter.com/intent/tweet?text={share_text}&url={share_url}",
        linkedin=f"https://www.linkedin.com/sharing/share-offsite/?url={share_url}",
    )


# Blog posts


@dataclass
class PostCard:
    slug: str
    url: str
    title: str
    description: str
    category: str
    tags: List[str]
    hidden_tag_count: int
    date: str
    date_iso: str
    reading_time: str
    cover_image: Optional[str] = None


@dataclass
class PostLink:
    """Title and URL of a neighbouring post."""

    url: str
    title: str


@dataclass
class PostPage:
    card: PostCard
    author: str
    author_initial: str
    all_tags: List[str]
    html: str
    toc: List[TocEntry]
    share: ShareLinks
    previous: Optional[PostLink] = None
    next: Optional[PostLink] = None


def post_card(record: ContentRecord) -> PostCard:
    meta = record.metadata
    return PostCard(
        slug=record.slug,
        url=post_url(record.slug),
        title=meta.title,
        description=meta.description,
        category=meta.category,
        tags=meta.tags[:CARD_TAG_LIMIT],
        hidden_tag_count=max(len(meta.tags) - CARD_TAG_LIMIT, 0),
        date=format_display_date(meta.date),
        date_iso=meta.date.isoformat(),
        reading_time=meta.reading_time or calculate_reading_time(record.content),
        cover_image=meta.cover_image,
    )


def _post_link(record: Optional[ContentRecord]) -> Optional[PostLink]:
    if record is None:
        return None
    return PostLink(url=post_url(record.slug), title=record.metadata.title)


def post_page(
    record: ContentRecord,
    base_url: str,
    previous: Optional[ContentRecord] = None,
    next: Optional[ContentRecord] = None,
) -> PostPage:
    """
    Full article view: card fields plus rendered body, table of contents,
    share links and previous/next navigation.
    """
    meta = record.metadata
    page_url = absolute_url(base_url, f"blog/{record.slug}")
    return PostPage(
        card=post_card(record),
        author=meta.author,
        author_initial=meta.author[:1].upper(),
        all_tags=list(meta.tags),
        html=render_markdown(record.content),
        toc=list(TableOfContents(record.content)),
        share=share_links(page_url, meta.title),
        previous=_post_link(previous),
        next=_post_link(next),
    )


# Ventures


@dataclass
class MetricView:
    label: str
    value: str
    icon: Icon


@dataclass
class VentureCard:
    slug: str
    url: str
    name: str
    description: str
    icon: Icon
    status_label: str
    status_variant: BadgeVariant
    metrics: List[MetricView]
    technologies: List[str]
    hidden_technology_count: int
    cover_image: Optional[str] = None


@dataclass
class VenturePage:
    card: VentureCard
    all_metrics: List[MetricView]
    all_technologies: List[str]
    screenshots: List[str]
    link: Optional[str]
    github: Optional[str]
    demo: Optional[str]
    html: str


def venture_metrics(metrics: dict, limit: Optional[int] = None) -> List[MetricView]:
    """
    Convert a venture's metrics map into display entries.

    Labels are the metric keys with the first letter capitalised. A legacy
    customLabel/customValue pair becomes one trailing metric.
    """
    views = []
    for key, value in metrics.items():
        if key in LEGACY_METRIC_KEYS:
            continue
        views.append(MetricView(label=key[:1].upper() + key[1:], value=str(value), icon=metric_icon(key)))

    if metrics.get("customLabel") and metrics.get("customValue"):
        views.append(
            MetricView(
                label=str(metrics["customLabel"]),
                value=str(metrics["customValue"]),
                icon=Icon.TRENDING,
            )
        )

    return views[:limit] if limit is not None else views


def venture_card(record: ContentRecord) -> VentureCard:
    meta = record.metadata
    variant, label = status_badge(meta.status)
    return VentureCard(
        slug=record.slug,
        url=venture_url(record.slug),
        name=meta.title,
        description=meta.description,
        icon=Icon.from_key(meta.icon),
        status_label=label,
        status_variant=variant,
        metrics=venture_metrics(meta.metrics, limit=CARD_METRIC_LIMIT),
        technologies=meta.technologies[:CARD_TECHNOLOGY_LIMIT],
        hidden_technology_count=max(len(meta.technologies) - CARD_TECHNOLOGY_LIMIT, 0),
        cover_image=meta.cover_image,
    )


def venture_page(record: ContentRecord) -> VenturePage:
    meta = record.metadata
    return VenturePage(
        card=venture_card(record),
        all_metrics=venture_metrics(meta.metrics),
        all_technologies=list(meta.technologies),
        screenshots=list(meta.screenshots),
        link=meta.link,
        github=meta.github,
        demo=meta.demo,
        html=render_markdown(record.content),
    )


# Experience


@dataclass
class ExperienceItem:
    id: str
    title: str
    company: str
    date_range: str
    current: bool
    description: str
    location: Optional[str] = None
    achievements: List[str] = field(default_factory=list)
    technologies: List[str] = field(default_factory=list)


def experience_item(record: ContentRecord) -> ExperienceItem:
    meta = record.metadata
    return ExperienceItem(
        id=record.slug,
        title=meta.title,
        company=meta.company,
        date_range=f"{meta.start_date} - {meta.end_date}",
        current=meta.current,
        description=meta.description,
        location=meta.location,
        achievements=list(meta.achievements),
        technologies=list(meta.technologies),
    )
