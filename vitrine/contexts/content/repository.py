"""
Content Repository

Facade combining the loader with selection and ordering, one method per
presentation need. Single-item lookups raise ContentNotFoundError for
identifiers that are absent from the store (or whose file is invalid).
"""

from pathlib import Path
from typing import List

from vitrine.contexts.content.exceptions import ContentNotFoundError
from vitrine.contexts.content.loader import ContentCategory, ContentLoader, ContentRecord
from vitrine.contexts.content.selectors import (
    featured_ventures,
    filter_posts_by_category,
    filter_posts_by_tag,
    select_posts,
    sort_experiences,
    sort_ventures,
)


class ContentRepository:
    """Read-only access to the content store, ordered for presentation."""

    def __init__(self, content_root: Path = None, loader: ContentLoader = None):
        self.loader = loader or ContentLoader(content_root)

    @property
    def content_root(self) -> Path:
        return self.loader.content_root

    # Posts

    def all_posts(self, include_unpublished: bool = False) -> List[ContentRecord]:
        """All listed posts, newest first."""
        records = self.loader.load_category(ContentCategory.POSTS)
        return select_posts(records, include_unpublished=include_unpublished)

    def posts_by_category(self, category: str) -> List[ContentRecord]:
        return filter_posts_by_category(self.all_posts(), category)

    def posts_by_tag(self, tag: str) -> List[ContentRecord]:
        return filter_posts_by_tag(self.all_posts(), tag)

    def post(self, slug: str) -> ContentRecord:
        """
        A single post by identifier, whether or not it is published.

        Raises:
            ContentNotFoundError: If the post does not exist or is invalid
        """
        return self._require(ContentCategory.POSTS, slug)

    # Experiences

    def all_experiences(self) -> List[ContentRecord]:
        """Experience entries in timeline order."""
        return sort_experiences(self.loader.load_category(ContentCategory.EXPERIENCES))

    # Ventures

    def all_ventures(self) -> List[ContentRecord]:
        """Ventures by explicit order."""
        return sort_ventures(self.loader.load_category(ContentCategory.VENTURES))

    def featured_ventures(self) -> List[ContentRecord]:
        return featured_ventures(self.all_ventures())

    def venture(self, slug: str) -> ContentRecord:
        """
        A single venture by identifier.

        Raises:
            ContentNotFoundError: If the venture does not exist or is invalid
        """
        return self._require(ContentCategory.VENTURES, slug)

    def _require(self, category: ContentCategory, slug: str) -> ContentRecord:
        record = self.loader.get_record(category, slug)
        if record is None:
            raise ContentNotFoundError(category.directory, slug)
        return record
