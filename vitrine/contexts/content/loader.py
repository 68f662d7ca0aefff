"""
Content Loader

Reads one content category from the content store and turns each file into a
validated ContentRecord.

Every call re-reads the filesystem; nothing is cached between calls. A missing
category directory is an empty result, and a file that fails to parse or
validate is logged and left out while the rest of the category still loads.
"""

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Optional, Set

from dotenv import load_dotenv

from vitrine.contexts.content.exceptions import (
    ContentError,
    ContentNotFoundError,
)
from vitrine.contexts.content.front_matter import split_front_matter
from vitrine.contexts.content.logger import _log_debug, log_category_loaded, log_dropped_file
from vitrine.contexts.content.schemas import (
    ExperienceFrontmatter,
    Frontmatter,
    PostFrontmatter,
    VentureFrontmatter,
    validate_metadata,
)
from vitrine.utils.event_logging import log_build_event

load_dotenv()
CONTENT_PATH = Path(os.getenv("CONTENT_PATH", "content"))
CONTENT_EXTENSION = ".mdx"


class ContentCategory(Enum):
    """Content categories, each stored in its own directory of the content store."""

    POSTS = ("blog", PostFrontmatter)
    EXPERIENCES = ("experiences", ExperienceFrontmatter)
    VENTURES = ("ventures", VentureFrontmatter)

    def __init__(self, directory: str, schema: type):
        self.directory = directory
        self.schema = schema

    @classmethod
    def from_name(cls, name: str) -> "ContentCategory":
        """
        Look up a category by member name or directory name (case-insensitive).

        Raises:
            ValueError: If no category matches
        """
        key = name.strip().lower()
        for category in cls:
            if key in (category.name.lower(), category.directory):
                return category
        valid = [category.directory for category in cls]
        raise ValueError(f"Unknown content category '{name}'. Valid categories: {valid}")


@dataclass(frozen=True)
class ContentRecord:
    """
    One parsed content file.

    Attributes:
        slug: Identifier derived from the filename (without extension)
        category: Category the record was loaded from
        metadata: Validated metadata header
        content: Body text following the header
        source_path: File the record was read from
    """

    slug: str
    category: ContentCategory
    metadata: Frontmatter
    content: str
    source_path: Path


class ContentLoader:
    """
    Loads content records from a content store directory.

    Layout:
        <content_root>/blog/*.mdx
        <content_root>/experiences/*.mdx
        <content_root>/ventures/*.mdx
    """

    def __init__(
        self,
        content_root: Path = None,
        extension: str = CONTENT_EXTENSION,
        record_events: bool = False,
    ):
        """
        Args:
            content_root: Root of the content store (defaults to CONTENT_PATH)
            extension: File extension of content files, including the dot
            record_events: Append a content_dropped build event the first time a file is dropped
        """
        self.content_root = Path(content_root) if content_root is not None else CONTENT_PATH
        self.extension = extension
        self.record_events = record_events
        self._reported: Set[Path] = set()

    def category_path(self, category: ContentCategory) -> Path:
        """Directory holding a category's files."""
        return self.content_root / category.directory

    def file_path(self, category: ContentCategory, slug: str) -> Path:
        """Path of the file that would hold the given item."""
        return self.category_path(category) / f"{slug}{self.extension}"

    def list_slugs(self, category: ContentCategory) -> List[str]:
        """
        List identifiers of every file with the expected extension, in filename order.

        Returns an empty list when the category directory does not exist.
        """
        directory = self.category_path(category)
        if not directory.is_dir():
            return []

        return sorted(
            path.name[: -len(self.extension)]
            for path in directory.iterdir()
            if path.is_file() and path.name.endswith(self.extension)
        )

    def load_record(self, category: ContentCategory, slug: str) -> ContentRecord:
        """
        Read, parse and validate a single content file.

        Raises:
            ContentNotFoundError: If no file exists for the identifier
            FrontMatterError: If the metadata header cannot be parsed
            ContentValidationError: If the header does not match the category schema
        """
        path = self.file_path(category, slug)
        if not path.is_file():
            raise ContentNotFoundError(category.directory, slug)

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ContentError(f"Unable to read {path}: {e}") from e

        data, body = split_front_matter(text, source_path=path)
        metadata = validate_metadata(category.schema, category.directory, slug, data)

        return ContentRecord(
            slug=slug,
            category=category,
            metadata=metadata,
            content=body,
            source_path=path,
        )

    def get_record(self, category: ContentCategory, slug: str) -> Optional[ContentRecord]:
        """
        Lenient variant of load_record().

        Returns None for unknown identifiers and for files that fail to parse or
        validate (the failure is logged).
        """
        try:
            return self.load_record(category, slug)
        except ContentNotFoundError:
            _log_debug(f"No {category.directory} item '{slug}'")
            return None
        except ContentError as e:
            self._drop(category, self.file_path(category, slug), e)
            return None

    def load_category(self, category: ContentCategory, strict: bool = False) -> List[ContentRecord]:
        """
        Load every valid record of a category, in filename order.

        Args:
            category: Category to load
            strict: Raise the first parse/validation error instead of dropping the file

        Returns:
            Valid records; files that fail are logged and excluded

        Raises:
            ContentError: Only when strict is True
        """
        records = []
        dropped = 0

        for slug in self.list_slugs(category):
            try:
                records.append(self.load_record(category, slug))
            except ContentError as e:
                if strict:
                    raise
                self._drop(category, self.file_path(category, slug), e)
                dropped += 1

        log_category_loaded(category.directory, len(records), dropped)
        return records

    def reset_reported(self) -> None:
        """Forget which dropped files were already reported, so the next pass reports them again."""
        self._reported.clear()

    def _drop(self, category: ContentCategory, path: Path, error: Exception) -> None:
        # Each dropped file is reported once until reset_reported(); repeated loads only log at debug
        if path in self._reported:
            _log_debug(f"Dropped {category.directory} file {path.name} (already reported)")
            return
        self._reported.add(path)

        log_dropped_file(category.directory, path, error)
        if self.record_events:
            log_build_event(
                event_type="content_dropped",
                slug=path.stem,
                source="content",
                category=category.directory,
                reason=str(error),
            )
