"""Custom exceptions for the content context with references to the offending item."""

from pathlib import Path
from typing import List, Optional, Tuple


class ContentError(Exception):
    """Base class for content store errors."""


class FrontMatterError(ContentError):
    """
    Exception raised when a content file's metadata header cannot be parsed.

    Attributes:
        message: Error description
        source_path: File that failed to parse (if known)
    """

    def __init__(self, message: str, source_path: Optional[Path] = None):
        self.message = message
        self.source_path = source_path

        if source_path is not None:
            super().__init__(f"{message} ({source_path})")
        else:
            super().__init__(message)


class ContentValidationError(ContentError):
    """
    Exception raised when a metadata header does not match its category schema.

    Attributes:
        category: Content category name (e.g., 'blog')
        slug: Identifier of the item that failed validation
        field_errors: List of (field, message) pairs, one per offending field
    """

    def __init__(self, category: str, slug: str, field_errors: List[Tuple[str, str]]):
        self.category = category
        self.slug = slug
        self.field_errors = field_errors

        parts = [f"Invalid metadata for {category}/{slug}:"]
        for field_name, message in field_errors:
            parts.append(f"  - {field_name}: {message}")

        super().__init__("\n".join(parts))

    @property
    def fields(self) -> List[str]:
        """Names of the offending fields, in reported order."""
        return [field_name for field_name, _ in self.field_errors]


class ContentNotFoundError(ContentError, LookupError):
    """
    Exception raised when a content identifier is absent from the store.

    Attributes:
        category: Content category name
        slug: Requested identifier
    """

    def __init__(self, category: str, slug: str):
        self.category = category
        self.slug = slug
        super().__init__(f"No {category} item with identifier '{slug}'")
