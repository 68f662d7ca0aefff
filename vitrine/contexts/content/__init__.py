"""
Content Context

Responsibilities:
- Lists and reads content files (blog posts, experience entries, ventures)
- Parses YAML metadata headers and validates them per category
- Orders and filters records for presentation

Owns: Content store access, metadata schemas, ordering rules
Never: Produces HTML or view-ready shapes
"""

from vitrine.contexts.content.exceptions import (
    ContentError,
    ContentNotFoundError,
    ContentValidationError,
    FrontMatterError,
)
from vitrine.contexts.content.loader import ContentCategory, ContentLoader, ContentRecord
from vitrine.contexts.content.repository import ContentRepository
from vitrine.contexts.content.schemas import (
    ExperienceFrontmatter,
    PostFrontmatter,
    VentureFrontmatter,
    VentureStatus,
)

__all__ = [
    # Loading
    "ContentCategory",
    "ContentLoader",
    "ContentRecord",
    "ContentRepository",
    # Schemas
    "PostFrontmatter",
    "ExperienceFrontmatter",
    "VentureFrontmatter",
    "VentureStatus",
    # Errors
    "ContentError",
    "ContentNotFoundError",
    "ContentValidationError",
    "FrontMatterError",
]
