"""
Metadata Header Schemas

One pydantic model per content category. Headers are validated when a file
is loaded, so the presentation layer only ever sees complete records.

Header keys are authored in camelCase (startDate, coverImage, ...) and mapped
to snake_case attributes through aliases. Unknown keys are ignored.
"""

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from vitrine.contexts.content.exceptions import ContentValidationError


class VentureStatus(str, Enum):
    """Development status of a venture."""

    BUILDING = "building"
    LIVE = "live"
    CONCEPT = "concept"
    RESEARCH = "research"


class _Frontmatter(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def _coerce_str_list(value: Any) -> Any:
    """Accept a single string or a list of scalars where a list of strings is expected."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [str(item) if isinstance(item, (int, float)) else item for item in value]
    return value


class PostFrontmatter(_Frontmatter):
    """Metadata header of a blog post."""

    title: str
    description: str
    date: date
    author: str
    category: str
    tags: List[str]
    cover_image: Optional[str] = Field(default=None, alias="coverImage")
    reading_time: Optional[str] = Field(default=None, alias="readingTime")
    published: Optional[bool] = None

    @field_validator("date", mode="before")
    @classmethod
    def _truncate_datetime(cls, value: Any) -> Any:
        # YAML timestamps with a time component load as datetime
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and "T" in value:
            try:
                return datetime.fromisoformat(value.replace("Z", "+00:00")).date()
            except ValueError:
                return value
        return value

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_as_list(cls, value: Any) -> Any:
        return _coerce_str_list(value)


class ExperienceFrontmatter(_Frontmatter):
    """Metadata header of a work experience entry."""

    title: str
    company: str
    location: Optional[str] = None
    start_date: str = Field(alias="startDate")
    end_date: str = Field(alias="endDate")
    current: bool
    description: str
    achievements: List[str] = Field(default_factory=list)
    technologies: List[str]
    order: Optional[int] = None

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _dates_as_text(cls, value: Any) -> Any:
        # Display strings; YAML may hand back ints or dates for values like 2023
        if isinstance(value, (int, date)):
            return str(value)
        return value

    @field_validator("technologies", "achievements", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> Any:
        return _coerce_str_list(value)


class VentureFrontmatter(_Frontmatter):
    """Metadata header of a venture (portfolio project)."""

    title: str
    description: str
    icon: str
    status: VentureStatus
    technologies: List[str]
    github: Optional[str] = None
    demo: Optional[str] = None
    link: Optional[str] = None
    featured: bool = False
    order: Optional[int] = None
    cover_image: Optional[str] = Field(default=None, alias="coverImage")
    screenshots: List[str] = Field(default_factory=list)
    metrics: Dict[str, Union[str, int, float]] = Field(default_factory=dict)

    @field_validator("technologies", "screenshots", mode="before")
    @classmethod
    def _lists(cls, value: Any) -> Any:
        return _coerce_str_list(value)

    @field_validator("metrics", mode="before")
    @classmethod
    def _metrics_or_empty(cls, value: Any) -> Any:
        return {} if value is None else value


Frontmatter = Union[PostFrontmatter, ExperienceFrontmatter, VentureFrontmatter]


def _field_path(loc: tuple, model: type) -> str:
    """Report a field by the key the author wrote (its alias) rather than the attribute name."""
    if not loc:
        return "(header)"
    head, *rest = loc
    field = model.model_fields.get(head) if isinstance(head, str) else None
    name = field.alias if field is not None and field.alias else str(head)
    return ".".join([name, *(str(part) for part in rest)])


def validate_metadata(model: type, category: str, slug: str, data: Dict[str, Any]) -> Frontmatter:
    """
    Validate a parsed metadata header against a category schema.

    Args:
        model: Schema class (PostFrontmatter, ExperienceFrontmatter, VentureFrontmatter)
        category: Category name for error reporting
        slug: Item identifier for error reporting
        data: Parsed header mapping

    Returns:
        Validated schema instance

    Raises:
        ContentValidationError: Naming the item and every offending field
    """
    try:
        return model.model_validate(data)
    except ValidationError as e:
        field_errors = [(_field_path(err["loc"], model), err["msg"]) for err in e.errors()]
        raise ContentValidationError(category, slug, field_errors) from e
