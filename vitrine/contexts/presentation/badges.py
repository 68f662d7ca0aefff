"""
Badge styling: variant/size class composition and the venture status table.
"""

from enum import Enum
from typing import Dict, Tuple

from vitrine.contexts.content.schemas import VentureStatus


class BadgeVariant(str, Enum):
    DEFAULT = "default"
    PRIMARY = "primary"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    OUTLINE = "outline"


class BadgeSize(str, Enum):
    SM = "sm"
    MD = "md"
    LG = "lg"


BADGE_BASE_CLASSES = "badge inline-flex items-center gap-1.5 rounded-full border font-semibold"

BADGE_VARIANT_CLASSES = {
    BadgeVariant.DEFAULT: "badge-default border-transparent",
    BadgeVariant.PRIMARY: "badge-primary border-transparent",
    BadgeVariant.SUCCESS: "badge-success border-transparent",
    BadgeVariant.WARNING: "badge-warning border-transparent",
    BadgeVariant.ERROR: "badge-error border-transparent",
    BadgeVariant.OUTLINE: "badge-outline",
}

BADGE_SIZE_CLASSES = {
    BadgeSize.SM: "badge-sm",
    BadgeSize.MD: "badge-md",
    BadgeSize.LG: "badge-lg",
}

# Venture status -> (badge variant, label)
STATUS_BADGES: Dict[VentureStatus, Tuple[BadgeVariant, str]] = {
    VentureStatus.BUILDING: (BadgeVariant.WARNING, "Building"),
    VentureStatus.CONCEPT: (BadgeVariant.PRIMARY, "Concept"),
    VentureStatus.RESEARCH: (BadgeVariant.DEFAULT, "Research"),
    VentureStatus.LIVE: (BadgeVariant.SUCCESS, "Live"),
}


def join_classes(*classes: str) -> str:
    """Join class strings, skipping empty ones and repeated class names."""
    seen = []
    for group in classes:
        for name in (group or "").split():
            if name not in seen:
                seen.append(name)
    return " ".join(seen)


def badge_classes(
    variant: BadgeVariant = BadgeVariant.DEFAULT,
    size: BadgeSize = BadgeSize.MD,
    *extra: str,
) -> str:
    """
    Compose the class attribute of a badge.

    Args:
        variant: Semantic colour variant
        size: Badge size
        *extra: Additional classes appended last

    Returns:
        Space-separated class string
    """
    return join_classes(
        BADGE_BASE_CLASSES,
        BADGE_VARIANT_CLASSES[BadgeVariant(variant)],
        BADGE_SIZE_CLASSES[BadgeSize(size)],
        *extra,
    )


def status_badge(status: VentureStatus) -> Tuple[BadgeVariant, str]:
    """Badge variant and label for a venture status."""
    return STATUS_BADGES[VentureStatus(status)]
