"""
Icon variants for ventures and metrics.

Content headers name icons with free-form strings. Those strings are resolved
against a closed set of variants here; anything unrecognised falls back to a
fixed default instead of being looked up dynamically.
"""

from enum import Enum


class Icon(str, Enum):
    """Closed set of icons; values are lucide icon names used by the templates."""

    SCALE = "scale"
    WALLET = "wallet"
    CHURCH = "church"
    TRENDING = "trending-up"
    ZAP = "zap"
    USERS = "users"
    LEAF = "leaf"
    HEART = "heart"
    BOOK = "book-open"

    @classmethod
    def from_key(cls, key: str, fallback: "Icon" = None) -> "Icon":
        """
        Resolve a content key (e.g., "trending", "book") to an icon.

        Unknown or empty keys resolve to the fallback (SCALE by default).
        """
        if fallback is None:
            fallback = cls.SCALE
        if not key:
            return fallback
        return VENTURE_ICON_KEYS.get(key.strip().lower(), fallback)


# Keys accepted in venture headers
VENTURE_ICON_KEYS = {
    "scale": Icon.SCALE,
    "wallet": Icon.WALLET,
    "church": Icon.CHURCH,
    "trending": Icon.TRENDING,
    "zap": Icon.ZAP,
    "users": Icon.USERS,
    "leaf": Icon.LEAF,
    "heart": Icon.HEART,
    "book": Icon.BOOK,
}

# Metric names with a dedicated icon
METRIC_ICON_KEYS = {
    "users": Icon.USERS,
    "accuracy": Icon.TRENDING,
    "speed": Icon.ZAP,
    "savings": Icon.TRENDING,
    "farmers": Icon.USERS,
    "consultations": Icon.USERS,
    "students": Icon.USERS,
    "improvement": Icon.TRENDING,
    "yield": Icon.TRENDING,
    "response": Icon.ZAP,
    "subjects": Icon.TRENDING,
}


def metric_icon(metric_name: str) -> Icon:
    """Icon for a venture metric; TRENDING for metrics without a dedicated icon."""
    return METRIC_ICON_KEYS.get(metric_name.lower(), Icon.TRENDING)
