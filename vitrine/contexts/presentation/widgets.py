"""
Interactive Widget State

View-local state for the site's interactive pieces: entrance animations,
navigation bar styling and mobile menu, light/dark preference, and the
scheduling embed.

Each widget owns its state and subscribes to an explicit event source. The
subscription is released on teardown (close(), or leaving a with-block), so
no callback outlives the view that registered it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Generic, List, MutableMapping, Optional, TypeVar
from urllib.parse import urlencode

T = TypeVar("T")

THEME_STORAGE_KEY = "theme"
DEFAULT_VISIBILITY_THRESHOLD = 0.1
DEFAULT_SCROLL_THRESHOLD = 10


class Subscription:
    """Handle for a registered callback. unsubscribe() is idempotent."""

    def __init__(self, release: Callable[[], None]):
        self._release = release
        self.active = True

    def unsubscribe(self) -> None:
        if self.active:
            self.active = False
            self._release()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unsubscribe()


class EventSource(Generic[T]):
    """Synchronous event source with explicit subscribe/unsubscribe pairs."""

    def __init__(self):
        self._callbacks: List[Callable[[T], None]] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: Callable[[T], None]) -> Subscription:
        self._callbacks.append(callback)
        return Subscription(lambda: self._callbacks.remove(callback))

    def emit(self, value: T) -> None:
        # Copy: a callback may unsubscribe while being notified
        for callback in list(self._callbacks):
            callback(value)


@dataclass(frozen=True)
class IntersectionEvent:
    is_intersecting: bool
    ratio: float = 1.0


class RevealOnce:
    """
    One-shot visibility flag for entrance animations.

    Becomes visible on the first intersecting event at or above the threshold,
    then disconnects from its source for good.
    """

    def __init__(
        self,
        source: EventSource[IntersectionEvent],
        threshold: float = DEFAULT_VISIBILITY_THRESHOLD,
    ):
        self.threshold = threshold
        self.visible = False
        self._subscription: Optional[Subscription] = source.subscribe(self._on_intersection)

    @property
    def connected(self) -> bool:
        return self._subscription is not None and self._subscription.active

    def _on_intersection(self, event: IntersectionEvent) -> None:
        if event.is_intersecting and event.ratio >= self.threshold:
            self.visible = True
            self.close()

    def close(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    def __enter__(self) -> "RevealOnce":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class ScrollThreshold:
    """Flag reflecting whether the last observed scroll offset is past a threshold."""

    def __init__(self, source: EventSource[float], threshold: float = DEFAULT_SCROLL_THRESHOLD):
        self.threshold = threshold
        self.scrolled = False
        self._subscription = source.subscribe(self._on_scroll)

    def _on_scroll(self, offset: float) -> None:
        self.scrolled = offset > self.threshold

    def close(self) -> None:
        self._subscription.unsubscribe()

    def __enter__(self) -> "ScrollThreshold":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


class MenuToggle:
    """Open/closed state of the mobile navigation menu, owned by one navigation bar."""

    def __init__(self):
        self.open = False

    def toggle(self) -> bool:
        self.open = not self.open
        return self.open

    def navigate(self, href: str) -> str:
        """Follow a menu link; the menu closes on navigation."""
        self.open = False
        return href


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class ThemePreference:
    """
    Light/dark preference owned by one view.

    The initial value comes from the persistence store when it holds a valid
    theme, otherwise from the environment default. The store is written only
    by set() and toggle().
    """

    def __init__(self, storage: MutableMapping[str, str], prefers_dark: bool = False):
        self._storage = storage
        stored = storage.get(THEME_STORAGE_KEY)
        if stored in (Theme.LIGHT.value, Theme.DARK.value):
            self.theme = Theme(stored)
        else:
            self.theme = Theme.DARK if prefers_dark else Theme.LIGHT
        self.changes: EventSource[Theme] = EventSource()

    @property
    def is_dark(self) -> bool:
        return self.theme is Theme.DARK

    def set(self, theme: Theme) -> None:
        theme = Theme(theme)
        self._storage[THEME_STORAGE_KEY] = theme.value
        if theme is not self.theme:
            self.theme = theme
            self.changes.emit(theme)

    def toggle(self) -> Theme:
        self.set(Theme.LIGHT if self.is_dark else Theme.DARK)
        return self.theme


# Scheduling widget colours: (background, text, primary)
SCHEDULING_COLORS = {
    Theme.LIGHT: ("ffffff", "171717", "2563eb"),
    Theme.DARK: ("171717", "fafafa", "60a5fa"),
}


def scheduling_embed_url(base_url: str, dark: bool = False) -> str:
    """
    Scheduling widget URL themed to match the site.

    Example:
        >>> scheduling_embed_url("https://calendly.com/me/call")
        'https://calendly.com/me/call?hide_event_type_details=1&hide_gdpr_banner=1&background_color=ffffff&text_color=171717&primary_color=2563eb'
    """
    background, text, primary = SCHEDULING_COLORS[Theme.DARK if dark else Theme.LIGHT]
    query = urlencode(
        {
            "hide_event_type_details": 1,
            "hide_gdpr_banner": 1,
            "background_color": background,
            "text_color": text,
            "primary_color": primary,
        }
    )
    return f"{base_url}?{query}"


class SchedulingEmbed:
    """Scheduling widget that re-themes its URL whenever the theme preference changes."""

    def __init__(self, base_url: str, preference: ThemePreference):
        self.base_url = base_url
        self.url = scheduling_embed_url(base_url, dark=preference.is_dark)
        self._subscription = preference.changes.subscribe(self._on_theme)

    def _on_theme(self, theme: Theme) -> None:
        self.url = scheduling_embed_url(self.base_url, dark=theme is Theme.DARK)

    def close(self) -> None:
        self._subscription.unsubscribe()
