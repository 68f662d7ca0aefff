"""
Build event logging utilities for vitrine (Tier 2 logging).

Provides uniform interfaces for logging build events to build_events.log.
Events are JSON Lines (one JSON object per line) so they can be streamed and
filtered by event_type, slug, or source.

For detailed within-context logging (Tier 1), use vitrine.utils.logger instead.

Usage:
    from vitrine.utils.event_logging import log_build_event

    log_build_event(
        event_type="content_dropped",
        slug="draft-post",
        source="content",
        category="blog",
        reason="missing field 'date'",
    )
"""

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from vitrine.utils.timestamp import now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))
BUILD_EVENTS_FILE = Path(os.getenv("BUILD_EVENTS_FILE", str(LOGS_PATH / "build_events.log")))


def log_build_event(
    event_type: str,
    slug: str,
    source: str,
    events_file: Optional[Path] = None,
    **extra_fields,
) -> None:
    """
    Append an event to the build event log.

    Args:
        event_type: Type of event (e.g., "build_completed", "content_dropped")
        slug: Content identifier, or "*" for site-wide events
        source: Event source (e.g., "content", "render", "cli")
        events_file: Override for the event log path (defaults to BUILD_EVENTS_FILE)
        **extra_fields: Additional event-specific fields

    Example:
        log_build_event(
            event_type="build_completed",
            slug="*",
            source="render",
            pages=14,
            elapsed_s=0.42,
        )
    """
    events_file = events_file or BUILD_EVENTS_FILE
    events_file.parent.mkdir(parents=True, exist_ok=True)

    event = {
        "timestamp": now_exact(),
        "event_type": event_type,
        "slug": slug,
        "source": source,
        **extra_fields,
    }

    with open(events_file, "a", encoding="utf-8") as f:
        f.write(json.dumps(event, default=str) + "\n")


def get_recent_events(
    n: int = 10,
    slug: Optional[str] = None,
    event_type: Optional[str] = None,
    events_file: Optional[Path] = None,
) -> list[dict]:
    """
    Get the last n events from the build log, optionally filtered.

    Args:
        n: Number of recent events to return (default: 10)
        slug: Filter to only events for this content identifier (optional)
        event_type: Filter to only events of this type (optional)
        events_file: Override for the event log path (defaults to BUILD_EVENTS_FILE)

    Returns:
        List of event dicts (most recent last)
    """
    events_file = events_file or BUILD_EVENTS_FILE
    if not events_file.exists():
        return []

    events = []
    with open(events_file, "r", encoding="utf-8") as f:
        for line in f:
            try:
                events.append(json.loads(line.strip()))
            except json.JSONDecodeError:
                # Skip malformed lines
                continue

    if slug:
        events = [e for e in events if e.get("slug") == slug]

    if event_type:
        events = [e for e in events if e.get("event_type") == event_type]

    return events[-n:] if n > 0 else []
