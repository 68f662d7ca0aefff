"""
Table-of-contents extraction.

Entries are read back from the same converter that renders the page, so every
entry id is the id the heading carries in the HTML (inline markup stripped,
repeated headings suffixed _1, _2, ...). Headings inside fenced code are not
headings.
"""

import html
from dataclasses import dataclass
from typing import Iterable, Iterator

from vitrine.contexts.presentation.renderer import create_converter, heading_anchor

__all__ = ["TableOfContents", "TocEntry", "heading_anchor", "iter_headings"]


@dataclass(frozen=True)
class TocEntry:
    """A level-2 or level-3 heading: anchor id, title text, and nesting level."""

    id: str
    title: str
    level: int


def _flatten(tokens: Iterable[dict]) -> Iterator[TocEntry]:
    for token in tokens:
        yield TocEntry(id=token["id"], title=html.unescape(token["name"]), level=token["level"])
        yield from _flatten(token.get("children", []))


def iter_headings(content: str) -> Iterator[TocEntry]:
    """Lazily yield level-2 and level-3 headings in document order."""
    if not content or not content.strip():
        return

    converter = create_converter()
    converter.convert(content)
    yield from _flatten(converter.toc_tokens)


class TableOfContents:
    """
    Restartable view over a document's headings.

    Nothing is retained: every iteration rescans the content.
    """

    def __init__(self, content: str):
        self.content = content or ""

    def __iter__(self) -> Iterator[TocEntry]:
        return iter_headings(self.content)

    def __bool__(self) -> bool:
        return next(iter(self), None) is not None
