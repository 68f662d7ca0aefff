"""
Markdown Renderer

Converts content bodies to HTML. Heading ids are assigned by the toc extension
using heading_anchor(), de-duplicated with a numeric suffix (setup, setup_1),
and headings are wrapped in links to themselves.
"""

import re

import markdown

MARKDOWN_EXTENSIONS = ["fenced_code", "tables", "toc"]
TOC_DEPTH = "2-3"
NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")


def heading_anchor(text: str, separator: str = "-") -> str:
    """
    Derive a URL fragment identifier from heading text.

    Lower-cases the text, collapses every run of non-alphanumeric characters
    into a single separator, and trims separators from both ends.

    Example:
        >>> heading_anchor("Getting Started: Part 1!")
        'getting-started-part-1'
    """
    return NON_ALPHANUMERIC.sub(separator, text.lower()).strip(separator)


def create_converter() -> markdown.Markdown:
    """Fresh Markdown converter; after convert(), toc_tokens holds the level 2-3 headings."""
    return markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs={
            "toc": {
                "slugify": heading_anchor,
                "anchorlink": True,
                "toc_depth": TOC_DEPTH,
            }
        },
        output_format="html",
    )


def render_markdown(content: str) -> str:
    """
    Render a Markdown body to HTML.

    Args:
        content: Markdown text (empty input renders to an empty string)

    Returns:
        HTML fragment
    """
    if not content or not content.strip():
        return ""

    return create_converter().convert(content)
