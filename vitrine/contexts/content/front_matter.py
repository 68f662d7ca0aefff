"""
Front Matter Parsing

Splits a content file into its YAML metadata header and Markdown body.

File layout:
    ---
    title: Getting Started
    tags: [python, notes]
    ---
    Body text...
"""

import re
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from vitrine.contexts.content.exceptions import FrontMatterError

DELIMITER = "---"

# Opening delimiter, header, closing delimiter on a line of its own
FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<header>.*?)(?:\r?\n)?^---[ \t]*\r?$\n?",
    re.DOTALL | re.MULTILINE,
)


def split_front_matter(
    text: str, source_path: Optional[Path] = None
) -> Tuple[Dict[str, Any], str]:
    """
    Parse a content file into (metadata, body).

    Args:
        text: Full file contents
        source_path: File path, used only for error messages

    Returns:
        Tuple of metadata mapping and body text (leading newline stripped)

    Raises:
        FrontMatterError: If the header is missing, unterminated, not valid YAML,
            or does not hold a key/value mapping
    """
    text = text.lstrip("\ufeff")

    if not text.startswith(DELIMITER):
        raise FrontMatterError("Missing metadata header", source_path)

    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        raise FrontMatterError("Unterminated metadata header", source_path)

    try:
        metadata = yaml.safe_load(match.group("header"))
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Malformed metadata header: {e}", source_path) from e

    if not isinstance(metadata, dict):
        raise FrontMatterError("Metadata header is not a key/value mapping", source_path)

    body = text[match.end():]
    return metadata, body
