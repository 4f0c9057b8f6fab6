"""
Markdown parser for knowledge-base notes.

Each note is a loosely structured markdown file:
- an optional "# " header on the first line holds the title
- "- " prefixed lines list tags, several per line separated by dashes
- inline #hashtags anywhere in the text add further tags
"""

from __future__ import annotations

import re

import markdown

from .types import Document


HEADER_PREFIX = "# "
BULLET_PREFIX = "- "
BULLET_TAG_SEPARATOR = "-"
INLINE_TAG_RE = re.compile(r"#(\w+)", re.ASCII)  # Matches "#tag", captures "tag"


def parse_document(text: str, fallback_name: str) -> Document:
    """Parse raw note text into a Document.

    The title comes from a "# " header on the first line; without one the
    fallback name (the file name minus its extension) is used. Tags are
    collected from the full original text, including the header line.

    Args:
        text: The full markdown content as a string
        fallback_name: Title to use when the first line is not a header

    Returns:
        The parsed Document with rendered HTML attached

    Examples:
        >>> parse_document("# Hello\\n- x - y\\nBody #z", "a").tags
        ['x', 'y', 'z']
    """
    lines = text.split("\n") if text else []
    title: str | None = None
    body = text

    if lines and lines[0].startswith(HEADER_PREFIX):
        title = lines[0][len(HEADER_PREFIX):].strip()
        body = "\n".join(lines[1:])

    # An empty header still falls back to the file name
    if not title:
        title = fallback_name

    return Document(
        title=title,
        body=body,
        tags=extract_tags(text),
        html_content=render_html(text),
    )


def extract_tags(text: str) -> list[str]:
    """Collect bullet tags, then inline hashtags, without duplicates.

    Order is first occurrence; comparison happens after trimming and is
    case-sensitive.
    """
    candidates: list[str] = []
    for line in text.split("\n"):
        if line.startswith(BULLET_PREFIX):
            candidates.extend(line[len(BULLET_PREFIX):].split(BULLET_TAG_SEPARATOR))
    candidates.extend(INLINE_TAG_RE.findall(text))

    # dict keeps insertion order, so this dedups while preserving it
    return list(dict.fromkeys(tag.strip() for tag in candidates))


def render_html(text: str) -> str:
    """Render markdown to HTML."""
    return markdown.markdown(text)
