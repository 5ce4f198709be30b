"""Table of contents generation for rendered markdown."""

import logging
import re
from typing import Dict, List, Tuple

from .constants import TOC_FOOTER, TOC_MARKER, TOC_STOP_MARKER

logger = logging.getLogger(__name__)

HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+?)\s*#*\s*$")
FENCE_PATTERN = re.compile(r"^\s*(```|~~~)")
TOC_REGION_PATTERN = re.compile(
    re.escape(TOC_MARKER) + r"(?:.*?" + re.escape(TOC_STOP_MARKER) + r")?",
    re.DOTALL,
)
# Markdown links collapse to their text in headings
LINK_PATTERN = re.compile(r"!?\[([^\]]*)\]\([^)]*\)")


def slugify(text: str) -> str:
    """Build the anchor GitHub generates for a heading."""
    text = LINK_PATTERN.sub(r"\1", text).strip().lower()
    text = re.sub(r"[^\w\- ]", "", text)
    return text.replace(" ", "-")


def find_headings(markdown: str) -> List[Tuple[int, str]]:
    """Find ``(level, text)`` of every heading outside fenced code blocks."""
    headings = []
    in_fence = False
    for line in markdown.splitlines():
        if FENCE_PATTERN.match(line):
            in_fence = not in_fence
            continue
        if in_fence:
            continue
        match = HEADING_PATTERN.match(line)
        if match:
            headings.append((len(match.group(1)), match.group(2)))
    return headings


def generate_toc(markdown: str, max_depth: int = 3) -> str:
    """Generate a nested markdown list linking to the document's headings.

    The top-level title (``#``) is skipped, as are headings deeper than
    ``max_depth``.

    Args:
        markdown: The markdown document.
        max_depth: Deepest heading level to include.

    Returns:
        The table of contents, or an empty string if there are no headings.
    """
    seen: Dict[str, int] = {}
    lines = []
    for level, text in find_headings(markdown):
        slug = slugify(text)
        count = seen.get(slug, 0)
        seen[slug] = count + 1
        if count:
            slug = f"{slug}-{count}"

        if level < 2 or level > max_depth:
            continue
        indent = "  " * (level - 2)
        title = LINK_PATTERN.sub(r"\1", text)
        lines.append(f"{indent}- [{title}](#{slug})")
    return "\n".join(lines)


def insert_toc(markdown: str, footer: str = TOC_FOOTER, max_depth: int = 3) -> str:
    """Insert a table of contents at the ``<!-- toc -->`` marker.

    An existing table of contents (up to ``<!-- tocstop -->``) is replaced.
    Documents without the marker are returned unchanged.

    Args:
        markdown: The markdown document.
        footer: Text appended below the list.
        max_depth: Deepest heading level to include.

    Returns:
        The document with its table of contents.
    """
    if TOC_MARKER not in markdown:
        return markdown

    stripped = TOC_REGION_PATTERN.sub(TOC_MARKER, markdown, count=1)
    toc = generate_toc(stripped, max_depth=max_depth)
    if not toc:
        logger.debug("No headings found for table of contents")
        return stripped

    parts = [TOC_MARKER, toc]
    if footer:
        parts.append(footer)
    parts.append(TOC_STOP_MARKER)
    block = "\n\n".join(parts)
    return stripped.replace(TOC_MARKER, block, 1)
