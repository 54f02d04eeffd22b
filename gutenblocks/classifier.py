from __future__ import annotations

from enum import Enum
from typing import Dict


class BlockKind(str, Enum):
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    IMAGE = "image"
    # Container without a block of its own; its children take its place.
    SUPPRESSED = "suppressed"
    FALLBACK = "html"


TAG_KINDS: Dict[str, BlockKind] = {
    "p": BlockKind.PARAGRAPH,
    "h1": BlockKind.HEADING,
    "h2": BlockKind.HEADING,
    "h3": BlockKind.HEADING,
    "h4": BlockKind.HEADING,
    "h5": BlockKind.HEADING,
    "h6": BlockKind.HEADING,
    "ul": BlockKind.LIST,
    "ol": BlockKind.LIST,
    "img": BlockKind.IMAGE,
    "body": BlockKind.SUPPRESSED,
    "html": BlockKind.SUPPRESSED,
    "div": BlockKind.SUPPRESSED,
    "article": BlockKind.SUPPRESSED,
    "section": BlockKind.SUPPRESSED,
}


def classify(tag_name: str) -> BlockKind:
    """Map a tag name (any case) to its block kind; unknown tags fall back to raw HTML."""
    return TAG_KINDS.get((tag_name or "").lower(), BlockKind.FALLBACK)
