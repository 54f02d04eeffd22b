from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from bs4 import Tag

from .attributes import get_attribute, preserve_attributes
from .classifier import BlockKind
from .serializer import inner_html, outer_html
from .utils import parse_int


logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "core"


@dataclass(frozen=True)
class Block:
    """One block-editor record built from a single source element."""

    block_name: str
    attrs: Dict[str, Any] = field(default_factory=dict)
    inner_html: str = ""
    client_id: Optional[str] = None

    @property
    def inner_content(self) -> List[str]:
        return [self.inner_html]

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "blockName": self.block_name,
            "attrs": copy.deepcopy(self.attrs),
            "innerHTML": self.inner_html,
            "innerContent": self.inner_content,
        }
        if self.client_id is not None:
            out["clientId"] = self.client_id
        return out


def block_name(kind: BlockKind, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{namespace}/{kind.value}" if namespace else kind.value


def build_paragraph(tag: Tag, namespace: str = DEFAULT_NAMESPACE) -> Block:
    preserved = preserve_attributes(tag)
    html = inner_html(tag)
    return Block(
        block_name=block_name(BlockKind.PARAGRAPH, namespace),
        attrs={**preserved.attrs, "content": html},
        inner_html=html,
    )


def build_heading(tag: Tag, namespace: str = DEFAULT_NAMESPACE) -> Block:
    # h1 -> 1, h2 -> 2, etc.
    level = parse_int(tag.name[1:])
    preserved = preserve_attributes(tag)
    html = inner_html(tag)

    attrs: Dict[str, Any] = {}
    if level is not None:
        attrs["level"] = level
    else:
        logger.debug("Heading <%s> has no numeric level, omitting it.", tag.name)
    attrs.update(preserved.attrs)
    attrs["content"] = html

    return Block(block_name=block_name(BlockKind.HEADING, namespace), attrs=attrs, inner_html=html)


def build_list(tag: Tag, namespace: str = DEFAULT_NAMESPACE) -> Block:
    """
    List block. ``values`` holds the inner markup of each direct ``<li>``;
    nested lists stay inside their item's markup rather than becoming blocks.
    """
    preserved = preserve_attributes(tag)
    values = [
        inner_html(child)
        for child in tag.contents
        if isinstance(child, Tag) and child.name.lower() == "li"
    ]
    return Block(
        block_name=block_name(BlockKind.LIST, namespace),
        attrs={"ordered": tag.name.lower() == "ol", "values": values, **preserved.attrs},
        inner_html=inner_html(tag),
    )


def build_image(tag: Tag, namespace: str = DEFAULT_NAMESPACE) -> Block:
    preserved = preserve_attributes(tag)
    attrs: Dict[str, Any] = {
        "url": get_attribute(tag, "src") or "",
        "alt": get_attribute(tag, "alt") or "",
        **preserved.attrs,
    }

    for dim in ("width", "height"):
        raw = get_attribute(tag, dim)
        if raw is None:
            continue
        value = parse_int(raw)
        if value is None:
            # Not a number: omit the attribute.
            attrs.pop(dim, None)
            logger.debug("Ignoring non-numeric %s=%r on <img>.", dim, raw)
        else:
            attrs[dim] = value

    return Block(
        block_name=block_name(BlockKind.IMAGE, namespace),
        attrs=attrs,
        inner_html=outer_html(tag),
    )


def build_html(tag: Tag, namespace: str = DEFAULT_NAMESPACE) -> Block:
    """Fallback block: the whole element, own tag included, as raw HTML."""
    html = outer_html(tag)
    return Block(
        block_name=block_name(BlockKind.FALLBACK, namespace),
        attrs={"content": html},
        inner_html=html,
    )


BUILDERS: Dict[BlockKind, Callable[..., Block]] = {
    BlockKind.PARAGRAPH: build_paragraph,
    BlockKind.HEADING: build_heading,
    BlockKind.LIST: build_list,
    BlockKind.IMAGE: build_image,
    BlockKind.FALLBACK: build_html,
}
