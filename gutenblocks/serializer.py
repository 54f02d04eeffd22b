from __future__ import annotations

from typing import List, Union

from bs4 import NavigableString, PageElement, Tag
from bs4.element import PreformattedString


def is_text(node: PageElement) -> bool:
    """
    Character data, including script/style bodies. Comments, doctypes, CDATA
    and processing instructions are not text.
    """
    return isinstance(node, NavigableString) and not isinstance(node, PreformattedString)


def attr_text(value: Union[str, List[str]]) -> str:
    """Attribute value as a string, even from a soup that split multi-valued attributes."""
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return value


def opening_tag(tag: Tag) -> str:
    """Build ``<name key="value" ...>`` keeping the source attribute order."""
    attribs = " ".join(f'{key}="{attr_text(value)}"' for key, value in (tag.attrs or {}).items())
    return f"<{tag.name}{' ' + attribs if attribs else ''}>"


def closing_tag(tag: Tag) -> str:
    return f"</{tag.name}>"


def serialize_node(node: PageElement, include_own_tag: bool = True) -> str:
    """
    Rebuild an HTML string for ``node`` and its descendants.

    Text payloads are emitted verbatim (no escaping). Every element gets an
    explicit closing tag, void elements included. With ``include_own_tag`` set
    to False the element's own tag and attributes are left out and only its
    children are emitted.

    The subtree is walked with an explicit stack, so deep documents do not hit
    the interpreter recursion limit.
    """
    if is_text(node):
        return str(node)
    if not isinstance(node, Tag):
        return ""

    parts: List[str] = []
    # Items are nodes still to visit or literal closing tags already rendered.
    stack: List[Union[PageElement, str]] = []
    if include_own_tag:
        stack.append(node)
    else:
        stack.extend(reversed(node.contents))

    while stack:
        item = stack.pop()
        if isinstance(item, Tag):
            parts.append(opening_tag(item))
            stack.append(closing_tag(item))
            stack.extend(reversed(item.contents))
        elif is_text(item):
            parts.append(str(item))
        elif isinstance(item, NavigableString):
            continue
        else:
            parts.append(item)

    return "".join(parts)


def inner_html(tag: Tag) -> str:
    """Children only, own tag left out."""
    return serialize_node(tag, include_own_tag=False)


def outer_html(tag: Tag) -> str:
    return serialize_node(tag, include_own_tag=True)
