from __future__ import annotations

from typing import Any, Dict, List, NamedTuple

from bs4 import Tag

from .serializer import attr_text


class PreservedAttributes(NamedTuple):
    attrs: Dict[str, Any]
    style_classes: List[str]


def preserve_attributes(tag: Tag) -> PreservedAttributes:
    """
    Split an element's attributes into a block attribute bag.

    - ``style`` is kept as is
    - ``class`` becomes ``className`` and is also noted as ``class="..."``
    - every other attribute is copied under its own key
    """
    attrs: Dict[str, Any] = {}
    style_classes: List[str] = []
    source = tag.attrs or {}

    if "style" in source:
        attrs["style"] = attr_text(source["style"])

    if "class" in source:
        class_value = attr_text(source["class"])
        attrs["className"] = class_value
        style_classes.append(f'class="{class_value}"')

    for key, value in source.items():
        if key not in ("style", "class"):
            attrs[key] = attr_text(value)

    return PreservedAttributes(attrs, style_classes)


def get_attribute(tag: Tag, name: str) -> str | None:
    value = tag.attrs.get(name) if tag.attrs else None
    if value is None:
        return None
    return attr_text(value)
