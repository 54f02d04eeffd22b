from __future__ import annotations

import itertools
import logging
import uuid
from collections import Counter
from dataclasses import replace
from typing import Any, Dict, Iterable, Iterator, List, Optional

from bs4 import BeautifulSoup, PageElement, Tag

from .blocks import BUILDERS, Block
from .classifier import BlockKind, classify
from .config import ConverterConfig


logger = logging.getLogger(__name__)


def parse_html(html_text: str, parser: str = "html.parser") -> BeautifulSoup:
    """
    Parse markup into a bs4 tree.

    Multi-valued attribute splitting is turned off so ``class`` and friends
    stay the exact strings found in the source.
    """
    return BeautifulSoup(html_text, parser, multi_valued_attributes=None)


class ConversionRun:
    """State private to one conversion: client id counter and block stats."""

    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        self.config = config or ConverterConfig()
        self.token = uuid.uuid4().hex[:12]
        self._ids = itertools.count(1)
        self.counts: Counter = Counter()

    def next_client_id(self) -> str:
        return f"{self.config.client_id_prefix}-{self.token}-{next(self._ids)}"

    def build(self, kind: BlockKind, tag: Tag) -> Block:
        block = BUILDERS[kind](tag, namespace=self.config.block_namespace)
        if self.config.client_ids:
            block = replace(block, client_id=self.next_client_id())
        self.counts[block.block_name] += 1
        return block


def flatten_nodes(nodes: Iterable[PageElement], run: Optional[ConversionRun] = None) -> List[Block]:
    """
    Turn a sequence of sibling nodes into a flat, document-ordered block list.

    Loose text (and comments, doctypes...) at this level is skipped. Suppressed
    containers (div, section, body...) yield nothing themselves; their children
    are converted in their place. Every other element yields exactly one block.
    """
    run = run or ConversionRun()
    blocks: List[Block] = []
    # One iterator per open suppressed container, innermost last.
    stack: List[Iterator[PageElement]] = [iter(nodes)]

    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue
        if not isinstance(node, Tag):
            continue

        kind = classify(node.name)
        logger.debug("<%s> -> %s", node.name, kind.name)
        if kind is BlockKind.SUPPRESSED:
            stack.append(iter(node.contents))
        else:
            blocks.append(run.build(kind, node))

    return blocks


class HtmlToBlocksConverter:
    def __init__(self, config: Optional[ConverterConfig] = None) -> None:
        self.config = config or ConverterConfig()

    def convert_tree(self, nodes: Iterable[PageElement]) -> List[Block]:
        run = ConversionRun(self.config)
        blocks = flatten_nodes(nodes, run)
        logger.info(
            "Converted document into %s block(s): %s",
            len(blocks),
            ", ".join(f"{name}={n}" for name, n in sorted(run.counts.items())) or "none",
        )
        return blocks

    def convert(self, html_text: str) -> List[Block]:
        soup = parse_html(html_text, parser=self.config.parser)
        return self.convert_tree(soup.contents)

    @staticmethod
    def to_dicts(blocks: Iterable[Block]) -> List[Dict[str, Any]]:
        return [b.as_dict() for b in blocks]


def convert_html(html_text: str, config: Optional[ConverterConfig] = None) -> List[Dict[str, Any]]:
    """Parse ``html_text`` and return JSON-ready block dicts."""
    converter = HtmlToBlocksConverter(config)
    return converter.to_dicts(converter.convert(html_text))
