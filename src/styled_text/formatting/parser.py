"""Markdown parser producing inline markup trees."""

import logging
from typing import Optional

from markdown_it import MarkdownIt
from markdown_it.tree import SyntaxTreeNode

from styled_text.formatting.ir import (
    Emphasis,
    Generic,
    InlineCode,
    InlineHTML,
    Link,
    MarkupNode,
    PlainText,
    Strong,
)

logger = logging.getLogger(__name__)


class MarkdownParser:
    """Parse Markdown source into a MarkupNode tree.

    Node types with a styling rule map onto their own MarkupNode variant;
    every other node type (paragraphs, breaks, images, lists...) becomes a
    Generic node so its children are still styled.
    """

    CODE_TYPES = ("code_inline", "code_block", "fence")
    HTML_TYPES = ("html_inline", "html_block")

    def __init__(self, md: Optional[MarkdownIt] = None) -> None:
        self.md = md or MarkdownIt("commonmark").enable("strikethrough")

    def parse(self, markdown_text: str) -> Generic:
        """Convert a Markdown document to a markup tree.

        Args:
            markdown_text: Markdown source

        Returns:
            Generic root node holding the document's blocks
        """
        tokens = self.md.parse(markdown_text)
        root = self._convert(SyntaxTreeNode(tokens))
        logger.debug("Parsed %d top-level block(s)", len(root.children))
        return root

    def parse_inline(self, text: str) -> Generic:
        """Convert a single line of inline Markdown, without block structure."""
        tokens = self.md.parseInline(text)
        return self._convert(SyntaxTreeNode(tokens))

    def _convert(self, node: SyntaxTreeNode) -> MarkupNode:
        node_type = node.type

        if node_type == "text":
            return PlainText(node.content)
        if node_type in self.CODE_TYPES:
            return InlineCode(node.content)
        if node_type in self.HTML_TYPES:
            return InlineHTML(node.content)

        # Emphasis delimiters leave empty text tokens behind
        children = tuple(
            self._convert(child)
            for child in node.children
            if not (child.type == "text" and child.content == "")
        )

        if node_type == "strong":
            return Strong(children)
        if node_type == "em":
            return Emphasis(children)
        if node_type == "link":
            href = node.attrs.get("href")
            return Link(destination=str(href) if href else None, children=children)
        return Generic(children, kind=node_type)
