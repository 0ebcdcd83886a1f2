"""Build styled text from an inline markup tree."""

import logging
import re
from typing import Optional, TypeVar
from urllib.parse import quote, urlsplit

from styled_text.formatting.ir import (
    BackgroundColor,
    BracketScope,
    Emphasis,
    FontStyle,
    ForegroundColor,
    Generic,
    InlineCode,
    InlineHTML,
    Link,
    MarkupNode,
    PlainText,
    StyleAttributes,
    StyleConfiguration,
    StyledText,
    Strong,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Characters allowed anywhere in a URI reference (RFC 3986), plus '%'
URL_CHARS_PATTERN = re.compile(r"^[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+$")
BAD_ESCAPE_PATTERN = re.compile(r"%(?![0-9A-Fa-f]{2})")


def is_valid_url(destination: Optional[str]) -> bool:
    """Check whether a link destination is a usable URL reference.

    Relative references are accepted; empty strings, whitespace, characters
    outside RFC 3986 and broken percent escapes are not. Non-ASCII
    characters (IRIs) are checked in their percent-encoded form.
    """
    if not destination:
        return False
    encoded = "".join(
        quote(char) if ord(char) > 127 and not char.isspace() else char
        for char in destination
    )
    if not URL_CHARS_PATTERN.fullmatch(encoded):
        return False
    if BAD_ESCAPE_PATTERN.search(destination):
        return False
    try:
        urlsplit(destination)
    except ValueError:
        return False
    return True


def _common(values: list[T], default: T) -> T:
    """Return the value shared by all items, or the default."""
    if values and all(value == values[0] for value in values):
        return values[0]
    return default


class StyledTextBuilder:
    """Turn a markup tree into StyledText.

    The builder holds only its configuration; every call walks the tree
    afresh, so one instance can serve any number of trees, including from
    several threads at once.
    """

    def __init__(self, configuration: Optional[StyleConfiguration] = None) -> None:
        self.configuration = configuration or StyleConfiguration()

    def build(self, root: MarkupNode) -> StyledText:
        """Style a markup tree.

        Args:
            root: Root of the markup tree

        Returns:
            StyledText with spans in document order
        """
        return self._visit(root, in_link=False)

    def _visit(self, node: MarkupNode, in_link: bool) -> StyledText:
        if isinstance(node, PlainText):
            return self._visit_text(node, in_link)
        if isinstance(node, Link):
            return self._visit_link(node)
        if isinstance(node, Strong):
            return self._visit_children(node, in_link).with_attributes(font=FontStyle.BOLD)
        if isinstance(node, Emphasis):
            return self._visit_children(node, in_link).with_attributes(font=FontStyle.ITALIC)
        if isinstance(node, InlineCode):
            return StyledText.single(
                node.content,
                StyleAttributes(
                    foreground=ForegroundColor.TINT,
                    background=BackgroundColor.TINT_FADED,
                ),
            )
        if isinstance(node, InlineHTML):
            return StyledText.single(node.raw_content)
        # Generic and anything else that has children
        return self._visit_children(node, in_link)

    def _visit_children(self, node: MarkupNode, in_link: bool) -> StyledText:
        children = getattr(node, "children", ())
        return StyledText.concat(self._visit(child, in_link) for child in children)

    def _visit_text(self, node: PlainText, in_link: bool) -> StyledText:
        if self.configuration.bracket_scope == BracketScope.LINKS and not in_link:
            return StyledText.single(node.content)
        return StyledText.single(
            f"[{node.content}]",
            StyleAttributes(font=FontStyle.SMALL_CAPS_MEDIUM),
        )

    def _visit_link(self, node: Link) -> StyledText:
        inner = self._visit_children(node, in_link=True)
        # The label collapses to one span; fonts and backgrounds survive
        # only when every part of the label agrees on them.
        font = _common([span.attributes.font for span in inner], FontStyle.NONE)
        background = _common(
            [span.attributes.background for span in inner], BackgroundColor.NONE
        )

        if is_valid_url(node.destination):
            attributes = StyleAttributes(
                font=font,
                foreground=ForegroundColor.TINT,
                background=background,
                link=node.destination,
            )
        else:
            logger.debug("Link destination not usable: %r", node.destination)
            attributes = StyleAttributes(
                font=font,
                foreground=ForegroundColor.LINK_DEFAULT,
                background=background,
            )
        return StyledText.single(inner.plain_text, attributes)


def build_styled_text(
    root: MarkupNode,
    configuration: Optional[StyleConfiguration] = None,
) -> StyledText:
    """Style a markup tree with a one-off builder."""
    return StyledTextBuilder(configuration).build(root)
