"""Formatting utilities for parsing markup and building styled text."""

from styled_text.formatting.ir import (
    PlainText,
    Link,
    Strong,
    Emphasis,
    InlineCode,
    InlineHTML,
    Generic,
    MarkupNode,
    FontStyle,
    ForegroundColor,
    BackgroundColor,
    StyleAttributes,
    StyledSpan,
    StyledText,
    Color,
    FontDescriptor,
    BracketScope,
    StyleConfiguration,
)
from styled_text.formatting.builder import (
    StyledTextBuilder,
    build_styled_text,
    is_valid_url,
)
from styled_text.formatting.parser import MarkdownParser

__all__ = [
    "PlainText",
    "Link",
    "Strong",
    "Emphasis",
    "InlineCode",
    "InlineHTML",
    "Generic",
    "MarkupNode",
    "FontStyle",
    "ForegroundColor",
    "BackgroundColor",
    "StyleAttributes",
    "StyledSpan",
    "StyledText",
    "Color",
    "FontDescriptor",
    "BracketScope",
    "StyleConfiguration",
    "StyledTextBuilder",
    "build_styled_text",
    "is_valid_url",
    "MarkdownParser",
]
