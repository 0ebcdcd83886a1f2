"""Intermediate Representation for inline markup and styled text.

This module defines the data structures on both sides of the styling step:
the markup tree handed over by a Markdown parser, and the styled spans
handed on to a renderer. Style attributes carry tokens (``TINT``,
``LINK_DEFAULT``...) rather than concrete colors so the same styled text
can be painted by any renderer with its own palette.
"""

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Iterable, Iterator, Optional, Union


# =============================================================================
# Markup Tree
# =============================================================================

@dataclass(frozen=True)
class PlainText:
    """Literal text content."""

    content: str


@dataclass(frozen=True)
class Link:
    """A hyperlink whose children form the label.

    Attributes:
        destination: Link target as written in the source (may be None)
        children: Label markup
    """

    destination: Optional[str] = None
    children: tuple["MarkupNode", ...] = ()


@dataclass(frozen=True)
class Strong:
    """Strong importance (bold)."""

    children: tuple["MarkupNode", ...] = ()


@dataclass(frozen=True)
class Emphasis:
    """Emphasis (italic)."""

    children: tuple["MarkupNode", ...] = ()


@dataclass(frozen=True)
class InlineCode:
    """A code span. Its content is atomic."""

    content: str


@dataclass(frozen=True)
class InlineHTML:
    """Raw inline HTML, passed through as text."""

    raw_content: str


@dataclass(frozen=True)
class Generic:
    """Any node kind without a dedicated styling rule.

    Attributes:
        children: Child markup, styled in order
        kind: Source node type (e.g. "paragraph"), informational only
    """

    children: tuple["MarkupNode", ...] = ()
    kind: str = "generic"


MarkupNode = Union[PlainText, Link, Strong, Emphasis, InlineCode, InlineHTML, Generic]


# =============================================================================
# Style Attributes
# =============================================================================

class FontStyle(Enum):
    """Font modifiers applied on top of the body font."""

    NONE = "none"
    BOLD = "bold"
    ITALIC = "italic"
    SMALL_CAPS_MEDIUM = "small-caps-medium"


class ForegroundColor(Enum):
    """Foreground color tokens."""

    NONE = "none"
    TINT = "tint"
    LINK_DEFAULT = "link-default"


class BackgroundColor(Enum):
    """Background color tokens."""

    NONE = "none"
    TINT_FADED = "tint-faded"


@dataclass(frozen=True)
class StyleAttributes:
    """Visual attributes shared by one span of text.

    Attributes:
        font: Font modifier relative to the body font
        foreground: Foreground color token
        background: Background color token (painted as a rounded highlight)
        link: Target URL, when the text is a live link
    """

    font: FontStyle = FontStyle.NONE
    foreground: ForegroundColor = ForegroundColor.NONE
    background: BackgroundColor = BackgroundColor.NONE
    link: Optional[str] = None

    @property
    def is_plain(self) -> bool:
        """Check if no attribute is set."""
        return self == StyleAttributes()


@dataclass(frozen=True)
class StyledSpan:
    """A contiguous run of text sharing one set of attributes."""

    text: str
    attributes: StyleAttributes = field(default_factory=StyleAttributes)

    def __str__(self) -> str:
        return self.text


class StyledText:
    """An ordered, immutable sequence of styled spans.

    StyledText values concatenate with ``+`` and compare structurally.
    """

    __slots__ = ("_spans",)

    def __init__(self, spans: Iterable[StyledSpan] = ()) -> None:
        self._spans: tuple[StyledSpan, ...] = tuple(spans)

    @classmethod
    def single(cls, text: str, attributes: Optional[StyleAttributes] = None) -> "StyledText":
        """Build a StyledText holding one span."""
        return cls((StyledSpan(text, attributes or StyleAttributes()),))

    @classmethod
    def concat(cls, parts: Iterable["StyledText"]) -> "StyledText":
        """Concatenate several StyledText values in order."""
        spans: list[StyledSpan] = []
        for part in parts:
            spans.extend(part.spans)
        return cls(spans)

    @property
    def spans(self) -> tuple[StyledSpan, ...]:
        return self._spans

    @property
    def plain_text(self) -> str:
        """Get the text content without styling."""
        return "".join(span.text for span in self._spans)

    def with_attributes(self, **changes) -> "StyledText":
        """Return a copy with the given attribute fields overridden on every span."""
        return StyledText(
            StyledSpan(span.text, replace(span.attributes, **changes))
            for span in self._spans
        )

    def __add__(self, other: "StyledText") -> "StyledText":
        if not isinstance(other, StyledText):
            return NotImplemented
        return StyledText(self._spans + other._spans)

    def __iter__(self) -> Iterator[StyledSpan]:
        return iter(self._spans)

    def __len__(self) -> int:
        return len(self._spans)

    def __getitem__(self, index: int) -> StyledSpan:
        return self._spans[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StyledText):
            return NotImplemented
        return self._spans == other._spans

    def __hash__(self) -> int:
        return hash(self._spans)

    def __repr__(self) -> str:
        return f"StyledText({list(self._spans)!r})"

    def __str__(self) -> str:
        return self.plain_text


# =============================================================================
# Style Configuration
# =============================================================================

HEX_COLOR_PATTERN = re.compile(r"[0-9A-Fa-f]{6}([0-9A-Fa-f]{2})?")


@dataclass(frozen=True)
class Color:
    """An sRGB color with alpha, components in 0..255 (alpha 0..1)."""

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``."""
        digits = value.strip().lstrip("#")
        if not HEX_COLOR_PATTERN.fullmatch(digits):
            raise ValueError(f"Invalid hex color: {value!r}")
        red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
        return cls(red, green, blue, alpha)

    def to_hex(self) -> str:
        """Format as ``#rrggbb``, ignoring alpha."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_css(self) -> str:
        """Format for a CSS color property."""
        if self.alpha >= 1.0:
            return self.to_hex()
        return f"rgba({self.red}, {self.green}, {self.blue}, {self.alpha:g})"

    def with_opacity(self, opacity: float) -> "Color":
        """Return the same color at a different opacity."""
        return replace(self, alpha=max(0.0, min(1.0, opacity)))

    def blend_over(self, base: "Color") -> "Color":
        """Composite this color over an opaque base color."""
        def mix(top: int, bottom: int) -> int:
            return round(top * self.alpha + bottom * (1 - self.alpha))

        return Color(
            mix(self.red, base.red),
            mix(self.green, base.green),
            mix(self.blue, base.blue),
        )


@dataclass(frozen=True)
class FontDescriptor:
    """The body font a renderer starts from."""

    family: str = "system-ui"
    size: float = 17.0


class BracketScope(str, Enum):
    """Which text nodes are rendered as bracketed citation markers."""

    ALL = "all"
    LINKS = "links"


@dataclass(frozen=True)
class StyleConfiguration:
    """Caller-supplied styling options.

    Attributes:
        tint: Accent color for links and inline code
        body_font: Base font for plain text
        link_default: Color for links without a usable destination
        tint_faded_opacity: Opacity of the inline code highlight
        corner_radius: Corner radius of highlight backgrounds
        bracket_scope: Text nodes rendered as ``[text]`` markers
    """

    tint: Color = Color(0x00, 0x7A, 0xFF)
    body_font: FontDescriptor = FontDescriptor()
    link_default: Color = Color(0x00, 0x68, 0xDA)
    tint_faded_opacity: float = 0.1
    corner_radius: float = 6.0
    bracket_scope: BracketScope = BracketScope.ALL
