"""Terminal renderer built on rich."""

from io import StringIO
from typing import Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

from styled_text.formatting.ir import (
    Color,
    FontStyle,
    StyleAttributes,
    StyleConfiguration,
    StyledText,
)
from styled_text.renderers.base import SpanRenderer

LIGHT_BASE = Color(0xFF, 0xFF, 0xFF)
DARK_BASE = Color(0x00, 0x00, 0x00)


class ConsoleRenderer(SpanRenderer):
    """Renderer for ANSI terminals.

    Terminals cannot draw translucent colors, so highlight backgrounds are
    blended over the terminal background up front. Small caps have no
    terminal equivalent and render in the regular face.
    """

    def __init__(
        self,
        configuration: Optional[StyleConfiguration] = None,
        dark_background: bool = True,
    ) -> None:
        super().__init__(configuration)
        self.base = DARK_BASE if dark_background else LIGHT_BASE

    @property
    def name(self) -> str:
        return "console"

    @property
    def file_extension(self) -> str:
        return ".ans"

    def span_style(self, attributes: StyleAttributes) -> Style:
        """Get the rich Style for one set of attributes."""
        foreground = self.palette.foreground(attributes.foreground)
        background = self.palette.background(attributes.background)
        return Style(
            bold=attributes.font == FontStyle.BOLD or None,
            italic=attributes.font == FontStyle.ITALIC or None,
            color=foreground.blend_over(self.base).to_hex() if foreground else None,
            bgcolor=background.blend_over(self.base).to_hex() if background else None,
            link=attributes.link,
        )

    def to_rich_text(self, text: StyledText) -> Text:
        """Convert styled text to a rich Text object."""
        rich_text = Text()
        for span in text:
            rich_text.append(span.text, style=self.span_style(span.attributes))
        return rich_text

    def render(self, text: StyledText) -> str:
        """Render styled text with ANSI escape sequences."""
        console = Console(
            file=StringIO(),
            record=True,
            force_terminal=True,
            color_system="truecolor",
        )
        console.print(self.to_rich_text(text), end="", soft_wrap=True)
        return console.export_text(styles=True)
