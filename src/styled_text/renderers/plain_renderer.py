"""Plain text renderer."""

from styled_text.formatting.ir import StyledText
from styled_text.renderers.base import SpanRenderer


class PlainTextRenderer(SpanRenderer):
    """Renderer for plain text output.

    All attributes are dropped; only the span texts remain, in order.
    """

    @property
    def name(self) -> str:
        return "plain"

    @property
    def file_extension(self) -> str:
        return ".txt"

    def render(self, text: StyledText) -> str:
        """Concatenate span texts."""
        return text.plain_text
