"""HTML renderer."""

from html import escape

from styled_text.formatting.ir import FontStyle, StyleAttributes, StyledText
from styled_text.renderers.base import SpanRenderer


class HTMLRenderer(SpanRenderer):
    """Renderer for HTML fragments with inline CSS.

    Highlight backgrounds are drawn as rounded boxes via border-radius.
    The whole fragment is wrapped in a span carrying the body font.
    """

    FONT_CSS = {
        FontStyle.NONE: [],
        FontStyle.BOLD: ["font-weight: bold"],
        FontStyle.ITALIC: ["font-style: italic"],
        FontStyle.SMALL_CAPS_MEDIUM: ["font-variant: small-caps", "font-weight: 500"],
    }

    @property
    def name(self) -> str:
        return "html"

    @property
    def file_extension(self) -> str:
        return ".html"

    def render(self, text: StyledText) -> str:
        """Render styled text as an HTML fragment."""
        font = self.configuration.body_font
        body_css = f"font-family: {font.family}; font-size: {font.size:g}px"
        parts = [self._render_span(span.text, span.attributes) for span in text]
        return f'<span style="{escape(body_css)}">{"".join(parts)}</span>'

    def span_css(self, attributes: StyleAttributes) -> list[str]:
        """Get the CSS declarations for one set of attributes."""
        css = list(self.FONT_CSS[attributes.font])

        foreground = self.palette.foreground(attributes.foreground)
        if foreground is not None:
            css.append(f"color: {foreground.to_css()}")

        background = self.palette.background(attributes.background)
        if background is not None:
            css.append(f"background-color: {background.to_css()}")
            css.append(f"border-radius: {self.configuration.corner_radius:g}px")

        return css

    def _render_span(self, text: str, attributes: StyleAttributes) -> str:
        content = escape(text, quote=False)
        css = self.span_css(attributes)
        style = f' style="{escape("; ".join(css))}"' if css else ""

        if attributes.link is not None:
            return f'<a href="{escape(attributes.link)}"{style}>{content}</a>'
        if style:
            return f"<span{style}>{content}</span>"
        return content
