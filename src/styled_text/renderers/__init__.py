"""Output renderers for Styled Text."""

from typing import Optional

from styled_text.formatting.ir import StyleConfiguration
from styled_text.renderers.base import Palette, SpanRenderer
from styled_text.renderers.plain_renderer import PlainTextRenderer
from styled_text.renderers.html_renderer import HTMLRenderer
from styled_text.renderers.console_renderer import ConsoleRenderer

__all__ = [
    "Palette",
    "SpanRenderer",
    "PlainTextRenderer",
    "HTMLRenderer",
    "ConsoleRenderer",
]

# Map renderer names to renderers
RENDERER_MAP: dict[str, type[SpanRenderer]] = {
    "html": HTMLRenderer,
    "plain": PlainTextRenderer,
    "console": ConsoleRenderer,
}

SUPPORTED_RENDERERS = tuple(RENDERER_MAP.keys())


def get_renderer(
    name: str,
    configuration: Optional[StyleConfiguration] = None,
) -> SpanRenderer:
    """Get a renderer instance by name."""
    key = name.lower()
    if key not in RENDERER_MAP:
        raise ValueError(
            f"Unsupported renderer: {key}. "
            f"Supported renderers: {', '.join(SUPPORTED_RENDERERS)}"
        )
    return RENDERER_MAP[key](configuration)
