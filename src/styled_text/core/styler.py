"""Main styling orchestrator."""

import logging
from pathlib import Path
from typing import Optional

from styled_text.config import get_settings
from styled_text.formatting.builder import StyledTextBuilder
from styled_text.formatting.ir import StyleConfiguration, StyledText
from styled_text.formatting.parser import MarkdownParser
from styled_text.renderers import SpanRenderer, get_renderer

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".md", ".markdown", ".txt")


class StylingError(Exception):
    """Error while styling a document."""

    pass


class TextStyler:
    """Orchestrates the styling pipeline.

    Pipeline:
    1. Read Markdown source (string or file)
    2. Parse it into a markup tree
    3. Build styled text from the tree
    4. Render with the selected renderer, optionally writing to a file
    """

    def __init__(
        self,
        configuration: Optional[StyleConfiguration] = None,
        renderer: Optional[str] = None,
        inline: bool = False,
    ) -> None:
        """Initialize the styler.

        Args:
            configuration: Styling options (default: from settings)
            renderer: Renderer name (default: from settings)
            inline: Parse input as a single line of inline markup
        """
        settings = get_settings()
        self.configuration = configuration or settings.style_configuration()
        self.inline = inline

        self.parser = MarkdownParser()
        self.builder = StyledTextBuilder(self.configuration)
        try:
            self.renderer: SpanRenderer = get_renderer(
                renderer or settings.default_format, self.configuration
            )
        except ValueError as e:
            raise StylingError(str(e)) from e

    def style(self, markdown_text: str) -> StyledText:
        """Parse Markdown and build its styled text."""
        if self.inline:
            tree = self.parser.parse_inline(markdown_text)
        else:
            tree = self.parser.parse(markdown_text)
        styled = self.builder.build(tree)
        logger.debug("Built %d span(s)", len(styled))
        return styled

    def render(self, markdown_text: str) -> str:
        """Parse, style and render Markdown in one step."""
        return self.renderer.render(self.style(markdown_text))

    def render_file(
        self,
        input_path: Path,
        output_path: Optional[Path] = None,
    ) -> StyledText:
        """Style a Markdown file.

        Args:
            input_path: Path to the Markdown source
            output_path: Where to write rendered output (optional)

        Returns:
            The StyledText that was rendered

        Raises:
            StylingError: If the input is missing, unsupported or empty
        """
        if not input_path.exists():
            raise StylingError(f"Input file not found: {input_path}")

        ext = input_path.suffix.lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise StylingError(
                f"Unsupported format: {ext}. "
                f"Supported: {', '.join(SUPPORTED_EXTENSIONS)}"
            )

        try:
            text = input_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StylingError(f"Cannot read {input_path}: {e}") from e
        if not text.strip():
            raise StylingError("Input file contains no text")

        styled = self.style(text)

        if output_path is not None:
            try:
                self.renderer.write(styled, output_path)
            except OSError as e:
                raise StylingError(f"Cannot write {output_path}: {e}") from e
            logger.info("Wrote %s output to %s", self.renderer.name, output_path)

        return styled
