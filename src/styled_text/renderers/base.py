"""Abstract base class for styled text renderers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from styled_text.formatting.ir import (
    BackgroundColor,
    Color,
    ForegroundColor,
    StyleConfiguration,
    StyledText,
)


@dataclass(frozen=True)
class Palette:
    """Concrete colors for the color tokens carried by spans."""

    tint: Color
    tint_faded: Color
    link_default: Color

    @classmethod
    def from_configuration(cls, configuration: StyleConfiguration) -> "Palette":
        tint = configuration.tint
        return cls(
            tint=tint,
            tint_faded=tint.with_opacity(configuration.tint_faded_opacity),
            link_default=configuration.link_default,
        )

    def foreground(self, token: ForegroundColor) -> Optional[Color]:
        """Resolve a foreground token; None means the renderer's default."""
        if token == ForegroundColor.TINT:
            return self.tint
        if token == ForegroundColor.LINK_DEFAULT:
            return self.link_default
        return None

    def background(self, token: BackgroundColor) -> Optional[Color]:
        """Resolve a background token; None means no background."""
        if token == BackgroundColor.TINT_FADED:
            return self.tint_faded
        return None


class SpanRenderer(ABC):
    """Abstract base class for styled text renderers.

    Each renderer maps span attributes onto the primitives of one output
    medium (plain text, HTML, a terminal...). Renderers never change the
    text of a span, only how it is presented.
    """

    def __init__(self, configuration: Optional[StyleConfiguration] = None) -> None:
        self.configuration = configuration or StyleConfiguration()
        self.palette = Palette.from_configuration(self.configuration)

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the renderer name used on the command line."""
        ...

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for written output (e.g., '.html')."""
        ...

    @abstractmethod
    def render(self, text: StyledText) -> str:
        """Render styled text to a string.

        Args:
            text: The StyledText to render

        Returns:
            Rendered output
        """
        ...

    def write(self, text: StyledText, path: Path) -> None:
        """Render styled text and write it to a file.

        Args:
            text: The StyledText to render
            path: Path to write the output
        """
        path.write_text(self.render(text), encoding="utf-8")
