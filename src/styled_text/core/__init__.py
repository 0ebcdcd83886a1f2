"""Core styling pipeline for Styled Text."""

from styled_text.core.styler import SUPPORTED_EXTENSIONS, StylingError, TextStyler

__all__ = [
    "SUPPORTED_EXTENSIONS",
    "StylingError",
    "TextStyler",
]
