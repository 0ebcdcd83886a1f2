"""Styled Text - render Markdown inline markup as styled text spans."""

__version__ = "0.1.0"
