"""Pytest fixtures for Styled Text tests."""

import pytest
from pathlib import Path

from styled_text import config
from styled_text.formatting.builder import StyledTextBuilder
from styled_text.formatting.ir import Color, StyleConfiguration
from styled_text.formatting.parser import MarkdownParser


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch):
    """Drop cached settings so each test reads its own environment."""
    monkeypatch.setattr(config, "_settings", None)
    yield


@pytest.fixture
def tint() -> Color:
    """Tint color used across tests."""
    return Color.from_hex("#FF9500")


@pytest.fixture
def configuration(tint: Color) -> StyleConfiguration:
    """Style configuration with a recognizable tint."""
    return StyleConfiguration(tint=tint)


@pytest.fixture
def builder(configuration: StyleConfiguration) -> StyledTextBuilder:
    """Create a builder instance."""
    return StyledTextBuilder(configuration)


@pytest.fixture
def parser() -> MarkdownParser:
    """Create a parser instance."""
    return MarkdownParser()


@pytest.fixture
def sample_markdown() -> str:
    """Sample Markdown with citation links and inline code."""
    return (
        "Hello [1](https://pubmed.ncbi.nlm.nih.gov/36209676/) "
        "[2](https://pubmed.ncbi.nlm.nih.gov/31462385/) run `make` now."
    )


@pytest.fixture
def tmp_markdown_file(tmp_path: Path, sample_markdown: str) -> Path:
    """Create a temporary Markdown file for testing."""
    file_path = tmp_path / "notes.md"
    file_path.write_text(sample_markdown, encoding="utf-8")
    return file_path
